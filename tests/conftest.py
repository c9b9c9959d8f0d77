import json
import logging

import pytest
from ci_preflight.config import REQUIRED_FILES
from ci_preflight.context import CheckContext
from ci_preflight.process import CommandResult, ExecError, ExecErrorKind


class FakeRunner:
    """Command runner returning canned results keyed by executable name."""

    def __init__(self, outputs=None):
        self.outputs = dict(outputs or {})
        self.calls = []

    def __call__(self, args, cwd=None):
        args = list(args)
        self.calls.append((args, cwd))
        value = self.outputs.get(args[0])
        if value is None:
            return CommandResult(args=args, error=ExecError(ExecErrorKind.NOT_FOUND, args[0]))
        if isinstance(value, CommandResult):
            return value
        return CommandResult(args=args, stdout=value, returncode=0)


def healthy_outputs():
    return {
        "node": "v20.11.1\n",
        "firebase": "14.0.1\n",
        "npm": "10.2.4\n",
    }


@pytest.fixture
def fake_runner():
    """Runner where every tool is installed with an accepted version."""
    return FakeRunner(healthy_outputs())


@pytest.fixture
def project_tree(tmp_path):
    """Project root containing every required file and a valid functions manifest."""
    for rel in REQUIRED_FILES:
        path = tmp_path / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("{}\n", encoding="utf-8")
    manifest = {"name": "functions", "scripts": {"build": "tsc", "test": "jest"}}
    (tmp_path / "functions" / "package.json").write_text(json.dumps(manifest), encoding="utf-8")
    return tmp_path


@pytest.fixture
def make_ctx(project_tree, fake_runner):
    """Factory for contexts over the healthy project tree, overridable per test."""

    def _make(root=None, env=None, runner=None):
        return CheckContext(
            root=root if root is not None else project_tree,
            env=env if env is not None else {},
            runner=runner if runner is not None else fake_runner,
        )

    return _make


@pytest.fixture
def runner_factory():
    """Build a FakeRunner from healthy outputs with per-tool overrides.

    Pass ``None`` for a tool to simulate it not being installed.
    """

    def _make(**overrides):
        outputs = healthy_outputs()
        outputs.update(overrides)
        return FakeRunner(outputs)

    return _make


@pytest.fixture(autouse=True)
def reset_preflight_logger():
    """Undo handlers installed by setup_logging so streams don't leak between tests."""
    yield
    logger = logging.getLogger("ci_preflight")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)

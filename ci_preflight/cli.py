import argparse
import sys
from pathlib import Path

from ci_preflight.config import load_env_file
from ci_preflight.context import CheckContext
from ci_preflight.exceptions import ConfigurationError
from ci_preflight.logging_config import LOG_LEVELS, get_logger, setup_logging
from ci_preflight.checks.registry import list_registered
from ci_preflight.runner.execute import run_checks
from ci_preflight.report.generate import render, write_outputs
import ci_preflight.checks  # noqa: F401

logger = get_logger("cli")


def _resolve_root(cwd):
    root = Path(cwd) if cwd else Path.cwd()
    if not root.is_dir():
        raise ConfigurationError(f"Project directory does not exist: {root}")
    return root


def _list_checks():
    for i, entry in enumerate(list_registered(), start=1):
        print(f"{i}. {entry['check_id']} ({entry['class']})")
    return 0


def _run(args, ctx):
    logger.info(f"Running pre-flight checks in {ctx.root} (ci={ctx.ci})")

    run = run_checks(ctx)
    print(render(run))

    if args.json_out:
        path = write_outputs(run, args.json_out)
        print(f"Results written to: {path}")
    return run.exit_code


def build_parser():
    p = argparse.ArgumentParser(
        prog="ci-preflight",
        description="Validate tools, files and CI secrets before a build or deploy",
    )
    p.add_argument("--cwd", type=str, help="Project root (defaults to the current directory)")
    p.add_argument("--json-out", type=str, help="Also write results as JSON to this path")
    p.add_argument("--list-checks", action="store_true", help="Print registered checks and exit")
    p.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Log level (or set PREFLIGHT_LOG_LEVEL)",
    )
    return p


def main(argv=None):
    args = build_parser().parse_args(argv)

    try:
        root = _resolve_root(args.cwd)
        # snapshot before .env so checks only see what the pipeline provides
        ctx = CheckContext.from_environment(root)
        load_env_file(root / ".env")
        setup_logging(level=args.log_level)
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    if args.list_checks:
        return _list_checks()
    return _run(args, ctx)


if __name__ == "__main__":
    raise SystemExit(main())

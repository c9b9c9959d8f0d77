"""Execution context for pre-flight runs."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional

from ci_preflight.config import is_ci
from ci_preflight.process import CommandRunner, run_command


@dataclass
class CheckContext:
    """Ambient state a check may read: project root, environment and command runner."""
    root: Path = field(default_factory=Path.cwd)
    env: Mapping[str, str] = field(default_factory=lambda: dict(os.environ))
    runner: CommandRunner = run_command

    @classmethod
    def from_environment(cls, root: Optional[Path] = None) -> "CheckContext":
        return cls(root=Path(root) if root is not None else Path.cwd(), env=dict(os.environ))

    @property
    def ci(self) -> bool:
        return is_ci(self.env)

    def path(self, relative: str) -> Path:
        """Resolve a project-relative path."""
        return self.root / relative

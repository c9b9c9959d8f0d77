"""External command invocation returning results as values."""

import subprocess
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable, Optional, Sequence, Union

from ci_preflight.logging_config import get_logger

logger = get_logger("process")


class ExecErrorKind(Enum):
    NOT_FOUND = "not_found"
    BAD_CWD = "bad_cwd"
    OS_ERROR = "os_error"
    NON_ZERO_EXIT = "non_zero_exit"


@dataclass(frozen=True)
class ExecError:
    kind: ExecErrorKind
    detail: str = ""

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.detail}" if self.detail else self.kind.value


@dataclass(frozen=True)
class CommandResult:
    """Outcome of one command invocation. ``error`` is None on success."""
    args: Sequence[str]
    stdout: str = ""
    stderr: str = ""
    returncode: Optional[int] = None
    error: Optional[ExecError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def output(self) -> str:
        return self.stdout.strip()


CommandRunner = Callable[..., CommandResult]


def run_command(
    args: Sequence[str], cwd: Optional[Union[str, Path]] = None
) -> CommandResult:
    """Run ``args`` and capture its output.

    Never raises for a missing executable, a missing working directory or a
    non-zero exit status; those come back as ``CommandResult.error``.
    """
    args = list(args)
    if cwd is not None and not Path(cwd).is_dir():
        logger.debug(f"Working directory {cwd} does not exist for {args[0]}")
        return CommandResult(
            args=args, error=ExecError(ExecErrorKind.BAD_CWD, str(cwd))
        )

    try:
        proc = subprocess.run(
            args,
            cwd=str(cwd) if cwd is not None else None,
            capture_output=True,
            text=True,
            errors="replace",
        )
    except FileNotFoundError:
        logger.debug(f"Command not found: {args[0]}")
        return CommandResult(
            args=args, error=ExecError(ExecErrorKind.NOT_FOUND, args[0])
        )
    except OSError as e:
        logger.debug(f"Could not invoke {args[0]}: {e}")
        return CommandResult(args=args, error=ExecError(ExecErrorKind.OS_ERROR, str(e)))

    if proc.returncode != 0:
        logger.debug(
            f"{' '.join(args)} exited with {proc.returncode}",
            extra={"returncode": proc.returncode, "stderr": proc.stderr.strip()},
        )
        return CommandResult(
            args=args,
            stdout=proc.stdout,
            stderr=proc.stderr,
            returncode=proc.returncode,
            error=ExecError(ExecErrorKind.NON_ZERO_EXIT, f"exit status {proc.returncode}"),
        )

    return CommandResult(
        args=args, stdout=proc.stdout, stderr=proc.stderr, returncode=proc.returncode
    )

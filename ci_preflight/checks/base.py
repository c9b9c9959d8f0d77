"""Base classes for pre-flight checks: Check, CheckResult, and Status enum."""

from dataclasses import dataclass, asdict
from enum import Enum
from typing import List, Optional


class Status(Enum):
    """Result status: PASS, FAIL, WARN, INFO. Only FAIL blocks the pipeline."""

    PASS = "PASS"
    FAIL = "FAIL"
    WARN = "WARN"
    INFO = "INFO"

    @property
    def glyph(self) -> str:
        return _GLYPHS[self]


_GLYPHS = {
    Status.PASS: "✅",
    Status.FAIL: "❌",
    Status.WARN: "⚠️",
    Status.INFO: "ℹ️",
}


@dataclass
class CheckResult:
    name: str
    status: Status
    version: Optional[str] = None
    message: Optional[str] = None
    check_id: Optional[str] = None  # Set by the runner when the check leaves it empty
    execution_time: Optional[float] = None
    executed_at: Optional[str] = None  # ISO timestamp when the check ran

    @property
    def is_failure(self) -> bool:
        return self.status is Status.FAIL

    def to_dict(self):
        d = asdict(self)
        d["status"] = self.status.value
        return d


class Check:
    """One independent probe of the environment.

    Subclasses implement ``run`` and return one or more results. Anticipated
    failure modes are turned into FAIL/WARN results inside ``run``; they are
    never raised.
    """

    check_id: str = ""
    name: str = ""

    def __init__(self, check_id: Optional[str] = None, **params) -> None:
        self.check_id = check_id or self.check_id or self.__class__.__name__
        self.params = params

    def run(self, ctx) -> List[CheckResult]:
        raise NotImplementedError

    def result(self, status: Status, message: Optional[str] = None,
               version: Optional[str] = None, name: Optional[str] = None) -> CheckResult:
        return CheckResult(
            name=name or self.name,
            status=status,
            version=version,
            message=message,
            check_id=self.check_id,
        )

    def passed(self, message=None, version=None, name=None) -> CheckResult:
        return self.result(Status.PASS, message, version, name)

    def failed(self, message=None, version=None, name=None) -> CheckResult:
        return self.result(Status.FAIL, message, version, name)

    def warned(self, message=None, version=None, name=None) -> CheckResult:
        return self.result(Status.WARN, message, version, name)

    def info(self, message=None, version=None, name=None) -> CheckResult:
        return self.result(Status.INFO, message, version, name)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(check_id={self.check_id!r})"

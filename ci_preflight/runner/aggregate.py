"""Aggregation of check results into a single run outcome."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Iterable, List

from ci_preflight.checks.base import CheckResult, Status


@dataclass
class ValidationRun:
    """Results of one pre-flight run, in execution order."""
    results: List[CheckResult] = field(default_factory=list)
    started_at: str = field(default_factory=lambda: datetime.now().isoformat())

    def extend(self, results: Iterable[CheckResult]) -> None:
        self.results.extend(results)

    @property
    def has_errors(self) -> bool:
        return any(r.status is Status.FAIL for r in self.results)

    @property
    def exit_code(self) -> int:
        return 1 if self.has_errors else 0

    def counts(self) -> Dict[str, int]:
        totals = {status.value: 0 for status in Status}
        for r in self.results:
            totals[r.status.value] += 1
        return totals

    def to_dict(self) -> Dict:
        return {
            "started_at": self.started_at,
            "has_errors": self.has_errors,
            "exit_code": self.exit_code,
            "counts": self.counts(),
            "results": [r.to_dict() for r in self.results],
        }

import time
from datetime import datetime
from typing import List, Optional

from ci_preflight.checks.base import Check, CheckResult, Status
from ci_preflight.checks.registry import registered_checks
from ci_preflight.logging_config import get_logger
from ci_preflight.runner.aggregate import ValidationRun
import ci_preflight.checks  # noqa: F401

logger = get_logger("runner")


def run_check(check: Check, ctx) -> List[CheckResult]:
    """Execute a single check, converting any unexpected error into a FAIL result."""
    start_time = time.time()
    try:
        results = list(check.run(ctx))
    except Exception as e:
        execution_time = time.time() - start_time
        logger.error(
            f"Check {check.check_id} unexpected error in {execution_time:.2f}s: {str(e)}",
            extra={
                "check_id": check.check_id,
                "execution_time": execution_time,
                "error": str(e),
            },
            exc_info=True,
        )
        results = [
            CheckResult(
                name=check.name or check.check_id,
                status=Status.FAIL,
                message=f"Unexpected error: {str(e)}",
                check_id=check.check_id,
            )
        ]

    execution_time = time.time() - start_time
    executed_at = datetime.now().isoformat()
    for res in results:
        res.execution_time = execution_time
        res.executed_at = executed_at
        if not res.check_id:
            res.check_id = check.check_id

    failures = sum(1 for r in results if r.is_failure)
    logger.info(
        f"Check {check.check_id} completed in {execution_time:.2f}s",
        extra={
            "check_id": check.check_id,
            "execution_time": execution_time,
            "results": len(results),
            "failures": failures,
        },
    )
    return results


def run_checks(ctx, checks: Optional[List[Check]] = None) -> ValidationRun:
    """Run checks strictly in order; one check's failure never blocks the next.

    Args:
        ctx: CheckContext the checks read from
        checks: Check instances to run (defaults to all registered checks)

    Returns:
        ValidationRun holding every result in execution order
    """
    if checks is None:
        checks = registered_checks()

    run = ValidationRun()
    overall_start = time.time()
    for check in checks:
        run.extend(run_check(check, ctx))

    logger.info(
        f"Ran {len(checks)} checks in {time.time() - overall_start:.2f}s",
        extra={"counts": run.counts(), "has_errors": run.has_errors},
    )
    return run

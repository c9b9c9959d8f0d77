import json
import os
import datetime
from typing import List

from ci_preflight import __version__
from ci_preflight.checks.base import CheckResult

BANNER_WIDTH = 50
BANNER = "=" * BANNER_WIDTH
TITLE = "🚀 CI Pre-flight Environment Validation"


def format_result(result: CheckResult) -> List[str]:
    """Render one result as its status line plus an optional indented message."""
    line = f"{result.status.glyph} {result.name}"
    if result.version:
        line += f" ({result.version})"
    lines = [line]
    if result.message:
        lines.append(f"   {result.message}")
    return lines


def summary_line(run) -> str:
    counts = run.counts()
    if run.has_errors:
        failures = counts["FAIL"]
        noun = "failure" if failures == 1 else "failures"
        return f"❌ Pre-flight checks failed ({failures} {noun})"
    warnings = counts["WARN"]
    if warnings:
        noun = "warning" if warnings == 1 else "warnings"
        return f"✅ All checks passed ({warnings} {noun})"
    return "✅ All checks passed"


def render(run) -> str:
    lines = [BANNER, TITLE, BANNER, "", "Running pre-flight checks...", ""]
    for result in run.results:
        lines.extend(format_result(result))
    lines.extend(["", BANNER, summary_line(run)])
    return "\n".join(lines)


def write_outputs(run, path: str) -> str:
    """Write the run as JSON to ``path`` and return the path."""
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    payload = run.to_dict()
    payload["generated_at"] = datetime.datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    payload["version"] = __version__
    with open(path, "w", encoding="utf-8") as f:
        json.dump(payload, f, ensure_ascii=False, indent=2)
    return path

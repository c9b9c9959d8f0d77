from ci_preflight.checks.base import Check
from ci_preflight.checks.registry import register
from ci_preflight.config import REQUIRED_FILES


@register(check_id="required_files")
class RequiredFilesCheck(Check):
    """Records one result per required path; a missing file never stops the scan."""

    name = "Required files"

    def run(self, ctx):
        paths = self.params.get("paths", REQUIRED_FILES)
        results = []
        for rel in paths:
            label = f"File: {rel}"
            if ctx.path(rel).exists():
                results.append(self.passed("Found", name=label))
            else:
                results.append(self.failed("Missing", name=label))
        return results

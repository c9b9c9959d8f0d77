from ci_preflight.checks.base import Check
from ci_preflight.checks.registry import register
from ci_preflight.config import CI_REQUIRED_ENV_VARS


@register(check_id="ci_env")
class CiEnvVarsCheck(Check):
    """Checks CI secrets are defined. Only runs under CI.

    Missing variables are warnings: not every test subset needs all of them.
    A variable defined as an empty string counts as set.
    """

    name = "CI environment variables"

    def run(self, ctx):
        if not ctx.ci:
            return [self.info("Skipped (not running in CI)")]

        names = self.params.get("variables", CI_REQUIRED_ENV_VARS)
        results = []
        for var in names:
            label = f"Env: {var}"
            if var in ctx.env:
                results.append(self.passed("Set", name=label))
            else:
                results.append(self.warned("Not set", name=label))
        return results

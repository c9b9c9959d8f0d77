from ci_preflight.checks.base import Check
from ci_preflight.checks.registry import register
from ci_preflight.config import BUILD_TOOL_COMMAND, BUILD_TOOL_DIR, BUILD_TOOL_NAME


@register(check_id="build_tool")
class BuildToolCheck(Check):
    """Checks the functions toolchain answers its version command inside its directory."""

    name = BUILD_TOOL_NAME

    def run(self, ctx):
        command = self.params.get("command", BUILD_TOOL_COMMAND)
        subdir = self.params.get("directory", BUILD_TOOL_DIR)

        out = ctx.runner(command, cwd=ctx.path(subdir))
        if not out.ok:
            return [self.failed(f"Not available in {subdir}/")]
        return [self.passed("Available", version=out.output or None)]

from ci_preflight.checks.base import Check
from ci_preflight.checks.registry import register
from ci_preflight.config import (
    CLI_TOOL_COMMAND,
    CLI_TOOL_INSTALL_HINT,
    CLI_TOOL_MIN_MAJOR,
    CLI_TOOL_NAME,
)
from ci_preflight.process import ExecErrorKind
from ci_preflight.versions import meets_minimum, parse_semver


@register(check_id="cli_tool")
class CliToolVersionCheck(Check):
    """Checks the deploy CLI is installed and recent enough.

    An unparsable version is only a warning; the tool is still usable.
    """

    name = CLI_TOOL_NAME

    def run(self, ctx):
        command = self.params.get("command", CLI_TOOL_COMMAND)
        min_major = int(self.params.get("min_major", CLI_TOOL_MIN_MAJOR))
        install_hint = self.params.get("install_hint", CLI_TOOL_INSTALL_HINT)

        out = ctx.runner(command)
        if not out.ok:
            if out.error.kind is ExecErrorKind.NON_ZERO_EXIT:
                return [self.failed(f"'{' '.join(command)}' failed ({out.error.detail})")]
            return [self.failed(f"Not installed. Run: {install_hint}")]

        semver = parse_semver(out.stdout)
        if semver is None:
            return [self.warned("Could not parse version", version=out.output or None)]

        version = "%d.%d.%d" % semver
        if not meets_minimum(semver[0], min_major):
            return [self.failed(f"Version {min_major}+ required", version=version)]
        return [self.passed("Version OK", version=version)]

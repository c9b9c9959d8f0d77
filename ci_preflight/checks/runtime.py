from ci_preflight.checks.base import Check
from ci_preflight.checks.registry import register
from ci_preflight.config import RUNTIME_COMMAND, RUNTIME_MIN_MAJOR, RUNTIME_NAME
from ci_preflight.exceptions import VersionParseError
from ci_preflight.logging_config import get_logger
from ci_preflight.versions import meets_minimum, parse_major

logger = get_logger("checks.runtime")


@register(check_id="runtime")
class RuntimeVersionCheck(Check):
    """Requires the project runtime to be at least a given major version.

    Params:
        command: argv used to query the version (default ``node --version``)
        min_major: lowest accepted major version
    """

    name = RUNTIME_NAME

    def run(self, ctx):
        command = self.params.get("command", RUNTIME_COMMAND)
        min_major = int(self.params.get("min_major", RUNTIME_MIN_MAJOR))

        out = ctx.runner(command)
        if not out.ok:
            logger.info(f"{self.name} version query failed: {out.error}")
            return [self.failed("Could not detect version")]

        version = out.output
        try:
            major = parse_major(version)
        except VersionParseError as e:
            logger.info(str(e))
            return [self.failed("Could not detect version")]

        if not meets_minimum(major, min_major):
            return [self.failed(f"Version {min_major}+ required", version=version)]
        return [self.passed("Version OK", version=version)]

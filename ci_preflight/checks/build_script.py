import json

from ci_preflight.checks.base import Check
from ci_preflight.checks.registry import register
from ci_preflight.config import BUILD_MANIFEST, BUILD_SCRIPT_NAME
from ci_preflight.exceptions import ManifestError
from ci_preflight.logging_config import get_logger

logger = get_logger("checks.build_script")


def load_manifest(path):
    """Read and decode a JSON manifest, raising ManifestError on any failure."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        raise ManifestError(f"Could not read {path}: {e}") from e
    if not isinstance(data, dict):
        raise ManifestError(f"{path} does not contain a JSON object")
    return data


@register(check_id="build_script")
class BuildScriptCheck(Check):
    """Verifies the functions manifest declares a non-empty build script.

    Every branch reports under the same name so the result can be tracked
    across runs regardless of why it failed.
    """

    name = f"Build script: {BUILD_MANIFEST}"

    def run(self, ctx):
        manifest = self.params.get("manifest", BUILD_MANIFEST)
        script = self.params.get("script", BUILD_SCRIPT_NAME)
        name = f"Build script: {manifest}"

        try:
            data = load_manifest(ctx.path(manifest))
        except ManifestError as e:
            logger.info(str(e))
            return [self.failed(f"Could not read {manifest}", name=name)]

        scripts = data.get("scripts")
        command = scripts.get(script) if isinstance(scripts, dict) else None
        if not isinstance(command, str) or not command.strip():
            return [self.failed(f'No "{script}" script in {manifest}', name=name)]
        return [self.passed(f'"{script}" script present', name=name)]

"""Pre-flight environment validator for CI build and deploy pipelines."""

__version__ = "0.1.0"

# Core components
from ci_preflight.context import CheckContext
from ci_preflight.checks.base import Check, CheckResult, Status
from ci_preflight.runner.aggregate import ValidationRun
from ci_preflight.runner.execute import run_checks, run_check

# Checks
from ci_preflight.checks.runtime import RuntimeVersionCheck
from ci_preflight.checks.cli_tool import CliToolVersionCheck
from ci_preflight.checks.build_tool import BuildToolCheck
from ci_preflight.checks.required_files import RequiredFilesCheck
from ci_preflight.checks.build_script import BuildScriptCheck
from ci_preflight.checks.ci_env import CiEnvVarsCheck

__all__ = [
    # Version
    "__version__",
    # Core
    "CheckContext",
    "Check",
    "CheckResult",
    "Status",
    "ValidationRun",
    # Execution
    "run_checks",
    "run_check",
    # Checks
    "RuntimeVersionCheck",
    "CliToolVersionCheck",
    "BuildToolCheck",
    "RequiredFilesCheck",
    "BuildScriptCheck",
    "CiEnvVarsCheck",
]

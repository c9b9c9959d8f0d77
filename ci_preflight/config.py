"""Configuration management with environment variable loading and check constants."""

import os
from typing import Mapping, Optional
from pathlib import Path


def load_env_file(env_file: Optional[Path] = None) -> None:
    """Load environment variables from .env file if it exists."""
    if env_file is None:
        env_file = Path.cwd() / ".env"
    if env_file.exists():
        with open(env_file, "r", encoding="utf-8") as f:
            for line in f:
                line = line.strip()
                if line and not line.startswith("#") and "=" in line:
                    key, value = line.split("=", 1)
                    key = key.strip()
                    if key not in os.environ:  # Don't override existing env vars
                        os.environ[key] = value.strip()


def get_env(name: str, default: Optional[str] = None) -> Optional[str]:
    """Get environment variable with optional default."""
    return os.environ.get(name, default)


def is_ci(env: Optional[Mapping[str, str]] = None) -> bool:
    """True when the CI flag is set to anything other than empty or a false-like value.

    Some pipelines set CI to their product name (e.g. ``CI=woodpecker``).
    """
    if env is None:
        env = os.environ
    value = env.get(ENV_CI_FLAG)
    if value is None:
        return False
    value = value.strip().lower()
    return bool(value) and value not in FALSY_VALUES


# Core Configuration Constants
ENV_CI_FLAG = "CI"
"""str: Environment variable signalling an automated pipeline run."""

FALSY_VALUES = frozenset({"0", "false", "no", "off"})

ENV_LOG_LEVEL = "PREFLIGHT_LOG_LEVEL"
"""str: Environment variable overriding the root log level."""

DEFAULT_LOG_LEVEL = "WARNING"

# Runtime version check
RUNTIME_NAME = "Node.js"
RUNTIME_COMMAND = ("node", "--version")
RUNTIME_MIN_MAJOR = 20

# External CLI tool check
CLI_TOOL_NAME = "Firebase CLI"
CLI_TOOL_COMMAND = ("firebase", "--version")
CLI_TOOL_MIN_MAJOR = 13
CLI_TOOL_INSTALL_HINT = "npm install -g firebase-tools"

# Build tool check
BUILD_TOOL_NAME = "npm (functions)"
BUILD_TOOL_COMMAND = ("npm", "--version")
BUILD_TOOL_DIR = "functions"

# Required files, checked in this order relative to the project root
REQUIRED_FILES = (
    "firebase.json",
    "firestore.rules",
    "firestore.indexes.json",
    "storage.rules",
    "functions/package.json",
    "functions/tsconfig.json",
    ".github/workflows/ci.yml",
)

# Build script check
BUILD_MANIFEST = "functions/package.json"
BUILD_SCRIPT_NAME = "build"

# Variables expected when running under CI
CI_REQUIRED_ENV_VARS = (
    "FIREBASE_TOKEN",
    "GCP_PROJECT_ID",
    "STRIPE_SECRET_KEY",
    "SENDGRID_API_KEY",
    "OPENAI_API_KEY",
)

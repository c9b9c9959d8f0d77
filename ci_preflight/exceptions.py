"""Custom exception hierarchy for the CI pre-flight validator."""


class PreflightError(Exception):
    """Base exception for all pre-flight validator errors."""

    pass


class ConfigurationError(PreflightError):
    """Raised when configuration is invalid or missing."""

    pass


class CheckRegistrationError(PreflightError):
    """Raised when check registration fails (e.g., duplicate check ids)."""

    pass


class VersionParseError(PreflightError):
    """Raised when a version string cannot be parsed."""

    pass


class ManifestError(PreflightError):
    """Raised when a JSON manifest cannot be read or decoded."""

    pass

"""Version string parsing helpers."""

import re
from typing import Optional, Tuple

from packaging.version import InvalidVersion, Version

from ci_preflight.exceptions import VersionParseError

SEMVER_PATTERN = re.compile(r"(\d+)\.(\d+)\.(\d+)")


def parse_semver(text: str) -> Optional[Tuple[int, int, int]]:
    """Return the first ``major.minor.patch`` found in ``text``, or None."""
    match = SEMVER_PATTERN.search(text or "")
    if match is None:
        return None
    major, minor, patch = match.groups()
    return int(major), int(minor), int(patch)


def parse_major(text: str) -> int:
    """Parse the major component of ``v20.11.1``, ``22.0.0-rc.1`` or ``20``."""
    try:
        return Version((text or "").strip()).major
    except InvalidVersion:
        raise VersionParseError(f"Unrecognised version string: {text!r}")


def meets_minimum(major: int, minimum: int) -> bool:
    return major >= minimum

"""Version parsing and bumping utilities.

Versions are strict three-part ``major.minor.patch`` strings. Incomplete
versions and prerelease/build metadata are rejected rather than padded,
since a build file with a malformed version must not be rewritten.
"""

from __future__ import annotations

import re

import semver

from .models import BumpKind

_VERSION_RE = re.compile(r"\d+\.\d+\.\d+")


def parse_version(version_str: str) -> semver.Version:
    """Parse a ``major.minor.patch`` string into a semver.Version.

    Raises:
        ValueError: If the string is not exactly three numeric components,
            or a component has a leading zero (semver forbids "01.2.3").

    Examples:
        "1.2.3" → Version(1, 2, 3)
        "1.2" → ValueError
        "01.2.3" → ValueError
    """
    version_str = version_str.strip()
    if not _VERSION_RE.fullmatch(version_str):
        raise ValueError(f"not a major.minor.patch version: {version_str!r}")
    return semver.Version.parse(version_str)


def bump_version(version_str: str, kind: BumpKind) -> str:
    """Apply a semantic-versioning increment and return the new string.

    Examples:
        "1.4.9", MINOR → "1.5.0"
        "2.0.0", MAJOR → "3.0.0"
        "0.0.1", PATCH → "0.0.2"
    """
    version = parse_version(version_str)
    if kind is BumpKind.MAJOR:
        bumped = version.bump_major()
    elif kind is BumpKind.MINOR:
        bumped = version.bump_minor()
    else:
        bumped = version.bump_patch()
    return str(bumped)

"""Build file reading and writing.

Only the ``version '<X.Y.Z>'`` line of the build file is understood; every
other line is passed through untouched when the file is rewritten.
"""

from __future__ import annotations

import re
from pathlib import Path

VERSION_PREFIX = "version "

# Single or double quotes on read; the rewritten line always uses single quotes.
_QUOTED_RE = re.compile(r"""version\s+(['"])(?P<value>[^'"]*)\1""")


def _find_version_line(lines: list[str]) -> int | None:
    for i, line in enumerate(lines):
        if line.strip().startswith(VERSION_PREFIX):
            return i
    return None


def read_version(path: Path) -> str | None:
    """Return the quoted version string from the build file.

    Returns None when there is no ``version`` line or its value is not
    quoted. The value itself is not validated here.
    """
    lines = path.read_text().splitlines()
    index = _find_version_line(lines)
    if index is None:
        return None
    match = _QUOTED_RE.match(lines[index].strip())
    if not match:
        return None
    return match.group("value")


def write_version(path: Path, new_version: str) -> None:
    """Rewrite the build file's version line in place.

    The first line whose stripped form starts with ``version `` becomes
    ``version '<new_version>'``, keeping its indentation and line ending.

    Raises:
        ValueError: If the file has no version line.
    """
    lines = path.read_text().splitlines(keepends=True)
    index = _find_version_line(lines)
    if index is None:
        raise ValueError(f"No version line in {path}")

    old = lines[index]
    indent = old[: len(old) - len(old.lstrip())]
    ending = old[len(old.rstrip("\r\n")) :]
    lines[index] = f"{indent}{VERSION_PREFIX}'{new_version}'{ending}"
    path.write_text("".join(lines))

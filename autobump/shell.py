"""Shell and git utilities.

Thin wrappers around the git subprocess calls used to inspect a change
range, plus the output helpers shared by the bump pipeline.
"""

from __future__ import annotations

import subprocess
import sys
from typing import NoReturn


def git(*args: str, errors: str = "strict") -> str:
    """Run a git command and return stdout.

    Args:
        *args: Arguments to pass to git (e.g., "diff", "--name-only").
        errors: Decoding error handler for output. Use "replace" for
                content that may not be UTF-8, such as patch text.

    Returns:
        Stripped stdout from the git command.

    Raises:
        CalledProcessError: If git exits non-zero.
    """
    result = subprocess.run(
        ["git", *args], capture_output=True, text=True, errors=errors, check=True
    )
    return result.stdout.strip()


def step(msg: str) -> None:
    """Print a visually distinct step header.

    Used to separate the phases of a bump run in terminal output.
    """
    print(f"\n{'─' * 60}\n{msg}\n{'─' * 60}")


def warn(msg: str) -> None:
    """Print a warning to stderr without stopping the run."""
    print(f"WARNING: {msg}", file=sys.stderr)


def fatal(msg: str) -> NoReturn:
    """Print an error message and exit with code 1.

    Use for unrecoverable errors that should halt the run.
    """
    print(f"ERROR: {msg}", file=sys.stderr)
    sys.exit(1)

"""Data models for autobump.

These Pydantic models represent the values passed between the stages of a
bump run: what to compare, what changed, and what was decided.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

PULL_REQUEST_EVENT = "pull_request"


class BumpKind(str, Enum):
    """Semantic-versioning increment selected for a change set."""

    MAJOR = "MAJOR"
    MINOR = "MINOR"
    PATCH = "PATCH"


class BumpConfig(BaseModel):
    """Explicit configuration for a single bump run.

    Attributes:
        event_name: CI event kind (e.g., "pull_request", "push").
        base_ref: Base branch of a pull request.
        head_ref: Head branch of a pull request.
        build_file: Build file holding the ``version '<X.Y.Z>'`` line.
        info_file: Status file overwritten with the run outcome.
        github_output: Optional step-output file to append results to.
        dry_run: Compute and report without touching any file.
    """

    event_name: str | None = None
    base_ref: str | None = None
    head_ref: str | None = None
    build_file: Path = Path("build.gradle")
    info_file: Path = Path(".version_info")
    github_output: Path | None = None
    dry_run: bool = False

    @property
    def is_pull_request(self) -> bool:
        return self.event_name == PULL_REQUEST_EVENT


class ChangeRange(BaseModel):
    """Pair of git revisions to compare."""

    model_config = ConfigDict(frozen=True)

    base: str
    head: str


class ChangeSet(BaseModel):
    """Files and patch text between the two ends of a ChangeRange.

    Attributes:
        files: Changed paths in the order git reports them.
        diff: Raw patch text, scanned for markers only.
    """

    files: list[str] = Field(default_factory=list)
    diff: str = ""

    @property
    def is_empty(self) -> bool:
        return not self.files


class VersionInfo(BaseModel):
    """Outcome of a bump run, consumed by later CI steps.

    Attributes:
        version_type: The increment that was applied.
        old_version: Version before bumping.
        new_version: Version after bumping.
        changes_detected: Always True once a bump has been computed.
        pr_detected: True for pull-request runs, where no commit follows.
    """

    version_type: BumpKind
    old_version: str
    new_version: str
    changes_detected: bool = True
    pr_detected: bool = False

    def as_pairs(self) -> list[tuple[str, str]]:
        """Return the record as ordered (KEY, value) pairs."""
        return [
            ("VERSION_TYPE", self.version_type.value),
            ("OLD_VERSION", self.old_version),
            ("NEW_VERSION", self.new_version),
            ("CHANGES_DETECTED", _flag(self.changes_detected)),
            ("PR_DETECTED", _flag(self.pr_detected)),
        ]

    def to_lines(self) -> str:
        """Render as ``KEY=value`` lines with a trailing newline."""
        return "".join(f"{key}={value}\n" for key, value in self.as_pairs())


def _flag(value: bool) -> str:
    return "true" if value else "false"

"""Change classification rules.

A bump is selected by walking an ordered rule table: the first rule whose
path pattern matches any changed file AND whose marker pattern matches the
diff text wins. When no rule matches, the bump defaults to PATCH.

Rule order encodes priority, so a change set carrying both a breaking
marker and a fix marker is always classified MAJOR.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass

from .models import BumpKind, ChangeSet

DEFAULT_BUMP = BumpKind.PATCH


@dataclass(frozen=True)
class Rule:
    """A single (paths, markers) → bump rule.

    Attributes:
        kind: Bump selected when the rule matches.
        paths: Searched (unanchored) against each changed path.
        markers: Searched against the diff text.
        description: Human-readable label for progress output.
    """

    kind: BumpKind
    paths: re.Pattern[str]
    markers: re.Pattern[str]
    description: str

    def matches(self, changes: ChangeSet) -> bool:
        return any(self.paths.search(f) for f in changes.files) and bool(
            self.markers.search(changes.diff)
        )


# build.gradle alone only qualifies for MAJOR.
SOURCE_PATHS = r"build\.gradle|\.java|\.groovy"
FEATURE_PATHS = r"\.java|\.groovy|\.yaml"
MAINTENANCE_PATHS = r"\.java|\.groovy|\.yaml|\.md|\.txt"

DEFAULT_RULES: tuple[Rule, ...] = (
    Rule(
        kind=BumpKind.MAJOR,
        paths=re.compile(SOURCE_PATHS),
        markers=re.compile(r"(?i:breaking change)|!:|feat!|fix!"),
        description="breaking changes",
    ),
    Rule(
        kind=BumpKind.MINOR,
        paths=re.compile(FEATURE_PATHS),
        markers=re.compile(r"feat:|feature:|new:|add:"),
        description="new features",
    ),
    Rule(
        kind=BumpKind.PATCH,
        paths=re.compile(MAINTENANCE_PATHS),
        markers=re.compile(
            r"fix:|bugfix:|patch:|docs:|style:|refactor:|perf:|test:|chore:"
        ),
        description="fixes and improvements",
    ),
)


def match_rule(changes: ChangeSet, rules: Sequence[Rule] = DEFAULT_RULES) -> Rule | None:
    """Return the first matching rule, or None if nothing matches."""
    for rule in rules:
        if rule.matches(changes):
            return rule
    return None


def classify(changes: ChangeSet, rules: Sequence[Rule] = DEFAULT_RULES) -> BumpKind:
    """Select the bump for a change set.

    Pure function of the changed paths and diff text.

    Examples:
        ["Foo.java"], "feat: add bar" → MINOR
        ["build.gradle"], "fix!: critical" → MAJOR
        ["README.md"], "updated readme" → PATCH (default)
    """
    rule = match_rule(changes, rules)
    return rule.kind if rule else DEFAULT_BUMP

"""Bump pipeline: range → diff → classify → bump → write → verify → report.

This module orchestrates a single autobump run:
1. Pick the revisions to compare (pull request branches, or HEAD~1..HEAD)
2. Collect the changed files and the diff text between them
3. Classify the change set as MAJOR, MINOR or PATCH
4. Read the current version from the build file
5. Compute and write the new version, then re-read it to verify
6. Write the status file consumed by later CI steps

A run with no changed files stops after step 2 and touches nothing.
"""

from __future__ import annotations

import subprocess
from pathlib import Path

from .buildfile import read_version, write_version
from .models import BumpConfig, BumpKind, ChangeRange, ChangeSet, VersionInfo
from .rules import DEFAULT_BUMP, match_rule
from .shell import fatal, git, step, warn
from .versions import bump_version, parse_version


def resolve_range(config: BumpConfig) -> ChangeRange | None:
    """Pick the revisions to compare.

    Pull requests compare their base and head branches; anything else is
    treated as a direct push and compares the previous commit with HEAD.
    Returns None for a pull request missing either branch.
    """
    if config.is_pull_request:
        print("  Analyzing changes in pull request")
        if not config.base_ref or not config.head_ref:
            warn("Pull request run is missing a base or head ref")
            return None
        return ChangeRange(base=config.base_ref, head=config.head_ref)

    print("  Analyzing changes in direct push")
    return ChangeRange(base="HEAD~1", head="HEAD")


def collect_changes(change_range: ChangeRange) -> ChangeSet:
    """Collect changed files and diff text for a revision range.

    A failing git call is reported as a warning and treated as "no
    changes", so a run that cannot inspect history exits cleanly. Output
    is decoded leniently since patch text is only scanned for markers.
    """
    step(f"Collecting changes {change_range.base}..{change_range.head}")

    try:
        names = git(
            "diff", "--name-only", change_range.base, change_range.head, errors="replace"
        )
    except subprocess.CalledProcessError as exc:
        warn(f"Could not list changed files: {(exc.stderr or '').strip() or exc}")
        return ChangeSet()

    files = [line for line in names.splitlines() if line.strip()]
    if not files:
        return ChangeSet()

    try:
        diff = git("diff", change_range.base, change_range.head, errors="replace")
    except subprocess.CalledProcessError as exc:
        warn(f"Could not read diff text: {(exc.stderr or '').strip() or exc}")
        diff = ""

    for f in files:
        print(f"  {f}")
    return ChangeSet(files=files, diff=diff)


def determine_bump(changes: ChangeSet) -> BumpKind:
    """Classify the change set and report which rule decided it."""
    step("Classifying changes")
    rule = match_rule(changes)
    if rule is None:
        print(f"  {DEFAULT_BUMP.value}: assumed (default)")
        return DEFAULT_BUMP
    print(f"  {rule.kind.value}: {rule.description} detected")
    return rule.kind


def read_current_version(build_file: Path) -> str:
    """Read and validate the current version, exiting if it is unusable."""
    if not build_file.is_file():
        fatal(f"Build file not found: {build_file}")

    raw = read_version(build_file)
    if raw is None:
        fatal(f"Could not get current version from {build_file}")
    try:
        return str(parse_version(raw))
    except ValueError as exc:
        fatal(f"Invalid version in {build_file}: {exc}")


def update_build_file(build_file: Path, new_version: str) -> None:
    """Write the new version and verify it by reading the file back.

    A mismatch after writing is fatal; the file is left as written so the
    state can be inspected.
    """
    step(f"Updating {build_file}")
    write_version(build_file, new_version)

    updated = read_version(build_file)
    if updated != new_version:
        fatal(
            f"Failed to update version in {build_file}: "
            f"expected {new_version}, found {updated}"
        )


def write_version_info(path: Path, info: VersionInfo) -> None:
    """Overwrite the status file with the run outcome."""
    path.write_text(info.to_lines())


def write_github_output(path: Path, info: VersionInfo) -> None:
    """Append the run outcome to a GitHub step-output file."""
    with open(path, "a") as fh:
        for key, value in info.as_pairs():
            fh.write(f"{key.lower()}={value}\n")


def print_summary(info: VersionInfo, changes: ChangeSet) -> None:
    step("Change summary")
    print(f"  Version type: {info.version_type.value}")
    print(f"  Previous version: {info.old_version}")
    print(f"  New version: {info.new_version}")
    print(f"  Modified files: {len(changes.files)}")
    if info.pr_detected:
        print("  Pull request detected - version will be updated on merge")
    else:
        print("  Direct push detected - commit expected for new version")


def run_bump(config: BumpConfig) -> VersionInfo | None:
    """Execute a full bump run.

    Args:
        config: Where to look for changes and which files to update.

    Returns:
        The recorded outcome, or None when no files changed.
    """
    step("Determining change range")
    change_range = resolve_range(config)
    changes = collect_changes(change_range) if change_range else ChangeSet()

    if changes.is_empty:
        print("\nNo modified files found, nothing to version.")
        return None

    kind = determine_bump(changes)

    step("Computing new version")
    old_version = read_current_version(config.build_file)
    new_version = bump_version(old_version, kind)
    print(f"  {old_version} → {new_version} ({kind.value})")

    info = VersionInfo(
        version_type=kind,
        old_version=old_version,
        new_version=new_version,
        pr_detected=config.is_pull_request,
    )

    if config.dry_run:
        print("\nDry run: no files written.")
        return info

    update_build_file(config.build_file, new_version)
    write_version_info(config.info_file, info)
    if config.github_output is not None:
        write_github_output(config.github_output, info)

    print_summary(info, changes)
    print(f"\n{'=' * 60}\nVersion updated: {old_version} → {new_version}\n{'=' * 60}")
    return info

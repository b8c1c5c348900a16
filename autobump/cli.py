"""CLI entry point for autobump."""

from __future__ import annotations

from pathlib import Path

import click

from autobump.buildfile import read_version
from autobump.models import BumpConfig
from autobump.pipeline import run_bump

_build_file_option = click.option(
    "--build-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default="build.gradle",
    show_default=True,
    help="Build file holding the version line.",
)


@click.group()
@click.version_option(package_name="autobump")
def cli() -> None:
    """Semantic version bumps from the changes between two revisions."""


@cli.command()
@click.option(
    "--event-name",
    envvar="GITHUB_EVENT_NAME",
    default=None,
    help="CI event kind; 'pull_request' compares --base-ref and --head-ref.",
)
@click.option("--base-ref", envvar="GITHUB_BASE_REF", default=None, help="Pull request base branch.")
@click.option("--head-ref", envvar="GITHUB_HEAD_REF", default=None, help="Pull request head branch.")
@_build_file_option
@click.option(
    "--info-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=".version_info",
    show_default=True,
    help="Status file to overwrite with the outcome.",
)
@click.option(
    "--github-output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Also append the outcome to this step-output file.",
)
@click.option("--dry-run", is_flag=True, help="Report the bump without writing files.")
def bump(
    event_name: str | None,
    base_ref: str | None,
    head_ref: str | None,
    build_file: Path,
    info_file: Path,
    github_output: Path | None,
    dry_run: bool,
) -> None:
    """Classify the latest changes and bump the version (usually called from CI)."""
    config = BumpConfig(
        event_name=event_name,
        base_ref=base_ref,
        head_ref=head_ref,
        build_file=build_file,
        info_file=info_file,
        github_output=github_output,
        dry_run=dry_run,
    )
    run_bump(config)


@cli.command()
@_build_file_option
def current(build_file: Path) -> None:
    """Print the version currently in the build file."""
    if not build_file.is_file():
        raise click.ClickException(f"Build file not found: {build_file}")
    version = read_version(build_file)
    if version is None:
        raise click.ClickException(f"No version line in {build_file}")
    click.echo(version)

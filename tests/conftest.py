"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from autobump.models import BumpConfig


@pytest.fixture
def build_file(tmp_path: Path) -> Path:
    """Create a temporary build.gradle at version 1.2.3."""
    content = """\
plugins {
    id 'java'
}

group 'com.example'
version '1.2.3'

dependencies {
    implementation 'org.slf4j:slf4j-api:2.0.9'
}
"""
    path = tmp_path / "build.gradle"
    path.write_text(content)
    return path


@pytest.fixture
def push_config(tmp_path: Path, build_file: Path) -> BumpConfig:
    """Config for a direct-push run writing into tmp_path."""
    return BumpConfig(
        event_name="push",
        build_file=build_file,
        info_file=tmp_path / ".version_info",
    )

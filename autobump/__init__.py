"""Semantic version bumps for build files, driven by git changes."""

# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures for semverkit tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def temp_project(tmp_path: Path) -> Path:
    """Create a temporary project directory with a plain pyproject.toml."""
    project_dir = tmp_path / "test_project"
    project_dir.mkdir()

    (project_dir / "pyproject.toml").write_text(
        """[build-system]
requires = ["setuptools"]
build-backend = "setuptools.build_meta"

[project]
name = "test-project"
version = "1.4.0-rc.2+build.7"
"""
    )

    return project_dir


@pytest.fixture
def lenient_project(tmp_path: Path) -> Path:
    """Create a project whose [tool.semverkit] enables loose parsing and concise output."""
    project_dir = tmp_path / "lenient_project"
    project_dir.mkdir()

    (project_dir / "pyproject.toml").write_text(
        """[project]
name = "lenient-project"
version = "v2.1"

[tool.semverkit]
loose = true
concise = true
"""
    )

    return project_dir

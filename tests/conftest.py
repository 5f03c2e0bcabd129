"""
Pytest configuration and shared fixtures for Collate tests.
"""

from __future__ import annotations

import os
import shutil
import subprocess
import sys
from pathlib import Path

import pytest
from loguru import logger

from collate.segmentation.types import TypeNode

AUTHOR = "alice@example.com"
OTHER = "bob@example.com"

requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="git not installed")


@pytest.fixture(autouse=True)
def _reset_logging():
    """Give every test a fresh stderr sink (CLI tests swap sys.stderr)."""
    logger.remove()
    logger.add(sys.stderr, level="WARNING")
    yield
    logger.remove()


class FakeAuthorship:
    """LineAuthorship returning canned per-line authors keyed by file name."""

    def __init__(self, tables: dict[str, list[str]]) -> None:
        self.tables = tables
        self.calls: list[Path] = []

    @property
    def name(self) -> str:
        return "fake"

    def line_authors(self, file_path: Path) -> list[str]:
        self.calls.append(Path(file_path))
        return list(self.tables[Path(file_path).name])


class FakeStructureSource:
    """StructureSource returning canned types regardless of content."""

    def __init__(self, types: list[TypeNode]) -> None:
        self.types = types

    @property
    def name(self) -> str:
        return "fake"

    def supports_language(self, language: str) -> bool:
        return True

    def parse_types(self, content: str, file_path: str, language: str) -> list[TypeNode]:
        return list(self.types)


def _git(repo: Path, *args: str, env: dict[str, str] | None = None) -> None:
    subprocess.run(
        ["git", *args],
        cwd=repo,
        check=True,
        capture_output=True,
        env={**os.environ, **(env or {})},
    )


class GitRepo:
    """A throwaway git repository whose commits can be attributed to anyone."""

    def __init__(self, path: Path) -> None:
        self.path = path
        _git(path, "init", "-q")
        _git(path, "config", "commit.gpgsign", "false")

    def commit(self, email: str, files: dict[str, str], message: str = "change") -> None:
        for name, content in files.items():
            target = self.path / name
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content)
        _git(self.path, "add", "-A")
        name = email.split("@")[0]
        _git(
            self.path,
            "commit",
            "-q",
            "-m",
            message,
            env={
                "GIT_AUTHOR_NAME": name,
                "GIT_AUTHOR_EMAIL": email,
                "GIT_COMMITTER_NAME": name,
                "GIT_COMMITTER_EMAIL": email,
            },
        )


@pytest.fixture
def git_repo(tmp_path: Path) -> GitRepo:
    """Create an empty git repository in a temp directory."""
    if shutil.which("git") is None:
        pytest.skip("git not installed")
    repo_dir = tmp_path / "repo"
    repo_dir.mkdir()
    return GitRepo(repo_dir)

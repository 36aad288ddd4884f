"""Pytest configuration and shared fixtures."""

import subprocess
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
import structlog
from click.testing import CliRunner


def run_git(cwd: Path, *args: str) -> str:
    """Run a git command in cwd and return stripped stdout."""
    result = subprocess.run(
        ["git", *args],
        cwd=cwd,
        check=True,
        capture_output=True,
        text=True,
    )
    return result.stdout.strip()


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    """Undo configure_logging() calls made by a test."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def git_repo(tmp_path: Path) -> Path:
    """Create a Git repository on branch 'master' with one commit.

    The repository contains Cargo.toml and src/lib.rs and has an 'origin'
    remote pointing at git@github.com:nbouliol/git-file-url.git.
    """
    repo = tmp_path / "project"
    repo.mkdir()

    run_git(repo, "init")
    run_git(repo, "symbolic-ref", "HEAD", "refs/heads/master")
    run_git(repo, "config", "user.email", "test@example.com")
    run_git(repo, "config", "user.name", "Test User")
    run_git(repo, "config", "commit.gpgsign", "false")

    (repo / "Cargo.toml").write_text('[package]\nname = "git-file-url"\n')
    (repo / "src").mkdir()
    (repo / "src" / "lib.rs").write_text("pub fn url() {}\n")

    run_git(repo, "add", "Cargo.toml", "src/lib.rs")
    run_git(repo, "commit", "-m", "Initial commit")
    run_git(repo, "remote", "add", "origin", "git@github.com:nbouliol/git-file-url.git")

    return repo.resolve()


@pytest.fixture
def outside_file(tmp_path: Path) -> Path:
    """A file that exists but is not inside git_repo."""
    other = tmp_path / "elsewhere"
    other.mkdir()
    target = other / "hosts"
    target.write_text("127.0.0.1 localhost\n")
    return target.resolve()


@pytest.fixture
def git_cmd() -> Callable[..., str]:
    """Provide run_git to tests that change repository state."""
    return run_git

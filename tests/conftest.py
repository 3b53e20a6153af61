"""Shared fixtures for gitwait tests."""

import pytest
from click.testing import CliRunner


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def repo(tmp_path):
    """A working tree at tmp_path/repo with an empty .git directory."""
    root = tmp_path / "repo"
    (root / ".git").mkdir(parents=True)
    return root


@pytest.fixture
def lock(repo):
    """An existing .git/index.lock inside *repo*."""
    p = repo / ".git" / "index.lock"
    p.write_text("")
    return p

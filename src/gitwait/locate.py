"""Upward search for the repository's ``.git`` entry."""

from __future__ import annotations

import os
from pathlib import Path

from .config import GIT_DIR_NAME, INDEX_LOCK_NAME


def _exists(path: Path) -> bool:
    try:
        return path.exists()
    except OSError:
        return False


def find_git_directory(start: str | Path) -> Path | None:
    """Return the nearest ``.git`` at or above *start*, or None.

    Only presence is checked, so a ``.git`` file (submodule gitlink) is
    returned just like a directory.  The walk follows the logical path;
    symlinks in *start* are not resolved.
    """
    candidate = Path(os.path.abspath(start))
    while True:
        git_dir = candidate / GIT_DIR_NAME
        if _exists(git_dir):
            return git_dir
        parent = candidate.parent
        if parent == candidate:
            return None
        candidate = parent


def lock_path_for(git_dir: str | Path) -> Path:
    """Path of the index lock inside *git_dir*."""
    return Path(git_dir) / INDEX_LOCK_NAME

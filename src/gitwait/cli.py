"""git-wait: run git once ``.git/index.lock`` is gone."""

from __future__ import annotations

import os

import click

from .config import GIT_PROGRAM, INDEX_LOCK_NAME, WaitConfig
from .exceptions import GitWaitError
from .handoff import exec_replace
from .locate import find_git_directory, lock_path_for
from .wait import wait_for_clear


class _Fatal(click.ClickException):
    """Single ``ERROR:`` line on stderr, exit status 1."""

    def show(self, file=None):
        click.echo(f"ERROR: {self.format_message()}", file=file, err=True)


class _ForwardAll(click.Command):
    """Command that hands its whole argument list to the callback unparsed.

    No option is recognised, not even ``--help`` or ``--``; everything
    belongs to git.
    """

    def parse_args(self, ctx, args):
        ctx.params["args"] = tuple(args)
        ctx.args = []
        return []


def _current_dir() -> str:
    try:
        return os.getcwd()
    except OSError:
        raise _Fatal("Unable to read current directory.")


def _wait_for_lock(lock_path, timeout: float | None) -> None:
    click.echo(f"Waiting on {INDEX_LOCK_NAME}... ", nl=False)
    wait_for_clear(lock_path, timeout)
    click.echo("done!")


@click.command(cls=_ForwardAll, add_help_option=False)
def main(args):
    """Wait for the repository's index.lock to clear, then exec git.

    \b
    Every argument is passed to git unchanged:
      git-wait commit -m "message"
      GIT_WAIT_TIMEOUT_MS=5000 git-wait pull

    GIT_WAIT_TIMEOUT_MS bounds the wait in milliseconds; unset waits forever.
    """
    try:
        config = WaitConfig.from_env()
        git_dir = find_git_directory(_current_dir())
        if git_dir is not None:
            lock_path = lock_path_for(git_dir)
            if os.path.exists(lock_path):
                _wait_for_lock(lock_path, config.timeout)
        exec_replace(GIT_PROGRAM, [GIT_PROGRAM, *args])
    except GitWaitError as exc:
        raise _Fatal(str(exc)) from exc

"""Replace the running process with the wrapped program."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence
from typing import NoReturn

from .exceptions import HandoffError


def _flush_std_streams() -> None:
    # exec discards Python-level buffers, so anything pending must go out now.
    for stream in (sys.stdout, sys.stderr):
        if stream is not None:
            stream.flush()


def _spawn_and_exit(program: str, argv: list[str]) -> NoReturn:
    """Stand-in for exec where there is none: run, wait, mirror the exit code."""
    import subprocess

    proc = subprocess.run([program, *argv[1:]])
    sys.exit(proc.returncode)


def exec_replace(program: str, args: Sequence[str]) -> NoReturn:
    """Hand the process over to *program*, looked up on PATH.

    *args* is the complete argument vector, ``args[0]`` included.  Returns
    only by raising :class:`HandoffError`.
    """
    argv = list(args)
    _flush_std_streams()
    try:
        if os.name == "nt":
            _spawn_and_exit(program, argv)
        os.execvp(program, argv)
    except ValueError as exc:
        # Embedded NUL byte in the program name or an argument.
        raise HandoffError(f"invalid arg string: {exc}") from exc
    except OSError as exc:
        raise HandoffError(
            f"error executing {program}, code: {exc.errno} ({exc.strerror})",
            errno=exc.errno,
        ) from exc

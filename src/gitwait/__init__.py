from .config import GIT_DIR_NAME, INDEX_LOCK_NAME, TIMEOUT_ENV_VAR, GIT_PROGRAM, WaitConfig
from .exceptions import (
    GitWaitError, ConfigError, WaitError, WatchInitError,
    WaitTimeoutError, ChannelClosedError, HandoffError,
)
from .locate import find_git_directory, lock_path_for
from .wait import EventKind, WatchEvent, wait_for_clear
from .handoff import exec_replace

__all__ = [
    "GIT_DIR_NAME", "INDEX_LOCK_NAME", "TIMEOUT_ENV_VAR", "GIT_PROGRAM", "WaitConfig",
    "GitWaitError", "ConfigError", "WaitError", "WatchInitError",
    "WaitTimeoutError", "ChannelClosedError", "HandoffError",
    "find_git_directory", "lock_path_for",
    "EventKind", "WatchEvent", "wait_for_clear",
    "exec_replace",
]

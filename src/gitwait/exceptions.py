"""Exceptions for gitwait."""

from __future__ import annotations


class GitWaitError(Exception):
    """Base class for every fatal condition the wrapper reports."""


class ConfigError(GitWaitError):
    """Raised when ``GIT_WAIT_TIMEOUT_MS`` is set but not a valid timeout."""


class WaitError(GitWaitError):
    """Raised when waiting for ``index.lock`` to clear fails."""


class WatchInitError(WaitError):
    """The filesystem watcher could not be started."""


class WaitTimeoutError(WaitError):
    """The lock file was still present when the timeout expired.

    Kept distinct from the other wait errors so callers can tell
    "still locked" apart from "broken".
    """

    def __init__(self, timeout: float):
        self.timeout = timeout
        super().__init__(f"timed out! (index.lock still present after {timeout * 1000:g}ms)")


class ChannelClosedError(WaitError):
    """The watcher thread stopped delivering events before the lock cleared."""


class HandoffError(GitWaitError):
    """Raised when the wrapped program cannot be executed."""

    def __init__(self, message: str, errno: int | None = None):
        self.errno = errno
        super().__init__(message)

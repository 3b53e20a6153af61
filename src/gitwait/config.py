"""Fixed names and the environment-driven wait timeout."""

from __future__ import annotations

import os
import re
from collections.abc import Mapping
from dataclasses import dataclass

from .exceptions import ConfigError

GIT_DIR_NAME = ".git"
INDEX_LOCK_NAME = "index.lock"
TIMEOUT_ENV_VAR = "GIT_WAIT_TIMEOUT_MS"
GIT_PROGRAM = "git"

# Unsigned integer: optional '+', ASCII digits only.
_TIMEOUT_RE = re.compile(r"\+?[0-9]+")


def parse_timeout_ms(raw: str) -> float:
    """Parse a millisecond count into seconds, raising ConfigError if malformed."""
    if not _TIMEOUT_RE.fullmatch(raw):
        raise ConfigError(
            f"timeout parse error: {TIMEOUT_ENV_VAR}={raw!r} is not a "
            f"non-negative integer number of milliseconds"
        )
    return int(raw) / 1000


@dataclass(frozen=True)
class WaitConfig:
    """Per-invocation settings. ``timeout`` is in seconds; None waits forever."""
    timeout: float | None = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> WaitConfig:
        if environ is None:
            environ = os.environ
        raw = environ.get(TIMEOUT_ENV_VAR)
        if raw is None:
            return cls()
        return cls(timeout=parse_timeout_ms(raw))

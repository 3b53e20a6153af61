"""Block until ``index.lock`` disappears, driven by filesystem notifications.

A background thread runs :func:`watchfiles.watch` on the lock's directory and
forwards events through a queue; the calling thread reads that queue with a
bounded wait.  The timeout is a strict total deadline measured from the start
of :func:`wait_for_clear`: events for other paths never extend it.
"""

from __future__ import annotations

import enum
import os
import queue
import threading
import time
from dataclasses import dataclass
from pathlib import Path

import watchfiles

from .exceptions import ChannelClosedError, WaitTimeoutError, WatchInitError

# watchfiles timings, in milliseconds.  _TICK_MS bounds how long the first
# (possibly empty) batch takes to arrive once the watcher is registered.
_DEBOUNCE_MS = 100
_STEP_MS = 10
_TICK_MS = 50

# Seconds to wait for the watcher thread to notice its stop event.
_JOIN_TIMEOUT = 1.0


class EventKind(enum.Enum):
    CREATED = "created"
    MODIFIED = "modified"
    REMOVED = "removed"
    OTHER = "other"

    @classmethod
    def from_change(cls, change) -> EventKind:
        return _CHANGE_KINDS.get(change, cls.OTHER)


_CHANGE_KINDS = {
    watchfiles.Change.added: EventKind.CREATED,
    watchfiles.Change.modified: EventKind.MODIFIED,
    watchfiles.Change.deleted: EventKind.REMOVED,
}


@dataclass(frozen=True)
class WatchEvent:
    """One filesystem notification, as delivered to the waiting thread."""
    kind: EventKind
    path: str


@dataclass(frozen=True)
class _Failure:
    error: Exception


# Queue markers.  _ARMED precedes the watcher's first batch; _CLOSED is the
# last item the producer ever puts.
_ARMED = object()
_CLOSED = object()


def _normalize(path: str | Path) -> str:
    """Absolute path with the parent directory resolved (the file may be gone)."""
    head, tail = os.path.split(os.path.abspath(path))
    return os.path.join(os.path.realpath(head), tail)


def _produce(directory: str, target: str, events: queue.Queue,
             stop: threading.Event) -> None:
    """Forward events for *target* into *events* until *stop* is set."""

    def only_target(change, path: str) -> bool:
        return _normalize(path) == target

    armed = False
    try:
        for changes in watchfiles.watch(
            directory,
            watch_filter=only_target,
            debounce=_DEBOUNCE_MS,
            step=_STEP_MS,
            stop_event=stop,
            rust_timeout=_TICK_MS,
            yield_on_timeout=True,
            raise_interrupt=False,
            recursive=False,
        ):
            if not armed:
                armed = True
                events.put(_ARMED)
            for change, path in changes:
                events.put(WatchEvent(EventKind.from_change(change), path))
    except Exception as exc:
        events.put(_Failure(exc))
    finally:
        events.put(_CLOSED)


def _receive(events: queue.Queue, deadline: float | None, timeout: float | None):
    if deadline is None:
        return events.get()
    remaining = deadline - time.monotonic()
    if remaining <= 0:
        raise WaitTimeoutError(timeout)
    try:
        return events.get(timeout=remaining)
    except queue.Empty:
        raise WaitTimeoutError(timeout) from None


def _consume(target: str, events: queue.Queue, deadline: float | None,
             timeout: float | None) -> None:
    armed = False
    while True:
        item = _receive(events, deadline, timeout)
        if item is _ARMED:
            armed = True
            # Removed before the watcher existed: no event will ever come.
            if not os.path.lexists(target):
                return
        elif isinstance(item, _Failure):
            error = item.error
            if armed:
                raise ChannelClosedError(f"broken channel: {error}") from error
            if isinstance(error, FileNotFoundError):
                return
            raise WatchInitError(f"Unable to watch index.lock: {error}") from error
        elif item is _CLOSED:
            raise ChannelClosedError("broken channel")
        elif item.kind is EventKind.REMOVED and _normalize(item.path) == target:
            return


def wait_for_clear(lock_path: str | Path, timeout: float | None = None) -> None:
    """Block until *lock_path* is removed.

    The caller is expected to have seen *lock_path* exist.  If it vanishes
    before the watch is in place, the wait ends successfully.

    Args:
        lock_path: The lock file to watch.
        timeout: Seconds to wait in total, or None to wait indefinitely.

    Raises:
        WatchInitError: The watcher could not be started.
        WaitTimeoutError: *timeout* elapsed with the lock still present.
        ChannelClosedError: The watcher thread stopped unexpectedly.
    """
    target = _normalize(lock_path)
    deadline = None if timeout is None else time.monotonic() + timeout
    events: queue.Queue = queue.Queue()
    stop = threading.Event()
    producer = threading.Thread(
        target=_produce,
        args=(os.path.dirname(target), target, events, stop),
        name="gitwait-watch",
        daemon=True,
    )
    producer.start()
    try:
        _consume(target, events, deadline, timeout)
    finally:
        stop.set()
        producer.join(_JOIN_TIMEOUT)

"""Process-wide debug state - internal implementation detail.

This module is NOT part of the public API. Users should go through
`debuglog.enable`, `debuglog.disable` and `debuglog.set_writer`.
"""
from __future__ import annotations

import sys
import threading
import time
from typing import IO, NamedTuple

from loguru import logger as _loguru

from debuglog._pattern import Matchers, compile_pattern

__all__ = ['DebugState', 'get_state', 'enable', 'disable', 'set_writer', 'is_enabled']


class _Snapshot(NamedTuple):
    enabled: bool
    matchers: Matchers | None


_DISABLED = _Snapshot(enabled=False, matchers=None)


class DebugState:
    """Shared enabled flag, matcher pair and output writer.

    Mutations are serialized by one lock. Each mutation publishes a new
    immutable snapshot, so readers never see matchers from two patterns.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._snapshot = _DISABLED
        self._writer: IO[str] | None = None
        self.last_emit = time.monotonic_ns()

    @property
    def snapshot(self) -> _Snapshot:
        return self._snapshot

    @property
    def writer(self) -> IO[str]:
        """Configured writer, or the current ``sys.stderr``."""
        return sys.stderr if self._writer is None else self._writer

    def enable(self, pattern: str) -> None:
        matchers = compile_pattern(pattern)
        with self._lock:
            self._snapshot = _Snapshot(enabled=True, matchers=matchers)
        _loguru.debug('Enabled debug pattern {!r}', pattern)

    def disable(self) -> None:
        with self._lock:
            self._snapshot = self._snapshot._replace(enabled=False)
        _loguru.debug('Disabled debug output')

    def set_writer(self, writer: IO[str] | None) -> None:
        if writer is not None and not callable(getattr(writer, 'write', None)):
            raise TypeError(f'writer must have a write() method, got {type(writer).__name__}')
        with self._lock:
            self._writer = writer
        _loguru.debug('Debug writer set to {!r}', writer)

    def is_enabled(self, name: str) -> bool:
        enabled, matchers = self._snapshot
        if not enabled or matchers is None:
            return False
        return matchers.enabled_for(name)

    def reset(self) -> None:
        """Restore process-start state: disabled, no matchers, stderr."""
        with self._lock:
            self._snapshot = _DISABLED
            self._writer = None
            self.last_emit = time.monotonic_ns()


# Singleton state instance
_state: DebugState | None = None
_state_lock = threading.Lock()


def get_state() -> DebugState:
    """Get the singleton state instance."""
    global _state
    if _state is None:
        with _state_lock:
            if _state is None:
                _state = DebugState()
    return _state


# Module-level convenience functions for public API
def enable(pattern: str) -> None:
    """Enable the given debug `pattern`.

    Patterns take a glob-like form: ``*`` enables everything,
    ``mongo:connection`` a single namespace, ``mongo:*`` a hierarchy.
    Multiple tokens are comma separated (``mongo*,redis*``) and a leading
    ``-`` excludes (``*,-mongo:*``). Calling again replaces the previous
    pattern.
    """
    get_state().enable(pattern)


def disable() -> None:
    """Disable all debug output. The last pattern is kept but ignored."""
    get_state().disable()


def set_writer(writer: IO[str] | None) -> None:
    """Replace the output writer. ``None`` restores ``sys.stderr``."""
    get_state().set_writer(writer)


def is_enabled(name: str) -> bool:
    """Check whether namespace `name` would currently produce output."""
    return get_state().is_enabled(name)

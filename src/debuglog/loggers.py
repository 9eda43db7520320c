"""Stream adapters for capturing output under a debug namespace."""
from __future__ import annotations

import io
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from debuglog._debugger import Debugger

__all__ = ['DebugStream']


class DebugStream:
    """File-like object that sends each written line to a debugger.

    Placeholders isatty and fileno mimic a python stream, so it can stand
    in for ``sys.stdout`` while a noisy component runs.

    >>> import contextlib, debuglog  # doctest: +SKIP
    >>> with contextlib.redirect_stdout(DebugStream(debuglog.debug('legacy'))):  # doctest: +SKIP
    ...     print('hello')
    """

    def __init__(self, debugger: Debugger) -> None:
        self.debugger = debugger
        self.linebuf = ''

    def write(self, buf: str) -> int:
        """Send each completed line to the debugger, buffering the rest."""
        *lines, self.linebuf = (self.linebuf + buf).split('\n')
        for line in lines:
            self._emit(line)
        return len(buf)

    def flush(self) -> None:
        """Send any partial line still buffered."""
        line, self.linebuf = self.linebuf, ''
        self._emit(line)

    def _emit(self, line: str) -> None:
        msg = line.rstrip()
        if msg:
            self.debugger(msg)

    def isatty(self) -> bool:
        """Return False as this is not a TTY.
        """
        return False

    def fileno(self) -> int:
        """Raise UnsupportedOperation as this is not a real file.
        """
        raise io.UnsupportedOperation('fileno')

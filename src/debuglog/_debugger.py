"""Namespace debuggers - callables that emit lines for one namespace.
"""
from __future__ import annotations

import datetime
import time
from collections.abc import Mapping

from loguru import logger as _loguru

from debuglog._state import get_state
from debuglog.colors import choose_color, colorize, escape

__all__ = ['Debugger', 'debug', 'humanize_nano']

_UNITS = (
    (1_000_000_000, 's'),
    (1_000_000, 'ms'),
    (1_000, 'us'),
)


def humanize_nano(n: int) -> str:
    """Humanize a nanosecond duration, truncating to the largest unit.

    >>> humanize_nano(1_500_000_000)
    '1s'
    >>> humanize_nano(1_000_000_000)
    '1000ms'
    >>> humanize_nano(1999)
    '1us'
    >>> humanize_nano(1000)
    '1000ns'
    """
    for size, suffix in _UNITS:
        if n > size:
            return f'{n // size}{suffix}'
    return f'{n}ns'


def _format_message(fmt: str, args: tuple) -> str:
    if not args:
        return fmt
    # same convention as logging.LogRecord: a lone mapping feeds %(key)s
    values = args
    if len(args) == 1 and isinstance(args[0], Mapping) and args[0]:
        values = args[0]
    try:
        return fmt % values
    except (TypeError, ValueError, KeyError):
        return ' '.join(map(str, (fmt, *args)))


def _deltas(global_ns: int, local_ns: int, color: str) -> str:
    now = datetime.datetime.now(datetime.timezone.utc)
    ts = now.strftime('%H:%M:%S.%f')[:-3]
    return f'{ts} {humanize_nano(global_ns):<6} {escape(color)}{humanize_nano(local_ns):<6}'


class Debugger:
    """Debug function for namespace `name`.

    Call it with printf-style arguments; output only appears when the
    namespace matches the pattern given to `debuglog.enable`.

    >>> debug = Debugger('mongo:connection')  # doctest: +SKIP
    >>> debug('connected to %s', host)  # doctest: +SKIP
    """

    def __init__(self, name: str):
        self.name = name
        self.color = choose_color()
        self._prev = time.monotonic_ns()

    def __repr__(self) -> str:
        return f'{type(self).__name__}({self.name!r})'

    @property
    def enabled(self) -> bool:
        """Whether a call would currently produce output."""
        return get_state().is_enabled(self.name)

    def __call__(self, fmt: str, *args) -> None:
        state = get_state()
        enabled, matchers = state.snapshot
        if not enabled:
            return
        if matchers.excludes.fullmatch(self.name):
            return
        if not matchers.includes.fullmatch(self.name):
            return

        now = time.monotonic_ns()
        line = (f'{_deltas(now - state.last_emit, now - self._prev, self.color)} '
                f'{colorize(self.name, self.color)} - '
                f'{_format_message(fmt, args)}\n')
        try:
            state.writer.write(line)
        except Exception as exc:
            _loguru.warning('Debug writer failed for {}: {}', self.name, exc)

        state.last_emit = self._prev = time.monotonic_ns()


def debug(name: str) -> Debugger:
    """Create a debug function for `name`.

    >>> import debuglog  # doctest: +SKIP
    >>> debug = debuglog.debug('mongo:connection')  # doctest: +SKIP
    >>> debug('send email to %s', 'tobi@example.com')  # doctest: +SKIP
    """
    return Debugger(name)


if __name__ == '__main__':
    __import__('doctest').testmod(optionflags=4 | 8 | 32)

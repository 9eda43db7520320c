"""Writers that route debug lines somewhere other than a plain stream."""
from __future__ import annotations

import re
import sys

from loguru import logger as _loguru

__all__ = ['LoguruWriter']

_ANSI_RE = re.compile(r'\x1b\[[0-9;]*m')
_NAMESPACE_RE = re.compile(r'^\S+\s+\S+\s+\S+\s+(?P<namespace>\S+) - ')


def _caller_depth() -> int:
    """Depth of the first frame outside this package, as seen by loguru."""
    frame, depth = sys._getframe(2), 1
    while frame and frame.f_globals.get('__name__', '').partition('.')[0] == 'debuglog':
        frame = frame.f_back
        depth += 1
    return depth


class LoguruWriter:
    """Writer that forwards each debug line into loguru.

    Colors are stripped and the namespace is bound as ``extra[namespace]``,
    so loguru sinks can filter on it. The record is attributed to the code
    that called the debugger, not to this package, so it is not affected by
    ``logger.disable('debuglog')``.

    >>> import debuglog  # doctest: +SKIP
    >>> debuglog.set_writer(LoguruWriter())  # doctest: +SKIP
    """

    def __init__(self, level: str = 'DEBUG'):
        self.level = level

    def write(self, buf: str) -> int:
        depth = _caller_depth()
        for line in buf.splitlines():
            text = _ANSI_RE.sub('', line)
            if not text:
                continue
            match = _NAMESPACE_RE.match(text)
            namespace = match.group('namespace') if match else ''
            _loguru.bind(namespace=namespace).opt(depth=depth).log(self.level, text)
        return len(buf)

    def flush(self) -> None:
        pass

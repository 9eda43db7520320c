"""Pattern compiler - turns a debug pattern into include/exclude matchers.

Patterns are comma-separated glob tokens. A token starting with ``-`` is an
exclusion, ``*`` matches any substring and every other character is literal.

>>> includes, excludes = split_pattern('*,-foo,bar:*')
>>> includes, excludes
('*,bar:*', 'foo')
>>> pattern_to_regex(quote_meta('mongo:*'))
'^(mongo:.*?)$'
"""
from __future__ import annotations

import re
from dataclasses import dataclass

__all__ = [
    'Matchers',
    'compile_pattern',
    'pattern_to_regex',
    'quote_meta',
    'split_pattern',
    ]

_QUOTE_RE = re.compile(r'([\\.+*?()|\[\]{}^$])')
_WILDCARD = r'\*'


def quote_meta(pattern: str) -> str:
    """Escape regex metacharacters, leaving ``,``, ``-`` and ``:`` alone.

    >>> quote_meta('a.b*(c)')
    'a\\\\.b\\\\*\\\\(c\\\\)'
    >>> quote_meta('-foo,bar:baz')
    '-foo,bar:baz'
    """
    return _QUOTE_RE.sub(r'\\\1', pattern)


def split_pattern(pattern: str) -> tuple[str, str]:
    """Split a pattern into comma-joined include and exclude glob sets.
    """
    tokens = pattern.split(',')
    includes = [token for token in tokens if not token.startswith('-')]
    excludes = [token[1:] for token in tokens if token.startswith('-')]
    return ','.join(includes), ','.join(excludes)


def pattern_to_regex(globs: str) -> str:
    """Format an escaped glob set as an anchored regex source.

    The wildcard is expected in its escaped form (``\\*``).
    """
    globs = globs.replace(_WILDCARD, '.*?')
    globs = globs.replace(',', '|')
    return f'^({globs})$'


@dataclass(frozen=True)
class Matchers:
    """Compiled include/exclude pair from a single pattern."""
    includes: re.Pattern
    excludes: re.Pattern

    def enabled_for(self, name: str) -> bool:
        # exclusion wins over inclusion
        if self.excludes.fullmatch(name):
            return False
        return self.includes.fullmatch(name) is not None


def compile_pattern(pattern: str) -> Matchers:
    """Quote, split and compile a raw pattern into a `Matchers` pair.
    """
    includes, excludes = split_pattern(quote_meta(pattern))
    return Matchers(
        includes=re.compile(pattern_to_regex(includes)),
        excludes=re.compile(pattern_to_regex(excludes)),
    )


if __name__ == '__main__':
    __import__('doctest').testmod(optionflags=4 | 8 | 32)

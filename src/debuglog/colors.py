"""ANSI colors assigned to debug namespaces."""
import random

__all__ = [
    'ANSI_RED',
    'ANSI_GREEN',
    'ANSI_YELLOW',
    'ANSI_BLUE',
    'ANSI_MAGENTA',
    'ANSI_CYAN',
    'ANSI_RESET',
    'PALETTE',
    'choose_color',
    'colorize',
    'escape',
    ]

ANSI_RED = '31'
ANSI_GREEN = '32'
ANSI_YELLOW = '33'
ANSI_BLUE = '34'
ANSI_MAGENTA = '35'
ANSI_CYAN = '36'

PALETTE = (ANSI_RED, ANSI_GREEN, ANSI_YELLOW, ANSI_BLUE, ANSI_MAGENTA, ANSI_CYAN)

ANSI_RESET = '\x1b[0m'


def escape(color: str) -> str:
    """Return the SGR escape sequence for `color`.

    >>> escape(ANSI_RED)
    '\\x1b[31m'
    """
    return f'\x1b[{color}m'


def choose_color() -> str:
    """Pick a palette color at random."""
    return random.choice(PALETTE)


def colorize(text: str, color: str) -> str:
    """Wrap `text` in `color` and reset afterwards.

    >>> colorize('foo', ANSI_GREEN)
    '\\x1b[32mfoo\\x1b[0m'
    """
    return f'{escape(color)}{text}{ANSI_RESET}'


if __name__ == '__main__':
    __import__('doctest').testmod(optionflags=4 | 8 | 32)

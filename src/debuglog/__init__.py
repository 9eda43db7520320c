"""Namespace-scoped debug output, enabled by a glob pattern.

Public API - users should only import from this module.

Usage:
    import debuglog

    # Enable namespaces (or set DEBUG=mongo:* in the environment)
    debuglog.enable('mongo:*,-mongo:pool')

    # One debug function per component
    debug = debuglog.debug('mongo:connection')
    debug('connected to %s:%d', host, port)

    # Capture output
    debuglog.set_writer(io.StringIO())

    # Route output into loguru sinks
    debuglog.set_writer(debuglog.LoguruWriter())
"""
from loguru import logger as _loguru

from debuglog import config
from debuglog._debugger import Debugger, debug, humanize_nano
from debuglog._pattern import pattern_to_regex, split_pattern
from debuglog._state import disable, enable, is_enabled, set_writer
from debuglog.loggers import DebugStream
from debuglog.sinks import LoguruWriter

# Library logging is opt-in: loguru.logger.enable('debuglog')
_loguru.disable('debuglog')

if config.pattern:
    enable(config.pattern)


__all__ = [
    # Configuration
    'enable',
    'disable',
    'set_writer',
    'is_enabled',
    # Debuggers
    'debug',
    'Debugger',
    # Pattern helpers
    'split_pattern',
    'pattern_to_regex',
    'humanize_nano',
    # Utilities
    'DebugStream',
    'LoguruWriter',
]

"""Levelled diagnostic logging to standard error."""

from __future__ import annotations

import os
import sys
import time
from dataclasses import dataclass
from enum import IntEnum


class Level(IntEnum):
    """Importance of a log message; higher is more important."""

    DEBUG = 0
    INFO = 1
    WARN = 2
    ERROR = 3


_RESET = "\x1b[0m"
_LIGHT_GRAY = "\x1b[0;37m"
_COLORS = {
    Level.DEBUG: "\x1b[1;36m",
    Level.INFO: "\x1b[0;32m",
    Level.WARN: "\x1b[1;33m",
    Level.ERROR: "\x1b[1;31m",
}


@dataclass
class _Settings:
    level: Level = Level.WARN
    colors: bool = False


_settings = _Settings()


def log(level, file, line, fmt, *args):
    """Write one message to stderr if its level is at least the current minimum."""
    level = Level(level)
    if level < _settings.level:
        return
    message = fmt % args if args else fmt
    seconds, rest = divmod(time.time_ns(), 1_000_000_000)
    micros = rest // 1000
    if _settings.colors:
        stamp = time.localtime(seconds)
        prefix = (
            f"{stamp.tm_hour:02d}:{stamp.tm_min:02d}:{stamp.tm_sec:02d}:{micros:06d} "
            f"{_COLORS[level]}{level.name:<5}{_RESET} "
            f"{_LIGHT_GRAY}{file}:{line}:{_RESET} "
        )
    else:
        prefix = f"{seconds}.{micros:06d} {level.name} {file}:{line}: "
    sys.stderr.write(prefix + message + "\n")


def debug(file, line, fmt, *args):
    log(Level.DEBUG, file, line, fmt, *args)


def info(file, line, fmt, *args):
    log(Level.INFO, file, line, fmt, *args)


def warn(file, line, fmt, *args):
    log(Level.WARN, file, line, fmt, *args)


def error(file, line, fmt, *args):
    log(Level.ERROR, file, line, fmt, *args)


def set_level(level):
    """Set the minimum level that gets written."""
    _settings.level = Level(level)


def get_level():
    return _settings.level


def inc_verbosity():
    """Lower the minimum level by one step, stopping at DEBUG."""
    if _settings.level != Level.DEBUG:
        _settings.level = Level(_settings.level - 1)
        frame = sys._getframe()
        debug(
            os.path.basename(__file__),
            frame.f_lineno,
            "Set log level to %s",
            _settings.level.name,
        )


def use_colors(enabled):
    """Switch coloured, wall-clock prefixed output on or off."""
    _settings.colors = bool(enabled)
from __future__ import annotations

import logging
from enum import IntEnum


class LogLevel(IntEnum):
    TRACE = 5
    DEBUG = 10
    INFO = 20
    SUCCESS = 25
    WARNING = 30
    ERROR = 40
    CRITICAL = 50


_CUSTOM_LEVELS = (LogLevel.TRACE, LogLevel.SUCCESS)


def register_levels() -> None:
    for lvl in _CUSTOM_LEVELS:
        if logging.getLevelName(int(lvl)) == f"Level {int(lvl)}":
            logging.addLevelName(int(lvl), lvl.name)


def to_level(value: int | str) -> int:
    if isinstance(value, int):
        return value
    name = value.strip().upper()
    if name in LogLevel.__members__:
        return int(LogLevel[name])
    return logging.INFO

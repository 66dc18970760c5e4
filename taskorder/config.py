from __future__ import annotations

import logging
import os


def default_delimiter() -> str:
    """
    Field separator for task files: a tab.

    Override with TASKORDER_DELIMITER env var or --delimiter CLI option.
    The two-character text "\\t" is read as a tab.
    """
    env = os.getenv("TASKORDER_DELIMITER")
    if env:
        return unescape_delimiter(env)
    return "\t"


def unescape_delimiter(text: str) -> str:
    return "\t" if text == "\\t" else text


def default_log_level() -> int:
    """
    WARNING unless TASKORDER_LOG_LEVEL names another level (e.g. DEBUG, INFO).
    """
    env = os.getenv("TASKORDER_LOG_LEVEL")
    if env:
        level = logging.getLevelName(env.strip().upper())
        if isinstance(level, int):
            return level
    return logging.WARNING

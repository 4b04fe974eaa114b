"""Shared helpers for Scramble Match."""

# Scramble Match
# Copyright (C) 2025  Scramble Match developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import logging
import os
from typing import Optional

from scramblematch.constants import DEFAULT_LOG_LEVEL, LOG_FORMAT, LOG_LEVEL_ENV_VAR


def setup_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """Return a module logger with a single stream handler attached.

    Args:
        name: Logger name, usually ``__name__``
        level: Level name; falls back to ``SCRAMBLEMATCH_LOG_LEVEL`` then WARNING

    Returns:
        The configured logger
    """
    logger = logging.getLogger(name)

    level_name = level or os.environ.get(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL)
    logger.setLevel(getattr(logging, level_name.upper(), logging.WARNING))

    # Avoid duplicate handlers when a module is reloaded
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger


def set_global_log_level(level: int) -> None:
    """Apply ``level`` to every logger created through :func:`setup_logger`."""
    logging.getLogger().setLevel(level)
    for name in list(logging.root.manager.loggerDict):
        if name.startswith("scramblematch"):
            logging.getLogger(name).setLevel(level)


__all__ = ["setup_logger", "set_global_log_level"]

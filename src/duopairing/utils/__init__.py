"""Shared helpers for Duo Pairing."""

# Duo Pairing
# Copyright (C) 2025  Duo Pairing developers
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
from datetime import datetime

from dateutil.tz import tzutc

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    """Return a named logger with the package's stream handler attached.

    Calling this twice for the same name does not stack handlers.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(level)
        logger.propagate = False
    return logger


def set_log_level(level: int) -> None:
    """Change the level of the package's loggers; other loggers are left alone."""
    for name in list(logging.root.manager.loggerDict):
        if name == "duopairing" or name.startswith("duopairing."):
            logging.getLogger(name).setLevel(level)


def utcnow() -> datetime:
    """Timezone-aware current time, used to stamp stored pairings."""
    return datetime.now(tz=tzutc())

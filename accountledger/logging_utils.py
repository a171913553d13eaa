"""Mini README: Application-wide logging helpers for the account ledger.

Structure:
    * get_logger - factory returning module loggers with baseline configuration.
    * configure_root_logger - adjusts the global logging level.

Usage:
    Modules import ``get_logger`` to create contextual loggers. Handler setup
    happens exactly once per process so reloading modules in tests does not
    stack duplicate handlers. The interactive entry point calls
    ``configure_root_logger`` with the configured level so log output stays
    out of the menu unless explicitly requested.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

_LOGGER_INITIALISED = False


def configure_root_logger(level: Union[int, str] = logging.WARNING) -> None:
    """Attach a single formatted stream handler and set the root level."""

    global _LOGGER_INITIALISED
    root_logger = logging.getLogger()
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    root_logger.setLevel(level)
    if _LOGGER_INITIALISED:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root_logger.addHandler(handler)
    _LOGGER_INITIALISED = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger."""

    return logging.getLogger(name)

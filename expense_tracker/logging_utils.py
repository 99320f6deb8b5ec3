"""Mini README: Logging helpers shared by the expense tracker.

Structure:
    * configure_root_logger - installs the single console handler.
    * get_logger - factory returning module loggers.

Usage:
    Modules declare ``LOGGER = get_logger(__name__)``. The CLI calls
    ``configure_root_logger`` with the configured level before touching the
    ledger so that later calls become no-ops and handlers are never stacked.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

_LOGGER_INITIALISED = False


def configure_root_logger(level: Union[int, str] = logging.INFO) -> None:
    """Attach a console handler to the root logger once per process."""

    global _LOGGER_INITIALISED
    if _LOGGER_INITIALISED:
        return

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(handler)
    _LOGGER_INITIALISED = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger."""

    return logging.getLogger(name)

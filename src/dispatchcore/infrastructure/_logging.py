"""
Logging helpers for dispatchcore.

All loggers live under the ``dispatchcore`` hierarchy. As a library the
package installs only a ``NullHandler``; applications that want console
output call :func:`configure_logging` once.

Environment
-----------
DISPATCHCORE_LOG_LEVEL
    Level name used by :func:`configure_logging` when no explicit level is
    given. Defaults to ``WARNING``.
"""

from __future__ import annotations

import logging
import os
from typing import Optional, Union

ROOT_LOGGER_NAME = "dispatchcore"
LOG_LEVEL_ENV = "DISPATCHCORE_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


class _DispatchCoreHandler(logging.StreamHandler):
    """Marker subclass so repeated configuration replaces our own handler only."""


def get_logger(name: str) -> logging.Logger:
    """
    Return a logger nested under the ``dispatchcore`` hierarchy.

    Parameters
    ----------
    name : str
        Usually the calling module's ``__name__``. Names outside the package
        namespace are prefixed with ``dispatchcore.``.

    Returns
    -------
    logging.Logger
        The requested logger.
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def _resolve_level(level: Optional[Union[int, str]]) -> int:
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, "WARNING")
    if isinstance(level, int):
        return level
    numeric = logging.getLevelName(level.strip().upper())
    if not isinstance(numeric, int):
        raise ValueError(
            f"Invalid log level {level!r}. Expected one of "
            "'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'"
        )
    return numeric


def configure_logging(level: Optional[Union[int, str]] = None) -> logging.Logger:
    """
    Attach a console handler to the ``dispatchcore`` logger.

    Calling this more than once replaces the previously attached handler
    instead of stacking a new one.

    Parameters
    ----------
    level : int | str | None, optional
        Logging level or level name. Falls back to ``DISPATCHCORE_LOG_LEVEL``
        and then ``WARNING``.

    Returns
    -------
    logging.Logger
        The configured package root logger.

    Raises
    ------
    ValueError
        If the level name is not a known logging level.
    """
    numeric_level = _resolve_level(level)
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(numeric_level)
    for handler in list(root.handlers):
        if isinstance(handler, _DispatchCoreHandler):
            root.removeHandler(handler)

    handler = _DispatchCoreHandler()
    handler.setLevel(numeric_level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    return root

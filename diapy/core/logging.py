"""Logging utilities for diapy modules."""

import logging
from typing import Optional

ROOT_LOGGER = 'diapy'


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a logger in the ``diapy`` namespace.

    Names outside the namespace are nested under it, so
    ``get_logger('request')`` and ``get_logger('diapy.request')`` return
    the same logger. Loggers propagate to the root logger; while
    basicConfig() has not been called they default to WARNING.

    Args:
        name: Logger name, with or without the ``diapy.`` prefix

    Returns:
        Configured logger instance
    """
    if not name or name == ROOT_LOGGER:
        full_name = ROOT_LOGGER
    elif name.startswith(f"{ROOT_LOGGER}."):
        full_name = name
    else:
        full_name = f"{ROOT_LOGGER}.{name}"

    logger = logging.getLogger(full_name)
    logger.propagate = True

    if not logging.getLogger().handlers:
        logger.setLevel(logging.WARNING)

    return logger

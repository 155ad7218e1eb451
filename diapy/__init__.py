"""
diapy - Python client for the Democracy in Action CRM API.

Usage:
    >>> from diapy import APIClient, Credentials
    >>>
    >>> with APIClient(Credentials("user@example.org", "secret")) as dia:
    ...     for supporter in dia.get("supporter", {"limit": 10}):
    ...         print(supporter["Email"])
"""
import logging

from .core.api import (
    APIClient,
    AsyncAPIClient,
    APIConfig,
    Credentials,
    SSLConfig,
    TimeoutConfig,
    SessionState,
    RequestsTransport,
    AiohttpTransport,
)
from .core.exceptions import (
    DIAException,
    InvalidArgumentError,
    RemoteError,
    ResponseParseError,
)

__version__ = '1.0.0'


def setup_logging(level=logging.INFO):
    """
    Configure logging for diapy modules.

    Args:
        level: Logging level (default: logging.INFO)
    """
    loggers = [
        'diapy',
        'diapy.api',
        'diapy.request',
        'diapy.response',
        'diapy.transport',
    ]

    for logger_name in loggers:
        logger = logging.getLogger(logger_name)
        logger.setLevel(level)
        logger.propagate = True


__all__ = [
    'APIClient',
    'AsyncAPIClient',
    'APIConfig',
    'Credentials',
    'SSLConfig',
    'TimeoutConfig',
    'SessionState',
    'RequestsTransport',
    'AiohttpTransport',
    'DIAException',
    'InvalidArgumentError',
    'RemoteError',
    'ResponseParseError',
    'setup_logging',
]

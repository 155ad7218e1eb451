"""DIA API clients."""
from .base import BaseAPIClient
from .api_client import APIClient

__all__ = [
    'BaseAPIClient',
    'APIClient',
]

"""Transports: the network edge of the client."""
from .protocols import Transport, AsyncTransport
from .requests_transport import RequestsTransport
from .aiohttp_transport import AiohttpTransport

__all__ = [
    'Transport',
    'AsyncTransport',
    'RequestsTransport',
    'AiohttpTransport',
]

"""
Transport protocols.

A transport sends one APIRequest and returns a TransportResponse. It owns
sockets, TLS and timeouts; the request pipeline owns everything else.
"""
from typing import Protocol, runtime_checkable

from ..request.models import APIRequest, TransportResponse


@runtime_checkable
class Transport(Protocol):
    """Protocol for synchronous transports."""

    def send(self, request: APIRequest) -> TransportResponse:
        """
        Send a request.

        Args:
            request: Fully built request

        Returns:
            Response with status and headers, successful or not
        """
        ...

    def close(self) -> None:
        """Release connections."""
        ...


@runtime_checkable
class AsyncTransport(Protocol):
    """Protocol for asynchronous transports."""

    async def send(self, request: APIRequest) -> TransportResponse:
        """Send a request asynchronously."""
        ...

    async def close(self) -> None:
        """Release connections asynchronously."""
        ...

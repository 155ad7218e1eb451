"""
Async DIA API client.

Same request pipeline as APIClient, with an aiohttp transport.
"""
from typing import Any, Dict, List, Optional

from .client.base import BaseAPIClient
from .config import APIConfig, Credentials
from .request import TransportResponse, parse_get_response, parse_process_response
from .transport import AiohttpTransport, AsyncTransport


class AsyncAPIClient(BaseAPIClient):
    """
    Asynchronous Democracy in Action API client.

    Calls on one instance must not overlap: every resolved response
    replaces the cookies the next request sends.

    Example:
        >>> async with AsyncAPIClient(credentials) as client:
        ...     key = await client.process('supporter', {'Email': 'a@b.org'})
    """

    def __init__(
        self,
        credentials: Credentials,
        config: Optional[APIConfig] = None,
        transport: Optional[AsyncTransport] = None
    ):
        """
        Initialize async API client.

        Args:
            credentials: Account used for every request
            config: API configuration (uses defaults if not provided)
            transport: Transport to send requests with (aiohttp by default)
        """
        super().__init__(credentials, config)
        self._transport = transport or AiohttpTransport(self._config)

    async def __aenter__(self) -> 'AsyncAPIClient':
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()

    async def close(self) -> None:
        """Close the transport."""
        await self._transport.close()

    async def send_request(
        self,
        url: str,
        options: Optional[Dict[str, Any]] = None
    ) -> TransportResponse:
        """
        Build, send and resolve one request.

        Raises:
            RemoteError: If the response is missing or unsuccessful
        """
        request = self.build_request(url, options)
        return self.resolve(await self._transport.send(request))

    async def get(self, table: str, options: Any = None) -> List[Dict[str, str]]:
        """Fetch objects from a table."""
        if self._skip_when_disabled('get', table):
            return []
        url, params = self._get_call(table, options)
        response = await self.send_request(url, params)
        return parse_get_response(response.body, table)

    async def process(self, table: str, options: Any = None) -> Optional[str]:
        """Create or update an object, returning its key."""
        if self._skip_when_disabled('process', table):
            return None
        url, params = self._process_call(table, options)
        response = await self.send_request(url, params)
        return parse_process_response(response.body)

    async def delete(self, table: str, options: Any = None) -> bool:
        """Delete objects by key."""
        if self._skip_when_disabled('delete', table):
            return False
        url, params = self._delete_call(table, options)
        await self.send_request(url, params)
        return True

"""Synchronous DIA API client."""
from typing import Any, Dict, List, Optional

from ..config import APIConfig, Credentials
from ..request import TransportResponse, parse_get_response, parse_process_response
from ..transport import RequestsTransport, Transport
from .base import BaseAPIClient


class APIClient(BaseAPIClient):
    """
    Synchronous Democracy in Action API client.

    Example:
        >>> credentials = Credentials('user@example.org', 'secret')
        >>> with APIClient(credentials) as client:
        ...     supporters = client.get('supporter', {'where': "Email LIKE '%@example.org'"})
    """

    def __init__(
        self,
        credentials: Credentials,
        config: Optional[APIConfig] = None,
        transport: Optional[Transport] = None
    ):
        """
        Initialize API client.

        Args:
            credentials: Account used for every request
            config: API configuration (uses defaults if not provided)
            transport: Transport to send requests with (requests by default)
        """
        super().__init__(credentials, config)
        self._transport = transport or RequestsTransport(self._config)

    def __enter__(self) -> 'APIClient':
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()

    def close(self) -> None:
        """Close the transport."""
        self._transport.close()

    def send_request(
        self,
        url: str,
        options: Optional[Dict[str, Any]] = None
    ) -> TransportResponse:
        """
        Build, send and resolve one request.

        Args:
            url: Endpoint URL
            options: Request parameters

        Returns:
            The resolved response

        Raises:
            RemoteError: If the response is missing or unsuccessful
        """
        request = self.build_request(url, options)
        return self.resolve(self._transport.send(request))

    def get(self, table: str, options: Any = None) -> List[Dict[str, str]]:
        """
        Fetch objects from a table.

        Args:
            table: DIA table name, e.g. ``supporter``
            options: A key, a list of keys, or a mapping of get parameters
                (``key``, ``where``, ``limit``, ``orderBy`` ...)

        Returns:
            One dict per object
        """
        if self._skip_when_disabled('get', table):
            return []
        url, params = self._get_call(table, options)
        response = self.send_request(url, params)
        return parse_get_response(response.body, table)

    def process(self, table: str, options: Any = None) -> Optional[str]:
        """
        Create or update an object.

        Args:
            table: DIA table name
            options: Field values; ``key`` updates an existing object and
                ``link`` (a mapping of table to keys) links related objects

        Returns:
            Key of the saved object
        """
        if self._skip_when_disabled('process', table):
            return None
        url, params = self._process_call(table, options)
        response = self.send_request(url, params)
        return parse_process_response(response.body)

    def delete(self, table: str, options: Any = None) -> bool:
        """Delete objects by key. Returns True once the service accepts it."""
        if self._skip_when_disabled('delete', table):
            return False
        url, params = self._delete_call(table, options)
        self.send_request(url, params)
        return True

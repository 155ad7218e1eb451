"""Asynchronous transport on top of aiohttp."""
from typing import Optional

import aiohttp
from multidict import CIMultiDict

from ...logging import get_logger
from ..config import APIConfig
from ..request.models import APIRequest, TransportResponse
from ..session import SessionFactory


class AiohttpTransport:
    """
    Transport backed by an ``aiohttp.ClientSession``.

    The session is created on first use, inside the running event loop.
    Repeated header fields are sent as separate lines. Redirects are
    returned as they are, never followed.
    """

    def __init__(
        self,
        config: Optional[APIConfig] = None,
        session: Optional[aiohttp.ClientSession] = None
    ):
        """Initialize transport."""
        self._config = config or APIConfig.default()
        self._session = session
        self._owns_session = session is None
        self._logger = get_logger('diapy.transport')

    async def _ensure_session(self) -> aiohttp.ClientSession:
        """Ensure session is created and open."""
        if self._session is None or self._session.closed:
            self._session = SessionFactory.create_async_session(self._config)
            self._owns_session = True
        return self._session

    async def send(self, request: APIRequest) -> TransportResponse:
        """Send a request and wrap the response."""
        session = await self._ensure_session()
        self._logger.debug("%s %s", request.method, request.path)
        async with session.request(
            request.method,
            request.url,
            data=request.body.encode('utf-8'),
            headers=CIMultiDict(request.headers),
            allow_redirects=False
        ) as response:
            body = await response.text()
            return TransportResponse(
                status=response.status,
                body=body,
                reason=response.reason or '',
                url=request.url,
                headers=CIMultiDict(response.headers)
            )

    async def close(self) -> None:
        """Close the session if this transport created it."""
        if self._owns_session and self._session and not self._session.closed:
            await self._session.close()
        self._session = None

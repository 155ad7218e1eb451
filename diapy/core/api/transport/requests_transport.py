"""Synchronous transport on top of requests."""
from typing import Optional

import requests
from multidict import CIMultiDict

from ...logging import get_logger
from ..config import APIConfig
from ..request.models import APIRequest, TransportResponse
from ..session import SessionFactory


class RequestsTransport:
    """
    Transport backed by a ``requests.Session``.

    requests keeps headers in a plain case-insensitive dict, so repeated
    ``Cookie`` fields are folded into a single ``; `` separated line.
    Redirects are returned as they are, never followed.
    """

    def __init__(
        self,
        config: Optional[APIConfig] = None,
        session: Optional[requests.Session] = None
    ):
        """Initialize transport."""
        self._config = config or APIConfig.default()
        self._session = session or SessionFactory.create_sync_session(self._config)
        self._logger = get_logger('diapy.transport')

    @staticmethod
    def _flatten_headers(request: APIRequest):
        headers = {}
        for name in request.headers.keys():
            if name in headers:
                continue
            values = request.headers.getall(name)
            separator = '; ' if name.lower() == 'cookie' else ', '
            headers[name] = separator.join(values)
        return headers

    @staticmethod
    def _collect_headers(response: requests.Response) -> CIMultiDict:
        headers = CIMultiDict()
        raw_headers = getattr(response.raw, 'headers', None)
        if raw_headers is not None and hasattr(raw_headers, 'getlist'):
            for name in raw_headers.keys():
                for value in raw_headers.getlist(name):
                    headers.add(name, value)
        else:
            headers.extend(response.headers.items())
        return headers

    def send(self, request: APIRequest) -> TransportResponse:
        """Send a request and wrap the response."""
        self._logger.debug("%s %s", request.method, request.path)
        response = self._session.request(
            request.method,
            request.url,
            data=request.body.encode('utf-8'),
            headers=self._flatten_headers(request),
            timeout=self._config.timeout.to_requests_timeout(),
            allow_redirects=False
        )
        return TransportResponse(
            status=response.status_code,
            body=response.text,
            reason=response.reason or '',
            url=request.url,
            headers=self._collect_headers(response)
        )

    def close(self) -> None:
        """Close the underlying session."""
        self._session.close()

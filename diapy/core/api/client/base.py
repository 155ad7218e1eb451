"""Shared state and helpers of the sync and async clients."""
import logging
from typing import Any, Dict, List, Optional

from ...logging import get_logger
from ..config import APIConfig, Credentials
from ..options import (
    process_delete_options,
    process_get_options,
    process_process_options,
)
from ..request import RequestBuilder, ResponseHandler
from ..session import SessionState


class BaseAPIClient:
    """
    Owns credentials, session cookies, the request builder and the
    response handler.

    The disabled switch is process-wide. ``send_request`` ignores it;
    ``get``, ``process`` and ``delete`` skip the network while it is on.
    """

    def __init__(
        self,
        credentials: Credentials,
        config: Optional[APIConfig] = None
    ):
        """
        Initialize client state.

        Args:
            credentials: Account used for every request
            config: API configuration (uses defaults if not provided)
        """
        self._credentials = credentials
        self._config = config or APIConfig.default()
        self._session_state = SessionState()
        self._builder = RequestBuilder(credentials, self._session_state, self._config)
        self._handler = ResponseHandler(self._session_state)
        self._logger = get_logger('diapy.api')
        # Only set level if root logger has no handlers (basicConfig not called)
        root_logger = logging.getLogger()
        if not root_logger.handlers:
            self._logger.setLevel(self._config.log_level)

    @property
    def config(self) -> APIConfig:
        """Get current configuration."""
        return self._config

    @property
    def credentials(self) -> Credentials:
        """Get account credentials."""
        return self._credentials

    @property
    def session_state(self) -> SessionState:
        """Get session state."""
        return self._session_state

    @property
    def cookies(self) -> List[str]:
        """Cookies sent with the next request."""
        return self._session_state.cookies

    @property
    def urls(self) -> Dict[str, str]:
        """Endpoint URLs keyed by name."""
        return self._config.urls

    @classmethod
    def disable(cls) -> None:
        """Stop every client in the process from posting to DIA."""
        SessionState.disable()

    @classmethod
    def enable(cls) -> None:
        """Allow clients to post to DIA again."""
        SessionState.enable()

    @classmethod
    def is_disabled(cls) -> bool:
        """Whether posting to DIA is disabled process-wide."""
        return SessionState.is_disabled()

    def build_request(self, url: str, options: Optional[Dict[str, Any]] = None):
        """Build a request without sending it."""
        return self._builder.build(url, options)

    def resolve(self, response):
        """Resolve a transport response, updating cookies."""
        return self._handler.resolve(response)

    def _skip_when_disabled(self, operation: str, table: str) -> bool:
        if self.is_disabled():
            self._logger.warning("DIA is disabled, skipping %s on %s", operation, table)
            return True
        return False

    def _get_call(self, table: str, options: Any):
        return self._config.url_for('get'), process_get_options(table, options)

    def _process_call(self, table: str, options: Any):
        return self._config.url_for('process'), process_process_options(table, options)

    def _delete_call(self, table: str, options: Any):
        return self._config.url_for('delete'), process_delete_options(table, options)

"""Request builder for API requests."""
from typing import Any, Dict, Optional

from ...logging import get_logger
from ..config import APIConfig, Credentials
from ..encoding import encode_form
from ..session import SessionState
from .models import APIRequest, FORM_CONTENT_TYPE


class RequestBuilder:
    """Builds API requests."""

    def __init__(
        self,
        credentials: Credentials,
        session_state: SessionState,
        config: Optional[APIConfig] = None
    ):
        """Initializes request builder."""
        self.credentials = credentials
        self.session_state = session_state
        self.config = config or APIConfig.default()
        self.logger = get_logger('diapy.request')

    def build_body(self, options: Dict[str, Any]) -> str:
        """Builds request body."""
        return encode_form(options)

    def build(self, url: str, options: Optional[Dict[str, Any]] = None) -> APIRequest:
        """
        Builds a POST request carrying options and credentials.

        Args:
            url: Endpoint URL
            options: Request parameters; ``user`` and ``password`` are
                always overwritten with the client credentials

        Returns:
            Request ready for a transport
        """
        body_options = dict(options or {})
        body_options['user'] = self.credentials.username
        body_options['password'] = self.credentials.password

        request = APIRequest(url=url, body=self.build_body(body_options))
        for name, value in self.config.get_headers().items():
            request.headers[name] = value
        for cookie in self.session_state:
            request.add_field('Cookie', cookie)
        request.set_content_type(FORM_CONTENT_TYPE)

        self.logger.debug(
            "Built %s %s with %d cookie(s)",
            request.method, request.path, len(self.session_state)
        )
        return request

"""Response handler for API responses."""
from typing import Optional

from ...exceptions import RemoteError
from ...logging import get_logger
from ..session import SessionState
from .models import TransportResponse


class ResponseHandler:
    """Resolves responses and harvests their cookies."""

    COOKIE_FIELD = 'Set-Cookie'

    def __init__(self, session_state: SessionState):
        """Initializes response handler."""
        self.session_state = session_state
        self.logger = get_logger('diapy.response')

    def resolve(self, response: Optional[TransportResponse]) -> TransportResponse:
        """
        Resolves a response.

        On success the session cookies are replaced by the cookies the
        response carries (none if it carries none).

        Returns:
            The response itself

        Raises:
            RemoteError: If there is no response or it is not a success
        """
        if response is None:
            self.logger.warning("No response received")
            raise RemoteError("No response received")

        if not response.ok:
            self.logger.warning("Request failed with status %s", response.status)
            response.error()
            raise RemoteError(
                f"Request failed with status {response.status}",
                status=response.status
            )

        cookies = response.get_fields(self.COOKIE_FIELD) or []
        self.session_state.replace(cookies)
        self.logger.debug("Session now holds %d cookie(s)", len(cookies))
        return response

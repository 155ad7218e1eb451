"""
Request and response models.

Both carry their headers in a ``CIMultiDict`` so that repeated fields
(one ``Cookie`` per stored cookie, several ``Set-Cookie`` lines) survive.
"""
from dataclasses import dataclass, field
from typing import List, Optional
from urllib.parse import urlparse

from multidict import CIMultiDict

from ...exceptions import RemoteError

FORM_CONTENT_TYPE = 'application/x-www-form-urlencoded'


@dataclass
class APIRequest:
    """Fully built outbound request."""
    url: str
    body: str = ''
    method: str = 'POST'
    headers: CIMultiDict = field(default_factory=CIMultiDict)

    @property
    def path(self) -> str:
        """Path component of the target URL."""
        return urlparse(self.url).path

    @property
    def content_type(self) -> Optional[str]:
        """Content-Type header, if set."""
        return self.headers.get('Content-Type')

    def set_content_type(self, content_type: str) -> None:
        """Set (or overwrite) the Content-Type header."""
        self.headers['Content-Type'] = content_type

    def add_field(self, name: str, value: str) -> None:
        """Add a header field, keeping any existing field of the same name."""
        self.headers.add(name, value)

    def get_fields(self, name: str) -> List[str]:
        """All values of a header field."""
        return self.headers.getall(name, [])


@dataclass
class TransportResponse:
    """
    Response returned by a transport.

    Success is decided once, from the status code, when the transport
    creates the object.
    """
    status: int
    body: str = ''
    reason: str = ''
    url: str = ''
    headers: CIMultiDict = field(default_factory=CIMultiDict)

    @property
    def ok(self) -> bool:
        """True for 2xx responses."""
        return 200 <= self.status < 300

    def get_fields(self, name: str) -> List[str]:
        """All values of a (possibly repeated) header field."""
        return self.headers.getall(name, [])

    def error(self) -> None:
        """
        Raise the error this response represents.

        Raises:
            RemoteError: Always
        """
        raise RemoteError(
            f"DIA request to {self.url or 'service'} failed: "
            f"{self.status} {self.reason}".rstrip(),
            status=self.status,
            reason=self.reason,
            body=self.body
        )

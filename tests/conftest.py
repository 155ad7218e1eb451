"""Pytest fixtures for diapy tests."""
import pytest
from multidict import CIMultiDict

from diapy.core.api import APIConfig, Credentials, SessionState, TransportResponse


class FakeTransport:
    """Transport that records requests and replays queued responses."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.requests = []
        self.closed = False

    def send(self, request):
        self.requests.append(request)
        return self.responses.pop(0)

    def close(self):
        self.closed = True


class FakeAsyncTransport(FakeTransport):
    """Async flavor of FakeTransport."""

    async def send(self, request):
        return FakeTransport.send(self, request)

    async def close(self):
        FakeTransport.close(self)


def make_response(status=200, body='', cookies=(), reason='OK'):
    """Build a transport response with optional Set-Cookie lines."""
    headers = CIMultiDict()
    for cookie in cookies:
        headers.add('Set-Cookie', cookie)
    return TransportResponse(status=status, body=body, reason=reason, headers=headers)


@pytest.fixture(autouse=True)
def reset_disabled_switch():
    """Keep the process-wide switch enabled between tests."""
    SessionState.reset()
    yield
    SessionState.reset()


@pytest.fixture
def credentials():
    """Returns test account credentials."""
    return Credentials(username='test@domain.org', password='p@ss word')


@pytest.fixture
def config():
    """Returns configuration pointing at a test node."""
    return APIConfig.for_domain('sandbox.democracyinaction.org')


@pytest.fixture
def supporter_xml():
    """Returns a simple get response for two supporters."""
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        '<data organization_KEY="962">\n'
        '  <supporter>\n'
        '    <item>\n'
        '      <supporter_KEY>101</supporter_KEY>\n'
        '      <Email>austin@domain.org</Email>\n'
        '      <First_Name>Austin</First_Name>\n'
        '    </item>\n'
        '    <item>\n'
        '      <supporter_KEY>102</supporter_KEY>\n'
        '      <Email>seth@domain.org</Email>\n'
        '      <First_Name></First_Name>\n'
        '    </item>\n'
        '    <count>2</count>\n'
        '  </supporter>\n'
        '</data>\n'
    )


@pytest.fixture
def response_factory():
    """Returns a function building transport responses."""
    return make_response


@pytest.fixture
def transport_factory():
    """Returns a function building fake sync transports."""
    return FakeTransport


@pytest.fixture
def async_transport_factory():
    """Returns a function building fake async transports."""
    return FakeAsyncTransport

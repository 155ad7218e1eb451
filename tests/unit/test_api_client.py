"""Tests for the synchronous API client."""
from unittest.mock import patch

import pytest

from diapy.core.api import APIClient, DemocracyInAction
from diapy.core.exceptions import RemoteError


class TestSendRequest:
    """Test suite for APIClient.send_request."""

    @pytest.fixture
    def transport(self, transport_factory, response_factory):
        """Create transport answering once with cookies."""
        return transport_factory(response_factory(body='ok', cookies=['JSESSIONID=abc']))

    @pytest.fixture
    def client(self, credentials, config, transport):
        """Create client instance."""
        return APIClient(credentials, config, transport=transport)

    def test_is_sent(self, client, transport):
        """Test the built request reaches the transport."""
        client.send_request(client.urls['get'], {'key': '5'})

        request = transport.requests[0]
        assert request.path == '/dia/api/get.jsp'
        assert request.body.startswith('key=5&user=')

    def test_is_resolved(self, client, transport):
        """Test the transport response goes through resolve."""
        with patch.object(client, 'resolve', wraps=client.resolve) as mock_resolve:
            response = client.send_request(client.urls['get'], {})

        mock_resolve.assert_called_once_with(response)
        assert response.body == 'ok'

    def test_cookies_carry_to_next_request(self, credentials, config, transport_factory, response_factory):
        """Test cookies from one response are sent with the next request."""
        transport = transport_factory(
            response_factory(cookies=['JSESSIONID=abc', 'READ=1']),
            response_factory(cookies=['JSESSIONID=def']),
        )
        client = APIClient(credentials, config, transport=transport)

        client.send_request(client.urls['get'], {})
        client.send_request(client.urls['get'], {})

        assert transport.requests[0].get_fields('Cookie') == []
        assert transport.requests[1].get_fields('Cookie') == ['JSESSIONID=abc', 'READ=1']
        assert client.cookies == ['JSESSIONID=def']

    def test_failure_raises(self, credentials, config, transport_factory, response_factory):
        """Test failures raise RemoteError and keep cookies."""
        transport = transport_factory(response_factory(status=503, reason='Unavailable'))
        client = APIClient(credentials, config, transport=transport)
        client.cookies.append('kept=1')

        with pytest.raises(RemoteError):
            client.send_request(client.urls['process'], {})

        assert client.cookies == ['kept=1']

    def test_missing_response_raises(self, credentials, config, transport_factory):
        """Test a transport returning nothing raises RemoteError."""
        client = APIClient(credentials, config, transport=transport_factory(None))

        with pytest.raises(RemoteError, match='No response'):
            client.send_request(client.urls['get'], {})

    def test_send_ignores_disabled_switch(self, client, transport):
        """Test disabling is advisory for send_request."""
        APIClient.disable()

        client.send_request(client.urls['get'], {})

        assert len(transport.requests) == 1

    def test_context_manager_closes(self, client, transport):
        """Test leaving the block closes the transport."""
        with client:
            pass

        assert transport.closed is True

    def test_alias(self):
        """Test the DemocracyInAction alias."""
        assert DemocracyInAction is APIClient


class TestOperations:
    """Test suite for get, process and delete."""

    def test_get(self, credentials, config, transport_factory, response_factory, supporter_xml):
        """Test get posts table options and parses items."""
        transport = transport_factory(response_factory(body=supporter_xml))
        client = APIClient(credentials, config, transport=transport)

        items = client.get('supporter', [101, 102])

        body = transport.requests[0].body
        assert transport.requests[0].url == config.url_for('get')
        assert 'key=101%2C+102' in body
        assert 'table=supporter' in body
        assert 'simple=true' in body
        assert [item['supporter_KEY'] for item in items] == ['101', '102']

    def test_process(self, credentials, config, transport_factory, response_factory):
        """Test process sends links and returns the key."""
        transport = transport_factory(response_factory(body='\n555\n'))
        client = APIClient(credentials, config, transport=transport)

        key = client.process('supporter', {'Email': 'a@b.org', 'link': {'groups': [12, 13]}})

        body = transport.requests[0].body
        assert transport.requests[0].url == config.url_for('process')
        assert body.startswith('link=groups%7C12&link=groups%7C13&Email=a%40b.org')
        assert key == '555'

    def test_delete(self, credentials, config, transport_factory, response_factory):
        """Test delete posts keys to the delete endpoint."""
        transport = transport_factory(response_factory(body='Success'))
        client = APIClient(credentials, config, transport=transport)

        assert client.delete('supporter', {'key': ['7', '8']}) is True
        assert transport.requests[0].url == config.url_for('delete')
        assert 'key=7%2C+8' in transport.requests[0].body

    def test_operations_skip_when_disabled(self, credentials, config, transport_factory):
        """Test disabled clients never touch the transport."""
        transport = transport_factory()
        client = APIClient(credentials, config, transport=transport)
        APIClient.disable()

        assert client.get('supporter') == []
        assert client.process('supporter', {'Email': 'a@b.org'}) is None
        assert client.delete('supporter', 5) is False
        assert transport.requests == []

"""Session factory using Factory Pattern."""
from http.cookiejar import DefaultCookiePolicy

import aiohttp
import requests

from ..config import APIConfig


class SessionFactory:
    """
    Factory for creating HTTP sessions.

    Sessions never store cookies themselves and never retry; cookie state
    belongs to SessionState.
    """

    @staticmethod
    def create_sync_session(config: APIConfig) -> requests.Session:
        """Creates a synchronous HTTP session."""
        session = requests.Session()
        session.cookies.set_policy(DefaultCookiePolicy(allowed_domains=[]))
        session.verify = config.ssl.to_requests_verify()
        return session

    @staticmethod
    def create_async_session(config: APIConfig) -> aiohttp.ClientSession:
        """Creates an asynchronous HTTP session."""
        connector = aiohttp.TCPConnector(ssl=config.ssl.create_ssl_context())
        return aiohttp.ClientSession(
            connector=connector,
            cookie_jar=aiohttp.DummyCookieJar(),
            timeout=config.timeout.to_aiohttp_timeout()
        )

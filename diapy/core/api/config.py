"""
API configuration module.

Provides configuration for the Democracy in Action API client:
endpoint locations, credentials, timeouts and SSL behavior.
"""
import logging
import ssl
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple, Union

DEFAULT_DOMAIN = 'https://salsa.democracyinaction.org'
DEFAULT_USER_AGENT = 'diapy/1.0.0'


@dataclass(frozen=True)
class Credentials:
    """
    Account credentials.

    Injected into every request body as ``user`` and ``password``.
    """
    username: str
    password: str = field(repr=False)


@dataclass
class SSLConfig:
    """
    SSL/TLS configuration.
    """
    verify: bool = True
    ca_file: Optional[str] = None

    def create_ssl_context(self) -> Union[ssl.SSLContext, bool]:
        """Create SSL context from configuration."""
        if not self.verify:
            return False

        context = ssl.create_default_context()
        if self.ca_file:
            context.load_verify_locations(self.ca_file)
        return context

    def to_requests_verify(self) -> Union[str, bool]:
        """Convert to the ``verify`` argument understood by requests."""
        if not self.verify:
            return False
        return self.ca_file or True


@dataclass
class TimeoutConfig:
    """
    Timeout configuration.

    Applied by the transports only; the request pipeline itself never waits.
    """
    total: float = 60.0  # Total request timeout
    connect: float = 10.0  # Connection timeout

    def to_aiohttp_timeout(self):
        """Convert to aiohttp ClientTimeout."""
        import aiohttp
        return aiohttp.ClientTimeout(total=self.total, connect=self.connect)

    def to_requests_timeout(self) -> Tuple[float, float]:
        """Convert to a requests (connect, read) timeout tuple."""
        return (self.connect, self.total)


@dataclass
class APIConfig:
    """
    Complete API configuration.

    Centralizes endpoint locations and transport options for the client.
    """
    # Service location
    domain: str = DEFAULT_DOMAIN
    get_path: str = '/dia/api/get.jsp'
    process_path: str = '/dia/api/process.jsp'
    delete_path: str = '/dia/api/delete.jsp'

    # User agent
    user_agent: str = DEFAULT_USER_AGENT

    # Sub-configurations
    ssl: SSLConfig = field(default_factory=SSLConfig)
    timeout: TimeoutConfig = field(default_factory=TimeoutConfig)

    # Additional headers
    extra_headers: Dict[str, str] = field(default_factory=dict)

    # Logging
    log_level: int = logging.INFO

    @classmethod
    def default(cls) -> 'APIConfig':
        """Create default configuration."""
        return cls()

    @classmethod
    def for_domain(cls, domain: str, **kwargs) -> 'APIConfig':
        """Create configuration pointing at another DIA node."""
        if '://' not in domain:
            domain = f"https://{domain}"
        return cls(domain=domain.rstrip('/'), **kwargs)

    @classmethod
    def insecure(cls, **kwargs) -> 'APIConfig':
        """Create configuration with SSL verification disabled."""
        return cls(ssl=SSLConfig(verify=False), **kwargs)

    def url_for(self, endpoint: str) -> str:
        """
        Build the absolute URL of a named endpoint.

        Args:
            endpoint: One of ``get``, ``process`` or ``delete``

        Raises:
            KeyError: If the endpoint name is unknown
        """
        paths = {
            'get': self.get_path,
            'process': self.process_path,
            'delete': self.delete_path,
        }
        return f"{self.domain.rstrip('/')}{paths[endpoint]}"

    @property
    def urls(self) -> Dict[str, str]:
        """All endpoint URLs keyed by name."""
        return {name: self.url_for(name) for name in ('get', 'process', 'delete')}

    def get_headers(self) -> Dict[str, str]:
        """Headers sent with every request."""
        return {
            'User-Agent': self.user_agent,
            **self.extra_headers
        }

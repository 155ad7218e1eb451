"""DIA API module: request pipeline, transports and clients."""
from .client import APIClient
from .async_client import AsyncAPIClient
from .config import APIConfig, Credentials, SSLConfig, TimeoutConfig
from .encoding import encode_form, encode_link_pairs
from .options import (
    process_options,
    process_multiple_keys,
    process_get_options,
    process_process_options,
    process_delete_options,
)
from .request import APIRequest, TransportResponse, RequestBuilder, ResponseHandler
from .session import SessionState
from .transport import Transport, AsyncTransport, RequestsTransport, AiohttpTransport

# Alias named after the service
DemocracyInAction = APIClient

__all__ = [
    # Clients
    'APIClient',
    'AsyncAPIClient',
    'DemocracyInAction',

    # Configuration
    'APIConfig',
    'Credentials',
    'SSLConfig',
    'TimeoutConfig',

    # Encoding
    'encode_form',
    'encode_link_pairs',
    'process_options',
    'process_multiple_keys',
    'process_get_options',
    'process_process_options',
    'process_delete_options',

    # Requests
    'APIRequest',
    'TransportResponse',
    'RequestBuilder',
    'ResponseHandler',
    'SessionState',

    # Transports
    'Transport',
    'AsyncTransport',
    'RequestsTransport',
    'AiohttpTransport',
]

"""Request building and response resolution."""
from .models import APIRequest, TransportResponse, FORM_CONTENT_TYPE
from .request_builder import RequestBuilder
from .response_handler import ResponseHandler
from .response_parser import parse_get_response, parse_process_response

__all__ = [
    'APIRequest',
    'TransportResponse',
    'FORM_CONTENT_TYPE',
    'RequestBuilder',
    'ResponseHandler',
    'parse_get_response',
    'parse_process_response',
]

"""Remote API layer: HTTP client and error taxonomy."""

from api.client import OperatorClient, decode_body, error_for_response
from api.errors import (
    ConsoleError,
    MalformedResponseError,
    NetworkError,
    ServerError,
    ValidationError,
)

__all__ = [
    "OperatorClient",
    "decode_body",
    "error_for_response",
    "ConsoleError",
    "MalformedResponseError",
    "NetworkError",
    "ServerError",
    "ValidationError",
]

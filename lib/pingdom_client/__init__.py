from .client import PingdomClient
from .config_types import ClientConfig
from .credentials import SessionToken, StaticToken
from .errors import (
    ApiError,
    ConfigurationError,
    DecodeError,
    HandshakeError,
    InvalidRequestError,
    PingdomClientError,
    ValidationError,
)
from .logging_ import setup_logging

__version__ = "0.1.0"
__all__ = [
    "ApiError",
    "ClientConfig",
    "ConfigurationError",
    "DecodeError",
    "HandshakeError",
    "InvalidRequestError",
    "PingdomClient",
    "PingdomClientError",
    "SessionToken",
    "StaticToken",
    "ValidationError",
    "setup_logging",
]

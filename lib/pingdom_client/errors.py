from __future__ import annotations

from typing import Any

import httpx


class PingdomClientError(Exception):
    """Base client error."""


class ConfigurationError(PingdomClientError):
    """Client cannot be constructed from the supplied configuration."""


class HandshakeError(PingdomClientError):
    """A step of the session login handshake failed."""

    def __init__(self, step: int, message: str):
        super().__init__(f"login handshake step {step}: {message}")
        self.step = step
        self.message = message


class InvalidRequestError(PingdomClientError, ValueError):
    """Request URL could not be built."""


class ValidationError(PingdomClientError, ValueError):
    """Resource parameters rejected before any request was sent."""


class DecodeError(PingdomClientError, ValueError):
    """Response body is not the JSON shape the caller asked for."""

    def __init__(self, message: str, body: str | None = None, response: httpx.Response | None = None):
        super().__init__(message)
        self.body = body
        self.response = response


class ApiError(PingdomClientError):
    """Non-2xx response carrying the API's error envelope."""

    def __init__(
            self,
            status_code: int,
            status_desc: str,
            message: str,
            response: httpx.Response | None = None,
    ):
        super().__init__(f"{status_code} {status_desc}: {message}")
        self.status_code = status_code
        self.status_desc = status_desc
        self.message = message
        self.response = response

    @property
    def is_not_found(self) -> bool:
        return self.status_code == 404

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, ApiError):
            return NotImplemented
        return (self.status_code, self.status_desc, self.message) == (
            other.status_code,
            other.status_desc,
            other.message,
        )

    def __hash__(self) -> int:
        return hash((self.status_code, self.status_desc, self.message))

    def __repr__(self) -> str:
        return f"ApiError({self.status_code!r}, {self.status_desc!r}, {self.message!r})"

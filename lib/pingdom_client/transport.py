from __future__ import annotations

import logging

import httpx

logger = logging.getLogger(__name__)

USER_AGENT = "pingdom-client/0.1.0"


def default_http_client(timeout_s: float) -> httpx.Client:
    # The login handshake reads cookies and Location off redirect responses.
    return httpx.Client(
        timeout=timeout_s,
        headers={"User-Agent": USER_AGENT},
        follow_redirects=False,
    )


class Transport:
    def __init__(self, http: httpx.Client, *, owned: bool):
        self._http = http
        self._owned = owned

    @property
    def http(self) -> httpx.Client:
        return self._http

    def close(self) -> None:
        if self._owned:
            self._http.close()

    def send(self, request: httpx.Request) -> httpx.Response:
        # Non-streaming send: httpx reads the whole body and closes the stream.
        response = self._http.send(request)
        logger.debug("%s %s -> %s", request.method, request.url.copy_with(query=None), response.status_code)
        return response

from __future__ import annotations

import json
from typing import Callable

import httpx
import pytest

from pingdom_client import ClientConfig, PingdomClient
from pingdom_client.config_types import (
    ENV_API_TOKEN,
    ENV_API_TOKEN_ONLY,
    ENV_ORG_ID,
    ENV_PASSWORD,
    ENV_USERNAME,
)

API_BASE = "http://pingdom.test/api/3.1"
SESSION_BASE = "http://my.pingdom.test"
AUTH_URL = "http://sso.test/v1/login"

LOGIN_SESSION_ID = "qw4us4Ed7aLSGugMRDHkqM9G6mwuKdn9Hz90r6IHhRc%3D"
LOGIN_LOCATION = (
    "https://my.solarwinds.cloud/login?response_type=code&scope=openid%20swicus&client_id=pingdom"
    "&state=htILEppzoMPtb6UjOdM98XPS3Mcwkr3Y"
    "&redirect_uri=https%3A%2F%2Fmy.pingdom.com%2Fauth%2Fswicus%2Fcallback"
)
REDIRECT_URL = (
    "https://my.pingdom.com/auth/swicus/callback?code=70kRkkAB7OIv5YYTPR6LpHH-2jMbtaDEHScLDw1amfw"
    "&scope=openid+swicus&state=htILEppzoMPtb6UjOdM98XPS3Mcwkr3Y"
)

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch) -> None:
    for name in (ENV_API_TOKEN, ENV_API_TOKEN_ONLY, ENV_USERNAME, ENV_PASSWORD, ENV_ORG_ID):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def make_http():
    clients: list[httpx.Client] = []

    def _make(handler: Handler, **kwargs) -> httpx.Client:
        http = httpx.Client(transport=httpx.MockTransport(handler), **kwargs)
        clients.append(http)
        return http

    yield _make
    for http in clients:
        http.close()


def login_handler(api: Handler | None = None, *, jwt: str = "my_test_token", seen: list | None = None) -> Handler:
    """Serve the three login endpoints and hand anything else to ``api``."""

    def _handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        path = request.url.path
        if request.url.host == "my.pingdom.test" and path == "/auth/login":
            return httpx.Response(
                302,
                headers=[
                    ("Set-Cookie", f"pingdom_login_session_id={LOGIN_SESSION_ID}; Path=/; HttpOnly; Secure"),
                    ("Location", LOGIN_LOCATION),
                ],
                text="{}",
            )
        if request.url.host == "sso.test" and path == "/v1/login":
            return httpx.Response(200, json={"RedirectUrl": REDIRECT_URL})
        if request.url.host == "my.pingdom.test" and path == "/auth/swicus/callback":
            headers = [("Set-Cookie", f"jwt={jwt}")] if jwt else []
            return httpx.Response(200, headers=headers, text="{}")
        if api is not None:
            return api(request)
        return httpx.Response(404, json={"error": {"statuscode": 404, "statusdesc": "Not Found", "errormessage": path}})

    return _handler


@pytest.fixture
def token_client(make_http):
    def _make(handler: Handler, *, token: str = "my_api_token") -> PingdomClient:
        cfg = ClientConfig(api_token=token, base_url=API_BASE, http_client=make_http(handler))
        return PingdomClient(cfg)

    return _make


@pytest.fixture
def session_client(make_http):
    def _make(handler: Handler | None = None, **kwargs) -> PingdomClient:
        cfg = ClientConfig(
            username="test_user",
            password="test_pwd",
            org_id="test_org",
            base_url=SESSION_BASE,
            auth_url=AUTH_URL,
            http_client=make_http(login_handler(handler, **kwargs)),
        )
        return PingdomClient(cfg)

    return _make


def json_body(request: httpx.Request) -> dict:
    return json.loads(request.content.decode("utf-8"))

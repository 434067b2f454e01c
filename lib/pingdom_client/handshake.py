"""Session login handshake for the my.pingdom.com API.

The single-sign-on provider exposes no token endpoint for this flow, so the
session token is collected from cookies and redirect headers:

1. ``GET {base}/auth/login`` answers with a redirect carrying the
   ``pingdom_login_session_id`` cookie and a ``Location`` whose query string
   holds the login parameters.
2. ``POST {auth_url}`` with the credentials and that query string returns
   ``{"RedirectUrl": "..."}``.
3. ``GET {base}/auth/swicus/callback?<query of RedirectUrl>`` with the login
   session cookie and the organisation cookie.
4. The ``jwt`` cookie of that response is the session token.

Redirects are never followed: the state lives in the redirect responses.
"""
from __future__ import annotations

import json
import logging

import httpx

from .credentials import SESSION_COOKIE_NAME, SessionCredentials, SessionToken
from .errors import HandshakeError

logger = logging.getLogger(__name__)

LOGIN_PATH = "/auth/login"
CALLBACK_PATH = "/auth/swicus/callback"
LOGIN_SESSION_COOKIE = "pingdom_login_session_id"
ORG_ID_COOKIE = "login_session_swicus_org_id"


def get_cookie(response: httpx.Response, name: str) -> str | None:
    # Raw Set-Cookie headers: a Domain attribute for another host must not hide the value.
    for header in response.headers.get_list("set-cookie"):
        key, sep, value = header.split(";", 1)[0].partition("=")
        if sep and key.strip() == name:
            return value.strip().strip('"')
    return None


def _send(http: httpx.Client, step: int, request: httpx.Request) -> httpx.Response:
    logger.debug("login handshake step %d: %s %s", step, request.method, request.url.copy_with(query=None))
    try:
        return http.send(request, follow_redirects=False)
    except httpx.HTTPError as exc:
        raise HandshakeError(step, f"request failed: {exc}") from exc


def _require_cookie(response: httpx.Response, step: int, name: str) -> str:
    value = get_cookie(response, name)
    if not value:
        raise HandshakeError(step, f"missing cookie {name!r} in response")
    return value


def _start_login(http: httpx.Client, base_url: str) -> tuple[str, str]:
    response = _send(http, 1, httpx.Request("GET", f"{base_url}{LOGIN_PATH}"))
    session_cookie = _require_cookie(response, 1, LOGIN_SESSION_COOKIE)

    location = response.headers.get("location")
    if not location:
        raise HandshakeError(1, f"missing Location header in {response.status_code} response")
    try:
        query = httpx.URL(location).query.decode("ascii")
    except (httpx.InvalidURL, UnicodeDecodeError) as exc:
        raise HandshakeError(1, f"malformed Location header {location!r}") from exc
    return session_cookie, query


def _redirect_url(data: object) -> str | None:
    if not isinstance(data, dict):
        return None
    for key, value in data.items():
        if isinstance(key, str) and key.lower() == "redirecturl" and isinstance(value, str):
            return value
    return None


def _submit_credentials(
        http: httpx.Client,
        auth_url: str,
        credentials: SessionCredentials,
        login_query: str,
) -> str:
    payload = {
        "email": credentials.username,
        "password": credentials.password,
        "loginQueryParams": login_query,
    }
    request = httpx.Request(
        "POST",
        auth_url,
        content=json.dumps(payload).encode("utf-8"),
        headers={"Content-Type": "application/json"},
    )
    response = _send(http, 2, request)
    if not 200 <= response.status_code <= 299:
        raise HandshakeError(2, f"login rejected with status {response.status_code}")

    try:
        data = json.loads(response.text)
    except ValueError as exc:
        raise HandshakeError(2, f"invalid JSON in login response: {exc}") from exc

    redirect = _redirect_url(data)
    if not redirect:
        raise HandshakeError(2, "login response has no RedirectUrl")
    try:
        return httpx.URL(redirect).query.decode("ascii")
    except (httpx.InvalidURL, UnicodeDecodeError) as exc:
        raise HandshakeError(2, f"malformed RedirectUrl {redirect!r}") from exc


def _fetch_session_token(
        http: httpx.Client,
        base_url: str,
        session_cookie: str,
        org_id: str,
        callback_query: str,
) -> str:
    cookie = f"{LOGIN_SESSION_COOKIE}={session_cookie}; {ORG_ID_COOKIE}={org_id}"
    try:
        url = httpx.URL(f"{base_url}{CALLBACK_PATH}?{callback_query}")
    except httpx.InvalidURL as exc:
        raise HandshakeError(3, f"malformed callback URL: {exc}") from exc
    response = _send(http, 3, httpx.Request("GET", url, headers={"Cookie": cookie}))
    return _require_cookie(response, 4, SESSION_COOKIE_NAME)


def obtain_session_token(
        http: httpx.Client,
        *,
        base_url: str,
        auth_url: str,
        credentials: SessionCredentials,
) -> SessionToken:
    # httpx stores every Set-Cookie it sees; the caller's jar leaves as it came.
    jar = http.cookies.jar
    saved = list(jar)
    try:
        session_cookie, login_query = _start_login(http, base_url)
        callback_query = _submit_credentials(http, auth_url, credentials, login_query)
        token = _fetch_session_token(http, base_url, session_cookie, credentials.org_id, callback_query)
    finally:
        jar.clear()
        for cookie in saved:
            jar.set_cookie(cookie)
    logger.debug("login handshake complete for %s", credentials.username)
    return SessionToken(token)

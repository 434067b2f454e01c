from __future__ import annotations

import logging

import httpx
import pytest

from conftest import API_BASE, AUTH_URL, login_handler
from pingdom_client import (
    ClientConfig,
    ConfigurationError,
    PingdomClient,
    SessionToken,
    StaticToken,
)
from pingdom_client.config_types import DEFAULT_API_URL, DEFAULT_SESSION_BASE_URL


def _ok(_request: httpx.Request) -> httpx.Response:
    return httpx.Response(200, json={})


def test_explicit_token_is_used() -> None:
    client = PingdomClient(ClientConfig(api_token="token"))
    try:
        assert client.credential == StaticToken("token")
        assert client.base_url == DEFAULT_API_URL
        assert client.uses_static_token
        assert not client.uses_session
        assert client.checks is not None
        assert client.integrations is not None
    finally:
        client.close()


def test_token_only_wins_over_primary_token(make_http) -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={})

    client = PingdomClient(
        ClientConfig(
            api_token="token",
            api_token_only="token_only",
            base_url=API_BASE,
            http_client=make_http(handler),
        )
    )
    client.do(client.new_request("GET", "/"), dict)
    client.do(client.new_json_request("POST", "/checks", "{}"), dict)
    client.do(client.new_request_multi("DELETE", "/maintenance.occurrences", {"occurrenceids": ["1"]}), dict)

    assert client.credential == StaticToken("token_only")
    assert [r.headers["authorization"] for r in seen] == ["Bearer token_only"] * 3


def test_both_tokens_set_logs_warning(caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="pingdom_client"):
        client = PingdomClient(ClientConfig(api_token="token-secret", api_token_only="only-secret"))
    client.close()

    assert "token-only" in caplog.text
    assert "secret" not in caplog.text


def test_env_token_used_when_config_empty(monkeypatch) -> None:
    monkeypatch.setenv("PINGDOM_API_TOKEN", "envSetToken")
    client = PingdomClient(ClientConfig())
    client.close()
    assert client.credential == StaticToken("envSetToken")


def test_env_token_only_used_when_config_empty(monkeypatch) -> None:
    monkeypatch.setenv("PINGDOM_API_TOKEN_ONLY", "envSetTokenOnly")
    client = PingdomClient()
    client.close()
    assert client.credential == StaticToken("envSetTokenOnly")


def test_env_does_not_override_explicit_token(monkeypatch) -> None:
    monkeypatch.setenv("PINGDOM_API_TOKEN", "envSetToken")
    client = PingdomClient(ClientConfig(api_token="explicitToken"))
    client.close()
    assert client.credential == StaticToken("explicitToken")


def test_env_token_only_beats_explicit_primary_token(monkeypatch) -> None:
    monkeypatch.setenv("PINGDOM_API_TOKEN_ONLY", "envSetTokenOnly")
    client = PingdomClient(ClientConfig(api_token="explicitToken"))
    client.close()
    assert client.credential == StaticToken("envSetTokenOnly")


def test_injected_environ_is_consulted() -> None:
    client = PingdomClient(ClientConfig(), environ={"PINGDOM_API_TOKEN": "from-mapping"})
    client.close()
    assert client.credential == StaticToken("from-mapping")


def test_no_credentials_is_a_configuration_error() -> None:
    with pytest.raises(ConfigurationError) as exc:
        PingdomClient(ClientConfig())
    assert "PINGDOM_API_TOKEN" in str(exc.value)
    assert "SOLARWINDS_USER" in str(exc.value)


def test_empty_strings_count_as_missing(monkeypatch) -> None:
    monkeypatch.setenv("PINGDOM_API_TOKEN", "")
    with pytest.raises(ConfigurationError):
        PingdomClient(ClientConfig(api_token="", api_token_only=""))


def test_partial_session_credentials_name_the_missing_fields(monkeypatch) -> None:
    monkeypatch.setenv("SOLARWINDS_USER", "someone")
    with pytest.raises(ConfigurationError) as exc:
        PingdomClient(ClientConfig())
    assert "SOLARWINDS_PASSWD" in str(exc.value)
    assert "SOLARWINDS_ORG_ID" in str(exc.value)
    assert "SOLARWINDS_USER" not in str(exc.value)


@pytest.mark.parametrize("base_url", ["not a url", "ftp://pingdom.test", "http://"])
def test_malformed_base_url_is_a_configuration_error(base_url: str) -> None:
    with pytest.raises(ConfigurationError):
        PingdomClient(ClientConfig(api_token="token", base_url=base_url))


def test_malformed_auth_url_is_a_configuration_error(make_http) -> None:
    calls: list[httpx.Request] = []
    cfg = ClientConfig(
        username="u",
        password="p",
        org_id="o",
        auth_url="mailto:someone",
        http_client=make_http(lambda r: calls.append(r) or httpx.Response(500)),
    )
    with pytest.raises(ConfigurationError):
        PingdomClient(cfg)
    assert calls == []


def test_session_mode_defaults_to_my_pingdom(make_http, monkeypatch) -> None:
    monkeypatch.setenv("SOLARWINDS_USER", "test_user")
    monkeypatch.setenv("SOLARWINDS_PASSWD", "test_pwd")
    monkeypatch.setenv("SOLARWINDS_ORG_ID", "test_org")
    hosts: list[str] = []
    handler = login_handler()

    def rewrite(request: httpx.Request) -> httpx.Response:
        hosts.append(request.url.host)
        # Serve the default host with the fixture's login endpoints.
        if request.url.host == "my.pingdom.com":
            request.url = request.url.copy_with(scheme="http", host="my.pingdom.test")
        return handler(request)

    client = PingdomClient(ClientConfig(auth_url=AUTH_URL, http_client=make_http(rewrite)))
    assert client.base_url == DEFAULT_SESSION_BASE_URL
    assert client.credential == SessionToken("my_test_token")
    assert hosts == ["my.pingdom.com", "sso.test", "my.pingdom.com"]


def test_default_http_client_does_not_follow_redirects() -> None:
    client = PingdomClient(ClientConfig(api_token="token", timeout_s=5))
    try:
        http = client._t.http
        assert http.follow_redirects is False
        assert http.timeout.read == 5
        assert http.headers["user-agent"].startswith("pingdom-client/")
    finally:
        client.close()


def test_close_only_closes_owned_http_client(make_http) -> None:
    external = make_http(_ok)
    with PingdomClient(ClientConfig(api_token="token", http_client=external)):
        pass
    assert not external.is_closed

    with PingdomClient(ClientConfig(api_token="token")) as client:
        owned = client._t.http
    assert owned.is_closed

"""Credential resolution for the two authentication modes.

A client authenticates either with a static API token sent as a bearer
``Authorization`` header, or with a session token obtained through the
login handshake and sent as the ``jwt`` cookie.  The mode is chosen once,
when the client is built.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping, Union

import httpx

from .config_types import (
    DEFAULT_API_URL,
    DEFAULT_SESSION_BASE_URL,
    ENV_API_TOKEN,
    ENV_API_TOKEN_ONLY,
    ENV_ORG_ID,
    ENV_PASSWORD,
    ENV_USERNAME,
    ClientConfig,
)
from .errors import ConfigurationError

logger = logging.getLogger(__name__)

SESSION_COOKIE_NAME = "jwt"


@dataclass(frozen=True)
class StaticToken:
    value: str

    def auth_headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.value}"}

    def __repr__(self) -> str:
        return "StaticToken(<redacted>)"


@dataclass(frozen=True)
class SessionToken:
    value: str

    def auth_headers(self) -> dict[str, str]:
        return {"Cookie": f"{SESSION_COOKIE_NAME}={self.value}"}

    def __repr__(self) -> str:
        return "SessionToken(<redacted>)"


Credential = Union[StaticToken, SessionToken]


@dataclass(frozen=True)
class SessionCredentials:
    username: str
    password: str
    org_id: str

    def __repr__(self) -> str:
        return f"SessionCredentials(username={self.username!r}, org_id={self.org_id!r})"


def _pick(explicit: str | None, environ: Mapping[str, str], name: str) -> str | None:
    if explicit:
        return explicit
    return environ.get(name) or None


def resolve_static_token(cfg: ClientConfig, environ: Mapping[str, str]) -> StaticToken | None:
    token = _pick(cfg.api_token, environ, ENV_API_TOKEN)
    token_only = _pick(cfg.api_token_only, environ, ENV_API_TOKEN_ONLY)
    if token_only:
        if token:
            logger.warning(
                "both %s and %s are set; using the token-only credential",
                ENV_API_TOKEN,
                ENV_API_TOKEN_ONLY,
            )
        return StaticToken(token_only)
    if token:
        return StaticToken(token)
    return None


def resolve_session_credentials(cfg: ClientConfig, environ: Mapping[str, str]) -> SessionCredentials:
    fields = {
        "username": (_pick(cfg.username, environ, ENV_USERNAME), ENV_USERNAME),
        "password": (_pick(cfg.password, environ, ENV_PASSWORD), ENV_PASSWORD),
        "org_id": (_pick(cfg.org_id, environ, ENV_ORG_ID), ENV_ORG_ID),
    }
    missing = [env for value, env in fields.values() if not value]
    if len(missing) == len(fields):
        raise ConfigurationError(
            f"no credentials: set {ENV_API_TOKEN}, {ENV_API_TOKEN_ONLY} "
            f"or {ENV_USERNAME}/{ENV_PASSWORD}/{ENV_ORG_ID}"
        )
    if missing:
        raise ConfigurationError(f"incomplete session credentials, missing: {', '.join(missing)}")
    return SessionCredentials(
        username=fields["username"][0],
        password=fields["password"][0],
        org_id=fields["org_id"][0],
    )


def validate_url(value: str, *, label: str) -> str:
    try:
        url = httpx.URL(value)
    except (httpx.InvalidURL, TypeError) as exc:
        raise ConfigurationError(f"invalid {label} {value!r}: {exc}") from exc
    if url.scheme not in ("http", "https") or not url.host:
        raise ConfigurationError(f"invalid {label} {value!r}: expected an http(s) URL with a host")
    return value


def resolve_base_url(cfg: ClientConfig, credential: Credential | None) -> str:
    if cfg.base_url:
        return validate_url(cfg.base_url, label="base URL")
    if isinstance(credential, StaticToken):
        return DEFAULT_API_URL
    return DEFAULT_SESSION_BASE_URL

from __future__ import annotations

from dataclasses import dataclass

import httpx

DEFAULT_API_URL = "https://api.pingdom.com/api/3.1"
DEFAULT_SESSION_BASE_URL = "https://my.pingdom.com"
DEFAULT_AUTH_URL = "https://my.solarwinds.cloud/v1/login"
DEFAULT_TIMEOUT_S = 30.0

ENV_API_TOKEN = "PINGDOM_API_TOKEN"
ENV_API_TOKEN_ONLY = "PINGDOM_API_TOKEN_ONLY"
ENV_USERNAME = "SOLARWINDS_USER"
ENV_PASSWORD = "SOLARWINDS_PASSWD"
ENV_ORG_ID = "SOLARWINDS_ORG_ID"


@dataclass(frozen=True)
class ClientConfig:
    api_token: str | None = None
    api_token_only: str | None = None
    username: str | None = None
    password: str | None = None
    org_id: str | None = None
    base_url: str | None = None
    auth_url: str | None = None
    http_client: httpx.Client | None = None
    timeout_s: float = DEFAULT_TIMEOUT_S

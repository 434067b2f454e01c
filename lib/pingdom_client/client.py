from __future__ import annotations

import logging
import os
from typing import Any, Callable, Mapping, TypeVar
from urllib.parse import urlencode

import httpx

from .checks import CheckService
from .config_types import DEFAULT_AUTH_URL, ClientConfig
from .contacts import ContactService
from .credentials import (
    Credential,
    SessionToken,
    StaticToken,
    resolve_base_url,
    resolve_session_credentials,
    resolve_static_token,
    validate_url,
)
from .errors import InvalidRequestError
from .handshake import obtain_session_token
from .integrations import IntegrationService
from .maintenances import MaintenanceService, OccurrenceService
from .probes import ProbeService
from .responses import classify_response, decode_response
from .teams import TeamService
from .tms import TMSCheckService
from .transport import Transport, default_http_client

logger = logging.getLogger(__name__)

T = TypeVar("T")


class PingdomClient:
    """Client for the Pingdom API family.

    Authenticates with a static API token (``Authorization: Bearer``) when
    one resolves from the config or the environment, otherwise logs in with
    username, password and organisation id and sends the resulting session
    token as the ``jwt`` cookie.  The mode never changes afterwards.
    """

    def __init__(self, cfg: ClientConfig | None = None, *, environ: Mapping[str, str] | None = None):
        cfg = cfg or ClientConfig()
        env = os.environ if environ is None else environ

        credential: Credential | None = resolve_static_token(cfg, env)
        session_credentials = None
        if credential is None:
            session_credentials = resolve_session_credentials(cfg, env)

        self._base_url = resolve_base_url(cfg, credential)
        auth_url = None
        if session_credentials is not None:
            auth_url = validate_url(cfg.auth_url or DEFAULT_AUTH_URL, label="auth URL")

        if cfg.http_client is not None:
            self._t = Transport(cfg.http_client, owned=False)
        else:
            self._t = Transport(default_http_client(cfg.timeout_s), owned=True)

        if session_credentials is not None:
            try:
                credential = obtain_session_token(
                    self._t.http,
                    base_url=self._base_url,
                    auth_url=auth_url,
                    credentials=session_credentials,
                )
            except Exception:
                self._t.close()
                raise

        self._credential = credential
        logger.debug("pingdom client ready (%s) for %s", type(credential).__name__, self._base_url)

        self.checks = CheckService(self)
        self.contacts = ContactService(self)
        self.integrations = IntegrationService(self)
        self.maintenances = MaintenanceService(self)
        self.occurrences = OccurrenceService(self)
        self.probes = ProbeService(self)
        self.teams = TeamService(self)
        self.tms_checks = TMSCheckService(self)

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def credential(self) -> Credential:
        return self._credential

    @property
    def uses_session(self) -> bool:
        return isinstance(self._credential, SessionToken)

    @property
    def uses_static_token(self) -> bool:
        return isinstance(self._credential, StaticToken)

    def close(self) -> None:
        self._t.close()

    def __enter__(self) -> PingdomClient:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    # --- request building ---
    def _build(
            self,
            method: str,
            path: str,
            query: str | None,
            *,
            content: bytes | None = None,
            headers: dict[str, str] | None = None,
    ) -> httpx.Request:
        try:
            url = httpx.URL(self._base_url + path)
            if query:
                url = url.copy_with(query=query.encode("ascii"))
        except (httpx.InvalidURL, UnicodeEncodeError) as exc:
            raise InvalidRequestError(f"invalid request URL {self._base_url + path!r}: {exc}") from exc

        request_headers = dict(headers or {})
        request_headers.update(self._credential.auth_headers())
        return httpx.Request(method, url, content=content, headers=request_headers)

    def new_request(self, method: str, path: str, params: Mapping[str, str] | None = None) -> httpx.Request:
        query = None
        if params is not None:
            query = urlencode(sorted((k, str(v)) for k, v in params.items()))
        return self._build(method, path, query)

    def new_request_multi(
            self,
            method: str,
            path: str,
            params: Mapping[str, list[str]] | None = None,
    ) -> httpx.Request:
        query = None
        if params is not None:
            pairs = [(k, str(v)) for k in sorted(params) for v in params[k]]
            query = urlencode(pairs)
        return self._build(method, path, query)

    def new_json_request(self, method: str, path: str, body: str) -> httpx.Request:
        return self._build(
            method,
            path,
            None,
            content=body.encode("utf-8"),
            headers={"Content-Type": "application/json"},
        )

    # --- execution ---
    def send(self, request: httpx.Request) -> httpx.Response:
        response = self._t.send(request)
        error = classify_response(response)
        if error is not None:
            raise error
        return response

    def do(self, request: httpx.Request, target: type[T] | Callable[[Any], T] | None) -> T:
        response = self.send(request)
        return decode_response(response, target)

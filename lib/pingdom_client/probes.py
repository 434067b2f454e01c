from __future__ import annotations

import builtins
from typing import TYPE_CHECKING, Any

from .types import Probe

if TYPE_CHECKING:
    from .client import PingdomClient


def _probe_list(data: dict[str, Any]) -> list[Probe]:
    return [Probe.from_dict(p) for p in data["probes"]]


class ProbeService:
    """Probe servers under ``/probes`` (read only)."""

    def __init__(self, client: PingdomClient):
        self._client = client

    def list(
            self,
            *,
            limit: int | None = None,
            offset: int | None = None,
            only_active: bool = False,
            include_deleted: bool = False,
    ) -> builtins.list[Probe]:
        params: dict[str, str] = {}
        if limit is not None:
            params["limit"] = str(int(limit))
        if offset is not None:
            params["offset"] = str(int(offset))
        if only_active:
            params["onlyactive"] = "true"
        if include_deleted:
            params["includedeleted"] = "true"
        req = self._client.new_request("GET", "/probes", params)
        return self._client.do(req, _probe_list)

from __future__ import annotations

import builtins
from typing import TYPE_CHECKING, Any, Union

from .check_types import DNSCheck, HttpCheck, PingCheck, SummaryPerformanceRequest, TCPCheck
from .types import Check, Message, SummaryPerformance

if TYPE_CHECKING:
    from .client import PingdomClient

CheckParams = Union[HttpCheck, PingCheck, TCPCheck, DNSCheck]


def _check_list(data: dict[str, Any]) -> list[Check]:
    return [Check.from_dict(c) for c in data["checks"]]


def _check(data: dict[str, Any]) -> Check:
    return Check.from_dict(data["check"])


class CheckService:
    """Uptime checks under ``/checks``."""

    def __init__(self, client: PingdomClient):
        self._client = client

    def list(
            self,
            *,
            limit: int | None = None,
            offset: int | None = None,
            tags: builtins.list[str] | None = None,
            include_tags: bool = False,
    ) -> builtins.list[Check]:
        params: dict[str, str] = {}
        if limit is not None:
            params["limit"] = str(int(limit))
        if offset is not None:
            params["offset"] = str(int(offset))
        if tags:
            params["tags"] = ",".join(tags)
        if include_tags:
            params["include_tags"] = "true"
        req = self._client.new_request("GET", "/checks", params)
        return self._client.do(req, _check_list)

    def read(self, check_id: int) -> Check:
        req = self._client.new_request("GET", f"/checks/{int(check_id)}", {"include_teams": "true"})
        return self._client.do(req, _check)

    def create(self, check: CheckParams) -> Check:
        check.validate()
        req = self._client.new_request("POST", "/checks", check.post_params())
        return self._client.do(req, _check)

    def update(self, check_id: int, check: CheckParams) -> Message:
        check.validate()
        req = self._client.new_request("PUT", f"/checks/{int(check_id)}", check.put_params())
        return self._client.do(req, Message)

    def delete(self, check_id: int) -> Message:
        req = self._client.new_request("DELETE", f"/checks/{int(check_id)}")
        return self._client.do(req, Message)

    def summary_performance(self, request: SummaryPerformanceRequest) -> SummaryPerformance:
        request.validate()
        req = self._client.new_request("GET", f"/summary.performance/{request.id}", request.get_params())
        return self._client.do(req, SummaryPerformance)

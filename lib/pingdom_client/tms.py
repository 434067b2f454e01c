from __future__ import annotations

import builtins
from typing import TYPE_CHECKING, Any

from .errors import ValidationError
from .types import Message, TMSCheck

if TYPE_CHECKING:
    from .client import PingdomClient

ALLOWED_INTERVALS = (5, 10, 20, 60, 720, 1440)
SEVERITY_LEVELS = ("high", "low")


def validate_tms_check(check: TMSCheck) -> None:
    if not check.name:
        raise ValidationError("transaction check name must not be empty")
    if not check.steps:
        raise ValidationError("transaction check needs at least one step")
    for i, step in enumerate(check.steps):
        if not isinstance(step, dict) or not step.get("fn"):
            raise ValidationError(f"step {i} has no `fn`")
    if check.interval not in ALLOWED_INTERVALS:
        raise ValidationError(f"invalid value {check.interval} for `interval`, allowed values are {list(ALLOWED_INTERVALS)}")
    if check.severity_level not in SEVERITY_LEVELS:
        raise ValidationError(f"invalid value {check.severity_level!r} for `severity_level`")


def _tms_list(data: dict[str, Any]) -> list[TMSCheck]:
    return [TMSCheck.from_dict(c) for c in data["checks"]]


def _tms_check(data: dict[str, Any]) -> TMSCheck:
    # Create answers with the bare check, read wraps it in "check".
    return TMSCheck.from_dict(data.get("check", data))


class TMSCheckService:
    """Transaction checks under ``/tms/check``."""

    def __init__(self, client: PingdomClient):
        self._client = client

    def list(
            self,
            *,
            limit: int | None = None,
            offset: int | None = None,
            tags: builtins.list[str] | None = None,
            extended_tags: bool = False,
    ) -> builtins.list[TMSCheck]:
        params: dict[str, str] = {}
        if limit is not None:
            params["limit"] = str(int(limit))
        if offset is not None:
            params["offset"] = str(int(offset))
        if tags:
            params["tags"] = ",".join(tags)
        if extended_tags:
            params["extended_tags"] = "true"
        req = self._client.new_request("GET", "/tms/check", params)
        return self._client.do(req, _tms_list)

    def read(self, check_id: int) -> TMSCheck:
        req = self._client.new_request("GET", f"/tms/check/{int(check_id)}")
        return self._client.do(req, _tms_check)

    def create(self, check: TMSCheck) -> TMSCheck:
        validate_tms_check(check)
        req = self._client.new_json_request("POST", "/tms/check", check.to_json())
        return self._client.do(req, _tms_check)

    def update(self, check_id: int, check: TMSCheck) -> TMSCheck:
        validate_tms_check(check)
        req = self._client.new_json_request("PUT", f"/tms/check/{int(check_id)}", check.to_json())
        return self._client.do(req, _tms_check)

    def delete(self, check_id: int) -> Message:
        req = self._client.new_request("DELETE", f"/tms/check/{int(check_id)}")
        return self._client.do(req, Message)

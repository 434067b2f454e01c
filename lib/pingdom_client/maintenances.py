from __future__ import annotations

import builtins
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from .check_types import int_list_to_csv
from .errors import ValidationError
from .types import Maintenance, Message, Occurrence

if TYPE_CHECKING:
    from .client import PingdomClient

RECURRENCE_TYPES = ("none", "day", "week", "month")


@dataclass
class MaintenanceWindow:
    """Parameters for creating or updating a maintenance window."""

    description: str
    from_: int
    to: int
    recurrence_type: str = ""
    repeat_every: int = 0
    effective_to: int = 0
    uptime_ids: list[int] = field(default_factory=list)
    tms_ids: list[int] = field(default_factory=list)

    def put_params(self) -> dict[str, str]:
        m = {
            "description": self.description,
            "from": str(self.from_),
            "to": str(self.to),
        }
        if self.recurrence_type:
            m["recurrencetype"] = self.recurrence_type
        if self.repeat_every:
            m["repeatevery"] = str(self.repeat_every)
        if self.effective_to:
            m["effectiveto"] = str(self.effective_to)
        if self.uptime_ids:
            m["uptimeids"] = int_list_to_csv(self.uptime_ids)
        if self.tms_ids:
            m["tmsids"] = int_list_to_csv(self.tms_ids)
        return m

    def post_params(self) -> dict[str, str]:
        return {k: v for k, v in self.put_params().items() if v != ""}

    def validate(self) -> None:
        if not self.description:
            raise ValidationError("invalid value for `description`, must contain non-empty string")
        if self.from_ <= 0:
            raise ValidationError("invalid value for `from`, must be a positive unix timestamp")
        if self.to <= self.from_:
            raise ValidationError("invalid value for `to`, must be later than `from`")
        if self.recurrence_type and self.recurrence_type not in RECURRENCE_TYPES:
            raise ValidationError(f"invalid value {self.recurrence_type!r} for `recurrence_type`")


def _maintenance_list(data: dict[str, Any]) -> list[Maintenance]:
    return [Maintenance.from_dict(m) for m in data["maintenance"]]


def _maintenance(data: dict[str, Any]) -> Maintenance:
    return Maintenance.from_dict(data["maintenance"])


def _maintenance_id(data: dict[str, Any]) -> int:
    return int(data["maintenance"]["id"])


def _occurrence_list(data: dict[str, Any]) -> list[Occurrence]:
    return [Occurrence.from_dict(o) for o in data["occurrences"]]


def _occurrence(data: dict[str, Any]) -> Occurrence:
    return Occurrence.from_dict(data["occurrence"])


class MaintenanceService:
    """Maintenance windows under ``/maintenance``."""

    def __init__(self, client: PingdomClient):
        self._client = client

    def list(
            self,
            *,
            limit: int | None = None,
            offset: int | None = None,
            order_by: str | None = None,
            order: str | None = None,
    ) -> builtins.list[Maintenance]:
        params: dict[str, str] = {}
        if limit is not None:
            params["limit"] = str(int(limit))
        if offset is not None:
            params["offset"] = str(int(offset))
        if order_by:
            params["orderby"] = order_by
        if order:
            params["order"] = order
        req = self._client.new_request("GET", "/maintenance", params)
        return self._client.do(req, _maintenance_list)

    def read(self, maintenance_id: int) -> Maintenance:
        req = self._client.new_request("GET", f"/maintenance/{int(maintenance_id)}")
        return self._client.do(req, _maintenance)

    def create(self, window: MaintenanceWindow) -> int:
        window.validate()
        req = self._client.new_request("POST", "/maintenance", window.post_params())
        return self._client.do(req, _maintenance_id)

    def update(self, maintenance_id: int, window: MaintenanceWindow) -> Message:
        window.validate()
        req = self._client.new_request("PUT", f"/maintenance/{int(maintenance_id)}", window.put_params())
        return self._client.do(req, Message)

    def delete(self, maintenance_id: int) -> Message:
        req = self._client.new_request("DELETE", f"/maintenance/{int(maintenance_id)}")
        return self._client.do(req, Message)

    def multi_delete(self, maintenance_ids: builtins.list[int]) -> Message:
        if not maintenance_ids:
            raise ValidationError("at least one maintenance id is required")
        req = self._client.new_request("DELETE", "/maintenance", {"maintenanceids": int_list_to_csv(maintenance_ids)})
        return self._client.do(req, Message)


class OccurrenceService:
    """Maintenance occurrences under ``/maintenance.occurrences``."""

    def __init__(self, client: PingdomClient):
        self._client = client

    def list(
            self,
            *,
            maintenance_id: int | None = None,
            from_: int | None = None,
            to: int | None = None,
    ) -> builtins.list[Occurrence]:
        params: dict[str, str] = {}
        if maintenance_id is not None:
            params["maintenanceid"] = str(int(maintenance_id))
        if from_ is not None:
            params["from"] = str(int(from_))
        if to is not None:
            params["to"] = str(int(to))
        req = self._client.new_request("GET", "/maintenance.occurrences", params)
        return self._client.do(req, _occurrence_list)

    def read(self, occurrence_id: int) -> Occurrence:
        req = self._client.new_request("GET", f"/maintenance.occurrences/{int(occurrence_id)}")
        return self._client.do(req, _occurrence)

    def update(self, occurrence_id: int, *, from_: int, to: int) -> Message:
        if to <= from_:
            raise ValidationError("invalid value for `to`, must be later than `from`")
        req = self._client.new_request(
            "PUT",
            f"/maintenance.occurrences/{int(occurrence_id)}",
            {"from": str(int(from_)), "to": str(int(to))},
        )
        return self._client.do(req, Message)

    def delete(self, occurrence_id: int) -> Message:
        req = self._client.new_request("DELETE", f"/maintenance.occurrences/{int(occurrence_id)}")
        return self._client.do(req, Message)

    def multi_delete(self, occurrence_ids: builtins.list[int]) -> Message:
        if not occurrence_ids:
            raise ValidationError("at least one occurrence id is required")
        req = self._client.new_request_multi(
            "DELETE",
            "/maintenance.occurrences",
            {"occurrenceids": [str(int(i)) for i in occurrence_ids]},
        )
        return self._client.do(req, Message)

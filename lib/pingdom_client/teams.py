from __future__ import annotations

import builtins
import json
from typing import TYPE_CHECKING, Any

from .errors import ValidationError
from .types import Message, Team

if TYPE_CHECKING:
    from .client import PingdomClient


def _team_body(name: str, member_ids: list[int]) -> str:
    if not name:
        raise ValidationError("team name must not be empty")
    return json.dumps({"name": name, "member_ids": [int(m) for m in member_ids]})


def _team_list(data: dict[str, Any]) -> list[Team]:
    return [Team.from_dict(t) for t in data["teams"]]


def _team(data: dict[str, Any]) -> Team:
    return Team.from_dict(data["team"])


class TeamService:
    """Alerting teams under ``/alerting/teams``."""

    def __init__(self, client: PingdomClient):
        self._client = client

    def list(self) -> builtins.list[Team]:
        req = self._client.new_request("GET", "/alerting/teams")
        return self._client.do(req, _team_list)

    def read(self, team_id: int) -> Team:
        req = self._client.new_request("GET", f"/alerting/teams/{int(team_id)}")
        return self._client.do(req, _team)

    def create(self, name: str, member_ids: builtins.list[int] | None = None) -> Team:
        req = self._client.new_json_request("POST", "/alerting/teams", _team_body(name, member_ids or []))
        return self._client.do(req, _team)

    def update(self, team_id: int, name: str, member_ids: builtins.list[int] | None = None) -> Team:
        req = self._client.new_json_request(
            "PUT",
            f"/alerting/teams/{int(team_id)}",
            _team_body(name, member_ids or []),
        )
        return self._client.do(req, _team)

    def delete(self, team_id: int) -> Message:
        req = self._client.new_request("DELETE", f"/alerting/teams/{int(team_id)}")
        return self._client.do(req, Message)

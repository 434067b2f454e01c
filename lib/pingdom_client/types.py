"""
Typed views of API responses.

Every model is built with ``from_dict`` so it can be passed straight to
``PingdomClient.do`` as the decode target.
"""
from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from typing import Any

# =============================================================================
# Shared
# =============================================================================


@dataclass
class Message:
    """Plain ``{"message": ...}`` acknowledgement."""

    message: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Message":
        return cls(message=str(data.get("message", "")))


def _ids(value: Any) -> list[int]:
    if isinstance(value, list):
        return [int(v) for v in value]
    if isinstance(value, str) and value:
        return [int(v) for v in value.split(",")]
    return []


# =============================================================================
# Checks
# =============================================================================


@dataclass
class Check:
    """An uptime check as returned by ``/checks``."""

    id: int
    name: str
    hostname: str = ""
    status: str = ""
    type: str = ""
    resolution: int = 0
    paused: bool = False
    created: int | None = None
    last_error_time: int | None = None
    last_test_time: int | None = None
    last_response_time: int | None = None
    tags: list[str] = field(default_factory=list)
    integration_ids: list[int] = field(default_factory=list)
    user_ids: list[int] = field(default_factory=list)
    team_ids: list[int] = field(default_factory=list)
    probe_filters: list[str] = field(default_factory=list)
    type_details: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Check":
        # List responses carry the type as a string, single reads as {"http": {...}}.
        raw_type = data.get("type") or ""
        details: dict[str, Any] = {}
        if isinstance(raw_type, dict):
            name = next(iter(raw_type), "")
            details = raw_type.get(name) or {}
            raw_type = name

        teams = data.get("teams") or []
        return cls(
            id=int(data["id"]),
            name=data.get("name") or "",
            hostname=data.get("hostname") or "",
            status=data.get("status") or "",
            type=raw_type,
            resolution=int(data.get("resolution") or 0),
            paused=bool(data.get("paused", False)),
            created=data.get("created"),
            last_error_time=data.get("lasterrortime"),
            last_test_time=data.get("lasttesttime"),
            last_response_time=data.get("lastresponsetime"),
            tags=[t["name"] if isinstance(t, dict) else str(t) for t in data.get("tags") or []],
            integration_ids=_ids(data.get("integrationids")),
            user_ids=_ids(data.get("userids")),
            team_ids=[int(t["id"]) if isinstance(t, dict) else int(t) for t in teams],
            probe_filters=list(data.get("probe_filters") or []),
            type_details=details,
        )


@dataclass
class SummaryPerformance:
    """Performance summary buckets for one check."""

    hours: list[dict[str, Any]] = field(default_factory=list)
    days: list[dict[str, Any]] = field(default_factory=list)
    weeks: list[dict[str, Any]] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SummaryPerformance":
        summary = data["summary"]
        return cls(
            hours=summary.get("hours") or [],
            days=summary.get("days") or [],
            weeks=summary.get("weeks") or [],
        )


# =============================================================================
# Contacts and teams
# =============================================================================


@dataclass
class SMSTarget:
    number: str
    country_code: str
    provider: str = ""
    severity: str = "HIGH"

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SMSTarget":
        return cls(
            number=str(data.get("number", "")),
            country_code=str(data.get("country_code", "")),
            provider=data.get("provider") or "",
            severity=data.get("severity") or "HIGH",
        )


@dataclass
class EmailTarget:
    address: str
    severity: str = "HIGH"

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "EmailTarget":
        return cls(address=data.get("address", ""), severity=data.get("severity") or "HIGH")


@dataclass
class Contact:
    """An alerting contact."""

    name: str
    id: int | None = None
    paused: bool = False
    type: str = ""
    owner: bool = False
    sms: list[SMSTarget] = field(default_factory=list)
    email: list[EmailTarget] = field(default_factory=list)
    team_ids: list[int] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Contact":
        targets = data.get("notification_targets") or {}
        return cls(
            id=data.get("id"),
            name=data.get("name") or "",
            paused=bool(data.get("paused", False)),
            type=data.get("type") or "",
            owner=bool(data.get("owner", False)),
            sms=[SMSTarget.from_dict(t) for t in targets.get("sms") or []],
            email=[EmailTarget.from_dict(t) for t in targets.get("email") or []],
            team_ids=[int(t["id"]) for t in data.get("teams") or []],
        )

    def to_json(self) -> str:
        targets: dict[str, Any] = {}
        if self.sms:
            targets["sms"] = [asdict(t) for t in self.sms]
        if self.email:
            targets["email"] = [asdict(t) for t in self.email]
        return json.dumps({"name": self.name, "paused": self.paused, "notification_targets": targets})


@dataclass
class TeamMember:
    id: int
    name: str = ""
    type: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TeamMember":
        return cls(id=int(data["id"]), name=data.get("name") or "", type=data.get("type") or "")


@dataclass
class Team:
    """An alerting team."""

    name: str
    id: int | None = None
    members: list[TeamMember] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Team":
        return cls(
            id=data.get("id"),
            name=data.get("name") or "",
            members=[TeamMember.from_dict(m) for m in data.get("members") or []],
        )


# =============================================================================
# Probes
# =============================================================================


@dataclass
class Probe:
    """A Pingdom probe server."""

    id: int
    name: str
    country: str = ""
    city: str = ""
    country_iso: str = ""
    region: str = ""
    hostname: str = ""
    ip: str = ""
    ipv6: str = ""
    active: bool = True

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Probe":
        return cls(
            id=int(data["id"]),
            name=data.get("name") or "",
            country=data.get("country") or "",
            city=data.get("city") or "",
            country_iso=data.get("countryiso") or "",
            region=data.get("region") or "",
            hostname=data.get("hostname") or "",
            ip=data.get("ip") or "",
            ipv6=data.get("ipv6") or "",
            active=bool(data.get("active", True)),
        )


# =============================================================================
# Maintenance
# =============================================================================


@dataclass
class Maintenance:
    """A maintenance window."""

    id: int
    description: str
    from_: int
    to: int
    recurrence_type: str = "none"
    repeat_every: int = 0
    effective_to: int | None = None
    uptime_ids: list[int] = field(default_factory=list)
    tms_ids: list[int] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Maintenance":
        checks = data.get("checks") or {}
        return cls(
            id=int(data["id"]),
            description=data.get("description") or "",
            from_=int(data.get("from") or 0),
            to=int(data.get("to") or 0),
            recurrence_type=data.get("recurrencetype") or "none",
            repeat_every=int(data.get("repeatevery") or 0),
            effective_to=data.get("effectiveto"),
            uptime_ids=_ids(checks.get("uptime")),
            tms_ids=_ids(checks.get("tms")),
        )


@dataclass
class Occurrence:
    """One occurrence of a maintenance window."""

    id: int
    maintenance_id: int
    from_: int
    to: int
    duration: int = 0
    duration_unit: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Occurrence":
        return cls(
            id=int(data["id"]),
            maintenance_id=int(data.get("maintenanceid") or 0),
            from_=int(data.get("from") or 0),
            to=int(data.get("to") or 0),
            duration=int(data.get("duration") or 0),
            duration_unit=data.get("durationunit") or "",
        )


# =============================================================================
# Transaction checks
# =============================================================================


@dataclass
class TMSCheck:
    """A transaction (TMS) check."""

    name: str
    steps: list[dict[str, Any]] = field(default_factory=list)
    id: int | None = None
    active: bool = True
    status: str = ""
    interval: int = 10
    region: str = ""
    severity_level: str = "high"
    send_notification_when_down: int = 1
    custom_message: str = ""
    contact_ids: list[int] = field(default_factory=list)
    integration_ids: list[int] = field(default_factory=list)
    team_ids: list[int] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TMSCheck":
        return cls(
            id=data.get("id"),
            name=data.get("name") or "",
            steps=data.get("steps") or [],
            active=bool(data.get("active", True)),
            status=data.get("status") or "",
            interval=int(data.get("interval") or 10),
            region=data.get("region") or "",
            severity_level=data.get("severity_level") or "high",
            send_notification_when_down=int(data.get("send_notification_when_down") or 1),
            custom_message=data.get("custom_message") or "",
            contact_ids=_ids(data.get("contact_ids")),
            integration_ids=_ids(data.get("integration_ids")),
            team_ids=_ids(data.get("team_ids")),
            tags=[t["name"] if isinstance(t, dict) else str(t) for t in data.get("tags") or []],
            metadata=data.get("metadata") or {},
        )

    def to_json(self) -> str:
        body: dict[str, Any] = {
            "name": self.name,
            "steps": self.steps,
            "active": self.active,
            "interval": self.interval,
            "severity_level": self.severity_level,
            "send_notification_when_down": self.send_notification_when_down,
        }
        if self.region:
            body["region"] = self.region
        if self.custom_message:
            body["custom_message"] = self.custom_message
        if self.contact_ids:
            body["contact_ids"] = self.contact_ids
        if self.integration_ids:
            body["integration_ids"] = self.integration_ids
        if self.team_ids:
            body["team_ids"] = self.team_ids
        if self.tags:
            body["tags"] = self.tags
        if self.metadata:
            body["metadata"] = self.metadata
        return json.dumps(body)


# =============================================================================
# Integrations
# =============================================================================


@dataclass
class IntegrationStatus:
    """``{"integration": {"status": ..., "id": ...}}`` acknowledgement."""

    id: int | None
    status: bool

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "IntegrationStatus":
        integration = data["integration"]
        return cls(id=integration.get("id"), status=bool(integration.get("status", False)))


@dataclass
class WebhookIntegration:
    """A webhook integration on my.pingdom.com."""

    name: str
    url: str
    active: bool = True
    id: int | None = None
    provider_id: int = 2

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "WebhookIntegration":
        user_data = data.get("user_data") or {}
        return cls(
            id=data.get("id"),
            name=user_data.get("name") or data.get("name") or "",
            url=user_data.get("url") or "",
            active=bool(data.get("active", True)),
            provider_id=int(data.get("provider_id") or 2),
        )

    def to_json(self) -> str:
        return json.dumps(
            {
                "active": self.active,
                "provider_id": self.provider_id,
                "user_data": {"name": self.name, "url": self.url},
            }
        )

"""Parameter structs for uptime checks.

The checks API takes flat string parameters.  ``put_params`` returns every
field (so an update can blank a value); ``post_params`` drops empty values
and adds the check ``type`` because the API rejects empty strings on create.
"""
from __future__ import annotations

from dataclasses import dataclass, field

from .errors import ValidationError

ALLOWED_RESOLUTIONS = (0, 1, 5, 15, 30, 60)
ALLOWED_SUMMARY_RESOLUTIONS = ("", "hour", "day", "week")


def _bool(value: bool) -> str:
    return "true" if value else "false"


def int_list_to_csv(values: list[int]) -> str:
    return ",".join(str(v) for v in values)


def validate_common(name: str, hostname: str, resolution: int) -> None:
    if not name:
        raise ValidationError("invalid value for `name`, must contain non-empty string")
    if not hostname:
        raise ValidationError("invalid value for `hostname`, must contain non-empty string")
    # 0 lets the API apply its default of 5 minutes
    if resolution not in ALLOWED_RESOLUTIONS:
        raise ValidationError(f"invalid value {resolution} for `resolution`, allowed values are [1,5,15,30,60]")


def _drop_empty(params: dict[str, str], check_type: str) -> dict[str, str]:
    out = {k: v for k, v in params.items() if v != ""}
    out["type"] = check_type
    return out


@dataclass
class HttpCheck:
    name: str
    hostname: str
    custom_message: str = ""
    encryption: bool = False
    ipv6: bool = False
    integration_ids: list[int] = field(default_factory=list)
    notify_again_every: int = 0
    notify_when_backup: bool = False
    username: str = ""
    password: str = ""
    paused: bool = False
    port: int = 0
    post_data: str = ""
    probe_filters: str = ""
    request_headers: dict[str, str] = field(default_factory=dict)
    resolution: int = 0
    response_time_threshold: int = 0
    ssl_down_days_before: int | None = None
    send_notification_when_down: int = 0
    should_contain: str = ""
    should_not_contain: str = ""
    tags: str = ""
    team_ids: list[int] = field(default_factory=list)
    url: str = ""
    user_ids: list[int] = field(default_factory=list)
    verify_certificate: bool | None = None

    def put_params(self) -> dict[str, str]:
        m = {
            "custom_message": self.custom_message,
            "encryption": _bool(self.encryption),
            "host": self.hostname,
            "integrationids": int_list_to_csv(self.integration_ids),
            "ipv6": _bool(self.ipv6),
            "name": self.name,
            "notifyagainevery": str(self.notify_again_every),
            "notifywhenbackup": _bool(self.notify_when_backup),
            "paused": _bool(self.paused),
            "postdata": self.post_data,
            "probe_filters": self.probe_filters,
            "tags": self.tags,
            "teamids": int_list_to_csv(self.team_ids),
            "url": self.url,
            "userids": int_list_to_csv(self.user_ids),
        }
        if self.resolution:
            m["resolution"] = str(self.resolution)
        if self.send_notification_when_down:
            m["sendnotificationwhendown"] = str(self.send_notification_when_down)
        if self.port:
            m["port"] = str(self.port)
        if self.response_time_threshold:
            m["responsetime_threshold"] = str(self.response_time_threshold)
        if self.verify_certificate is not None:
            m["verify_certificate"] = _bool(self.verify_certificate)
        if self.ssl_down_days_before is not None:
            m["ssl_down_days_before"] = str(self.ssl_down_days_before)

        # Mutually exclusive, but one is always sent so either can be cleared.
        if self.should_contain:
            m["shouldcontain"] = self.should_contain
        else:
            m["shouldnotcontain"] = self.should_not_contain

        if self.username:
            m["auth"] = f"{self.username}:{self.password}"

        for i, key in enumerate(sorted(self.request_headers)):
            m[f"requestheader{i}"] = f"{key}:{self.request_headers[key]}"
        return m

    def post_params(self) -> dict[str, str]:
        return _drop_empty(self.put_params(), "http")

    def validate(self) -> None:
        validate_common(self.name, self.hostname, self.resolution)
        if self.should_contain and self.should_not_contain:
            raise ValidationError("`should_contain` and `should_not_contain` must not be declared at the same time")


@dataclass
class PingCheck:
    name: str
    hostname: str
    integration_ids: list[int] = field(default_factory=list)
    notify_again_every: int = 0
    notify_when_backup: bool = False
    paused: bool = False
    probe_filters: str = ""
    resolution: int = 0
    response_time_threshold: int = 0
    send_notification_when_down: int = 0
    tags: str = ""
    team_ids: list[int] = field(default_factory=list)
    user_ids: list[int] = field(default_factory=list)

    def put_params(self) -> dict[str, str]:
        m = {
            "host": self.hostname,
            "integrationids": int_list_to_csv(self.integration_ids),
            "name": self.name,
            "notifyagainevery": str(self.notify_again_every),
            "notifywhenbackup": _bool(self.notify_when_backup),
            "paused": _bool(self.paused),
            "probe_filters": self.probe_filters,
            "tags": self.tags,
            "teamids": int_list_to_csv(self.team_ids),
            "userids": int_list_to_csv(self.user_ids),
        }
        if self.resolution:
            m["resolution"] = str(self.resolution)
        if self.send_notification_when_down:
            m["sendnotificationwhendown"] = str(self.send_notification_when_down)
        if self.response_time_threshold:
            m["responsetime_threshold"] = str(self.response_time_threshold)
        return m

    def post_params(self) -> dict[str, str]:
        return _drop_empty(self.put_params(), "ping")

    def validate(self) -> None:
        validate_common(self.name, self.hostname, self.resolution)


@dataclass
class TCPCheck:
    name: str
    hostname: str
    port: int
    custom_message: str = ""
    ipv6: bool = False
    integration_ids: list[int] = field(default_factory=list)
    notify_again_every: int = 0
    notify_when_backup: bool = False
    paused: bool = False
    probe_filters: str = ""
    resolution: int = 0
    response_time_threshold: int = 0
    send_notification_when_down: int = 0
    string_to_expect: str = ""
    string_to_send: str = ""
    tags: str = ""
    team_ids: list[int] = field(default_factory=list)
    user_ids: list[int] = field(default_factory=list)

    def put_params(self) -> dict[str, str]:
        m = {
            "custom_message": self.custom_message,
            "host": self.hostname,
            "integrationids": int_list_to_csv(self.integration_ids),
            "ipv6": _bool(self.ipv6),
            "name": self.name,
            "notifyagainevery": str(self.notify_again_every),
            "notifywhenbackup": _bool(self.notify_when_backup),
            "paused": _bool(self.paused),
            "port": str(self.port),
            "probe_filters": self.probe_filters,
            "tags": self.tags,
            "teamids": int_list_to_csv(self.team_ids),
            "userids": int_list_to_csv(self.user_ids),
        }
        if self.resolution:
            m["resolution"] = str(self.resolution)
        if self.response_time_threshold:
            m["responsetime_threshold"] = str(self.response_time_threshold)
        if self.send_notification_when_down:
            m["sendnotificationwhendown"] = str(self.send_notification_when_down)
        if self.string_to_send:
            m["stringtosend"] = self.string_to_send
        if self.string_to_expect:
            m["stringtoexpect"] = self.string_to_expect
        return m

    def post_params(self) -> dict[str, str]:
        return _drop_empty(self.put_params(), "tcp")

    def validate(self) -> None:
        validate_common(self.name, self.hostname, self.resolution)
        if not 1 <= self.port <= 65535:
            raise ValidationError("invalid value for `port`, must contain an integer >= 1 and <= 65535")


@dataclass
class DNSCheck:
    name: str
    hostname: str
    expected_ip: str = ""
    name_server: str = ""
    ipv6: bool = False
    integration_ids: list[int] = field(default_factory=list)
    notify_again_every: int = 0
    notify_when_backup: bool = False
    paused: bool = False
    probe_filters: str = ""
    resolution: int = 0
    send_notification_when_down: int = 0
    tags: str = ""
    team_ids: list[int] = field(default_factory=list)
    user_ids: list[int] = field(default_factory=list)

    def put_params(self) -> dict[str, str]:
        m = {
            "expectedip": self.expected_ip,
            "host": self.hostname,
            "integrationids": int_list_to_csv(self.integration_ids),
            "ipv6": _bool(self.ipv6),
            "name": self.name,
            "nameserver": self.name_server,
            "notifyagainevery": str(self.notify_again_every),
            "notifywhenbackup": _bool(self.notify_when_backup),
            "paused": _bool(self.paused),
            "probe_filters": self.probe_filters,
            "tags": self.tags,
            "teamids": int_list_to_csv(self.team_ids),
            "userids": int_list_to_csv(self.user_ids),
        }
        if self.resolution:
            m["resolution"] = str(self.resolution)
        if self.send_notification_when_down:
            m["sendnotificationwhendown"] = str(self.send_notification_when_down)
        return m

    def post_params(self) -> dict[str, str]:
        return _drop_empty(self.put_params(), "dns")

    def validate(self) -> None:
        validate_common(self.name, self.hostname, self.resolution)
        if not self.expected_ip:
            raise ValidationError("invalid value for `expected_ip`, must contain non-empty string")
        if not self.name_server:
            raise ValidationError("invalid value for `name_server`, must contain non-empty string")


@dataclass
class SummaryPerformanceRequest:
    id: int
    include_uptime: bool = False
    resolution: str = ""

    def validate(self) -> None:
        if not self.id:
            raise ValidationError("an id of a check must be provided")
        if self.resolution not in ALLOWED_SUMMARY_RESOLUTIONS:
            raise ValidationError("resolution must be one of: hour, day, week")

    def get_params(self) -> dict[str, str]:
        params: dict[str, str] = {}
        if self.resolution:
            params["resolution"] = self.resolution
        if self.include_uptime:
            params["includeuptime"] = "true"
        return params

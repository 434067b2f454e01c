from __future__ import annotations

import pytest

from pingdom_client import ValidationError
from pingdom_client.check_types import (
    DNSCheck,
    HttpCheck,
    PingCheck,
    SummaryPerformanceRequest,
    TCPCheck,
    int_list_to_csv,
)


def test_http_put_params() -> None:
    check = HttpCheck(
        name="fake check",
        hostname="example.com",
        resolution=15,
        port=8080,
        integration_ids=[33333333, 44444444],
        user_ids=[1, 2],
        team_ids=[3],
        should_not_contain="down",
        username="user",
        password="secret",
        request_headers={"X-Two": "2", "Accept": "*/*"},
        verify_certificate=False,
        ssl_down_days_before=7,
    )
    params = check.put_params()

    assert params["name"] == "fake check"
    assert params["host"] == "example.com"
    assert params["resolution"] == "15"
    assert params["port"] == "8080"
    assert params["integrationids"] == "33333333,44444444"
    assert params["userids"] == "1,2"
    assert params["teamids"] == "3"
    assert params["paused"] == "false"
    assert params["notifyagainevery"] == "0"
    assert params["shouldnotcontain"] == "down"
    assert "shouldcontain" not in params
    assert params["auth"] == "user:secret"
    assert params["requestheader0"] == "Accept:*/*"
    assert params["requestheader1"] == "X-Two:2"
    assert params["verify_certificate"] == "false"
    assert params["ssl_down_days_before"] == "7"
    assert params["url"] == ""


def test_http_put_params_always_send_one_content_match() -> None:
    params = HttpCheck(name="n", hostname="h").put_params()
    assert params["shouldnotcontain"] == ""

    params = HttpCheck(name="n", hostname="h", should_contain="up").put_params()
    assert params["shouldcontain"] == "up"
    assert "shouldnotcontain" not in params


def test_post_params_drop_empty_values_and_add_type() -> None:
    params = HttpCheck(name="n", hostname="h").post_params()
    assert params["type"] == "http"
    assert "" not in params.values()
    assert "url" not in params
    assert "integrationids" not in params

    assert PingCheck(name="n", hostname="h").post_params()["type"] == "ping"
    assert TCPCheck(name="n", hostname="h", port=22).post_params()["type"] == "tcp"
    dns = DNSCheck(name="n", hostname="h", expected_ip="1.2.3.4", name_server="ns.example.com").post_params()
    assert dns["type"] == "dns"
    assert dns["expectedip"] == "1.2.3.4"
    assert dns["nameserver"] == "ns.example.com"


def test_tcp_optional_strings() -> None:
    params = TCPCheck(name="n", hostname="h", port=25, string_to_send="HELO", string_to_expect="250").put_params()
    assert params["port"] == "25"
    assert params["stringtosend"] == "HELO"
    assert params["stringtoexpect"] == "250"
    assert "stringtosend" not in TCPCheck(name="n", hostname="h", port=25).put_params()


@pytest.mark.parametrize(
    "check",
    [
        HttpCheck(name="", hostname="h"),
        HttpCheck(name="n", hostname=""),
        HttpCheck(name="n", hostname="h", resolution=7),
        HttpCheck(name="n", hostname="h", should_contain="a", should_not_contain="b"),
        PingCheck(name="n", hostname="h", resolution=2),
        TCPCheck(name="n", hostname="h", port=0),
        TCPCheck(name="n", hostname="h", port=65536),
        DNSCheck(name="n", hostname="h", name_server="ns"),
        DNSCheck(name="n", hostname="h", expected_ip="1.1.1.1"),
    ],
)
def test_invalid_checks_are_rejected(check) -> None:
    with pytest.raises(ValidationError):
        check.validate()


@pytest.mark.parametrize("resolution", [0, 1, 5, 15, 30, 60])
def test_allowed_resolutions(resolution: int) -> None:
    HttpCheck(name="n", hostname="h", resolution=resolution).validate()
    PingCheck(name="n", hostname="h", resolution=resolution).validate()


def test_summary_performance_request() -> None:
    with pytest.raises(ValidationError):
        SummaryPerformanceRequest(id=0).validate()
    with pytest.raises(ValidationError):
        SummaryPerformanceRequest(id=1, resolution="month").validate()

    req = SummaryPerformanceRequest(id=1, resolution="day", include_uptime=True)
    req.validate()
    assert req.get_params() == {"resolution": "day", "includeuptime": "true"}
    assert SummaryPerformanceRequest(id=1).get_params() == {}


def test_int_list_to_csv() -> None:
    assert int_list_to_csv([]) == ""
    assert int_list_to_csv([1]) == "1"
    assert int_list_to_csv([1, 2, 3]) == "1,2,3"

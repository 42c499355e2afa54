from __future__ import annotations

import pytest

from conftest import DummyResponse, DummySession, FakePlatformContext, verdict_body

from cfext_willitconnect.connectivity_client import ConnectivityClient
from cfext_willitconnect.exceptions import (
    ConnectivityUnreachableError,
    InvalidRouteError,
    NoDomainError,
    UsageError,
)
from cfext_willitconnect.orchestrator import run_willitconnect

SERVICE_URL = "https://willitconnect.apps.example.com/v2/willitconnect"


def _client(*responses) -> ConnectivityClient:
    return ConnectivityClient(session=DummySession(post_responses=responses))


def test_able_to_connect(platform, capsys):
    client = _client(DummyResponse(json_data=verdict_body(True)))

    result = run_willitconnect(platform, client, host="foo.com", port=80)

    out = capsys.readouterr().out
    assert f"Host: foo.com - Port: 80 - WillItConnect: {SERVICE_URL}" in out
    assert "I am able to connect" in out
    assert "Proxy:" not in out
    assert result.can_connect is True


def test_unable_to_connect(platform, capsys):
    client = _client(DummyResponse(json_data=verdict_body(False, entry="bar.com")))

    result = run_willitconnect(platform, client, host="bar.com", port=80)

    out = capsys.readouterr().out
    assert "Host: bar.com - Port: 80" in out
    assert "I am unable to connect" in out
    assert result.can_connect is False


def test_https_host_without_port(platform):
    client = _client(DummyResponse(json_data=verdict_body(True)))

    run_willitconnect(platform, client, host="https://foo.com")

    assert client.session.post_calls[0]["data"] == '{"target":"https://foo.com:443"}'


def test_proxy_is_printed_and_sent(platform, capsys):
    client = _client(DummyResponse(json_data=verdict_body(True)))

    run_willitconnect(platform, client, host="foo.com", port=80, proxy_host="proxy.com", proxy_port=8080)

    assert "Proxy: proxy.com:8080" in capsys.readouterr().out
    assert client.session.post_calls[0]["data"] == '{"target":"foo.com:80","http_proxy":"proxy.com:8080"}'


def test_positional_mode_with_api_discovery(capsys):
    platform = FakePlatformContext(api_endpoint="http://127.0.0.1:9999")
    client = _client(DummyResponse(json_data=verdict_body(True)))

    run_willitconnect(platform, client, positionals=["foo.com", "80"], discovery="api")

    assert "WillItConnect: http://127.0.0.1:9999/v2/willitconnect" in capsys.readouterr().out
    assert client.session.post_calls[0]["url"] == "http://127.0.0.1:9999/v2/willitconnect"


def test_usage_error_sends_nothing(platform):
    client = _client()

    with pytest.raises(UsageError, match="Usage: cf willitconnect -host=<host> -port=<port>"):
        run_willitconnect(platform, client, positionals=["blah"])

    assert client.session.post_calls == []


def test_no_domain():
    client = _client()

    with pytest.raises(NoDomainError) as excinfo:
        run_willitconnect(FakePlatformContext(domains=[]), client, host="foo.com", port=80)

    assert str(excinfo.value) == "Unable to find valid domain, please view cf domains"


def test_bad_route(platform):
    with pytest.raises(InvalidRouteError) as excinfo:
        run_willitconnect(platform, _client(), host="foo.com", port=80, route="isbad")

    assert str(excinfo.value) == "-route must be a fqdn"


def test_unreachable_service(platform, connection_error, capsys):
    with pytest.raises(ConnectivityUnreachableError, match="connection refused"):
        run_willitconnect(platform, _client(connection_error), host="foo.com", port=80)

    assert "I am" not in capsys.readouterr().out

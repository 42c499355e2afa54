from __future__ import annotations

import pytest

from conftest import FakePlatformContext

from cfext_willitconnect.exceptions import InvalidRouteError, NoDomainError, NoOrgError, NoSessionError
from cfext_willitconnect.models import Organization, RouteSource
from cfext_willitconnect.route_resolver import resolve_service_route


def test_discovers_route_from_first_org_domain(platform):
    platform.domains = ["apps.example.com", "other.example.com"]

    route = resolve_service_route(platform)

    assert route.base_url == "https://willitconnect.apps.example.com"
    assert route.url == "https://willitconnect.apps.example.com/v2/willitconnect"
    assert route.source is RouteSource.DOMAIN
    assert platform.calls == ["get_current_organization", "get_organization_details:my-org"]


@pytest.mark.parametrize(
    "route, expected_url",
    [
        ("willitconnect.apps.example.com", "https://willitconnect.apps.example.com/v2/willitconnect"),
        ("http://wic.apps.example.com", "http://wic.apps.example.com/v2/willitconnect"),
        ("https://wic.apps.example.com/", "https://wic.apps.example.com/v2/willitconnect"),
        ("https://wic.apps.example.com/v2/willitconnect", "https://wic.apps.example.com/v2/willitconnect"),
        ("httpbin.apps.example.com", "https://httpbin.apps.example.com/v2/willitconnect"),
        ("https-gw.apps.example.com", "https://https-gw.apps.example.com/v2/willitconnect"),
    ],
)
def test_route_override_becomes_base(platform, route, expected_url):
    resolved = resolve_service_route(platform, route=route)

    assert resolved.url == expected_url
    assert resolved.source is RouteSource.OVERRIDE
    assert platform.calls == []


@pytest.mark.parametrize("route", ["isbad", "willitconnect.com", "https://localhost"])
def test_route_override_must_be_fqdn(platform, route):
    with pytest.raises(InvalidRouteError, match="-route must be a fqdn"):
        resolve_service_route(platform, route=route)


def test_no_session_when_current_org_lookup_fails():
    with pytest.raises(NoSessionError, match="Unable to connect to CF, use cf login first"):
        resolve_service_route(FakePlatformContext(org_error=True))


def test_no_session_when_current_org_is_empty():
    with pytest.raises(NoSessionError):
        resolve_service_route(FakePlatformContext(org=Organization(name="")))


def test_no_org_when_details_lookup_fails():
    with pytest.raises(NoOrgError, match="Unable to find valid org, please view cf target"):
        resolve_service_route(FakePlatformContext(details_error=True))


@pytest.mark.parametrize("domains", [[], [""]])
def test_no_domain(domains):
    with pytest.raises(NoDomainError, match="Unable to find valid domain, please view cf domains"):
        resolve_service_route(FakePlatformContext(domains=domains))


def test_api_discovery_uses_endpoint_verbatim():
    platform = FakePlatformContext(api_endpoint="http://127.0.0.1:8080")

    route = resolve_service_route(platform, discovery="api")

    assert route.url == "http://127.0.0.1:8080/v2/willitconnect"
    assert route.source is RouteSource.API_ENDPOINT
    assert platform.calls == ["get_api_endpoint"]


@pytest.mark.parametrize("platform_kwargs", [{"api_error": True}, {"api_endpoint": ""}])
def test_api_discovery_without_endpoint(platform_kwargs):
    with pytest.raises(NoSessionError, match="Unable to determine CF ApiEndpoint"):
        resolve_service_route(FakePlatformContext(**platform_kwargs), discovery="api")

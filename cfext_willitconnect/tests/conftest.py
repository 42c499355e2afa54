from __future__ import annotations

import json
from typing import Any, Dict, Iterable, List, Optional

import pytest
import requests

from cfext_willitconnect.exceptions import PlatformContextError
from cfext_willitconnect.models import Domain, Organization, OrganizationDetails
from cfext_willitconnect.platform_context import PlatformContext


class FakePlatformContext(PlatformContext):
    def __init__(
        self,
        org: Optional[Organization] = Organization(name="my-org", guid="org-guid"),
        domains: Optional[List[str]] = None,
        api_endpoint: str = "https://api.example.com",
        org_error: bool = False,
        details_error: bool = False,
        api_error: bool = False,
    ) -> None:
        self.org = org
        self.domains = ["apps.example.com"] if domains is None else domains
        self.api_endpoint = api_endpoint
        self.org_error = org_error
        self.details_error = details_error
        self.api_error = api_error
        self.calls: List[str] = []

    def get_current_organization(self) -> Organization:
        self.calls.append("get_current_organization")
        if self.org_error:
            raise PlatformContextError("not logged in")
        return self.org

    def get_organization_details(self, name: str) -> OrganizationDetails:
        self.calls.append(f"get_organization_details:{name}")
        if self.details_error:
            raise PlatformContextError("org not found")
        return OrganizationDetails(name=name, domains=[Domain(name=d) for d in self.domains])

    def get_api_endpoint(self) -> str:
        self.calls.append("get_api_endpoint")
        if self.api_error:
            raise PlatformContextError("API unavailable")
        return self.api_endpoint


class DummyResponse:
    def __init__(self, status_code: int = 200, json_data: Any = None, text: Optional[str] = None) -> None:
        self.status_code = status_code
        self._json = json_data
        self.text = text if text is not None else json.dumps(json_data)

    def json(self) -> Any:
        return json.loads(self.text)


class DummySession:
    def __init__(
        self,
        get_responses: Iterable[Any] = (),
        post_responses: Iterable[Any] = (),
    ) -> None:
        self._get_iter = iter(get_responses)
        self._post_iter = iter(post_responses)
        self.get_calls: List[Dict[str, Any]] = []
        self.post_calls: List[Dict[str, Any]] = []

    def get(self, url: str, params=None, headers=None, timeout=None, verify=True) -> DummyResponse:
        self.get_calls.append(
            {"url": url, "params": params, "headers": headers, "timeout": timeout, "verify": verify}
        )
        return self._next(self._get_iter, "GET")

    def post(self, url: str, data=None, headers=None, timeout=None) -> DummyResponse:
        self.post_calls.append({"url": url, "data": data, "headers": headers, "timeout": timeout})
        return self._next(self._post_iter, "POST")

    @staticmethod
    def _next(responses, method: str) -> DummyResponse:
        try:
            item = next(responses)
        except StopIteration as exc:
            raise AssertionError(f"Unexpected {method} call") from exc
        if isinstance(item, Exception):
            raise item
        return item


def verdict_body(can_connect: bool, entry: str = "foo.com") -> Dict[str, Any]:
    return {
        "lastChecked": 0,
        "entry": entry,
        "canConnect": can_connect,
        "httpStatus": 200,
        "validHostname": False,
        "validUrl": True,
    }


@pytest.fixture
def platform() -> FakePlatformContext:
    return FakePlatformContext()


@pytest.fixture
def connection_error() -> requests.ConnectionError:
    return requests.ConnectionError("connection refused")

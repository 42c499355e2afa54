# --------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for license information.
# --------------------------------------------------------------------------------------------

"""
Data models for willitconnect
"""

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from .exceptions import InvalidResponseError


class RouteSource(Enum):
    """Where the service base URL came from"""

    DOMAIN = "domain"
    API_ENDPOINT = "api"
    OVERRIDE = "override"


@dataclass(frozen=True)
class Organization:
    """Currently targeted platform organization"""

    name: str
    guid: str = ""


@dataclass(frozen=True)
class Domain:
    name: str


@dataclass
class OrganizationDetails:
    """Organization with its associated domains"""

    name: str
    domains: List[Domain] = field(default_factory=list)


@dataclass(frozen=True)
class ServiceRoute:
    """Resolved location of the connectivity-check service"""

    base_url: str
    url: str
    source: RouteSource


@dataclass(frozen=True)
class WillItConnectRequest:
    """Request body sent to the connectivity-check service"""

    target: str
    http_proxy: Optional[str] = None

    def to_dict(self) -> Dict[str, str]:
        """Convert to dictionary for JSON serialization"""
        body = {"target": self.target}
        if self.http_proxy is not None:
            body["http_proxy"] = self.http_proxy
        return body

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), separators=(",", ":"))


@dataclass(frozen=True)
class TargetDescriptor:  # pylint: disable=too-many-instance-attributes
    """Canonical, validated description of what to test"""

    host: str
    port: int
    service_url: str
    has_proxy: bool = False
    proxy_host: Optional[str] = None
    proxy_port: Optional[int] = None

    def __post_init__(self):
        if not self.host or not self.host.strip():
            raise ValueError("TargetDescriptor host must not be empty")
        if self.port is None:
            raise ValueError("TargetDescriptor port must be resolved")

    @property
    def target(self) -> str:
        return f"{self.host}:{self.port}"

    @property
    def proxy(self) -> Optional[str]:
        if not self.has_proxy:
            return None
        return f"{self.proxy_host}:{self.proxy_port}"

    def to_request_body(self) -> WillItConnectRequest:
        return WillItConnectRequest(target=self.target, http_proxy=self.proxy)


# Wire key -> (attribute, expected type, zero value)
_RESULT_FIELDS = {
    "lastChecked": ("last_checked", int, 0),
    "entry": ("entry", str, ""),
    "canConnect": ("can_connect", bool, False),
    "httpStatus": ("http_status", int, 0),
    "validHostname": ("valid_hostname", bool, False),
    "validUrl": ("valid_url", bool, False),
}


@dataclass
class ConnectivityResult:  # pylint: disable=too-many-instance-attributes
    """Verdict returned by the connectivity-check service"""

    last_checked: int = 0
    entry: str = ""
    can_connect: bool = False
    http_status: int = 0
    valid_hostname: bool = False
    valid_url: bool = False

    @property
    def verdict(self) -> str:
        if self.can_connect:
            return "I am able to connect"
        return "I am unable to connect"

    @classmethod
    def from_dict(cls, data: Any) -> "ConnectivityResult":
        """
        Build a result from a decoded response body

        Missing keys take their zero value, unknown keys are ignored.

        Raises:
            InvalidResponseError: If the body is not an object or a field has the wrong type
        """
        if not isinstance(data, dict):
            raise InvalidResponseError(
                f"Invalid response from willitconnect: expected a JSON object, got {type(data).__name__}"
            )

        values = {}
        for key, (attribute, expected, zero) in _RESULT_FIELDS.items():
            value = data.get(key)
            if value is None:
                values[attribute] = zero
                continue
            # bool is an int subclass; a boolean is never a valid count or status
            if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
                raise InvalidResponseError(
                    f"Invalid response from willitconnect: field '{key}' must be "
                    f"{expected.__name__}, got {type(value).__name__}"
                )
            values[attribute] = value
        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization"""
        return {key: getattr(self, attribute) for key, (attribute, _, _) in _RESULT_FIELDS.items()}

# --------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for license information.
# --------------------------------------------------------------------------------------------

"""
Platform context for willitconnect

Defines the interface the Base-URL Resolver reads platform information from,
and a Cloud Foundry implementation backed by the cf CLI session file and the
CF v3 API.
"""

import json
import logging
import os
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

import requests

from .exceptions import PlatformContextError
from .models import Domain, Organization, OrganizationDetails

CF_CONFIG_DIR = ".cf"
CF_CONFIG_FILE = "config.json"


class PlatformContext(ABC):
    """Source of organization, domain and API endpoint information"""

    @abstractmethod
    def get_current_organization(self) -> Organization:
        """
        Get the currently targeted organization

        Raises:
            PlatformContextError: If there is no session or no targeted organization
        """
        raise NotImplementedError("Subclasses must implement get_current_organization() method")

    @abstractmethod
    def get_organization_details(self, name: str) -> OrganizationDetails:
        """
        Get an organization with its domains

        Raises:
            PlatformContextError: If the lookup fails
        """
        raise NotImplementedError("Subclasses must implement get_organization_details() method")

    @abstractmethod
    def get_api_endpoint(self) -> str:
        """
        Get the platform API endpoint

        Raises:
            PlatformContextError: If the endpoint cannot be determined
        """
        raise NotImplementedError("Subclasses must implement get_api_endpoint() method")


class CloudFoundryContext(PlatformContext):
    """Platform context read from the cf CLI session"""

    def __init__(
        self,
        cf_home: Optional[str] = None,
        timeout: float = 30,
        session: Optional[requests.Session] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize Cloud Foundry context

        Args:
            cf_home: Directory holding the .cf folder (defaults to $CF_HOME or the user home)
            timeout: Timeout in seconds for CF API calls
            session: Optional requests session
            logger: Optional logger instance
        """
        self.cf_home = cf_home or os.environ.get("CF_HOME") or os.path.expanduser("~")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.logger = logger or logging.getLogger("cf_willitconnect.platform_context")
        self._config: Optional[Dict[str, Any]] = None

    @property
    def config_path(self) -> str:
        return os.path.join(self.cf_home, CF_CONFIG_DIR, CF_CONFIG_FILE)

    def _load_config(self) -> Dict[str, Any]:
        if self._config is not None:
            return self._config

        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                config = json.load(f)
        except FileNotFoundError as exc:
            raise PlatformContextError(f"cf CLI config not found at {self.config_path}") from exc
        except (OSError, ValueError) as exc:
            raise PlatformContextError(f"Unable to read cf CLI config {self.config_path}: {exc}") from exc

        if not isinstance(config, dict):
            raise PlatformContextError(f"Unexpected cf CLI config format in {self.config_path}")

        self._config = config
        return config

    def get_api_endpoint(self) -> str:
        endpoint = self._load_config().get("Target") or ""
        if not endpoint:
            raise PlatformContextError("No API endpoint targeted, use cf api first")
        return endpoint

    def get_current_organization(self) -> Organization:
        config = self._load_config()
        if not config.get("AccessToken"):
            raise PlatformContextError("Not logged in, use cf login first")

        org_fields = config.get("OrganizationFields") or {}
        name = org_fields.get("Name") or ""
        if not name:
            raise PlatformContextError("No organization targeted, use cf target -o first")
        return Organization(name=name, guid=org_fields.get("GUID") or "")

    def get_organization_details(self, name: str) -> OrganizationDetails:
        organizations = self._get("/v3/organizations", params={"names": name})
        resources = organizations.get("resources") or []
        if not resources:
            raise PlatformContextError(f"Organization '{name}' not found")

        guid = resources[0].get("guid")
        domains = self._get(f"/v3/organizations/{guid}/domains")
        return OrganizationDetails(
            name=name,
            domains=[Domain(name=d.get("name") or "") for d in domains.get("resources") or []],
        )

    def _get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Issue an authenticated GET against the CF API and decode the JSON body"""
        config = self._load_config()
        url = self.get_api_endpoint().rstrip("/") + path
        headers = {"Authorization": config.get("AccessToken") or ""}
        verify = not config.get("SSLDisabled", False)

        self.logger.debug("GET %s", url)
        try:
            response = self.session.get(url, params=params, headers=headers,
                                        timeout=self.timeout, verify=verify)
        except requests.RequestException as exc:
            raise PlatformContextError(f"CF API request to {url} failed: {exc}") from exc

        if response.status_code >= 400:
            raise PlatformContextError(
                f"CF API request to {url} returned HTTP {response.status_code}",
                status_code=response.status_code,
            )

        try:
            body = response.json()
        except ValueError as exc:
            raise PlatformContextError(f"CF API returned invalid JSON from {url}: {exc}") from exc
        if not isinstance(body, dict):
            raise PlatformContextError(f"CF API returned an unexpected body from {url}")
        return body

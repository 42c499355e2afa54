# --------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for license information.
# --------------------------------------------------------------------------------------------

"""
Base-URL Resolver for willitconnect

Finds where the connectivity-check service lives, from one of:
- an explicit -route override
- the default domain of the currently targeted organization
- the platform API endpoint
"""

import logging
from typing import Optional

from .exceptions import NoDomainError, NoOrgError, NoSessionError, PlatformContextError
from .models import RouteSource, ServiceRoute
from .platform_context import PlatformContext
from .validators import InputValidator

WIC_ROUTE = "willitconnect"
WIC_PATH = "/v2/willitconnect"

DISCOVERY_DOMAIN = "domain"
DISCOVERY_API = "api"
DISCOVERY_MODES = (DISCOVERY_DOMAIN, DISCOVERY_API)


def resolve_service_route(
    platform_context: PlatformContext,
    route: Optional[str] = None,
    discovery: str = DISCOVERY_DOMAIN,
    logger: Optional[logging.Logger] = None,
) -> ServiceRoute:
    """
    Resolve the connectivity-check service URL.

    Args:
        platform_context: Source of organization and endpoint information
        route: Optional route override; when set, the platform is not consulted
        discovery: "domain" to use the organization's first domain, "api" to use the API endpoint
        logger: Optional logger instance

    Returns:
        ServiceRoute with the service sub-path appended

    Raises:
        InvalidRouteError: If the route override is not a fqdn
        NoSessionError: If there is no platform session
        NoOrgError: If the organization lookup fails
        NoDomainError: If the organization has no usable domain
    """
    logger = logger or logging.getLogger("cf_willitconnect.route_resolver")

    if route:
        route = InputValidator.validate_route(route)
        base_url = route if InputValidator.implied_port(route) is not None else "https://" + route
        source = RouteSource.OVERRIDE
    elif discovery == DISCOVERY_API:
        base_url = _base_url_from_api_endpoint(platform_context)
        source = RouteSource.API_ENDPOINT
    else:
        base_url = _base_url_from_domain(platform_context, logger)
        source = RouteSource.DOMAIN

    base_url = base_url.rstrip("/")
    url = base_url if base_url.endswith(WIC_PATH) else base_url + WIC_PATH
    logger.debug("Resolved willitconnect URL %s from %s", url, source.value)
    return ServiceRoute(base_url=base_url, url=url, source=source)


def _base_url_from_domain(platform_context: PlatformContext, logger: logging.Logger) -> str:
    try:
        org = platform_context.get_current_organization()
    except PlatformContextError as exc:
        logger.debug("Current organization lookup failed: %s", exc)
        raise NoSessionError("Unable to connect to CF, use cf login first") from exc
    if not org or not org.name:
        raise NoSessionError("Unable to connect to CF, use cf login first")

    try:
        details = platform_context.get_organization_details(org.name)
    except PlatformContextError as exc:
        logger.debug("Organization details lookup for %s failed: %s", org.name, exc)
        raise NoOrgError("Unable to find valid org, please view cf target") from exc

    if not details.domains or not details.domains[0].name:
        raise NoDomainError("Unable to find valid domain, please view cf domains")

    return "https://" + WIC_ROUTE + "." + details.domains[0].name


def _base_url_from_api_endpoint(platform_context: PlatformContext) -> str:
    try:
        endpoint = platform_context.get_api_endpoint()
    except PlatformContextError as exc:
        raise NoSessionError("Unable to determine CF ApiEndpoint") from exc
    if not endpoint:
        raise NoSessionError("Unable to determine CF ApiEndpoint")
    return endpoint

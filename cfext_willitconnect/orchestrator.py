# --------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for license information.
# --------------------------------------------------------------------------------------------

"""
willitconnect Orchestrator
"""

import logging
from typing import List, Optional

from cfext_willitconnect.connectivity_client import ConnectivityClient
from cfext_willitconnect.models import ConnectivityResult, TargetDescriptor
from cfext_willitconnect.platform_context import PlatformContext
from cfext_willitconnect.request_builder import build_target_descriptor
from cfext_willitconnect.route_resolver import DISCOVERY_DOMAIN, resolve_service_route


def run_willitconnect(  # pylint: disable=too-many-arguments
    platform_context: PlatformContext,
    connectivity_client: ConnectivityClient,
    host: Optional[str] = None,
    port: Optional[int] = None,
    proxy_host: Optional[str] = None,
    proxy_port: Optional[int] = None,
    route: Optional[str] = None,
    positionals: Optional[List[str]] = None,
    discovery: str = DISCOVERY_DOMAIN,
    logger: Optional[logging.Logger] = None,
) -> ConnectivityResult:
    """
    Check whether the platform can reach a target.

    Resolves the service URL, builds the target descriptor, prints what is
    about to be tested, submits it and prints the verdict.

    Args:
        platform_context: Source of organization and endpoint information
        connectivity_client: Client for the connectivity-check service
        host: -host value
        port: -port value
        proxy_host: -proxyHost value
        proxy_port: -proxyPort value
        route: -route override
        positionals: Bare arguments
        discovery: Base URL discovery variant ("domain" or "api")
        logger: Optional logger instance

    Returns:
        ConnectivityResult from the service

    Raises:
        WillItConnectError: On any resolution, validation or transport failure
    """
    if logger is None:
        logger = logging.getLogger("cf_willitconnect")

    service_route = resolve_service_route(platform_context, route=route, discovery=discovery, logger=logger)
    descriptor = build_target_descriptor(
        service_route,
        host=host,
        port=port,
        proxy_host=proxy_host,
        proxy_port=proxy_port,
        positionals=positionals,
        logger=logger,
    )

    _print_target(descriptor)
    result = connectivity_client.check(descriptor)
    print(result.verdict)

    logger.info("entry=%s httpStatus=%s validHostname=%s validUrl=%s lastChecked=%s",
                result.entry, result.http_status, result.valid_hostname,
                result.valid_url, result.last_checked)
    return result


def _print_target(descriptor: TargetDescriptor):
    print(f"Host: {descriptor.host} - Port: {descriptor.port} - WillItConnect: {descriptor.service_url}")
    if descriptor.has_proxy:
        print(f"Proxy: {descriptor.proxy}")

# --------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for license information.
# --------------------------------------------------------------------------------------------

import requests
from knack.log import get_logger
from cfext_willitconnect._client_factory import (
    cf_cli_config,
    cf_connectivity_client,
    cf_platform_context,
    load_settings
)
from cfext_willitconnect.orchestrator import run_willitconnect

logger = get_logger(__name__)


def willitconnect(host=None, port=None, proxy_host=None, proxy_port=None,
                  route=None, target=None):
    """
    Validate connectivity between the platform and a target.

    Args:
        host: Host or URL to test
        port: Port to test
        proxy_host: HTTP proxy host
        proxy_port: HTTP proxy port
        route: Route of the willitconnect service
        target: Bare arguments (<host> <port> or <url>)
    """
    settings = load_settings(cf_cli_config())

    with requests.Session() as session:
        platform_context = cf_platform_context(settings, session=session, logger=logger)
        connectivity_client = cf_connectivity_client(settings, session=session, logger=logger)

        run_willitconnect(
            platform_context=platform_context,
            connectivity_client=connectivity_client,
            host=host,
            port=port,
            proxy_host=proxy_host,
            proxy_port=proxy_port,
            route=route,
            positionals=target,
            discovery=settings.discovery,
            logger=logger
        )

# --------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for license information.
# --------------------------------------------------------------------------------------------

"""
Request Builder for willitconnect

Turns parsed command arguments into a validated TargetDescriptor. Two input
shapes are accepted:
- Flag mode: -host/-port/-proxyHost/-proxyPort, with a single scheme-prefixed
  positional URL as fallback for the host
- Positional mode: exactly two bare values, host and port, without proxy
"""

import logging
from typing import List, Optional

from .exceptions import UsageError
from .models import ServiceRoute, TargetDescriptor
from .validators import InputValidator

USAGE = (
    "Usage: cf willitconnect -host=<host> -port=<port> "
    "[-proxyHost=<proxyHost> -proxyPort=<proxyPort>] [-route=<route>]\n"
    "       cf willitconnect <host> <port>\n"
    "       cf willitconnect <url>"
)


def build_target_descriptor(  # pylint: disable=too-many-arguments
    service_route: ServiceRoute,
    host: Optional[str] = None,
    port: Optional[int] = None,
    proxy_host: Optional[str] = None,
    proxy_port: Optional[int] = None,
    positionals: Optional[List[str]] = None,
    logger: Optional[logging.Logger] = None,
) -> TargetDescriptor:
    """
    Build the descriptor of the target to test.

    Args:
        service_route: Resolved connectivity-check service location
        host: -host value
        port: -port value
        proxy_host: -proxyHost value
        proxy_port: -proxyPort value
        positionals: Bare arguments left after flag parsing
        logger: Optional logger instance

    Returns:
        TargetDescriptor ready to be sent

    Raises:
        UsageError: If host and port cannot be determined
    """
    logger = logger or logging.getLogger("cf_willitconnect.request_builder")
    positionals = list(positionals or [])

    no_flags = host is None and port is None and proxy_host is None and proxy_port is None
    if no_flags and len(positionals) == 2:
        logger.debug("Using positional mode: %s", positionals)
        return TargetDescriptor(
            host=_require_host(positionals[0]),
            port=InputValidator.validate_port(positionals[1], "port", USAGE),
            service_url=service_route.url,
        )

    logger.debug("Using flag mode")
    host = (host or "").strip()
    if port is not None:
        port = InputValidator.validate_port(port, "-port", USAGE)
    else:
        port = InputValidator.implied_port(host)

    if port is None or not host:
        host, port = _resolve_from_positional(positionals, port)

    has_proxy = bool(proxy_host) and proxy_port is not None
    if has_proxy:
        proxy_port = InputValidator.validate_port(proxy_port, "-proxyPort", USAGE)
    elif proxy_host or proxy_port is not None:
        logger.debug("Ignoring proxy: both -proxyHost and -proxyPort are required")

    return TargetDescriptor(
        host=host,
        port=port,
        service_url=service_route.url,
        has_proxy=has_proxy,
        proxy_host=proxy_host if has_proxy else None,
        proxy_port=proxy_port if has_proxy else None,
    )


def _resolve_from_positional(positionals: List[str], explicit_port: Optional[int]):
    """Take host and implied port from a single scheme-prefixed positional URL"""
    if len(positionals) != 1:
        raise UsageError(USAGE)

    url = positionals[0]
    implied = InputValidator.implied_port(url)
    if implied is None:
        raise UsageError(USAGE)

    # An explicit -port wins over the scheme default
    return url, explicit_port if explicit_port is not None else implied


def _require_host(value: str) -> str:
    if not value or not value.strip():
        raise UsageError(USAGE)
    return value.strip()

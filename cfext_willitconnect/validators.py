# --------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for license information.
# --------------------------------------------------------------------------------------------

"""
Input validation utilities for willitconnect

Provides validation for user inputs including:
- Route overrides (fully-qualified domain heuristic)
- TCP ports for the target and the proxy
- URL schemes and their implied ports
"""

from typing import Optional

from .exceptions import InvalidRouteError, UsageError

# Configuration constants
MIN_ROUTE_DOTS = 2
MIN_PORT = 1
MAX_PORT = 65535

SCHEME_PORTS = (
    ("http://", 80),
    ("https://", 443),
)


class InputValidator:
    """Validates user inputs for correctness"""

    @staticmethod
    def validate_route(route: str) -> str:
        """
        Validate a route override

        A route is accepted as a fully-qualified domain when it contains at
        least two dots, e.g. willitconnect.apps.example.com.

        Args:
            route: User-provided route

        Returns:
            Route with surrounding whitespace removed

        Raises:
            InvalidRouteError: If the route has fewer than two dots
        """
        route = route.strip()
        if route.count(".") < MIN_ROUTE_DOTS:
            raise InvalidRouteError("-route must be a fqdn")
        return route

    @staticmethod
    def validate_port(value, name: str, usage: str) -> int:
        """
        Validate a TCP port given as an int or a string

        Args:
            value: Port value
            name: Argument name (for error messages)
            usage: Usage text appended to the error

        Returns:
            Port as int

        Raises:
            UsageError: If the value is not an integer within 1-65535
        """
        try:
            port = int(value)
        except (TypeError, ValueError) as exc:
            raise UsageError(f"{name} must be an integer, got '{value}'\n{usage}") from exc

        if port < MIN_PORT or port > MAX_PORT:
            raise UsageError(f"{name} must be between {MIN_PORT} and {MAX_PORT}, got {port}\n{usage}")
        return port

    @staticmethod
    def implied_port(url: Optional[str]) -> Optional[int]:
        """Return the default port implied by an http:// or https:// prefix"""
        if not url:
            return None
        for scheme, port in SCHEME_PORTS:
            if url.startswith(scheme):
                return port
        return None

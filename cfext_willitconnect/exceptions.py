# --------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for license information.
# --------------------------------------------------------------------------------------------

"""
Custom exceptions for standardized error handling

Every error derives from knack's CLIError so the host CLI prints the message
verbatim and exits with a non-zero code.
"""

from knack.util import CLIError


class WillItConnectError(CLIError):
    """Base exception for willitconnect"""


class UsageError(WillItConnectError):
    """Host and port could not be determined from the arguments"""


class NoSessionError(WillItConnectError):
    """Platform session or login context is unavailable"""


class NoOrgError(WillItConnectError):
    """Organization lookup failed"""


class NoDomainError(WillItConnectError):
    """Organization has no usable domain"""


class InvalidRouteError(WillItConnectError):
    """Route override is not a fully-qualified domain"""


class ConnectivityUnreachableError(WillItConnectError):
    """The connectivity-check service could not be reached"""


class InvalidResponseError(WillItConnectError):
    """The connectivity-check service returned an unexpected body"""


class InvalidConfigurationError(WillItConnectError):
    """Invalid configuration provided"""


class PlatformContextError(WillItConnectError):
    """Platform API call failed"""

    def __init__(self, message: str, status_code: int = None):
        self.status_code = status_code
        super().__init__(message)

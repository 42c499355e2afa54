# --------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for license information.
# --------------------------------------------------------------------------------------------

"""
Connectivity Client for willitconnect

Submits a TargetDescriptor to the connectivity-check service and decodes the
verdict. The remote service does all the probing.
"""

import logging
from typing import Optional

import requests

from .exceptions import ConnectivityUnreachableError, InvalidResponseError
from .models import ConnectivityResult, TargetDescriptor

DEFAULT_TIMEOUT = 30


# pylint: disable=too-few-public-methods
class ConnectivityClient:
    """Talks to the connectivity-check service"""

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize Connectivity Client

        Args:
            timeout: Request timeout in seconds
            session: Optional requests session
            logger: Optional logger instance
        """
        self.timeout = timeout
        self.session = session or requests.Session()
        self.logger = logger or logging.getLogger("cf_willitconnect.connectivity_client")

    def check(self, descriptor: TargetDescriptor) -> ConnectivityResult:
        """
        Ask the service whether it can reach the target

        Args:
            descriptor: Target to test

        Returns:
            Decoded ConnectivityResult

        Raises:
            ConnectivityUnreachableError: If the service cannot be reached
            InvalidResponseError: If the response body is not the expected JSON
        """
        payload = descriptor.to_request_body().to_json()
        self.logger.debug("POST %s %s", descriptor.service_url, payload)

        try:
            response = self.session.post(
                descriptor.service_url,
                data=payload,
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise ConnectivityUnreachableError(f"Unable to access willitconnect: {exc}") from exc

        self.logger.debug("willitconnect responded with HTTP %s", response.status_code)

        try:
            body = response.json()
        except ValueError as exc:
            raise InvalidResponseError(f"Invalid response from willitconnect: {exc}") from exc

        return ConnectivityResult.from_dict(body)

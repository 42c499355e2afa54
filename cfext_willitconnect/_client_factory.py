# --------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for license information.
# --------------------------------------------------------------------------------------------

import os
from dataclasses import dataclass

from knack.config import CLIConfig

from cfext_willitconnect.connectivity_client import DEFAULT_TIMEOUT
from cfext_willitconnect.exceptions import InvalidConfigurationError
from cfext_willitconnect.route_resolver import DISCOVERY_DOMAIN, DISCOVERY_MODES

CLI_NAME = 'cf-willitconnect'
CLI_ENV_VAR_PREFIX = 'CF_WILLITCONNECT'
GLOBAL_CONFIG_DIR = os.path.expanduser(os.path.join('~', '.{}'.format(CLI_NAME)))

CONFIG_SECTION = 'willitconnect'


@dataclass(frozen=True)
class WillItConnectSettings:
    discovery: str = DISCOVERY_DOMAIN
    timeout: float = DEFAULT_TIMEOUT


def cf_cli_config(config_dir=None):
    return CLIConfig(config_dir=config_dir or GLOBAL_CONFIG_DIR, config_env_var_prefix=CLI_ENV_VAR_PREFIX)


def load_settings(config):
    discovery = config.get(CONFIG_SECTION, 'discovery', fallback=DISCOVERY_DOMAIN).strip().lower()
    if discovery not in DISCOVERY_MODES:
        raise InvalidConfigurationError(
            "Invalid discovery '{}', expected one of: {}".format(discovery, ', '.join(DISCOVERY_MODES)))

    raw_timeout = config.get(CONFIG_SECTION, 'timeout', fallback=str(DEFAULT_TIMEOUT))
    try:
        timeout = float(raw_timeout)
    except ValueError as exc:
        raise InvalidConfigurationError("Invalid timeout '{}', expected seconds".format(raw_timeout)) from exc
    if timeout <= 0:
        raise InvalidConfigurationError("Invalid timeout '{}', must be positive".format(raw_timeout))

    return WillItConnectSettings(discovery=discovery, timeout=timeout)


def cf_platform_context(settings, session=None, logger=None):
    from cfext_willitconnect.platform_context import CloudFoundryContext
    return CloudFoundryContext(timeout=settings.timeout, session=session, logger=logger)


def cf_connectivity_client(settings, session=None, logger=None):
    from cfext_willitconnect.connectivity_client import ConnectivityClient
    return ConnectivityClient(timeout=settings.timeout, session=session, logger=logger)

# --------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for license information.
# --------------------------------------------------------------------------------------------

from knack.commands import CLICommandsLoader
from cfext_willitconnect._help import helps  # pylint: disable=unused-import


class WillItConnectCommandsLoader(CLICommandsLoader):

    def load_command_table(self, args):
        from cfext_willitconnect.commands import load_command_table
        load_command_table(self, args)
        return super().load_command_table(args)

    def load_arguments(self, command):
        from cfext_willitconnect._params import load_arguments
        load_arguments(self, command)
        super().load_arguments(command)


COMMAND_LOADER_CLS = WillItConnectCommandsLoader


def get_default_cli():
    from knack import CLI
    from cfext_willitconnect._client_factory import CLI_ENV_VAR_PREFIX, CLI_NAME, GLOBAL_CONFIG_DIR
    return CLI(cli_name=CLI_NAME,
               config_dir=GLOBAL_CONFIG_DIR,
               config_env_var_prefix=CLI_ENV_VAR_PREFIX,
               commands_loader_cls=COMMAND_LOADER_CLS)

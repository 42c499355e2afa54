# --------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for license information.
# --------------------------------------------------------------------------------------------

from knack.commands import CommandGroup


def load_command_table(self, _):
    with CommandGroup(self, '', 'cfext_willitconnect.custom#{}') as g:
        g.command('willitconnect', 'willitconnect')
        g.command('wic', 'willitconnect')

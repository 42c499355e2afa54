# --------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for license information.
# --------------------------------------------------------------------------------------------

from knack.arguments import ArgumentsContext


def load_arguments(self, _):
    for scope in ('willitconnect', 'wic'):
        with ArgumentsContext(self, scope) as c:
            c.argument('host', options_list=['-host', '--host'],
                       help='Host to test. A URL starting with http:// or https:// implies '
                            'port 80 or 443 unless -port is given.')
            c.argument('port', options_list=['-port', '--port'],
                       help='Port to test.')
            c.argument('proxy_host', options_list=['-proxyHost', '--proxy-host'],
                       help='HTTP proxy host. Ignored unless -proxyPort is also given.')
            c.argument('proxy_port', options_list=['-proxyPort', '--proxy-port'],
                       help='HTTP proxy port. Ignored unless -proxyHost is also given.')
            c.argument('route', options_list=['-route', '--route'],
                       help='Fully-qualified route of the willitconnect service, e.g. '
                            'willitconnect.apps.example.com. Defaults to willitconnect.<org domain>.')
            c.positional('target', nargs='*',
                         help='<host> <port>, or a single http:// or https:// URL.')

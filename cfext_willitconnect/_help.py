# --------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for license information.
# --------------------------------------------------------------------------------------------

from knack.help_files import helps


_WILLITCONNECT_HELP = """
    type: command
    short-summary: Validate connectivity between Cloud Foundry and a target.
    long-summary: |
        Asks the willitconnect service running inside Cloud Foundry whether it can
        reach a host and port, optionally through an HTTP proxy.

        This command performs no probing itself: the service URL defaults to
        willitconnect.<first domain of the targeted org>, or to the CF API endpoint
        when the `discovery` setting of the `willitconnect` config section is `api`.
        Use -route to point at another deployment.
    examples:
        - name: Check a host and port
          text: cf-willitconnect willitconnect -host=foo.com -port=80
        - name: Check a URL, port 443 is implied
          text: cf-willitconnect willitconnect https://foo.com
        - name: Check a host and port with positional arguments
          text: cf-willitconnect wic foo.com 80
        - name: Check through a proxy against a specific willitconnect route
          text: |
            cf-willitconnect willitconnect -host=foo.com -port=443 \\
                -proxyHost=proxy.example.com -proxyPort=8080 -route=willitconnect.apps.example.com
"""

helps['willitconnect'] = _WILLITCONNECT_HELP
helps['wic'] = _WILLITCONNECT_HELP

# --------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for license information.
# --------------------------------------------------------------------------------------------

import sys

from cfext_willitconnect import get_default_cli


def main(args=None):
    cli = get_default_cli()
    return cli.invoke(sys.argv[1:] if args is None else args)


if __name__ == '__main__':
    sys.exit(main())

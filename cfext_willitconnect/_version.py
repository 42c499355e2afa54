# --------------------------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for license information.
# --------------------------------------------------------------------------------------------

"""Version information for the willitconnect extension"""

__version__ = "1.1.0"
__author__ = "willitconnect Team"
__description__ = "Validates connectivity between Cloud Foundry and a target"

# -*- coding: utf-8 -*-

# Copyright: (c) 2025, tfc-dispatch contributors
# GNU General Public License v3.0+ (see COPYING or https://www.gnu.org/licenses/gpl-3.0.txt)

"""
Terraform Cloud run dispatch

Triggers runs on every Terraform Cloud workspace whose name matches a
wildcard pattern.
"""

__version__ = '1.0.0'

from tfc_dispatch.terraform_base import (  # noqa: E402
    TerraformBase,
    TerraformBaseError,
    TerraformConfigError,
    TerraformAuthError,
    TerraformClientError,
    TerraformValidationError,
    TerraformOperationError,
    TerraformListError,
    TerraformRunError
)
from tfc_dispatch.config import DispatchSettings, load_settings  # noqa: E402
from tfc_dispatch.dispatch import TerraformWorkspaceDispatch  # noqa: E402

__all__ = [
    'TerraformBase',
    'TerraformBaseError',
    'TerraformConfigError',
    'TerraformAuthError',
    'TerraformClientError',
    'TerraformValidationError',
    'TerraformOperationError',
    'TerraformListError',
    'TerraformRunError',
    'DispatchSettings',
    'load_settings',
    'TerraformWorkspaceDispatch'
]

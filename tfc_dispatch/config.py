# -*- coding: utf-8 -*-

# Copyright: (c) 2025, tfc-dispatch contributors
# GNU General Public License v3.0+ (see COPYING or https://www.gnu.org/licenses/gpl-3.0.txt)

"""Environment configuration for tfc-dispatch.

Settings are read from unprefixed environment variables (``TOKEN``,
``ORGANIZATION``, ...) and, when present, a ``.env`` file in the working
directory. Environment variables win over the file.
"""

from typing import Optional

from pydantic import Field, SecretStr, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from tfc_dispatch.terraform_base import TerraformConfigError

__all__ = [
    'DEFAULT_ADDRESS',
    'DEFAULT_ORGANIZATION',
    'DispatchSettings',
    'load_settings',
]

DEFAULT_ADDRESS = 'https://app.terraform.io'

DEFAULT_ORGANIZATION = 'cbh'


class DispatchSettings(BaseSettings):
    """Settings for dispatching workspace runs.

    Attributes:
        token: Terraform Cloud API token (``TOKEN``, required).
        organization: Organization scope for every command (``ORGANIZATION``).
        address: Terraform Cloud/Enterprise address (``ADDRESS``).
        retry_server_errors: Let the pytfe transport retry server errors.
        max_retries: Retry budget used when retries are enabled.
    """

    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        extra='ignore',
    )

    token: SecretStr
    organization: str = DEFAULT_ORGANIZATION
    address: str = DEFAULT_ADDRESS
    retry_server_errors: bool = True
    max_retries: int = Field(default=5, ge=0)

    @field_validator('organization')
    @classmethod
    def check_organization(cls, v: str) -> str:
        if not v.strip():
            raise ValueError('organization cannot be empty')
        return v.strip()

    @field_validator('address')
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip('/')


def load_settings(env_file: Optional[str] = '.env') -> DispatchSettings:
    """Load settings from the environment.

    Args:
        env_file: Dotenv file to read in addition to the environment, or
            None to read the environment only.

    Returns:
        Validated DispatchSettings.

    Raises:
        TerraformConfigError: If a required variable is missing or a value
            is malformed.
    """
    try:
        return DispatchSettings(_env_file=env_file)
    except ValidationError as e:
        problems = []
        for error in e.errors():
            field = '.'.join(str(part) for part in error['loc']) or 'settings'
            problems.append(f"{field.upper()}: {error['msg']}")
        raise TerraformConfigError(
            'Invalid configuration: ' + '; '.join(problems)
        ) from e

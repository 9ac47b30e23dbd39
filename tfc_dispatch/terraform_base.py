# -*- coding: utf-8 -*-

# Copyright: (c) 2025, tfc-dispatch contributors
# GNU General Public License v3.0+ (see COPYING or https://www.gnu.org/licenses/gpl-3.0.txt)

from typing import TYPE_CHECKING, Dict, Any, Optional

from pytfe import TFEClient, TFEConfig

if TYPE_CHECKING:
    from tfc_dispatch.config import DispatchSettings


class TerraformBaseError(Exception):
    """Base exception for Terraform operations"""
    pass


class TerraformConfigError(TerraformBaseError):
    """Environment configuration errors"""
    pass


class TerraformAuthError(TerraformBaseError):
    """Authentication related errors"""
    pass


class TerraformClientError(TerraformBaseError):
    """Client construction errors"""
    pass


class TerraformValidationError(TerraformBaseError):
    """Validation related errors"""
    pass


class TerraformOperationError(TerraformBaseError):
    """Operation related errors"""
    pass


class TerraformListError(TerraformOperationError):
    """Workspace listing failed after some workspaces were listed"""

    def __init__(self, message: str, workspaces_listed: int):
        super().__init__(message)
        self.workspaces_listed = workspaces_listed


class TerraformRunError(TerraformOperationError):
    """Run creation failed for a given workspace"""

    def __init__(self, message: str, workspace_id: str):
        super().__init__(message)
        self.workspace_id = workspace_id


class TerraformBase:
    """Base class for Terraform Enterprise/Cloud operations"""

    def __init__(self, settings: 'DispatchSettings', client: Optional[Any] = None):
        self.settings = settings
        self.client = client

        if self.client is None:
            self._init_client()

    def _init_client(self):
        """Initialize TFE client with authentication"""
        token = self.settings.token.get_secret_value()

        if not token:
            raise TerraformAuthError('Terraform API token is required')

        # Server error retries are handled by the pytfe transport
        max_retries = self.settings.max_retries if self.settings.retry_server_errors else 0

        try:
            config = TFEConfig(
                token=token,
                address=self.settings.address,
                max_retries=max_retries
            )
            self.client = TFEClient(config=config)
        except Exception as e:
            raise TerraformClientError(f'Failed to initialize Terraform client: {str(e)}') from e

    def _describe_tfe_exception(self, e: Exception, operation: str) -> str:
        """Convert a TFE exception into a readable message"""
        # pytfe errors carry the HTTP status, other errors only a message
        status = getattr(e, 'status', None)
        error_msg = f"{status or ''} {str(e)}".lower()

        if '401' in error_msg or 'unauthorized' in error_msg:
            return f'Authentication failed during {operation}'
        elif '403' in error_msg or 'forbidden' in error_msg:
            return f'Insufficient permissions for {operation}'
        elif '404' in error_msg or 'not found' in error_msg:
            return f'Resource not found during {operation}'
        elif '409' in error_msg or 'conflict' in error_msg:
            return f'Conflict during {operation}: workspace is locked or already has a pending run'
        elif '422' in error_msg or 'validation' in error_msg:
            return f'Validation error during {operation}: {str(e)}'
        elif '429' in error_msg or 'rate limit' in error_msg:
            return f'Rate limited during {operation}'
        return f'Unexpected error during {operation}: {str(e)}'

    def _normalize_workspace_data(self, workspace: Any) -> Dict[str, Any]:
        """Normalize workspace data for consistent output"""
        # Convert Pydantic model to dict if needed
        if hasattr(workspace, 'model_dump'):
            workspace = workspace.model_dump()
        elif not isinstance(workspace, dict):
            workspace = dict(workspace)

        organization = workspace.get('organization')
        if isinstance(organization, dict):
            organization = organization.get('name') or organization.get('id')

        normalized = {
            'id': workspace.get('id'),
            'name': workspace.get('name'),
            'organization': organization
        }

        return {k: v for k, v in normalized.items() if v is not None}

# -*- coding: utf-8 -*-

# Copyright: (c) 2025, tfc-dispatch contributors
# GNU General Public License v3.0+ (see COPYING or https://www.gnu.org/licenses/gpl-3.0.txt)

"""
Run dispatch across Terraform Cloud workspaces

Lists every workspace in the organization whose name matches a wildcard
pattern and creates one run per matched workspace. The listing is consumed
one workspace at a time, so pytfe only requests the next page once every
workspace on the current page has its run. The first failure aborts the
dispatch.
"""

from typing import Dict, Any, Iterator

from pytfe.models import RunCreateOptions, Workspace, WorkspaceListOptions

from tfc_dispatch.logging import get_logger
from tfc_dispatch.terraform_base import (
    TerraformBase,
    TerraformListError,
    TerraformRunError,
    TerraformValidationError
)

logger = get_logger(__name__)

# Largest page size the API accepts
PAGE_SIZE = 100


class TerraformWorkspaceDispatch(TerraformBase):
    """Trigger runs on every workspace matching a wildcard pattern"""

    def dispatch_runs(self, wildcard: str) -> int:
        """Create a run for each matching workspace and return the run count"""
        if not wildcard:
            raise TerraformValidationError('Wildcard pattern cannot be empty')

        organization = self.settings.organization
        runs = 0

        for workspace in self._iter_workspaces(organization, wildcard):
            logger.info(
                'workspace_matched',
                workspace=workspace.get('name'),
                workspace_id=workspace['id']
            )
            self._create_run(workspace)
            runs += 1

        logger.info('dispatch_completed', organization=organization, pattern=wildcard, runs=runs)
        return runs

    def _iter_workspaces(self, organization: str, wildcard: str) -> Iterator[Dict[str, Any]]:
        """Yield normalized workspaces matching the wildcard, page by page"""
        options = WorkspaceListOptions(wildcard_name=wildcard, page_size=PAGE_SIZE)
        listed = 0

        try:
            workspaces = iter(self.client.workspaces.list(organization, options))
        except Exception as e:
            raise TerraformListError(self._describe_tfe_exception(e, 'workspace listing'), listed) from e

        while True:
            try:
                item = next(workspaces)
            except StopIteration:
                return
            except Exception as e:
                message = self._describe_tfe_exception(
                    e, f'workspace listing after {listed} workspaces'
                )
                raise TerraformListError(message, listed) from e

            workspace = self._normalize_workspace_data(item)
            if not workspace.get('id'):
                raise TerraformListError(f'Workspace without an ID in listing response: {workspace}', listed)

            listed += 1
            yield workspace

    def _create_run(self, workspace: Dict[str, Any]):
        """Create a run with the default configuration"""
        workspace_id = workspace['id']
        options = RunCreateOptions(workspace=Workspace(id=workspace_id))

        try:
            return self.client.runs.create(options)
        except Exception as e:
            operation = f"run creation for workspace '{workspace.get('name', workspace_id)}'"
            raise TerraformRunError(self._describe_tfe_exception(e, operation), workspace_id) from e

# -*- coding: utf-8 -*-

# Copyright: (c) 2025, tfc-dispatch contributors
# GNU General Public License v3.0+ (see COPYING or https://www.gnu.org/licenses/gpl-3.0.txt)

"""Command-line interface for tfc-dispatch.

Each subcommand is one row of WORKSPACE_RUN_COMMANDS: either a fixed
wildcard pattern or a required ``--filter`` option whose value becomes the
prefix of the pattern.
"""

import logging
from typing import Any, Iterable, NamedTuple, Optional

import click

from tfc_dispatch import __version__
from tfc_dispatch.config import load_settings
from tfc_dispatch.dispatch import TerraformWorkspaceDispatch
from tfc_dispatch.logging import configure_logging, get_logger
from tfc_dispatch.terraform_base import TerraformBaseError

__all__ = [
    'WORKSPACE_RUN_COMMANDS',
    'WorkspaceRunCommand',
    'cli',
    'main',
    'register_workspace_run_commands',
]

logger = get_logger(__name__)

FILTER_PARAM = 'filter_value'


class WorkspaceRunCommand(NamedTuple):
    """A subcommand that dispatches runs for one wildcard pattern.

    Exactly one of ``pattern`` and ``filter_help`` is set. With
    ``filter_help`` the command takes a required ``--filter/-b`` option and
    dispatches against ``<filter>*``.
    """

    name: str
    short_help: str
    pattern: Optional[str] = None
    filter_help: Optional[str] = None


WORKSPACE_RUN_COMMANDS = (
    WorkspaceRunCommand(
        name='baseline',
        short_help='Execute a run on all baseline workspaces',
        pattern='baseline-*',
    ),
    WorkspaceRunCommand(
        name='inception',
        short_help='Execute a run on all inception workspaces',
        pattern='wl-inception-*',
    ),
    WorkspaceRunCommand(
        name='custom',
        short_help='Execute a run on all custom workspaces',
        filter_help='Use this filter to select workspaces',
    ),
)


def _require_non_empty(ctx: click.Context, param: click.Parameter, value: Optional[str]) -> Optional[str]:
    if value is not None and not value.strip():
        raise click.BadParameter('must not be empty')
    return value


def dispatch_pattern(ctx: click.Context, pattern: str) -> int:
    """Load settings, dispatch runs for ``pattern`` and exit 1 on failure."""
    try:
        settings = load_settings()
        dispatcher = TerraformWorkspaceDispatch(settings)
        return dispatcher.dispatch_runs(pattern)
    except TerraformBaseError as e:
        logger.error('dispatch_failed', pattern=pattern, error=str(e))
        ctx.exit(1)


def _build_command(spec: WorkspaceRunCommand) -> click.Command:
    params = []
    if spec.filter_help is not None:
        params.append(
            click.Option(
                ['-b', '--filter', FILTER_PARAM],
                required=True,
                callback=_require_non_empty,
                help=spec.filter_help,
            )
        )

    @click.pass_context
    def callback(ctx: click.Context, **kwargs: Any) -> None:
        if spec.filter_help is not None:
            pattern = f'{kwargs[FILTER_PARAM]}*'
        else:
            pattern = spec.pattern
        dispatch_pattern(ctx, pattern)

    return click.Command(
        name=spec.name,
        callback=callback,
        params=params,
        help=spec.short_help,
        short_help=spec.short_help,
    )


def register_workspace_run_commands(
    group: click.Group, commands: Iterable[WorkspaceRunCommand]
) -> None:
    """Add one click command per table row to ``group``."""
    for spec in commands:
        if (spec.pattern is None) == (spec.filter_help is None):
            raise ValueError(
                f"Command '{spec.name}' needs exactly one of pattern or filter_help"
            )
        group.add_command(_build_command(spec))


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name='tfc-dispatch')
@click.option(
    '-v',
    '--verbose',
    is_flag=True,
    default=False,
    help='Enable DEBUG logging.',
)
@click.option(
    '--log-level',
    envvar='LOG_LEVEL',
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
    default='INFO',
    show_default=True,
    help='Log level (env: LOG_LEVEL).',
)
@click.option(
    '--log-format',
    envvar='LOG_FORMAT',
    type=click.Choice(['console', 'json'], case_sensitive=False),
    default='console',
    show_default=True,
    help='Log output format (env: LOG_FORMAT).',
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, log_level: str, log_format: str) -> None:
    """CLI execute runs on specific sets of terraform cloud workspaces."""
    level = logging.DEBUG if verbose else getattr(logging, log_level.upper())
    configure_logging(json_output=log_format.lower() == 'json', level=level)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_workspace_run_commands(cli, WORKSPACE_RUN_COMMANDS)


def main() -> None:
    """Console script entry point."""
    cli(prog_name='tfc-dispatch')

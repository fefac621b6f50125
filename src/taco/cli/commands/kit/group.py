"""Kit commands group."""

import logging

import click

from taco.cli.commands.kit.list_cmd import list_kits, run_kit_list
from taco.cli.commands.kit.select_cmd import select_kit
from taco.cli.error_boundary import cli_error_boundary
from taco.cli.options import KitCommandOptions
from taco.core.context import TacoContext

logger = logging.getLogger(__name__)


@click.group("kit", invoke_without_command=True)
@click.pass_context
@cli_error_boundary
def kit_group(click_ctx: click.Context) -> None:
    """List kits and select the kit or Cordova CLI version for a project."""
    if click_ctx.invoked_subcommand is None:
        # Default behavior: list kits
        ctx: TacoContext = click_ctx.obj
        telemetry = run_kit_list(ctx, KitCommandOptions())
        logger.debug("Telemetry: %s", telemetry)


kit_group.add_command(list_kits)
kit_group.add_command(select_kit)

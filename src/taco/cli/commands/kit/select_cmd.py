"""Select command for switching a project's kit or Cordova CLI version."""

import logging

import click

from taco.cli.error_boundary import cli_error_boundary
from taco.cli.options import KitCommandOptions
from taco.cli.output import user_output
from taco.core.context import TacoContext
from taco.core.telemetry import CommandTelemetryProperties, telemetry_properties
from taco.kits.selection import target_from_options

logger = logging.getLogger(__name__)


def run_kit_select(ctx: TacoContext, options: KitCommandOptions) -> CommandTelemetryProperties:
    """Select a kit or Cordova CLI version for the project in ctx.cwd.

    Returns:
        Telemetry properties describing the sub-command and options used

    Raises:
        TacoError: If the target is invalid or the manifest cannot be updated
    """
    target = target_from_options(options.kit, options.cordova)
    result = ctx.kit_selection().select(ctx.cwd, target)

    if result.kit is not None:
        user_output(
            click.style("✓", fg="green")
            + f" Project now uses kit {result.kit.kit_id} (Cordova CLI {result.kit.cordova_cli})"
        )
    else:
        user_output(
            click.style("✓", fg="green")
            + f" Project now uses Cordova CLI {result.current.cordova_cli}"
        )

    return telemetry_properties("select", options.telemetry(exclude=frozenset({"json"})))


@click.command(name="select")
@click.option("--kit", "kit_id", help="Kit ID to select.")
@click.option("--cordova", "cordova_version", help="Cordova CLI version to select.")
@click.pass_obj
@cli_error_boundary
def select_kit(ctx: TacoContext, kit_id: str | None, cordova_version: str | None) -> None:
    """Select a kit or a Cordova CLI version for the current project."""
    telemetry = run_kit_select(ctx, KitCommandOptions(kit=kit_id, cordova=cordova_version))
    logger.debug("Telemetry: %s", telemetry)

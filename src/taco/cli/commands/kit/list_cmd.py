"""List command for showing available kits."""

import json
import logging
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from taco.cli.error_boundary import cli_error_boundary
from taco.cli.options import KitCommandOptions
from taco.cli.output import user_output
from taco.core.context import TacoContext
from taco.core.errors import TacoError, TacoErrorCode
from taco.core.path_utils import create_directory_if_necessary
from taco.core.telemetry import CommandTelemetryProperties, telemetry_properties
from taco.kits.models import Kit

logger = logging.getLogger(__name__)


def run_kit_list(ctx: TacoContext, options: KitCommandOptions) -> CommandTelemetryProperties:
    """List kits, show one kit in detail, or write the catalog as JSON.

    Returns:
        Telemetry properties describing the sub-command and options used
    """
    registry = ctx.kit_registry

    if options.kit is not None:
        kits = [registry.resolve_kit(options.kit)]
    else:
        kits = list(registry.list_kits())

    if options.json is not None:
        _write_kits_json(kits, _resolve_output_path(ctx, options.json))
    elif options.kit is not None:
        _show_kit_details(kits[0])
    else:
        _show_kit_table(kits)

    return telemetry_properties("list", options.telemetry())


def _resolve_output_path(ctx: TacoContext, raw_path: str) -> Path:
    path = Path(raw_path)
    return path if path.is_absolute() else ctx.cwd / path


def _write_kits_json(kits: list[Kit], output_path: Path) -> None:
    data = {"kits": {kit.kit_id: kit.to_json_dict() for kit in kits}}
    try:
        create_directory_if_necessary(output_path.parent)
        output_path.write_text(json.dumps(data, indent=4) + "\n", encoding="utf-8")
    except OSError as e:
        raise TacoError.wrap(TacoErrorCode.FAILED_FILE_WRITE, e, output_path) from e
    user_output(f"Wrote {len(kits)} kit(s) to {output_path}")


def _kit_status(kit: Kit) -> str:
    if kit.deprecated:
        return "[yellow]deprecated[/yellow]"
    if kit.default:
        return "[green]default[/green]"
    return ""


def _show_kit_table(kits: list[Kit]) -> None:
    if not kits:
        user_output("No kits available")
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("kit", style="cyan", no_wrap=True)
    table.add_column("cordova-cli", no_wrap=True)
    table.add_column("released", no_wrap=True)
    table.add_column("status", no_wrap=True)

    for kit in kits:
        table.add_row(kit.kit_id, kit.cordova_cli, kit.release_date or "", _kit_status(kit))

    console = Console(stderr=True, width=200, force_terminal=True)
    console.print(table)
    console.print()


def _show_kit_details(kit: Kit) -> None:
    user_output(click.style(kit.kit_id, bold=True))
    if kit.description:
        user_output(f"  {kit.description}")
    user_output(f"  cordova-cli: {kit.cordova_cli}")
    if kit.deprecated:
        user_output(click.style("  This kit is deprecated", fg="yellow"))

    if kit.platforms:
        user_output("\n  Platforms:")
        for platform, version in kit.platforms.items():
            user_output(f"    {platform:<12} {version}")

    if kit.plugins:
        user_output("\n  Plugins:")
        for plugin, version in kit.plugins.items():
            user_output(f"    {plugin:<30} {version}")


@click.command(name="list")
@click.option("--kit", "kit_id", help="Show details for a single kit.")
@click.option("--json", "json_path", help="Write the kit metadata as JSON to this path.")
@click.pass_obj
@cli_error_boundary
def list_kits(ctx: TacoContext, kit_id: str | None, json_path: str | None) -> None:
    """List the available kits."""
    telemetry = run_kit_list(ctx, KitCommandOptions(kit=kit_id, json=json_path))
    logger.debug("Telemetry: %s", telemetry)

import logging

import click

from taco.cli.commands.create import create_cmd
from taco.cli.commands.kit.group import kit_group
from taco.cli.error_boundary import cli_error_boundary
from taco.core.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="taco-cli")
@click.option("--debug", is_flag=True, help="Enable debug logging.")
@click.pass_context
@cli_error_boundary
def cli(ctx: click.Context, debug: bool) -> None:
    """Create Cordova projects and manage the kits they are built with."""
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context(debug=debug)
    _configure_logging(debug or ctx.obj.config.debug)


cli.add_command(create_cmd)
cli.add_command(kit_group)


def main() -> None:
    """CLI entry point used by the `taco` console script."""
    cli()

"""Output helpers for CLI commands with clear intent.

user_output goes to stderr (progress, errors, human-facing text) so stdout
stays clean for machine_output.
"""

import click


def user_output(message: str = "") -> None:
    """Emit human-facing output on stderr."""
    click.echo(message, err=True)


def machine_output(message: str = "") -> None:
    """Emit machine-readable output on stdout."""
    click.echo(message)

"""Create command for scaffolding a new Cordova project with a taco.json manifest."""

import asyncio
from pathlib import Path

import click

from taco.cli.error_boundary import cli_error_boundary
from taco.cli.output import user_output
from taco.core.context import TacoContext
from taco.core.errors import TacoError, TacoErrorCode
from taco.core.path_utils import copy_recursive, create_directory_if_necessary, is_path_valid
from taco.core.string_utils import invalid_app_name_characters, is_valid_cordova_app_name
from taco.kits.selection import KitTarget, SelectionTarget, target_from_options
from taco.project.manifest import ProjectManifest


def _validate_project_path(ctx: TacoContext, raw_path: str) -> Path:
    if not raw_path or not is_path_valid(raw_path):
        raise TacoError(TacoErrorCode.INVALID_PROJECT_PATH, raw_path)

    path = Path(raw_path)
    project_path = path if path.is_absolute() else ctx.cwd / path
    if project_path.exists() and (not project_path.is_dir() or any(project_path.iterdir())):
        raise TacoError(TacoErrorCode.PROJECT_PATH_NOT_EMPTY, project_path)
    return project_path


def _choose_target(
    ctx: TacoContext, kit_id: str | None, cordova_version: str | None
) -> SelectionTarget:
    if kit_id is None and cordova_version is None:
        return KitTarget(ctx.kit_registry.default_kit().kit_id)
    return target_from_options(kit_id, cordova_version)


def run_create(
    ctx: TacoContext,
    raw_path: str,
    app_id: str | None,
    app_name: str | None,
    kit_id: str | None,
    cordova_version: str | None,
    copy_from: Path | None,
) -> ProjectManifest:
    """Scaffold a Cordova project and record its kit or CLI version in taco.json.

    Everything is validated before Cordova runs: the project path, the app
    name, and the kit or CLI version. Without --kit or --cordova the
    default kit is used.

    Returns:
        The manifest written to the new project

    Raises:
        TacoError: InvalidProjectPath, ProjectPathNotEmpty, InvalidAppName,
            InvalidKit, InvalidVersion, CommandFailed, FailedRecursiveCopy,
            or FailedFileWrite
    """
    project_path = _validate_project_path(ctx, raw_path)

    if app_name is not None and not is_valid_cordova_app_name(app_name):
        raise TacoError(
            TacoErrorCode.INVALID_APP_NAME, app_name, " ".join(invalid_app_name_characters())
        )

    flow = ctx.kit_selection()
    resolved = flow.resolve(_choose_target(ctx, kit_id, cordova_version))

    create_directory_if_necessary(project_path.parent)
    ctx.cordova.create(project_path, app_id, app_name, resolved.cordova_cli)

    if copy_from is not None:
        asyncio.run(copy_recursive(copy_from, project_path))

    return ctx.manifest_writer.write(project_path, resolved.selection)


@click.command("create")
@click.argument("path")
@click.argument("app_id", required=False)
@click.argument("app_name", required=False)
@click.option("--kit", "kit_id", help="Kit ID to create the project with.")
@click.option(
    "--cordova", "cordova_version", help="Cordova CLI version to create the project with."
)
@click.option(
    "--copy-from",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Directory whose contents are copied into the new project.",
)
@click.pass_obj
@cli_error_boundary
def create_cmd(
    ctx: TacoContext,
    path: str,
    app_id: str | None,
    app_name: str | None,
    kit_id: str | None,
    cordova_version: str | None,
    copy_from: Path | None,
) -> None:
    """Create a new Cordova project at PATH."""
    manifest = run_create(ctx, path, app_id, app_name, kit_id, cordova_version, copy_from)

    if manifest.kit is not None:
        detail = f"kit {manifest.kit}"
    else:
        detail = f"Cordova CLI {manifest.cordova_cli}"
    user_output(click.style("✓", fg="green") + f" Created project at {path} using {detail}")

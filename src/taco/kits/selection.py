"""Kit selection: switching a project between a kit and a raw Cordova CLI version."""

import logging
from dataclasses import dataclass
from pathlib import Path

from taco.core.errors import TacoError, TacoErrorCode
from taco.kits.models import Kit
from taco.kits.registry import KitRegistry
from taco.project.manifest import (
    CliSelection,
    KitSelection,
    ManifestWriter,
    ProjectManifest,
    Selection,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KitTarget:
    kit_id: str


@dataclass(frozen=True)
class CliTarget:
    version: str


SelectionTarget = KitTarget | CliTarget


@dataclass(frozen=True)
class ResolvedTarget:
    """A validated target: what to write and which CLI version it implies."""

    selection: Selection
    kit: Kit | None
    cordova_cli: str


@dataclass(frozen=True)
class SelectionResult:
    """Outcome of a successful selection.

    Attributes:
        previous: Manifest before the selection
        current: Manifest written by the selection
        kit: The resolved kit when a kit was selected
    """

    previous: ProjectManifest
    current: ProjectManifest
    kit: Kit | None


def target_from_options(kit_id: str | None, cordova_version: str | None) -> SelectionTarget:
    """Build a selection target from mutually exclusive --kit / --cordova values.

    Raises:
        TacoError: KitSelectArgsConflict if both are given,
            KitSelectMissingTarget if neither is
    """
    if kit_id is not None and cordova_version is not None:
        raise TacoError(TacoErrorCode.KIT_SELECT_ARGS_CONFLICT)
    if kit_id is not None:
        return KitTarget(kit_id)
    if cordova_version is not None:
        return CliTarget(cordova_version)
    raise TacoError(TacoErrorCode.KIT_SELECT_MISSING_TARGET)


class KitSelectionFlow:
    """Resolves a target against the registry and rewrites the project manifest.

    Resolution happens before anything is written, so a failed selection
    leaves the manifest exactly as it was.
    """

    def __init__(self, registry: KitRegistry, manifest_writer: ManifestWriter) -> None:
        self._registry = registry
        self._manifest_writer = manifest_writer

    def resolve(self, target: SelectionTarget) -> ResolvedTarget:
        """Resolve a target into the manifest selection it produces."""
        if isinstance(target, KitTarget):
            kit = self._registry.resolve_kit(target.kit_id)
            return ResolvedTarget(
                selection=KitSelection(kit_id=kit.kit_id, cordova_cli=kit.cordova_cli),
                kit=kit,
                cordova_cli=kit.cordova_cli,
            )
        version = self._registry.resolve_cordova_version(target.version)
        return ResolvedTarget(
            selection=CliSelection(version=version), kit=None, cordova_cli=version
        )

    def select(self, project_path: Path, target: SelectionTarget) -> SelectionResult:
        """Select a kit or Cordova CLI version for the project at project_path.

        Raises:
            TacoError: ManifestNotFound if the project has no taco.json, InvalidKit,
                InvalidVersion, ManifestParseError, or FailedFileWrite
        """
        previous = self._manifest_writer.read(project_path)
        resolved = self.resolve(target)
        current = self._manifest_writer.write(project_path, resolved.selection)

        logger.info(
            "Project %s moved from %s to %s",
            project_path,
            _describe(previous),
            _describe(current),
        )
        return SelectionResult(previous=previous, current=current, kit=resolved.kit)


def _describe(manifest: ProjectManifest) -> str:
    if manifest.kit is not None:
        return f"kit {manifest.kit}"
    return f"Cordova CLI {manifest.cordova_cli}"

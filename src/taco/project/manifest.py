"""Project manifest (taco.json) I/O.

The manifest records which toolchain a project follows:

    {"kit": "5.1.1-Kit", "cordova-cli": "5.1.1"}   # KitMode
    {"cordova-cli": "5.1.1"}                       # CliMode

A manifest with a "kit" key is in KitMode; the "cordova-cli" value there
is the kit's pinned CLI version. A CliMode manifest never has "kit".
"""

import json
import os
import tempfile
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from taco.core.errors import TacoError, TacoErrorCode
from taco.core.path_utils import read_file_contents

MANIFEST_FILENAME = "taco.json"
KIT_KEY = "kit"
CORDOVA_CLI_KEY = "cordova-cli"


class ManifestMode(Enum):
    KIT = "kit"
    CLI = "cli"


@dataclass(frozen=True)
class KitSelection:
    """Follow a kit; cordova_cli records the kit's pinned CLI version if known."""

    kit_id: str
    cordova_cli: str | None = None


@dataclass(frozen=True)
class CliSelection:
    """Follow a raw Cordova CLI version."""

    version: str


Selection = KitSelection | CliSelection


@dataclass(frozen=True)
class ProjectManifest:
    """Parsed contents of taco.json."""

    kit: str | None
    cordova_cli: str | None

    @property
    def mode(self) -> ManifestMode:
        return ManifestMode.KIT if self.kit is not None else ManifestMode.CLI

    def to_dict(self) -> dict[str, str]:
        data: dict[str, str] = {}
        if self.kit is not None:
            data[KIT_KEY] = self.kit
        if self.cordova_cli is not None:
            data[CORDOVA_CLI_KEY] = self.cordova_cli
        return data

    @staticmethod
    def from_selection(selection: Selection) -> "ProjectManifest":
        if isinstance(selection, KitSelection):
            return ProjectManifest(kit=selection.kit_id, cordova_cli=selection.cordova_cli)
        return ProjectManifest(kit=None, cordova_cli=selection.version)


def manifest_path(project_path: Path) -> Path:
    return project_path / MANIFEST_FILENAME


class ManifestWriter:
    """Reads and writes taco.json for a project directory."""

    def read(self, project_path: Path) -> ProjectManifest:
        """Read the manifest of a project.

        Raises:
            TacoError: ManifestNotFound, ManifestParseError, or FailedFileRead
        """
        path = manifest_path(project_path)
        if not path.exists():
            raise TacoError(TacoErrorCode.MANIFEST_NOT_FOUND, path)

        try:
            contents = read_file_contents(path)
        except OSError as e:
            raise TacoError.wrap(TacoErrorCode.FAILED_FILE_READ, e, path) from e
        except UnicodeDecodeError as e:
            raise TacoError.wrap(TacoErrorCode.MANIFEST_PARSE_ERROR, e, path, "not UTF-8") from e

        try:
            data = json.loads(contents)
        except json.JSONDecodeError as e:
            raise TacoError.wrap(TacoErrorCode.MANIFEST_PARSE_ERROR, e, path, "invalid JSON") from e

        return _parse_manifest(data, path)

    def write(self, project_path: Path, selection: Selection) -> ProjectManifest:
        """Replace the project's manifest with the given selection.

        The file is fully overwritten, never merged, and replaced atomically:
        either the new content is in place or the old file is untouched.

        Raises:
            TacoError: FailedFileWrite if the manifest could not be written
        """
        manifest = ProjectManifest.from_selection(selection)
        path = manifest_path(project_path)
        content = json.dumps(manifest.to_dict(), indent=4) + "\n"

        tmp_name: str | None = None
        try:
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{MANIFEST_FILENAME}.", suffix=".tmp", dir=project_path
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(content)
            os.chmod(tmp_name, 0o644)
            os.replace(tmp_name, path)
        except OSError as e:
            if tmp_name is not None:
                Path(tmp_name).unlink(missing_ok=True)
            raise TacoError.wrap(TacoErrorCode.FAILED_FILE_WRITE, e, path) from e

        return manifest


def _parse_manifest(data: object, path: Path) -> ProjectManifest:
    if not isinstance(data, dict):
        raise TacoError(TacoErrorCode.MANIFEST_PARSE_ERROR, path, "expected a JSON object")

    kit = data.get(KIT_KEY)
    cordova_cli = data.get(CORDOVA_CLI_KEY)

    if kit is None and cordova_cli is None:
        raise TacoError(
            TacoErrorCode.MANIFEST_PARSE_ERROR,
            path,
            f"expected '{KIT_KEY}' or '{CORDOVA_CLI_KEY}'",
        )
    for key, value in ((KIT_KEY, kit), (CORDOVA_CLI_KEY, cordova_cli)):
        if value is not None and not isinstance(value, str):
            raise TacoError(TacoErrorCode.MANIFEST_PARSE_ERROR, path, f"'{key}' must be a string")

    return ProjectManifest(kit=kit, cordova_cli=cordova_cli)

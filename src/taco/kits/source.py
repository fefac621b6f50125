"""Kit metadata sources.

A source produces the kit catalog. The bundled source reads the YAML
catalog shipped with the package (or a file named by TACO_KIT_METADATA);
the fake source serves an in-memory catalog for tests.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from taco.core.errors import TacoError, TacoErrorCode
from taco.kits.models import Kit, KitCatalog

BUNDLED_METADATA_PATH = Path(__file__).parent.parent / "data" / "kit-metadata.yaml"


def parse_kit_catalog(data: Any, origin: str) -> KitCatalog:
    """Build a KitCatalog from parsed metadata.

    Expected shape: {"kits": {<kit-id>: {"cordova-cli": ..., ...}, ...}}

    Raises:
        TacoError: KitMetadataFileMalformed if the data does not match
    """
    if not isinstance(data, dict) or not isinstance(data.get("kits"), dict):
        raise TacoError(TacoErrorCode.KIT_METADATA_FILE_MALFORMED, origin, "missing 'kits' table")

    kits: list[Kit] = []
    for kit_id, attrs in data["kits"].items():
        if not isinstance(attrs, dict):
            raise TacoError(
                TacoErrorCode.KIT_METADATA_FILE_MALFORMED, origin, f"kit '{kit_id}' is not a table"
            )
        try:
            kits.append(Kit.model_validate({**attrs, "kit_id": str(kit_id)}))
        except ValidationError as e:
            raise TacoError.wrap(
                TacoErrorCode.KIT_METADATA_FILE_MALFORMED, e, origin, f"kit '{kit_id}'"
            ) from e

    try:
        return KitCatalog(kits)
    except ValueError as e:
        raise TacoError.wrap(TacoErrorCode.KIT_METADATA_FILE_MALFORMED, e, origin, e) from e


class KitMetadataSource(ABC):
    """Abstract provider of the kit catalog."""

    @abstractmethod
    def load(self) -> KitCatalog:
        """Load the kit catalog.

        Raises:
            TacoError: FailedFileRead or KitMetadataFileMalformed
        """
        ...


class BundledKitMetadataSource(KitMetadataSource):
    """Reads the kit catalog from a YAML file (the packaged one by default)."""

    def __init__(self, metadata_path: Path | None = None) -> None:
        self._path = metadata_path if metadata_path is not None else BUNDLED_METADATA_PATH

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> KitCatalog:
        try:
            with open(self._path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except OSError as e:
            raise TacoError.wrap(TacoErrorCode.FAILED_FILE_READ, e, self._path) from e
        except yaml.YAMLError as e:
            raise TacoError.wrap(
                TacoErrorCode.KIT_METADATA_FILE_MALFORMED, e, self._path, "invalid YAML"
            ) from e
        return parse_kit_catalog(data, str(self._path))


class FakeKitMetadataSource(KitMetadataSource):
    """In-memory kit catalog that records how many times it was loaded.

    Args:
        kits: Kits to serve, in catalog order
        failures_before_success: Number of initial load() calls that fail
    """

    def __init__(self, kits: list[Kit], *, failures_before_success: int = 0) -> None:
        self._kits = list(kits)
        self._failures_remaining = failures_before_success
        self._load_count = 0

    @property
    def load_count(self) -> int:
        """Number of load() calls made. For test assertions only."""
        return self._load_count

    def load(self) -> KitCatalog:
        self._load_count += 1
        if self._failures_remaining > 0:
            self._failures_remaining -= 1
            raise TacoError(TacoErrorCode.FAILED_FILE_READ, "<fake kit metadata>")
        return KitCatalog(self._kits)

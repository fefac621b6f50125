"""Kit registry: resolves kit IDs and Cordova CLI versions against the catalog."""

import logging
import re
from collections.abc import Callable, Iterator

from taco.core.errors import TacoError, TacoErrorCode
from taco.kits.models import Kit, KitCatalog
from taco.kits.source import KitMetadataSource

logger = logging.getLogger(__name__)

# MAJOR.MINOR.PATCH with optional prerelease and build metadata
_VERSION_PATTERN = re.compile(
    r"^v?(0|[1-9]\d*)\.(0|[1-9]\d*)\.(0|[1-9]\d*)"
    r"(?:-[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*)?"
    r"(?:\+[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*)?$"
)


def is_valid_version(version: str) -> bool:
    return _VERSION_PATTERN.match(version.strip()) is not None


class KitCatalogCache:
    """Process-scoped memo of the loaded kit catalog.

    Only a successful load is remembered; a failed load is retried on the
    next access.
    """

    def __init__(self) -> None:
        self._catalog: KitCatalog | None = None

    def get_or_load(self, loader: Callable[[], KitCatalog]) -> KitCatalog:
        if self._catalog is None:
            self._catalog = loader()
            logger.debug("Loaded kit catalog with %d kit(s)", len(self._catalog))
        return self._catalog

    @property
    def is_loaded(self) -> bool:
        return self._catalog is not None

    def reset(self) -> None:
        """Forget the cached catalog so the next access reloads it."""
        self._catalog = None


class KitRegistry:
    """Read-only view of the kit catalog.

    Args:
        source: Where the catalog is loaded from
        cache: Memo shared by everything in the process that needs the catalog
    """

    def __init__(self, source: KitMetadataSource, cache: KitCatalogCache) -> None:
        self._source = source
        self._cache = cache

    def catalog(self) -> KitCatalog:
        return self._cache.get_or_load(self._source.load)

    def resolve_kit(self, kit_id: str) -> Kit:
        """Look up a kit by ID.

        Raises:
            TacoError: InvalidKit if the ID is not in the catalog
        """
        kit = self.catalog().get(kit_id)
        if kit is None:
            raise TacoError(TacoErrorCode.INVALID_KIT, kit_id)
        return kit

    def resolve_cordova_version(self, version: str) -> str:
        """Validate a raw Cordova CLI version string.

        Returns:
            The version, stripped of surrounding whitespace

        Raises:
            TacoError: InvalidVersion if the string is not a semantic version
        """
        if not is_valid_version(version):
            raise TacoError(TacoErrorCode.INVALID_VERSION, version)
        return version.strip()

    def list_kits(self) -> Iterator[Kit]:
        """Yield kits in catalog order. Each call starts a fresh iteration."""
        yield from self.catalog().kits()

    def default_kit(self) -> Kit:
        """Return the kit used when no selection is given.

        Raises:
            TacoError: KitMetadataFileMalformed if the catalog is empty
        """
        kit = self.catalog().default_kit()
        if kit is None:
            raise TacoError(
                TacoErrorCode.KIT_METADATA_FILE_MALFORMED, "kit catalog", "catalog contains no kits"
            )
        return kit

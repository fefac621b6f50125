"""Application context with dependency injection.

The TacoContext dataclass holds all dependencies (kit registry, manifest
I/O, Cordova integration, config) and is created once at CLI entry point,
then threaded through the application via Click's context object.
"""

from dataclasses import dataclass, replace
from pathlib import Path

from taco.core.config import TacoConfig
from taco.core.cordova.abc import CordovaCli
from taco.kits.registry import KitCatalogCache, KitRegistry
from taco.kits.selection import KitSelectionFlow
from taco.project.manifest import ManifestWriter


@dataclass(frozen=True)
class TacoContext:
    """Immutable context holding all dependencies for taco operations.

    Attributes:
        config: Process configuration (TACO_HOME, catalog override, debug)
        cwd: Current working directory at CLI invocation
        kit_registry: Kit catalog lookups
        manifest_writer: taco.json I/O
        cordova: Cordova CLI integration
    """

    config: TacoConfig
    cwd: Path
    kit_registry: KitRegistry
    manifest_writer: ManifestWriter
    cordova: CordovaCli

    def kit_selection(self) -> KitSelectionFlow:
        return KitSelectionFlow(self.kit_registry, self.manifest_writer)

    @staticmethod
    def for_test(
        kit_registry: KitRegistry | None = None,
        cordova: CordovaCli | None = None,
        cwd: Path | None = None,
        taco_home: Path | None = None,
        debug: bool = False,
    ) -> "TacoContext":
        """Create test context with optional pre-configured implementations.

        Uses fakes by default to avoid subprocess calls: a FakeCordovaCli and
        a registry over the bundled catalog with its own cache.

        Example:
            >>> from taco.core.cordova.fake import FakeCordovaCli
            >>> cordova = FakeCordovaCli()
            >>> ctx = TacoContext.for_test(cordova=cordova, cwd=tmp_path)
        """
        from taco.core.cordova.fake import FakeCordovaCli
        from taco.kits.source import BundledKitMetadataSource

        resolved_cwd = cwd if cwd is not None else Path("/fake/project")
        resolved_registry = (
            kit_registry
            if kit_registry is not None
            else KitRegistry(BundledKitMetadataSource(), KitCatalogCache())
        )
        return TacoContext(
            config=TacoConfig(
                taco_home=taco_home if taco_home is not None else resolved_cwd / ".taco_home",
                kit_metadata_path=None,
                debug=debug,
            ),
            cwd=resolved_cwd,
            kit_registry=resolved_registry,
            manifest_writer=ManifestWriter(),
            cordova=cordova if cordova is not None else FakeCordovaCli(),
        )


def create_context(*, debug: bool = False) -> TacoContext:
    """Create production context with real implementations.

    Called once at CLI entry point. The kit catalog itself is loaded lazily
    on first use and memoized for the rest of the process.
    """
    from taco.core.cordova.real import RealCordovaCli
    from taco.kits.source import BundledKitMetadataSource

    config = TacoConfig.from_env()
    if debug:
        config = replace(config, debug=True)

    return TacoContext(
        config=config,
        cwd=Path.cwd(),
        kit_registry=KitRegistry(
            BundledKitMetadataSource(config.kit_metadata_path), KitCatalogCache()
        ),
        manifest_writer=ManifestWriter(),
        cordova=RealCordovaCli(config.taco_home),
    )

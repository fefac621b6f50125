"""taco: kit-aware tooling around the Cordova CLI.

Import from submodules:
- cli.cli: cli, main (console script entry point)
- kits.registry: KitRegistry, KitCatalogCache
- kits.selection: KitSelectionFlow
- project.manifest: ManifestWriter
"""

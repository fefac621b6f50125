"""Explicit option structures for kit commands."""

from dataclasses import dataclass, fields

from taco.core.telemetry import TelemetryValue

# Options whose values may identify the user (file paths)
_PII_OPTIONS = frozenset({"json"})


@dataclass(frozen=True)
class KitCommandOptions:
    """Options accepted by the kit sub-commands.

    Attributes:
        kit: Kit ID (--kit)
        cordova: Raw Cordova CLI version (--cordova)
        json: Output path for the catalog as JSON (--json)
    """

    kit: str | None = None
    cordova: str | None = None
    json: str | None = None

    def selected(self, exclude: frozenset[str] = frozenset()) -> dict[str, str]:
        """Return the options that were given, minus the excluded names."""
        return {
            f.name: value
            for f in fields(self)
            if f.name not in exclude and (value := getattr(self, f.name)) is not None
        }

    def telemetry(self, exclude: frozenset[str] = frozenset()) -> dict[str, TelemetryValue]:
        return {
            name: TelemetryValue(value, is_pii=name in _PII_OPTIONS)
            for name, value in self.selected(exclude).items()
        }

"""Kit metadata models."""

from collections.abc import Mapping
from datetime import date

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _version_text(value: object) -> object:
    # YAML reads unquoted versions such as 6.0 as numbers
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


class Kit(BaseModel):
    """A pinned, compatible set of Cordova CLI, platform and plugin versions.

    Loaded from the kit metadata catalog and never modified afterwards.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    kit_id: str
    cordova_cli: str = Field(alias="cordova-cli")
    name: str | None = None
    description: str | None = None
    release_date: str | None = Field(default=None, alias="release-date")
    platforms: Mapping[str, str] = Field(default_factory=dict)
    plugins: Mapping[str, str] = Field(default_factory=dict)
    deprecated: bool = False
    default: bool = False

    @field_validator("cordova_cli", mode="before")
    @classmethod
    def coerce_cordova_cli(cls, v: object) -> object:
        return _version_text(v)

    @field_validator("platforms", "plugins", mode="before")
    @classmethod
    def coerce_pinned_versions(cls, v: object) -> object:
        if isinstance(v, Mapping):
            return {name: _version_text(version) for name, version in v.items()}
        return v

    @field_validator("release_date", mode="before")
    @classmethod
    def coerce_release_date(cls, v: object) -> object:
        """Accept unquoted YAML dates."""
        if isinstance(v, date):
            return v.isoformat()
        return v

    def to_json_dict(self) -> dict[str, object]:
        """Serialize with the catalog's field names."""
        return self.model_dump(by_alias=True, mode="json")


class KitCatalog:
    """Ordered, read-only mapping of kit ID to Kit."""

    def __init__(self, kits: list[Kit]) -> None:
        self._kits: dict[str, Kit] = {}
        for kit in kits:
            if kit.kit_id in self._kits:
                raise ValueError(f"Duplicate kit id: {kit.kit_id}")
            self._kits[kit.kit_id] = kit

    def get(self, kit_id: str) -> Kit | None:
        return self._kits.get(kit_id)

    def kits(self) -> list[Kit]:
        return list(self._kits.values())

    def default_kit(self) -> Kit | None:
        """Kit flagged default, else the first non-deprecated kit, else the first kit."""
        kits = self.kits()
        for kit in kits:
            if kit.default:
                return kit
        for kit in kits:
            if not kit.deprecated:
                return kit
        return kits[0] if kits else None

    def __len__(self) -> int:
        return len(self._kits)

"""Process configuration loaded from environment variables."""

import os
import sys
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from taco.core.errors import TacoError, TacoErrorCode


def resolve_taco_home(environ: Mapping[str, str], platform: str) -> Path:
    """Resolve the root directory for taco-managed state.

    TACO_HOME wins when set. Otherwise the default depends on the platform:
    %APPDATA%/taco_home on Windows, ~/.taco_home on macOS and Linux.

    Raises:
        TacoError: UnexpectedPlatform for any other platform
    """
    override = environ.get("TACO_HOME")
    if override:
        return Path(override)

    if platform == "win32":
        return Path(environ.get("APPDATA", "")) / "taco_home"
    if platform == "darwin" or platform.startswith("linux"):
        home = environ.get("HOME")
        base = Path(home) if home else Path.home()
        return base / ".taco_home"
    raise TacoError(TacoErrorCode.UNEXPECTED_PLATFORM, platform)


@dataclass(frozen=True)
class TacoConfig:
    """Configuration loaded once at CLI entry point.

    Attributes:
        taco_home: Root directory for taco-managed projects and state
        kit_metadata_path: Catalog file overriding the bundled one, if any
        debug: Enable debug logging
    """

    taco_home: Path
    kit_metadata_path: Path | None
    debug: bool

    @staticmethod
    def from_env(
        environ: Mapping[str, str] | None = None, platform: str | None = None
    ) -> "TacoConfig":
        """Load configuration from environment variables."""
        env = environ if environ is not None else os.environ
        metadata = env.get("TACO_KIT_METADATA")
        return TacoConfig(
            taco_home=resolve_taco_home(env, platform if platform is not None else sys.platform),
            kit_metadata_path=Path(metadata) if metadata else None,
            debug=env.get("TACO_DEBUG", "false").lower() in ("1", "true"),
        )

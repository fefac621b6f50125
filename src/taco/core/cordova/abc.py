"""Cordova CLI operations interface.

Architecture:
- CordovaCli: Abstract base class defining the interface
- RealCordovaCli: Production implementation shelling out to cordova
- FakeCordovaCli: In-memory implementation for tests
"""

from abc import ABC, abstractmethod
from pathlib import Path


class CordovaCli(ABC):
    """Abstract interface for Cordova CLI operations.

    This interface contains ONLY runtime operations - no test setup methods.
    """

    @abstractmethod
    def create(
        self,
        project_path: Path,
        app_id: str | None,
        app_name: str | None,
        cordova_version: str,
    ) -> None:
        """Scaffold a new Cordova project at project_path.

        Args:
            project_path: Directory to create the project in
            app_id: Reverse-domain application identifier, or None for Cordova's default
            app_name: Display name, or None for Cordova's default
            cordova_version: Cordova CLI version to scaffold with

        Raises:
            TacoError: CommandFailed if the Cordova CLI fails
        """
        ...

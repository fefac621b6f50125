"""Production Cordova CLI implementation using subprocess."""

import logging
import sys
from pathlib import Path

from taco.core.cordova.abc import CordovaCli
from taco.core.path_utils import create_directory_if_necessary
from taco.core.subprocess import logged_exec

logger = logging.getLogger(__name__)


class RealCordovaCli(CordovaCli):
    """Runs pinned Cordova CLI versions installed under TACO_HOME.

    Each version gets its own npm prefix at
    ``<taco_home>/node_modules/cordova/<version>`` and is installed on first use.
    """

    def __init__(self, taco_home: Path, npm_binary: str = "npm") -> None:
        self._taco_home = taco_home
        self._npm = npm_binary

    @property
    def taco_home(self) -> Path:
        return self._taco_home

    def cordova_install_dir(self, cordova_version: str) -> Path:
        return self._taco_home / "node_modules" / "cordova" / cordova_version

    def cordova_binary(self, cordova_version: str) -> Path:
        name = "cordova.cmd" if sys.platform == "win32" else "cordova"
        return self.cordova_install_dir(cordova_version) / "node_modules" / ".bin" / name

    def ensure_installed(self, cordova_version: str) -> Path:
        """Install the given Cordova CLI version unless it is already present.

        Returns:
            Path to the cordova executable for that version

        Raises:
            TacoError: CommandFailed if npm fails
        """
        binary = self.cordova_binary(cordova_version)
        if binary.exists():
            return binary

        install_dir = self.cordova_install_dir(cordova_version)
        create_directory_if_necessary(install_dir)
        logger.debug("Installing cordova@%s into %s", cordova_version, install_dir)
        logged_exec(
            [self._npm, "install", "--prefix", str(install_dir), f"cordova@{cordova_version}"],
            cwd=install_dir,
        )
        return binary

    def create(
        self,
        project_path: Path,
        app_id: str | None,
        app_name: str | None,
        cordova_version: str,
    ) -> None:
        binary = self.ensure_installed(cordova_version)

        cmd = [str(binary), "create", str(project_path)]
        if app_id is not None:
            cmd.append(app_id)
            if app_name is not None:
                cmd.append(app_name)
        logged_exec(cmd, cwd=project_path.parent)

"""Fake Cordova CLI implementation for testing."""

from dataclasses import dataclass
from pathlib import Path

from taco.core.cordova.abc import CordovaCli
from taco.core.errors import TacoError, TacoErrorCode


@dataclass(frozen=True)
class CreateCall:
    """Arguments of a recorded create() call."""

    project_path: Path
    app_id: str | None
    app_name: str | None
    cordova_version: str


class FakeCordovaCli(CordovaCli):
    """In-memory fake that scaffolds a minimal project without running Cordova.

    All state is provided via constructor or captured during execution.
    """

    def __init__(self, *, fail_create: bool = False) -> None:
        self._fail_create = fail_create
        self._create_calls: list[CreateCall] = []

    @property
    def create_calls(self) -> list[CreateCall]:
        """Get the list of create() calls that were made.

        This property is for test assertions only.
        """
        return self._create_calls

    def create(
        self,
        project_path: Path,
        app_id: str | None,
        app_name: str | None,
        cordova_version: str,
    ) -> None:
        self._create_calls.append(CreateCall(project_path, app_id, app_name, cordova_version))
        if self._fail_create:
            raise TacoError(TacoErrorCode.COMMAND_FAILED, f"cordova create {project_path}", 1)

        (project_path / "www").mkdir(parents=True, exist_ok=True)
        (project_path / "config.xml").write_text(
            f'<widget id="{app_id or "io.cordova.hellocordova"}">'
            f"<name>{app_name or 'HelloCordova'}</name></widget>\n",
            encoding="utf-8",
        )

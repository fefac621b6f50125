"""Tests for the production Cordova CLI integration."""

import stat
import sys
from collections.abc import Sequence
from pathlib import Path

import pytest

from taco.core.cordova.real import RealCordovaCli
from taco.core.errors import TacoError, TacoErrorCode


class _RecordingExec:
    def __init__(self, on_install=None, fail_install: bool = False) -> None:
        self.commands: list[list[str]] = []
        self._on_install = on_install
        self._fail_install = fail_install

    def __call__(self, cmd: Sequence[str], cwd: Path | None = None, env=None) -> None:
        self.commands.append(list(cmd))
        if cmd[1] == "install":
            if self._fail_install:
                raise TacoError(TacoErrorCode.COMMAND_FAILED, " ".join(cmd), 1)
            if self._on_install is not None:
                self._on_install()


def _install_binary(cordova: RealCordovaCli, version: str) -> Path:
    binary = cordova.cordova_binary(version)
    binary.parent.mkdir(parents=True, exist_ok=True)
    binary.write_text("", encoding="utf-8")
    return binary


def test_install_dir_is_under_taco_home(tmp_path: Path) -> None:
    cordova = RealCordovaCli(tmp_path / "home")

    assert cordova.cordova_install_dir("5.1.1") == (
        tmp_path / "home" / "node_modules" / "cordova" / "5.1.1"
    )


def test_create_installs_missing_version_into_taco_home(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    taco_home = tmp_path / "home"
    cordova = RealCordovaCli(taco_home)
    recorder = _RecordingExec(on_install=lambda: _install_binary(cordova, "5.1.1"))
    monkeypatch.setattr("taco.core.cordova.real.logged_exec", recorder)

    cordova.create(tmp_path / "app", "com.example.app", "App", "5.1.1")

    install_dir = taco_home / "node_modules" / "cordova" / "5.1.1"
    assert recorder.commands == [
        ["npm", "install", "--prefix", str(install_dir), "cordova@5.1.1"],
        [
            str(cordova.cordova_binary("5.1.1")),
            "create",
            str(tmp_path / "app"),
            "com.example.app",
            "App",
        ],
    ]
    assert install_dir.is_dir()


def test_create_reuses_installed_version(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    cordova = RealCordovaCli(tmp_path / "home")
    binary = _install_binary(cordova, "4.3.1")
    recorder = _RecordingExec()
    monkeypatch.setattr("taco.core.cordova.real.logged_exec", recorder)

    cordova.create(tmp_path / "app", None, "Ignored", "4.3.1")

    assert recorder.commands == [[str(binary), "create", str(tmp_path / "app")]]


def test_failed_install_does_not_run_create(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    cordova = RealCordovaCli(tmp_path / "home")
    recorder = _RecordingExec(fail_install=True)
    monkeypatch.setattr("taco.core.cordova.real.logged_exec", recorder)

    with pytest.raises(TacoError) as exc_info:
        cordova.create(tmp_path / "app", None, None, "5.1.1")

    assert exc_info.value.error_code == TacoErrorCode.COMMAND_FAILED
    assert len(recorder.commands) == 1


@pytest.mark.skipif(sys.platform == "win32", reason="uses a POSIX shell script")
def test_create_runs_cordova_from_taco_home(tmp_path: Path) -> None:
    cordova = RealCordovaCli(tmp_path / "home", npm_binary="definitely-not-a-real-npm-for-taco")
    binary = _install_binary(cordova, "5.1.1")
    binary.write_text('#!/bin/sh\nmkdir -p "$2/www"\n', encoding="utf-8")
    binary.chmod(binary.stat().st_mode | stat.S_IXUSR)

    cordova.create(tmp_path / "app", None, None, "5.1.1")

    assert (tmp_path / "app" / "www").is_dir()

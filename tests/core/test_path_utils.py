"""Tests for filesystem helpers."""

import errno
import os
import sys
import tempfile
from pathlib import Path

import pytest

from taco.core.errors import TacoError, TacoErrorCode
from taco.core.path_utils import (
    copy_file,
    copy_recursive,
    create_directory_if_necessary,
    is_path_valid,
    read_file_contents,
)


def test_create_directory_if_necessary_creates_parents(tmp_path: Path) -> None:
    target = tmp_path / "a" / "b" / "c"
    assert create_directory_if_necessary(target) is True
    assert target.is_dir()


def test_create_directory_if_necessary_existing(tmp_path: Path) -> None:
    assert create_directory_if_necessary(tmp_path) is False


def test_read_file_contents_strips_bom(tmp_path: Path) -> None:
    path = tmp_path / "bom.json"
    path.write_bytes(b"\xef\xbb\xbf{}")
    assert read_file_contents(path) == "{}"


async def test_copy_file(tmp_path: Path) -> None:
    source = tmp_path / "source.bin"
    source.write_bytes(b"x" * 200_000)
    target = tmp_path / "target.bin"

    await copy_file(source, target)

    assert target.read_bytes() == source.read_bytes()


async def test_copy_file_missing_source(tmp_path: Path) -> None:
    with pytest.raises(TacoError) as exc_info:
        await copy_file(tmp_path / "missing", tmp_path / "target")
    assert exc_info.value.error_code == TacoErrorCode.FAILED_FILE_READ
    assert "missing" in str(exc_info.value)


async def test_copy_file_unwritable_target(tmp_path: Path) -> None:
    source = tmp_path / "source.txt"
    source.write_text("data", encoding="utf-8")

    with pytest.raises(TacoError) as exc_info:
        await copy_file(source, tmp_path / "no-such-dir" / "target.txt")
    assert exc_info.value.error_code == TacoErrorCode.FAILED_FILE_WRITE


async def test_copy_recursive_merges_into_existing(tmp_path: Path) -> None:
    source = tmp_path / "src"
    (source / "www" / "js").mkdir(parents=True)
    (source / "www" / "index.html").write_text("<html/>", encoding="utf-8")
    (source / "www" / "js" / "app.js").write_text("app()", encoding="utf-8")
    target = tmp_path / "dst"
    target.mkdir()
    (target / "config.xml").write_text("<widget/>", encoding="utf-8")

    await copy_recursive(source, target)

    assert (target / "www" / "index.html").read_text(encoding="utf-8") == "<html/>"
    assert (target / "www" / "js" / "app.js").read_text(encoding="utf-8") == "app()"
    assert (target / "config.xml").exists()


async def test_copy_recursive_missing_source(tmp_path: Path) -> None:
    with pytest.raises(TacoError) as exc_info:
        await copy_recursive(tmp_path / "missing", tmp_path / "dst")
    assert exc_info.value.error_code == TacoErrorCode.FAILED_RECURSIVE_COPY


def _scratch_dirs() -> set[str]:
    return {
        entry
        for entry in os.listdir(tempfile.gettempdir())
        if len(entry) == 40 and all(c in "0123456789abcdef" for c in entry)
    }


def test_is_path_valid_accepts_ordinary_paths() -> None:
    assert is_path_valid(os.path.join("projects", "HelloCordova"))
    assert is_path_valid("single")


def test_is_path_valid_accepts_relative_parent_segments() -> None:
    assert is_path_valid(os.path.join("..", "sibling", "app"))


def test_is_path_valid_rejects_nul_bytes() -> None:
    assert not is_path_valid(os.path.join("projects", "bad\0name"))


def test_is_path_valid_removes_scratch_directory() -> None:
    before = _scratch_dirs()
    is_path_valid(os.path.join("a", "b", "c"))
    is_path_valid(os.path.join("a", "bad\0name"))
    assert _scratch_dirs() <= before


@pytest.fixture
def scratch_root(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    root = tmp_path / "scratch-root"
    root.mkdir()
    monkeypatch.setattr(tempfile, "gettempdir", lambda: str(root))
    return root


def _fail_mkdir_for(
    monkeypatch: pytest.MonkeyPatch, segment: str, error_number: int | None
) -> list[str]:
    original_mkdir = Path.mkdir
    attempted: list[str] = []

    def mkdir(self: Path, *args, **kwargs) -> None:
        attempted.append(self.name)
        if error_number is not None and self.name == segment:
            raise OSError(error_number, os.strerror(error_number), str(self))
        original_mkdir(self, *args, **kwargs)

    monkeypatch.setattr(Path, "mkdir", mkdir)
    return attempted


def test_is_path_valid_rejects_enoent_segment(
    monkeypatch: pytest.MonkeyPatch, scratch_root: Path
) -> None:
    _fail_mkdir_for(monkeypatch, "bad", errno.ENOENT)

    assert not is_path_valid(os.path.join("projects", "bad", "app"))
    assert list(scratch_root.iterdir()) == []


def test_is_path_valid_treats_other_errors_permissively(
    monkeypatch: pytest.MonkeyPatch, scratch_root: Path
) -> None:
    attempted = _fail_mkdir_for(monkeypatch, "bad", errno.EACCES)

    assert is_path_valid(os.path.join("projects", "bad", "app"))
    assert attempted[-2:] == ["bad", "app"]
    assert list(scratch_root.iterdir()) == []


def test_is_path_valid_skips_drive_letter_on_windows(
    monkeypatch: pytest.MonkeyPatch, scratch_root: Path
) -> None:
    attempted = _fail_mkdir_for(monkeypatch, "C:", errno.ENOENT)
    monkeypatch.setattr(sys, "platform", "win32")

    assert is_path_valid(os.sep.join(["C:", "projects", "app"]))
    assert "C:" not in attempted
    assert attempted[-2:] == ["projects", "app"]
    assert list(scratch_root.iterdir()) == []


def test_is_path_valid_checks_drive_letter_segment_elsewhere(
    monkeypatch: pytest.MonkeyPatch, scratch_root: Path
) -> None:
    attempted = _fail_mkdir_for(monkeypatch, "C:", errno.ENOENT)
    monkeypatch.setattr(sys, "platform", "linux")

    assert not is_path_valid(os.sep.join(["C:", "projects", "app"]))
    assert "C:" in attempted

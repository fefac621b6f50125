"""Shared fixtures for taco tests."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from taco.core.context import TacoContext
from taco.core.cordova.fake import FakeCordovaCli
from taco.kits.models import Kit
from taco.kits.registry import KitCatalogCache, KitRegistry
from taco.kits.source import FakeKitMetadataSource


def make_kit(kit_id: str, cordova_cli: str, **kwargs: object) -> Kit:
    return Kit.model_validate({"kit_id": kit_id, "cordova-cli": cordova_cli, **kwargs})


@pytest.fixture
def kits() -> list[Kit]:
    return [
        make_kit("4.3.1-Kit", "4.3.1", deprecated=True),
        make_kit(
            "5.1.1-Kit",
            "5.1.1",
            default=True,
            platforms={"android": "4.0.2", "ios": "3.8.0"},
            plugins={"cordova-plugin-camera": "1.2.0"},
        ),
    ]


@pytest.fixture
def kit_source(kits: list[Kit]) -> FakeKitMetadataSource:
    return FakeKitMetadataSource(kits)


@pytest.fixture
def kit_cache() -> KitCatalogCache:
    return KitCatalogCache()


@pytest.fixture
def kit_registry(kit_source: FakeKitMetadataSource, kit_cache: KitCatalogCache) -> KitRegistry:
    return KitRegistry(kit_source, kit_cache)


@pytest.fixture
def fake_cordova() -> FakeCordovaCli:
    return FakeCordovaCli()


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    project = tmp_path / "project"
    project.mkdir()
    return project


@pytest.fixture
def taco_ctx(
    kit_registry: KitRegistry, fake_cordova: FakeCordovaCli, project_dir: Path
) -> TacoContext:
    return TacoContext.for_test(kit_registry=kit_registry, cordova=fake_cordova, cwd=project_dir)


@pytest.fixture
def cli_runner() -> CliRunner:
    return CliRunner()

"""Tests for the seed entry point."""

import json
from contextlib import asynccontextmanager

import pytest

from database.seeds import run_all_seeds
from shared.config import Settings
from shared.errors import DatasetError, SeedAbortedError, StoreError


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        APPWRITE_ENDPOINT="https://store.test/v1/",
        APPWRITE_PROJECT_ID="test-project",
        APPWRITE_DATABASE_ID="db",
        APPWRITE_BUCKET_ID="bucket",
        APPWRITE_CATEGORIES_COLLECTION_ID="categories",
        APPWRITE_CUSTOMIZATIONS_COLLECTION_ID="customizations",
        APPWRITE_MENU_COLLECTION_ID="menu",
        APPWRITE_MENU_CUSTOMIZATIONS_COLLECTION_ID="menu_customizations",
    )


@pytest.fixture
def patched_store(monkeypatch, memory_store):
    """Route get_store to the in-memory store and record the config it got."""
    configs = []

    @asynccontextmanager
    async def fake_get_store(config, transport=None):
        configs.append(config)
        yield memory_store

    monkeypatch.setattr(run_all_seeds, "get_store", fake_get_store)
    return configs


class TestSeed:

    async def test_seeds_bundled_dataset(self, settings, patched_store, memory_store):
        report = await run_all_seeds.seed(settings=settings)

        assert patched_store[0].endpoint == "https://store.test/v1"
        assert report.categories_created == 6
        assert report.menu_items_created == 8
        assert report.failed_items == []
        assert len(memory_store.docs("menu")) == 8

    async def test_explicit_dataset(self, settings, patched_store, memory_store, pizza_catalog):
        report = await run_all_seeds.seed(pizza_catalog, settings=settings)

        assert report.menu_map.keys() == {"Margherita"}

    async def test_dataset_file(self, settings, patched_store, memory_store, pizza_catalog, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps(pizza_catalog))
        settings = settings.model_copy(update={"SEED_DATA_FILE": str(path)})

        report = await run_all_seeds.seed(settings=settings)

        assert report.category_map.keys() == {"Pizza"}

    async def test_bad_dataset_file_stops_before_store(self, settings, patched_store, tmp_path):
        settings = settings.model_copy(update={"SEED_DATA_FILE": str(tmp_path / "missing.json")})

        with pytest.raises(DatasetError):
            await run_all_seeds.seed(settings=settings)

        assert patched_store == []


class TestMain:

    @pytest.fixture(autouse=True)
    def quiet_logging(self, monkeypatch):
        monkeypatch.setattr(run_all_seeds, "configure_logging", lambda: None)

    async def test_success_exit_code(self, monkeypatch):
        async def fake_seed():
            return run_all_seeds.SeedReport()

        monkeypatch.setattr(run_all_seeds, "seed", fake_seed)

        assert await run_all_seeds.main() == 0

    async def test_aborted_run_exit_code(self, monkeypatch):
        async def fake_seed():
            raise SeedAbortedError("reset", StoreError("list_documents", "down", 503))

        monkeypatch.setattr(run_all_seeds, "seed", fake_seed)

        assert await run_all_seeds.main() == 1

    async def test_failed_items_still_exit_zero(self, monkeypatch):
        async def fake_seed():
            return run_all_seeds.SeedReport(failed_items=["Broken"])

        monkeypatch.setattr(run_all_seeds, "seed", fake_seed)

        assert await run_all_seeds.main() == 0

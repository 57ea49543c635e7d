"""Tests for the JSON catalog loader."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from gigaplanner_codec.core.exceptions import CatalogError
from gigaplanner_codec.ingestion.catalog_loader import CATALOG_FILES, CatalogLoader


class TestCatalogLoader:
    """Tests for CatalogLoader."""

    def test_load_all(self, catalog_dir: Path) -> None:
        """Test every catalog file is loaded and validated."""
        catalogs = CatalogLoader(catalog_dir).load_all()

        assert [p.name for p in catalogs.perk_lists] == ["Warrior", "Mage"]
        assert [r.name for r in catalogs.races] == ["Nord", "Imperial"]
        assert [b.name for b in catalogs.blessings] == ["Akatosh", "Dibella", "Mephala"]
        assert [g.id for g in catalogs.game_mechanics] == [0, 5]
        assert catalogs.presets[1].perks == 0

    def test_single_perk_list_object(self, catalog_dir: Path, catalog_data: dict[str, Any]) -> None:
        """Test perks.json may hold one perk list instead of an array."""
        (catalog_dir / "perks.json").write_text(
            json.dumps(catalog_data["perk_lists"][1]), encoding="utf-8"
        )

        perk_lists = CatalogLoader(catalog_dir).load("perk_lists")

        assert len(perk_lists) == 1
        assert perk_lists[0].name == "Mage"

    def test_caching(self, catalog_dir: Path) -> None:
        """Test catalogs are read once until the cache is cleared."""
        loader = CatalogLoader(catalog_dir)
        first = loader.load("races")
        (catalog_dir / "races.json").write_text('["Breton"]', encoding="utf-8")

        assert loader.load("races") is first
        assert loader.cache_stats() == {"size": 1, "keys": ["races"]}

        loader.clear_cache()

        assert [r.name for r in loader.load("races")] == ["Breton"]

    def test_unknown_catalog(self, catalog_dir: Path) -> None:
        """Test asking for an unknown catalog fails."""
        with pytest.raises(CatalogError, match="Unknown catalog: spells"):
            CatalogLoader(catalog_dir).load("spells")

    def test_missing_file(self, catalog_dir: Path) -> None:
        """Test a missing catalog file fails with the catalog name."""
        (catalog_dir / CATALOG_FILES["presets"]).unlink()

        with pytest.raises(CatalogError) as exc_info:
            CatalogLoader(catalog_dir).load_all()

        assert exc_info.value.details["catalog"] == "presets"

    def test_invalid_json(self, catalog_dir: Path) -> None:
        """Test malformed JSON is reported as a catalog error."""
        (catalog_dir / "races.json").write_text("[{", encoding="utf-8")

        with pytest.raises(CatalogError, match="not valid JSON"):
            CatalogLoader(catalog_dir).load("races")

    def test_not_an_array(self, catalog_dir: Path) -> None:
        """Test non-array catalogs are rejected."""
        (catalog_dir / "blessings.json").write_text('{"name": "Akatosh"}', encoding="utf-8")

        with pytest.raises(CatalogError, match="must contain a JSON array"):
            CatalogLoader(catalog_dir).load("blessings")

    def test_schema_violation(self, catalog_dir: Path) -> None:
        """Test entries failing validation are reported with their errors."""
        (catalog_dir / "gameMechanics.json").write_text(
            json.dumps([{"name": "No Id"}]), encoding="utf-8"
        )

        with pytest.raises(CatalogError) as exc_info:
            CatalogLoader(catalog_dir).load("game_mechanics")

        assert exc_info.value.details["catalog"] == "game_mechanics"
        assert exc_info.value.details["errors"]

"""Load GigaPlanner catalogs from the planner's JSON data files.

Expected files in the catalog directory:

    races.json           [{"name": ...}, ...] or ["Nord", ...]
    standingStones.json  same shape as races.json
    blessings.json       same shape as races.json
    gameMechanics.json   [{"gameId" | "id": int, "name": ...}, ...]
    presets.json         [{"name": ..., "perks": int}, ...]
    perks.json           one perk list object, or a list of them

Each catalog is validated into the models in ``gigaplanner_codec.models``
and cached on the loader instance.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, TypeAdapter, ValidationError

from gigaplanner_codec.core.exceptions import CatalogError
from gigaplanner_codec.core.logging import get_logger
from gigaplanner_codec.models.catalog import (
    CatalogEntry,
    Catalogs,
    GameMechanics,
    PerkList,
    Preset,
)


logger = get_logger(__name__)


CATALOG_FILES: dict[str, str] = {
    "races": "races.json",
    "standing_stones": "standingStones.json",
    "blessings": "blessings.json",
    "game_mechanics": "gameMechanics.json",
    "presets": "presets.json",
    "perk_lists": "perks.json",
}
"""Catalog name -> file name inside the catalog directory."""

_ENTRY_MODELS: dict[str, type[BaseModel]] = {
    "races": CatalogEntry,
    "standing_stones": CatalogEntry,
    "blessings": CatalogEntry,
    "game_mechanics": GameMechanics,
    "presets": Preset,
    "perk_lists": PerkList,
}


class CatalogLoader:
    """Read and validate catalog files from one directory.

    Example:
        >>> loader = CatalogLoader("data/gigaplanner")
        >>> catalogs = loader.load_all()
        >>> len(catalogs.races)
        10
    """

    def __init__(self, directory: str | Path) -> None:
        """Initialize the loader.

        Args:
            directory: Directory holding the catalog JSON files.
        """
        self.directory = Path(directory)
        self._cache: dict[str, tuple[Any, ...]] = {}

    def load(self, catalog: str) -> tuple[Any, ...]:
        """Load one catalog, using the cache when possible.

        Args:
            catalog: Catalog name, one of CATALOG_FILES.

        Returns:
            Validated catalog entries in file order.

        Raises:
            CatalogError: If the file is missing, not JSON or fails validation.
        """
        if catalog not in CATALOG_FILES:
            raise CatalogError(f"Unknown catalog: {catalog}", catalog=catalog)
        if catalog in self._cache:
            return self._cache[catalog]

        path = self.directory / CATALOG_FILES[catalog]
        raw = self._read_json(catalog, path)
        if catalog == "perk_lists" and isinstance(raw, dict):
            raw = [raw]
        if not isinstance(raw, list):
            raise CatalogError(
                f"{path.name} must contain a JSON array",
                catalog=catalog,
                details={"path": str(path)},
            )

        adapter = TypeAdapter(tuple[_ENTRY_MODELS[catalog], ...])
        try:
            entries = adapter.validate_python(raw)
        except ValidationError as exc:
            raise CatalogError(
                f"Invalid {catalog} data in {path.name}: {exc.error_count()} error(s)",
                catalog=catalog,
                details={"path": str(path), "errors": exc.errors(include_url=False)},
            ) from exc

        self._cache[catalog] = entries
        logger.debug("Loaded catalog", catalog=catalog, entries=len(entries))
        return entries

    def load_all(self) -> Catalogs:
        """Load every catalog and bundle them.

        Returns:
            The loaded Catalogs.

        Raises:
            CatalogError: If any catalog fails to load.
        """
        catalogs = Catalogs(**{name: self.load(name) for name in CATALOG_FILES})
        logger.info(
            "Loaded GigaPlanner catalogs",
            directory=str(self.directory),
            perk_lists=len(catalogs.perk_lists),
            races=len(catalogs.races),
            presets=len(catalogs.presets),
        )
        return catalogs

    def clear_cache(self) -> None:
        """Forget every cached catalog."""
        self._cache.clear()

    def cache_stats(self) -> dict[str, Any]:
        """Get cache statistics.

        Returns:
            Dictionary with the cache size and cached catalog names.
        """
        return {"size": len(self._cache), "keys": list(self._cache)}

    @staticmethod
    def _read_json(catalog: str, path: Path) -> Any:
        try:
            with path.open(encoding="utf-8") as handle:
                return json.load(handle)
        except FileNotFoundError as exc:
            raise CatalogError(
                f"Catalog file not found: {path}",
                catalog=catalog,
            ) from exc
        except json.JSONDecodeError as exc:
            raise CatalogError(
                f"Catalog file {path.name} is not valid JSON: {exc.msg}",
                catalog=catalog,
                details={"line": exc.lineno},
            ) from exc


__all__ = [
    "CATALOG_FILES",
    "CatalogLoader",
]

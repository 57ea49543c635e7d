"""Name/id lookup tables built from the catalogs.

Races, standing stones and blessings use their array index as id. Perk
lists and game mechanics carry an explicit id field. Tables are built
once and exposed read-only.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Literal

from gigaplanner_codec.core.exceptions import CatalogError
from gigaplanner_codec.core.logging import get_logger
from gigaplanner_codec.models.catalog import Catalogs


logger = get_logger(__name__)

DuplicatePolicy = Literal["warn", "error"]


@dataclass(frozen=True)
class LookupTable:
    """Bidirectional name/id mapping for one catalog."""

    catalog: str
    name_to_id: Mapping[str, int]
    id_to_name: Mapping[int, str]

    @classmethod
    def from_pairs(
        cls,
        catalog: str,
        pairs: Iterable[tuple[int, str]],
        *,
        on_duplicate: DuplicatePolicy = "warn",
    ) -> LookupTable:
        """Build a table from (id, name) pairs.

        When a name repeats, the last-seen id wins under the ``warn``
        policy; ``error`` raises instead.

        Args:
            catalog: Catalog name used in log and error messages.
            pairs: (id, name) pairs in catalog order.
            on_duplicate: Duplicate-name policy.

        Returns:
            The lookup table.

        Raises:
            CatalogError: On a duplicate name under the ``error`` policy.
        """
        name_to_id: dict[str, int] = {}
        id_to_name: dict[int, str] = {}
        for entry_id, name in pairs:
            if name in name_to_id:
                if on_duplicate == "error":
                    raise CatalogError(
                        f"Duplicate name {name!r} in {catalog} catalog",
                        catalog=catalog,
                        entry=name,
                        details={"ids": [name_to_id[name], entry_id]},
                    )
                logger.warning(
                    "Duplicate catalog name, keeping last entry",
                    catalog=catalog,
                    name=name,
                    previous_id=name_to_id[name],
                    id=entry_id,
                )
            name_to_id[name] = entry_id
            id_to_name[entry_id] = name
        return cls(
            catalog=catalog,
            name_to_id=MappingProxyType(name_to_id),
            id_to_name=MappingProxyType(id_to_name),
        )

    def id_for(self, name: str) -> int | None:
        """Get the id for a name, or None."""
        return self.name_to_id.get(name)

    def name_for(self, entry_id: int) -> str | None:
        """Get the name for an id, or None."""
        return self.id_to_name.get(entry_id)


@dataclass(frozen=True)
class LookupMaps:
    """The five lookup tables used by the converter."""

    races: LookupTable
    standing_stones: LookupTable
    blessings: LookupTable
    perk_lists: LookupTable
    game_mechanics: LookupTable

    @classmethod
    def build(
        cls,
        catalogs: Catalogs,
        *,
        on_duplicate: DuplicatePolicy = "warn",
    ) -> LookupMaps:
        """Build all lookup tables from loaded catalogs.

        Args:
            catalogs: Fully loaded catalogs.
            on_duplicate: Duplicate-name policy for every table.

        Returns:
            The lookup maps.
        """
        return cls(
            races=LookupTable.from_pairs(
                "races",
                enumerate(race.name for race in catalogs.races),
                on_duplicate=on_duplicate,
            ),
            standing_stones=LookupTable.from_pairs(
                "standing_stones",
                enumerate(stone.name for stone in catalogs.standing_stones),
                on_duplicate=on_duplicate,
            ),
            blessings=LookupTable.from_pairs(
                "blessings",
                enumerate(blessing.name for blessing in catalogs.blessings),
                on_duplicate=on_duplicate,
            ),
            perk_lists=LookupTable.from_pairs(
                "perk_lists",
                ((perk_list.id, perk_list.name) for perk_list in catalogs.perk_lists),
                on_duplicate=on_duplicate,
            ),
            game_mechanics=LookupTable.from_pairs(
                "game_mechanics",
                ((mechanics.id, mechanics.name) for mechanics in catalogs.game_mechanics),
                on_duplicate=on_duplicate,
            ),
        )

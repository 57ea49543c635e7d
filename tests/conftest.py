"""Pytest configuration and shared fixtures.

This module provides small in-memory catalogs, a converter bound to them,
and helpers for building raw build code payloads byte by byte.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING, Any

import pytest


if TYPE_CHECKING:
    from collections.abc import Generator


SKILL_NAMES = [
    "Smithing",
    "Heavy Armor",
    "Block",
    "Two-Handed",
    "One-Handed",
    "Marksman",
    "Evasion",
    "Sneak",
    "Wayfarer",
    "Finesse",
    "Speech",
    "Alchemy",
    "Illusion",
    "Conjuration",
    "Destruction",
    "Restoration",
    "Alteration",
    "Enchanting",
]


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Generator[None, None, None]:
    """Reset the settings cache before and after each test."""
    from gigaplanner_codec.core.config import clear_settings_cache

    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def settings() -> Any:
    """Provide settings isolated from the environment and .env files."""
    from gigaplanner_codec.core.config import CodecSettings

    return CodecSettings(_env_file=None)


# =============================================================================
# Catalog Fixtures
# =============================================================================


@pytest.fixture
def skill_names() -> list[str]:
    """Provide the 18 skill slot names shared by the sample perk lists."""
    return list(SKILL_NAMES)


@pytest.fixture
def catalog_data(skill_names: list[str]) -> dict[str, Any]:
    """Provide raw catalog data in the planner's JSON file shapes.

    Returns:
        Dictionary keyed by catalog name.
    """
    warrior_perks = [
        {
            "name": f"Warrior Perk {index}",
            "skill": index % len(skill_names),
            "skillReq": index * 5,
            "description": f"Warrior perk number {index}",
        }
        for index in range(20)
    ]
    mage_perks = [
        {
            "name": f"Mage Perk {index}",
            "skill": skill_names[12 + index % 6],
            "skillReq": 20,
            "description": "",
        }
        for index in range(8)
    ]
    return {
        "perk_lists": [
            {"perkListId": 0, "name": "Warrior", "skillNames": skill_names, "perks": warrior_perks},
            {"perkListId": 3, "name": "Mage", "skillNames": skill_names, "perks": mage_perks},
        ],
        "races": [{"name": "Nord", "edid": "NordRace"}, {"name": "Imperial"}],
        "standing_stones": [{"name": "Warrior Stone"}, {"name": "Mage Stone"}],
        "blessings": ["Akatosh", "Dibella", "Mephala"],
        "game_mechanics": [
            {"id": 0, "name": "Vanilla"},
            {"gameId": 5, "name": "LoreRim v4"},
        ],
        "presets": [
            {"name": "Mage Preset", "perks": 3},
            {"name": "Warrior Preset", "perks": 0},
        ],
    }


@pytest.fixture
def catalogs(catalog_data: dict[str, Any]) -> Any:
    """Create validated Catalogs from the raw catalog data."""
    from gigaplanner_codec.models.catalog import Catalogs

    return Catalogs.model_validate(catalog_data)


@pytest.fixture
def converter(catalogs: Any, settings: Any) -> Any:
    """Create a converter bound to the sample catalogs."""
    from gigaplanner_codec.codec.converter import GigaPlannerConverter

    return GigaPlannerConverter(catalogs, settings=settings)


@pytest.fixture
def catalog_dir(tmp_path: Path, catalog_data: dict[str, Any]) -> Path:
    """Write the sample catalogs as JSON files into a temp directory.

    Returns:
        The catalog directory.
    """
    from gigaplanner_codec.ingestion.catalog_loader import CATALOG_FILES

    directory = tmp_path / "catalogs"
    directory.mkdir()
    for catalog, file_name in CATALOG_FILES.items():
        (directory / file_name).write_text(json.dumps(catalog_data[catalog]), encoding="utf-8")
    return directory


# =============================================================================
# Character Fixtures
# =============================================================================


@pytest.fixture
def warrior_character(skill_names: list[str]) -> Any:
    """Create a level 10 Nord on the Warrior perk list."""
    from gigaplanner_codec.models import (
        BuildConfiguration,
        CharacterRecord,
        HMSIncreases,
        OghmaChoice,
        SkillLevel,
    )

    return CharacterRecord(
        level=10,
        hms_increases=HMSIncreases(health=5, magicka=3, stamina=2),
        skill_levels=[
            SkillLevel(skill=name, level=15 + slot) for slot, name in enumerate(skill_names)
        ],
        oghma_choice=OghmaChoice.STAMINA,
        race="Nord",
        standing_stone="Mage Stone",
        blessing="Dibella",
        perks=["Warrior Perk 2", "Warrior Perk 9"],
        configuration=BuildConfiguration(perk_list="Warrior", game_mechanics="Vanilla"),
    )


@pytest.fixture
def build_payload() -> Callable[..., bytes]:
    """Provide a factory for raw build code payloads.

    Keyword arguments override individual header bytes; ``skills`` sets
    the 18 skill bytes and ``perk_bytes`` the trailing bitmap.
    """

    def _build(
        *,
        version: int = 2,
        perk_list: int = 0,
        game_mechanics: int = 0,
        level: int = 10,
        hms: tuple[int, int, int] = (5, 3, 2),
        skills: list[int] | None = None,
        oghma: int = 0,
        race: int = 0,
        stone: int = 0,
        blessing: int = 0,
        perk_bytes: bytes = b"\x00\x00\x00",
    ) -> bytes:
        skill_bytes = skills if skills is not None else [0] * 18
        header = [version, perk_list, 0, game_mechanics, 0, level, *hms, *skill_bytes]
        header += [oghma, race, stone, blessing]
        return bytes(header) + perk_bytes

    return _build

"""Pydantic V2 schemas for the GigaPlanner build codec.

Submodules:
    enums: Enumeration types (OghmaChoice).
    catalog: Reference catalogs (PerkList, CatalogEntry, GameMechanics, Preset).
    character: Character records exchanged by the codec.
    results: Decode results and catalog summaries.
"""

from __future__ import annotations

# =============================================================================
# Enumerations
# =============================================================================
from gigaplanner_codec.models.enums import OghmaChoice

# =============================================================================
# Catalogs
# =============================================================================
from gigaplanner_codec.models.catalog import (
    SKILL_SLOT_COUNT,
    CatalogEntry,
    Catalogs,
    GameMechanics,
    Perk,
    PerkList,
    Preset,
)

# =============================================================================
# Character Records
# =============================================================================
from gigaplanner_codec.models.character import (
    LEVEL_SKILL_NAME,
    UNKNOWN_NAME,
    BuildConfiguration,
    ByteValue,
    CharacterRecord,
    HMSIncreases,
    SkillLevel,
)

# =============================================================================
# Results
# =============================================================================
from gigaplanner_codec.models.results import (
    DataMappings,
    DecodeResult,
    IdName,
    PerkDescriptor,
)


__all__ = [
    # Enums
    "OghmaChoice",
    # Catalogs
    "SKILL_SLOT_COUNT",
    "CatalogEntry",
    "Catalogs",
    "GameMechanics",
    "Perk",
    "PerkList",
    "Preset",
    # Character records
    "LEVEL_SKILL_NAME",
    "UNKNOWN_NAME",
    "BuildConfiguration",
    "ByteValue",
    "CharacterRecord",
    "HMSIncreases",
    "SkillLevel",
    # Results
    "DataMappings",
    "DecodeResult",
    "IdName",
    "PerkDescriptor",
]

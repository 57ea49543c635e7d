"""GigaPlanner build code codec.

Packs a Skyrim character build (race, standing stone, blessing, perks,
skill levels and configuration ids) into the compact URL-safe build code
used by GigaPlanner share links, and decodes such links back into a
structured character record.

Example:
    >>> from gigaplanner_codec import GigaPlannerConverter
    >>>
    >>> converter = GigaPlannerConverter.from_directory("data/gigaplanner")
    >>> result = converter.decode_url("https://gigaplanner.com?b=AgAAAAAU...&p=0")
    >>> if result.success:
    ...     print(result.character.race, result.preset)
    >>> url = converter.encode_url(result.character)

Modules:
    core: Configuration, logging, and base exceptions.
    models: Pydantic V2 catalog, character and result models.
    codec: Byte layout, perk bitmap, base64 boundary and the converter.
    ingestion: Catalog loading from the planner's JSON files.
    transform: Mapping between characters and planner build states.
    cli: The ``gigaplanner`` command line tool.
"""

from __future__ import annotations

# Core
from gigaplanner_codec.core.config import CodecSettings, get_settings
from gigaplanner_codec.core.exceptions import (
    BuildCodeError,
    CatalogError,
    GigaPlannerError,
    MalformedBuildCodeError,
    UnknownConfigurationError,
)
from gigaplanner_codec.core.logging import configure_logging, get_logger

# Models
from gigaplanner_codec.models import (
    BuildConfiguration,
    CatalogEntry,
    Catalogs,
    CharacterRecord,
    DataMappings,
    DecodeResult,
    GameMechanics,
    HMSIncreases,
    OghmaChoice,
    Perk,
    PerkDescriptor,
    PerkList,
    Preset,
    SkillLevel,
)

# Codec
from gigaplanner_codec.codec import GigaPlannerConverter, LookupMaps

# Ingestion
from gigaplanner_codec.ingestion import CatalogLoader


__version__ = "0.1.0"
__all__ = [
    # Version info
    "__version__",
    # Core
    "CodecSettings",
    "get_settings",
    "configure_logging",
    "get_logger",
    "GigaPlannerError",
    "BuildCodeError",
    "CatalogError",
    "MalformedBuildCodeError",
    "UnknownConfigurationError",
    # Models
    "BuildConfiguration",
    "CatalogEntry",
    "Catalogs",
    "CharacterRecord",
    "DataMappings",
    "DecodeResult",
    "GameMechanics",
    "HMSIncreases",
    "OghmaChoice",
    "Perk",
    "PerkDescriptor",
    "PerkList",
    "Preset",
    "SkillLevel",
    # Codec
    "GigaPlannerConverter",
    "LookupMaps",
    # Ingestion
    "CatalogLoader",
]

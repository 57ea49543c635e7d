"""Character record models exchanged by the build codec.

A CharacterRecord is the unit of exchange: the decoder builds a fresh one
per call and the encoder consumes one. Names (race, perks, configuration)
are carried instead of wire ids; the codec resolves them against its
catalogs. Every numeric field maps to one byte of the build code, so
values are validated to 0-255.

Example:
    >>> record = CharacterRecord(
    ...     level=10,
    ...     hms_increases=HMSIncreases(health=5, magicka=3, stamina=2),
    ...     race="Nord",
    ...     configuration=BuildConfiguration(perk_list="Warrior", game_mechanics="Vanilla"),
    ... )
    >>> record.model_dump(by_alias=True)["hmsIncreases"]
    {'health': 5, 'magicka': 3, 'stamina': 2}
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from gigaplanner_codec.models.enums import OghmaChoice


ByteValue = Annotated[int, Field(ge=0, le=255, description="Unsigned byte (0-255)")]

UNKNOWN_NAME = "Unknown"
"""Name reported for race, stone or blessing ids missing from their catalog."""

LEVEL_SKILL_NAME = "Level"
"""Skill name of the synthetic entry appended to version 2 decodes."""


_RECORD_CONFIG = ConfigDict(
    extra="forbid",
    validate_assignment=True,
    alias_generator=to_camel,
    populate_by_name=True,
)


class HMSIncreases(BaseModel):
    """Health, magicka and stamina points allocated at level-up."""

    model_config = _RECORD_CONFIG

    health: ByteValue = 0
    magicka: ByteValue = 0
    stamina: ByteValue = 0


class SkillLevel(BaseModel):
    """Level of one named skill."""

    model_config = _RECORD_CONFIG

    skill: str = Field(description="Skill name from the perk list's skill slots")
    level: ByteValue = Field(description="Skill level")


class BuildConfiguration(BaseModel):
    """Which perk list and ruleset govern a build."""

    model_config = _RECORD_CONFIG

    perk_list: str = Field(description="Perk list name")
    game_mechanics: str = Field(description="Game mechanics name")


class CharacterRecord(BaseModel):
    """A complete character build in name form.

    Attributes:
        level: Character level.
        hms_increases: Attribute points allocated at level-up.
        skill_levels: One entry per skill slot in perk list order. Version 2
            decodes append a synthetic ``Level`` entry that the encoder ignores.
        oghma_choice: Oghma Infinium bonus attribute.
        race: Race name.
        standing_stone: Standing stone name.
        blessing: Blessing name.
        perks: Names of taken perks, in perk list order when decoded.
        configuration: Perk list and game mechanics names.
    """

    model_config = _RECORD_CONFIG

    level: ByteValue = Field(default=1, description="Character level")
    hms_increases: HMSIncreases = Field(default_factory=HMSIncreases)
    skill_levels: list[SkillLevel] = Field(default_factory=list)
    oghma_choice: OghmaChoice = Field(default=OghmaChoice.NONE)
    race: str = Field(default=UNKNOWN_NAME)
    standing_stone: str = Field(default=UNKNOWN_NAME)
    blessing: str = Field(default=UNKNOWN_NAME)
    perks: list[str] = Field(default_factory=list)
    configuration: BuildConfiguration

    def skill_level(self, skill: str) -> int | None:
        """Get the level recorded for a skill, or None if absent."""
        for entry in self.skill_levels:
            if entry.skill == skill:
                return entry.level
        return None

    def without_level_entry(self) -> CharacterRecord:
        """Return a copy without the synthetic ``Level`` skill entry."""
        return self.model_copy(
            update={
                "skill_levels": [
                    entry for entry in self.skill_levels if entry.skill != LEVEL_SKILL_NAME
                ]
            },
            deep=True,
        )

"""Result and summary models returned by the codec's public operations."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from gigaplanner_codec.models.character import CharacterRecord


_RESULT_CONFIG = ConfigDict(
    frozen=True,
    alias_generator=to_camel,
    populate_by_name=True,
)


class DecodeResult(BaseModel):
    """Outcome of decoding a share URL.

    Either ``success`` is True and ``character`` is set, or ``success`` is
    False and ``error`` carries a message suitable for display.
    """

    model_config = _RESULT_CONFIG

    success: bool
    preset: str | None = None
    character: CharacterRecord | None = None
    error: str | None = None

    @classmethod
    def ok(cls, character: CharacterRecord, preset: str | None = None) -> DecodeResult:
        """Build a successful result."""
        return cls(success=True, preset=preset, character=character)

    @classmethod
    def failure(cls, error: str) -> DecodeResult:
        """Build a failed result."""
        return cls(success=False, error=error)


class IdName(BaseModel):
    """An id/name pair for populating selection lists."""

    model_config = _RESULT_CONFIG

    id: int
    name: str


class DataMappings(BaseModel):
    """Id/name pairs for every catalog the codec knows."""

    model_config = _RESULT_CONFIG

    perk_lists: list[IdName] = Field(default_factory=list)
    races: list[IdName] = Field(default_factory=list)
    game_mechanics: list[IdName] = Field(default_factory=list)
    standing_stones: list[IdName] = Field(default_factory=list)
    blessings: list[IdName] = Field(default_factory=list)
    presets: list[IdName] = Field(default_factory=list)


class PerkDescriptor(BaseModel):
    """A perk with its skill slot resolved to a skill name.

    Attributes:
        id: Position of the perk in its list (its bitmap position).
        name: Perk name.
        skill: Skill name.
        skill_req: Required skill level.
        description: Perk description.
    """

    model_config = _RESULT_CONFIG

    id: int
    name: str
    skill: str
    skill_req: int
    description: str

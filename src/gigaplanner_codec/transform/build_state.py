"""Transformation between decoded characters and planner build states.

The planner keeps builds in its own shape: optional cosmetic selections,
attribute assignment points, a skill -> level dict and perks grouped by
skill. These helpers move data between that shape and CharacterRecord,
reporting problems through TransformationResult instead of raising.
"""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from gigaplanner_codec.codec.converter import GigaPlannerConverter
from gigaplanner_codec.core.exceptions import GigaPlannerError
from gigaplanner_codec.core.logging import get_logger
from gigaplanner_codec.models.character import (
    LEVEL_SKILL_NAME,
    UNKNOWN_NAME,
    BuildConfiguration,
    CharacterRecord,
    SkillLevel,
)
from gigaplanner_codec.transform.attributes import (
    AttributeAssignments,
    from_attribute_assignments,
    to_attribute_assignments,
)


logger = get_logger(__name__)

T = TypeVar("T")

DEFAULT_RACE = "Nord"
"""Race used when a build state has none selected."""

NO_SELECTION = "None"
"""Stone and blessing name used when a build state has none selected."""


_STATE_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class BuildState(BaseModel):
    """A character build in the planner's own shape.

    Attributes:
        race: Selected race, if any.
        stone: Selected standing stone, if any.
        favorite_blessing: Selected blessing, if any.
        attribute_assignments: Attribute points and level.
        skill_levels: Skill name -> level.
        perks: Skill name -> selected perk names.
    """

    model_config = _STATE_CONFIG

    race: str | None = None
    stone: str | None = None
    favorite_blessing: str | None = None
    attribute_assignments: AttributeAssignments | None = None
    skill_levels: dict[str, int] = Field(default_factory=dict)
    perks: dict[str, list[str]] = Field(default_factory=dict)


class TransformationResult(BaseModel, Generic[T]):
    """Outcome of a transformation, with non-fatal warnings."""

    model_config = _STATE_CONFIG

    success: bool
    data: T | None = None
    error: str | None = None
    warnings: list[str] = Field(default_factory=list)


def _known(name: str) -> str | None:
    return None if name == UNKNOWN_NAME else name


def to_build_state(
    character: CharacterRecord,
    converter: GigaPlannerConverter | None = None,
) -> TransformationResult[BuildState]:
    """Convert a decoded character into a planner build state.

    Args:
        character: The decoded character.
        converter: Used to find each perk's skill. Without it every perk
            is reported as unplaceable.

    Returns:
        The transformation result.
    """
    warnings: list[str] = []
    try:
        assignments = to_attribute_assignments(
            character.hms_increases, character.level, character.oghma_choice
        )

        skill_of: dict[str, str] = {}
        if converter is not None:
            skill_of = {
                perk.name: perk.skill
                for perk in converter.get_perks_for_list(character.configuration.perk_list)
            }
        grouped: dict[str, list[str]] = {}
        for perk_name in character.perks:
            skill = skill_of.get(perk_name)
            if skill is None:
                warnings.append(f"Could not determine skill for perk: {perk_name}")
                continue
            grouped.setdefault(skill, []).append(perk_name)

        state = BuildState(
            race=_known(character.race),
            stone=_known(character.standing_stone),
            favorite_blessing=_known(character.blessing),
            attribute_assignments=assignments,
            skill_levels={
                entry.skill: entry.level
                for entry in character.skill_levels
                if entry.skill != LEVEL_SKILL_NAME
            },
            perks=grouped,
        )
    except (GigaPlannerError, ValidationError) as exc:
        logger.warning("Build state transformation failed", error=str(exc))
        return TransformationResult[BuildState](success=False, error=str(exc), warnings=warnings)

    return TransformationResult[BuildState](success=True, data=state, warnings=warnings)


def from_build_state(
    state: BuildState,
    *,
    perk_list: str,
    game_mechanics: str,
) -> TransformationResult[CharacterRecord]:
    """Convert a planner build state into a character record.

    Args:
        state: The planner build state.
        perk_list: Perk list name to encode against.
        game_mechanics: Game mechanics name to encode against.

    Returns:
        The transformation result.
    """
    try:
        level, hms_increases, oghma_choice = from_attribute_assignments(
            state.attribute_assignments or AttributeAssignments()
        )
        character = CharacterRecord(
            level=level,
            hms_increases=hms_increases,
            skill_levels=[
                SkillLevel(skill=skill, level=value)
                for skill, value in state.skill_levels.items()
            ],
            oghma_choice=oghma_choice,
            race=state.race or DEFAULT_RACE,
            standing_stone=state.stone or NO_SELECTION,
            blessing=state.favorite_blessing or NO_SELECTION,
            perks=[name for names in state.perks.values() for name in names],
            configuration=BuildConfiguration(
                perk_list=perk_list,
                game_mechanics=game_mechanics,
            ),
        )
    except (GigaPlannerError, ValidationError) as exc:
        logger.warning("Character transformation failed", error=str(exc))
        return TransformationResult[CharacterRecord](success=False, error=str(exc))

    return TransformationResult[CharacterRecord](success=True, data=character)


def validate_build_state(state: BuildState) -> TransformationResult[bool]:
    """Check a build state has what a build code needs."""
    errors = []
    if not state.race:
        errors.append("Race is required for GigaPlanner conversion")
    if not state.attribute_assignments or not state.attribute_assignments.level:
        errors.append("Character level is required for GigaPlanner conversion")
    if errors:
        return TransformationResult[bool](success=False, error="; ".join(errors))
    return TransformationResult[bool](success=True, data=True)


def validate_character(character: CharacterRecord) -> TransformationResult[bool]:
    """Check a decoded character has what a build state needs."""
    errors = []
    if not character.race or character.race == UNKNOWN_NAME:
        errors.append("Valid race is required for BuildState conversion")
    if character.level < 1:
        errors.append("Valid character level is required for BuildState conversion")
    if errors:
        return TransformationResult[bool](success=False, error="; ".join(errors))
    return TransformationResult[bool](success=True, data=True)

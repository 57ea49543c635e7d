"""Catalog models for the GigaPlanner reference data.

Catalogs are supplied by the caller (usually loaded from the planner's
JSON data files) and treated as immutable reference data by the codec.

Models:
    Perk: One perk inside a perk list.
    PerkList: A subclass definition with 18 skill slots and ordered perks.
    CatalogEntry: A race, standing stone or blessing; array index is the id.
    GameMechanics: A named ruleset with an explicit numeric id.
    Preset: A named shortcut pointing at a perk list id.
    Catalogs: Bundle of all six catalogs.
"""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


SKILL_SLOT_COUNT = 18
"""Number of skill slots defined by every perk list."""


_CATALOG_CONFIG = ConfigDict(
    frozen=True,
    extra="ignore",
    alias_generator=to_camel,
    populate_by_name=True,
)


class Perk(BaseModel):
    """A single perk in a perk list.

    Attributes:
        name: Perk display name.
        skill: Skill slot index (0-17) this perk belongs to.
        skill_req: Skill level required to take the perk.
        description: Perk description text.
    """

    model_config = _CATALOG_CONFIG

    name: str = Field(min_length=1, description="Perk name")
    skill: int = Field(ge=0, lt=SKILL_SLOT_COUNT, description="Skill slot index")
    skill_req: int = Field(default=0, ge=0, description="Required skill level")
    description: str = Field(default="", description="Perk description")


class PerkList(BaseModel):
    """A perk list (subclass) definition.

    Perk order is significant: a perk's position is its bit position in
    the encoded perk bitmap.

    Attributes:
        id: Wire-format perk list id.
        name: Perk list display name.
        skill_names: Exactly 18 skill names, index = skill slot.
        perks: Ordered perks.
    """

    model_config = _CATALOG_CONFIG

    id: int = Field(
        ge=0,
        le=255,
        validation_alias=AliasChoices("perkListId", "perk_list_id", "id"),
        description="Wire-format perk list id",
    )
    name: str = Field(min_length=1, description="Perk list name")
    skill_names: tuple[str, ...] = Field(
        min_length=SKILL_SLOT_COUNT,
        max_length=SKILL_SLOT_COUNT,
        description="Skill name per skill slot",
    )
    perks: tuple[Perk, ...] = Field(default=(), description="Ordered perks")

    @model_validator(mode="before")
    @classmethod
    def resolve_skill_names(cls, data: Any) -> Any:
        """Replace perk skills given by name with their slot index."""
        if not isinstance(data, dict):
            return data
        skill_names = data.get("skillNames", data.get("skill_names"))
        perks = data.get("perks")
        if not skill_names or not perks:
            return data

        resolved = []
        for perk in perks:
            if isinstance(perk, dict) and isinstance(perk.get("skill"), str):
                skill = perk["skill"]
                if skill not in skill_names:
                    msg = f"Perk {perk.get('name')!r} references unknown skill {skill!r}"
                    raise ValueError(msg)
                perk = {**perk, "skill": list(skill_names).index(skill)}
            resolved.append(perk)
        return {**data, "perks": resolved}

    @property
    def perk_count(self) -> int:
        """Number of perks, which is also the perk bitmap length in bits."""
        return len(self.perks)

    def skill_name_for(self, perk: Perk) -> str:
        """Get the skill name a perk belongs to."""
        return self.skill_names[perk.skill]


class CatalogEntry(BaseModel):
    """A race, standing stone or blessing.

    These catalogs carry no id field; the entry's array index is its
    wire-format id. Bare strings are accepted as ``{"name": ...}``.
    """

    model_config = _CATALOG_CONFIG

    name: str = Field(min_length=1, description="Entry name")

    @model_validator(mode="before")
    @classmethod
    def accept_bare_name(cls, data: Any) -> Any:
        """Allow a catalog file to list plain names."""
        if isinstance(data, str):
            return {"name": data}
        return data


class GameMechanics(BaseModel):
    """A game mechanics ruleset with an explicit wire-format id."""

    model_config = _CATALOG_CONFIG

    id: int = Field(
        ge=0,
        le=255,
        validation_alias=AliasChoices("gameId", "game_id", "id"),
        description="Wire-format game mechanics id",
    )
    name: str = Field(min_length=1, description="Ruleset name")


class Preset(BaseModel):
    """A named preset; ``perks`` references a perk list id."""

    model_config = _CATALOG_CONFIG

    name: str = Field(min_length=1, description="Preset name")
    perks: int = Field(ge=0, description="Referenced perk list id")


class Catalogs(BaseModel):
    """All reference catalogs the codec needs, loaded up front.

    Attributes:
        perk_lists: Perk list definitions.
        races: Races, index = id.
        standing_stones: Standing stones, index = id.
        blessings: Blessings, index = id.
        game_mechanics: Game mechanics rulesets.
        presets: Presets, index = preset number.
    """

    model_config = _CATALOG_CONFIG

    perk_lists: tuple[PerkList, ...] = Field(default=())
    races: tuple[CatalogEntry, ...] = Field(default=())
    standing_stones: tuple[CatalogEntry, ...] = Field(default=())
    blessings: tuple[CatalogEntry, ...] = Field(default=())
    game_mechanics: tuple[GameMechanics, ...] = Field(default=())
    presets: tuple[Preset, ...] = Field(default=())

    def find_perk_list(self, perk_list_id: int) -> PerkList | None:
        """Find a perk list by its wire-format id."""
        return next((p for p in self.perk_lists if p.id == perk_list_id), None)

    def find_game_mechanics(self, mechanics_id: int) -> GameMechanics | None:
        """Find a game mechanics ruleset by its wire-format id."""
        return next((g for g in self.game_mechanics if g.id == mechanics_id), None)

    def find_preset_number(self, perk_list_id: int) -> int | None:
        """Get the index of the first preset pointing at a perk list id."""
        for number, preset in enumerate(self.presets):
            if preset.perks == perk_list_id:
                return number
        return None

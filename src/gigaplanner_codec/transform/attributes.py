"""Conversion between build-code attribute data and attribute assignments.

A build code stores level-up increases (one point per level spent on
health, magicka or stamina) plus the Oghma Infinium choice. Planner
build states store raw assignment points with the Oghma bonus folded in.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from gigaplanner_codec.core.exceptions import TransformationError
from gigaplanner_codec.models.character import HMSIncreases
from gigaplanner_codec.models.enums import OghmaChoice


OGHMA_BONUS_POINTS = 1
"""Assignment points the Oghma choice adds to its attribute."""

_MAX_BYTE = 255


class AttributeAssignments(BaseModel):
    """Attribute points assigned in a planner build state."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    level: int = Field(default=1, ge=0, description="Character level")
    health: int = Field(default=0, ge=0)
    magicka: int = Field(default=0, ge=0)
    stamina: int = Field(default=0, ge=0)


def to_attribute_assignments(
    hms_increases: HMSIncreases,
    level: int,
    oghma_choice: OghmaChoice,
) -> AttributeAssignments:
    """Fold level-up increases and the Oghma choice into assignments.

    Args:
        hms_increases: Decoded level-up increases.
        level: Character level.
        oghma_choice: Decoded Oghma choice.

    Returns:
        Assignment points, with one extra point on the Oghma attribute.

    Example:
        >>> to_attribute_assignments(HMSIncreases(health=5), 10, OghmaChoice.HEALTH).health
        6
    """
    points = {
        "health": hms_increases.health,
        "magicka": hms_increases.magicka,
        "stamina": hms_increases.stamina,
    }
    if oghma_choice is not OghmaChoice.NONE:
        points[oghma_choice.value.lower()] += OGHMA_BONUS_POINTS
    return AttributeAssignments(level=level, **points)


def from_attribute_assignments(
    assignments: AttributeAssignments,
) -> tuple[int, HMSIncreases, OghmaChoice]:
    """Split assignments back into level, increases and an Oghma guess.

    The build state does not record which attribute the Oghma point went
    to, so the attribute with the most points is picked (ties favour
    health, then stamina). Points are passed through unchanged.

    Args:
        assignments: Planner attribute assignments.

    Returns:
        Tuple of (level, increases, Oghma choice). A level of 0 becomes 1.

    Raises:
        TransformationError: If a value does not fit in one byte.
    """
    level = assignments.level or 1
    health, magicka, stamina = assignments.health, assignments.magicka, assignments.stamina
    values = {"level": level, "health": health, "magicka": magicka, "stamina": stamina}
    for name, value in values.items():
        if value > _MAX_BYTE:
            raise TransformationError(
                f"{name} value {value} exceeds the build code limit of {_MAX_BYTE}",
                details={"field_name": name},
            )

    if health > 0 and health >= stamina and health >= magicka:
        oghma_choice = OghmaChoice.HEALTH
    elif stamina > 0 and stamina >= magicka:
        oghma_choice = OghmaChoice.STAMINA
    elif magicka > 0:
        oghma_choice = OghmaChoice.MAGICKA
    else:
        oghma_choice = OghmaChoice.NONE

    return (
        level,
        HMSIncreases(health=health, magicka=magicka, stamina=stamina),
        oghma_choice,
    )

"""Transformations between decoded characters and planner build states."""

from __future__ import annotations

from gigaplanner_codec.transform.attributes import (
    OGHMA_BONUS_POINTS,
    AttributeAssignments,
    from_attribute_assignments,
    to_attribute_assignments,
)
from gigaplanner_codec.transform.build_state import (
    BuildState,
    TransformationResult,
    from_build_state,
    to_build_state,
    validate_build_state,
    validate_character,
)


__all__ = [
    "OGHMA_BONUS_POINTS",
    "AttributeAssignments",
    "from_attribute_assignments",
    "to_attribute_assignments",
    "BuildState",
    "TransformationResult",
    "from_build_state",
    "to_build_state",
    "validate_build_state",
    "validate_character",
]

"""Enumeration types for the GigaPlanner build codec."""

from __future__ import annotations

from enum import StrEnum


class OghmaChoice(StrEnum):
    """Attribute bonus picked as the Oghma Infinium reward.

    The declaration order is the wire index: None=0, Health=1,
    Magicka=2, Stamina=3.
    """

    NONE = "None"
    HEALTH = "Health"
    MAGICKA = "Magicka"
    STAMINA = "Stamina"

    @property
    def index(self) -> int:
        """Get the numeric index used in the build code.

        Returns:
            Position of this choice in the declaration order (0-3).
        """
        return list(OghmaChoice).index(self)

    @classmethod
    def from_index(cls, index: int) -> OghmaChoice:
        """Resolve a numeric index, defaulting to NONE when out of range.

        Args:
            index: The decoded index value.

        Returns:
            The matching OghmaChoice, or OghmaChoice.NONE.
        """
        choices = list(cls)
        if 0 <= index < len(choices):
            return choices[index]
        return cls.NONE

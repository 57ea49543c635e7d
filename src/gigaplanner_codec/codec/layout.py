"""Fixed byte layout of a GigaPlanner build code payload.

Fields are read by absolute offset. Offsets 2 and 4 are reserved (race
list and blessing list markers) and always written as zero.
"""

from __future__ import annotations

CURRENT_VERSION = 2
"""Version byte written by the encoder."""

OGHMA_SHIFT_VERSION = 2
"""Only this version stores the Oghma choice in the high nibble."""

OGHMA_SHIFT = 4
"""Bit shift applied to the Oghma byte under OGHMA_SHIFT_VERSION."""

# =============================================================================
# Offsets
# =============================================================================

VERSION_OFFSET = 0
PERK_LIST_OFFSET = 1
RACE_LIST_OFFSET = 2
GAME_MECHANICS_OFFSET = 3
BLESSING_LIST_OFFSET = 4
LEVEL_OFFSET = 5
HEALTH_OFFSET = 6
MAGICKA_OFFSET = 7
STAMINA_OFFSET = 8
SKILLS_OFFSET = 9
OGHMA_OFFSET = 27
RACE_OFFSET = 28
STONE_OFFSET = 29
BLESSING_OFFSET = 30
PERKS_OFFSET = 31

HEADER_SIZE = PERKS_OFFSET
"""Bytes preceding the perk bitmap; shorter payloads are malformed."""

RESERVED_BYTE = 0
"""Value written to the reserved offsets."""

"""Bidirectional GigaPlanner build code converter.

The converter turns share URLs and build codes into CharacterRecords and
back. It holds only immutable state (catalogs and the lookup maps built
from them), so one instance can serve concurrent callers, and several
instances with different catalogs can coexist.

Failure policy:
- Perk list and game mechanics ids are load-bearing: an unresolvable one
  raises UnknownConfigurationError.
- Race, standing stone, blessing and Oghma values are cosmetic: unknown
  ids decode to "Unknown"/None and unknown names encode as 0.
- ``decode_url`` is the only non-raising entry point; it reports every
  failure through DecodeResult.

Example:
    >>> converter = GigaPlannerConverter(catalogs)
    >>> result = converter.decode_url("https://gigaplanner.com?b=AgAAAAAU...")
    >>> if result.success:
    ...     print(result.character.race)
"""

from __future__ import annotations

from pathlib import Path
from urllib.parse import parse_qs, urlsplit

from gigaplanner_codec.codec import layout
from gigaplanner_codec.codec.bitpack import pack_flags, unpack_flags
from gigaplanner_codec.codec.lookup import LookupMaps
from gigaplanner_codec.codec.transcoding import decode_payload, encode_payload
from gigaplanner_codec.core.config import CodecSettings, get_settings
from gigaplanner_codec.core.exceptions import (
    BuildCodeError,
    GigaPlannerError,
    MalformedBuildCodeError,
    UnknownConfigurationError,
)
from gigaplanner_codec.core.logging import get_logger
from gigaplanner_codec.models.catalog import Catalogs, GameMechanics, PerkList
from gigaplanner_codec.models.character import (
    LEVEL_SKILL_NAME,
    UNKNOWN_NAME,
    BuildConfiguration,
    CharacterRecord,
    HMSIncreases,
    SkillLevel,
)
from gigaplanner_codec.models.enums import OghmaChoice
from gigaplanner_codec.models.results import (
    DataMappings,
    DecodeResult,
    IdName,
    PerkDescriptor,
)


logger = get_logger(__name__)

LOGGED_CODE_LENGTH = 48
"""Build code characters kept when a code is written to the log."""


def _truncate(build_code: str) -> str:
    if len(build_code) <= LOGGED_CODE_LENGTH:
        return build_code
    return f"{build_code[:LOGGED_CODE_LENGTH]}... ({len(build_code)} chars)"


class GigaPlannerConverter:
    """Encode and decode GigaPlanner build codes against a set of catalogs.

    Attributes:
        catalogs: The reference catalogs this converter resolves against.
        lookup: Name/id lookup tables derived from the catalogs.
    """

    def __init__(
        self,
        catalogs: Catalogs,
        *,
        settings: CodecSettings | None = None,
    ) -> None:
        """Initialize the converter.

        Args:
            catalogs: Fully loaded catalogs.
            settings: Optional settings; defaults to the global settings.

        Raises:
            CatalogError: If a catalog repeats a name under the ``error``
                duplicate policy.
        """
        self._settings = settings or get_settings()
        self.catalogs = catalogs
        self.lookup = LookupMaps.build(
            catalogs,
            on_duplicate=self._settings.duplicate_names,
        )

    @classmethod
    def from_directory(
        cls,
        directory: str | Path,
        *,
        settings: CodecSettings | None = None,
    ) -> GigaPlannerConverter:
        """Create a converter from a directory of JSON catalog files.

        Args:
            directory: Directory holding races.json, perks.json, etc.
            settings: Optional settings.

        Returns:
            A converter bound to the loaded catalogs.
        """
        from gigaplanner_codec.ingestion.catalog_loader import CatalogLoader

        return cls(CatalogLoader(directory).load_all(), settings=settings)

    # =========================================================================
    # Decoding
    # =========================================================================

    def decode_url(self, url: str) -> DecodeResult:
        """Decode a share URL into a character record.

        Never raises: malformed links and unresolvable configurations are
        reported as a failed DecodeResult.

        Args:
            url: A share URL carrying ``b`` (build code) and optionally
                ``p`` (preset number) query parameters.

        Returns:
            The decode result.
        """
        build_code = ""
        try:
            params = parse_qs(urlsplit(url).query, keep_blank_values=True)
            build_code = next(iter(params.get("b", [])), "")
            if not build_code:
                return DecodeResult.failure("No build code found in URL")

            character = self.decode_build_code(build_code)
            preset = self._preset_name(next(iter(params.get("p", [])), None))
            return DecodeResult.ok(character, preset=preset)
        except GigaPlannerError as exc:
            logger.warning(
                "Failed to decode share URL",
                url_length=len(url),
                build_code=_truncate(build_code),
                error=exc.message,
            )
            return DecodeResult.failure(exc.message)
        except Exception as exc:
            logger.exception("Unexpected error decoding share URL", url_length=len(url))
            return DecodeResult.failure(str(exc) or exc.__class__.__name__)

    def decode_build_code(self, build_code: str) -> CharacterRecord:
        """Decode a build code string into a character record.

        Args:
            build_code: URL-safe base64 build code.

        Returns:
            The decoded character. Version 2 codes carry an extra ``Level``
            skill entry equal to the character level.

        Raises:
            MalformedBuildCodeError: If the code is not base64 or too short.
            UnknownConfigurationError: If the perk list or game mechanics
                id is not in the catalogs.
        """
        payload = decode_payload(build_code)
        if len(payload) < layout.HEADER_SIZE:
            raise MalformedBuildCodeError(
                f"Build code payload is {len(payload)} bytes, "
                f"expected at least {layout.HEADER_SIZE}",
                build_code=build_code,
            )

        version = payload[layout.VERSION_OFFSET]
        perk_list = self._resolve_perk_list_id(payload[layout.PERK_LIST_OFFSET])
        mechanics = self._resolve_game_mechanics_id(payload[layout.GAME_MECHANICS_OFFSET])

        skill_levels = [
            SkillLevel(skill=skill, level=payload[layout.SKILLS_OFFSET + slot])
            for slot, skill in enumerate(perk_list.skill_names)
        ]
        level = payload[layout.LEVEL_OFFSET]
        if version == layout.OGHMA_SHIFT_VERSION:
            skill_levels.append(SkillLevel(skill=LEVEL_SKILL_NAME, level=level))

        flags = unpack_flags(payload, perk_list.perk_count, offset=layout.PERKS_OFFSET)
        perks = [perk.name for perk, taken in zip(perk_list.perks, flags) if taken]

        character = CharacterRecord(
            level=level,
            hms_increases=HMSIncreases(
                health=payload[layout.HEALTH_OFFSET],
                magicka=payload[layout.MAGICKA_OFFSET],
                stamina=payload[layout.STAMINA_OFFSET],
            ),
            skill_levels=skill_levels,
            oghma_choice=self._parse_oghma_choice(payload[layout.OGHMA_OFFSET], version),
            race=self.lookup.races.name_for(payload[layout.RACE_OFFSET]) or UNKNOWN_NAME,
            standing_stone=(
                self.lookup.standing_stones.name_for(payload[layout.STONE_OFFSET])
                or UNKNOWN_NAME
            ),
            blessing=(
                self.lookup.blessings.name_for(payload[layout.BLESSING_OFFSET])
                or UNKNOWN_NAME
            ),
            perks=perks,
            configuration=BuildConfiguration(
                perk_list=perk_list.name,
                game_mechanics=mechanics.name,
            ),
        )
        logger.debug(
            "Decoded build code",
            version=version,
            perk_list=perk_list.name,
            payload_size=len(payload),
            perks_taken=len(perks),
        )
        return character

    @staticmethod
    def _parse_oghma_choice(raw: int, version: int) -> OghmaChoice:
        if version == layout.OGHMA_SHIFT_VERSION:
            raw >>= layout.OGHMA_SHIFT
        return OghmaChoice.from_index(raw)

    def _resolve_perk_list_id(self, perk_list_id: int) -> PerkList:
        perk_list = self.catalogs.find_perk_list(perk_list_id)
        if perk_list is None:
            raise UnknownConfigurationError(
                f"Invalid perk list ID: {perk_list_id}",
                field_name="perk_list_id",
                value=perk_list_id,
            )
        return perk_list

    def _perk_list_by_name(self, name: str) -> PerkList | None:
        # Same name -> id rule as the lookup maps, so duplicate names
        # resolve to one list for encoding and perk listing alike.
        perk_list_id = self.lookup.perk_lists.id_for(name)
        if perk_list_id is None:
            return None
        return self.catalogs.find_perk_list(perk_list_id)

    def _resolve_game_mechanics_id(self, mechanics_id: int) -> GameMechanics:
        mechanics = self.catalogs.find_game_mechanics(mechanics_id)
        if mechanics is None:
            raise UnknownConfigurationError(
                f"Invalid game mechanics ID: {mechanics_id}",
                field_name="game_mechanics_id",
                value=mechanics_id,
            )
        return mechanics

    def _preset_name(self, raw: str | None) -> str | None:
        if raw is None:
            return None
        try:
            number = int(raw)
        except ValueError:
            return None
        if 0 <= number < len(self.catalogs.presets):
            return self.catalogs.presets[number].name
        return None

    # =========================================================================
    # Encoding
    # =========================================================================

    def encode_url(self, character: CharacterRecord, base_url: str | None = None) -> str:
        """Encode a character into a share URL.

        Args:
            character: The character to encode.
            base_url: URL to append the query to; defaults to the
                configured ``base_url``.

        Returns:
            ``<base_url>?b=<code>``, plus ``&p=<preset>`` when a preset
            points at the character's perk list.

        Raises:
            UnknownConfigurationError: If the configuration names are unknown.
        """
        build_code = self.encode_build_code(character)
        url = f"{base_url or self._settings.base_url}?b={build_code}"

        perk_list_id = self.lookup.perk_lists.id_for(character.configuration.perk_list)
        preset_number = (
            self.catalogs.find_preset_number(perk_list_id)
            if perk_list_id is not None
            else None
        )
        if preset_number is not None:
            url += f"&p={preset_number}"
        return url

    def encode_build_code(self, character: CharacterRecord) -> str:
        """Encode a character into a version 2 build code.

        Skill levels are taken by matching the perk list's 18 skill names;
        missing skills encode as 0 and any extra entries (such as the
        synthetic ``Level`` entry) are ignored.

        Args:
            character: The character to encode.

        Returns:
            URL-safe base64 build code without padding.

        Raises:
            UnknownConfigurationError: If the perk list or game mechanics
                name is not in the catalogs.
            BuildCodeError: If a numeric value does not fit in one byte.
        """
        configuration = character.configuration
        perk_list = self._perk_list_by_name(configuration.perk_list)
        if perk_list is None:
            raise UnknownConfigurationError(
                f"Unknown perk list: {configuration.perk_list}",
                field_name="perk_list",
                value=configuration.perk_list,
            )
        mechanics_id = self.lookup.game_mechanics.id_for(configuration.game_mechanics)
        if mechanics_id is None:
            raise UnknownConfigurationError(
                f"Unknown game mechanics: {configuration.game_mechanics}",
                field_name="game_mechanics",
                value=configuration.game_mechanics,
            )

        levels: dict[str, int] = {}
        for entry in character.skill_levels:
            levels.setdefault(entry.skill, entry.level)

        payload = bytearray(layout.HEADER_SIZE)
        try:
            payload[layout.VERSION_OFFSET] = layout.CURRENT_VERSION
            payload[layout.PERK_LIST_OFFSET] = perk_list.id
            payload[layout.RACE_LIST_OFFSET] = layout.RESERVED_BYTE
            payload[layout.GAME_MECHANICS_OFFSET] = mechanics_id
            payload[layout.BLESSING_LIST_OFFSET] = layout.RESERVED_BYTE
            payload[layout.LEVEL_OFFSET] = character.level
            payload[layout.HEALTH_OFFSET] = character.hms_increases.health
            payload[layout.MAGICKA_OFFSET] = character.hms_increases.magicka
            payload[layout.STAMINA_OFFSET] = character.hms_increases.stamina
            payload[layout.SKILLS_OFFSET : layout.OGHMA_OFFSET] = bytes(
                levels.get(skill, 0) for skill in perk_list.skill_names
            )
            payload[layout.OGHMA_OFFSET] = character.oghma_choice.index << layout.OGHMA_SHIFT
            payload[layout.RACE_OFFSET] = self.lookup.races.id_for(character.race) or 0
            payload[layout.STONE_OFFSET] = (
                self.lookup.standing_stones.id_for(character.standing_stone) or 0
            )
            payload[layout.BLESSING_OFFSET] = self.lookup.blessings.id_for(character.blessing) or 0
        except ValueError as exc:
            raise BuildCodeError(
                f"Character value does not fit in one byte: {exc}",
                details={"perk_list": perk_list.name},
            ) from exc

        taken = set(character.perks)
        unknown = taken.difference(perk.name for perk in perk_list.perks)
        if unknown:
            logger.warning(
                "Ignoring perks not in perk list",
                perk_list=perk_list.name,
                perks=sorted(unknown),
            )
        payload.extend(pack_flags(perk.name in taken for perk in perk_list.perks))

        logger.debug(
            "Encoded build code",
            perk_list=perk_list.name,
            payload_size=len(payload),
            perks_taken=len(taken) - len(unknown),
        )
        return encode_payload(bytes(payload))

    # =========================================================================
    # Catalog summaries
    # =========================================================================

    def get_data_mappings(self) -> DataMappings:
        """Get id/name pairs for every catalog, for selection lists."""
        catalogs = self.catalogs
        return DataMappings(
            perk_lists=[IdName(id=p.id, name=p.name) for p in catalogs.perk_lists],
            races=[IdName(id=i, name=r.name) for i, r in enumerate(catalogs.races)],
            game_mechanics=[IdName(id=g.id, name=g.name) for g in catalogs.game_mechanics],
            standing_stones=[
                IdName(id=i, name=s.name) for i, s in enumerate(catalogs.standing_stones)
            ],
            blessings=[IdName(id=i, name=b.name) for i, b in enumerate(catalogs.blessings)],
            presets=[IdName(id=i, name=p.name) for i, p in enumerate(catalogs.presets)],
        )

    def get_perks_for_list(self, perk_list_name: str) -> list[PerkDescriptor]:
        """Describe every perk of a perk list.

        Args:
            perk_list_name: Name of the perk list.

        Returns:
            Perk descriptors in bitmap order; empty for an unknown list.
        """
        perk_list = self._perk_list_by_name(perk_list_name)
        if perk_list is None:
            return []
        return [
            PerkDescriptor(
                id=index,
                name=perk.name,
                skill=perk_list.skill_name_for(perk),
                skill_req=perk.skill_req,
                description=perk.description,
            )
            for index, perk in enumerate(perk_list.perks)
        ]

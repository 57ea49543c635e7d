"""Build code codec: byte layout, perk bitmap, base64 boundary and converter.

Submodules:
    layout: Fixed byte offsets of the build code payload.
    bitpack: MSB-first perk bitmap packing.
    transcoding: URL-safe base64 encoding of payload bytes.
    lookup: Name/id lookup tables derived from catalogs.
    converter: GigaPlannerConverter, the public encode/decode API.
"""

from __future__ import annotations

from gigaplanner_codec.codec.bitpack import bitmap_size, pack_flags, unpack_flags
from gigaplanner_codec.codec.converter import GigaPlannerConverter
from gigaplanner_codec.codec.lookup import LookupMaps, LookupTable
from gigaplanner_codec.codec.transcoding import decode_payload, encode_payload


__all__ = [
    "GigaPlannerConverter",
    "LookupMaps",
    "LookupTable",
    "bitmap_size",
    "pack_flags",
    "unpack_flags",
    "decode_payload",
    "encode_payload",
]

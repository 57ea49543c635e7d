"""URL-safe base64 boundary between payload bytes and build code text."""

from __future__ import annotations

import base64
import binascii

from gigaplanner_codec.core.exceptions import MalformedBuildCodeError


def encode_payload(payload: bytes) -> str:
    """Encode payload bytes as an unpadded URL-safe build code.

    Args:
        payload: Raw build code bytes.

    Returns:
        Base64 text with ``+`` -> ``-``, ``/`` -> ``_`` and no ``=`` padding.
    """
    code = base64.b64encode(payload).decode("ascii")
    return code.replace("+", "-").replace("/", "_").rstrip("=")


def decode_payload(code: str) -> bytes:
    """Decode a build code back into payload bytes.

    Standard base64 characters and trailing padding are tolerated.

    Args:
        code: The build code text.

    Returns:
        Raw payload bytes.

    Raises:
        MalformedBuildCodeError: If the text is not valid base64.
    """
    text = code.strip().replace("-", "+").replace("_", "/").rstrip("=")
    if len(text) % 4 == 1:
        raise MalformedBuildCodeError(
            "Build code has an invalid length",
            build_code=code,
        )
    text += "=" * (-len(text) % 4)
    try:
        return base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise MalformedBuildCodeError(
            f"Build code is not valid base64: {exc}",
            build_code=code,
        ) from exc

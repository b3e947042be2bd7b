"""Encoding helpers shared by the option set and the URL builder."""

from __future__ import annotations

import base64
import binascii
import re

from imgproxy_url.errors import FormatError

_HEX = re.compile(r"[0-9a-fA-F]*")


def b64encode_text(text: str) -> str:
    """Return the standard (padded) base64 form of ``text``."""

    if not isinstance(text, str):
        raise TypeError(f"expected text, got {type(text).__name__}")
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


def b64decode_text(value: object) -> str | None:
    """Decode a value produced by :func:`b64encode_text`.

    Returns ``None`` for anything that is not strict base64 of UTF-8 text,
    and for values that decode to an empty string.
    """

    if not isinstance(value, str):
        return None
    try:
        decoded = base64.b64decode(value, validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError):
        return None
    return decoded or None


def urlsafe_b64_no_pad(raw: bytes) -> str:
    return base64.urlsafe_b64encode(raw).rstrip(b"=").decode("ascii")


def decode_hex(raw: str, *, name: str) -> bytes:
    """Decode a hex string into bytes, raising :class:`FormatError` on failure."""

    raw = raw.strip()
    if not _HEX.fullmatch(raw):
        raise FormatError(f"{name} must be hex")
    try:
        return bytes.fromhex(raw)
    except ValueError as exc:
        raise FormatError(f"{name} must be hex") from exc


__all__ = ["b64decode_text", "b64encode_text", "decode_hex", "urlsafe_b64_no_pad"]

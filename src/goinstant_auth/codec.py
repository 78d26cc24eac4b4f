"""
goinstant_auth.codec

base64url and JSON encoding helpers.

Responsibilities:
- Normalize standard base64 text into base64url form.
- Convert between raw bytes and unpadded base64url text (RFC 4648 section 5).
- Render claim sets as compact UTF-8 JSON, preserving insertion order.
"""

from __future__ import annotations

import binascii
import json
import re
from collections.abc import Mapping
from typing import Any

from jwt.utils import base64url_decode, base64url_encode

BASE64URL_RE = re.compile(r"^[A-Za-z0-9_\-]+$")

_TO_URLSAFE = str.maketrans({"+": "-", "/": "_", "=": None})


def to_base64url(text: str) -> str:
    # Already-urlsafe input passes through unchanged.
    return text.translate(_TO_URLSAFE)


def is_base64url(text: str) -> bool:
    return bool(BASE64URL_RE.match(text))


def decode_to_bytes(text: str) -> bytes:
    """
    Decode unpadded base64url text into bytes.

    Raises `ValueError` when the text is not valid base64url (including a
    length that no padding can repair).
    """
    if not is_base64url(text):
        raise ValueError("not base64url text")
    try:
        return base64url_decode(text)
    except binascii.Error as e:
        raise ValueError(str(e)) from e


def encode_bytes(data: bytes) -> str:
    return base64url_encode(data).decode("ascii")


def encode_json(obj: Mapping[str, Any]) -> str:
    # Compact separators and key insertion order; signatures depend on both.
    text = json.dumps(obj, separators=(",", ":"), ensure_ascii=False)
    return encode_bytes(text.encode("utf-8"))


# --- Module Notes -----------------------------------------------------------
# PyJWT's codec helpers are used so token segments match what standard JWT
# verifiers decode.

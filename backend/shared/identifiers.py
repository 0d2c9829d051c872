"""
Identifier helpers.

Users and profiles are identified by UUIDs stored in compact form
(32 lowercase hex characters). Externally visible profile and texture
payloads render them hyphenated (8-4-4-4-12).
"""

import re
import uuid

_COMPACT_RE = re.compile(r"[0-9a-fA-F]{32}")
_HYPHENATED_RE = re.compile(
    r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
)


def new_identifier() -> str:
    """Generate a fresh random identifier in compact form."""
    return uuid.uuid4().hex


def is_identifier(value: str) -> bool:
    """Return True if value is a compact or hyphenated identifier."""
    if not isinstance(value, str):
        return False
    return bool(_COMPACT_RE.fullmatch(value) or _HYPHENATED_RE.fullmatch(value))


def compact_identifier(value: str) -> str:
    """
    Normalize an identifier to its compact form.

    Accepts either the compact or the hyphenated form.

    Raises:
        ValueError: If value is not a well-formed identifier
    """
    if not is_identifier(value):
        raise ValueError(f"Malformed identifier: {value!r}")
    return value.replace("-", "").lower()


def format_identifier(value: str) -> str:
    """Render an identifier in hyphenated display form."""
    raw = compact_identifier(value)
    return f"{raw[0:8]}-{raw[8:12]}-{raw[12:16]}-{raw[16:20]}-{raw[20:32]}"

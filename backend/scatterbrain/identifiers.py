"""
Scatter-Brain Backend — Thought Identifiers
============================================

What:  Generates, formats and parses the 128-bit identifiers used as store keys.
How:   Wraps the standard `uuid.UUID` value type. New ids are random (v4);
       parsing accepts only the canonical hyphenated 8-4-4-4-12 form.
Who:   The thought service (new_id) and the thought routes (parse_id).

Canonical form:
    5f1c7a52-3c0e-4f4b-9a8e-2d4c6b1e0f93   (hex digits, either letter case)

    `uuid.UUID` on its own also accepts braces, a "urn:uuid:" prefix and
    un-hyphenated hex. Those never appear in our URLs, so they are rejected
    here rather than silently normalised.
"""

import re
import uuid

from scatterbrain.exceptions import MalformedIdentifierError

_CANONICAL_ID = re.compile(
    r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
)

NIL_ID = uuid.UUID(int=0)


def new_id() -> uuid.UUID:
    """Return a fresh random identifier."""
    return uuid.uuid4()


def format_id(identifier: uuid.UUID) -> str:
    """Return the canonical lower-case string form of an identifier."""
    return str(identifier)


def is_canonical_id(text: object) -> bool:
    """True when `text` is a string in canonical 8-4-4-4-12 hex form."""
    return isinstance(text, str) and _CANONICAL_ID.fullmatch(text) is not None


def parse_id(text: str) -> uuid.UUID:
    """
    Parse the canonical string form of an identifier.

    Raises:
        MalformedIdentifierError: `text` is not a canonical UUID string.
    """
    if not is_canonical_id(text):
        raise MalformedIdentifierError(value=str(text))
    return uuid.UUID(text)

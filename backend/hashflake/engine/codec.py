"""Fragment codec — ``position:length,position:length,...``.

Fields are truncated toward zero before encoding, which is exactly what
decoding would do to them, so ``decode(encode(c))`` is stable after one pass
and exact for integer-valued branches.
"""

from __future__ import annotations

import re

from pydantic import ValidationError

from hashflake.errors import EmptyFragmentError, FragmentDecodeError
from hashflake.models.snowflake import Branch, Configuration

# ASCII digits only; 15 digits keep every value exact as a float
_NUMBER_RE = re.compile(r"^\s*([0-9]{1,15})(?:\.[0-9]*)?\s*$")


def _field(value: float) -> str:
    return str(int(value))


def encode(configuration: Configuration) -> str:
    return ",".join(
        f"{_field(b.position)}:{_field(b.length)}" for b in configuration.branches
    )


def strip_fragment(text: str | None) -> str:
    text = text or ""
    return text[1:] if text.startswith("#") else text


def is_persisted(text: str | None) -> bool:
    """A fragment of one character or less means nothing is persisted."""
    return len(strip_fragment(text)) > 1


def decode(text: str | None) -> Configuration:
    """Parse a fragment. Any bad token rejects the whole fragment.

    Raises ``EmptyFragmentError`` when nothing is persisted and
    ``FragmentDecodeError`` for malformed tokens.
    """
    body = strip_fragment(text)
    if len(body) <= 1:
        raise EmptyFragmentError("no persisted fragment")

    branches: list[Branch] = []
    for i, token in enumerate(body.split(",")):
        parts = token.split(":")
        matches = [_NUMBER_RE.match(p) for p in parts]
        if len(parts) != 2 or not all(matches):
            raise FragmentDecodeError(f"token {i} is not position:length: {token!r}")
        # Fractional digits (older links) are truncated, integer part only
        position, length = (int(m.group(1)) for m in matches)
        try:
            branches.append(Branch(position=position, length=length))
        except ValidationError as e:
            raise FragmentDecodeError(f"token {i} is out of range: {token!r}") from e

    return Configuration(branches=tuple(branches))

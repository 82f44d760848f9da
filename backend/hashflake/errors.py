"""Package exceptions."""

from __future__ import annotations


class HashflakeError(Exception):
    """Base class for recoverable snowflake errors."""


class FragmentDecodeError(HashflakeError, ValueError):
    """A persisted fragment holds tokens that are not ``position:length`` integers."""


class EmptyFragmentError(FragmentDecodeError):
    """No fragment is persisted (empty or single-character string)."""


class GenerationError(HashflakeError):
    """Seed derivation failed; the previous configuration stays in place."""

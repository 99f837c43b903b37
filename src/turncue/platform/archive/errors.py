"""Exceptions raised while reading or writing keyed archives."""

from __future__ import annotations


class ArchiveError(Exception):
    """Base exception for keyed archive errors."""


class ArchiveFormatError(ArchiveError):
    """Raised when bytes are not a readable keyed archive."""


class ArchiveDecodeError(ArchiveError):
    """Raised when a stored field is missing or cannot be interpreted."""

    def __init__(self, key: str, reason: str) -> None:
        super().__init__(f"Cannot decode '{key}': {reason}")
        self.key: str = key
        self.reason: str = reason


__all__ = ["ArchiveDecodeError", "ArchiveError", "ArchiveFormatError"]

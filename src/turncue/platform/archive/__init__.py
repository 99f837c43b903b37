"""Keyed binary archive facade."""

from __future__ import annotations

from .errors import ArchiveDecodeError, ArchiveError, ArchiveFormatError
from .keyed import (
    ARCHIVE_VERSION,
    ARCHIVER_NAME,
    Archivable,
    KeyedArchiver,
    KeyedUnarchiver,
    archive,
    unarchive,
)

__all__ = [
    "ARCHIVER_NAME",
    "ARCHIVE_VERSION",
    "Archivable",
    "ArchiveDecodeError",
    "ArchiveError",
    "ArchiveFormatError",
    "KeyedArchiver",
    "KeyedUnarchiver",
    "archive",
    "unarchive",
]

"""Keyed binary archives for value objects.

An archive is a binary property list with an object table and a table of
named top-level entries. Objects (strings, URLs) are stored once in
``$objects`` and referenced from ``$top`` through ``plistlib.UID``; slot 0
of the object table is the null marker, so "no value" is a real entry rather
than a missing key. Integers are stored inline.

Example layout::

    {
        "$archiver": "turncue",
        "$version": 1,
        "$objects": ["$null", "Main St", {"$class": "URL", "relative": "..."}],
        "$top": {"text": UID(1), "imageURL": UID(2), "abbreviation": UID(0)},
    }
"""

from __future__ import annotations

import plistlib
from enum import Enum
from typing import Any, Final, Protocol, Self, TypeVar

from .errors import ArchiveFormatError

ARCHIVER_NAME: Final[str] = "turncue"
ARCHIVE_VERSION: Final[int] = 1

_NULL_MARKER: Final[str] = "$null"
_NULL_UID: Final[plistlib.UID] = plistlib.UID(0)
_URL_CLASS: Final[str] = "URL"


class KeyedArchiver:
    """Collect named values and serialize them into a binary archive."""

    def __init__(self) -> None:
        self._objects: list[Any] = [_NULL_MARKER]
        self._object_index: dict[tuple[str, str], int] = {}
        self._top: dict[str, Any] = {}

    def _intern(self, kind: str, value: str, stored: Any) -> plistlib.UID:
        """Add ``stored`` to the object table once and return its reference."""

        index = self._object_index.get((kind, value))
        if index is None:
            index = len(self._objects)
            self._objects.append(stored)
            self._object_index[(kind, value)] = index
        return plistlib.UID(index)

    def encode_object(self, value: str | Enum | None, key: str) -> None:
        """Store a string, an enum member (by its string value), or no value."""

        if value is None:
            self._top[key] = _NULL_UID
            return
        if isinstance(value, Enum):
            value = str(value.value)
        if not isinstance(value, str):
            raise TypeError(f"Cannot archive {type(value).__name__} under '{key}'")
        self._top[key] = self._intern("string", value, value)

    def encode_url(self, url: str | None, key: str) -> None:
        """Store a URL string, or no value."""

        if url is None:
            self._top[key] = _NULL_UID
            return
        self._top[key] = self._intern(_URL_CLASS, url, {"$class": _URL_CLASS, "relative": url})

    def encode_int(self, value: int, key: str) -> None:
        """Store a plain integer inline."""

        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"Cannot archive {type(value).__name__} as an integer under '{key}'")
        self._top[key] = value

    def finish(self) -> bytes:
        """Serialize everything encoded so far."""

        document = {
            "$archiver": ARCHIVER_NAME,
            "$version": ARCHIVE_VERSION,
            "$objects": list(self._objects),
            "$top": dict(self._top),
        }
        return plistlib.dumps(document, fmt=plistlib.FMT_BINARY, sort_keys=False)


class KeyedUnarchiver:
    """Read named values back out of a binary archive."""

    def __init__(self, data: bytes) -> None:
        try:
            document = plistlib.loads(data, fmt=plistlib.FMT_BINARY)
        except plistlib.InvalidFileException as exc:
            raise ArchiveFormatError(f"Not a keyed archive: {exc}") from exc

        if not isinstance(document, dict):
            raise ArchiveFormatError("Archive root must be a dictionary")
        if document.get("$archiver") != ARCHIVER_NAME:
            raise ArchiveFormatError(f"Unsupported archiver: {document.get('$archiver')!r}")
        version = document.get("$version")
        if not isinstance(version, int) or not 0 < version <= ARCHIVE_VERSION:
            raise ArchiveFormatError(f"Unsupported archive version: {version!r}")

        objects = document.get("$objects")
        top = document.get("$top")
        if not isinstance(objects, list) or not objects or objects[0] != _NULL_MARKER:
            raise ArchiveFormatError("Archive object table is malformed")
        if not isinstance(top, dict):
            raise ArchiveFormatError("Archive top-level table is malformed")

        self._objects: list[Any] = objects
        self._top: dict[str, Any] = top

    def contains_key(self, key: str) -> bool:
        return key in self._top

    def _resolve(self, key: str) -> Any:
        """Dereference the object stored under ``key``; None for null or missing."""

        reference = self._top.get(key)
        if not isinstance(reference, plistlib.UID):
            return None
        if reference.data >= len(self._objects):
            raise ArchiveFormatError(f"Dangling object reference under '{key}'")
        if reference.data == 0:
            return None
        return self._objects[reference.data]

    def decode_string(self, key: str) -> str | None:
        """Return the string under ``key``, or None when absent or not a string."""

        value = self._resolve(key)
        return value if isinstance(value, str) else None

    def decode_url(self, key: str) -> str | None:
        """Return the URL under ``key``, or None when absent or not a URL."""

        value = self._resolve(key)
        if not isinstance(value, dict) or value.get("$class") != _URL_CLASS:
            return None
        relative = value.get("relative")
        return relative if isinstance(relative, str) else None

    def decode_int(self, key: str) -> int:
        """Return the integer under ``key``; 0 when nothing usable is stored."""

        value = self._top.get(key)
        if isinstance(value, bool) or not isinstance(value, int):
            return 0
        return value


class Archivable(Protocol):
    """Objects that know how to write themselves into and read from archives."""

    def encode(self, archiver: KeyedArchiver) -> None: ...

    @classmethod
    def decode(cls, unarchiver: KeyedUnarchiver) -> Self: ...


ArchivableT = TypeVar("ArchivableT", bound=Archivable)


def archive(obj: Archivable) -> bytes:
    """Encode ``obj`` into a fresh archive."""

    archiver = KeyedArchiver()
    obj.encode(archiver)
    return archiver.finish()


def unarchive(data: bytes, cls: type[ArchivableT]) -> ArchivableT:
    """Decode an instance of ``cls`` from ``data``.

    Raises:
        ArchiveFormatError: If ``data`` is not a keyed archive.
        ArchiveDecodeError: If ``cls`` rejects the stored fields.
    """

    return cls.decode(KeyedUnarchiver(data))


__all__ = [
    "ARCHIVER_NAME",
    "ARCHIVE_VERSION",
    "Archivable",
    "KeyedArchiver",
    "KeyedUnarchiver",
    "archive",
    "unarchive",
]

"""Tests for the keyed binary archive."""

import plistlib

import pytest

from turncue.features.instructions import ManeuverType
from turncue.platform.archive import (
    ARCHIVE_VERSION,
    ARCHIVER_NAME,
    ArchiveFormatError,
    KeyedArchiver,
    KeyedUnarchiver,
)


def _document(**overrides: object) -> bytes:
    document: dict[str, object] = {
        "$archiver": ARCHIVER_NAME,
        "$version": ARCHIVE_VERSION,
        "$objects": ["$null"],
        "$top": {},
    }
    document.update(overrides)
    return plistlib.dumps(document, fmt=plistlib.FMT_BINARY)


def test_archive_is_binary_plist_with_object_table() -> None:
    archiver = KeyedArchiver()
    archiver.encode_object("Main St", "text")
    archiver.encode_object("Main St", "alias")
    archiver.encode_object(None, "abbreviation")
    archiver.encode_int(7, "priority")

    data = archiver.finish()
    document = plistlib.loads(data, fmt=plistlib.FMT_BINARY)

    assert data.startswith(b"bplist00")
    assert document["$objects"] == ["$null", "Main St"]
    assert document["$top"]["text"] == plistlib.UID(1)
    assert document["$top"]["alias"] == plistlib.UID(1)
    assert document["$top"]["abbreviation"] == plistlib.UID(0)
    assert document["$top"]["priority"] == 7


def test_values_read_back() -> None:
    archiver = KeyedArchiver()
    archiver.encode_object("Main St", "text")
    archiver.encode_object(ManeuverType.TAKE_OFF_RAMP, "maneuverType")
    archiver.encode_url("https://example.com/a@2x.png", "imageURL")
    archiver.encode_url(None, "otherURL")
    archiver.encode_int(-4, "priority")

    unarchiver = KeyedUnarchiver(archiver.finish())

    assert unarchiver.decode_string("text") == "Main St"
    assert unarchiver.decode_string("maneuverType") == "off ramp"
    assert unarchiver.decode_url("imageURL") == "https://example.com/a@2x.png"
    assert unarchiver.contains_key("otherURL")
    assert unarchiver.decode_url("otherURL") is None
    assert unarchiver.decode_int("priority") == -4


def test_missing_and_mistyped_values() -> None:
    archiver = KeyedArchiver()
    archiver.encode_object("Main St", "text")
    archiver.encode_url("https://example.com/a@2x.png", "imageURL")

    unarchiver = KeyedUnarchiver(archiver.finish())

    assert not unarchiver.contains_key("absent")
    assert unarchiver.decode_string("absent") is None
    assert unarchiver.decode_int("absent") == 0
    assert unarchiver.decode_url("text") is None
    assert unarchiver.decode_string("imageURL") is None
    assert unarchiver.decode_int("text") == 0


def test_encoder_rejects_unsupported_values() -> None:
    archiver = KeyedArchiver()

    with pytest.raises(TypeError):
        archiver.encode_object(3, "text")  # pyright: ignore[reportArgumentType]
    with pytest.raises(TypeError):
        archiver.encode_int(True, "flag")


@pytest.mark.parametrize(
    "data",
    [
        b"",
        b"not a plist",
        plistlib.dumps({"$top": {}}, fmt=plistlib.FMT_XML),
        plistlib.dumps(["$null"], fmt=plistlib.FMT_BINARY),
    ],
)
def test_unreadable_bytes_raise_format_error(data: bytes) -> None:
    with pytest.raises(ArchiveFormatError):
        _ = KeyedUnarchiver(data)


@pytest.mark.parametrize(
    "overrides",
    [
        {"$archiver": "someone-else"},
        {"$version": ARCHIVE_VERSION + 1},
        {"$objects": []},
        {"$objects": ["first"]},
        {"$top": ["text"]},
    ],
)
def test_malformed_documents_raise_format_error(overrides: dict[str, object]) -> None:
    with pytest.raises(ArchiveFormatError):
        _ = KeyedUnarchiver(_document(**overrides))


def test_dangling_reference_raises_format_error() -> None:
    unarchiver = KeyedUnarchiver(_document(**{"$top": {"text": plistlib.UID(9)}}))

    with pytest.raises(ArchiveFormatError):
        _ = unarchiver.decode_string("text")

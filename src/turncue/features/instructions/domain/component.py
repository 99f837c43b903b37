"""
Summary: Visual instruction component value object with JSON and archive codecs.
Why: One styled fragment of a banner instruction, built from routing JSON or storage.
"""

from __future__ import annotations

import sys
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Final, TypeVar

from turncue.platform.archive import ArchiveDecodeError, KeyedArchiver, KeyedUnarchiver
from turncue.platform.display import DisplayScaleProvider, screen_scale
from turncue.platform.logging import logger

from .maneuver import DescribedEnum, ManeuverDirection, ManeuverType, VisualInstructionComponentType

# Marks a component without an abbreviation priority; never equal to a real one.
ABBREVIATION_PRIORITY_NOT_FOUND: Final[int] = sys.maxsize

# Appended to every scaled component image URL.
IMAGE_EXTENSION: Final[str] = "png"

EnumT = TypeVar("EnumT", bound=DescribedEnum)


def scaled_image_url(base_url: str, scale: int) -> str:
    """Return ``<base_url>@<scale>x.png``."""

    return f"{base_url}@{scale}x.{IMAGE_EXTENSION}"


@dataclass(slots=True)
class VisualInstructionComponent:
    """A run of similarly formatted text, or an image with a textual fallback.

    ``text`` is the plain representation to use when ``image_url`` is unset or
    the image is not yet available. ``image_url`` points at an image rendered
    for the device's native screen scale. ``abbreviation_priority`` ranks
    components for shortening: lower numbers are abbreviated first.
    """

    type: VisualInstructionComponentType
    text: str | None
    image_url: str | None
    maneuver_type: ManeuverType
    maneuver_direction: ManeuverDirection
    abbreviation: str | None
    abbreviation_priority: int

    @property
    def has_abbreviation_priority(self) -> bool:
        return self.abbreviation_priority != ABBREVIATION_PRIORITY_NOT_FOUND

    @classmethod
    def from_json(
        cls,
        maneuver_type: ManeuverType,
        maneuver_direction: ManeuverDirection,
        json: Mapping[str, Any],
        *,
        scale_provider: DisplayScaleProvider | None = None,
    ) -> VisualInstructionComponent:
        """Build a component from a routing response object.

        Every key is optional and malformed values are ignored, so this never
        raises. An unrecognized ``type`` falls back to text.

        Args:
            maneuver_type: Maneuver type of the containing instruction.
            maneuver_direction: Maneuver direction of the containing instruction.
            json: Decoded component object (``text``, ``type``, ``abbr``,
                ``abbr_priority``, ``imageBaseURL``).
            scale_provider: Display scale source; the process-wide provider
                when omitted.

        Returns:
            VisualInstructionComponent: The populated component.
        """
        text = _string_or_none(json.get("text"))

        raw_type = json.get("type")
        component_type = VisualInstructionComponentType.from_description(raw_type)
        if component_type is None:
            component_type = VisualInstructionComponentType.TEXT
            if raw_type is not None:
                logger.debug(
                    "Unrecognized component type %r; using text",
                    raw_type,
                    extra={"component_event": "component.json.type_fallback", "raw_type": raw_type},
                )

        abbreviation = _string_or_none(json.get("abbr"))
        abbreviation_priority = _priority_or_not_found(json.get("abbr_priority"))

        image_url: str | None = None
        base_url = json.get("imageBaseURL")
        if isinstance(base_url, str):
            image_url = scaled_image_url(base_url, screen_scale(scale_provider))

        return cls(
            type=component_type,
            text=text,
            image_url=image_url,
            maneuver_type=maneuver_type,
            maneuver_direction=maneuver_direction,
            abbreviation=abbreviation,
            abbreviation_priority=abbreviation_priority,
        )

    def encode(self, archiver: KeyedArchiver) -> None:
        """Write all seven fields, absent values included."""

        archiver.encode_object(self.text, "text")
        archiver.encode_url(self.image_url, "imageURL")
        archiver.encode_object(self.type, "type")
        archiver.encode_object(self.maneuver_type, "maneuverType")
        archiver.encode_object(self.maneuver_direction, "maneuverDirection")
        archiver.encode_object(self.abbreviation, "abbreviation")
        archiver.encode_int(self.abbreviation_priority, "abbreviationPriority")

    @classmethod
    def decode(cls, unarchiver: KeyedUnarchiver) -> VisualInstructionComponent:
        """Read a component back from an archive.

        ``text``, ``imageURL`` and ``abbreviation`` must be present here even
        though they are optional elsewhere.

        Raises:
            ArchiveDecodeError: If a required field is absent or an enum
                field does not parse.
        """
        text = _require(unarchiver.decode_string("text"), "text")
        image_url = _require(unarchiver.decode_url("imageURL"), "imageURL")
        component_type = _decode_enum(unarchiver, "type", VisualInstructionComponentType)
        maneuver_type = _decode_enum(unarchiver, "maneuverType", ManeuverType)
        maneuver_direction = _decode_enum(unarchiver, "maneuverDirection", ManeuverDirection)
        abbreviation = _require(unarchiver.decode_string("abbreviation"), "abbreviation")
        abbreviation_priority = unarchiver.decode_int("abbreviationPriority")

        return cls(
            type=component_type,
            text=text,
            image_url=image_url,
            maneuver_type=maneuver_type,
            maneuver_direction=maneuver_direction,
            abbreviation=abbreviation,
            abbreviation_priority=abbreviation_priority,
        )


def _string_or_none(value: object) -> str | None:
    return value if isinstance(value, str) else None


def _priority_or_not_found(value: object) -> int:
    # JSON numbers like 2.0 still name an integral priority.
    if isinstance(value, bool):
        return ABBREVIATION_PRIORITY_NOT_FOUND
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return ABBREVIATION_PRIORITY_NOT_FOUND


def _decode_failed(key: str, reason: str) -> ArchiveDecodeError:
    logger.debug(
        "Component decode failed for %s: %s",
        key,
        reason,
        extra={
            "component_event": "component.archive.decode_failed",
            "archive_key": key,
            "reason": reason,
        },
    )
    return ArchiveDecodeError(key, reason)


def _require(value: str | None, key: str) -> str:
    if value is None:
        raise _decode_failed(key, "missing value")
    return value


def _decode_enum(unarchiver: KeyedUnarchiver, key: str, enum_cls: type[EnumT]) -> EnumT:
    stored = _require(unarchiver.decode_string(key), key)
    try:
        return enum_cls.parse(stored)
    except ValueError as exc:
        raise _decode_failed(key, str(exc)) from exc


__all__ = [
    "ABBREVIATION_PRIORITY_NOT_FOUND",
    "IMAGE_EXTENSION",
    "VisualInstructionComponent",
    "scaled_image_url",
]

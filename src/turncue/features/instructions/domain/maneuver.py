"""
Summary: Maneuver and component classification enums with description parsing.
Why: Give lenient external input and strict stored values separate parse paths.
"""

from __future__ import annotations

from enum import Enum
from typing import Self


class DescribedEnum(str, Enum):
    """String enum whose value is its canonical description."""

    @property
    def description(self) -> str:
        """Canonical string form used in JSON and archives."""

        return self.value

    @classmethod
    def from_description(cls, value: object) -> Self | None:
        """Lookup for external input; None when unrecognized.

        Matches the description exactly. Callers decide the fallback.
        """
        if not isinstance(value, str):
            return None
        for member in cls:
            if member.value == value:
                return member
        return None

    @classmethod
    def parse(cls, value: str) -> Self:
        """Strict lookup for stored values.

        Raises:
            ValueError: If ``value`` is not exactly a known description.
        """
        for member in cls:
            if member.value == value:
                return member
        valid = ", ".join(member.value for member in cls)
        msg = f"Unsupported {cls.__name__} '{value}'. Valid options: {valid}"
        raise ValueError(msg)


class VisualInstructionComponentType(DescribedEnum):
    """How a visual instruction component should be displayed."""

    DELIMITER = "delimiter"
    TEXT = "text"
    IMAGE = "icon"
    EXIT = "exit"
    EXIT_CODE = "exit-number"


class ManeuverType(DescribedEnum):
    """Kind of action a route step asks the driver to take."""

    NONE = "none"
    DEPART = "depart"
    TURN = "turn"
    CONTINUE = "continue"
    PASS_NAME_CHANGE = "new name"
    MERGE = "merge"
    TAKE_ON_RAMP = "on ramp"
    TAKE_OFF_RAMP = "off ramp"
    REACH_FORK = "fork"
    REACH_END = "end of road"
    USE_LANE = "use lane"
    TAKE_ROUNDABOUT = "roundabout"
    TAKE_ROTARY = "rotary"
    TURN_AT_ROUNDABOUT = "roundabout turn"
    EXIT_ROUNDABOUT = "exit roundabout"
    EXIT_ROTARY = "exit rotary"
    HEED_WARNING = "notification"
    ARRIVE = "arrive"


class ManeuverDirection(DescribedEnum):
    """Directional modifier of a maneuver."""

    NONE = "none"
    SHARP_RIGHT = "sharp right"
    RIGHT = "right"
    SLIGHT_RIGHT = "slight right"
    STRAIGHT_AHEAD = "straight"
    SLIGHT_LEFT = "slight left"
    LEFT = "left"
    SHARP_LEFT = "sharp left"
    U_TURN = "uturn"


__all__ = [
    "DescribedEnum",
    "ManeuverDirection",
    "ManeuverType",
    "VisualInstructionComponentType",
]

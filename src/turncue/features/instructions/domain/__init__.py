"""
Summary: Domain types for visual instruction components.
Why: Expose enums and the component value object from one import path.
"""

from .component import ABBREVIATION_PRIORITY_NOT_FOUND, VisualInstructionComponent, scaled_image_url
from .maneuver import DescribedEnum, ManeuverDirection, ManeuverType, VisualInstructionComponentType

__all__ = [
    "ABBREVIATION_PRIORITY_NOT_FOUND",
    "DescribedEnum",
    "ManeuverDirection",
    "ManeuverType",
    "VisualInstructionComponent",
    "VisualInstructionComponentType",
    "scaled_image_url",
]

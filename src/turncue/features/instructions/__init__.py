"""
Summary: Visual instruction components feature exports.
Why: Provide a concise import surface for domain types and use cases.
"""

from .domain import (
    ABBREVIATION_PRIORITY_NOT_FOUND,
    ManeuverDirection,
    ManeuverType,
    VisualInstructionComponent,
    VisualInstructionComponentType,
)
from .usecases import (
    ComponentSourceError,
    abbreviation_candidates,
    build_components,
    load_component_payloads,
)

__all__ = [
    "ABBREVIATION_PRIORITY_NOT_FOUND",
    "ComponentSourceError",
    "ManeuverDirection",
    "ManeuverType",
    "VisualInstructionComponent",
    "VisualInstructionComponentType",
    "abbreviation_candidates",
    "build_components",
    "load_component_payloads",
]

"""
Summary: Component list use cases.
Why: Keep callers on a stable import path while modules evolve.
"""

from .components import (
    ComponentSourceError,
    abbreviation_candidates,
    build_components,
    load_component_payloads,
)

__all__ = [
    "ComponentSourceError",
    "abbreviation_candidates",
    "build_components",
    "load_component_payloads",
]

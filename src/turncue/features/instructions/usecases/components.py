"""
Summary: Use cases over ordered component lists.
Why: Let instruction owners build, load, and rank components without touching codecs.
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path
from typing import Any

from turncue.features.instructions.domain import (
    ManeuverDirection,
    ManeuverType,
    VisualInstructionComponent,
)
from turncue.platform.display import DisplayScaleProvider, current_scale_provider
from turncue.platform.logging import logger


class ComponentSourceError(Exception):
    """Raised when a component JSON source cannot be read."""


def build_components(
    maneuver_type: ManeuverType,
    maneuver_direction: ManeuverDirection,
    payloads: Iterable[object],
    *,
    scale_provider: DisplayScaleProvider | None = None,
) -> list[VisualInstructionComponent]:
    """Build components in order, skipping entries that are not JSON objects."""

    provider = scale_provider if scale_provider is not None else current_scale_provider()
    components: list[VisualInstructionComponent] = []
    for index, payload in enumerate(payloads):
        if not isinstance(payload, Mapping):
            logger.warning(
                "Skipping component %d: expected an object, got %s",
                index,
                type(payload).__name__,
            )
            continue
        components.append(
            VisualInstructionComponent.from_json(
                maneuver_type,
                maneuver_direction,
                payload,
                scale_provider=provider,
            )
        )
    return components


def abbreviation_candidates(
    components: Sequence[VisualInstructionComponent],
) -> list[VisualInstructionComponent]:
    """Components that can be shortened, in the order they should be shortened.

    Lower priorities come first and components without a priority come last.
    Ties keep their original order.
    """

    eligible = [component for component in components if component.abbreviation is not None]
    return sorted(eligible, key=lambda component: component.abbreviation_priority)


def load_component_payloads(path: Path) -> list[Mapping[str, Any]]:
    """Read component objects from a JSON file.

    The document may be a single object or a list of objects.

    Raises:
        ComponentSourceError: If the file is unreadable, is not UTF-8 JSON,
            or has any other top-level shape.
    """
    try:
        document = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ComponentSourceError(f"Cannot read {path}: {exc}") from exc
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise ComponentSourceError(f"Invalid JSON in {path}: {exc}") from exc

    if isinstance(document, dict):
        return [document]
    if isinstance(document, list):
        return document
    raise ComponentSourceError(
        f"{path} must contain a component object or a list of component objects"
    )


__all__ = [
    "ComponentSourceError",
    "abbreviation_candidates",
    "build_components",
    "load_component_payloads",
]

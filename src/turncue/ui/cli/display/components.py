"""src/turncue/ui/cli/display/components.py
What: Render visual instruction components as Rich tables.
Why: Keep console output formatting consistent across the interface.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import final

from rich.console import Console
from rich.table import Table

from turncue.features.instructions import VisualInstructionComponent, abbreviation_candidates

_UNSET: str = "—"


def _cell(value: str | None) -> str:
    return value if value is not None else _UNSET


@final
class ComponentDisplay:
    """Handles component display in CLI."""

    console: Console

    def __init__(self) -> None:
        """Initialize component display."""
        self.console = Console()

    def build_table(self, components: Sequence[VisualInstructionComponent], title: str) -> Table:
        """Create a table with one row per component, in instruction order."""

        ranks = {
            id(component): rank
            for rank, component in enumerate(abbreviation_candidates(components), start=1)
        }

        table = Table(title=title)
        table.add_column("#", justify="right")
        table.add_column("Type")
        table.add_column("Text")
        table.add_column("Image URL")
        table.add_column("Abbreviation")
        table.add_column("Priority", justify="right")
        table.add_column("Shorten", justify="right")

        for index, component in enumerate(components, start=1):
            priority = (
                str(component.abbreviation_priority)
                if component.has_abbreviation_priority
                else _UNSET
            )
            rank = ranks.get(id(component))
            table.add_row(
                str(index),
                component.type.description,
                _cell(component.text),
                _cell(component.image_url),
                _cell(component.abbreviation),
                priority,
                str(rank) if rank is not None else _UNSET,
            )
        return table

    def show_components(
        self,
        components: Sequence[VisualInstructionComponent],
        *,
        quiet: bool = False,
    ) -> None:
        """Display components with their shared maneuver context.

        Args:
            components: Components in instruction order.
            quiet: Whether to suppress non-error output.
        """
        if quiet:
            return

        if not components:
            self.console.print("No components.")
            return

        first = components[0]
        title = (
            f"Components ({first.maneuver_type.description}, "
            f"{first.maneuver_direction.description})"
        )
        self.console.print(self.build_table(components, title))


__all__ = ["ComponentDisplay"]

"""src/turncue/ui/cli/commands/executor.py
What: Provide shared wiring for CLI command executors.
Why: Reuse input loading and presentation helpers across commands.
"""

from abc import ABC, abstractmethod

from turncue.features.instructions import (
    VisualInstructionComponent,
    build_components,
    load_component_payloads,
)
from turncue.platform.display import DisplayScaleProvider, resolve_scale_provider
from turncue.ui.cli.args.options import ArchiveArgs, BuildArgs
from turncue.ui.cli.display import ComponentDisplay


class CommandExecutor(ABC):
    """Base class for command execution."""

    display: ComponentDisplay

    def __init__(self) -> None:
        self.display = ComponentDisplay()

    @abstractmethod
    def execute(self) -> list[VisualInstructionComponent]:
        """Execute the command.

        Returns:
            Components produced or read by the command.
        """
        pass


class JsonCommandExecutor(CommandExecutor):
    """Base class for commands that build components from a JSON file."""

    args: BuildArgs | ArchiveArgs
    scale_provider: DisplayScaleProvider

    def __init__(self, args: BuildArgs | ArchiveArgs) -> None:
        """Initialize command executor.

        Args:
            args: Command line arguments.
        """
        super().__init__()
        self.args = args
        self.scale_provider = resolve_scale_provider(explicit=args.scale)

    def load_components(self) -> list[VisualInstructionComponent]:
        """Build components from the configured JSON file.

        Raises:
            ComponentSourceError: If the JSON file cannot be read.
        """
        payloads = load_component_payloads(self.args.json_path)
        return build_components(
            self.args.maneuver_type,
            self.args.maneuver_direction,
            payloads,
            scale_provider=self.scale_provider,
        )

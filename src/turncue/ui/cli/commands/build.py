"""Build command implementation."""

from typing import final, override

from turncue.features.instructions import VisualInstructionComponent
from turncue.platform.logging import logger
from turncue.ui.cli.commands.executor import JsonCommandExecutor


@final
class BuildCommand(JsonCommandExecutor):
    """Build components from JSON and display them."""

    @override
    def execute(self) -> list[VisualInstructionComponent]:
        components = self.load_components()
        logger.debug("Built %d component(s) from %s", len(components), self.args.json_path)
        self.display.show_components(components, quiet=self.args.quiet)
        return components

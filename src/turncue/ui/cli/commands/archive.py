"""Archive and unarchive command implementations."""

from typing import final, override

from turncue.features.instructions import ComponentSourceError, VisualInstructionComponent
from turncue.platform.archive import ArchiveError, archive, unarchive
from turncue.platform.logging import logger
from turncue.ui.cli.args.options import ArchiveArgs, UnarchiveArgs
from turncue.ui.cli.commands.executor import CommandExecutor, JsonCommandExecutor


@final
class ArchiveCommand(JsonCommandExecutor):
    """Write exactly one component built from JSON into a binary archive."""

    args: ArchiveArgs

    def __init__(self, args: ArchiveArgs) -> None:
        super().__init__(args)
        self.args = args

    @override
    def execute(self) -> list[VisualInstructionComponent]:
        components = self.load_components()
        if len(components) != 1:
            raise ComponentSourceError(
                f"{self.args.json_path} must hold exactly one component to archive; "
                f"found {len(components)}"
            )

        component = components[0]
        data = archive(component)
        output_path = self.args.output_path
        output_path.parent.mkdir(parents=True, exist_ok=True)
        _ = output_path.write_bytes(data)

        logger.info(
            "Archived component to %s",
            output_path,
            extra={
                "component_event": "component.archive.encoded",
                "component_text": component.text,
                "archive_bytes": len(data),
            },
        )
        self.display.show_components(components, quiet=self.args.quiet)
        return components


@final
class UnarchiveCommand(CommandExecutor):
    """Decode a component archive and display it."""

    args: UnarchiveArgs

    def __init__(self, args: UnarchiveArgs) -> None:
        super().__init__()
        self.args = args

    @override
    def execute(self) -> list[VisualInstructionComponent]:
        """Decode the archive.

        Raises:
            ArchiveError: If the file is not an archive or a field is rejected.
        """
        try:
            data = self.args.archive_path.read_bytes()
        except OSError as exc:
            raise ArchiveError(f"Cannot read {self.args.archive_path}: {exc}") from exc

        component = unarchive(data, VisualInstructionComponent)
        components = [component]
        self.display.show_components(components, quiet=self.args.quiet)
        return components

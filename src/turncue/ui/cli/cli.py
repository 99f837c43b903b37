"""Command line interface for turncue."""

import sys
from typing import final

from turncue.features.instructions import ComponentSourceError
from turncue.platform.archive import ArchiveError
from turncue.platform.logging import logger
from turncue.ui.cli.args import ArchiveArgs, ArgumentParser, BuildArgs, CLIArgs
from turncue.ui.cli.commands import ArchiveCommand, BuildCommand, CommandExecutor, UnarchiveCommand


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def create_command(args: CLIArgs) -> CommandExecutor:
        """Map parsed arguments to their command executor."""

        if isinstance(args, BuildArgs):
            return BuildCommand(args)
        if isinstance(args, ArchiveArgs):
            return ArchiveCommand(args)
        return UnarchiveCommand(args)

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)
            _ = CommandProcessor.create_command(args).execute()

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except (ArchiveError, ComponentSourceError) as e:
            logger.error("%s", e)
            sys.exit(1)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures exit through
        ``sys.exit(...)`` inside command processing.
    """
    CommandProcessor.process_command()
    return 0

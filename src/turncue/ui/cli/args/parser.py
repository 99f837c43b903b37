"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import final

from turncue.config.config import Config
from turncue.features.instructions import ManeuverDirection, ManeuverType
from turncue.platform.logging import DEFAULT_LOG_FILE, logger, setup_logger
from turncue.ui.cli.args.options import ArchiveArgs, BuildArgs, CLIArgs, UnarchiveArgs


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            description="turncue - Build, archive, and inspect visual instruction components.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        build_parser = subparsers.add_parser(
            "build",
            help="Build components from a JSON file and display them",
        )
        ArgumentParser._configure_json_parser(build_parser)

        archive_parser = subparsers.add_parser(
            "archive",
            help="Build one component from a JSON file and write its archive",
        )
        ArgumentParser._configure_json_parser(archive_parser)
        _ = archive_parser.add_argument(
            "output_path",
            type=str,
            help="Destination file for the binary archive",
            metavar="OUTPUT",
        )

        unarchive_parser = subparsers.add_parser(
            "unarchive",
            help="Decode a component archive and display it",
        )
        _ = unarchive_parser.add_argument(
            "archive_path",
            type=str,
            help="Binary archive written by the archive command",
            metavar="ARCHIVE_FILE",
        )
        ArgumentParser._add_verbosity_flags(unarchive_parser)

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            SystemExit: If input files don't exist or other validation fails.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        is_quiet = bool(getattr(parsed_args, "quiet", False))
        is_verbose = bool(getattr(parsed_args, "verbose", False))

        if is_quiet:
            log_level = logging.ERROR
        elif is_verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        configuration = Config.load()
        log_file_path = configuration.log_file or DEFAULT_LOG_FILE
        _ = setup_logger(log_file=log_file_path, console_level=log_level)

        command: str = parsed_args.command

        if command == "build":
            return ArgumentParser._process_build(parsed_args)

        if command == "archive":
            return ArgumentParser._process_archive(parsed_args)

        if command == "unarchive":
            return ArgumentParser._process_unarchive(parsed_args)

        logger.error("Unsupported command: %s", command)
        sys.exit(2)

    @staticmethod
    def _add_verbosity_flags(parser: argparse.ArgumentParser) -> None:
        _ = parser.add_argument(
            "--verbose",
            action="store_true",
            help="Show detailed processing information",
        )
        _ = parser.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )

    @staticmethod
    def _configure_json_parser(parser: argparse.ArgumentParser) -> None:
        """Apply shared configuration for subcommands reading component JSON."""

        _ = parser.add_argument(
            "json_path",
            type=str,
            help="JSON file holding a component object or a list of them",
            metavar="JSON_FILE",
        )
        _ = parser.add_argument(
            "--maneuver-type",
            type=str,
            default=ManeuverType.NONE.description,
            metavar="TYPE",
            help="Maneuver type of the containing instruction (e.g. 'turn', 'off ramp')",
        )
        _ = parser.add_argument(
            "--maneuver-direction",
            type=str,
            default=ManeuverDirection.NONE.description,
            metavar="DIRECTION",
            help="Maneuver direction of the containing instruction (e.g. 'right')",
        )
        _ = parser.add_argument(
            "--scale",
            type=int,
            help="Display scale for image URLs (defaults to the detected display scale)",
        )
        ArgumentParser._add_verbosity_flags(parser)

    @staticmethod
    def _normalize_choice(raw: str) -> str:
        return raw.strip().lower()

    @staticmethod
    def _existing_file(raw_path: str, label: str) -> Path:
        path = Path(raw_path)
        if not path.is_file():
            logger.error("%s does not exist: %s", label, path)
            sys.exit(1)
        return path

    @staticmethod
    def _maneuver_context(
        parsed_args: argparse.Namespace,
    ) -> tuple[ManeuverType, ManeuverDirection, int | None]:
        maneuver_type = ManeuverType.from_description(
            ArgumentParser._normalize_choice(parsed_args.maneuver_type)
        )
        if maneuver_type is None:
            logger.error("Unknown maneuver type: %s", parsed_args.maneuver_type)
            sys.exit(1)

        maneuver_direction = ManeuverDirection.from_description(
            ArgumentParser._normalize_choice(parsed_args.maneuver_direction)
        )
        if maneuver_direction is None:
            logger.error("Unknown maneuver direction: %s", parsed_args.maneuver_direction)
            sys.exit(1)

        scale = parsed_args.scale
        if scale is not None and scale <= 0:
            logger.error("Scale must be a positive integer; received %s", scale)
            sys.exit(1)

        return maneuver_type, maneuver_direction, scale

    @staticmethod
    def _process_build(parsed_args: argparse.Namespace) -> BuildArgs:
        json_path = ArgumentParser._existing_file(parsed_args.json_path, "JSON file")
        maneuver_type, maneuver_direction, scale = ArgumentParser._maneuver_context(parsed_args)

        return BuildArgs(
            command="build",
            json_path=json_path,
            maneuver_type=maneuver_type,
            maneuver_direction=maneuver_direction,
            scale=scale,
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
        )

    @staticmethod
    def _process_archive(parsed_args: argparse.Namespace) -> ArchiveArgs:
        json_path = ArgumentParser._existing_file(parsed_args.json_path, "JSON file")
        maneuver_type, maneuver_direction, scale = ArgumentParser._maneuver_context(parsed_args)

        return ArchiveArgs(
            command="archive",
            json_path=json_path,
            output_path=Path(parsed_args.output_path),
            maneuver_type=maneuver_type,
            maneuver_direction=maneuver_direction,
            scale=scale,
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
        )

    @staticmethod
    def _process_unarchive(parsed_args: argparse.Namespace) -> UnarchiveArgs:
        archive_path = ArgumentParser._existing_file(parsed_args.archive_path, "Archive file")

        return UnarchiveArgs(
            command="unarchive",
            archive_path=archive_path,
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
        )

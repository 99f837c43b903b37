"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, final

from turncue.features.instructions import ManeuverDirection, ManeuverType


@final
@dataclass(slots=True)
class BuildArgs:
    """Command line arguments for the ``build`` subcommand."""

    command: Literal["build"]
    json_path: Path
    maneuver_type: ManeuverType
    maneuver_direction: ManeuverDirection
    scale: int | None
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class ArchiveArgs:
    """Command line arguments for the ``archive`` subcommand."""

    command: Literal["archive"]
    json_path: Path
    output_path: Path
    maneuver_type: ManeuverType
    maneuver_direction: ManeuverDirection
    scale: int | None
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class UnarchiveArgs:
    """Command line arguments for the ``unarchive`` subcommand."""

    command: Literal["unarchive"]
    archive_path: Path
    verbose: bool
    quiet: bool


CLIArgs = BuildArgs | ArchiveArgs | UnarchiveArgs

__all__ = ["ArchiveArgs", "BuildArgs", "CLIArgs", "UnarchiveArgs"]

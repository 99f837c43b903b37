"""CLI command implementations."""

from .archive import ArchiveCommand, UnarchiveCommand
from .build import BuildCommand
from .executor import CommandExecutor

__all__ = ["ArchiveCommand", "BuildCommand", "CommandExecutor", "UnarchiveCommand"]

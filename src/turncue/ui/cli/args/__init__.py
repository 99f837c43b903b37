"""Command line argument parsing."""

from .options import ArchiveArgs, BuildArgs, CLIArgs, UnarchiveArgs
from .parser import ArgumentParser

__all__ = ["ArchiveArgs", "ArgumentParser", "BuildArgs", "CLIArgs", "UnarchiveArgs"]

"""Console display helpers."""

from .components import ComponentDisplay

__all__ = ["ComponentDisplay"]

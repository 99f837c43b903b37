"""turncue: visual instruction components for turn-by-turn banners."""

__version__ = "0.1.0"

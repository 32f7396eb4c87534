"""Solutions to classic programming puzzles, grouped by the data they work on."""

__version__ = "0.1.0"
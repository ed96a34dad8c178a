"""Find buried treasure on a weighted map by following clues or the cheapest path."""

__version__ = "0.1.0"
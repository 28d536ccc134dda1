"""A brick-breaking arcade game: a pure game core with a pygame window and controls."""

__version__ = "0.1.0"
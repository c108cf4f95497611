"""A small music player with a cached library, a play queue and a Tk window."""

__version__ = "0.1.0"
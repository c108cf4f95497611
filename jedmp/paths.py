"""Locations of the player's data directory and music cache."""

from __future__ import annotations

import getpass
from pathlib import Path

DATA_DIR_NAME = ".jedmp"
MUSIC_CACHE_NAME = "music_cache"


def data_dir() -> Path:
    """Return the per-user data directory, ``/home/<user>/.jedmp``."""
    return Path("/home") / getpass.getuser() / DATA_DIR_NAME


def music_cache_path() -> Path:
    """Return the file that lists every cached song path."""
    return data_dir() / MUSIC_CACHE_NAME
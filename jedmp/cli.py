"""Command-line entry point for the player."""

from __future__ import annotations

import os
import shutil
import sys
from collections.abc import Sequence
from typing import Optional, Union

from jedmp import paths
from jedmp.gui import open_window
from jedmp.play_queue import PlayQueue

PathLike = Union[str, "os.PathLike[str]"]

RESET_ARGUMENT = "r"


def reset_data_dir(directory: PathLike) -> bool:
    """Delete the data directory and everything in it.

    Returns True when it was removed; a failure is reported on stderr and
    gives False.
    """
    try:
        shutil.rmtree(directory)
    except OSError as exc:
        print(f"Error occured! {exc}", file=sys.stderr)
        return False
    return True


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the player; an ``r`` argument first wipes the data directory."""
    args = list(sys.argv[1:] if argv is None else argv)
    data = paths.data_dir()
    for arg in args:
        if arg == RESET_ARGUMENT:
            print("Argument r found, removing jedmp_directory for testing.")
            reset_data_dir(data)
    open_window(PlayQueue(), data / paths.MUSIC_CACHE_NAME, data)
    return 0


if __name__ == "__main__":
    sys.exit(main())
"""The ordered queue of songs to play and the position within it."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Optional

from jedmp.song import Song


class PlayQueue:
    """Songs in play order plus the index of the current one."""

    def __init__(self) -> None:
        self._songs: list[Song] = []
        self.index = 0

    def load(self, paths: Iterable[str], title_of: Callable[[str], str]) -> None:
        """Replace the queue with songs for ``paths`` and rewind to the start."""
        self._songs.clear()
        self.index = 0
        self._songs.extend(Song(path, title_of(path)) for path in paths)

    def insert(self, song: Song, index: int) -> None:
        """Insert ``song`` before position ``index``."""
        if not 0 <= index <= len(self._songs):
            raise IndexError(
                f"insertion index {index} out of range for queue of {len(self._songs)}"
            )
        self._songs.insert(index, song)

    def append(self, song: Song) -> None:
        """Add ``song`` to the end of the queue."""
        self._songs.append(song)

    def remove(self, index: int) -> Song:
        """Remove and return the song at ``index``."""
        if not 0 <= index < len(self._songs):
            raise IndexError(
                f"removal index {index} out of range for queue of {len(self._songs)}"
            )
        return self._songs.pop(index)

    def advance(self) -> Optional[int]:
        """Move one step forward and return the new index.

        Returns None, leaving the index alone, once the index would pass the
        length of the queue.
        """
        next_index = self.index + 1
        if next_index > len(self._songs):
            return None
        self.index = next_index
        return next_index

    def step_back(self) -> Optional[int]:
        """Return the index before the current one, or None at the start.

        The current index itself is left unchanged.
        """
        if self.index == 0:
            return None
        return self.index - 1

    def current(self) -> Song:
        """Return the song at the current index."""
        if not 0 <= self.index < len(self._songs):
            raise IndexError(f"no song at queue index {self.index}")
        return self._songs[self.index]

    def __len__(self) -> int:
        return len(self._songs)

    def __iter__(self) -> Iterator[Song]:
        return iter(self._songs)

    def __getitem__(self, index: int) -> Song:
        return self._songs[index]
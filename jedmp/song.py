"""The song record shared by the library view and the play queue."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Song:
    """A playable audio file together with its display details."""

    path: str
    title: str
    artists: str = ""
    image_path: str = ""

    def __str__(self) -> str:
        return self.title
"""Audio output and the playback controls that drive it from the queue."""

from __future__ import annotations

import os
from collections import deque
from collections.abc import Callable
from typing import Any, Optional

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from jedmp.play_queue import PlayQueue  # noqa: E402
from jedmp.song import Song  # noqa: E402

PAUSE_LABEL = "Pause"
PLAY_LABEL = "Play"


class Sink:
    """A queue of audio files played one after another through the mixer."""

    def __init__(self) -> None:
        if not pygame.mixer.get_init():
            pygame.mixer.init()
        self._sources: deque[str] = deque()
        self._paused = False

    def _start(self, path: str) -> None:
        pygame.mixer.music.load(path)
        pygame.mixer.music.play()
        if self._paused:
            pygame.mixer.music.pause()

    def _refresh(self) -> None:
        while self._sources and not self._paused and not pygame.mixer.music.get_busy():
            self._sources.popleft()
            if self._sources:
                self._start(self._sources[0])

    def append(self, path: Any) -> None:
        """Queue ``path``; it starts at once if nothing else is queued."""
        self._refresh()
        path = str(path)
        self._sources.append(path)
        if len(self._sources) == 1:
            self._start(path)

    def play(self) -> None:
        """Resume playback."""
        self._paused = False
        pygame.mixer.music.unpause()

    def pause(self) -> None:
        """Pause playback, keeping the queued sources."""
        self._paused = True
        pygame.mixer.music.pause()

    def stop(self) -> None:
        """Stop playback and drop every queued source."""
        pygame.mixer.music.stop()
        pygame.mixer.music.unload()
        self._sources.clear()

    def is_paused(self) -> bool:
        """Return True while playback is paused."""
        return self._paused

    def empty(self) -> bool:
        """Return True when no source is left to play."""
        self._refresh()
        return not self._sources


class PlaybackController:
    """The previous, next and pause controls acting on a queue and a sink."""

    def __init__(self, queue: PlayQueue, sink: Any, loader: Callable[[str], Any]) -> None:
        self.queue = queue
        self.sink = sink
        self.loader = loader

    def _play_song(self, song: Song) -> None:
        source = self.loader(song.path)
        self.sink.stop()
        self.sink.append(source)
        self.sink.play()

    def previous(self) -> Song:
        """Play the song before the current one, or the first song at the start."""
        index = self.queue.step_back()
        song = self.queue[0 if index is None else index]
        self._play_song(song)
        return song

    def next(self) -> Optional[Song]:
        """Advance and play the next song; stop and return None at the end."""
        index = self.queue.advance()
        if index is None:
            self.sink.stop()
            return None
        song = self.queue[index]
        self._play_song(song)
        return song

    def toggle_pause(self) -> str:
        """Flip between playing and paused and return the new button label.

        When nothing is queued the current song is started first.
        """
        if self.sink.empty():
            self._play_song(self.queue.current())
        if self.sink.is_paused():
            self.sink.play()
            return PAUSE_LABEL
        self.sink.pause()
        return PLAY_LABEL
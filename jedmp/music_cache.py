"""The music cache: a plain file listing the paths of every known song."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Union

from jedmp import paths
from jedmp.metadata import song_title
from jedmp.play_queue import PlayQueue

PathLike = Union[str, "os.PathLike[str]"]

_HEADER_BYTES = 128


class UnsupportedAudioError(Exception):
    """Raised when a file is not MP3, WAV, Vorbis or FLAC audio."""


def _audio_format(head: bytes) -> Optional[str]:
    if head.startswith(b"fLaC"):
        return "flac"
    if head.startswith(b"OggS"):
        return "vorbis" if b"\x01vorbis" in head else None
    if head[:4] == b"RIFF" and head[8:12] == b"WAVE":
        return "wav"
    if head.startswith(b"ID3") or (
        len(head) >= 2 and head[0] == 0xFF and (head[1] & 0xE0) == 0xE0
    ):
        return "mp3"
    return None


def open_source(path: PathLike) -> str:
    """Check that ``path`` holds decodable audio and return it as a string.

    Raises OSError if the file cannot be opened and UnsupportedAudioError if
    it is not MP3, WAV, Vorbis or FLAC.
    """
    with open(path, "rb") as handle:
        head = handle.read(_HEADER_BYTES)
    if _audio_format(head) is None:
        raise UnsupportedAudioError(f"file was not: MP3, WAV, VORBIS or FLAC: {path}")
    return str(path)


def _sorted_entries(directory: PathLike) -> list[os.DirEntry]:
    with os.scandir(directory) as entries:
        return sorted(entries, key=lambda entry: entry.name)


def process_chosen_directory(directory: PathLike, cache_path: PathLike) -> None:
    """Append every file in ``directory`` to the cache, one path per line.

    Sub-directories are scanned one level deep with :func:`scan_directory`.
    The cache file must already exist.
    """
    descriptor = os.open(cache_path, os.O_WRONLY | os.O_APPEND)
    with os.fdopen(descriptor, "a", encoding="utf-8") as cache_file:
        for entry in _sorted_entries(directory):
            if entry.is_dir():
                print(
                    f"Encountered secondary directory {entry.path!r}: "
                    "Scanning and caching"
                )
                cache_file.flush()
                scan_directory(entry.path, cache_path)
            elif entry.is_file():
                print(f"Writing {entry.path!r}")
                cache_file.write(f"{entry.path}\n")


def scan_directory(directory: PathLike, cache_path: PathLike) -> None:
    """Append the path of every entry of ``directory`` to the cache."""
    with open(cache_path, "a", encoding="utf-8") as cache_file:
        for entry in _sorted_entries(directory):
            print(f"Writing {entry.path!r}")
            cache_file.write(f"{entry.path}\n")


def load_cached_songs(queue: PlayQueue, cache_path: Optional[PathLike] = None) -> None:
    """Fill ``queue`` with the songs listed in the cache file."""
    cache = Path(cache_path) if cache_path is not None else paths.music_cache_path()
    text = cache.read_text(encoding="utf-8")
    if not text:
        print("There's no cached music! Choose a directory to load.")
    queue.load(text.splitlines(), song_title)


def try_load_cached_music(
    queue: PlayQueue,
    data_directory: Optional[PathLike] = None,
    cache_path: Optional[PathLike] = None,
) -> None:
    """Load the cached library, creating the data directory on first run."""
    data = Path(data_directory) if data_directory is not None else paths.data_dir()
    cache = Path(cache_path) if cache_path is not None else data / paths.MUSIC_CACHE_NAME
    if not data.exists():
        print("Jed MP Folder does not exist. Creating and populating...")
        data.mkdir()
        cache.touch()
        print("Created cachedfiles.. file")
    else:
        print("Cached Music Found, Loading library...")
        load_cached_songs(queue, cache)
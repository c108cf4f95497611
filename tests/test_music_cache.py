import os

import pytest

from jedmp.music_cache import (
    UnsupportedAudioError,
    load_cached_songs,
    open_source,
    process_chosen_directory,
    scan_directory,
    try_load_cached_music,
)
from jedmp.play_queue import PlayQueue

WAV_BYTES = b"RIFF" + (4).to_bytes(4, "little") + b"WAVE"


def id3_bytes(title: str) -> bytes:
    payload = b"\x00" + title.encode("latin-1")
    frame = b"TIT2" + len(payload).to_bytes(4, "big") + b"\x00\x00" + payload
    return b"ID3" + bytes([3, 0, 0]) + bytes([0, 0, 0, len(frame)]) + frame


@pytest.fixture
def music_dir(tmp_path):
    root = tmp_path / "music"
    root.mkdir()
    (root / "a.mp3").write_bytes(id3_bytes("Alpha"))
    (root / "b.wav").write_bytes(WAV_BYTES)
    sub = root / "sub"
    sub.mkdir()
    (sub / "c.wav").write_bytes(WAV_BYTES)
    return root


@pytest.fixture
def cache(tmp_path):
    path = tmp_path / "music_cache"
    path.touch()
    return path


@pytest.mark.parametrize(
    "content",
    [WAV_BYTES, id3_bytes("x"), b"fLaC\x00\x00\x00\x22", b"OggS" + b"\x00" * 24 + b"\x01vorbis"],
)
def test_open_source_accepts_supported_formats(tmp_path, content):
    path = tmp_path / "song"
    path.write_bytes(content)
    assert open_source(path) == str(path)


def test_open_source_rejects_text(tmp_path):
    path = tmp_path / "notes.txt"
    path.write_text("just some words")
    with pytest.raises(UnsupportedAudioError):
        open_source(path)


def test_open_source_rejects_ogg_without_vorbis(tmp_path):
    path = tmp_path / "song.opus"
    path.write_bytes(b"OggS" + b"\x00" * 24 + b"OpusHead")
    with pytest.raises(UnsupportedAudioError):
        open_source(path)


def test_open_source_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        open_source(tmp_path / "gone.mp3")


def test_process_chosen_directory_writes_paths(music_dir, cache):
    process_chosen_directory(music_dir, cache)
    lines = cache.read_text().splitlines()
    assert lines == [
        os.path.join(music_dir, "a.mp3"),
        os.path.join(music_dir, "b.wav"),
        os.path.join(music_dir, "sub", "c.wav"),
    ]


def test_process_chosen_directory_appends(music_dir, cache):
    cache.write_text("/existing/song.mp3\n")
    process_chosen_directory(music_dir, cache)
    lines = cache.read_text().splitlines()
    assert lines[0] == "/existing/song.mp3"
    assert len(lines) == 4


def test_process_chosen_directory_needs_cache(music_dir, tmp_path):
    missing = tmp_path / "no_cache"
    with pytest.raises(FileNotFoundError):
        process_chosen_directory(music_dir, missing)
    assert not missing.exists()


def test_scan_directory_does_not_recurse(music_dir, cache):
    scan_directory(music_dir, cache)
    lines = cache.read_text().splitlines()
    assert lines == [
        os.path.join(music_dir, "a.mp3"),
        os.path.join(music_dir, "b.wav"),
        os.path.join(music_dir, "sub"),
    ]


def test_load_cached_songs_reads_titles(music_dir, cache):
    process_chosen_directory(music_dir, cache)
    queue = PlayQueue()
    load_cached_songs(queue, cache)
    assert [song.title for song in queue] == ["Alpha", "b", "c"]
    assert queue[0].path == os.path.join(music_dir, "a.mp3")
    assert queue.index == 0


def test_load_cached_songs_empty_cache(cache, capsys):
    queue = PlayQueue()
    load_cached_songs(queue, cache)
    assert len(queue) == 0
    assert "no cached music" in capsys.readouterr().out


def test_load_cached_songs_missing_cache(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_cached_songs(PlayQueue(), tmp_path / "absent")


def test_try_load_creates_data_directory(tmp_path):
    data = tmp_path / ".jedmp"
    cache_path = data / "music_cache"
    queue = PlayQueue()
    try_load_cached_music(queue, data, cache_path)
    assert data.is_dir()
    assert cache_path.read_text() == ""
    assert len(queue) == 0


def test_try_load_loads_existing_cache(tmp_path, music_dir):
    data = tmp_path / ".jedmp"
    data.mkdir()
    cache_path = data / "music_cache"
    cache_path.write_text(os.path.join(music_dir, "a.mp3") + "\n")
    queue = PlayQueue()
    try_load_cached_music(queue, data, cache_path)
    assert [song.title for song in queue] == ["Alpha"]
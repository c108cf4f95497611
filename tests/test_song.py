import dataclasses

import pytest

from jedmp.song import Song


def test_song_keeps_path_and_title():
    song = Song("/music/track.flac", "Track")
    assert song.path == "/music/track.flac"
    assert song.title == "Track"


def test_optional_details_default_to_empty():
    song = Song("/music/track.flac", "Track")
    assert song.artists == ""
    assert song.image_path == ""


def test_songs_with_same_fields_are_equal():
    assert Song("/a.mp3", "A") == Song("/a.mp3", "A")
    assert Song("/a.mp3", "A") != Song("/b.mp3", "A")


def test_song_is_immutable():
    song = Song("/a.mp3", "A")
    with pytest.raises(dataclasses.FrozenInstanceError):
        song.title = "B"
    assert song.title == "A"


def test_str_is_title():
    assert str(Song("/music/x.ogg", "Some Title")) == "Some Title"


def test_song_is_hashable_and_usable_in_sets():
    songs = {Song("/a.mp3", "A"), Song("/a.mp3", "A"), Song("/b.mp3", "B")}
    assert len(songs) == 2
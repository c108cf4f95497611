from pathlib import Path
from unittest import mock

from jedmp.paths import data_dir, music_cache_path


def test_data_dir_is_under_users_home():
    with mock.patch("getpass.getuser", return_value="alice"):
        assert data_dir() == Path("/home/alice/.jedmp")


def test_data_dir_follows_current_user():
    with mock.patch("getpass.getuser", return_value="bob"):
        result = data_dir()
    assert result.parent.name == "bob"
    assert result.name == ".jedmp"


def test_music_cache_lives_inside_data_dir():
    with mock.patch("getpass.getuser", return_value="alice"):
        cache = music_cache_path()
        base = data_dir()
    assert cache.parent == base
    assert cache.name == "music_cache"
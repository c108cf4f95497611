# jedmp

A small desktop music player. Choose a music directory and jedmp writes the
paths it finds to a cache file, shows those songs in a window and plays them
through a play queue.

## Installing

```
pip install .
```

Playback uses `pygame` (its mixer). The window is drawn with Tk, which comes
with most Python builds.

## Running

```
jedmp
```

The first run creates a data directory at `/home/<user>/.jedmp` holding an
empty `music_cache` file. Click **Choose Music directory** and pick a folder.
Every file directly in it is appended to the cache, and so is every entry of
each folder directly below it. The cache is then read back and the queue is
rebuilt from it. On later runs the queue is loaded from the cache at start-up.

To delete the data directory first and start again from an empty library:

```
jedmp r
```

## The window

Both the library list and the play-queue list show the songs of the current
queue.

- `<` plays the song before the current position (the first song when the
  position is at the start). The position itself does not move.
- `Pause` / `Play` pauses or resumes playback. When nothing is loaded yet,
  the current song is loaded first and is left paused, and the label
  becomes `Play`.
- `>` moves the position one step forward and plays the song there. On the
  last song this moves the position past the end and the press fails with
  an `IndexError`; a further press stops playback.

Right-click a library entry for **Add To Queue** (append to the end) and
**Insert Next** (insert at the current position). Right-click a queue entry
for **Remove This**, **Play Now** (jump to that song and play it) and
**Stop after**, which is shown but disabled.

## Song titles

`jedmp.metadata.song_title` reads the title from the file's tags: ID3v2 and
ID3v1 in MP3 files, Vorbis comments in FLAC and Ogg (Vorbis, Opus) files, and
RIFF `INFO`/`id3 ` chunks in WAV files. Without a tagged title it uses the
file name up to its first dot. A file that is not one of these formats
raises `MetadataError`, so such a file in the cache stops the library from
loading.

## Using it as a library

```python
from jedmp.play_queue import PlayQueue
from jedmp.metadata import song_title

queue = PlayQueue()
queue.load(["/music/a.mp3", "/music/b.flac"], song_title)
print(queue.current().title)
queue.advance()
```

- `jedmp.song.Song` — a frozen record of path, title, artists and image path.
- `jedmp.play_queue.PlayQueue` — songs in order plus the current `index`;
  `load`, `append`, `insert`, `remove`, `advance`, `step_back`, `current`.
- `jedmp.music_cache` — `process_chosen_directory`, `scan_directory`,
  `load_cached_songs`, `try_load_cached_music`, and `open_source`, which
  checks that a file is MP3, WAV, Ogg Vorbis or FLAC and raises
  `UnsupportedAudioError` otherwise.
- `jedmp.player.Sink` plays queued files through the mixer, and
  `jedmp.player.PlaybackController` holds the logic behind `<`, `>` and
  `Pause`.
- `jedmp.paths` gives `data_dir()` and `music_cache_path()`.

## What it does not do

- Artists and cover images are not read; `Song.artists` and
  `Song.image_path` stay empty.
- **Stop after** does nothing, and there is no repeat or shuffle.
- The cache is only ever appended to: choosing the same directory twice
  lists its songs twice, and entries are never removed except by `jedmp r`.
- Only one level of sub-folders is scanned.
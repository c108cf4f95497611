"""The player window: library list, play queue and playback controls."""

from __future__ import annotations

import os
from collections.abc import Callable
from enum import Enum
from pathlib import Path
from typing import Any, Optional, Union

from jedmp import paths
from jedmp.music_cache import (
    load_cached_songs,
    open_source,
    process_chosen_directory,
    try_load_cached_music,
)
from jedmp.play_queue import PlayQueue
from jedmp.player import PAUSE_LABEL, PlaybackController, Sink
from jedmp.song import Song

PathLike = Union[str, "os.PathLike[str]"]

WINDOW_TITLE = "JedMP"
WINDOW_WIDTH = 896
WINDOW_HEIGHT = 504
LIBRARY_LIST_SIZE = (500, 300)
PLAY_QUEUE_BOX_SIZE = (250, 300)
PAD_FROM_LIBRARY = 25
GENERAL_Y_PAD = 10

LIBRARY_OPTIONS = "Add To Queue,Insert Next"
PLAYQUEUE_OPTIONS = "Remove This,Play Now,Stop after"


class SongListKind(Enum):
    """Which list a song entry is shown in."""

    LIBRARY = "library"
    PLAYQUEUE = "playqueue"


_OPTIONS = {
    SongListKind.LIBRARY: LIBRARY_OPTIONS,
    SongListKind.PLAYQUEUE: PLAYQUEUE_OPTIONS,
}


def popup_options(kind: Any) -> tuple[str, ...]:
    """Return the labels of the right-click menu for a list of ``kind``."""
    return tuple(_OPTIONS[SongListKind(kind)].split(","))


def add_to_queue(queue: PlayQueue, song: Song) -> None:
    """Append ``song`` to the end of the play queue."""
    print("Appended to pq")
    queue.append(song)


def insert_next(queue: PlayQueue, song: Song) -> None:
    """Insert ``song`` at the queue's current position."""
    print("Inserted in pq")
    queue.insert(song, queue.index)


def open_window(
    queue: Optional[PlayQueue] = None,
    cache_path: Optional[PathLike] = None,
    data_directory: Optional[PathLike] = None,
) -> None:
    """Build the player window and run it until it is closed."""
    import tkinter as tk
    from tkinter import filedialog

    queue = queue if queue is not None else PlayQueue()
    data = Path(data_directory) if data_directory is not None else paths.data_dir()
    cache = Path(cache_path) if cache_path is not None else data / paths.MUSIC_CACHE_NAME

    root = tk.Tk()
    root.title(WINDOW_TITLE)
    root.geometry(f"{WINDOW_WIDTH}x{WINDOW_HEIGHT}")
    root.resizable(True, True)

    # The cached library has to be loaded before anything touches the queue.
    try_load_cached_music(queue, data, cache)

    sink = Sink()
    controller = PlaybackController(queue, sink, open_source)

    top_bar = tk.Frame(root, relief="sunken", borderwidth=1)
    top_bar.pack(side="top", fill="x")

    body = tk.Frame(root)
    body.pack(side="top", fill="both", expand=True, pady=(GENERAL_Y_PAD, 0))

    library_frame = tk.Frame(
        body,
        relief="sunken",
        borderwidth=2,
        width=LIBRARY_LIST_SIZE[0],
        height=LIBRARY_LIST_SIZE[1],
    )
    library_frame.pack(side="left", anchor="n")
    library_frame.pack_propagate(False)

    queue_frame = tk.Frame(
        body,
        relief="sunken",
        borderwidth=2,
        width=PLAY_QUEUE_BOX_SIZE[0],
        height=PLAY_QUEUE_BOX_SIZE[1],
    )
    queue_frame.pack(side="left", anchor="n", padx=(PAD_FROM_LIBRARY, 0))
    queue_frame.pack_propagate(False)

    controls = tk.Frame(root, height=WINDOW_HEIGHT // 8)
    controls.pack(side="bottom", fill="x")

    def play_index(index: int) -> None:
        queue.index = index
        song = queue.current()
        source = open_source(song.path)
        sink.stop()
        sink.append(source)
        sink.play()

    def remove_index(index: int) -> None:
        queue.remove(index)
        refresh()

    def library_actions(song: Song) -> dict[str, Optional[Callable[[], None]]]:
        add_label, insert_label = popup_options(SongListKind.LIBRARY)

        def add() -> None:
            add_to_queue(queue, song)
            refresh()

        def insert() -> None:
            insert_next(queue, song)
            refresh()

        return {add_label: add, insert_label: insert}

    def queue_actions(index: int) -> dict[str, Optional[Callable[[], None]]]:
        remove_label, play_label, stop_label = popup_options(SongListKind.PLAYQUEUE)
        return {
            remove_label: lambda: remove_index(index),
            play_label: lambda: play_index(index),
            stop_label: None,
        }

    def show_menu(event: Any, actions: dict[str, Optional[Callable[[], None]]]) -> None:
        menu = tk.Menu(root, tearoff=False)
        for label, action in actions.items():
            if action is None:
                menu.add_command(label=label, state="disabled")
            else:
                menu.add_command(label=label, command=action)
        try:
            menu.tk_popup(event.x_root, event.y_root)
        finally:
            menu.grab_release()

    def song_entry(parent: Any, song: Song, actions: dict) -> None:
        entry = tk.Label(parent, text=song.title, relief="raised", borderwidth=2)
        entry.pack(side="top", fill="x", pady=1)
        entry.bind("<Button-3>", lambda event: show_menu(event, actions))

    def refresh() -> None:
        for frame in (library_frame, queue_frame):
            for child in frame.winfo_children():
                child.destroy()
        for index, song in enumerate(queue):
            song_entry(library_frame, song, library_actions(song))
            song_entry(queue_frame, song, queue_actions(index))

    def choose_directory() -> None:
        directory = filedialog.askdirectory(parent=root, mustexist=True)
        if not directory:
            print("Directory Pick cancelled")
            return
        process_chosen_directory(directory, cache)
        load_cached_songs(queue, cache)
        refresh()

    tk.Button(
        top_bar, text="Choose Music directory", command=choose_directory
    ).pack(side="left")

    tk.Button(controls, text="<", command=controller.previous).pack(
        side="left", fill="both", expand=True
    )
    pause_button = tk.Button(controls, text=PAUSE_LABEL)
    pause_button.configure(
        command=lambda: pause_button.configure(text=controller.toggle_pause())
    )
    pause_button.pack(side="left", fill="both", expand=True)
    tk.Button(controls, text=">", command=controller.next).pack(
        side="left", fill="both", expand=True
    )

    refresh()
    root.mainloop()
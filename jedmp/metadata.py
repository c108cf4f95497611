"""Reading song titles from audio file tags.

Understands ID3v2 (2.2, 2.3, 2.4) and ID3v1 tags in MPEG files, Vorbis
comments in FLAC and Ogg (Vorbis and Opus) files, and RIFF INFO chunks in
WAV files.
"""

from __future__ import annotations

import os
import struct
from collections.abc import Iterator
from pathlib import Path
from typing import Optional, Union

PathLike = Union[str, "os.PathLike[str]"]

_TEXT_ENCODINGS = {0: "latin-1", 1: "utf-16", 2: "utf-16-be", 3: "utf-8"}


class MetadataError(Exception):
    """Raised when a file cannot be read as an audio file."""


def title_from_filename(path: PathLike) -> str:
    """Make a title from the last path component, up to its first dot."""
    name = str(path).split("/")[-1]
    return name.split(".")[0]


def read_tag_title(path: PathLike) -> Optional[str]:
    """Return the title stored in the file's tags, or None if it has none.

    Raises MetadataError if the file cannot be read or is not a known
    audio format.
    """
    try:
        data = Path(path).read_bytes()
    except OSError as exc:
        raise MetadataError(f"cannot read {path}: {exc}") from exc

    if data.startswith(b"fLaC"):
        return _flac_title(data)
    if data.startswith(b"OggS"):
        return _ogg_title(data)
    if data[:4] == b"RIFF" and data[8:12] == b"WAVE":
        return _wav_title(data)
    if (
        data.startswith(b"ID3")
        or _looks_like_mpeg(data)
        or (data and str(path).lower().endswith(".mp3"))
    ):
        return _mpeg_title(data)
    raise MetadataError(f"not a valid audio file: {path}")


def song_title(path: PathLike) -> str:
    """Return the tagged title, falling back to one made from the file name."""
    title = read_tag_title(path)
    return title if title else title_from_filename(path)


def _looks_like_mpeg(data: bytes) -> bool:
    return len(data) >= 2 and data[0] == 0xFF and (data[1] & 0xE0) == 0xE0


def _syncsafe(raw: bytes) -> int:
    value = 0
    for byte in raw:
        value = (value << 7) | (byte & 0x7F)
    return value


def _mpeg_title(data: bytes) -> Optional[str]:
    if data.startswith(b"ID3"):
        title = _id3v2_title(data)
        if title:
            return title
    return _id3v1_title(data)


def _id3v1_title(data: bytes) -> Optional[str]:
    if len(data) < 128 or data[-128:-125] != b"TAG":
        return None
    raw = data[-125:-95].split(b"\x00")[0]
    return raw.decode("latin-1").strip() or None


def _id3v2_title(data: bytes) -> Optional[str]:
    if len(data) < 10:
        raise MetadataError("truncated ID3v2 header")
    major = data[3]
    flags = data[5]
    body = data[10 : 10 + _syncsafe(data[6:10])]
    if flags & 0x80 and major < 4:
        body = body.replace(b"\xff\x00", b"\xff")

    if major == 2:
        id_len, size_len, header_len, target = 3, 3, 6, b"TT2"
    elif major in (3, 4):
        id_len, size_len, header_len, target = 4, 4, 10, b"TIT2"
    else:
        return None

    pos = 0
    if major >= 3 and flags & 0x40 and len(body) >= 4:
        if major == 3:
            pos = 4 + int.from_bytes(body[0:4], "big")
        else:
            pos = _syncsafe(body[0:4])

    while pos + header_len <= len(body):
        frame_id = body[pos : pos + id_len]
        if frame_id[0] == 0:
            break
        raw_size = body[pos + id_len : pos + id_len + size_len]
        size = _syncsafe(raw_size) if major == 4 else int.from_bytes(raw_size, "big")
        start = pos + header_len
        frame = body[start : start + size]
        if frame_id == target:
            if major == 4:
                format_flags = body[pos + 9]
                if format_flags & 0x02:
                    frame = frame.replace(b"\xff\x00", b"\xff")
                if format_flags & 0x01:
                    frame = frame[4:]
            return _decode_text_frame(frame)
        pos = start + size
    return None


def _decode_text_frame(frame: bytes) -> Optional[str]:
    if not frame:
        return None
    codec = _TEXT_ENCODINGS.get(frame[0])
    if codec is None:
        return None
    payload = frame[1:]
    if codec.startswith("utf-16") and len(payload) % 2:
        payload = payload[:-1]
    text = payload.decode(codec, errors="replace").split("\x00")[0]
    return text or None


def _vorbis_comment_title(block: bytes) -> Optional[str]:
    try:
        (vendor_len,) = struct.unpack_from("<I", block, 0)
        pos = 4 + vendor_len
        (count,) = struct.unpack_from("<I", block, pos)
        pos += 4
        for _ in range(count):
            (length,) = struct.unpack_from("<I", block, pos)
            pos += 4
            entry = block[pos : pos + length]
            pos += length
            key, sep, value = entry.decode("utf-8", errors="replace").partition("=")
            if sep and key.upper() == "TITLE" and value:
                return value
    except struct.error as exc:
        raise MetadataError("truncated Vorbis comment block") from exc
    return None


def _flac_title(data: bytes) -> Optional[str]:
    pos = 4
    while pos + 4 <= len(data):
        header = data[pos]
        length = int.from_bytes(data[pos + 1 : pos + 4], "big")
        start = pos + 4
        if header & 0x7F == 4:
            return _vorbis_comment_title(data[start : start + length])
        if header & 0x80:
            break
        pos = start + length
    return None


def _ogg_packets(data: bytes) -> Iterator[bytes]:
    pos = 0
    packet = bytearray()
    while data.startswith(b"OggS", pos):
        if pos + 27 > len(data):
            raise MetadataError("truncated Ogg page header")
        segments = data[pos + 26]
        table = data[pos + 27 : pos + 27 + segments]
        pos += 27 + segments
        for lacing in table:
            packet += data[pos : pos + lacing]
            pos += lacing
            if lacing < 255:
                yield bytes(packet)
                packet = bytearray()


def _ogg_title(data: bytes) -> Optional[str]:
    for number, packet in enumerate(_ogg_packets(data)):
        if packet.startswith(b"\x03vorbis"):
            return _vorbis_comment_title(packet[7:])
        if packet.startswith(b"OpusTags"):
            return _vorbis_comment_title(packet[8:])
        if number >= 2:
            break
    return None


def _wav_title(data: bytes) -> Optional[str]:
    pos = 12
    while pos + 8 <= len(data):
        chunk_id = data[pos : pos + 4]
        size = int.from_bytes(data[pos + 4 : pos + 8], "little")
        body = data[pos + 8 : pos + 8 + size]
        if chunk_id == b"LIST" and body[:4] == b"INFO":
            sub = 4
            while sub + 8 <= len(body):
                sub_id = body[sub : sub + 4]
                sub_size = int.from_bytes(body[sub + 4 : sub + 8], "little")
                if sub_id == b"INAM":
                    value = body[sub + 8 : sub + 8 + sub_size].split(b"\x00")[0]
                    return value.decode("utf-8", errors="replace").strip() or None
                sub += 8 + sub_size + (sub_size & 1)
        elif chunk_id in (b"id3 ", b"ID3 ") and body.startswith(b"ID3"):
            title = _id3v2_title(body)
            if title:
                return title
        pos += 8 + size + (size & 1)
    return None
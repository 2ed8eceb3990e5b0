"""Small text helpers shared by the catalogue, user and playlist code."""

from __future__ import annotations

import re
import string

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_COMMA_RUN = re.compile(r",{2,}")
_COMMA_BEFORE_QUOTE = re.compile(r",+(?=\")")


def to_lower(text: str) -> str:
    """Lower-case the ASCII letters of ``text`` and leave every other character alone."""
    return text.translate(_ASCII_LOWER)


def is_in_song_string(song_string: str, song: str) -> bool:
    """Tell whether ``song`` already occurs anywhere in a playlist's song string."""
    return song in song_string


def remove_double_commas(text: str) -> str:
    """Collapse runs of commas and drop commas that come right before a quote."""
    return _COMMA_BEFORE_QUOTE.sub("", _COMMA_RUN.sub(",", text))


def split_song_string(song_string: str) -> list[str]:
    """Return the song names held in a quoted, comma separated song string."""
    body = song_string[1:] if song_string.startswith('"') else song_string
    body = body.split('"', 1)[0]
    return [name for name in body.split(",") if name]
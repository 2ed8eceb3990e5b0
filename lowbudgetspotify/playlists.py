"""Playlists and the text file that keeps them."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator

from .utils import is_in_song_string, remove_double_commas, split_song_string, to_lower


def build_song_string(songs: Iterable[str]) -> str:
    """Join song names into a playlist's quoted, comma separated song string.

    A song whose name already occurs in the string built so far is skipped.
    """
    song_string = '"'
    for song in songs:
        if not song or is_in_song_string(song_string, song):
            continue
        song_string += song + ","
    song_string += '"'
    return remove_double_commas(song_string)


@dataclass
class Playlist:
    """A named playlist and its quoted song string."""

    name: str
    song_string: str

    @property
    def songs(self) -> list[str]:
        """The song names held by the playlist, in order."""
        return split_song_string(self.song_string)

    def to_line(self) -> str:
        return f"{self.name},{self.song_string}"

    @classmethod
    def from_line(cls, line: str) -> "Playlist":
        name, _, song_string = line.partition(",")
        return cls(name, song_string)

    def __str__(self) -> str:
        return f"{self.name}-{self.song_string}"


class PlaylistStore:
    """Playlists kept in memory and appended to a comma separated file."""

    def __init__(self, path):
        self.path = Path(path)
        self.playlists: list[Playlist] = []

    def __iter__(self) -> Iterator[Playlist]:
        return iter(self.playlists)

    def __len__(self) -> int:
        return len(self.playlists)

    def load(self) -> None:
        """Read every playlist from the file; raises OSError if it cannot be read."""
        with self.path.open(encoding="utf-8") as handle:
            self.playlists = [
                Playlist.from_line(line.rstrip("\n"))
                for line in handle
                if line.rstrip("\n")
            ]

    def add(self, name: str, song_string: str) -> Playlist:
        """Add a playlist in memory and append it to the file."""
        playlist = Playlist(name, song_string)
        self.playlists.append(playlist)
        with self.path.open("a", encoding="utf-8") as handle:
            handle.write(playlist.to_line() + "\n")
        return playlist

    def exists(self, name: str) -> bool:
        """Tell whether a playlist has exactly this name."""
        return any(p.name == name for p in self.playlists)

    def search(self, query: str) -> list[Playlist]:
        """Return the playlists whose name contains ``query`` ignoring case."""
        wanted = to_lower(query)
        return [p for p in self.playlists if wanted in to_lower(p.name)]
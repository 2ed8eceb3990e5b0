"""The song catalogue and the text file that keeps it."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

from .utils import to_lower


@dataclass
class Song:
    """A song and the artist who made it."""

    artist_name: str
    song_name: str

    def to_line(self) -> str:
        return f"{self.artist_name},{self.song_name}"

    @classmethod
    def from_line(cls, line: str) -> "Song":
        artist, _, title = line.partition(",")
        return cls(artist, title)

    def __str__(self) -> str:
        return f"{self.artist_name} - {self.song_name}"


class SongCatalog:
    """Songs kept in memory and appended to a comma separated file."""

    def __init__(self, path):
        self.path = Path(path)
        self.songs: list[Song] = []

    def __iter__(self) -> Iterator[Song]:
        return iter(self.songs)

    def __len__(self) -> int:
        return len(self.songs)

    def load(self) -> None:
        """Read every song from the file; raises OSError if it cannot be read."""
        with self.path.open(encoding="utf-8") as handle:
            self.songs = [
                Song.from_line(line.rstrip("\n"))
                for line in handle
                if line.rstrip("\n")
            ]

    def add(self, artist_name: str, song_name: str) -> Song:
        """Add a song in memory and append it to the file."""
        song = Song(artist_name, song_name)
        self.songs.append(song)
        with self.path.open("a", encoding="utf-8") as handle:
            handle.write(song.to_line() + "\n")
        return song

    def find_exact(self, query: str) -> Song | None:
        """Return the first song whose name equals ``query`` ignoring case."""
        wanted = to_lower(query)
        return next((s for s in self.songs if to_lower(s.song_name) == wanted), None)

    def search_songs(self, query: str) -> list[Song]:
        """Return the songs whose name contains ``query`` ignoring case."""
        wanted = to_lower(query)
        return [s for s in self.songs if wanted in to_lower(s.song_name)]

    def search_artists(self, query: str) -> list[str]:
        """Return each distinct artist whose name contains ``query`` ignoring case."""
        wanted = to_lower(query)
        seen: set[str] = set()
        artists: list[str] = []
        for song in self.songs:
            key = to_lower(song.artist_name)
            if wanted in key and key not in seen:
                seen.add(key)
                artists.append(song.artist_name)
        return artists

    def songs_by(self, artist_name: str) -> list[Song]:
        """Return the songs of the artist with exactly this name."""
        return [s for s in self.songs if s.artist_name == artist_name]

    def find_by_name(self, song_name: str) -> list[Song]:
        """Return every song with exactly this name."""
        return [s for s in self.songs if s.song_name == song_name]
"""A small terminal music catalogue with users, songs and playlists kept in text files."""

__version__ = "0.1.0"
# lowbudgetspotify

A small interactive terminal program for keeping a music catalogue. Users
sign up and log in, search songs and artists, upload their own songs and
build playlists. Everything is kept in three plain text files in a data
directory:

- `user.txt` holds one `name,surname,password` line per account
- `song.txt` holds one `artist,song` line per song
- `playlist.txt` holds one `name,"song,song,..."` line per playlist

New users, songs and playlists are appended to these files as they are
created. A file that is missing at start-up is reported on standard error
as `Failed to open file: <name>` and the session starts with that list
empty.

## Installing

```
pip install .
```

## Running

```
lowbudgetspotify
lowbudgetspotify --data-dir path/to/data
```

`--data-dir` names the directory holding the three files; it defaults to
the current directory.

The start page offers login, sign up and exit. After signing up you may log
in straight away. Once logged in, the main menu lets you:

1. create a playlist: give it a name not already taken, then add songs one
   by one. A song name that matches a catalogue entry exactly (ignoring
   case) is added directly; otherwise up to 99 songs whose names contain
   what you typed are listed and you may pick one by number.
2. search playlists by any part of their name, showing each playlist's songs
3. search songs by any part of their name
4. search artists by any part of their name, showing each artist's songs
5. upload a song, credited to you as `surname name`
6. exit, which ends the session

Searches are case-insensitive for ASCII letters. The session also ends
when input runs out.

## Using it from Python

The stores can be used on their own:

```python
from lowbudgetspotify.songs import SongCatalog
from lowbudgetspotify.playlists import PlaylistStore, build_song_string
from lowbudgetspotify.users import UserStore

catalog = SongCatalog("data/song.txt")
catalog.load()                      # raises OSError if the file cannot be read
catalog.add("Doe Jane", "Morning Tune")
print(catalog.search_songs("tune"))     # songs whose name contains "tune"
print(catalog.search_artists("doe"))    # distinct matching artist names
print(catalog.find_exact("morning tune"))

playlists = PlaylistStore("data/playlist.txt")
playlists.load()
playlists.add("Mornings", build_song_string(["Morning Tune"]))
print(playlists.search("morn")[0].songs)

users = UserStore("data/user.txt")
users.load()
users.add("Jane", "Doe", "password")
print(users.check_password("Jane", "Doe", "password"))
```

`build_song_string` joins song names into the quoted form stored in
`playlist.txt`, skipping any name that already occurs in the string.
`UserStore.check_password` raises `LookupError` for an unknown user.

The small text helpers `to_lower`, `is_in_song_string`,
`remove_double_commas` and `split_song_string` live in
`lowbudgetspotify.utils`.

The whole program can also be driven with other streams, which is handy
for scripting:

```python
import io
from lowbudgetspotify.app import App

App("data", io.StringIO("3\n"), io.StringIO()).run()
```

## What it does not do

Songs are names only: the program does not store, stream or play audio.
Passwords are kept in `user.txt` as plain text, and there is no way to
edit or delete users, songs or playlists other than editing the files.

## Tests

```
pip install .[test]
pytest
```
"""The interactive console front end: log in, sign up and browse the catalogue."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import TextIO

from .playlists import PlaylistStore, build_song_string
from .songs import SongCatalog
from .users import UserStore
from .utils import is_in_song_string

_CLEAR = "\n" * 16
_SEPARATOR = "----------------------"
_INVALID = "Please provide a valid input!"
_YES_NO = "Type '1' if yes, else type '2'."
_BACK_TO_MENU = "\nPress any key to go back to the menu:"
_MAX_MATCHES = 99


class App:
    """A console session over the user, song and playlist files in ``data_dir``."""

    def __init__(self, data_dir=".", stdin: TextIO | None = None, stdout: TextIO | None = None):
        data = Path(data_dir)
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.users = UserStore(data / "user.txt")
        self.songs = SongCatalog(data / "song.txt")
        self.playlists = PlaylistStore(data / "playlist.txt")
        for store in (self.users, self.songs, self.playlists):
            try:
                store.load()
            except OSError:
                print(f"Failed to open file: {store.path.name}", file=sys.stderr)

    # -- console helpers -------------------------------------------------

    def _say(self, text: str = "", end: str = "\n") -> None:
        self.stdout.write(text + end)

    def _read_line(self) -> str:
        line = self.stdin.readline()
        if not line:
            raise EOFError("input ended")
        return line.rstrip("\r\n")

    def _read_word(self) -> str:
        while True:
            words = self._read_line().split()
            if words:
                return words[0]

    def _ask_int(self, valid) -> int:
        while True:
            self._say("->", end="")
            words = self._read_line().split()
            try:
                number = int(words[0]) if words else None
            except ValueError:
                number = None
            if number in valid:
                return number
            self._say(_INVALID)

    def _yes(self) -> bool:
        self._say(_YES_NO)
        return self._ask_int((1, 2)) == 1

    def _report_count(self, count: int) -> None:
        if count != 1:
            self._say(f"We have found {count} results that match your input!", end="")
        else:
            self._say("We have found 1 result that matches your input!", end="")
        self._say(_BACK_TO_MENU, end="")
        self._read_word()
        self._say(_CLEAR, end="")

    def _initial_page(self) -> None:
        self._say("Welcome to LowBudget Spotify!")
        self._say("1.Login")
        self._say("2.Sign Up")
        self._say("3.Exit")

    # -- top level -------------------------------------------------------

    def run(self) -> None:
        """Show the start page and serve choices until the user leaves or input ends."""
        self._initial_page()
        try:
            while True:
                choice = self._ask_int((1, 2, 3))
                if choice == 3:
                    break
                session = self.login() if choice == 1 else self.sign_up()
                if session is not None:
                    self.main_menu(*session)
                    break
                self._say(_CLEAR, end="")
                self._initial_page()
        except EOFError:
            pass
        self._say(_CLEAR + "\n", end="")
        self._say("We hope we will see you soon! Goodbye!")

    def login(self) -> tuple[str, str] | None:
        """Ask for credentials; return the logged-in name and surname, or None."""
        while True:
            self._say(_CLEAR, end="")
            self._say("Please type your name\n->", end="")
            name = self._read_word()
            self._say("Please type your surname\n->", end="")
            surname = self._read_word()
            if self.users.exists(name, surname):
                break
            self._say(f"There is no user called '{name} {surname}'!")
            self._say("Would you like to try again?", end="")
            if not self._yes():
                return None

        while True:
            self._say("Please type your password\n->", end="")
            if self.users.check_password(name, surname, self._read_word()):
                self._say(_CLEAR, end="")
                return name, surname
            self._say("\nIncorrect password!")
            self._say("Do you want to try again?")
            if not self._yes():
                return None

    def sign_up(self) -> tuple[str, str] | None:
        """Register a new user; return name and surname if they also log in."""
        self._say(_CLEAR, end="")
        self._say("Please type your name: ")
        name = self._read_word()
        self._say("Please type your surname: ")
        surname = self._read_word()

        while self.users.exists(name, surname):
            self._say(f"A user called '{name} {surname}' already exists!")
            self._say("Would you like to try again?", end="")
            if not self._yes():
                return None
            self._say("\n" * 11, end="")
            self._say("Please type your name:", end="")
            name = self._read_word()
            self._say("Please type your surname:", end="")
            surname = self._read_word()

        self._say("Please type your password:", end="")
        secret_word = self._read_word()
        self._say(_CLEAR, end="")
        self._say("Your account has successfully been created!")
        self.users.add(name, surname, secret_word)
        self._say("Do you want to also log in?", end="")
        if self._yes():
            self._say(_CLEAR, end="")
            return name, surname
        return None

    def main_menu(self, name: str, surname: str) -> None:
        """Serve the logged-in menu until the user chooses to exit."""
        while True:
            self._say(f"Welcome {surname}!")
            self._say("1.Create playlist")
            self._say("2.Search playlist")
            self._say("3.Search song")
            self._say("4.Search artist")
            self._say("5.Upload song")
            self._say("6.Exit")
            self._say("Please choose one of the options from above")
            choice = self._ask_int(range(1, 7))
            if choice == 1:
                self.create_playlist()
            elif choice == 2:
                self.search_playlist()
            elif choice == 3:
                self.search_song()
            elif choice == 4:
                self.search_artist()
            elif choice == 5:
                self.upload_song(name, surname)
            else:
                return

    # -- menu actions ----------------------------------------------------

    def create_playlist(self) -> None:
        """Ask for a new playlist's name and songs, then save it."""
        self._say(_CLEAR, end="")
        self._say("What name would you like to give to your playlist?\n->", end="")
        playlist_name = self._read_line()
        while self.playlists.exists(playlist_name):
            self._say(f"A playlist called '{playlist_name}' already exist!")
            self._say("Please try another name!")
            self._say("Press any key to proceed further:", end="")
            self._read_word()
            self._say(_CLEAR, end="")
            self._say("What name would you like to give to your playlist?\n->", end="")
            playlist_name = self._read_line()

        self._say(f"\nPlaylist name: {playlist_name}")
        chosen: list[str] = []

        def add(song_name: str) -> None:
            if is_in_song_string(build_song_string(chosen), song_name):
                self._say("This song is already in the playlist!")
            else:
                chosen.append(song_name)

        while True:
            self._say("What song would you like to add?\n->", end="")
            query = self._read_line()
            exact = self.songs.find_exact(query)
            if exact is not None:
                add(exact.song_name)
                self._say("Would you like to add another song?")
            else:
                matches = [s.song_name for s in self.songs.search_songs(query)][:_MAX_MATCHES]
                self._say("\n" * 9, end="")
                if matches:
                    self._say(f"We didn't find any song called '{query}'.")
                    self._say("Below you can see results similar with your input:")
                    for number, match in enumerate(matches, start=1):
                        self._say(f"{number}.{match}")
                    if len(matches) == 1:
                        self._say("Do you want to add this song to your playlist?")
                    else:
                        self._say("Do you want to add one of these songs to your playlist?")
                    if self._yes():
                        self._say("Great! Please type the index of the desired song!")
                        index = self._ask_int(range(1, len(matches) + 1))
                        add(matches[index - 1])
                        self._say("Would you like to add another song?")
                    else:
                        self._say("Would you like to add other songs?")
                else:
                    self._say("There are no results that match your input!")
                    self._say("Would you like to add another song?")
            if not self._yes():
                break
            self._say("\n" * 8, end="")

        self._say("\n" * 10, end="")
        playlist = self.playlists.add(playlist_name, build_song_string(chosen))
        self._say(str(playlist))
        self._say("Playlist successfully added!")
        self._say(_BACK_TO_MENU, end="")
        self._read_word()
        self._say(_CLEAR, end="")

    def search_playlist(self) -> None:
        """Show every playlist whose name contains the query, with its songs."""
        self._say(_CLEAR, end="")
        self._say("What playlist are you looking for?\n->", end="")
        query = self._read_line()
        self._say()
        found = self.playlists.search(query)
        for playlist in found:
            self._say(playlist.name)
            self._say(_SEPARATOR)
            for song_name in playlist.songs:
                for song in self.songs.find_by_name(song_name):
                    self._say(str(song))
            self._say("\n")
        self._report_count(len(found))

    def search_song(self) -> None:
        """Show every song whose name contains the query."""
        self._say(_CLEAR, end="")
        self._say("What song are you looking for?\n->", end="")
        found = self.songs.search_songs(self._read_line())
        for song in found:
            self._say(str(song))
        self._report_count(len(found))

    def search_artist(self) -> None:
        """Show every artist whose name contains the query, with their songs."""
        self._say(_CLEAR, end="")
        self._say("What artist are you looking for?\n->", end="")
        artists = self.songs.search_artists(self._read_line())
        for artist in artists:
            self._say(artist)
            self._say(_SEPARATOR)
            for song in self.songs.songs_by(artist):
                self._say(str(song))
            self._say("\n")
        self._report_count(len(artists))

    def upload_song(self, name: str, surname: str) -> None:
        """Add a song credited to the logged-in user."""
        self._say(_CLEAR, end="")
        self._say("We are glad that you are sharing your musical projects with us!")
        self._say("What's the name of your song?\n->", end="")
        song_name = self._read_line()
        self._say(f"'{song_name}' by {surname} {name} has officially been uploaded!", end="")
        self.songs.add(f"{surname} {name}", song_name)
        self._say(_BACK_TO_MENU, end="")
        self._read_word()
        self._say(_CLEAR, end="")


def main(argv=None) -> int:
    """Start a console session."""
    parser = argparse.ArgumentParser(prog="lowbudgetspotify", description="A tiny music catalogue.")
    parser.add_argument(
        "--data-dir",
        default=".",
        help="directory holding user.txt, song.txt and playlist.txt",
    )
    args = parser.parse_args(argv)
    App(args.data_dir).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
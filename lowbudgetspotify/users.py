"""Registered users and the text file that keeps them."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator


@dataclass
class User:
    """A registered listener."""

    name: str
    surname: str
    password: str

    def to_line(self) -> str:
        return f"{self.name},{self.surname},{self.password}"

    @classmethod
    def from_line(cls, line: str) -> "User":
        fields = line.split(",", 2)
        fields += [""] * (3 - len(fields))
        return cls(*fields)


class UserStore:
    """Users kept in memory and appended to a comma separated file."""

    def __init__(self, path):
        self.path = Path(path)
        self.users: list[User] = []

    def __iter__(self) -> Iterator[User]:
        return iter(self.users)

    def __len__(self) -> int:
        return len(self.users)

    def load(self) -> None:
        """Read every user from the file; raises OSError if it cannot be read."""
        with self.path.open(encoding="utf-8") as handle:
            self.users = [
                User.from_line(line.rstrip("\n"))
                for line in handle
                if line.rstrip("\n")
            ]

    def add(self, name: str, surname: str, password: str) -> User:
        """Register a user in memory and append it to the file."""
        user = User(name, surname, password)
        self.users.append(user)
        with self.path.open("a", encoding="utf-8") as handle:
            handle.write(user.to_line() + "\n")
        return user

    def find(self, name: str, surname: str) -> User | None:
        """Return the first user with this exact name and surname, if any."""
        return next(
            (u for u in self.users if u.name == name and u.surname == surname),
            None,
        )

    def exists(self, name: str, surname: str) -> bool:
        return self.find(name, surname) is not None

    def check_password(self, name: str, surname: str, password: str) -> bool:
        """Tell whether ``password`` is the user's; raises LookupError for an unknown user."""
        user = self.find(name, surname)
        if user is None:
            raise LookupError(f"There is no user called '{name} {surname}'!")
        return user.password == password
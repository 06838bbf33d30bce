"""Persistent, e-mail-sorted storage of user accounts as fixed-size records."""

from __future__ import annotations

from pathlib import Path

from .database import USERS_FILE
from .user import RECORD_SIZE, User, unpack_user


class UserStore:
    """A binary file of packed user records kept in ascending e-mail order.

    A missing file is treated as an empty store; writing creates it.
    """

    def __init__(self, path: str | Path = USERS_FILE) -> None:
        self.path = Path(path)

    def _read(self) -> bytes:
        try:
            return self.path.read_bytes()
        except FileNotFoundError:
            return b""

    def _size(self) -> int:
        try:
            return self.path.stat().st_size
        except FileNotFoundError:
            return 0

    def _write_all(self, users: list[User]) -> None:
        self.path.write_bytes(b"".join(user.pack() for user in users))

    def _check_position(self, pos: int) -> None:
        total = self.count()
        if not 0 <= pos < total:
            raise IndexError(f"no user record at position {pos} (store holds {total})")

    def count(self) -> int:
        """Number of complete records in the file."""
        return self._size() // RECORD_SIZE

    def users(self) -> list[User]:
        """All stored users, in file order."""
        data = self._read()
        usable = len(data) - len(data) % RECORD_SIZE
        return [
            unpack_user(data[start : start + RECORD_SIZE])
            for start in range(0, usable, RECORD_SIZE)
        ]

    def find(self, email: str) -> int | None:
        """Position of the user with this e-mail, or ``None`` if there is none.

        The scan stops early once it passes the place the address would sort to.
        """
        target = email.encode("utf-8")
        for pos, user in enumerate(self.users()):
            if user.email == email:
                return pos
            if user.email.encode("utf-8") > target:
                break
        return None

    def get(self, pos: int) -> User:
        """The user stored at ``pos``."""
        self._check_position(pos)
        with self.path.open("rb") as handle:
            handle.seek(pos * RECORD_SIZE)
            return unpack_user(handle.read(RECORD_SIZE))

    def set(self, pos: int, user: User) -> None:
        """Overwrite the record at ``pos`` with ``user``."""
        self._check_position(pos)
        record = user.pack()
        with self.path.open("r+b") as handle:
            handle.seek(pos * RECORD_SIZE)
            handle.write(record)

    def add(self, user: User) -> None:
        """Insert ``user`` and rewrite the file sorted by e-mail."""
        users = self.users()
        users.append(user)
        users.sort()
        self._write_all(users)

    def delete(self, pos: int) -> User:
        """Remove and return the user at ``pos``."""
        self._check_position(pos)
        users = self.users()
        removed = users.pop(pos)
        self._write_all(users)
        return removed

    def clear(self) -> None:
        """Remove every record, leaving an empty file."""
        self.path.write_bytes(b"")

    def verify(self, email: str, password: str) -> bool:
        """Whether a user with this e-mail exists and has this password."""
        pos = self.find(email)
        if pos is None:
            return False
        return self.get(pos).password == password
"""Access to the application's binary data files."""

from __future__ import annotations

from pathlib import Path
from typing import BinaryIO

USERS_FILE = "Users.bin"
QUESTIONS_FILE = "Questions.bin"


class DatabaseError(RuntimeError):
    """Raised when a data file is used in the wrong state."""


class Database:
    """Holds the users file and the questions file, opened for reading and writing.

    The ``users`` flag of each method selects the file: true for users,
    false for questions.
    """

    def __init__(
        self,
        directory: str | Path = ".",
        users_file: str = USERS_FILE,
        questions_file: str = QUESTIONS_FILE,
    ) -> None:
        base = Path(directory)
        self.users_path = base / users_file
        self.questions_path = base / questions_file
        self._handles: dict[bool, BinaryIO | None] = {True: None, False: None}

    def _path(self, users: bool) -> Path:
        return self.users_path if users else self.questions_path

    def open(self, users: bool) -> BinaryIO:
        """Open the selected file in binary read/write mode and return it.

        The file must already exist; an :class:`OSError` is raised otherwise.
        """
        key = bool(users)
        handle = self._handles[key]
        if handle is not None:
            return handle
        handle = open(self._path(key), "r+b")
        self._handles[key] = handle
        return handle

    def close(self, users: bool) -> None:
        """Close the selected file; raise :class:`DatabaseError` if it is not open."""
        key = bool(users)
        handle = self._handles[key]
        if handle is None:
            name = "User" if key else "Question"
            raise DatabaseError(f"{name} file is not open")
        handle.close()
        self._handles[key] = None

    def is_open(self, users: bool) -> bool:
        """Whether the selected file is currently open."""
        return self._handles[bool(users)] is not None

    def __enter__(self) -> Database:
        return self

    def __exit__(self, *exc_info: object) -> None:
        for key, handle in self._handles.items():
            if handle is not None:
                handle.close()
                self._handles[key] = None
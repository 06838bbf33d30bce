"""User accounts and their fixed-size binary record format."""

from __future__ import annotations

import struct
from dataclasses import dataclass

FIELD_SIZE = 100
"""Bytes reserved for the e-mail and the password in a record, terminator included."""

_RECORD = struct.Struct(f"<{FIELD_SIZE}s{FIELD_SIZE}s?3xiii")
RECORD_SIZE = _RECORD.size
"""Size in bytes of one packed user record."""


def _encode_field(text: str) -> bytes:
    # One byte is always left for the terminating NUL.
    return text.encode("utf-8")[: FIELD_SIZE - 1]


def _decode_field(raw: bytes) -> str:
    return raw.split(b"\0", 1)[0].decode("utf-8", errors="ignore")


@dataclass(eq=False)
class User:
    """A registered account. Users compare and sort by e-mail address alone."""

    email: str = ""
    password: str = ""
    admin: bool = False
    num_surveys: int = 0
    num_questions: int = 0
    rank: int = 1

    def toggle_admin(self) -> None:
        """Flip the account's administrator flag."""
        self.admin = not self.admin

    def pack(self) -> bytes:
        """Encode the user as one fixed-size record."""
        try:
            return _RECORD.pack(
                _encode_field(self.email),
                _encode_field(self.password),
                self.admin,
                self.num_surveys,
                self.num_questions,
                self.rank,
            )
        except struct.error as exc:
            raise ValueError(f"cannot pack user: {exc}") from exc

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return _encode_field(self.email) < _encode_field(other.email)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return _encode_field(self.email) > _encode_field(other.email)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self.email == other.email


def unpack_user(data: bytes) -> User:
    """Decode one record produced by :meth:`User.pack`."""
    if len(data) != RECORD_SIZE:
        raise ValueError(f"a user record is {RECORD_SIZE} bytes, got {len(data)}")
    email, password, admin, surveys, questions, rank = _RECORD.unpack(data)
    return User(
        email=_decode_field(email),
        password=_decode_field(password),
        admin=admin,
        num_surveys=surveys,
        num_questions=questions,
        rank=rank,
    )
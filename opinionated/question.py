"""Survey questions, their answers, and their binary record format."""

from __future__ import annotations

import struct
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import BinaryIO, TextIO

_INT = struct.Struct("<i")
_BOOL = struct.Struct("<?")


@dataclass
class Answer:
    """One possible answer to a question."""

    text: str = ""
    chosen: int = 0
    """Number of times this answer was chosen."""
    custom: bool = False
    """Whether the answer is filled in by the respondent."""


@dataclass
class Question:
    """A question with its answers and response statistics."""

    text: str = ""
    answers: list[Answer] = field(default_factory=list)
    total_responses: int = 0
    multiple_choice: bool = False
    """False for a single-choice question, true for multiple choice."""

    def add_answer(self, answer: Answer) -> None:
        """Append an answer to the end of the list."""
        self.answers.append(answer)

    def delete_answer(self, index: int) -> Answer:
        """Remove and return the answer at ``index``."""
        if not 0 <= index < len(self.answers):
            raise IndexError(f"no answer at position {index}")
        return self.answers.pop(index)

    def render(self) -> str:
        """The question text followed by its numbered answers and a blank line."""
        lines = [self.text]
        lines.extend(
            f"{number}) {answer.text}"
            for number, answer in enumerate(self.answers, start=1)
        )
        return "\n".join(lines) + "\n\n"

    def save(self, stream: BinaryIO) -> None:
        """Write the question to a binary stream."""
        try:
            parts = [_pack_text(self.text), _INT.pack(len(self.answers))]
            for answer in self.answers:
                parts.append(_pack_text(answer.text))
                parts.append(_INT.pack(answer.chosen))
                parts.append(_BOOL.pack(answer.custom))
            parts.append(_INT.pack(self.total_responses))
            parts.append(_BOOL.pack(self.multiple_choice))
        except struct.error as exc:
            raise ValueError(f"cannot encode question: {exc}") from exc
        stream.write(b"".join(parts))


def _pack_text(text: str) -> bytes:
    raw = text.encode("utf-8")
    return _INT.pack(len(raw)) + raw


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    data = stream.read(size)
    if data is None or len(data) != size:
        raise ValueError("truncated question record")
    return data


def _read_int(stream: BinaryIO) -> int:
    return _INT.unpack(_read_exact(stream, _INT.size))[0]


def _read_bool(stream: BinaryIO) -> bool:
    return _read_exact(stream, 1) != b"\x00"


def _read_count(stream: BinaryIO) -> int:
    value = _read_int(stream)
    if value < 0:
        raise ValueError(f"negative length {value} in question record")
    return value


def _read_text(stream: BinaryIO) -> str:
    size = _read_count(stream)
    return _read_exact(stream, size).decode("utf-8", errors="replace")


def load_question(stream: BinaryIO) -> Question:
    """Read one question written by :meth:`Question.save`."""
    text = _read_text(stream)
    count = _read_count(stream)
    answers = []
    for _ in range(count):
        answer_text = _read_text(stream)
        chosen = _read_int(stream)
        custom = _read_bool(stream)
        answers.append(Answer(text=answer_text, chosen=chosen, custom=custom))
    total = _read_int(stream)
    multiple = _read_bool(stream)
    return Question(
        text=text, answers=answers, total_responses=total, multiple_choice=multiple
    )


def _read_yes_no(ask: Callable[[], str], out: TextIO, retry: str) -> bool:
    while True:
        line = ask().strip()
        if not line:
            continue
        choice = line[0]
        if choice in "yY":
            return True
        if choice in "nN":
            return False
        out.write(retry)


def read_answer(ask: Callable[[], str], out: TextIO) -> Answer:
    """Build a new answer interactively.

    ``ask`` returns the next line of input; prompts are written to ``out``.
    A preset answer takes its text from the next line; otherwise the answer
    is a custom fill-in with empty text.
    """
    out.write("Is this a preset answer? (Y/N) ")
    preset = _read_yes_no(ask, out, "Invalid choice. Please re-enter\n")
    if preset:
        out.write("Enter the answer text: ")
        return Answer(text=ask(), chosen=0, custom=False)
    return Answer(text="", chosen=0, custom=True)
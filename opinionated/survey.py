"""Surveys, their binary record format, and the registry of survey IDs."""

from __future__ import annotations

import struct
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import BinaryIO, TextIO

from .question import Question, load_question, read_answer

SURVEY_IDS_FILE = "SurveyIDs.bin"
"""Default file that records the IDs of all existing surveys."""

_INT = struct.Struct("<i")


@dataclass
class Survey:
    """A named survey made of an ordered list of questions."""

    survey_id: int = 0
    name: str = ""
    about: str = ""
    questions: list[Question] = field(default_factory=list)

    def add_question(self, question: Question) -> None:
        """Append a question to the end of the survey."""
        self.questions.append(question)

    def delete_question(self, index: int) -> Question:
        """Remove and return the question at ``index``."""
        if not 0 <= index < len(self.questions):
            raise IndexError(f"no question at position {index}")
        return self.questions.pop(index)

    def save(self, stream: BinaryIO) -> None:
        """Write the survey, followed by each of its questions, to a binary stream."""
        try:
            header = b"".join(
                [
                    _INT.pack(self.survey_id),
                    _pack_text(self.name),
                    _pack_text(self.about),
                    _INT.pack(len(self.questions)),
                ]
            )
        except struct.error as exc:
            raise ValueError(f"cannot encode survey: {exc}") from exc
        stream.write(header)
        for question in self.questions:
            question.save(stream)


def _pack_text(text: str) -> bytes:
    raw = text.encode("utf-8")
    return _INT.pack(len(raw)) + raw


def _read_exact(stream: BinaryIO, size: int, what: str) -> bytes:
    data = stream.read(size)
    if data is None or len(data) != size:
        raise ValueError(f"truncated {what}")
    return data


def _read_int(stream: BinaryIO, what: str) -> int:
    return _INT.unpack(_read_exact(stream, _INT.size, what))[0]


def _read_count(stream: BinaryIO, what: str) -> int:
    value = _read_int(stream, what)
    if value < 0:
        raise ValueError(f"negative length {value} in {what}")
    return value


def _read_text(stream: BinaryIO) -> str:
    size = _read_count(stream, "survey record")
    return _read_exact(stream, size, "survey record").decode("utf-8", errors="replace")


def load_survey(stream: BinaryIO) -> Survey:
    """Read one survey written by :meth:`Survey.save`."""
    survey_id = _read_int(stream, "survey record")
    name = _read_text(stream)
    about = _read_text(stream)
    count = _read_count(stream, "survey record")
    questions = [load_question(stream) for _ in range(count)]
    return Survey(survey_id=survey_id, name=name, about=about, questions=questions)


def _read_ids(path: Path) -> list[int]:
    try:
        data = path.read_bytes()
    except FileNotFoundError:
        return []
    if not data:
        return []
    if len(data) < _INT.size:
        raise ValueError("truncated survey ID file")
    (count,) = _INT.unpack_from(data)
    if count < 0:
        raise ValueError(f"negative count {count} in survey ID file")
    body = data[_INT.size :]
    if len(body) < count * _INT.size:
        raise ValueError("truncated survey ID file")
    return list(struct.unpack_from(f"<{count}i", body))


def allocate_survey_id(path: str | Path = SURVEY_IDS_FILE) -> int:
    """Claim a new survey ID and record it in the ID file.

    The lowest ID freed by a deleted survey is reused; otherwise the next
    ID after the existing ones is taken. The file holds a count followed by
    the sorted IDs, and is created if it does not exist.
    """
    id_path = Path(path)
    ids = _read_ids(id_path)
    new_id = next(
        (position for position, existing in enumerate(ids, start=1) if existing > position),
        len(ids) + 1,
    )
    ids = sorted([*ids, new_id])
    id_path.write_bytes(_INT.pack(len(ids)) + struct.pack(f"<{len(ids)}i", *ids))
    return new_id


def new_survey(id_path: str | Path = SURVEY_IDS_FILE) -> Survey:
    """Create an empty survey with a freshly allocated ID."""
    return Survey(survey_id=allocate_survey_id(id_path))


def _read_count_input(ask: Callable[[], str], out: TextIO) -> int:
    while True:
        line = ask().strip()
        if not line:
            continue
        try:
            value = int(line.split()[0])
        except ValueError:
            value = -1
        if value >= 0:
            return value
        out.write("Invalid choice. Please re-enter.\n")


def _read_single_choice(ask: Callable[[], str], out: TextIO) -> bool:
    while True:
        line = ask().strip()
        if not line:
            continue
        choice = line[0]
        if choice in "yY":
            return True
        if choice in "nN":
            return False
        out.write("Invalid choice. Please re-enter.\n")


def read_question(ask: Callable[[], str], out: TextIO) -> Question:
    """Build a new question interactively.

    ``ask`` returns the next line of input; prompts are written to ``out``.
    """
    out.write("Enter the question text: ")
    question = Question(text=ask())
    out.write("How many answers will this question have: ")
    for _ in range(_read_count_input(ask, out)):
        question.add_answer(read_answer(ask, out))
    out.write("Does this question only allow one response? (Y/N) ")
    question.multiple_choice = not _read_single_choice(ask, out)
    return question
import io
import struct

import pytest

from opinionated.question import Answer, Question
from opinionated.survey import (
    Survey,
    allocate_survey_id,
    load_survey,
    new_survey,
    read_question,
)


def _scripted(lines):
    it = iter(lines)
    return lambda: next(it)


def _sample_survey():
    return Survey(
        survey_id=4,
        name="Food",
        about="What do you like?",
        questions=[
            Question(
                text="Favourite colour?",
                answers=[Answer("Red", 2, False), Answer("", 1, True)],
                total_responses=3,
                multiple_choice=True,
            ),
            Question(text="Why?"),
        ],
    )


def test_save_load_round_trip():
    survey = _sample_survey()
    buf = io.BytesIO()
    survey.save(buf)
    buf.seek(0)
    assert load_survey(buf) == survey
    assert buf.read() == b""


def test_empty_survey_bytes():
    buf = io.BytesIO()
    Survey(survey_id=7, name="A", about="").save(buf)
    assert buf.getvalue() == struct.pack("<ii1sii", 7, 1, b"A", 0, 0)


def test_load_truncated_raises():
    buf = io.BytesIO()
    _sample_survey().save(buf)
    with pytest.raises(ValueError):
        load_survey(io.BytesIO(buf.getvalue()[:-3]))


def test_add_and_delete_question():
    survey = Survey()
    first, second = Question(text="one"), Question(text="two")
    survey.add_question(first)
    survey.add_question(second)
    assert survey.delete_question(0) is first
    assert survey.questions == [second]


def test_delete_question_out_of_range():
    with pytest.raises(IndexError):
        Survey().delete_question(0)


def test_allocate_first_id_creates_file(tmp_path):
    path = tmp_path / "ids.bin"
    assert allocate_survey_id(path) == 1
    assert path.read_bytes() == struct.pack("<ii", 1, 1)


def test_allocate_empty_file(tmp_path):
    path = tmp_path / "ids.bin"
    path.write_bytes(b"")
    assert allocate_survey_id(path) == 1


def test_allocate_sequential_ids(tmp_path):
    path = tmp_path / "ids.bin"
    ids = [allocate_survey_id(path) for _ in range(3)]
    assert ids == [1, 2, 3]
    assert path.read_bytes() == struct.pack("<iiii", 3, 1, 2, 3)


def test_allocate_reuses_gap(tmp_path):
    path = tmp_path / "ids.bin"
    path.write_bytes(struct.pack("<iii", 2, 1, 3))
    assert allocate_survey_id(path) == 2
    assert path.read_bytes() == struct.pack("<iiii", 3, 1, 2, 3)


def test_allocate_truncated_file(tmp_path):
    path = tmp_path / "ids.bin"
    path.write_bytes(struct.pack("<ii", 3, 1))
    with pytest.raises(ValueError):
        allocate_survey_id(path)


def test_new_survey_gets_id(tmp_path):
    path = tmp_path / "ids.bin"
    first = new_survey(path)
    second = new_survey(path)
    assert (first.survey_id, second.survey_id) == (1, 2)
    assert first.questions == [] and first.name == ""


def test_read_question_single_choice():
    out = io.StringIO()
    ask = _scripted(["Favourite colour?", "2", "y", "Red", "n", "y"])
    question = read_question(ask, out)
    assert question.text == "Favourite colour?"
    assert question.answers == [Answer("Red", 0, False), Answer("", 0, True)]
    assert question.multiple_choice is False
    assert "How many answers will this question have: " in out.getvalue()


def test_read_question_multiple_choice_with_retry():
    out = io.StringIO()
    ask = _scripted(["Pick", "0", "x", "N"])
    question = read_question(ask, out)
    assert question.answers == []
    assert question.multiple_choice is True
    assert "Invalid choice. Please re-enter.\n" in out.getvalue()
    assert out.getvalue().startswith("Enter the question text: ")
import io

import pytest

from opinionated.user import User
from opinionated.view import ErrorMessage, Prompt, UserView


@pytest.fixture
def out():
    return io.StringIO()


def test_email_prompt(out):
    UserView(out).prompt(Prompt.EMAIL)
    assert out.getvalue() == "Enter the email address: "


def test_main_menu(out):
    UserView(out).prompt(Prompt.MAIN_MENU)
    assert out.getvalue() == "\nMain Menu\n[1] Login\n[2] Register\n[3] Exit\n>> "


def test_prompt_accepts_plain_number(out):
    UserView(out).prompt(3)
    assert out.getvalue() == "Enter the Password: "


def test_every_prompt_has_text():
    for prompt in Prompt:
        buffer = io.StringIO()
        UserView(buffer).prompt(prompt)
        assert buffer.getvalue()


def test_every_error_has_text():
    for error in ErrorMessage:
        buffer = io.StringIO()
        UserView(buffer).error(error)
        assert buffer.getvalue()


def test_invalid_choice_error(out):
    UserView(out).error(ErrorMessage.INVALID_CHOICE)
    assert out.getvalue() == "Invalid choice.\n"


def test_error_accepts_plain_number(out):
    UserView(out).error(9)
    assert out.getvalue() == "No such Email exists.\n"


def test_unknown_codes_raise(out):
    view = UserView(out)
    with pytest.raises(ValueError):
        view.prompt(99)
    with pytest.raises(ValueError):
        view.error(0)
    assert out.getvalue() == ""


def test_display_user(out):
    password = "password"
    user = User(email="alice@example.com", password=password, num_surveys=10,
                num_questions=4, rank=2)
    UserView(out).display(user)
    lines = out.getvalue().split("\n")
    assert lines[0] == "Email              : alice@example.com"
    assert lines[1] == "Password           : password"
    assert lines[2] == "Surveys Completed  : 10"
    assert lines[3] == "Questions Answered : 4"
    assert lines[4] == "Current Rank       : 2"
    assert out.getvalue().endswith("\n\n")


def test_defaults_to_stdout(capsys):
    UserView().prompt(Prompt.CANCELLED)
    assert capsys.readouterr().out == "Cancelling.\n"
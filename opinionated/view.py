"""Text shown to the user: menus, prompts, error messages and account details."""

from __future__ import annotations

import sys
from enum import IntEnum
from typing import TextIO

from .user import User


class Prompt(IntEnum):
    MAIN_MENU = 1
    EMAIL = 2
    PASSWORD = 3
    USER_MENU = 4
    ADMIN_MENU = 5
    ROLE_MENU = 6
    ACCOUNT_MENU = 7
    CONFIRM_DELETE = 8
    ACCOUNT_REMOVED = 9
    CANCELLED = 10
    MODIFY_MENU = 11
    NEW_VALUE = 12
    MODIFY_EMAIL = 13


class ErrorMessage(IntEnum):
    TOO_SHORT = 1
    TOO_LONG = 2
    BAD_EMAIL = 3
    NO_UPPER = 4
    NO_LOWER = 5
    NO_DIGIT = 6
    INVALID_CHOICE = 7
    EMAIL_EXISTS = 8
    NO_SUCH_EMAIL = 9
    BAD_LOGIN = 10
    CANNOT_MODIFY_SELF = 11


_PROMPTS = {
    Prompt.MAIN_MENU: "\nMain Menu\n[1] Login\n[2] Register\n[3] Exit\n>> ",
    Prompt.EMAIL: "Enter the email address: ",
    Prompt.PASSWORD: "Enter the Password: ",
    Prompt.USER_MENU: (
        "[1] Take Survey\n[2] View Stats\n[3] Update Account\n[4] Logout\n>> "
    ),
    Prompt.ADMIN_MENU: (
        "[1] View All Users\n[2] Add User\n[3] Delete User\n"
        "[4] Modify User\n[5] Exit Menu\n>> "
    ),
    Prompt.ROLE_MENU: "[1] Admin Menu\n[2] User Menu\n[3] Exit Menu\n>> ",
    Prompt.ACCOUNT_MENU: (
        "[1] Change email\n[2] Update Password\n[3] Delete Account\n[4] Exit Menu\n>> "
    ),
    Prompt.CONFIRM_DELETE: (
        "Are you sure? This can't be undone.\n"
        "Enter Y to continue, any other key to cancel.\n>> "
    ),
    Prompt.ACCOUNT_REMOVED: "Account Removed.\n",
    Prompt.CANCELLED: "Cancelling.\n",
    Prompt.MODIFY_MENU: (
        "[1] Modify User's Email \n"
        "[2] Modify User's Password\n"
        "[3] Modify User's Admin Status\n"
        "[4] Modify User's Number of Surveys Completed\n"
        "[5] Modify User's Number of Questions Answered\n"
        "[6] Modify User's Rank\n"
        "[7] Exit Menu\n>> "
    ),
    Prompt.NEW_VALUE: "Enter the new value.\n>> ",
    Prompt.MODIFY_EMAIL: "Enter the email of the user you wish to modify.\n>> ",
}

_ERRORS = {
    ErrorMessage.TOO_SHORT: "Must be at least 7 characters long.\n",
    ErrorMessage.TOO_LONG: "Must be no more than 80 characters long.\n",
    ErrorMessage.BAD_EMAIL: "Invalid email format.\n",
    ErrorMessage.NO_UPPER: "Password must contain an upper case letter.\n",
    ErrorMessage.NO_LOWER: "Password must contain a lower case letter.\n",
    ErrorMessage.NO_DIGIT: "Password must contain a number.\n",
    ErrorMessage.INVALID_CHOICE: "Invalid choice.\n",
    ErrorMessage.EMAIL_EXISTS: "Email already exists.\n",
    ErrorMessage.NO_SUCH_EMAIL: "No such Email exists.\n",
    ErrorMessage.BAD_LOGIN: "User data is not correct.\n",
    ErrorMessage.CANNOT_MODIFY_SELF: (
        "Unable to modify your account, access User Menu to make changes.\n"
        "Press Y to exit, any other key to re-enter.\n>> "
    ),
}


class UserView:
    """Writes user-facing text to a stream (standard output by default)."""

    def __init__(self, out: TextIO | None = None) -> None:
        self._out = out

    def _write(self, text: str) -> None:
        (self._out if self._out is not None else sys.stdout).write(text)

    def prompt(self, prompt: Prompt | int) -> None:
        """Show a menu or input prompt."""
        self._write(_PROMPTS[Prompt(prompt)])

    def error(self, error: ErrorMessage | int) -> None:
        """Show a message explaining a problem with the input."""
        self._write(_ERRORS[ErrorMessage(error)])

    def display(self, user: User) -> None:
        """Show a user's account details."""
        self._write(
            f"Email              : {user.email}\n"
            f"Password           : {user.password}\n"
            f"Surveys Completed  : {user.num_surveys}\n"
            f"Questions Answered : {user.num_questions}\n"
            f"Current Rank       : {user.rank}\n\n"
        )
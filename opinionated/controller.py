"""Interactive account management: menus, login, registration and administration."""

from __future__ import annotations

import argparse
import re
import sys
from typing import TextIO

from .database import USERS_FILE
from .store import UserStore
from .user import FIELD_SIZE, User
from .view import ErrorMessage, Prompt, UserView

MIN_LENGTH = 7
"""Shortest accepted e-mail address or password, in bytes."""

MAX_LENGTH = FIELD_SIZE - 1
"""Longest accepted e-mail address or password, in bytes."""

_EMAIL_PATTERN = re.compile(
    r"\b[A-Za-z0-9_][A-Za-z0-9._-]*[A-Za-z0-9]@[A-Za-z0-9-]+"
    r"(?:\.[A-Za-z0-9-]+)*(?:\.[A-Z|a-z]{2,}\b)",
    re.ASCII,
)


def check_email(email: str) -> bool:
    """Whether the whole string has the shape of an e-mail address.

    The local part may not start or end with a dot, there is exactly one
    ``@``, and the domain ends in a top-level part of at least two letters.
    """
    return _EMAIL_PATTERN.fullmatch(email) is not None


def password_problems(password: str) -> list[ErrorMessage]:
    """The password requirements that ``password`` fails, in a fixed order.

    A password needs an upper case letter, a lower case letter and a digit.
    """
    problems = []
    if not any(ch.isascii() and ch.isupper() for ch in password):
        problems.append(ErrorMessage.NO_UPPER)
    if not any(ch.isascii() and ch.islower() for ch in password):
        problems.append(ErrorMessage.NO_LOWER)
    if not any(ch.isascii() and ch.isdigit() for ch in password):
        problems.append(ErrorMessage.NO_DIGIT)
    return problems


def _byte_length(text: str) -> int:
    return len(text.encode("utf-8"))


def _is_yes(choice: str) -> bool:
    return choice in ("y", "Y")


class UserController:
    """Drives the text menus, reading lines from ``stdin`` and keeping users in ``store``.

    Reading past the end of the input raises :class:`EOFError`.
    """

    def __init__(
        self,
        store: UserStore | None = None,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self.store = store if store is not None else UserStore()
        self._stdin = stdin
        self.view = UserView(stdout)

    # -- input helpers -------------------------------------------------

    def _read_line(self) -> str:
        stream = self._stdin if self._stdin is not None else sys.stdin
        line = stream.readline()
        if not line:
            raise EOFError("end of input")
        return line.rstrip("\r\n")

    def _read_choice(self) -> str:
        while True:
            line = self._read_line().strip()
            if line:
                return line[0]

    def _read_number(self) -> int:
        while True:
            line = self._read_line().strip()
            if not line:
                continue
            try:
                return int(line.split()[0])
            except ValueError:
                self.view.error(ErrorMessage.INVALID_CHOICE)

    def _position(self, email: str) -> int:
        pos = self.store.find(email)
        if pos is None:
            raise LookupError(f"no stored user with e-mail {email!r}")
        return pos

    def _replace_email(self, pos: int, user: User) -> None:
        user.email = self.enter_email()
        self.store.delete(pos)
        self.store.add(user)

    # -- menus ---------------------------------------------------------

    def main_menu(self) -> None:
        """Loop over the opening menu until the user chooses to exit."""
        while True:
            self.view.prompt(Prompt.MAIN_MENU)
            choice = self._read_choice()
            if choice == "1":
                self.login()
            elif choice == "2":
                self.register()
            elif choice == "3":
                return
            elif choice == "a":
                self.display_all()
            elif choice == "d":
                self.store.clear()
            else:
                self.view.error(ErrorMessage.INVALID_CHOICE)

    def login(self) -> None:
        """Check an e-mail and password, then open the matching menu."""
        self.view.prompt(Prompt.EMAIL)
        email = self._read_line()
        pos = self.store.find(email)
        if pos is None:
            self.view.error(ErrorMessage.NO_SUCH_EMAIL)
            return
        self.view.prompt(Prompt.PASSWORD)
        entered = self._read_line()
        if not self.store.verify(email, entered):
            self.view.error(ErrorMessage.BAD_LOGIN)
            return
        user = self.store.get(pos)
        if not user.admin:
            self.user_menu(user)
            return
        while True:
            self.view.prompt(Prompt.ROLE_MENU)
            choice = self._read_choice()
            if choice == "1":
                self.admin_menu(user)
            elif choice == "2":
                self.user_menu(user)
            else:
                return

    def user_menu(self, user: User) -> None:
        """The signed-in user's menu; returns on logout or account deletion."""
        while True:
            self.view.prompt(Prompt.USER_MENU)
            choice = self._read_choice()
            if choice == "1":
                continue
            if choice == "2":
                self.view.display(user)
            elif choice == "3":
                if not self.account_menu(user):
                    return
            elif choice == "4":
                return
            else:
                self.view.error(ErrorMessage.INVALID_CHOICE)

    def account_menu(self, user: User) -> bool:
        """Let a user change their own account; return False if they deleted it."""
        pos = self._position(user.email)
        while True:
            self.view.prompt(Prompt.ACCOUNT_MENU)
            choice = self._read_choice()
            if choice == "1":
                self._replace_email(pos, user)
                pos = self._position(user.email)
            elif choice == "2":
                user.password = self.enter_password()
                self.store.set(pos, user)
            elif choice == "3":
                self.view.prompt(Prompt.CONFIRM_DELETE)
                if _is_yes(self._read_choice()):
                    self.store.delete(pos)
                    self.view.prompt(Prompt.ACCOUNT_REMOVED)
                    return False
                self.view.prompt(Prompt.CANCELLED)
            elif choice == "4":
                return True
            else:
                self.view.error(ErrorMessage.INVALID_CHOICE)

    def admin_menu(self, admin: User) -> None:
        """The administrator's menu for listing, adding, deleting and changing users."""
        while True:
            self.view.prompt(Prompt.ADMIN_MENU)
            choice = self._read_choice()
            if choice == "1":
                self.display_all()
            elif choice == "2":
                self.register()
            elif choice == "3":
                self.view.prompt(Prompt.EMAIL)
                email = self._read_line()
                if email != admin.email:
                    pos = self.store.find(email)
                    if pos is None:
                        self.view.error(ErrorMessage.NO_SUCH_EMAIL)
                    else:
                        self.store.delete(pos)
                else:
                    self.view.error(ErrorMessage.CANNOT_MODIFY_SELF)
                    if _is_yes(self._read_choice()):
                        return
            elif choice == "4":
                self.update_user(admin)
            elif choice == "5":
                return
            else:
                self.view.error(ErrorMessage.INVALID_CHOICE)

    def update_user(self, admin: User) -> None:
        """Let an administrator change another user's details."""
        self.view.prompt(Prompt.MODIFY_EMAIL)
        email = self._read_line()
        if email == admin.email:
            self.view.error(ErrorMessage.CANNOT_MODIFY_SELF)
            self._read_choice()
            return
        pos = self.store.find(email)
        if pos is None:
            self.view.error(ErrorMessage.NO_SUCH_EMAIL)
            return
        user = self.store.get(pos)
        while True:
            self.view.prompt(Prompt.MODIFY_MENU)
            choice = self._read_choice()
            if choice == "1":
                # The record moves when the e-mail changes, so leave the menu.
                self._replace_email(pos, user)
                return
            if choice == "2":
                user.password = self.enter_password()
            elif choice == "3":
                user.toggle_admin()
            elif choice in ("4", "5", "6"):
                self.view.prompt(Prompt.NEW_VALUE)
                value = self._read_number()
                if choice == "4":
                    user.num_surveys = value
                elif choice == "5":
                    user.num_questions = value
                else:
                    user.rank = value
            elif choice == "7":
                return
            else:
                self.view.error(ErrorMessage.INVALID_CHOICE)
                continue
            self.store.set(pos, user)

    # -- account details -----------------------------------------------

    def register(self) -> User:
        """Ask for a new e-mail and password, store the new user and return it."""
        email = self.enter_email()
        new_password = self.enter_password()
        user = User(email, new_password)
        self.store.add(user)
        return user

    def enter_email(self) -> str:
        """Read lines until one is a well-formed, unused e-mail address."""
        self.view.prompt(Prompt.EMAIL)
        while True:
            email = self._read_line()
            size = _byte_length(email)
            taken = self.store.find(email) is not None
            well_formed = check_email(email)
            if size < MIN_LENGTH:
                self.view.error(ErrorMessage.TOO_SHORT)
            if size > MAX_LENGTH:
                self.view.error(ErrorMessage.TOO_LONG)
            if not well_formed:
                self.view.error(ErrorMessage.BAD_EMAIL)
            if taken:
                self.view.error(ErrorMessage.EMAIL_EXISTS)
            if MIN_LENGTH <= size <= MAX_LENGTH and well_formed and not taken:
                return email

    def enter_password(self) -> str:
        """Read lines until one meets the length and character requirements."""
        self.view.prompt(Prompt.PASSWORD)
        while True:
            entered = self._read_line()
            size = _byte_length(entered)
            if size < MIN_LENGTH:
                self.view.error(ErrorMessage.TOO_SHORT)
            if size > MAX_LENGTH:
                self.view.error(ErrorMessage.TOO_LONG)
            if not MIN_LENGTH <= size <= MAX_LENGTH:
                continue
            problems = password_problems(entered)
            for problem in problems:
                self.view.error(problem)
            if not problems:
                return entered

    def display_all(self) -> None:
        """Show every stored user."""
        for user in self.store.users():
            self.view.display(user)


def main(argv: list[str] | None = None) -> int:
    """Run the interactive menus against a users file."""
    parser = argparse.ArgumentParser(
        prog="opinionated", description="Find out who's the most opinionated."
    )
    parser.add_argument(
        "--users", default=USERS_FILE, help="file holding the user records"
    )
    args = parser.parse_args(argv)
    controller = UserController(UserStore(args.users))
    try:
        controller.main_menu()
    except (EOFError, KeyboardInterrupt):
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())
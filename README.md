# opinionated

Find out who is the most opinionated. `opinionated` is a small console
application for a survey service. People register an account and log in.
Administrators manage the accounts. Surveys and questions can be built,
saved and loaded from Python.

## Running it

After installing the package, start the interactive menu:

```
opinionated
```

By default the user records are kept in `Users.bin` in the current
directory. Use `--users PATH` to pick another file:

```
opinionated --users accounts.bin
```

The main menu offers:

```
[1] Login
[2] Register
[3] Exit
```

The main menu also accepts two unlisted keys:

- `a` lists every stored user.
- `d` erases all user records.

Reaching the end of the input, or pressing Ctrl-C, ends the program.

### Registering

Registering asks for an e-mail address and a password.

- The e-mail address must be 7 to 99 bytes long and look like an address,
  for example `someone@example.com`. It must not already be in use.
- The password must be 7 to 99 bytes long and contain an ASCII upper-case
  letter, a lower-case letter and a digit.

Each problem with an entry is reported, and the prompt repeats until a valid
entry is given.

### After logging in

A regular user's menu offers these choices:

- View their statistics: surveys completed, questions answered and rank.
- Change their e-mail address or password.
- Delete their account, after a confirmation.

An administrator first chooses between the admin menu and the user menu.
The admin menu can:

- list all users;
- add a user;
- delete a user;
- change another user's details: e-mail, password, admin status, survey count, question count and rank.

Administrators cannot delete or change their own account from the admin menu.

## Data files

`Users.bin` holds one fixed-size record per user. The records are kept
sorted by e-mail address. Each record holds these fields:

- e-mail: 100 bytes;
- password: 100 bytes;
- admin flag;
- survey count;
- question count;
- rank.

Survey identifiers are recorded in `SurveyIDs.bin` when they are allocated
through `opinionated.survey.allocate_survey_id`. The file holds a count
followed by the sorted IDs. A new survey reuses the lowest free ID.

## Using it as a library

### `opinionated.user`

- `User` is an account record. Users compare and sort by e-mail address.
- `User.toggle_admin()` flips the admin flag.
- `User.pack()` and `unpack_user(data)` convert a user to and from a `RECORD_SIZE`-byte record.

### `opinionated.store`

`UserStore(path)` manages the sorted user file. It offers:

- `count()`
- `users()`
- `find(email)`, which returns a position or `None`
- `get(pos)`
- `set(pos, user)`
- `add(user)`
- `delete(pos)`
- `clear()`
- `verify(email, password)`

A missing file counts as an empty store.

### `opinionated.question`

- `Answer` and `Question` model a question and its answers.
- `Question.add_answer`, `Question.delete_answer` and `Question.render` edit and show a question.
- `Question.save(stream)` and `load_question(stream)` write and read a question on a binary stream.
- `read_answer(ask, out)` builds an answer interactively. `ask` returns the next input line, and prompts are written to `out`.

### `opinionated.survey`

- `Survey` holds an ID, a name, a description and a list of questions.
- `Survey.add_question` and `Survey.delete_question` edit the list of questions.
- `Survey.save(stream)` and `load_survey(stream)` write and read a survey.
- `allocate_survey_id(path)` claims an ID.
- `new_survey(id_path)` creates an empty survey with a fresh ID.
- `read_question(ask, out)` builds a question interactively.

### `opinionated.database`

`Database(directory)` opens and closes `Users.bin` or `Questions.bin` in
read/write binary mode. It provides `open(users)`, `close(users)` and
`is_open(users)`, and it works as a context manager.

- Opening a file that does not exist raises `OSError`.
- Closing a file that is not open raises `DatabaseError`.

### `opinionated.view`

`UserView` writes the menus, prompts, error messages and account details.
The `Prompt` and `ErrorMessage` enumerations name them.

### `opinionated.controller`

- `UserController` runs the menus against a `UserStore`, reading from and writing to the streams it is given.
- `check_email(email)` and `password_problems(password)` apply the account rules above.

## What it does not do

Surveys cannot be taken from the console. The "Take Survey" entry in the
user menu does nothing, and no menu creates, lists or answers surveys or
questions. Response statistics are stored with each question and answer, but
nothing records responses or reports on them.

Registration never creates an administrator, and the first administrator
cannot be made from the menus. Create one from Python with
`UserStore.add(User(..., admin=True))`.

Passwords are stored in plain text.

## Tests

Install the test extra and run pytest:

```
pip install -e .[test]
pytest
```
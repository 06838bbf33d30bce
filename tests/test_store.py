import pytest

from opinionated.store import UserStore
from opinionated.user import RECORD_SIZE, User

PASSWORD = "password"


@pytest.fixture
def store(tmp_path):
    return UserStore(tmp_path / "Users.bin")


def make_user(email, password=PASSWORD, **kwargs):
    return User(email=email, password=password, **kwargs)


def test_missing_file_is_empty(store):
    assert store.count() == 0
    assert store.users() == []
    assert store.find("alice@example.com") is None


def test_add_keeps_records_sorted(store):
    for email in ["carol@example.com", "alice@example.com", "bob@example.com"]:
        store.add(make_user(email))
    assert [u.email for u in store.users()] == [
        "alice@example.com",
        "bob@example.com",
        "carol@example.com",
    ]
    assert store.count() == 3


def test_file_size_is_whole_records(store):
    store.add(make_user("alice@example.com"))
    store.add(make_user("bob@example.com"))
    assert store.path.stat().st_size == 2 * RECORD_SIZE


def test_get_round_trips_all_fields(store):
    original = make_user(
        "alice@example.com", admin=True, num_surveys=4, num_questions=9, rank=3
    )
    store.add(original)
    loaded = store.get(0)
    assert loaded.email == original.email
    assert loaded.password == original.password
    assert loaded.admin is True
    assert (loaded.num_surveys, loaded.num_questions, loaded.rank) == (4, 9, 3)


def test_find_positions(store):
    for email in ["bob@example.com", "alice@example.com", "dave@example.com"]:
        store.add(make_user(email))
    assert store.find("alice@example.com") == 0
    assert store.find("bob@example.com") == 1
    assert store.find("dave@example.com") == 2
    assert store.find("carol@example.com") is None
    assert store.find("zed@example.com") is None


def test_set_overwrites_record(store):
    store.add(make_user("alice@example.com"))
    store.add(make_user("bob@example.com"))
    updated = make_user("bob@example.com", rank=7)
    store.set(1, updated)
    assert store.get(1).rank == 7
    assert store.get(0).email == "alice@example.com"
    assert store.count() == 2


def test_delete_removes_and_returns(store):
    for email in ["alice@example.com", "bob@example.com", "carol@example.com"]:
        store.add(make_user(email))
    removed = store.delete(1)
    assert removed.email == "bob@example.com"
    assert [u.email for u in store.users()] == [
        "alice@example.com",
        "carol@example.com",
    ]
    assert store.find("bob@example.com") is None


@pytest.mark.parametrize("pos", [-1, 1, 5])
def test_out_of_range_positions(store, pos):
    store.add(make_user("alice@example.com"))
    with pytest.raises(IndexError):
        store.get(pos)
    with pytest.raises(IndexError):
        store.set(pos, make_user("bob@example.com"))
    with pytest.raises(IndexError):
        store.delete(pos)


def test_clear_empties_store(store):
    store.add(make_user("alice@example.com"))
    store.clear()
    assert store.count() == 0
    assert store.path.exists()


def test_verify(store):
    store.add(make_user("alice@example.com"))
    assert store.verify("alice@example.com", PASSWORD) is True
    assert store.verify("alice@example.com", "secret") is False
    assert store.verify("nobody@example.com", PASSWORD) is False


def test_partial_trailing_bytes_ignored(store):
    store.add(make_user("alice@example.com"))
    with store.path.open("ab") as handle:
        handle.write(b"\x01\x02\x03")
    assert store.count() == 1
    assert [u.email for u in store.users()] == ["alice@example.com"]
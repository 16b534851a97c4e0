import json
import uuid

import pytest

from architects.users import UserDataError, UserInformation, UserStore, hash_password


@pytest.fixture
def store(tmp_path):
    return UserStore(tmp_path / "userinfo.json")


def test_hash_password_known_vector():
    assert hash_password("abc") == (
        "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
    )


def test_hash_password_is_hex_and_stable():
    password = "password"
    digest = hash_password(password)
    assert len(digest) == 64
    assert all(ch in "0123456789abcdef" for ch in digest)
    assert hash_password(password) == digest


def test_load_missing_file_raises(store):
    with pytest.raises(UserDataError):
        store.load()


def test_load_non_array_raises(store):
    store.path.write_text('{"username": "alice"}', encoding="utf-8")
    with pytest.raises(UserDataError):
        store.load()


def test_load_invalid_json_raises(store):
    store.path.write_text("not json", encoding="utf-8")
    with pytest.raises(UserDataError):
        store.load()


def test_save_and_load_round_trip(store):
    users = [{"username": "alice", "uid": "u1", "winNum": 2}]
    store.save(users)
    assert store.load() == users


def test_username_not_taken_without_file(store):
    assert store.is_username_taken("alice") is False


def test_register_creates_record(store):
    password = "password"
    info = store.register("alice", password)
    records = json.loads(store.path.read_text(encoding="utf-8"))
    assert len(records) == 1
    record = records[0]
    assert record["username"] == "alice"
    assert record["uid"] == info.uid
    assert record["password"] == hash_password(password)
    assert record["password"] != password
    assert (record["winNum"], record["loseNum"], record["drawNum"]) == (0, 0, 0)


def test_register_uid_is_uuid_without_braces(store):
    password = "password"
    info = store.register("alice", password)
    assert str(uuid.UUID(info.uid)) == info.uid


def test_username_taken_after_register(store):
    password = "password"
    store.register("alice", password)
    assert store.is_username_taken("alice") is True
    assert store.is_username_taken("bob") is False


def test_login_success(store):
    password = "password"
    registered = store.register("alice", password)
    user = store.login("alice", password)
    assert user == UserInformation(username="alice", uid=registered.uid)


def test_login_wrong_password(store):
    password = "password"
    wrong_password = "secret"
    store.register("alice", password)
    assert store.login("alice", wrong_password) is None
    assert store.login("bob", password) is None


def test_login_without_file(store):
    password = "password"
    assert store.login("alice", password) is None


def test_store_updates_tally(store):
    password = "password"
    store.register("bob", password)
    store.register("alice", password)
    user = store.login("alice", password)
    user.wins += 1
    user.draws += 2
    assert store.store(user) is True
    again = store.login("alice", password)
    assert (again.wins, again.losses, again.draws) == (user.wins, 0, user.draws)
    other = store.login("bob", password)
    assert (other.wins, other.losses, other.draws) == (0, 0, 0)


def test_store_unknown_uid_leaves_file(store):
    password = "password"
    store.register("alice", password)
    before = store.path.read_text(encoding="utf-8")
    assert store.store(UserInformation(username="ghost", uid="missing", wins=5)) is False
    assert store.path.read_text(encoding="utf-8") == before


def test_store_without_file(store):
    assert store.store(UserInformation(username="ghost", uid="missing")) is False
    assert not store.path.exists()
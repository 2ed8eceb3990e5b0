import pytest

from lowbudgetspotify.users import User, UserStore


@pytest.fixture
def user_file(tmp_path):
    path = tmp_path / "user.txt"
    path.write_text("Ann,Lee,password\nBob,Ray,secret\n", encoding="utf-8")
    return path


def test_load_reads_all_users(user_file):
    store = UserStore(user_file)
    store.load()
    assert len(store) == 2
    assert [u.name for u in store] == ["Ann", "Bob"]


def test_find_returns_user(user_file):
    store = UserStore(user_file)
    store.load()
    password = "secret"
    assert store.find("Bob", "Ray") == User("Bob", "Ray", password)


def test_find_unknown_returns_none(user_file):
    store = UserStore(user_file)
    store.load()
    assert store.find("Ann", "Ray") is None
    assert store.exists("Ann", "Ray") is False
    assert store.exists("Ann", "Lee") is True


def test_check_password(user_file):
    store = UserStore(user_file)
    store.load()
    password = "password"
    assert store.check_password("Ann", "Lee", password) is True
    wrong = "secret"
    assert store.check_password("Ann", "Lee", wrong) is False


def test_check_password_unknown_user(user_file):
    store = UserStore(user_file)
    store.load()
    password = "password"
    with pytest.raises(LookupError):
        store.check_password("Nobody", "Here", password)


def test_add_persists(tmp_path):
    path = tmp_path / "user.txt"
    store = UserStore(path)
    password = "token"
    added = store.add("Cat", "Moe", password)
    assert store.find("Cat", "Moe") == added

    reloaded = UserStore(path)
    reloaded.load()
    assert list(reloaded) == [User("Cat", "Moe", password)]


def test_add_appends_to_existing(user_file):
    store = UserStore(user_file)
    store.load()
    password = "placeholder"
    store.add("Dan", "Ode", password)
    reloaded = UserStore(user_file)
    reloaded.load()
    assert len(reloaded) == 3
    assert reloaded.check_password("Dan", "Ode", password) is True


def test_password_keeps_commas(tmp_path):
    path = tmp_path / "user.txt"
    path.write_text("Eve,Fox,a,b\n", encoding="utf-8")
    store = UserStore(path)
    store.load()
    assert store.find("Eve", "Fox").password == "a,b"


def test_load_missing_file(tmp_path):
    store = UserStore(tmp_path / "absent.txt")
    with pytest.raises(FileNotFoundError):
        store.load()
import re

from services.identity import generate_user_id, is_valid_user_id, load_or_create_user_id


def test_generate_user_id_format():
    user_id = generate_user_id()
    assert re.fullmatch(r"user_[0-9a-z]{9}", user_id)


def test_generate_user_id_is_random():
    assert len({generate_user_id() for _ in range(50)}) == 50


def test_is_valid_user_id():
    assert is_valid_user_id("user_abc123xyz")
    assert not is_valid_user_id(None)
    assert not is_valid_user_id("")
    assert not is_valid_user_id("bad id; drop")
    assert not is_valid_user_id("x" * 65)


def test_load_or_create_persists_identifier(tmp_path):
    path = tmp_path / "state" / "user_id"

    first = load_or_create_user_id(path)
    second = load_or_create_user_id(path)

    assert first == second
    assert path.read_text(encoding="utf-8") == first


def test_load_or_create_replaces_malformed_file(tmp_path):
    path = tmp_path / "user_id"
    path.write_text("not a valid id!", encoding="utf-8")

    user_id = load_or_create_user_id(path)

    assert user_id.startswith("user_")
    assert path.read_text(encoding="utf-8") == user_id

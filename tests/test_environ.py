import pytest

from minishell.environ import Environment, byte_compare, is_valid_identifier


@pytest.fixture
def environment():
    return Environment(["HOME=/home/user", "PATH=/usr/bin:/bin", "PWD=/tmp"])


def test_get_existing(environment):
    assert environment.get("HOME") == "/home/user"
    assert environment.get("PATH") == "/usr/bin:/bin"


def test_get_missing(environment):
    assert environment.get("OLDPWD") is None


def test_get_needs_exact_name():
    env = Environment(["PATH2=/opt", "PAT=/x"])
    assert env.get("PATH") is None


def test_get_value_with_equals():
    env = Environment(["A=b=c"])
    assert env.get("A") == "b=c"


def test_set_replaces_in_place(environment):
    before = environment.entries()
    environment.set("PATH", "/sbin")
    after = environment.entries()
    assert len(after) == len(before)
    assert after.index("PATH=/sbin") == before.index("PATH=/usr/bin:/bin")
    assert environment.get("PATH") == "/sbin"


def test_set_appends_new(environment):
    environment.set("OLDPWD", "/tmp")
    assert environment.entries()[-1] == "OLDPWD=/tmp"
    assert environment.get("OLDPWD") == "/tmp"


def test_set_empty_value(environment):
    environment.set("EMPTY", "")
    assert environment.get("EMPTY") == ""


def test_remove(environment):
    environment.remove("PATH")
    assert environment.get("PATH") is None
    assert environment.entries() == ["HOME=/home/user", "PWD=/tmp"]


def test_remove_missing_is_ignored(environment):
    before = environment.entries()
    environment.remove("NOPE")
    assert environment.entries() == before


def test_bare_name_is_kept_but_not_found(environment):
    environment.add("LONELY")
    assert "LONELY" in environment.entries()
    assert environment.get("LONELY") is None
    assert "LONELY" not in environment.as_dict()


def test_set_after_bare_name_appends():
    env = Environment(["LONELY"])
    env.set("LONELY", "1")
    assert env.entries() == ["LONELY", "LONELY=1"]


def test_entries_is_a_copy(environment):
    snapshot = environment.entries()
    snapshot.append("X=1")
    assert environment.get("X") is None


def test_as_dict_first_wins():
    env = Environment(["A=1", "A=2", "B=3"])
    result = env.as_dict()
    assert result["A"] == env.get("A")
    assert result["B"] == "3"


def test_default_uses_process_environment(monkeypatch):
    monkeypatch.setenv("MINISHELL_TEST_VAR", "value")
    env = Environment()
    assert env.get("MINISHELL_TEST_VAR") == "value"


@pytest.mark.parametrize("var", ["_a1", "HOME", "A=b c", "x_Y_9=", "_"])
def test_valid_identifiers(var):
    assert is_valid_identifier(var) is True


@pytest.mark.parametrize("var", ["", None, "1a", "a-b", "=x", "a b=1", "$HOME"])
def test_invalid_identifiers(var):
    assert is_valid_identifier(var) is False


def test_byte_compare_equal():
    assert byte_compare("export", "export") == 0
    assert byte_compare("", "") == 0


def test_byte_compare_order():
    assert byte_compare("a", "b") < 0
    assert byte_compare("b", "a") > 0
    assert byte_compare("ab", "a") > 0
    assert byte_compare("a", "ab") < 0


def test_byte_compare_antisymmetric():
    pairs = [("HOME", "PATH"), ("PWD", "PW"), ("Z", "a"), ("é", "e")]
    for a, b in pairs:
        assert byte_compare(a, b) == -byte_compare(b, a)


def test_byte_compare_non_ascii_sorts_after_ascii():
    assert byte_compare("é", "z") > 0


def test_byte_compare_sorts_like_bytes():
    names = ["PWD", "HOME", "_", "PATH", "OLDPWD", "a"]
    ordered = sorted(names, key=str.encode)
    for first, second in zip(ordered, ordered[1:]):
        assert byte_compare(first, second) < 0
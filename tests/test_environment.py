import pytest

from marvelsh.environment import env_init, format_env


def test_entries_without_separator_are_skipped():
    env = env_init(["A=1", "NOEQ", "B=2"])
    assert env == {"A": "1", "B": "2"}


def test_value_keeps_later_equals_signs():
    env = env_init(["OPTS=a=b=c"])
    assert env["OPTS"] == "a=b=c"


def test_empty_value_is_kept():
    env = env_init(["EMPTY="])
    assert env == {"EMPTY": ""}


def test_order_is_preserved():
    env = env_init(["Z=1", "A=2", "M=3"])
    assert list(env) == ["Z", "A", "M"]


def test_first_duplicate_wins():
    env = env_init(["K=first", "K=second"])
    assert env["K"] == "first"


def test_format_skips_missing_values():
    assert format_env({"A": "1", "B": None}) == "A=1\n"


def test_format_empty_table():
    assert format_env({}) == ""


@pytest.mark.parametrize(
    "entries",
    [
        ["HOME=/home/user", "PATH=/bin:/usr/bin"],
        ["X=", "Y=a=b"],
        [],
    ],
)
def test_round_trip(entries):
    assert format_env(env_init(entries)) == "".join(f"{e}\n" for e in entries)
import pytest

from marvelsh.expander import expand, expand_token_value, extract_var_name
from marvelsh.tokens import Token, TokenType


def test_extract_var_name_stops_at_non_name_char():
    assert extract_var_name("HOME/x", 0) == ("HOME", 4)


def test_extract_var_name_from_offset():
    assert extract_var_name("a$USER_1-z", 2) == ("USER_1", 8)


def test_extract_var_name_empty():
    assert extract_var_name("?x", 0) == ("", 0)


def test_known_variable_is_replaced():
    assert expand_token_value("$HOME/x", {"HOME": "/home/user"}) == "/home/user/x"


def test_unknown_variable_vanishes():
    assert expand_token_value("a$NOPE b", {}) == "a b"


@pytest.mark.parametrize("text", ["$", "a$ b", "$$", "no dollar"])
def test_literal_dollars_are_kept(text):
    assert expand_token_value(text, {"A": "1"}) == text


def test_dollar_before_non_name_char_is_dropped():
    assert expand_token_value("$?", {}) == "?"


def test_adjacent_variables():
    env = {"A": "left", "B": "right"}
    assert expand_token_value("$A-$B", env) == "left-right"


def test_expand_only_touches_words_with_dollar():
    tokens = [
        Token(TokenType.WORD, "$USER"),
        Token(TokenType.PIPE, "|"),
        Token(TokenType.WORD, "plain"),
        Token(TokenType.DQUOTE, "$USER"),
    ]
    result = expand(tokens, {"USER": "someone"})
    assert result[0] == Token(TokenType.WORD, "someone")
    assert result[1:] == tokens[1:]


def test_expand_leaves_input_unchanged():
    tokens = [Token(TokenType.WORD, "$X")]
    expand(tokens, {"X": "y"})
    assert tokens == [Token(TokenType.WORD, "$X")]
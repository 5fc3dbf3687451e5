"""Splitting a command line into tokens and handling quoted tokens."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum, auto


class TokenType(Enum):
    WORD = auto()
    PIPE = auto()
    INPUT = auto()
    OUTPUT = auto()
    APPEND = auto()
    HEREDOC = auto()
    ENV = auto()
    SQUOTE = auto()
    DQUOTE = auto()


@dataclass(frozen=True)
class Token:
    type: TokenType
    value: str


class UnclosedQuoteError(ValueError):
    """Raised when a quoted section has no closing quote."""


_OPERATORS = "|<>"
_BLANKS = " \t"
_QUOTES = "'\""
_WORD_STOP = _OPERATORS + _BLANKS + _QUOTES

_DOUBLE_OPERATORS = {">>": TokenType.APPEND, "<<": TokenType.HEREDOC}
_SINGLE_OPERATORS = {
    "|": TokenType.PIPE,
    ">": TokenType.OUTPUT,
    "<": TokenType.INPUT,
}


def tokenize(line: str) -> list[Token]:
    """Split ``line`` into tokens.

    Quoted sections become ``SQUOTE``/``DQUOTE`` tokens holding the text
    between the quotes. Raises :class:`UnclosedQuoteError` if a quote is
    never closed.
    """
    tokens: list[Token] = []
    i = 0
    length = len(line)
    while i < length:
        while i < length and line[i] in _BLANKS:
            i += 1
        if i >= length:
            break
        ch = line[i]
        pair = line[i : i + 2]
        if pair in _DOUBLE_OPERATORS:
            tokens.append(Token(_DOUBLE_OPERATORS[pair], pair))
            i += 2
        elif ch in _SINGLE_OPERATORS:
            tokens.append(Token(_SINGLE_OPERATORS[ch], ch))
            i += 1
        elif ch in _QUOTES:
            end = line.find(ch, i + 1)
            if end == -1:
                raise UnclosedQuoteError(f"unclosed quote {ch} at position {i}")
            kind = TokenType.DQUOTE if ch == '"' else TokenType.SQUOTE
            tokens.append(Token(kind, line[i + 1 : end]))
            i = end + 1
        else:
            start = i
            while i < length and line[i] not in _WORD_STOP:
                i += 1
            tokens.append(Token(TokenType.WORD, line[start:i]))
    return tokens


def remove_outer_quotes(text: str, quote: str) -> str:
    """Strip ``quote`` from both ends of ``text`` if it is there on both."""
    if len(text) >= 2 and text[0] == quote and text[-1] == quote:
        return text[1:-1]
    return text


def manage_quotes(tokens: list[Token]) -> list[Token]:
    """Turn quoted tokens into plain words, stripping any outer quotes."""
    quote_for = {TokenType.SQUOTE: "'", TokenType.DQUOTE: '"'}
    result = []
    for token in tokens:
        quote = quote_for.get(token.type)
        if quote is None:
            result.append(token)
        else:
            result.append(
                replace(
                    token,
                    type=TokenType.WORD,
                    value=remove_outer_quotes(token.value, quote),
                )
            )
    return result
"""Variable expansion in word tokens."""

from __future__ import annotations

import string
from collections.abc import Mapping
from dataclasses import replace

from marvelsh.tokens import Token, TokenType

_NAME_CHARS = frozenset(string.ascii_letters + string.digits + "_")


def extract_var_name(text: str, start: int) -> tuple[str, int]:
    """Read a variable name from ``text`` at ``start``.

    Returns the name and the index just past it.
    """
    end = start
    while end < len(text) and text[end] in _NAME_CHARS:
        end += 1
    return text[start:end], end


def expand_token_value(text: str, env: Mapping[str, str]) -> str:
    """Replace ``$NAME`` references in ``text`` with values from ``env``.

    Unknown names expand to nothing. A ``$`` at the end, or followed by a
    space or another ``$``, is kept literally.
    """
    parts: list[str] = []
    i = 0
    while i < len(text):
        if (
            text[i] == "$"
            and i + 1 < len(text)
            and text[i + 1] not in (" ", "$")
        ):
            name, i = extract_var_name(text, i + 1)
            value = env.get(name)
            if value is not None:
                parts.append(value)
        else:
            parts.append(text[i])
            i += 1
    return "".join(parts)


def expand(tokens: list[Token], env: Mapping[str, str]) -> list[Token]:
    """Expand variables in every word token that contains ``$``."""
    return [
        replace(token, value=expand_token_value(token.value, env))
        if token.type is TokenType.WORD and "$" in token.value
        else token
        for token in tokens
    ]
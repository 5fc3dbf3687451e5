"""Syntax checks on a token list before it is parsed into commands."""

from __future__ import annotations

from collections.abc import Sequence

from marvelsh.tokens import Token, TokenType

_REDIRECTIONS = frozenset(
    {TokenType.OUTPUT, TokenType.APPEND, TokenType.INPUT, TokenType.HEREDOC}
)


class ShellSyntaxError(Exception):
    """Raised for a token that cannot appear where it does."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"bash: syntax error near unexpected token `{token}'")


def check_syntax(tokens: Sequence[Token]) -> bool:
    """Check a token list for misplaced pipes and redirections.

    Returns ``False`` for an empty list (nothing to run) and ``True`` for a
    valid one; raises :class:`ShellSyntaxError` otherwise.
    """
    if not tokens:
        return False
    if tokens[0].type is TokenType.PIPE:
        raise ShellSyntaxError("|")
    for current, following in zip(tokens, [*tokens[1:], None]):
        if current.type is TokenType.PIPE:
            if following is None or following.type is TokenType.PIPE:
                raise ShellSyntaxError("|")
        elif current.type in _REDIRECTIONS:
            if following is None or following.type is not TokenType.WORD:
                raise ShellSyntaxError(current.value)
    return True
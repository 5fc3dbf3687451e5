"""Turning a checked token list into a pipeline of commands."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from marvelsh.syntax import ShellSyntaxError
from marvelsh.tokens import Token, TokenType

_ARGUMENT_TYPES = frozenset(
    {TokenType.WORD, TokenType.ENV, TokenType.SQUOTE, TokenType.DQUOTE}
)
_REDIRECTION_SYMBOLS = {
    TokenType.INPUT: "<",
    TokenType.OUTPUT: ">",
    TokenType.APPEND: ">>",
    TokenType.HEREDOC: "<<",
}


@dataclass
class Redirection:
    """A redirection operator and the file it applies to."""

    type: str
    file: str


@dataclass
class Command:
    """One stage of a pipeline: its arguments and its redirections."""

    args: list[str] = field(default_factory=list)
    redirections: list[Redirection] = field(default_factory=list)


def parse_tokens(tokens: Iterable[Token]) -> list[Command]:
    """Group tokens into commands separated by pipes.

    Always returns at least one command. A redirection without a following
    token raises :class:`ShellSyntaxError`.
    """
    commands = [Command()]
    stream = iter(tokens)
    for token in stream:
        current = commands[-1]
        if token.type in _ARGUMENT_TYPES:
            current.args.append(token.value)
        elif token.type in _REDIRECTION_SYMBOLS:
            target = next(stream, None)
            if target is None:
                raise ShellSyntaxError(token.value)
            current.redirections.append(
                Redirection(_REDIRECTION_SYMBOLS[token.type], target.value)
            )
        elif token.type is TokenType.PIPE:
            commands.append(Command())
    return commands
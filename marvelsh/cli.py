"""The interactive shell loop and dispatch of builtins."""

from __future__ import annotations

import os
import sys
from collections.abc import MutableMapping
from typing import TextIO

try:
    import readline  # noqa: F401  (enables line editing and history for input())
except ImportError:  # pragma: no cover
    readline = None

from marvelsh import builtins
from marvelsh.environment import env_init, format_env
from marvelsh.executor import run_command
from marvelsh.expander import expand
from marvelsh.parser import parse_tokens
from marvelsh.syntax import ShellSyntaxError, check_syntax
from marvelsh.tokens import UnclosedQuoteError, manage_quotes, tokenize

PROMPT = "marvel$ "

_BUILTIN_NAMES = ("echo", "cd", "pwd", "export", "unset", "env", "exit")


def is_builtin(name: str) -> bool:
    """Tell whether ``name`` starts with the name of a builtin."""
    return name.startswith(_BUILTIN_NAMES)


def run_builtin(line: str, env: MutableMapping[str, str], out: TextIO) -> None:
    """Run the builtin that ``line`` starts with, writing its output to ``out``.

    ``exit`` raises :class:`marvelsh.builtins.ShellExit` to leave the shell.
    """
    if line.startswith("echo"):
        out.write(builtins.echo(line, env))
    elif line.startswith("cd"):
        try:
            builtins.cd(line, env)
        except OSError as exc:
            print(f"cd: {exc.strerror or exc}", file=sys.stderr)
    elif line.startswith("env"):
        out.write(format_env(env))
    elif line.startswith("pwd"):
        out.write(builtins.pwd(line, env))
    elif line.startswith("exit"):
        out.write(builtins.exit_shell(line))


def process_line(line: str, env: MutableMapping[str, str], out: TextIO) -> int:
    """Tokenize, check and run one command line.

    Returns 1 when nothing ran, 0 otherwise.
    """
    try:
        tokens = tokenize(line)
    except UnclosedQuoteError:
        return 1
    tokens = expand(manage_quotes(tokens), env)
    try:
        if not check_syntax(tokens):
            return 1
        commands = parse_tokens(tokens)
    except ShellSyntaxError as exc:
        out.write(f"{exc}\n")
        return 1
    first = commands[0]
    if first.args and is_builtin(first.args[0]):
        run_builtin(line, env, out)
        return 0
    out.flush()
    return run_command(first, env)


def main(argv: list[str] | None = None) -> int:
    """Read and run command lines until end of input or ``exit``."""
    env = env_init(f"{key}={value}" for key, value in os.environ.items())
    out = sys.stdout
    while True:
        try:
            line = input(PROMPT)
        except EOFError:
            out.write("exit\n")
            break
        try:
            process_line(line, env, out)
        except builtins.ShellExit as exc:
            out.write(exc.output)
            out.flush()
            return exc.status
        out.flush()
    return 0
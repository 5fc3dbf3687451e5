"""Built-in commands: echo, cd, pwd and exit."""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping, MutableMapping

from marvelsh.expander import extract_var_name

_DIGITS = "0123456789"
_QUOTES = "'\""
_C_WHITESPACE = " \t\n\v\f\r"


class ShellExit(Exception):
    """Raised when the shell should terminate with ``status``.

    ``output`` holds the text to print before leaving.
    """

    def __init__(self, status: int, output: str = "") -> None:
        self.status = status
        self.output = output
        super().__init__(f"exit {status}")


def _split_words(line: str) -> list[str]:
    return [word for word in line.split(" ") if word]


def expand_env(text: str, env: Mapping[str, str]) -> str:
    """Replace every ``$NAME`` in ``text``; unknown names become empty."""
    parts: list[str] = []
    i = 0
    while i < len(text):
        if text[i] == "$" and i + 1 < len(text):
            name, i = extract_var_name(text, i + 1)
            parts.append(env.get(name, ""))
        else:
            parts.append(text[i])
            i += 1
    return "".join(parts)


def parse_echo_arguments(line: str, env: Mapping[str, str]) -> str:
    """Remove quotes from ``line`` and expand variables as echo sees them.

    Single-quoted text is kept as is, double-quoted text is expanded.
    ``$`` followed by digits yields the digits themselves.
    """
    parts: list[str] = []
    i = 0
    n = len(line)
    while i < n:
        ch = line[i]
        if ch in _QUOTES:
            end = line.find(ch, i + 1)
            if end == -1:
                end = n
            segment = line[i + 1 : end]
            if ch == '"':
                segment = expand_env(segment, env)
            parts.append(segment)
            i = min(end + 1, n)
        elif ch == "$" and i + 1 < n:
            start = i + 1
            j = start
            while j < n and line[j] in _DIGITS:
                j += 1
            if j > start:
                parts.append(line[start:j])
                i = j
            else:
                name, i = extract_var_name(line, start)
                parts.append(env.get(name, ""))
        elif ch == "$":
            parts.append(ch)
            i += 1
        else:
            start = i
            while i < n and line[i] not in "'\"$":
                i += 1
            parts.append(line[start:i])
    return "".join(parts)


def is_echo_flag(word: str | None) -> bool:
    """Tell whether ``word`` is a ``-n`` style option (``-``, ``-n``, ``-nnn``)."""
    if not word or word[0] != "-":
        return False
    return all(ch == "n" for ch in word[1:])


def echo(line: str, env: Mapping[str, str]) -> str:
    """Return what ``echo`` prints for the whole command ``line``."""
    args = _split_words(parse_echo_arguments(line, env))
    if len(args) > 1 and not is_echo_flag(args[1]):
        return " ".join(args[1:]) + "\n"
    return " ".join(args[2:])


def cd(line: str, env: MutableMapping[str, str]) -> None:
    """Change directory and refresh ``OLDPWD`` and ``PWD`` where they exist.

    Raises :class:`OSError` when the directory cannot be entered.
    """
    args = _split_words(line)
    previous = os.getcwd()
    if len(args) < 2 or args[1] == "~":
        target = env.get("HOME")
        missing = "HOME"
    elif args[1] == "-":
        target = env.get("OLDPWD")
        missing = "OLDPWD"
    else:
        target = args[1]
        missing = ""
    if target is None:
        raise OSError(f"{missing} not set")
    os.chdir(target)
    if "OLDPWD" in env:
        env["OLDPWD"] = previous
    if "PWD" in env:
        env["PWD"] = os.getcwd()


def pwd(line: str, env: Mapping[str, str]) -> str:
    """Return the ``PWD`` variable as ``pwd`` prints it."""
    if len(_split_words(line)) > 1:
        print("pwd: too many arguments", file=sys.stderr)
    value = env.get("PWD")
    return "" if value is None else f"{value}\n"


def is_number(text: str) -> bool:
    """Tell whether ``text`` is an optional sign followed by digits only."""
    body = text[1:] if text[:1] in ("+", "-") else text
    return bool(body) and all(ch in _DIGITS for ch in body)


def atoi(text: str) -> int:
    """Parse a leading integer the way C ``atoi`` does, wrapping to 32 bits."""
    i = 0
    n = len(text)
    while i < n and text[i] in _C_WHITESPACE:
        i += 1
    sign = 1
    if i < n and text[i] in "+-":
        if text[i] == "-":
            sign = -1
        i += 1
    result = 0
    while i < n and text[i] in _DIGITS:
        result = result * 10 + int(text[i])
        i += 1
    value = (result * sign) & 0xFFFFFFFF
    return value - (1 << 32) if value >= 1 << 31 else value


def exit_shell(line: str) -> str:
    """Run the ``exit`` builtin.

    Raises :class:`ShellExit` to leave the shell. With too many arguments
    it does not leave and returns the text to print instead.
    """
    args = _split_words(line)
    output = "exit\n"
    if len(args) > 1 and not is_number(args[1]):
        raise ShellExit(
            2, output + f"minishell: exit: {args[1]}: numeric argument required\n"
        )
    if len(args) > 2:
        return output + "minishell: exit: too many arguments\n"
    status = atoi(args[1]) if len(args) > 1 else 0
    raise ShellExit(status & 0xFF, output)
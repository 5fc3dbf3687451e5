"""Running external commands."""

from __future__ import annotations

import subprocess
import sys
from collections.abc import Mapping

from marvelsh.parser import Command

_BIN_PREFIX = "/bin/"


def env_to_list(env: Mapping[str, str]) -> list[str]:
    """Turn the variable table into ``KEY=VALUE`` strings, in order."""
    return [f"{key}={value}" for key, value in env.items()]


def resolve_path(name: str) -> str:
    """Return the program path for ``name``, looking it up under ``/bin/``."""
    if name.startswith(_BIN_PREFIX):
        return name
    return _BIN_PREFIX + name


def run_command(command: Command, env: Mapping[str, str]) -> int:
    """Run ``command`` as a child process and wait for it.

    Returns 1 when there is nothing to run and 0 otherwise. A program that
    cannot be started is reported on standard error.
    """
    if not command.args:
        return 1
    path = resolve_path(command.args[0])
    child_env = {key: value for key, value in env.items() if value is not None}
    try:
        subprocess.run(command.args, executable=path, env=child_env, check=False)
    except OSError as exc:
        print(f"Couldn't execute: {exc.strerror or exc}", file=sys.stderr)
    return 0
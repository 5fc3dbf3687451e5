"""Environment handling: building the shell's variable table and printing it."""

from __future__ import annotations

from collections.abc import Iterable, Mapping


def env_init(entries: Iterable[str]) -> dict[str, str]:
    """Build an ordered variable table from ``KEY=VALUE`` strings.

    Entries without an ``=`` are ignored. The value is everything after the
    first ``=``. When a key appears more than once, the first one wins.
    """
    env: dict[str, str] = {}
    for entry in entries:
        key, sep, value = entry.partition("=")
        if not sep:
            continue
        env.setdefault(key, value)
    return env


def format_env(env: Mapping[str, str | None]) -> str:
    """Render the table as ``env`` prints it, skipping variables without a value."""
    return "".join(
        f"{key}={value}\n" for key, value in env.items() if value is not None
    )
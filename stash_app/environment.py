"""Environment variable lookups with interactive fallback."""

from __future__ import annotations

import os
from typing import MutableMapping, Optional

from .prompts import LineReader, read_line, read_non_empty

Environment = MutableMapping[str, str]


def _resolve(env: Optional[Environment]) -> Environment:
    return os.environ if env is None else env


def get_or_default(name: str, default: str, *, env: Optional[Environment] = None) -> str:
    """Return the value of ``name`` or ``default`` when it is not set."""

    value = _resolve(env).get(name)
    if value is None:
        return default
    return value


def get_or_prompt(
    name: str,
    prompt_message: str,
    masked: bool = False,
    confirm: bool = False,
    *,
    env: Optional[Environment] = None,
    reader: LineReader = read_line,
) -> str:
    """Return ``name`` from the environment, asking the user when it is unset.

    A prompted value is written back into the environment so later lookups
    (and child processes, for ``os.environ``) see it. With ``confirm`` the
    value must be typed twice; a mismatch starts the whole lookup over.
    """

    store = _resolve(env)
    while True:
        value = store.get(name)
        if value is not None:
            return value

        print(f"☠️  {name} not set.")
        first = read_non_empty(prompt_message, masked, reader=reader)
        if not confirm:
            store[name] = first
            return first

        print("Please confirm by entering again.")
        second = read_non_empty(prompt_message, masked, reader=reader)
        if first == second:
            store[name] = first
            return first
        print("Entries do not match. Please try again.")


__all__ = ["Environment", "get_or_default", "get_or_prompt"]

"""Terminal prompts with validation and retry."""

from __future__ import annotations

from enum import Enum
from typing import Callable, Dict

from prompt_toolkit import prompt

LineReader = Callable[[str, bool], str]
Validator = Callable[[str], bool]

YES_NO_HINT = " (yes/y/no/yes-to-all/no-to-all): "


class UserResponse(Enum):
    YES = "yes"
    NO = "no"
    YES_TO_ALL = "yes-to-all"
    NO_TO_ALL = "no-to-all"


_RESPONSES: Dict[str, UserResponse] = {
    "y": UserResponse.YES,
    "yes": UserResponse.YES,
    "n": UserResponse.NO,
    "no": UserResponse.NO,
    "yes-to-all": UserResponse.YES_TO_ALL,
    "no-to-all": UserResponse.NO_TO_ALL,
}


def read_line(message: str, masked: bool = False) -> str:
    """Read one line from the terminal, hiding the input when ``masked``.

    End of input is reported as an empty string.
    """

    try:
        return prompt(message, is_password=masked)
    except EOFError:
        return ""


def read_non_empty(message: str, masked: bool = False, *, reader: LineReader = read_line) -> str:
    """Prompt until the user enters something."""

    while True:
        line = reader(message, masked)
        if line:
            return line
        print("🙀 Input cannot be empty.")


def read_validated(
    message: str,
    masked: bool,
    validator: Validator,
    *,
    reader: LineReader = read_line,
) -> str:
    """Prompt until ``validator`` accepts the entered line.

    The validator is responsible for telling the user why a value was
    rejected; this loop only re-prompts.
    """

    while True:
        line = reader(message, masked)
        if validator(line):
            return line


def _is_yes_no(value: str) -> bool:
    if value in _RESPONSES:
        return True
    print("Invalid response. Must be one of yes/y/no/n/yes-to-all/no-to-all.")
    return False


def read_yes_no(message: str, *, reader: LineReader = read_line) -> UserResponse:
    """Ask a yes/no question, also offering the yes-to-all/no-to-all answers."""

    response = read_validated(message + YES_NO_HINT, False, _is_yes_no, reader=reader)
    return _RESPONSES[response]


__all__ = [
    "LineReader",
    "UserResponse",
    "Validator",
    "YES_NO_HINT",
    "read_line",
    "read_non_empty",
    "read_validated",
    "read_yes_no",
]

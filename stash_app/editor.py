"""Helper utilities for launching a text editor."""

from __future__ import annotations

import os
import subprocess
import tempfile
from typing import Optional

from .environment import Environment, get_or_prompt
from .prompts import LineReader, read_line

DEFAULT_EDITOR = "vim"


class EditorError(RuntimeError):
    """Raised when content cannot be edited in the external editor."""


class EditorLaunchError(EditorError):
    """Raised when the editor executable cannot be started."""


class EditorEncodeError(EditorError):
    """Raised when the content to edit cannot be encoded as UTF-8."""


class EditorDecodeError(EditorError):
    """Raised when the edited file is not valid UTF-8."""


def editor_executable(command: str) -> str:
    """Return the executable named by an ``EDITOR`` value.

    Only the first word is used; arguments after it are ignored.
    """

    parts = command.split()
    return parts[0] if parts else DEFAULT_EDITOR


def _suffix(file_extension: str) -> str:
    if not file_extension or file_extension.startswith("."):
        return file_extension
    return f".{file_extension}"


def edit(
    file_extension: str,
    initial_content: str,
    *,
    env: Optional[Environment] = None,
    reader: LineReader = read_line,
) -> str:
    """Open ``initial_content`` in the user's editor and return the edited text."""

    command = get_or_prompt("EDITOR", "Enter editor path: ", False, False, env=env, reader=reader)
    editor = editor_executable(command)

    try:
        payload = initial_content.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise EditorEncodeError("Content to edit is not valid UTF-8 text") from exc

    with tempfile.NamedTemporaryFile("wb", suffix=_suffix(file_extension), delete=False) as tmp:
        tmp.write(payload)
        tmp_path = tmp.name

    try:
        try:
            subprocess.run([editor, tmp_path], check=False)
        except OSError as exc:
            raise EditorLaunchError(f"Failed to launch editor '{editor}'") from exc

        with open(tmp_path, "rb") as handle:
            data = handle.read()
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise EditorDecodeError(f"Edited file {tmp_path} is not valid UTF-8") from exc
    finally:
        try:
            os.remove(tmp_path)
        except OSError:
            pass


__all__ = [
    "DEFAULT_EDITOR",
    "EditorDecodeError",
    "EditorEncodeError",
    "EditorError",
    "EditorLaunchError",
    "edit",
    "editor_executable",
]

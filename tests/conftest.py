from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterable, List, Tuple

import pytest


class ScriptedReader:
    """Line reader that replays canned answers and records each prompt."""

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines = iter(lines)
        self.calls: List[Tuple[str, bool]] = []

    def __call__(self, message: str, masked: bool) -> str:
        self.calls.append((message, masked))
        try:
            return next(self._lines)
        except StopIteration:
            raise AssertionError(f"Unexpected prompt: {message!r}") from None


@pytest.fixture
def scripted() -> Callable[..., ScriptedReader]:
    def _make(*lines: str) -> ScriptedReader:
        return ScriptedReader(lines)

    return _make


@pytest.fixture
def stub_editor(tmp_path: Path) -> Callable[[str], Path]:
    """Write an executable shell script that stands in for an editor."""

    def _make(body: str) -> Path:
        script = tmp_path / "stub-editor.sh"
        script.write_text("#!/bin/sh\n" + body + "\n", encoding="utf-8")
        script.chmod(0o755)
        return script

    return _make

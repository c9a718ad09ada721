from __future__ import annotations

import os

import pytest

from stash_app.environment import get_or_default, get_or_prompt


def test_get_or_default_returns_default_when_unset() -> None:
    assert get_or_default("MISSING", "fallback", env={}) == "fallback"


def test_get_or_default_returns_value_unchanged() -> None:
    env = {"PRESENT": "  spaced value  "}

    assert get_or_default("PRESENT", "fallback", env=env) == "  spaced value  "


def test_get_or_default_keeps_empty_value() -> None:
    assert get_or_default("EMPTY", "fallback", env={"EMPTY": ""}) == ""


def test_get_or_default_reads_process_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("STASH_TEST_VALUE", "from-os")

    assert get_or_default("STASH_TEST_VALUE", "fallback") == "from-os"


def test_get_or_prompt_returns_existing_value_without_prompting(scripted) -> None:
    env = {"TOKEN": "abc"}
    reader = scripted()

    assert get_or_prompt("TOKEN", "Token: ", env=env, reader=reader) == "abc"
    assert reader.calls == []
    assert env == {"TOKEN": "abc"}


def test_get_or_prompt_stores_prompted_value(scripted, capsys) -> None:
    env: dict = {}
    reader = scripted("secret")

    assert get_or_prompt("X", "Enter X: ", True, False, env=env, reader=reader) == "secret"
    assert env == {"X": "secret"}
    assert reader.calls == [("Enter X: ", True)]
    assert "X not set." in capsys.readouterr().out


def test_get_or_prompt_skips_empty_entries(scripted) -> None:
    env: dict = {}
    reader = scripted("", "value")

    assert get_or_prompt("X", "Enter X: ", env=env, reader=reader) == "value"
    assert env["X"] == "value"


def test_get_or_prompt_with_matching_confirmation(scripted, capsys) -> None:
    env: dict = {}
    reader = scripted("secret", "secret")

    assert get_or_prompt("Y", "Enter Y: ", True, True, env=env, reader=reader) == "secret"
    assert env == {"Y": "secret"}
    assert "Please confirm by entering again." in capsys.readouterr().out


def test_get_or_prompt_mismatch_restarts_whole_flow(scripted, capsys) -> None:
    env: dict = {}
    reader = scripted("secret", "other", "abc", "abc")

    assert get_or_prompt("Y", "Enter Y: ", True, True, env=env, reader=reader) == "abc"
    assert env == {"Y": "abc"}

    out = capsys.readouterr().out
    assert out.count("Entries do not match. Please try again.") == 1
    assert out.count("Y not set.") == 2


def test_get_or_prompt_mismatch_never_stores_either_entry(scripted) -> None:
    env: dict = {}
    seen = []

    def reader(message: str, masked: bool) -> str:
        seen.append(dict(env))
        return ["one", "two", "three", "three"][len(seen) - 1]

    assert get_or_prompt("Z", "Z: ", False, True, env=env, reader=reader) == "three"
    assert all(snapshot == {} for snapshot in seen)


def test_get_or_prompt_writes_process_environment(monkeypatch: pytest.MonkeyPatch, scripted) -> None:
    monkeypatch.setenv("STASH_TEST_PROMPTED", "placeholder")
    monkeypatch.delenv("STASH_TEST_PROMPTED")
    reader = scripted("typed")

    assert get_or_prompt("STASH_TEST_PROMPTED", "Value: ", reader=reader) == "typed"
    assert os.environ["STASH_TEST_PROMPTED"] == "typed"

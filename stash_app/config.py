"""Configuration helpers for the stash CLI."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .editor import DEFAULT_EDITOR
from .environment import Environment, get_or_default
from .paths import normalize

PROJECT_ROOT = Path(__file__).resolve().parent.parent
ENV_PATH = PROJECT_ROOT / ".env"

DEFAULT_STASH_DIRECTORY = ".stash"

# Load .env from the project root (if present) regardless of current working dir
if ENV_PATH.exists():
    load_dotenv(ENV_PATH)
else:
    load_dotenv()


@dataclass(frozen=True)
class Settings:
    """Runtime configuration loaded from environment variables."""

    stash_directory: Path
    editor: str


def get_stash_directory(*, env: Optional[Environment] = None) -> Path:
    """Return the absolute stash directory from ``STASH_DIRECTORY``."""

    raw_value = get_or_default("STASH_DIRECTORY", DEFAULT_STASH_DIRECTORY, env=env)
    return normalize(raw_value)


def create_stash_directory_if_not_exists(*, env: Optional[Environment] = None) -> Path:
    path = get_stash_directory(env=env)
    path.mkdir(parents=True, exist_ok=True)
    return path


def get_settings(*, env: Optional[Environment] = None) -> Settings:
    """Return application settings.

    Not cached: interactive prompts may set variables while the process runs.
    """

    return Settings(
        stash_directory=get_stash_directory(env=env),
        editor=get_or_default("EDITOR", DEFAULT_EDITOR, env=env),
    )


__all__ = [
    "DEFAULT_STASH_DIRECTORY",
    "PROJECT_ROOT",
    "Settings",
    "create_stash_directory_if_not_exists",
    "get_settings",
    "get_stash_directory",
]

"""Path helpers for locating and preparing files on disk."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Union

PathLike = Union[str, os.PathLike]


def normalize(path: PathLike) -> Path:
    """Expand a leading ``~`` and resolve ``path`` to an absolute path."""

    return Path(path).expanduser().resolve()


def ensure_parent_dirs(file_path: PathLike) -> None:
    """Create the parent directory of ``file_path`` and any missing ancestors."""

    normalize(file_path).parent.mkdir(parents=True, exist_ok=True)


__all__ = ["PathLike", "normalize", "ensure_parent_dirs"]

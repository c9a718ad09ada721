"""Command-line interface entry point for stash."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import List, Sequence, Tuple

from .config import create_stash_directory_if_not_exists, get_settings
from .editor import EditorError, edit
from .environment import get_or_prompt
from .logging_utils import setup_console_logging
from .paths import ensure_parent_dirs, normalize
from .prompts import UserResponse, read_yes_no
from .timing import with_timing


def _print_help() -> None:
    print("stash - interactive command-line helpers")
    print("")
    print("Usage: stash [--verbose] <command> [args]")
    print("")
    print("Commands:")
    print("  stash dir                          - Create the stash directory and print its path")
    print("  stash config                       - Show the stash directory and editor in effect")
    print("  stash env NAME [--secret] [--confirm]")
    print("                                     - Print NAME, prompting for it when unset")
    print("  stash edit PATH                    - Edit a file in $EDITOR and save on confirmation")
    print("  stash help                         - Show this help")
    print("")
    print("Environment: STASH_DIRECTORY (default .stash), EDITOR (default vim)")


def _extract_flag(args: Sequence[str], flag: str) -> Tuple[bool, List[str]]:
    args_list = list(args)
    found = False
    while flag in args_list:
        args_list.remove(flag)
        found = True
    return found, args_list


def _handle_dir(args: Sequence[str]) -> int:
    path = create_stash_directory_if_not_exists()
    print(path)
    return 0


def _handle_config(args: Sequence[str]) -> int:
    settings = get_settings()
    print(f"STASH_DIRECTORY={settings.stash_directory}")
    print(f"EDITOR={settings.editor}")
    return 0


def _handle_env(args: Sequence[str]) -> int:
    secret, remaining = _extract_flag(args, "--secret")
    confirm, remaining = _extract_flag(remaining, "--confirm")
    if len(remaining) != 1:
        print("Usage: stash env NAME [--secret] [--confirm]")
        return 1

    name = remaining[0]
    value = get_or_prompt(name, f"Enter {name}: ", secret, confirm)
    print(f"{name}={'****' if secret else value}")
    return 0


def _read_text(path: Path) -> str:
    if not path.exists():
        return ""
    return path.read_text(encoding="utf-8")


def _handle_edit(args: Sequence[str]) -> int:
    if len(args) != 1:
        print("Usage: stash edit PATH")
        return 1

    path = normalize(args[0])
    try:
        original = _read_text(path)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"❌ Cannot read {path}: {exc}")
        return 1

    try:
        edited = with_timing(f"edit {path.name}", edit, path.suffix, original)
    except EditorError as exc:
        print(f"❌ {exc}")
        return 1

    if edited == original:
        print("No changes made.")
        return 0

    response = read_yes_no(f"Save changes to {path}?")
    if response not in {UserResponse.YES, UserResponse.YES_TO_ALL}:
        print("❌ Changes discarded.")
        return 1

    ensure_parent_dirs(path)
    path.write_text(edited, encoding="utf-8")
    print(f"✅ Saved {path}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = list(argv) if argv is not None else sys.argv[1:]

    verbose, args = _extract_flag(args, "--verbose")
    setup_console_logging(verbose)

    if not args:
        _print_help()
        return 1

    command, *rest = args

    try:
        if command == "dir":
            return _handle_dir(rest)

        if command == "config":
            return _handle_config(rest)

        if command == "env":
            return _handle_env(rest)

        if command == "edit":
            return _handle_edit(rest)
    except KeyboardInterrupt:
        print("\nCancelled.")
        return 130

    if command == "help":
        _print_help()
        return 0

    print(f"Unknown command: {command}")
    print("Use 'stash help' to see available commands")
    return 1


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())

"""Turning a command argument into an executable path and argument list."""

from __future__ import annotations

import os
from typing import Mapping, Optional

from .strings import split

_EXPLICIT_PREFIXES = ("/", "./", "..")


class CommandError(Exception):
    """A command could not be resolved to an executable."""


def split_command(arg: str) -> list[str]:
    """Split a command argument on spaces, dropping empty words."""
    return split(arg, " ")


def is_explicit_path(word: str) -> bool:
    """True when the word names a file directly rather than via PATH.

    Words starting with ``/``, ``./`` or ``..`` are explicit paths.
    """
    return word.startswith(_EXPLICIT_PREFIXES)


def find_in_path(cmd: str, env: Optional[Mapping[str, str]] = None) -> Optional[str]:
    """Locate an executable for ``cmd``.

    ``cmd`` itself is returned when it is executable as given. Otherwise
    each directory of the environment's PATH is tried in order. Returns
    ``None`` when nothing executable is found; raises ``CommandError``
    when the environment has no PATH.
    """
    if os.access(cmd, os.X_OK):
        return cmd
    environment = os.environ if env is None else env
    if "PATH" not in environment:
        raise CommandError("path not found")
    for directory in split(environment["PATH"], ":"):
        candidate = f"{directory}/{cmd}"
        if os.access(candidate, os.X_OK):
            return candidate
    return None


def resolve_command(
    arg: str, env: Optional[Mapping[str, str]] = None
) -> tuple[str, list[str]]:
    """Return the executable path and argument list for a command argument."""
    if not arg:
        raise CommandError("command not found")
    words = split_command(arg)
    path: Optional[str] = None
    if words and is_explicit_path(words[0]):
        if not os.path.lexists(words[0]):
            raise CommandError(f"file not found: {words[0]}")
        path = words[0]
    elif words:
        path = find_in_path(words[0], env)
    if path is None:
        raise CommandError(f"command not found: {arg}")
    return path, words
"""Search for executables along the PATH."""

from __future__ import annotations

import errno
import os
from collections.abc import Iterable, Mapping

from pipex.textutil import split


def find_command(directories: Iterable[str], command: str) -> str | None:
    """Return the first ``directory/command`` that is executable, or None."""
    for directory in directories:
        candidate = f"{directory}/{command}"
        if os.access(candidate, os.X_OK):
            return candidate
    return None


def resolve_command(command: str, env: Mapping[str, str] | None = None) -> str | None:
    """Locate ``command`` using the PATH of ``env`` (default: the process environment).

    Returns the full path, or None when no PATH directory holds an
    executable of that name.  Raises FileNotFoundError when PATH is unset
    or empty.
    """
    if env is None:
        env = os.environ
    search_path = env.get("PATH")
    if not search_path:
        raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), command)
    return find_command(split(search_path, ":"), command)
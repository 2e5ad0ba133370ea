"""Expand command-line file patterns into concrete paths."""

from __future__ import annotations

import fnmatch
import os

DEFAULT_IGNORE = {
    ".git", "bin", "obj", "node_modules", "packages", ".vs", ".idea",
    "TestResults",
}

_WILDCARDS = ("*", "?", "[")


def _should_ignore(name: str) -> bool:
    """Check if a directory name matches ignore patterns."""
    return name in DEFAULT_IGNORE or name.startswith(".")


def has_wildcard(pattern: str) -> bool:
    return any(c in pattern for c in _WILDCARDS)


def _match_directory(directory: str, name_pattern: str) -> list[str]:
    try:
        names = sorted(os.listdir(directory or "."))
    except OSError:
        return []
    return [
        os.path.join(directory, name) for name in names
        if fnmatch.fnmatch(name, name_pattern)
        and os.path.isfile(os.path.join(directory or ".", name))
    ]


def _match_recursive(directory: str, name_pattern: str) -> list[str]:
    matches = []
    for dirpath, dirnames, filenames in os.walk(directory or "."):
        # Filter ignored directories in-place
        dirnames[:] = [d for d in sorted(dirnames) if not _should_ignore(d)]
        for filename in sorted(filenames):
            if fnmatch.fnmatch(filename, name_pattern):
                path = os.path.join(dirpath, filename)
                if not directory:
                    path = os.path.relpath(path)
                matches.append(path)
    return matches


def find_files(patterns: list[str] | tuple[str, ...], recursive: bool = False) -> list[str]:
    """Return the files named by ``patterns``, in order and without duplicates.

    A plain path is returned as given unless ``recursive`` is set, so a
    missing file is reported when it is loaded. Wildcards match file names
    only. With ``recursive`` the file-name part is also matched in every
    sub-directory, skipping build output and tooling directories.
    """
    found: list[str] = []
    seen: set[str] = set()

    for pattern in patterns:
        directory, name_pattern = os.path.split(pattern)

        if recursive:
            paths = _match_recursive(directory, name_pattern)
        elif has_wildcard(name_pattern):
            paths = _match_directory(directory, name_pattern)
        else:
            paths = [pattern]

        for path in paths:
            key = os.path.normcase(os.path.abspath(path))
            if key not in seen:
                seen.add(key)
                found.append(path)

    return found

"""Helpers for collecting artifact files."""

from __future__ import annotations

import os
from typing import Iterator


def _walk(root: str) -> Iterator[str]:
    with os.scandir(root) as entries:
        ordered = sorted(entries, key=lambda entry: entry.name)
    for entry in ordered:
        if entry.is_dir():
            yield from _walk(entry.path)
        else:
            yield entry.path


def walk_dir(directory: str) -> list[str]:
    """Return the paths of all files under ``directory``, relative to it, in lexical walk order."""
    if not os.path.lexists(directory):
        raise FileNotFoundError(f'directory "{directory}" does not exist')
    if not os.path.isdir(directory):
        return ["."]
    return [os.path.relpath(path, directory) for path in _walk(directory)]
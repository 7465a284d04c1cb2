"""The shell's own copy of the environment, kept as ``NAME=value`` entries."""

from __future__ import annotations

import os
from typing import Iterable

from minishell.text import is_alnum, is_alpha


class Environment:
    """An ordered list of environment entries.

    Entries normally have the form ``NAME=value``; an exported name with no
    value is kept as a bare ``NAME``.
    """

    def __init__(self, entries: Iterable[str] | None = None) -> None:
        if entries is None:
            entries = (f"{key}={value}" for key, value in os.environ.items())
        self._entries: list[str] = list(entries)

    def _index(self, name: str) -> int | None:
        prefix = f"{name}="
        for index, entry in enumerate(self._entries):
            if entry.startswith(prefix):
                return index
        return None

    def get(self, name: str) -> str | None:
        """Return the value of *name*, or None when it has no ``NAME=`` entry."""
        index = self._index(name)
        if index is None:
            return None
        return self._entries[index][len(name) + 1:]

    def add(self, var: str) -> None:
        """Append *var* as a new entry, as given."""
        self._entries.append(var)

    def set(self, name: str, value: str) -> None:
        """Replace the entry for *name* with ``name=value``, or append it."""
        entry = f"{name}={value}"
        index = self._index(name)
        if index is None:
            self._entries.append(entry)
        else:
            self._entries[index] = entry

    def remove(self, name: str) -> None:
        """Remove the entry for *name*; a missing name is ignored."""
        index = self._index(name)
        if index is not None:
            del self._entries[index]

    def entries(self) -> list[str]:
        """Return a copy of all entries in order."""
        return list(self._entries)

    def as_dict(self) -> dict[str, str]:
        """Return the entries that carry a value, the first of each name winning."""
        result: dict[str, str] = {}
        for entry in self._entries:
            name, sep, value = entry.partition("=")
            if sep and name not in result:
                result[name] = value
        return result


def is_valid_identifier(var: str | None) -> bool:
    """True when the part of *var* before any ``=`` is a valid variable name."""
    if not var:
        return False
    if not (is_alpha(var[0]) or var[0] == "_"):
        return False
    name = var.partition("=")[0]
    return all(is_alnum(char) or char == "_" for char in name)


def byte_compare(s1: str | bytes, s2: str | bytes) -> int:
    """Compare two strings byte by byte.

    Returns zero when they are equal, otherwise the difference between the
    bytes at the first mismatch, the end of a string counting as zero.
    """
    a = s1.encode() if isinstance(s1, str) else bytes(s1)
    b = s2.encode() if isinstance(s2, str) else bytes(s2)
    for x, y in zip(a, b):
        if x != y:
            return x - y
    if len(a) == len(b):
        return 0
    return a[len(b)] if len(a) > len(b) else -b[len(a)]
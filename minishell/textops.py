"""Building new strings from old ones: slicing, joining, trimming, splitting, mapping."""

from __future__ import annotations

from typing import Callable


def substring(s: str, start: int, length: int) -> str:
    """Return at most *length* characters of *s* beginning at *start*.

    A start at or beyond the end of *s* yields the empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(s):
        return ""
    return s[start:start + length]


def join(s1: str, s2: str) -> str:
    """Return *s1* followed by *s2*."""
    return f"{s1}{s2}"


def trim(s: str, charset: str) -> str:
    """Strip every character found in *charset* from both ends of *s*."""
    if not charset:
        return s
    return s.strip(charset)


def split(s: str, sep: str) -> list[str]:
    """Split *s* on the single character *sep*, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [piece for piece in s.split(sep) if piece]


def map_indexed(s: str, func: Callable[[int, str], str]) -> str:
    """Return a new string built from ``func(index, char)`` for each character."""
    return "".join(func(index, char) for index, char in enumerate(s))


def iter_indexed(s: str, func: Callable[[int, str], object]) -> None:
    """Call ``func(index, char)`` for every character of *s* in order."""
    for index, char in enumerate(s):
        func(index, char)
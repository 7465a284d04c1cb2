"""Character classification, number conversion and string searching."""

from __future__ import annotations

_INT_BITS = 32
_LONG_BITS = 64
_WHITESPACE = frozenset("\t\n\v\f\r ")


def _code(c: str | int) -> int:
    """Return the code point of a one-character string, or the integer itself."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return c


def _wrap(value: int, bits: int) -> int:
    """Reduce *value* to a signed integer of the given width."""
    mask = (1 << bits) - 1
    value &= mask
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _terminated(s: str) -> str:
    """Return the part of *s* before its first NUL character."""
    end = s.find("\0")
    return s if end < 0 else s[:end]


def is_alpha(c: str | int) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(c: str | int) -> bool:
    """True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: str | int) -> bool:
    """True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: str | int) -> bool:
    """True for a code point in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def is_print(c: str | int) -> bool:
    """True for a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def to_upper(c: str | int) -> str | int:
    """Upper-case an ASCII lower-case letter; anything else is returned as is."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return chr(code) if isinstance(c, str) else code


def to_lower(c: str | int) -> str | int:
    """Lower-case an ASCII upper-case letter; anything else is returned as is."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return chr(code) if isinstance(c, str) else code


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way the C library does.

    Leading whitespace is skipped, one optional sign is read, then digits up to
    the first non-digit. Text with no digits yields 0. The result is reduced to
    a 32-bit signed integer.
    """
    text = _terminated(text)
    pos = 0
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    result = 0
    while pos < len(text) and is_digit(text[pos]):
        result = _wrap(result * 10 + int(text[pos]), _LONG_BITS)
        pos += 1
    return _wrap(sign * result, _INT_BITS)


def itoa(n: int) -> str:
    """Return the decimal representation of *n*."""
    return str(n)


def find_char(s: str, c: str | int) -> int | None:
    """Return the index of the first *c* in *s*, or None.

    Searching for the NUL character finds the end of the string.
    """
    s = _terminated(s)
    ch = chr(_code(c))
    if ch == "\0":
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def rfind_char(s: str, c: str | int) -> int | None:
    """Return the index of the last *c* in *s*, or None.

    Searching for the NUL character finds the end of the string.
    """
    s = _terminated(s)
    ch = chr(_code(c))
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def compare(s1: str, s2: str, n: int) -> int:
    """Compare at most *n* characters of two strings.

    Returns zero when they agree, otherwise the difference between the code
    points at the first mismatch, the end of a string counting as zero.
    """
    a = _terminated(s1)
    b = _terminated(s2)
    for i in range(n):
        x = ord(a[i]) if i < len(a) else 0
        y = ord(b[i]) if i < len(b) else 0
        if x != y or x == 0:
            return x - y
    return 0


def find_bounded(haystack: str, needle: str, n: int) -> int | None:
    """Find *needle* wholly within the first *n* characters of *haystack*.

    Returns the index of the match, 0 for an empty needle, or None.
    """
    haystack = _terminated(haystack)
    needle = _terminated(needle)
    if not needle:
        return 0
    index = haystack[:max(n, 0)].find(needle)
    return None if index < 0 else index
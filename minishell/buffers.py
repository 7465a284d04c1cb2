"""Byte-buffer operations: filling, copying, searching and bounded string copies."""

from __future__ import annotations

SIZE_MAX = (1 << 64) - 1


def _check_span(buffer_length: int, length: int, what: str) -> None:
    if length < 0:
        raise ValueError(f"negative length: {length}")
    if length > buffer_length:
        raise ValueError(f"{what} holds {buffer_length} bytes, {length} requested")


def _c_length(data: bytes | bytearray) -> int:
    """Length of *data* up to its first NUL byte, or all of it."""
    end = bytes(data).find(b"\0")
    return len(data) if end < 0 else end


def fill(buffer: bytearray, value: int, length: int) -> bytearray:
    """Set the first *length* bytes of *buffer* to the low byte of *value*."""
    _check_span(len(buffer), length, "buffer")
    buffer[:length] = bytes([value & 0xFF]) * length
    return buffer


def zero(buffer: bytearray, length: int) -> bytearray:
    """Set the first *length* bytes of *buffer* to zero."""
    return fill(buffer, 0, length)


def allocate_zeroed(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of *count* elements of *size* bytes.

    Raises OverflowError when the total size cannot be represented.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count == 0 or size == 0:
        return bytearray()
    if count > SIZE_MAX // size:
        raise OverflowError(f"{count} elements of {size} bytes overflow")
    return bytearray(count * size)


def copy(dst: bytearray, src: bytes | bytearray, length: int) -> bytearray:
    """Copy the first *length* bytes of *src* into the start of *dst*."""
    _check_span(len(src), length, "source")
    _check_span(len(dst), length, "destination")
    dst[:length] = src[:length]
    return dst


def move(buffer: bytearray, dst_offset: int, src_offset: int, length: int) -> bytearray:
    """Copy *length* bytes within *buffer*; the regions may overlap."""
    if dst_offset < 0 or src_offset < 0:
        raise ValueError("offsets must not be negative")
    _check_span(len(buffer), src_offset + length, "buffer")
    _check_span(len(buffer), dst_offset + length, "buffer")
    buffer[dst_offset:dst_offset + length] = bytes(buffer[src_offset:src_offset + length])
    return buffer


def find_byte(data: bytes | bytearray, value: int, length: int) -> int | None:
    """Return the index of the first byte equal to *value* in the first *length* bytes."""
    _check_span(len(data), length, "data")
    index = bytes(data[:length]).find(bytes([value & 0xFF]))
    return None if index < 0 else index


def compare_bytes(a: bytes | bytearray, b: bytes | bytearray, length: int) -> int:
    """Compare *length* bytes; return the difference at the first mismatch, or 0."""
    _check_span(len(a), length, "first operand")
    _check_span(len(b), length, "second operand")
    for x, y in zip(a[:length], b[:length]):
        if x != y:
            return x - y
    return 0


def bounded_copy(dst: bytearray, src: bytes | bytearray, size: int) -> int:
    """Copy the NUL-terminated string *src* into *dst* of capacity *size*.

    At most ``size - 1`` bytes are copied and the result is always terminated
    when *size* is positive. Returns the length of *src*.
    """
    src_length = _c_length(src)
    if size > 0:
        _check_span(len(dst), size, "destination")
        count = min(src_length, size - 1)
        dst[:count] = src[:count]
        dst[count] = 0
    return src_length


def bounded_concat(dst: bytearray, src: bytes | bytearray, size: int) -> int:
    """Append the string *src* to the string in *dst* of capacity *size*.

    Returns the length of the string it tried to create: the length of *dst*
    plus that of *src*, or ``size`` plus the length of *src* when *dst* is
    already at least *size* long.
    """
    dst_length = _c_length(dst)
    src_length = _c_length(src)
    if size == 0:
        return src_length
    if dst_length >= size:
        return size + src_length
    _check_span(len(dst), size, "destination")
    count = min(src_length, size - 1 - dst_length)
    dst[dst_length:dst_length + count] = src[:count]
    dst[dst_length + count] = 0
    return dst_length + src_length
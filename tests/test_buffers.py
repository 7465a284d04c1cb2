import pytest

from minishell.buffers import (
    SIZE_MAX,
    allocate_zeroed,
    bounded_concat,
    bounded_copy,
    compare_bytes,
    copy,
    fill,
    find_byte,
    move,
    zero,
)


def test_fill_sets_prefix_only():
    buf = bytearray(b"abcdef")
    result = fill(buf, ord("x"), 3)
    assert result is buf
    assert buf == b"xxxdef"


def test_fill_uses_low_byte():
    buf = bytearray(4)
    fill(buf, 0x141, 4)
    assert buf == bytes([0x41]) * 4


def test_fill_too_long_raises():
    with pytest.raises(ValueError):
        fill(bytearray(2), 1, 3)


def test_zero():
    buf = bytearray(b"hello")
    zero(buf, 2)
    assert buf == b"\0\0llo"


def test_allocate_zeroed_size_and_content():
    buf = allocate_zeroed(3, 4)
    assert len(buf) == 12
    assert all(b == 0 for b in buf)


@pytest.mark.parametrize("count,size", [(0, 5), (5, 0)])
def test_allocate_zeroed_empty(count, size):
    assert allocate_zeroed(count, size) == bytearray()


def test_allocate_zeroed_overflow():
    with pytest.raises(OverflowError):
        allocate_zeroed(SIZE_MAX, 2)


def test_copy_round_trip():
    dst = bytearray(5)
    copy(dst, b"hello", 5)
    assert dst == b"hello"


def test_copy_partial():
    dst = bytearray(b"-----")
    copy(dst, b"abc", 2)
    assert dst == b"ab---"


def test_copy_source_too_short():
    with pytest.raises(ValueError):
        copy(bytearray(5), b"ab", 3)


def test_move_overlapping_forward():
    buf = bytearray(b"abcdef")
    move(buf, 2, 0, 4)
    assert buf == b"ababcd"


def test_move_overlapping_backward():
    buf = bytearray(b"abcdef")
    move(buf, 0, 2, 4)
    assert buf == b"cdefef"


def test_move_out_of_range():
    with pytest.raises(ValueError):
        move(bytearray(4), 2, 0, 3)


def test_find_byte():
    assert find_byte(b"hello", ord("l"), 5) == 2
    assert find_byte(b"hello", ord("o"), 4) is None
    assert find_byte(b"a\0b", 0, 3) == 1


def test_compare_bytes_equal_and_sign():
    assert compare_bytes(b"abc", b"abc", 3) == 0
    assert compare_bytes(b"abc", b"abd", 3) < 0
    assert compare_bytes(b"abd", b"abc", 3) > 0
    assert compare_bytes(b"abX", b"abY", 2) == 0


def test_compare_bytes_is_antisymmetric():
    a, b = b"\x80z", b"\x01z"
    assert compare_bytes(a, b, 2) == -compare_bytes(b, a, 2)


def test_bounded_copy_truncates_and_terminates():
    dst = bytearray(b"XXXXXX")
    assert bounded_copy(dst, b"hello", 3) == len(b"hello")
    assert dst[:3] == b"he\0"
    assert dst[3:] == b"XXX"


def test_bounded_copy_zero_size_leaves_dst():
    dst = bytearray(b"keep")
    assert bounded_copy(dst, b"hello", 0) == len(b"hello")
    assert dst == b"keep"


def test_bounded_copy_stops_at_nul():
    dst = bytearray(10)
    assert bounded_copy(dst, b"ab\0cd", 10) == 2
    assert dst[:3] == b"ab\0"


def test_bounded_concat_fits():
    dst = bytearray(b"foo\0" + bytes(6))
    assert bounded_concat(dst, b"bar", 10) == len(b"foobar")
    assert dst[:7] == b"foobar\0"


def test_bounded_concat_truncates():
    dst = bytearray(b"foo\0\0\0")
    assert bounded_concat(dst, b"bar", 5) == len(b"foobar")
    assert dst[:5] == b"foob\0"


def test_bounded_concat_dst_longer_than_size():
    dst = bytearray(b"foobar\0")
    assert bounded_concat(dst, b"xy", 3) == 3 + len(b"xy")
    assert dst == b"foobar\0"


def test_bounded_concat_zero_size():
    dst = bytearray(b"foo\0")
    assert bounded_concat(dst, b"bar", 0) == len(b"bar")
    assert dst == b"foo\0"
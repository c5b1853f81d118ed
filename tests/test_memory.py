import pytest

from ftlib.memory import bzero, calloc, memchr, memcmp, memcpy, memmove, memset


def test_memset_fills_prefix_and_returns_buffer():
    buf = bytearray(b"hello")
    result = memset(buf, ord("a"), 3)
    assert result is buf
    assert buf == b"aaa" + b"hello"[3:]


def test_memset_uses_low_byte():
    buf = bytearray(4)
    memset(buf, 0x1FF, 4)
    assert set(buf) == {0xFF}


def test_memset_rejects_overlong_count():
    with pytest.raises(ValueError):
        memset(bytearray(2), 0, 3)


def test_memset_rejects_negative_count():
    with pytest.raises(ValueError):
        memset(bytearray(2), 0, -1)


def test_bzero_zeroes_whole_buffer():
    buf = bytearray(b"abcde")
    bzero(buf, len(buf))
    assert buf == bytes(len(buf))


def test_bzero_partial():
    buf = bytearray(b"abcde")
    bzero(buf, 2)
    assert buf == bytes(2) + b"abcde"[2:]


def test_memcpy_copies_and_returns_dest():
    dest = bytearray(5)
    src = b"aaa\x00\x00"
    result = memcpy(dest, src, len(dest))
    assert result is dest
    assert dest == src


def test_memcpy_rejects_short_source():
    with pytest.raises(ValueError):
        memcpy(bytearray(5), b"aaa", 5)


def test_memmove_forward_overlap():
    original = b"abcdefghi"
    buf = bytearray(original)
    view = memoryview(buf)
    target = view[3:]
    result = memmove(target, view, 6)
    assert bytes(result) == original[:6]
    assert buf == original[:3] + original[:6]


def test_memmove_backward_overlap():
    original = b"lorem ipsum dolor sit amet"
    buf = bytearray(original)
    view = memoryview(buf)
    result = memmove(view, view[1:], 8)
    assert bytes(result) == original[1:9] + original[8:]
    assert buf == original[1:9] + original[8:]


def test_memmove_zero_bytes_is_noop():
    buf = bytearray(b"xyz")
    result = memmove(buf, b"abc", 0)
    assert result is buf
    assert buf == b"xyz"


def test_memchr_finds_first_occurrence():
    assert memchr(b"bonjour", ord("b"), 4) == 0
    assert memchr(b"bonjour", ord("o"), 7) == b"bonjour".index(b"o")


def test_memchr_respects_limit():
    assert memchr(b"bonjour", ord("r"), 4) is None


def test_memchr_compares_low_byte():
    data = bytes([1, 0xFF, 2])
    assert memchr(data, -1, len(data)) == data.index(0xFF)


def test_memcmp_source_example():
    assert memcmp(b"12345", b"12346", 5) == -1
    assert memcmp(b"12346", b"12345", 5) == 1


def test_memcmp_equal_prefix():
    assert memcmp(b"12345", b"12346", 4) == 0


def test_memcmp_is_unsigned():
    assert memcmp(bytes([0x80]), bytes([0x01]), 1) == 1


@pytest.mark.parametrize("a,b", [(b"abc", b"abd"), (b"zz", b"za"), (b"q", b"q")])
def test_memcmp_antisymmetric(a, b):
    assert memcmp(a, b, len(a)) == -memcmp(b, a, len(a))


def test_calloc_zeroed():
    buf = calloc(3, 4)
    assert buf == bytes(12)


def test_calloc_zero_members_gives_one_byte():
    assert len(calloc(0, 4)) == 1
    assert len(calloc(4, 0)) == 1


def test_calloc_overflow():
    with pytest.raises(OverflowError):
        calloc(2**63, 4)


def test_calloc_negative():
    with pytest.raises(ValueError):
        calloc(-1, 1)
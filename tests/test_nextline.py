import os

import pytest

from ftlib.nextline import BUFFER_SIZE, FD_MAX, LineReader, get_next_line


def _pipe_with(data: bytes) -> int:
    read_fd, write_fd = os.pipe()
    os.write(write_fd, data)
    os.close(write_fd)
    return read_fd


def _read_all(reader, fd):
    lines = []
    while True:
        line = reader.read_line(fd)
        if line is None:
            return lines
        lines.append(line)


@pytest.mark.parametrize("buffer_size", [1, 3, 7, 1024])
def test_lines_come_back_with_newlines(buffer_size):
    data = b"first line\nsecond\n\nlast without newline"
    fd = _pipe_with(data)
    try:
        lines = _read_all(LineReader(buffer_size), fd)
    finally:
        os.close(fd)
    assert lines == data.splitlines(keepends=True)
    assert b"".join(lines) == data


def test_empty_input_gives_none():
    fd = _pipe_with(b"")
    try:
        assert LineReader().read_line(fd) is None
    finally:
        os.close(fd)


def test_none_repeats_after_end():
    fd = _pipe_with(b"only\n")
    reader = LineReader(2)
    try:
        assert reader.read_line(fd) == b"only\n"
        assert reader.read_line(fd) is None
        assert reader.read_line(fd) is None
    finally:
        os.close(fd)


def test_descriptors_keep_separate_pending_data():
    data_a = b"a1\na2\n"
    data_b = b"b1\nb2\n"
    fd_a = _pipe_with(data_a)
    fd_b = _pipe_with(data_b)
    reader = LineReader(64)
    try:
        got = [
            reader.read_line(fd_a),
            reader.read_line(fd_b),
            reader.read_line(fd_a),
            reader.read_line(fd_b),
        ]
    finally:
        os.close(fd_a)
        os.close(fd_b)
    a_lines = data_a.splitlines(keepends=True)
    b_lines = data_b.splitlines(keepends=True)
    assert got == [a_lines[0], b_lines[0], a_lines[1], b_lines[1]]


def test_reads_from_regular_file(tmp_path):
    data = b"alpha\nbeta\ngamma\n"
    path = tmp_path / "lines.txt"
    path.write_bytes(data)
    fd = os.open(path, os.O_RDONLY)
    try:
        lines = _read_all(LineReader(4), fd)
    finally:
        os.close(fd)
    assert lines == data.splitlines(keepends=True)


def test_get_next_line_uses_shared_reader():
    data = b"one\ntwo\n"
    fd = _pipe_with(data)
    try:
        first = get_next_line(fd)
        second = get_next_line(fd)
        third = get_next_line(fd)
    finally:
        os.close(fd)
    assert [first, second] == data.splitlines(keepends=True)
    assert third is None


def test_default_limits():
    reader = LineReader()
    assert reader.buffer_size == BUFFER_SIZE == 1024
    assert reader.fd_max == FD_MAX == 1024


def test_negative_descriptor_rejected():
    with pytest.raises(ValueError):
        LineReader().read_line(-1)


def test_descriptor_beyond_limit_rejected():
    with pytest.raises(ValueError):
        LineReader(fd_max=4).read_line(4)


@pytest.mark.parametrize("size", [0, -5])
def test_non_positive_buffer_size_rejected(size):
    with pytest.raises(ValueError):
        LineReader(size)


def test_closed_descriptor_raises_os_error():
    read_fd, write_fd = os.pipe()
    os.close(write_fd)
    os.close(read_fd)
    with pytest.raises(OSError):
        LineReader().read_line(read_fd)
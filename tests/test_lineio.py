import os

import pytest

from ykit import lineio


@pytest.fixture
def make_file(tmp_path):
    def _make(content: bytes, name: str = "data.txt"):
        path = tmp_path / name
        path.write_bytes(content)
        return path

    return _make


def _read_all(reader, fd):
    lines = []
    while (line := reader.next_line(fd)) is not None:
        lines.append(line)
    return lines


@pytest.mark.parametrize("size", [1, 3, 4, 5, 64])
def test_lines_across_buffer_boundaries(make_file, size):
    text = "first line\nsecond\n\nlast without newline"
    path = make_file(text.encode())
    fd = os.open(path, os.O_RDONLY)
    try:
        lines = _read_all(lineio.LineReader(size), fd)
    finally:
        os.close(fd)
    assert lines == text.splitlines(keepends=True)
    assert "".join(lines) == text


def test_empty_file_gives_none(make_file):
    path = make_file(b"")
    fd = os.open(path, os.O_RDONLY)
    try:
        assert lineio.LineReader(4).next_line(fd) is None
    finally:
        os.close(fd)


def test_nul_byte_ends_data(make_file):
    path = make_file(b"ab\0cd\n")
    fd = os.open(path, os.O_RDONLY)
    try:
        reader = lineio.LineReader(20)
        assert reader.next_line(fd) == "ab"
        assert reader.next_line(fd) is None
    finally:
        os.close(fd)


def test_short_read_ends_line():
    r, w = os.pipe()
    try:
        os.write(w, b"ab")
        reader = lineio.LineReader(8)
        assert reader.next_line(r) == "ab"
        os.write(w, b"cd\n")
        assert reader.next_line(r) == "cd\n"
    finally:
        os.close(r)
        os.close(w)


def test_interleaved_descriptors(make_file):
    a = make_file(b"a1\na2\n", "a.txt")
    b = make_file(b"b1\nb2\n", "b.txt")
    fa = os.open(a, os.O_RDONLY)
    fb = os.open(b, os.O_RDONLY)
    try:
        reader = lineio.LineReader(4)
        got = [reader.next_line(fa), reader.next_line(fb),
               reader.next_line(fa), reader.next_line(fb)]
    finally:
        os.close(fa)
        os.close(fb)
    assert got == ["a1\n", "b1\n", "a2\n", "b2\n"]


def test_invalid_buffer_size():
    with pytest.raises(ValueError):
        lineio.LineReader(0)


def test_get_next_line_shared_reader(make_file):
    path = make_file(b"one\ntwo\n")
    fd = os.open(path, os.O_RDONLY)
    try:
        assert lineio.get_next_line(fd) == "one\n"
        assert lineio.get_next_line(fd) == "two\n"
        assert lineio.get_next_line(fd) is None
    finally:
        os.close(fd)


def test_write_text_round_trip():
    r, w = os.pipe()
    try:
        lineio.write_text(w, "hello\n")
        assert os.read(r, 100) == b"hello\n"
    finally:
        os.close(r)
        os.close(w)


def test_open_file_and_missing(make_file, tmp_path):
    path = make_file(b"x\n")
    fd = lineio.open_file(path, os.O_RDONLY)
    try:
        assert os.read(fd, 10) == b"x\n"
    finally:
        os.close(fd)
    with pytest.raises(FileNotFoundError):
        lineio.open_file(tmp_path / "missing.txt", os.O_RDONLY)


def test_open_file_creates(tmp_path):
    path = tmp_path / "new.txt"
    fd = lineio.open_file(path, os.O_WRONLY | os.O_CREAT)
    try:
        lineio.write_text(fd, "made\n")
    finally:
        os.close(fd)
    assert path.read_text() == "made\n"


def test_read_file_lines_trims_newlines(make_file):
    path = make_file(b"a\n\nb\n")
    assert lineio.read_file_lines(path) == ["a", "", "b"]


def test_read_fd_lines(make_file):
    text = "alpha\nbeta\ngamma"
    path = make_file(text.encode())
    fd = os.open(path, os.O_RDONLY)
    try:
        assert lineio.read_fd_lines(fd) == text.split("\n")
    finally:
        os.close(fd)


def test_read_file_lines_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        lineio.read_file_lines(tmp_path / "nope.txt")
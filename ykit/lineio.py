"""Buffered line reading from file descriptors and small file helpers."""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_BUFFER_SIZE = 20


@dataclass
class _Chunk:
    """One block read from a descriptor and how far it has been consumed."""

    data: bytes
    full: bool
    pos: int = 0


class LineReader:
    """Reads lines from several descriptors, keeping unread data per descriptor.

    Data is read in blocks of ``buffer_size`` bytes. A NUL byte ends the
    usable part of a block, and a block shorter than ``buffer_size`` ends the
    current line once it has been consumed.
    """

    def __init__(self, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self.buffer_size = buffer_size
        self._cache: dict[int, _Chunk] = {}

    def _fetch(self, fd: int) -> _Chunk | None:
        chunk = self._cache.get(fd)
        if chunk is not None:
            return chunk
        try:
            data = os.read(fd, self.buffer_size)
        except OSError:
            return None
        if not data or data[0] == 0:
            return None
        usable = data.split(b"\0", 1)[0]
        chunk = _Chunk(usable, full=len(usable) == self.buffer_size)
        self._cache[fd] = chunk
        return chunk

    def next_line(self, fd: int) -> str | None:
        """Return the next line including its newline, or None at the end."""
        parts: list[bytes] = []
        while True:
            chunk = self._fetch(fd)
            if chunk is None:
                break
            idx = chunk.data.find(b"\n", chunk.pos)
            if idx >= 0:
                parts.append(chunk.data[chunk.pos:idx + 1])
                chunk.pos = idx + 1
                if chunk.pos >= len(chunk.data):
                    del self._cache[fd]
                break
            parts.append(chunk.data[chunk.pos:])
            del self._cache[fd]
            if not chunk.full:
                break
        line = b"".join(parts)
        if not line:
            return None
        return line.decode("utf-8", errors="replace")

    def lines(self, fd: int):
        """Yield lines from ``fd`` until it is exhausted."""
        while (line := self.next_line(fd)) is not None:
            yield line


_default_reader = LineReader()


def get_next_line(fd: int) -> str | None:
    """Return the next line from ``fd`` using a shared reader."""
    return _default_reader.next_line(fd)


def write_text(fd: int, text: str) -> None:
    """Write ``text`` to ``fd``; descriptors below 1 and empty text are ignored."""
    if fd <= 0 or not text:
        return
    data = text.encode("utf-8")
    while data:
        written = os.write(fd, data)
        data = data[written:]


def open_file(path: str | os.PathLike[str], flags: int = os.O_RDONLY) -> int:
    """Open ``path`` with ``flags`` and mode 0644, returning the descriptor."""
    return os.open(path, flags, 0o644)


def read_fd_lines(fd: int) -> list[str]:
    """Read every remaining line of ``fd``, with newlines trimmed from both ends."""
    return [line.strip("\n") for line in _default_reader.lines(fd)]


def read_file_lines(path: str | os.PathLike[str], flags: int = os.O_RDONLY) -> list[str]:
    """Open ``path`` and return its lines as :func:`read_fd_lines` does."""
    fd = open_file(path, flags)
    try:
        return read_fd_lines(fd)
    finally:
        os.close(fd)
"""Buffered line reader over a binary stream."""

from __future__ import annotations

from typing import BinaryIO, Iterator, Tuple

from ..errors import ReadError


class LineSource:
    """Read successive lines into one reusable buffer.

    The buffer is cleared before every read, so bytes taken from it must be
    consumed or copied before the next line is requested.
    """

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream
        self.buffer = bytearray()

    def read_line(self) -> int:
        """Fill the buffer with the next line, terminator included.

        Returns the number of bytes read; ``0`` signals end of stream.
        """
        self.buffer.clear()
        try:
            chunk = self._stream.readline()
        except OSError as exc:
            raise ReadError(f"Failed to read line: {exc}") from exc
        self.buffer += chunk
        return len(chunk)

    def __iter__(self) -> Iterator[Tuple[int, bytearray]]:
        while True:
            num_bytes = self.read_line()
            if num_bytes == 0:
                return
            yield num_bytes, self.buffer

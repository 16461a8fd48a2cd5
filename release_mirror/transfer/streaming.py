"""
Pass-through request bodies.

A PassThroughBody turns an iterator of downloaded chunks into a file-like
object the object store client can read from while the download is still
in progress. At most one source chunk is held in memory.
"""

from typing import Iterable, Iterator


class StreamLengthError(ValueError):
    """The source produced a different number of bytes than declared."""


class PassThroughBody:
    """Lazy, single-pass, non-restartable body with a known total length."""

    def __init__(self, chunks: Iterable[bytes], length: int) -> None:
        """
        Initialize the body.

        Args:
            chunks: Source of byte chunks, consumed once
            length: Declared total length in bytes
        """
        if length < 0:
            raise ValueError(f"Declared length must not be negative: {length}")
        self._chunks: Iterator[bytes] = iter(chunks)
        self._buffer = b""
        self._length = length
        self._bytes_read = 0
        self._exhausted = False

    @property
    def length(self) -> int:
        """Declared total length in bytes."""
        return self._length

    @property
    def bytes_read(self) -> int:
        """Number of bytes handed out so far."""
        return self._bytes_read

    @property
    def exhausted(self) -> bool:
        """Whether the source has been fully consumed."""
        return self._exhausted and not self._buffer

    def _next_chunk(self) -> bytes:
        """Pull the next non-empty chunk, or b"" once the source ends."""
        if self._exhausted:
            return b""
        for chunk in self._chunks:
            if chunk:
                return chunk
        self._exhausted = True
        return b""

    def _account(self, data: bytes) -> bytes:
        self._bytes_read += len(data)
        if self._bytes_read > self._length:
            raise StreamLengthError(f"Source produced more than the declared {self._length} bytes")
        if not data and self._bytes_read != self._length:
            raise StreamLengthError(
                f"Source ended after {self._bytes_read} of the declared {self._length} bytes"
            )
        return data

    def read(self, size: int = -1) -> bytes:
        """
        Read up to size bytes from the body.

        Args:
            size: Maximum number of bytes to return; negative reads everything left

        Returns:
            Bytes read, or b"" once the body is exhausted

        Raises:
            StreamLengthError: If the source length differs from the declared length
        """
        if size is None or size < 0:
            parts = [self._buffer]
            self._buffer = b""
            chunk = self._next_chunk()
            while chunk:
                parts.append(chunk)
                chunk = self._next_chunk()
            return self._account(b"".join(parts))

        if size == 0:
            return b""

        if not self._buffer:
            self._buffer = self._next_chunk()

        data, self._buffer = self._buffer[:size], self._buffer[size:]
        return self._account(data)

    def readable(self) -> bool:
        return True

    def __len__(self) -> int:
        return self._length


__all__ = ["PassThroughBody", "StreamLengthError"]

"""Per-socket send buffer with lazy removal of written bytes."""

from __future__ import annotations


class BackPressure:
    """Byte buffer whose consumed prefix is dropped in batches.

    Erased bytes are only counted until they exceed 1/32 of the buffer,
    at which point the prefix is actually removed.
    """

    def __init__(self, data: bytes = b"") -> None:
        self._buffer = bytearray(data)
        self._pending_removal = 0
        self._capacity = 0

    def append(self, data: bytes) -> None:
        """Add bytes to the end of the buffer."""
        self._buffer += data

    def erase(self, length: int) -> None:
        """Mark ``length`` bytes at the front as written."""
        if length < 0 or length > len(self):
            raise ValueError(f"cannot erase {length} of {len(self)} buffered bytes")
        self._pending_removal += length
        if self._pending_removal > len(self._buffer) >> 5:
            del self._buffer[:self._pending_removal]
            self._pending_removal = 0

    def __len__(self) -> int:
        return len(self._buffer) - self._pending_removal

    def clear(self) -> None:
        """Drop all data, pending removal included."""
        self._pending_removal = 0
        self._buffer.clear()

    def reserve(self, length: int) -> None:
        """Note that ``length`` live bytes are about to be held."""
        if length < 0:
            raise ValueError("length must not be negative")
        self._capacity = max(self._capacity, length + self._pending_removal)

    @property
    def capacity(self) -> int:
        """Total bytes the buffer is expected to hold."""
        return max(self._capacity, len(self._buffer))

    def resize(self, length: int) -> None:
        """Truncate or zero-pad so that ``length`` live bytes remain."""
        if length < 0:
            raise ValueError("length must not be negative")
        target = length + self._pending_removal
        if target < len(self._buffer):
            del self._buffer[target:]
        else:
            self._buffer.extend(bytes(target - len(self._buffer)))

    def data(self) -> bytes:
        """The live bytes, excluding those pending removal."""
        return bytes(self._buffer[self._pending_removal:])

    def total_length(self) -> int:
        """Stored bytes including those pending removal."""
        return len(self._buffer)
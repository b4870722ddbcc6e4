"""Incremental decoder for HTTP/1.1 chunked transfer encoding."""

from __future__ import annotations

from collections.abc import Generator

STATE_HAS_SIZE = 1 << 63
STATE_IS_CHUNKED = 1 << 62
STATE_SIZE_MASK = (1 << 62) - 1
STATE_IS_ERROR = (1 << 64) - 1
STATE_SIZE_OVERFLOW = 0x0F << 56

_FLAGS_MASK = STATE_HAS_SIZE | STATE_IS_CHUNKED


class ChunkedDecoder:
    """Decodes a chunked body fed in arbitrary pieces.

    All progress is kept in a single 64-bit state word: two flag bits
    (size known, inside chunked encoding) and the remaining byte count of
    the current chunk including its trailing CRLF.
    """

    def __init__(self, trailer: bool = False) -> None:
        self.trailer = trailer
        self.state = 0

    @property
    def chunk_size(self) -> int:
        """Bytes left in the current chunk, counting its closing CRLF."""
        return self.state & STATE_SIZE_MASK

    @property
    def has_size(self) -> bool:
        """Whether the size line of the current chunk has been read."""
        return bool(self.state & STATE_HAS_SIZE)

    @property
    def is_parsing(self) -> bool:
        """Whether decoding is in progress (not at rest and not finished)."""
        return bool(self.state & _FLAGS_MASK)

    @property
    def is_error(self) -> bool:
        """Whether an invalid size line was met."""
        return self.state == STATE_IS_ERROR

    def next_chunk(self, data: bytes) -> tuple[bytes | None, bytes]:
        """Return the next chunk and the data left unconsumed.

        The chunk is ``b""`` for the terminating zero-size chunk and None
        when the data ran out, the body ended, or an error occurred.
        """
        view = bytes(data)
        chunk, pos = self._next(view, 0)
        return chunk, view[pos:]

    def chunks(self, data: bytes) -> Generator[bytes, None, bytes]:
        """Yield every chunk available in ``data``; return what is left."""
        view = bytes(data)
        pos = 0
        while True:
            chunk, pos = self._next(view, pos)
            if chunk is None:
                return view[pos:]
            yield chunk

    def _consume_hex(self, view: bytes, pos: int) -> int:
        state = self.state
        end = len(view)
        while pos < end and 32 < view[pos] < 128:
            digit = view[pos]
            if digit >= ord("a"):
                digit -= ord("a") - ord(":")
            elif digit >= ord("A"):
                digit -= ord("A") - ord(":")
            number = digit - ord("0")
            if number < 0 or number > 16 or (state & STATE_SIZE_MASK) & STATE_SIZE_OVERFLOW:
                self.state = STATE_IS_ERROR
                return pos
            state = ((state & STATE_SIZE_MASK) * 16 + number) | STATE_IS_CHUNKED
            pos += 1
        newline = view.find(b"\n", pos)
        if newline == -1:
            pos = end
        else:
            state += 2
            state |= STATE_HAS_SIZE | STATE_IS_CHUNKED
            pos = newline + 1
        self.state = state
        return pos

    def _next(self, view: bytes, pos: int) -> tuple[bytes | None, int]:
        end = len(view)
        while pos < end:
            state = self.state
            size = state & STATE_SIZE_MASK

            # Dropping the CRLF (or trailer) that follows the last chunk.
            if not state & STATE_IS_CHUNKED and state & STATE_HAS_SIZE and size:
                step = min(end - pos, size)
                pos += step
                size -= step
                if not size:
                    self.state = 0
                    return None, pos
                self.state = (state & _FLAGS_MASK) | size
                continue

            if not state & STATE_HAS_SIZE:
                pos = self._consume_hex(view, pos)
                if self.is_error:
                    return None, pos
                if self.has_size and self.chunk_size == 2:
                    self.state = (4 if self.trailer else 2) | STATE_HAS_SIZE
                    return b"", pos
                continue

            if end - pos >= size:
                emit = view[pos:pos + size - 2] if size > 2 else None
                pos += size
                self.state = STATE_IS_CHUNKED
                if emit is not None:
                    return emit, pos
                continue

            emit = view[pos:pos + size - 2] if size > 2 else b""
            self.state = (state & _FLAGS_MASK) | (size - (end - pos)) | STATE_IS_CHUNKED
            pos = end
            return (emit or None), pos
        return None, pos
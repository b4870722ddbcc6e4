"""A 256-bit bloom filter tuned for HTTP header names."""

from __future__ import annotations

_MULTIPLIER = 1843993368


def _as_bytes(key: str | bytes) -> bytes:
    return key.encode("utf-8") if isinstance(key, str) else bytes(key)


class BloomFilter:
    """Remembers which header names were seen; keys shorter than 2 always match."""

    def __init__(self) -> None:
        self._bits = 0

    @staticmethod
    def _positions(key: bytes) -> bytes:
        features = bytes((key[0], key[-1], key[-2], key[len(key) >> 1]))
        scrambled = (int.from_bytes(features, "little") * _MULTIPLIER) & 0xFFFFFFFF
        return scrambled.to_bytes(4, "little")

    def might_have(self, key: str | bytes) -> bool:
        """Return False only if ``key`` was certainly never added."""
        raw = _as_bytes(key)
        if len(raw) < 2:
            return True
        return all((self._bits >> bit) & 1 for bit in self._positions(raw))

    def add(self, key: str | bytes) -> None:
        """Record ``key``; keys shorter than 2 bytes are ignored."""
        raw = _as_bytes(key)
        if len(raw) >= 2:
            for bit in self._positions(raw):
                self._bits |= 1 << bit

    def reset(self) -> None:
        """Forget every key."""
        self._bits = 0

    def __contains__(self, key: str | bytes) -> bool:
        return self.might_have(key)
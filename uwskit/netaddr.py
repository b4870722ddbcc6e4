"""Text form of binary IPv4 and IPv6 addresses."""

from __future__ import annotations

_IPV4_LENGTH = 4
_IPV6_LENGTH = 16


def address_as_text(binary: bytes | bytearray | memoryview) -> str:
    """Return the text form of a packed IP address.

    Four bytes give dotted decimal, sixteen bytes give eight groups of
    four lower-case hex digits with no zero compression. Empty input
    gives an empty string. Any other length raises ValueError.
    """
    raw = bytes(binary)
    if not raw:
        return ""
    if len(raw) == _IPV4_LENGTH:
        return ".".join(str(octet) for octet in raw)
    if len(raw) == _IPV6_LENGTH:
        return ":".join(raw[pos:pos + 2].hex() for pos in range(0, _IPV6_LENGTH, 2))
    raise ValueError(f"expected 4 or 16 address bytes, got {len(raw)}")
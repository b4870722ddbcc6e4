"""User-agent checks for clients with known protocol defects."""

from __future__ import annotations

_VERSION_MARKER = " Version/15."
_SAFARI_MARKER = " Safari/"
_ASCII_DIGITS = frozenset("0123456789")
_UINT_MAX = 0xFFFFFFFF
_LAST_BROKEN_MINOR = 3


def has_broken_compression(user_agent: str | bytes) -> bool:
    """Whether ``user_agent`` is Safari 15.0 to 15.3.

    Those versions do not honour client_no_context_takeover, so
    permessage-deflate must not be negotiated with them.
    """
    if isinstance(user_agent, (bytes, bytearray, memoryview)):
        user_agent = bytes(user_agent).decode("latin-1")

    start = user_agent.find(_VERSION_MARKER)
    if start == -1:
        return False
    start += len(_VERSION_MARKER)

    end = user_agent.find(" ", start)
    if end == -1:
        return False

    minor = user_agent[start:end]
    if not minor or not set(minor) <= _ASCII_DIGITS:
        return False
    value = int(minor)
    if value > _UINT_MAX or value > _LAST_BROKEN_MINOR:
        return False

    return user_agent.find(_SAFARI_MARKER, end) != -1
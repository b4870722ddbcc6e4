"""Settings for a server's TLS context and for a WebSocket route."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Optional

MIN_IDLE_TIMEOUT = 8
MAX_IDLE_TIMEOUT = 240 * 4
MAX_LIFETIME_MINUTES = 240

_USHORT_MAX = 0xFFFF
_UINT_MAX = 0xFFFFFFFF

Handler = Optional[Callable[..., Any]]


@dataclass(frozen=True)
class SocketContextOptions:
    """TLS material and tuning for a listening context; all optional."""

    key_file_name: str | None = None
    cert_file_name: str | None = None
    passphrase: str | None = None
    dh_params_file_name: str | None = None
    ca_file_name: str | None = None
    ssl_ciphers: str | None = None
    ssl_prefer_low_memory_usage: int = 0


def _check_range(name: str, value: int, upper: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer")
    if not 0 <= value <= upper:
        raise ValueError(f"{name} must be between 0 and {upper}")


@dataclass
class WebSocketBehavior:
    """Limits, timeouts and event handlers of one WebSocket route.

    Timeouts are checked on construction: ``idle_timeout`` is 0 or
    between 8 and 960 seconds, ``max_lifetime`` at most 240 minutes.
    """

    compression: int = 0
    max_payload_length: int = 16 * 1024
    idle_timeout: int = 120
    max_backpressure: int = 64 * 1024
    close_on_backpressure_limit: bool = False
    reset_idle_timeout_on_send: bool = False
    send_pings_automatically: bool = True
    max_lifetime: int = 0
    upgrade: Handler = None
    open: Handler = None
    message: Handler = None
    dropped: Handler = None
    drain: Handler = None
    ping: Handler = None
    pong: Handler = None
    subscription: Handler = None
    close: Handler = None

    def __post_init__(self) -> None:
        _check_range("max_payload_length", self.max_payload_length, _UINT_MAX)
        _check_range("max_backpressure", self.max_backpressure, _UINT_MAX)
        _check_range("idle_timeout", self.idle_timeout, _USHORT_MAX)
        _check_range("max_lifetime", self.max_lifetime, _USHORT_MAX)

        if self.idle_timeout and self.idle_timeout < MIN_IDLE_TIMEOUT:
            raise ValueError("idle_timeout must be either 0 or greater than 8")
        if self.idle_timeout > MAX_IDLE_TIMEOUT:
            raise ValueError("idle_timeout must not be greater than 960 seconds")
        if self.max_lifetime > MAX_LIFETIME_MINUTES:
            raise ValueError("max_lifetime must not be greater than 240 minutes")
import dataclasses

import pytest
from hypothesis import given, strategies as st

from uwskit.behavior import SocketContextOptions, WebSocketBehavior


def test_default_behavior_values():
    behavior = WebSocketBehavior()
    assert behavior.compression == 0
    assert behavior.max_payload_length == 16 * 1024
    assert behavior.idle_timeout == 120
    assert behavior.max_backpressure == 64 * 1024
    assert behavior.close_on_backpressure_limit is False
    assert behavior.reset_idle_timeout_on_send is False
    assert behavior.send_pings_automatically is True
    assert behavior.max_lifetime == 0


def test_default_handlers_are_unset():
    behavior = WebSocketBehavior()
    handlers = [
        behavior.upgrade, behavior.open, behavior.message, behavior.dropped,
        behavior.drain, behavior.ping, behavior.pong, behavior.subscription,
        behavior.close,
    ]
    assert handlers == [None] * 9


def test_handlers_are_kept():
    received = []
    behavior = WebSocketBehavior(message=lambda ws, msg, op: received.append(msg))
    behavior.message(None, b"hello", 1)
    assert received == [b"hello"]


@pytest.mark.parametrize("timeout", [1, 7])
def test_idle_timeout_below_minimum_rejected(timeout):
    with pytest.raises(ValueError, match="idle_timeout"):
        WebSocketBehavior(idle_timeout=timeout)


def test_idle_timeout_above_maximum_rejected():
    with pytest.raises(ValueError, match="960"):
        WebSocketBehavior(idle_timeout=961)


@pytest.mark.parametrize("timeout", [0, 8, 960])
def test_idle_timeout_boundaries_accepted(timeout):
    assert WebSocketBehavior(idle_timeout=timeout).idle_timeout == timeout


def test_max_lifetime_limit():
    assert WebSocketBehavior(max_lifetime=240).max_lifetime == 240
    with pytest.raises(ValueError, match="240"):
        WebSocketBehavior(max_lifetime=241)


def test_negative_values_rejected():
    with pytest.raises(ValueError):
        WebSocketBehavior(max_payload_length=-1)
    with pytest.raises(ValueError):
        WebSocketBehavior(max_backpressure=-1)


def test_non_integer_timeout_rejected():
    with pytest.raises(TypeError):
        WebSocketBehavior(idle_timeout="16")


def test_replace_revalidates():
    behavior = WebSocketBehavior(idle_timeout=16)
    assert dataclasses.replace(behavior, idle_timeout=60).idle_timeout == 60
    with pytest.raises(ValueError):
        dataclasses.replace(behavior, idle_timeout=3)


@given(st.integers(min_value=8, max_value=960))
def test_valid_idle_timeouts_accepted(timeout):
    assert WebSocketBehavior(idle_timeout=timeout).idle_timeout == timeout


@given(st.integers(min_value=1, max_value=7) | st.integers(min_value=961, max_value=0xFFFF))
def test_invalid_idle_timeouts_rejected(timeout):
    with pytest.raises(ValueError):
        WebSocketBehavior(idle_timeout=timeout)


def test_socket_context_options_defaults():
    options = SocketContextOptions()
    assert options.key_file_name is None
    assert options.cert_file_name is None
    assert options.passphrase is None
    assert options.dh_params_file_name is None
    assert options.ca_file_name is None
    assert options.ssl_ciphers is None
    assert options.ssl_prefer_low_memory_usage == 0


def test_socket_context_options_fields_and_frozen():
    options = SocketContextOptions(
        key_file_name="misc/key.pem",
        cert_file_name="misc/cert.pem",
        passphrase="password",
    )
    assert options.key_file_name == "misc/key.pem"
    assert options.cert_file_name == "misc/cert.pem"
    assert options.passphrase == "password"
    with pytest.raises(dataclasses.FrozenInstanceError):
        options.key_file_name = "other.pem"


def test_socket_context_options_replace_round_trip():
    options = SocketContextOptions(ssl_ciphers="HIGH")
    changed = dataclasses.replace(options, ssl_prefer_low_memory_usage=1)
    assert changed.ssl_ciphers == "HIGH"
    assert changed.ssl_prefer_low_memory_usage == 1
    assert dataclasses.replace(changed, ssl_prefer_low_memory_usage=0) == options
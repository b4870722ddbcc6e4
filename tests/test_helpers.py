import zlib

from hypothesis import given, strategies as st

from uwskit.helpers import crc32, has_ext, make_chunked


def test_crc32_matches_zlib_on_known_input():
    data = b"123456789"
    assert (~crc32(data)) & 0xFFFFFFFF == zlib.crc32(data)


def test_crc32_empty_keeps_register():
    assert crc32(b"") == 0xFFFFFFFF


@given(st.binary(max_size=300))
def test_crc32_agrees_with_zlib(data):
    assert (~crc32(data)) & 0xFFFFFFFF == zlib.crc32(data)


@given(st.binary(max_size=200), st.binary(max_size=200))
def test_crc32_chaining(first, second):
    assert crc32(second, crc32(first)) == crc32(first + second)


def test_has_ext():
    assert has_ext("/images/logo.svg", ".svg")
    assert not has_ext("/images/logo.png", ".svg")
    assert not has_ext("svg", ".svg")
    assert has_ext("anything", "")


def test_make_chunked_sizes_and_rest():
    assert list(make_chunked(b"\x02ab\x00rest")) == [b"ab", b"rest"]


def test_make_chunked_truncates_last():
    assert list(make_chunked(b"\x05ab")) == [b"ab"]


def test_make_chunked_empty_chunk_at_end():
    assert list(make_chunked(b"\x01a\x03")) == [b"a", b""]


def test_make_chunked_empty_input():
    assert list(make_chunked(b"")) == []


@given(st.binary(max_size=600))
def test_make_chunked_consumes_everything(data):
    chunks = list(make_chunked(data))
    assert sum(len(c) for c in chunks) + len(chunks) == len(data)
    assert all(len(c) <= max(255, len(data)) for c in chunks)
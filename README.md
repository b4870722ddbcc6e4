# uwskit

Small, dependency-free building blocks for writing HTTP and WebSocket servers.

## Installation

```
pip install uwskit
```

For running the tests:

```
pip install "uwskit[test]"
pytest
```

## What is inside

- `uwskit.chunked.ChunkedDecoder`: an incremental decoder for HTTP
  `Transfer-Encoding: chunked` bodies. Feed it data as it arrives and take the
  chunks out with `next_chunk(data)`, which returns the chunk and the data left
  over, or with the generator `chunks(data)`. An empty chunk (`b""`) marks the
  terminating zero-size chunk. With `trailer=True` two more bytes are dropped
  after it. The properties `chunk_size`, `has_size`, `is_parsing` and
  `is_error` expose the decoder's state.
- `uwskit.bloom.BloomFilter`: a 256-bit bloom filter tuned for request header
  names (`add`, `might_have`, `reset`, and the `in` operator). Keys shorter
  than two bytes always match.
- `uwskit.backpressure.BackPressure`: a send buffer that only counts erased
  bytes until they exceed 1/32 of the buffer, then drops them. It offers
  `append`, `erase`, `len()`, `clear`, `reserve`, `resize`, `data`,
  `total_length` and a `capacity` property. `erase` raises `ValueError` past
  the live data.
- `uwskit.errors.HttpError` and `error_response(error, anonymized=False)`:
  the canned responses for parser errors (505, 431, 400), with a short HTML body
  or, anonymized, headers only.
- `uwskit.getopts.OptParser`: a reentrant, getopt-like option parser. `parse`
  takes a getopt option string, `parse_long` takes a list of `LongOption`
  entries (with `ArgType.NONE`, `REQUIRED` or `OPTIONAL`), and `arg` steps over
  a non-option argument. Both parsers return `None` when done. Bad options raise
  `OptionError`. By default non-option arguments are moved behind the options.
- `uwskit.helpers`: `crc32(data, crc=0xFFFFFFFF)` (a bitwise CRC-32 register
  update; invert the result for the usual checksum), `has_ext(file, ext)`, and
  `make_chunked(data)`, which splits bytes into chunks whose sizes are given by
  leading length bytes, where zero means "the rest".
- `uwskit.useragent.has_broken_compression(user_agent)`: detects Safari
  15.0 to 15.3, whose permessage-deflate support is broken.
- `uwskit.behavior`: `SocketContextOptions` (TLS file names, passphrase,
  ciphers) and `WebSocketBehavior` (limits, timeouts and handler callables with
  the usual defaults). `WebSocketBehavior` is checked on construction:
  `idle_timeout` must be 0 or between 8 and 960 seconds, and `max_lifetime` must
  be at most 240 minutes. Otherwise `ValueError` is raised.
- `uwskit.netaddr.address_as_text(binary)`: dotted decimal for 4 bytes, eight
  groups of four hex digits for 16 bytes, and `""` for empty input. Any other
  length raises `ValueError`.

## Example

```python
from uwskit.chunked import ChunkedDecoder
from uwskit.helpers import crc32

decoder = ChunkedDecoder(trailer=False)
body = b"".join(decoder.chunks(b"5\r\nhello\r\n0\r\n\r\n"))
assert body == b"hello"

checksum = crc32(body) ^ 0xFFFFFFFF
print(f"{checksum:x}")
```

```python
from uwskit.getopts import OptParser, OptionError

parser = OptParser(["prog", "-v", "-o", "out.txt", "file"], permute=True)
try:
    for option, value in iter(lambda: parser.parse("vo:"), None):
        print(option, value)
except OptionError as exc:
    print("error:", exc)
print(parser.arg())
```

## What it does not do

uwskit is a set of parts, not a server. It has no event loop, no sockets, no
HTTP request parser or router, no WebSocket framing or compression, and no
publish/subscribe. `WebSocketBehavior` and `SocketContextOptions` only hold and
check settings; nothing in the package acts on them. There is no command-line
program.
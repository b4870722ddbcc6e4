"""Building blocks for HTTP and WebSocket servers: chunked decoding, a header
bloom filter, a backpressure buffer, error responses, option parsing, and
small helpers."""

__version__ = "0.1.0"
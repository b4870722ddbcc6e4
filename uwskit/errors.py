"""HTTP parser errors and the canned responses sent for them."""

from __future__ import annotations

from enum import IntEnum


class HttpError(IntEnum):
    """Errors the HTTP parser can report."""

    HTTP_VERSION_NOT_SUPPORTED = 1
    REQUEST_HEADER_FIELDS_TOO_LARGE = 2
    BAD_REQUEST = 3


SERVER_SIGNATURE = "<hr><i>uwskit Server</i>"

_STATUS_LINES = {
    HttpError.HTTP_VERSION_NOT_SUPPORTED: "505 HTTP Version Not Supported",
    HttpError.REQUEST_HEADER_FIELDS_TOO_LARGE: "431 Request Header Fields Too Large",
    HttpError.BAD_REQUEST: "400 Bad Request",
}

_BODIES = {
    HttpError.HTTP_VERSION_NOT_SUPPORTED: (
        "<h1>HTTP Version Not Supported</h1>"
        "<p>This server does not support HTTP/1.0.</p>"
    ),
    HttpError.REQUEST_HEADER_FIELDS_TOO_LARGE: "<h1>Request Header Fields Too Large</h1>",
    HttpError.BAD_REQUEST: "<h1>Bad Request</h1>",
}


def error_response(error: HttpError | int, anonymized: bool = False) -> bytes:
    """Return the full HTTP response for ``error``.

    With ``anonymized`` the response carries no body.
    Raises ValueError for a value that is not an HttpError.
    """
    kind = HttpError(error)
    head = f"HTTP/1.1 {_STATUS_LINES[kind]}\r\nConnection: close\r\n\r\n"
    if anonymized:
        return head.encode("ascii")
    return (head + _BODIES[kind] + SERVER_SIGNATURE).encode("ascii")
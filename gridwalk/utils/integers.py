"""Arbitrary-size integer input and formatting."""

from typing import Iterator, TextIO


def _next_token(stream: TextIO) -> str:
    """Read the next whitespace-delimited token, or ``""`` at end of stream.

    Characters are consumed one at a time so the stream is left just past
    the token for other readers.
    """
    token = ""
    while True:
        ch = stream.read(1)
        if not ch:
            return token
        if ch.isspace():
            if token:
                return token
            continue
        token += ch


def read_int(stream: TextIO) -> int:
    """Read the next whitespace-delimited integer from ``stream``.

    Tokens are parsed with ``int``.

    Raises:
        EOFError: If the stream holds no further token.
        ValueError: If the token is not an integer.
    """
    token = _next_token(stream)
    if not token:
        raise EOFError("No integer left to read")
    return int(token)


def read_ints(stream: TextIO) -> Iterator[int]:
    """Yield every remaining integer token of ``stream``, as ``read_int`` would."""
    while True:
        token = _next_token(stream)
        if not token:
            return
        yield int(token)


def format_int(value: int) -> str:
    """Format ``value`` in decimal, with a leading ``-`` for negatives."""
    return str(value)

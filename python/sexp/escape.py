"""Backslash escapes used inside quoted strings."""

from __future__ import annotations

from typing import Final

_BACKSLASH: Final[int] = ord("\\")

# Second byte of an escape pair -> decoded byte. Any other byte after a
# backslash decodes to itself.
UNESCAPES: Final[dict[int, int]] = {
    ord("0"): 0x00,
    ord("a"): 0x07,
    ord("b"): 0x08,
    ord("f"): 0x0C,
    ord("n"): 0x0A,
    ord("r"): 0x0D,
    ord("t"): 0x09,
    ord("v"): 0x0B,
    ord("?"): ord("?"),
}

_ESCAPES: Final[dict[int, bytes]] = {
    **{decoded: b"\\" + bytes([letter]) for letter, decoded in UNESCAPES.items()},
    ord('"'): b'\\"',
    ord("'"): b"\\'",
}

# Indexed by byte value.
_ENCODE_TABLE: Final[list[bytes]] = [_ESCAPES.get(b, bytes([b])) for b in range(256)]


def unescaped_length(src: bytes) -> int:
    """Number of bytes :func:`unescape` produces for *src*.

    Each escape pair counts once, every other byte counts once. A trailing
    lone backslash counts as a pair with its missing second byte.
    """
    length = 0
    pos = 0
    end = len(src)
    while pos < end:
        if src[pos] == _BACKSLASH:
            pos += 1
        pos += 1
        length += 1
    return length


def unescape(src: bytes) -> bytes:
    """Collapse every escape pair in *src* into the byte it denotes.

    *src* is the raw content between a string's quotes. A trailing lone
    backslash is emitted as is.
    """
    if _BACKSLASH not in src:
        return bytes(src)
    out = bytearray(unescaped_length(src))
    pos = 0
    dst = 0
    end = len(src)
    while pos < end:
        byte = src[pos]
        if byte == _BACKSLASH and pos + 1 < end:
            pos += 1
            second = src[pos]
            byte = UNESCAPES.get(second, second)
        out[dst] = byte
        dst += 1
        pos += 1
    return bytes(out)


def escape(data: bytes) -> bytes:
    """Inverse of :func:`unescape` for the control bytes and both quotes.

    All other bytes, the backslash included, pass through unchanged.
    """
    return b"".join(_ENCODE_TABLE[b] for b in data)

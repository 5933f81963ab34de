"""Exceptions raised by the strict entry points of the reader and by the printer.

``sexp.read`` itself never raises for malformed text; it reports absence.
``sexp.parse`` and ``sexp.iter_read`` turn the reader's recorded failure
into one of the exceptions below.
"""

from __future__ import annotations


class SexpError(Exception):
    """Base class for every error raised by this package."""


class ParseError(SexpError, ValueError):
    """Malformed S-expression source.

    Attributes:
        reason: Short human readable description of the failure.
        offset: Byte offset into the source where the failure was detected.

    """

    def __init__(self, reason: str, offset: int) -> None:
        super().__init__(f"{reason} at offset {offset}")
        self.reason = reason
        self.offset = offset


class UnterminatedStringError(ParseError):
    """A quote was opened but not closed before a newline or end of input."""


class DelimiterMismatchError(ParseError):
    """A list was closed with the wrong bracket shape, or never closed."""


class UnexpectedCloseError(ParseError):
    """A closing delimiter appeared where a value was expected."""


class UnexpectedEndError(ParseError):
    """Input ran out where a value was expected."""


class DisplayError(SexpError, TypeError):
    """A tree cannot be printed because it holds a ``None`` placeholder."""

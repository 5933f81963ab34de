"""Single-pass tokenizer over an immutable source buffer."""

from __future__ import annotations

import enum
import re
from collections.abc import Iterator
from typing import Final, NamedTuple

WHITESPACE: Final[bytes] = b" \t\f\n"
OPEN_DELIMITERS: Final[bytes] = b"({["
CLOSE_DELIMITERS: Final[bytes] = b")}]"
ATOM_TERMINATORS: Final[bytes] = WHITESPACE + b";" + OPEN_DELIMITERS + CLOSE_DELIMITERS + b'"'

# Matching close delimiter for each open delimiter byte.
CLOSING: Final[dict[int, int]] = dict(zip(OPEN_DELIMITERS, CLOSE_DELIMITERS))

_SKIP: Final = re.compile(rb"(?:[ \t\f\n]+|;[^\n]*)*")
_STRING: Final = re.compile(rb'"(?:\\.|[^"\\\n])*"', re.DOTALL)
_STRING_PREFIX: Final = re.compile(rb'"(?:\\.|[^"\\\n])*', re.DOTALL)
_ATOM: Final = re.compile(rb'[^ \t\f\n;(){}\[\]"]+')

_QUOTE: Final[int] = ord('"')


class TokenKind(enum.Enum):
    ERROR = "error"
    EOF = "eof"
    OPEN = "open"
    CLOSE = "close"
    STRING = "string"
    ATOM = "atom"


class Token(NamedTuple):
    """A token kind and its ``[start, end)`` byte span in the source.

    ``STRING`` spans include both quotes. ``ERROR`` spans cover the
    unterminated string from its opening quote to where scanning gave up.
    """

    kind: TokenKind
    start: int
    end: int


class Lexer:
    """Tokenizer positioned at :attr:`pos`, the end of the last token produced.

    Call :meth:`advance` to scan the next token into :attr:`token`. An
    ``ERROR`` token does not move :attr:`pos`, so a failed string leaves the
    lexer where it was before the attempt.
    """

    def __init__(self, source: bytes, pos: int = 0) -> None:
        self.source = source
        self.pos = pos
        self.token = Token(TokenKind.ERROR, pos, pos)

    def advance(self) -> Token:
        src = self.source
        start = _SKIP.match(src, self.pos).end()

        if start >= len(src):
            return self._emit(TokenKind.EOF, start, start)

        byte = src[start]
        if byte == _QUOTE:
            match = _STRING.match(src, start)
            if match is None:
                stopped = _STRING_PREFIX.match(src, start).end()
                self.token = Token(TokenKind.ERROR, start, stopped)
                return self.token
            return self._emit(TokenKind.STRING, start, match.end())
        if byte in OPEN_DELIMITERS:
            return self._emit(TokenKind.OPEN, start, start + 1)
        if byte in CLOSE_DELIMITERS:
            return self._emit(TokenKind.CLOSE, start, start + 1)
        return self._emit(TokenKind.ATOM, start, _ATOM.match(src, start).end())

    def text(self, token: Token) -> bytes:
        """Raw source bytes covered by *token*."""
        return self.source[token.start:token.end]

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens up to and including the first ``EOF`` or ``ERROR``."""
        while True:
            token = self.advance()
            yield token
            if token.kind in (TokenKind.EOF, TokenKind.ERROR):
                return

    def _emit(self, kind: TokenKind, start: int, end: int) -> Token:
        self.token = Token(kind, start, end)
        self.pos = end
        return self.token

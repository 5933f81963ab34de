"""Reader turning source text into :class:`Value` trees."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator
from typing import Final, NamedTuple, Optional, Union

from sexp.errors import (
    DelimiterMismatchError,
    ParseError,
    UnexpectedCloseError,
    UnexpectedEndError,
    UnterminatedStringError,
)
from sexp.escape import unescape
from sexp.lexer import CLOSING, Lexer, Token, TokenKind
from sexp.value import ListValue, NumberValue, StringValue, SymbolValue, Value

logger = logging.getLogger(__name__)

Source = Union[str, bytes, bytearray, memoryview]

# Decimal floating point prefix, as accepted by C's strtod minus inf/nan/hex.
_NUMBER: Final = re.compile(rb"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def source_bytes(source: Source) -> bytes:
    """Return *source* as bytes, UTF-8 encoding ``str`` input."""
    if isinstance(source, str):
        return source.encode("utf-8")
    if isinstance(source, (bytes, bytearray, memoryview)):
        return bytes(source)
    raise TypeError(f"expected str or bytes-like source, got {type(source).__name__}")


class _OpenList(NamedTuple):
    value: ListValue
    terminator: int
    start: int


class Parser:
    """Reads one value at a time from *source* starting at byte *pos*.

    Successive :meth:`read` calls return successive top-level values. After
    each call, :attr:`consumed` is the offset just past the value read, or
    where scanning stopped if nothing was read; :attr:`error` holds the first
    failure encountered, if any.

    Lists are built on an explicit stack of open lists, so nesting depth is
    bounded by memory rather than by the interpreter's recursion limit.
    """

    def __init__(self, source: bytes, pos: int = 0, *, strict: bool = True) -> None:
        self._lexer = Lexer(source, pos)
        self._strict = strict
        self._pending = False
        self._end = pos
        self.consumed = pos
        self.error: Optional[ParseError] = None

    def read(self) -> Optional[Value]:
        if not self._pending:
            self._lexer.advance()
        value = self._read_any()
        # Reading a value always scans one token past it.
        self._pending = value is not None
        self.consumed = self._end if value is not None else self._lexer.pos
        return value

    def _read_any(self) -> Optional[Value]:
        source = self._lexer.source
        stack: list[_OpenList] = []
        while True:
            token = self._lexer.token
            value: Optional[Value]
            if stack and token.kind in (TokenKind.CLOSE, TokenKind.EOF, TokenKind.ERROR):
                value = self._close_list(stack.pop(), token)
            elif token.kind is TokenKind.OPEN:
                stack.append(_OpenList(ListValue(), CLOSING[source[token.start]], token.start))
                self._lexer.advance()
                continue
            elif token.kind is TokenKind.STRING:
                value = self._read_string(token)
            elif token.kind is TokenKind.ATOM:
                value = self._read_atom(token)
            else:
                if token.kind is TokenKind.CLOSE:
                    self._fail(UnexpectedCloseError, "unexpected closing delimiter", token.start)
                elif token.kind is TokenKind.ERROR:
                    self._fail(UnterminatedStringError, "unterminated string", token.start)
                else:
                    self._fail(UnexpectedEndError, "unexpected end of input", token.start)
                value = None

            if not stack:
                return value
            if value is None and self._strict:
                return None
            stack[-1].value.append(value)

    def _read_string(self, token: Token) -> StringValue:
        raw = self._lexer.source[token.start + 1:token.end - 1]
        decoded = unescape(raw)
        self._consume(token)
        return StringValue(decoded)

    def _read_atom(self, token: Token) -> Value:
        text = self._lexer.text(token)
        self._consume(token)
        match = _NUMBER.match(text)
        if match is not None:
            return NumberValue(float(match.group().decode("ascii")))
        return SymbolValue(text)

    def _close_list(self, opened: _OpenList, token: Token) -> Optional[ListValue]:
        source = self._lexer.source
        if token.kind is TokenKind.ERROR:
            self._fail(UnterminatedStringError, "unterminated string", token.start)
            return None
        if token.kind is TokenKind.EOF:
            self._fail(
                DelimiterMismatchError,
                f"missing {chr(opened.terminator)!r} for list opened at offset {opened.start}",
                token.start,
            )
            return None
        if source[token.start] != opened.terminator:
            self._fail(
                DelimiterMismatchError,
                f"expected {chr(opened.terminator)!r} but found {chr(source[token.start])!r}",
                token.start,
            )
            return None
        self._consume(token)
        return opened.value

    def _consume(self, token: Token) -> None:
        self._end = token.end
        self._lexer.advance()

    def _fail(self, error: type[ParseError], reason: str, offset: int) -> None:
        logger.debug("read failed: %s at offset %d", reason, offset)
        if self.error is None:
            self.error = error(reason, offset)

    def failure(self) -> ParseError:
        """The recorded failure, for callers that got ``None`` from :meth:`read`."""
        if self.error is None:
            return ParseError("no value read", self.consumed)
        return self.error


def read(source: Source, *, start: int = 0, strict: bool = True) -> tuple[Optional[Value], int]:
    """Read one value from *source*, skipping leading whitespace and comments.

    Returns the value, or ``None`` when nothing could be read, together with
    the byte offset just past the value (or where scanning stopped). Pass
    that offset back as *start* to read the next top-level form.

    With ``strict=False`` a nested element that fails to read is kept as a
    ``None`` element instead of discarding the enclosing list.
    """
    parser = Parser(source_bytes(source), start, strict=strict)
    value = parser.read()
    return value, parser.consumed


def parse(source: Source, *, strict: bool = True) -> Value:
    """Read exactly one value; only whitespace and comments may follow it.

    Raises:
        ParseError: If the input is malformed, empty, or has trailing content.

    """
    data = source_bytes(source)
    parser = Parser(data, strict=strict)
    value = parser.read()
    if value is None:
        raise parser.failure()
    trailing = Lexer(data, parser.consumed).advance()
    if trailing.kind is not TokenKind.EOF:
        raise ParseError("unexpected content after value", trailing.start)
    return value


def iter_read(source: Source, *, strict: bool = True) -> Iterator[Value]:
    """Yield every top-level value in *source* in order.

    Stops cleanly at the end of input.

    Raises:
        ParseError: On the first malformed form.

    """
    data = source_bytes(source)
    pos = 0
    while True:
        parser = Parser(data, pos, strict=strict)
        value = parser.read()
        if value is None:
            if isinstance(parser.error, UnexpectedEndError):
                return
            raise parser.failure()
        yield value
        pos = parser.consumed

"""Serialization of :class:`Value` trees back to canonical text."""

from __future__ import annotations

from typing import Final, Optional, Union

from sexp.errors import DisplayError
from sexp.escape import escape
from sexp.value import ListValue, NumberValue, StringValue, SymbolValue, Value

# C's %lg: 6 significant digits, trailing zeros trimmed. Lossy for precise doubles.
NUMBER_FORMAT: Final[str] = "%g"

# Stands in for a None placeholder when a Printer is built with absent_marker.
ABSENT_MARKER: Final[bytes] = b"#<absent>"


class Printer:
    """Accumulates the rendering of one or more values in a growable buffer.

    Lists are walked with an explicit work stack, so nesting depth is not
    bounded by the interpreter's recursion limit. ``None`` placeholders
    raise :class:`DisplayError` unless *absent_marker* is given, in which
    case the marker is written in their place.
    """

    def __init__(self, absent_marker: Optional[bytes] = None) -> None:
        self._buf = bytearray()
        self._absent_marker = absent_marker

    def append(self, value: Optional[Value]) -> Printer:
        buf = self._buf
        # Entries are values still to render or literal bytes to copy.
        work: list[Union[Optional[Value], bytes]] = [value]
        while work:
            item = work.pop()
            if isinstance(item, bytes):
                buf += item
            elif isinstance(item, StringValue):
                buf += b'"'
                buf += escape(item.value)
                buf += b'"'
            elif isinstance(item, SymbolValue):
                buf += item.value
            elif isinstance(item, NumberValue):
                buf += (NUMBER_FORMAT % item.value).encode("ascii")
            elif isinstance(item, ListValue):
                buf += b"("
                work.append(b")")
                elements = list(item)
                for i in range(len(elements) - 1, -1, -1):
                    work.append(elements[i])
                    if i > 0:
                        work.append(b" ")
            elif item is None and self._absent_marker is not None:
                buf += self._absent_marker
            else:
                raise DisplayError(f"cannot display {item!r}; expected a Value")
        return self

    def getvalue(self) -> bytes:
        return bytes(self._buf)


def display(value: Value) -> bytes:
    """Render *value* as canonical S-expression text.

    Raises:
        DisplayError: If the tree holds a ``None`` placeholder from a lenient read.

    """
    return Printer().append(value).getvalue()

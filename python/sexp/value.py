"""In-memory representation of S-expressions.

The variant set is closed: a value is exactly one of :class:`StringValue`,
:class:`SymbolValue`, :class:`NumberValue` or :class:`ListValue`, tagged
by :attr:`Value.kind`. Lists own their children; a value can be appended
to at most one list and never to itself or one of its ancestors, so
every tree is acyclic.
"""

from __future__ import annotations

import enum
import itertools
import numbers
import struct
from collections.abc import Iterator
from typing import ClassVar, Optional, Union, cast, final

BytesLike = Union[str, bytes, bytearray, memoryview]


class ValueKind(enum.Enum):
    STRING = "string"
    SYMBOL = "symbol"
    NUMBER = "number"
    LIST = "list"


class Value:
    """Common base of the four value variants.

    Not meant to be instantiated or subclassed outside this module.
    """

    __slots__ = ("_parent",)

    kind: ClassVar[ValueKind]

    def __init_subclass__(cls, **kwargs: object) -> None:
        if cls.__module__ != __name__:
            raise TypeError("Value is a closed type and cannot be subclassed")
        super().__init_subclass__(**kwargs)

    def __init__(self) -> None:
        self._parent: Optional[ListValue] = None

    @property
    def parent(self) -> Optional[ListValue]:
        """Owning list, or ``None`` for a freestanding root."""
        return self._parent

    @property
    def is_atom(self) -> bool:
        """``True`` for strings, symbols and numbers, ``False`` for lists."""
        return self.kind is not ValueKind.LIST

    def is_string(self) -> bool:
        return self.kind is ValueKind.STRING

    def is_symbol(self) -> bool:
        return self.kind is ValueKind.SYMBOL

    def is_number(self) -> bool:
        return self.kind is ValueKind.NUMBER

    def is_list(self) -> bool:
        return self.kind is ValueKind.LIST

    def clone(self) -> Value:
        """Deep-copy this value into a new, unowned tree."""
        raise NotImplementedError

    def __repr__(self) -> str:
        from sexp.printer import ABSENT_MARKER, Printer

        text = Printer(ABSENT_MARKER).append(self).getvalue()
        return text.decode("utf-8", "backslashreplace")


def _coerce_bytes(data: BytesLike, length: Optional[int]) -> bytes:
    if isinstance(data, str):
        raw = data.encode("utf-8")
    elif isinstance(data, (bytes, bytearray, memoryview)):
        raw = bytes(data)
    else:
        raise TypeError(f"expected str or bytes-like content, got {type(data).__name__}")
    if length is None:
        return raw
    if not 0 <= length <= len(raw):
        raise ValueError(f"length {length} out of range for {len(raw)} bytes of content")
    return raw[:length]


def _until_nul(data: BytesLike) -> bytes:
    raw = _coerce_bytes(data, None)
    end = raw.find(b"\0")
    return raw if end < 0 else raw[:end]


class _BytesValue(Value):
    __slots__ = ("_data",)

    def __init__(self, data: BytesLike, length: Optional[int] = None) -> None:
        super().__init__()
        self._data = _coerce_bytes(data, length)

    @property
    def value(self) -> bytes:
        """Raw content; may contain zero bytes."""
        return self._data

    @property
    def length(self) -> int:
        return len(self._data)

    def clone(self) -> Value:
        return type(self)(self._data)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._data == cast(_BytesValue, other)._data

    def __hash__(self) -> int:
        return hash((self.kind, self._data))


@final
class StringValue(_BytesValue):
    """Quoted string content, stored unescaped."""

    __slots__ = ()

    kind = ValueKind.STRING

    @classmethod
    def from_cstring(cls, data: BytesLike) -> StringValue:
        """Build a string from content terminated by the first zero byte."""
        return cls(_until_nul(data))


@final
class SymbolValue(_BytesValue):
    """Bare identifier-like atom, compared by exact byte content."""

    __slots__ = ()

    kind = ValueKind.SYMBOL

    @classmethod
    def from_cstring(cls, data: BytesLike) -> SymbolValue:
        """Build a symbol from content terminated by the first zero byte."""
        return cls(_until_nul(data))

    def eq(self, ref: BytesLike) -> bool:
        """Return whether the symbol is byte-for-byte equal to *ref*."""
        return self._data == _coerce_bytes(ref, None)


_DOUBLE = struct.Struct("<d")


@final
class NumberValue(Value):
    """A 64-bit floating point number."""

    __slots__ = ("_value",)

    kind = ValueKind.NUMBER

    def __init__(self, value: float) -> None:
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            raise TypeError(f"expected a real number, got {type(value).__name__}")
        super().__init__()
        self._value = float(value)

    @property
    def value(self) -> float:
        return self._value

    def clone(self) -> Value:
        return NumberValue(self._value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NumberValue):
            return NotImplemented
        return _DOUBLE.pack(self._value) == _DOUBLE.pack(other._value)

    def __hash__(self) -> int:
        return hash((self.kind, _DOUBLE.pack(self._value)))


@final
class ListValue(Value):
    """Ordered, append-only sequence of owned values.

    Elements are normally :class:`Value` instances; ``None`` appears only as
    the placeholder for a nested element that failed to read when the reader
    runs with ``strict=False``.
    """

    __slots__ = ("_elements",)

    kind = ValueKind.LIST

    def __init__(self) -> None:
        super().__init__()
        self._elements: list[Optional[Value]] = []

    def append(self, value: Optional[Value]) -> ListValue:
        """Append *value* as the last element and take ownership of it.

        Returns the list itself, so ``lst = lst.append(x)`` chains work.

        Raises:
            TypeError:  If *value* is neither a :class:`Value` nor ``None``.
            ValueError: If *value* already belongs to a list, or is this list
                        or one of its ancestors.

        """
        if value is not None:
            if not isinstance(value, Value):
                raise TypeError(f"expected a Value, got {type(value).__name__}")
            if value._parent is not None:
                raise ValueError("value already belongs to a list; clone() it first")
            node: Optional[ListValue] = self
            while node is not None:
                if node is value:
                    raise ValueError("appending a list to itself or its descendant")
                node = node._parent
            value._parent = self
        self._elements.append(value)
        return self

    @property
    def length(self) -> int:
        return len(self._elements)

    def nth(self, n: int) -> Optional[Value]:
        """Element at 0-based position *n*.

        Raises:
            IndexError: If *n* is outside ``[0, len(self))``.

        """
        if not 0 <= n < len(self._elements):
            raise IndexError(f"list index {n} out of range for length {len(self._elements)}")
        return self._elements[n]

    @property
    def head(self) -> Optional[Value]:
        """First element.

        Raises:
            IndexError: If the list is empty.

        """
        if not self._elements:
            raise IndexError("head of an empty list")
        return self._elements[0]

    @property
    def tail(self) -> Iterator[Optional[Value]]:
        """Iterator over every element after the first."""
        return itertools.islice(self._elements, 1, None)

    def clone(self) -> Value:
        copy = ListValue()
        for element in self._elements:
            copy.append(None if element is None else element.clone())
        return copy

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[Optional[Value]]:
        return iter(self._elements)

    def __getitem__(self, key: Union[int, str, bytes]) -> Optional[Value]:
        """Positional access, or lookup of the first ``(key ...)`` child.

        Raises:
            IndexError: If an integer *key* is out of range.
            KeyError:   If no child list starts with the symbol *key*.
            TypeError:  For any other key type.

        """
        if isinstance(key, bool):
            raise TypeError("list indices must be int or str")
        if isinstance(key, int):
            return self._elements[key]
        if isinstance(key, (str, bytes)):
            for element in self._elements:
                if isinstance(element, ListValue) and element._elements:
                    first = element._elements[0]
                    if isinstance(first, SymbolValue) and first.eq(key):
                        return element
            raise KeyError(key)
        raise TypeError(f"list indices must be int or str, not {type(key).__name__}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ListValue):
            return NotImplemented
        return self._elements == other._elements


def is_string(value: Optional[Value]) -> bool:
    return value is not None and value.kind is ValueKind.STRING


def is_symbol(value: Optional[Value]) -> bool:
    return value is not None and value.kind is ValueKind.SYMBOL


def is_number(value: Optional[Value]) -> bool:
    return value is not None and value.kind is ValueKind.NUMBER


def is_list(value: Optional[Value]) -> bool:
    return value is not None and value.kind is ValueKind.LIST


def free(value: Optional[Value]) -> None:
    """Release a tree depth-first; the value must not be used afterwards.

    Only a root can be freed. Passing ``None`` is a no-op.

    Raises:
        ValueError: If *value* still belongs to a list.

    """
    if value is None:
        return
    if value._parent is not None:
        raise ValueError("cannot free a value that still belongs to a list; free its root")
    stack: list[Value] = [value]
    while stack:
        node = stack.pop()
        if isinstance(node, ListValue):
            stack.extend(child for child in node._elements if child is not None)
            node._elements.clear()
        node._parent = None

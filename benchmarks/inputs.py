from __future__ import annotations

from typing import Final

import pytest

SMALL: Final[bytes] = b"(a b c d e)"

MEDIUM: Final[bytes] = (
    b"(node (kind widget) (id 42) (label \"Main \\\"panel\\\"\\n\")"
    b" (pos 12.5 -3.2) (size 100 200) (visible true) (zorder 3))"
)


def _entry(group: int, n: int) -> bytes:
    sign = -1 if group % 2 else 1
    x = sign * (42.0 - 3.5 * n)
    return (
        f"  {{entry {n} [at {x:.1f} {n * 2.5:.1f}] (rot {sign * n * 15:.1f})"
        f" (ref \"G{group}:{n}\\t\")}}\n"
    ).encode()


def netlist(groups: int, entries: int) -> bytes:
    """A KiCad-style document mixing bracket shapes, strings, comments and numbers."""
    parts = [b"(root (meta 1234 \"generated\") ; header\n"]
    for g in range(groups):
        parts.append(f" (group g{g} ; {entries} entries\n".encode())
        parts.extend(_entry(g, n) for n in range(1, entries + 1))
        parts.append(b" )\n")
    parts.append(b")")
    return b"".join(parts)


LARGE: Final[bytes] = netlist(2, 11)


def generate(depth: int, width: int) -> bytes:
    atoms = b" ".join(f"a{i} {i}.5".encode() for i in range(width))

    def _build(d: int) -> bytes:
        if d == 0:
            return atoms
        inner = _build(d - 1)
        label = f"w{d}".encode()
        return b"[" + label + b" " + inner + b" " + atoms + b"]"

    return _build(depth)


_DEEP_DEPTH: Final[int] = 8
_DEEP_WIDTH: Final[int] = 6
DEEP: Final[bytes] = generate(_DEEP_DEPTH, _DEEP_WIDTH)

_WIDE_DEPTH: Final[int] = 1
_WIDE_WIDTH: Final[int] = 34
WIDE: Final[bytes] = generate(_WIDE_DEPTH, _WIDE_WIDTH)

# Past the interpreter's default recursion limit.
_NESTED_DEPTH: Final[int] = 5000
NESTED: Final[bytes] = b"(x " * _NESTED_DEPTH + b")" * _NESTED_DEPTH

# A stream of top-level forms, as read by iter_read or the CLI.
STREAM: Final[bytes] = b"\n".join(
    f"; form {i}\n(define v{i} \"value {i}\\n\" {i * 0.25})".encode() for i in range(200)
)

INPUTS: Final = [
    pytest.param(SMALL, id="small"),
    pytest.param(MEDIUM, id="medium"),
    pytest.param(LARGE, id="large"),
    pytest.param(DEEP, id="deep"),
    pytest.param(NESTED, id="nested"),
]

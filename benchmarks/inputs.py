from __future__ import annotations

from typing import Final

import pytest

SMALL: Final[bytes] = b"(a b c d e)"

MEDIUM: Final[bytes] = (
    b"(node (kind widget) (id 42) (pos 12.5 -3.2) (size 100 200) (visible true) (zorder 3))"
)


def _group(label: str, sign: int) -> bytes:
    entries = b"".join(
        f"\n  (entry {i} (p {sign * (45 - 4 * i):.1f} {(-1) ** i * 2.5 * i:.1f})"
        f" (q {sign * 0.1 * i:.1f} 0.0) (r {sign * 15.0 * i:.1f}))".encode()
        for i in range(1, 12)
    )
    return f"\n (group {label}".encode() + entries + b"\n )"


LARGE: Final[bytes] = (
    b"(root"
    b"\n (meta 1234)"
    b"\n (item (p 0.0 0.0) (q 1.2 -0.4))"
    + _group("a", -1)
    + _group("b", 1)
    + b")"
)


def generate(depth: int, width: int) -> bytes:
    atoms = b" ".join(f"a{i}".encode() for i in range(width))

    def _build(d: int) -> bytes:
        if d == 0:
            return atoms
        inner = _build(d - 1)
        label = f"w{d}".encode()
        return b"(" + label + b" " + inner + b" " + atoms + b")"

    return _build(depth)


_DEEP_DEPTH: Final[int] = 8
_DEEP_WIDTH: Final[int] = 6
DEEP: Final[bytes] = generate(_DEEP_DEPTH, _DEEP_WIDTH)

_WIDE_DEPTH: Final[int] = 1
_WIDE_WIDTH: Final[int] = 34
WIDE: Final[bytes] = generate(_WIDE_DEPTH, _WIDE_WIDTH)

# Right-nested chain as deep as the default interpreter recursion limit,
# still inside the reader's default depth guard.
_NESTED_DEPTH: Final[int] = 1000
NESTED: Final[bytes] = b"(x " * _NESTED_DEPTH + b"y" + b")" * _NESTED_DEPTH

INPUTS: Final = [
    pytest.param(SMALL, id="small"),
    pytest.param(MEDIUM, id="medium"),
    pytest.param(LARGE, id="large"),
    pytest.param(DEEP, id="deep"),
    pytest.param(NESTED, id="nested"),
]

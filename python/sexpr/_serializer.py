"""Writer: render an expression tree as canonical single-line text."""

from __future__ import annotations

from collections.abc import Iterator

from sexpr._node import Atom, Expression, List


def serialize(expr: Expression) -> str:
    """Render *expr* in canonical form.

    Atoms render as their text; lists as ``(`` followed by the children
    separated by one space and then ``)``. No other whitespace is emitted,
    so ``parse(serialize(e)) == e`` for every expression.

    Raises:
        TypeError: If *expr* is not an :class:`Atom` or :class:`List`.

    """
    if isinstance(expr, Atom):
        return expr.value
    if not isinstance(expr, List):
        raise TypeError(f"cannot serialize {type(expr).__name__}")

    out: list[str] = ["("]
    stack: list[Iterator[Expression]] = [iter(expr.children)]
    while stack:
        child = next(stack[-1], None)
        if child is None:
            stack.pop()
            out.append(")")
            continue
        # An atom never renders as "(", so this only holds at list start.
        if out[-1] != "(":
            out.append(" ")
        if isinstance(child, List):
            out.append("(")
            stack.append(iter(child.children))
        else:
            out.append(child.value)
    return "".join(out)

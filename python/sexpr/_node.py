"""Immutable expression tree: :class:`Atom` and :class:`List`."""

from __future__ import annotations

import contextlib
import re
from collections.abc import Iterable, Iterator
from typing import Final, TypeAlias, overload

_FORBIDDEN: Final[re.Pattern[str]] = re.compile(r"[ \t\n\r()]")
_NUMBER: Final[re.Pattern[str]] = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_INTEGER: Final[re.Pattern[str]] = re.compile(r"[+-]?[0-9]+")


class Atom:
    """Leaf node holding an opaque, non-empty token string.

    The text is stored verbatim, so ``Atom("007")`` renders back as ``007``.
    """

    __slots__ = ("_text",)

    def __init__(self, text: str) -> None:
        """Create an atom.

        Raises:
            TypeError:  If *text* is not a ``str``.
            ValueError: If *text* is empty or contains whitespace or a
                        parenthesis.

        """
        if not isinstance(text, str):
            raise TypeError(f"atom text must be str, not {type(text).__name__}")
        if not text:
            raise ValueError("atom text must not be empty")
        match = _FORBIDDEN.search(text)
        if match is not None:
            raise ValueError(f"atom text contains {match.group()!r} at index {match.start()}")
        self._text = text

    @classmethod
    def _from_token(cls, text: str) -> Atom:
        # The tokenizer only produces valid atom text.
        atom = cls.__new__(cls)
        atom._text = text
        return atom

    @property
    def value(self) -> str:
        """Raw text of the atom."""
        return self._text

    @property
    def is_atom(self) -> bool:
        return True

    @property
    def is_number(self) -> bool:
        """``True`` if the text is a decimal integer or float literal."""
        return _NUMBER.fullmatch(self._text) is not None

    def to_number(self) -> int | float:
        """Interpret the text as a number.

        Integer literals (optionally signed, leading zeros allowed) become
        ``int``; other numeric literals become ``float``. An integer too long
        for ``int`` conversion (see ``sys.set_int_max_str_digits``) falls
        back to ``float``.

        Raises:
            ValueError: If the atom is not numeric.

        """
        if not self.is_number:
            raise ValueError(f"atom {self._text!r} is not a number")
        if _INTEGER.fullmatch(self._text):
            with contextlib.suppress(ValueError):
                return int(self._text)
        return float(self._text)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Atom):
            return NotImplemented
        return self._text == other._text

    def __hash__(self) -> int:
        return hash(self._text)

    def __repr__(self) -> str:
        return self._text

    __str__ = __repr__


class List:
    """Ordered, possibly empty sequence of child expressions.

    Lists never change after construction. The ``appended``, ``prepended``,
    ``inserted`` and ``removed`` methods return new lists and leave the
    receiver untouched.
    """

    __slots__ = ("_children", "_hash")

    def __init__(self, children: Iterable[Expression] = ()) -> None:
        """Create a list from *children*.

        Raises:
            TypeError: If a child is not an :class:`Atom` or :class:`List`.

        """
        items = tuple(children)
        for child in items:
            _check_child(child)
        self._children: tuple[Expression, ...] = items
        self._hash: int | None = None

    @classmethod
    def _from_children(cls, children: list[Expression]) -> List:
        # Callers guarantee every child is already an Atom or List.
        node = cls.__new__(cls)
        node._children = tuple(children)
        node._hash = None
        return node

    @property
    def children(self) -> tuple[Expression, ...]:
        return self._children

    @property
    def is_atom(self) -> bool:
        return False

    @property
    def head(self) -> Expression:
        """First child.

        Raises:
            IndexError: If the list is empty.

        """
        if not self._children:
            raise IndexError("head of empty list")
        return self._children[0]

    @property
    def tail(self) -> Iterator[Expression]:
        """Iterator over all children after the first (i.e. ``children[1:]``)."""
        it = iter(self._children)
        next(it, None)
        return it

    def __len__(self) -> int:
        return len(self._children)

    def __iter__(self) -> Iterator[Expression]:
        return iter(self._children)

    @overload
    def __getitem__(self, key: int) -> Expression: ...
    @overload
    def __getitem__(self, key: slice) -> List: ...
    @overload
    def __getitem__(self, key: str) -> List: ...
    def __getitem__(self, key: int | slice | str) -> Expression:
        """Look up a child by position, slice or head atom.

        A ``str`` key returns the first child list whose head is an atom
        with that text, so ``parse("(p (pos 1 2))")["pos"]`` is
        ``(pos 1 2)``.

        Raises:
            IndexError: If an integer index is out of range.
            KeyError:   If no child list is headed by the string key.
            TypeError:  For any other key type.

        """
        if isinstance(key, int):
            return self._children[key]
        if isinstance(key, slice):
            return List._from_children(list(self._children[key]))
        if isinstance(key, str):
            for child in self._children:
                if isinstance(child, List) and child._children:
                    first = child._children[0]
                    if isinstance(first, Atom) and first._text == key:
                        return child
            raise KeyError(key)
        raise TypeError(f"list indices must be int, slice or str, not {type(key).__name__}")

    def appended(self, child: Expression) -> List:
        """Return a copy of this list with *child* added at the end."""
        _check_child(child)
        return List._from_children([*self._children, child])

    def prepended(self, child: Expression) -> List:
        """Return a copy of this list with *child* added at the front."""
        _check_child(child)
        return List._from_children([child, *self._children])

    def inserted(self, index: int, child: Expression) -> List:
        """Return a copy with *child* inserted before *index* (``list.insert`` rules)."""
        _check_child(child)
        children = list(self._children)
        children.insert(index, child)
        return List._from_children(children)

    def removed(self, index: int) -> List:
        """Return a copy without the child at *index*.

        Raises:
            IndexError: If *index* is out of range.

        """
        children = list(self._children)
        del children[index]
        return List._from_children(children)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, List):
            return NotImplemented
        pending: list[tuple[List, List]] = [(self, other)]
        while pending:
            left, right = pending.pop()
            if left is right:
                continue
            if len(left._children) != len(right._children):
                return False
            for a, b in zip(left._children, right._children):
                if isinstance(a, List):
                    if not isinstance(b, List):
                        return False
                    pending.append((a, b))
                elif a != b:
                    return False
        return True

    def __hash__(self) -> int:
        # Canonical text identifies a tree uniquely.
        if self._hash is None:
            self._hash = hash(repr(self))
        return self._hash

    def __repr__(self) -> str:
        # Deferred: _serializer imports this module.
        from sexpr._serializer import serialize

        return serialize(self)

    __str__ = __repr__


Expression: TypeAlias = Atom | List


def _check_child(child: object) -> None:
    if not isinstance(child, (Atom, List)):
        raise TypeError(f"list children must be Atom or List, not {type(child).__name__}")

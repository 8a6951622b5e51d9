"""Reader: build an expression tree from S-expression text.

The reader keeps open lists on an explicit stack instead of recursing, so
nesting depth is limited only by ``max_depth`` and never by the
interpreter's recursion limit.
"""

from __future__ import annotations

import logging
from typing import Final

from sexpr._errors import (
    EmptyInputError,
    InvalidEncodingError,
    NestingTooDeepError,
    ParseError,
    TrailingContentError,
    UnexpectedEndOfInputError,
    UnmatchedCloseParenError,
)
from sexpr._node import Atom, Expression, List
from sexpr._tokenizer import TokenKind, tokenize

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH: Final[int] = 1024


def _decode(source: str | bytes | bytearray) -> str:
    if isinstance(source, str):
        return source
    if isinstance(source, (bytes, bytearray)):
        try:
            return bytes(source).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise InvalidEncodingError(exc.start, exc.reason) from exc
    raise TypeError(f"source must be str, bytes or bytearray, not {type(source).__name__}")


def _read(text: str, max_depth: int | None) -> Expression:
    # Each frame is the offset of its "(" and the children read so far.
    stack: list[tuple[int, list[Expression]]] = []
    result: Expression | None = None

    for token in tokenize(text):
        if result is not None:
            if token.kind is TokenKind.CLOSE:
                raise UnmatchedCloseParenError(token.offset)
            raise TrailingContentError(token.offset)

        if token.kind is TokenKind.OPEN:
            if max_depth is not None and len(stack) >= max_depth:
                raise NestingTooDeepError(token.offset, max_depth)
            stack.append((token.offset, []))
            continue

        node: Expression
        if token.kind is TokenKind.CLOSE:
            if not stack:
                raise UnmatchedCloseParenError(token.offset)
            _, children = stack.pop()
            node = List._from_children(children)
        else:
            node = Atom._from_token(token.text)

        if stack:
            stack[-1][1].append(node)
        else:
            result = node

    if stack:
        raise UnexpectedEndOfInputError(len(text), stack[-1][0])
    if result is None:
        raise EmptyInputError(len(text))
    return result


def parse(source: str | bytes | bytearray, *, max_depth: int | None = DEFAULT_MAX_DEPTH) -> Expression:
    """Parse exactly one S-expression from *source*.

    Leading and trailing whitespace is ignored; anything else after the
    first complete expression is an error. Bytes are decoded as UTF-8;
    offsets in errors count characters of the decoded text, except for
    :class:`InvalidEncodingError`, whose offset counts bytes.

    Args:
        source:    Text to parse.
        max_depth: Maximum number of simultaneously open lists, or ``None``
                   for no limit.

    Raises:
        ParseError: If the input is malformed. The concrete subclass tells
                    which way (see :class:`ErrorKind`).
        TypeError:  If *source* is not ``str``, ``bytes`` or ``bytearray``.

    """
    try:
        return _read(_decode(source), max_depth)
    except ParseError as exc:
        logger.debug("parse failed: %s at offset %d", exc.kind.name, exc.offset)
        raise


def try_parse(
    source: str | bytes | bytearray, *, max_depth: int | None = DEFAULT_MAX_DEPTH
) -> Expression | ParseError:
    """Like :func:`parse`, but return the :class:`ParseError` instead of raising it."""
    try:
        return parse(source, max_depth=max_depth)
    except ParseError as exc:
        return exc

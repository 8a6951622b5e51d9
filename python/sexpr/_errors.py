"""Errors raised by the S-expression reader."""

from __future__ import annotations

import enum
from typing import ClassVar


class ErrorKind(enum.Enum):
    """Category of a :class:`ParseError`."""

    EMPTY_INPUT = "empty input"
    UNEXPECTED_END_OF_INPUT = "unexpected end of input"
    UNMATCHED_CLOSE_PAREN = "unmatched close paren"
    TRAILING_CONTENT = "trailing content"
    NESTING_TOO_DEEP = "nesting too deep"
    INVALID_ENCODING = "invalid encoding"


class ParseError(ValueError):
    """Malformed S-expression input.

    Every subclass carries the offset into the input at which the problem
    was detected, counted in characters of the decoded text.

    Attributes:
        offset: Character offset of the error.
        kind:   The :class:`ErrorKind` of the concrete subclass.

    """

    kind: ClassVar[ErrorKind]

    def __init__(self, offset: int, detail: str | None = None) -> None:
        message = f"{self.kind.value} at offset {offset}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
        self.offset = offset


class EmptyInputError(ParseError):
    """The input holds no expression (zero-length or whitespace only)."""

    kind = ErrorKind.EMPTY_INPUT


class UnexpectedEndOfInputError(ParseError):
    """The input ended while a list was still open.

    ``open_offset`` is the offset of the innermost unclosed ``(``.
    """

    kind = ErrorKind.UNEXPECTED_END_OF_INPUT

    def __init__(self, offset: int, open_offset: int) -> None:
        super().__init__(offset, f"expected ')' to close list opened at offset {open_offset}")
        self.open_offset = open_offset


class UnmatchedCloseParenError(ParseError):
    """A ``)`` appeared with no open list to close."""

    kind = ErrorKind.UNMATCHED_CLOSE_PAREN


class TrailingContentError(ParseError):
    """Non-whitespace input follows a complete top-level expression."""

    kind = ErrorKind.TRAILING_CONTENT


class NestingTooDeepError(ParseError):
    """A ``(`` would open more than ``limit`` nested lists."""

    kind = ErrorKind.NESTING_TOO_DEEP

    def __init__(self, offset: int, limit: int) -> None:
        super().__init__(offset, f"more than {limit} nested lists")
        self.limit = limit


class InvalidEncodingError(ParseError):
    """Bytes input is not valid UTF-8.

    Unlike the other errors, ``offset`` counts bytes, since the input could
    not be decoded into characters.
    """

    kind = ErrorKind.INVALID_ENCODING

"""Pure-Python S-expression reader and writer."""

from sexpr._errors import (
    EmptyInputError,
    ErrorKind,
    InvalidEncodingError,
    NestingTooDeepError,
    ParseError,
    TrailingContentError,
    UnexpectedEndOfInputError,
    UnmatchedCloseParenError,
)
from sexpr._node import Atom, Expression, List
from sexpr._parser import DEFAULT_MAX_DEPTH, parse, try_parse
from sexpr._serializer import serialize

__all__ = [
    "DEFAULT_MAX_DEPTH",
    "Atom",
    "EmptyInputError",
    "ErrorKind",
    "Expression",
    "InvalidEncodingError",
    "List",
    "NestingTooDeepError",
    "ParseError",
    "TrailingContentError",
    "UnexpectedEndOfInputError",
    "UnmatchedCloseParenError",
    "parse",
    "serialize",
    "try_parse",
]

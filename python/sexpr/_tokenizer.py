"""Split S-expression text into parenthesis and atom tokens."""

from __future__ import annotations

import enum
import re
from collections.abc import Iterator
from typing import Final, NamedTuple

# Whitespace (space, tab, newline, carriage return) is the only text no
# alternative matches, so finditer skips exactly the separators.
_TOKEN: Final[re.Pattern[str]] = re.compile(r"[()]|[^ \t\n\r()]+")


class TokenKind(enum.Enum):
    OPEN = "("
    CLOSE = ")"
    ATOM = "atom"


class Token(NamedTuple):
    kind: TokenKind
    text: str
    offset: int


def tokenize(text: str) -> Iterator[Token]:
    """Yield the tokens of *text* in order, each with its character offset."""
    for match in _TOKEN.finditer(text):
        value = match.group()
        if value == "(":
            yield Token(TokenKind.OPEN, value, match.start())
        elif value == ")":
            yield Token(TokenKind.CLOSE, value, match.start())
        else:
            yield Token(TokenKind.ATOM, value, match.start())

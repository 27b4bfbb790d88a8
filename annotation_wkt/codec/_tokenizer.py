"""WKT tokenizer.

Splits text into keyword/number words and the three punctuation tokens
the polygon grammar uses. Every token records its character offset so
syntax errors can point at the offending spot.
"""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass

_TOKEN_RE = re.compile(r"\s*(?:(?P<punct>[(),])|(?P<word>[^\s(),]+))")


class TokenKind(enum.Enum):
    WORD = "word"
    LPAREN = "("
    RPAREN = ")"
    COMMA = ","
    END = "end"


@dataclass(frozen=True, slots=True)
class Token:
    kind: TokenKind
    text: str
    position: int


def tokenize(text: str) -> list[Token]:
    """Tokenize *text*; the list always ends with an ``END`` token."""
    tokens: list[Token] = []
    pos = 0
    length = len(text)
    while pos < length:
        match = _TOKEN_RE.match(text, pos)
        if match is None or match.end() == pos:
            # Only trailing whitespace is left.
            break
        if match.group("punct") is not None:
            start = match.start("punct")
            tokens.append(Token(TokenKind(match.group("punct")), match.group("punct"), start))
        else:
            start = match.start("word")
            tokens.append(Token(TokenKind.WORD, match.group("word"), start))
        pos = match.end()
    tokens.append(Token(TokenKind.END, "", length))
    return tokens

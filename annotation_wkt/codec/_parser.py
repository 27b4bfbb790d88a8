"""Recursive-descent parser for POLYGON / MULTIPOLYGON WKT.

Grammar::

    geometry      ::= "POLYGON" polygon_body | "MULTIPOLYGON" "(" polygon_body ("," polygon_body)* ")"
    polygon_body  ::= "(" ring ("," ring)* ")"
    ring          ::= "(" [pair ("," pair)*] ")"
    pair          ::= (WORD | group)*
    group         ::= "(" (any token but END)* ")"   (balanced; never a valid pair)

The parser only checks structure. Pairs are returned as raw words so
the decoder can drop malformed pairs one at a time instead of failing
the whole ring.
"""

from __future__ import annotations

from dataclasses import dataclass

from annotation_wkt.codec._tokenizer import Token, TokenKind, tokenize
from annotation_wkt.core.constants import MULTIPOLYGON_KEYWORD, POLYGON_KEYWORD
from annotation_wkt.models.result import DecodeFailureReason, WktDecodeError

_EMPTY_KEYWORD = "EMPTY"


@dataclass(frozen=True, slots=True)
class RawPair:
    words: tuple[str, ...]
    position: int


@dataclass(frozen=True, slots=True)
class RawRing:
    pairs: tuple[RawPair, ...]
    position: int


@dataclass(frozen=True, slots=True)
class RawPolygon:
    rings: tuple[RawRing, ...]
    position: int


@dataclass(frozen=True, slots=True)
class ParsedGeometry:
    keyword: str
    polygons: tuple[RawPolygon, ...]


def parse_wkt(text: str) -> ParsedGeometry:
    """Parse *text* into raw polygons.

    Raises:
        WktDecodeError: With reason ``EMPTY_INPUT``, ``UNKNOWN_KEYWORD``,
            ``SYNTAX_ERROR`` or (for ``... EMPTY``) ``INSUFFICIENT_POINTS``.
    """
    if not text or not text.strip():
        raise WktDecodeError("WKT input is empty", reason=DecodeFailureReason.EMPTY_INPUT, position=0)
    return _Parser(tokenize(text)).parse()


def peek_keyword(text: str) -> str:
    """Return the upper-cased leading word of *text*, or ``""``."""
    tokens = tokenize(text)
    first = tokens[0]
    return first.text.upper() if first.kind is TokenKind.WORD else ""


class _Parser:
    def __init__(self, tokens: list[Token]) -> None:
        self._tokens = tokens
        self._index = 0

    # -- token helpers ------------------------------------------------------

    def _peek(self) -> Token:
        return self._tokens[self._index]

    def _advance(self) -> Token:
        token = self._tokens[self._index]
        if token.kind is not TokenKind.END:
            self._index += 1
        return token

    def _expect(self, kind: TokenKind, context: str) -> Token:
        token = self._peek()
        if token.kind is not kind:
            found = "end of input" if token.kind is TokenKind.END else repr(token.text)
            msg = f"Expected '{kind.value}' {context}, found {found} at position {token.position}"
            raise WktDecodeError(msg, reason=DecodeFailureReason.SYNTAX_ERROR, position=token.position)
        return self._advance()

    # -- grammar ------------------------------------------------------------

    def parse(self) -> ParsedGeometry:
        head = self._peek()
        keyword = head.text.upper() if head.kind is TokenKind.WORD else ""
        if keyword not in (POLYGON_KEYWORD, MULTIPOLYGON_KEYWORD):
            shown = head.text if head.kind is not TokenKind.END else ""
            msg = f"Unsupported WKT geometry type {shown!r}; expected POLYGON or MULTIPOLYGON"
            raise WktDecodeError(msg, reason=DecodeFailureReason.UNKNOWN_KEYWORD, position=head.position)
        self._advance()

        after = self._peek()
        if after.kind is TokenKind.WORD and after.text.upper() == _EMPTY_KEYWORD:
            msg = f"{keyword} EMPTY has no rings"
            raise WktDecodeError(
                msg, reason=DecodeFailureReason.INSUFFICIENT_POINTS, position=after.position
            )

        if keyword == POLYGON_KEYWORD:
            polygons = (self._polygon_body(),)
        else:
            polygons = self._multipolygon_body()

        tail = self._peek()
        if tail.kind is not TokenKind.END:
            msg = f"Unexpected trailing text {tail.text!r} at position {tail.position}"
            raise WktDecodeError(msg, reason=DecodeFailureReason.SYNTAX_ERROR, position=tail.position)
        return ParsedGeometry(keyword=keyword, polygons=polygons)

    def _multipolygon_body(self) -> tuple[RawPolygon, ...]:
        self._expect(TokenKind.LPAREN, "after MULTIPOLYGON")
        polygons = [self._polygon_body()]
        while self._peek().kind is TokenKind.COMMA:
            self._advance()
            polygons.append(self._polygon_body())
        self._expect(TokenKind.RPAREN, "to close the polygon list")
        return tuple(polygons)

    def _polygon_body(self) -> RawPolygon:
        start = self._expect(TokenKind.LPAREN, "to open a polygon")
        rings = [self._ring()]
        while self._peek().kind is TokenKind.COMMA:
            self._advance()
            rings.append(self._ring())
        self._expect(TokenKind.RPAREN, "to close the polygon")
        return RawPolygon(rings=tuple(rings), position=start.position)

    def _ring(self) -> RawRing:
        start = self._expect(TokenKind.LPAREN, "to open a ring")
        pairs = [self._pair()]
        while self._peek().kind is TokenKind.COMMA:
            self._advance()
            pairs.append(self._pair())
        self._expect(TokenKind.RPAREN, "to close the ring")
        return RawRing(pairs=tuple(p for p in pairs if p is not None), position=start.position)

    def _pair(self) -> RawPair | None:
        words: list[str] = []
        position = self._peek().position
        while self._peek().kind in (TokenKind.WORD, TokenKind.LPAREN):
            if self._peek().kind is TokenKind.LPAREN:
                words.extend(self._group())
            else:
                words.append(self._advance().text)
        # An empty slot (``()`` or ``,,``) carries no pair at all.
        return RawPair(words=tuple(words), position=position) if words else None

    def _group(self) -> list[str]:
        """Consume a balanced ``( ... )`` inside a ring and return its token texts.

        The parentheses are kept in the returned words, so the pair they
        belong to never parses as a coordinate and is dropped downstream.
        """
        start = self._advance()
        texts = [start.text]
        depth = 1
        while depth:
            token = self._peek()
            if token.kind is TokenKind.END:
                msg = f"Unbalanced '(' inside a ring at position {start.position}"
                raise WktDecodeError(msg, reason=DecodeFailureReason.SYNTAX_ERROR, position=token.position)
            if token.kind is TokenKind.LPAREN:
                depth += 1
            elif token.kind is TokenKind.RPAREN:
                depth -= 1
            texts.append(self._advance().text)
        return texts

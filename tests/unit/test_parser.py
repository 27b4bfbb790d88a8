"""Tests for the WKT tokenizer and structural parser."""

from __future__ import annotations

import pytest

from annotation_wkt.codec._parser import parse_wkt, peek_keyword
from annotation_wkt.codec._tokenizer import TokenKind, tokenize
from annotation_wkt.models.result import DecodeFailureReason, WktDecodeError


class TestTokenize:
    def test_kinds_and_positions(self) -> None:
        tokens = tokenize("POLYGON ((1 2, 3 4))")
        assert [(t.kind, t.position) for t in tokens] == [
            (TokenKind.WORD, 0),
            (TokenKind.LPAREN, 8),
            (TokenKind.LPAREN, 9),
            (TokenKind.WORD, 10),
            (TokenKind.WORD, 12),
            (TokenKind.COMMA, 13),
            (TokenKind.WORD, 15),
            (TokenKind.WORD, 17),
            (TokenKind.RPAREN, 18),
            (TokenKind.RPAREN, 19),
            (TokenKind.END, 20),
        ]

    def test_words_split_on_punctuation(self) -> None:
        tokens = tokenize("POLYGON((1 2,3 4))")
        assert [t.text for t in tokens if t.kind is TokenKind.WORD] == ["POLYGON", "1", "2", "3", "4"]

    def test_trailing_whitespace(self) -> None:
        tokens = tokenize("POLYGON  \n")
        assert [t.kind for t in tokens] == [TokenKind.WORD, TokenKind.END]
        assert tokens[-1].position == 10

    def test_empty_input_has_end_token(self) -> None:
        tokens = tokenize("")
        assert len(tokens) == 1
        assert tokens[0].kind is TokenKind.END


class TestParseStructure:
    def test_polygon_rings_and_pairs(self) -> None:
        parsed = parse_wkt("POLYGON ((1 2, 3 4, 5 6, 1 2), (0 0, 1 1, 2 0))")
        assert parsed.keyword == "POLYGON"
        assert len(parsed.polygons) == 1
        rings = parsed.polygons[0].rings
        assert [len(r.pairs) for r in rings] == [4, 3]
        assert rings[0].pairs[0].words == ("1", "2")

    def test_multipolygon_parts(self, two_triangles_wkt: str) -> None:
        parsed = parse_wkt(two_triangles_wkt)
        assert parsed.keyword == "MULTIPOLYGON"
        assert len(parsed.polygons) == 2

    def test_keyword_case_insensitive(self) -> None:
        assert parse_wkt("polygon ((1 2, 3 4, 5 6))").keyword == "POLYGON"

    def test_empty_slots_are_skipped(self) -> None:
        parsed = parse_wkt("POLYGON ((1 2,, 3 4, 5 6))")
        assert len(parsed.polygons[0].rings[0].pairs) == 3

    def test_odd_word_counts_kept_raw(self) -> None:
        parsed = parse_wkt("POLYGON ((1 2 3, 4, 5 6))")
        words = [p.words for p in parsed.polygons[0].rings[0].pairs]
        assert words == [("1", "2", "3"), ("4",), ("5", "6")]

    def test_parenthesised_group_kept_as_one_raw_pair(self) -> None:
        parsed = parse_wkt("POLYGON ((1 2, (3 4), 5 6, 7 8))")
        pairs = parsed.polygons[0].rings[0].pairs
        assert [p.words for p in pairs] == [
            ("1", "2"),
            ("(", "3", "4", ")"),
            ("5", "6"),
            ("7", "8"),
        ]
        assert pairs[1].position == 15


class TestParseErrors:
    @pytest.mark.parametrize(
        ("text", "reason", "position"),
        [
            ("   ", DecodeFailureReason.EMPTY_INPUT, 0),
            ("POINT (1 2)", DecodeFailureReason.UNKNOWN_KEYWORD, 0),
            ("(1 2, 3 4)", DecodeFailureReason.UNKNOWN_KEYWORD, 0),
            ("POLYGON EMPTY", DecodeFailureReason.INSUFFICIENT_POINTS, 8),
            ("POLYGON ((1 2, 3 4)", DecodeFailureReason.SYNTAX_ERROR, 19),
            ("POLYGON ((1 2, (3 4", DecodeFailureReason.SYNTAX_ERROR, 19),
            ("POLYGON ((1 2, 3 4, 5 6)) extra", DecodeFailureReason.SYNTAX_ERROR, 26),
            ("MULTIPOLYGON ((1 2, 3 4, 5 6))", DecodeFailureReason.SYNTAX_ERROR, 15),
        ],
    )
    def test_reason_and_position(
        self, text: str, reason: DecodeFailureReason, position: int
    ) -> None:
        with pytest.raises(WktDecodeError) as exc_info:
            parse_wkt(text)
        assert exc_info.value.reason is reason
        assert exc_info.value.position == position

    def test_message_names_expected_token(self) -> None:
        with pytest.raises(WktDecodeError, match="Expected '\\)' to close the polygon"):
            parse_wkt("POLYGON ((1 2, 3 4)")


class TestPeekKeyword:
    def test_upper_cases_first_word(self) -> None:
        assert peek_keyword("  multipolygon (((0 0") == "MULTIPOLYGON"

    def test_no_leading_word(self) -> None:
        assert peek_keyword("") == ""
        assert peek_keyword("((1 2))") == ""

"""Property-based tests for scanner and formatter invariants using Hypothesis."""

import re
import sys
import unicodedata
from pathlib import Path

from hypothesis import given, settings
from hypothesis import strategies as st

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.append(str(SRC))

from stmtlex.formatter import StatementFormatter  # noqa: E402
from stmtlex.lexer import Lexer, ScanKind, normalize_line, scan_token  # noqa: E402
from stmtlex.tokenize_cli import tokenize_lines  # noqa: E402

STATEMENT_TEXT = st.text(alphabet="0123456789+-*/()^;<>=!x$ \t\r\v\f", max_size=80)

LEXEME_RE = re.compile(r"Lexeme (\d+) is (.*)")


def _is_subsequence(needle: str, haystack: str) -> bool:
    it = iter(haystack)
    return all(ch in it for ch in needle)


class TestNormalizer:
    @given(st.text(max_size=300))
    @settings(max_examples=200)
    def test_no_whitespace_or_controls(self, line: str) -> None:
        out = normalize_line(line)
        assert not any(ch.isspace() for ch in out)
        assert not any(unicodedata.category(ch) == "Cc" for ch in out)

    @given(st.text(max_size=300))
    @settings(max_examples=200)
    def test_order_preserving_subsequence(self, line: str) -> None:
        assert _is_subsequence(normalize_line(line), line)

    @given(st.text(max_size=300))
    @settings(max_examples=200)
    def test_idempotent(self, line: str) -> None:
        once = normalize_line(line)
        assert normalize_line(once) == once


class TestScanner:
    @given(st.text(max_size=200))
    @settings(max_examples=200)
    def test_every_character_consumed_once(self, line: str) -> None:
        lexer = Lexer(line)
        results = lexer.scan()
        assert sum(r.consumed for r in results) == len(lexer.source)
        assert lexer.pos == len(lexer.source)

    @given(STATEMENT_TEXT)
    @settings(max_examples=200)
    def test_results_rebuild_normalized_line(self, line: str) -> None:
        results = Lexer(line).scan()
        assert "".join(r.text for r in results) == normalize_line(line)

    @given(STATEMENT_TEXT)
    @settings(max_examples=200)
    def test_cursor_strictly_increases(self, line: str) -> None:
        results = Lexer(line).scan()
        assert results[-1].kind is ScanKind.END_OF_LINE
        assert all(r.consumed >= 1 for r in results[:-1])
        assert sum(1 for r in results if r.kind is ScanKind.END_OF_LINE) == 1

    @given(STATEMENT_TEXT, st.integers(min_value=0, max_value=100))
    @settings(max_examples=200)
    def test_scan_is_pure(self, line: str, pos: int) -> None:
        text = normalize_line(line)
        assert scan_token(text, pos) == scan_token(text, pos)


class TestStatementNumbering:
    @given(st.lists(STATEMENT_TEXT, max_size=10))
    @settings(max_examples=200)
    def test_headers_and_indices(self, lines) -> None:
        formatter = StatementFormatter()
        records = list(tokenize_lines(lines, formatter))

        tokens = [
            r.text
            for line in lines
            for r in Lexer(line).scan()
            if r.kind is ScanKind.TOKEN
        ]
        terminators = tokens.count(";")
        assert formatter.statement == 1 + terminators

        headers = [rec for rec in records if rec.startswith("Statement #")]
        open_tail = 1 if tokens and tokens[-1] != ";" else 0
        assert len(headers) == terminators + open_tail
        assert headers == [f"Statement #{n}" for n in range(1, len(headers) + 1)]

        indices = []
        for rec in records:
            if rec.startswith("Statement #"):
                indices = []
            m = LEXEME_RE.fullmatch(rec)
            if m:
                indices.append(int(m.group(1)))
                assert indices == list(range(len(indices)))

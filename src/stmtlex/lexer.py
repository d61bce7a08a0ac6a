"""
Statement language lexer.

Scans normalized lines into operators, punctuation and integer literals.
Whitespace and control characters are squeezed out of each line before
scanning, so a lexeme is delimited only by the characters around it.
"""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass
from enum import Enum, auto
from typing import List


class ScanKind(Enum):
    TOKEN = auto()
    END_OF_LINE = auto()
    INVALID_CHARACTER = auto()


OPERATORS = frozenset("+-*/()^;<>=!")
DIGITS = frozenset("0123456789")
ASSIGN = "="
TERMINATOR = ";"


@dataclass(frozen=True)
class ScanResult:
    kind: ScanKind
    text: str = ""
    consumed: int = 0

    @property
    def is_terminator(self) -> bool:
        return self.kind is ScanKind.TOKEN and self.text == TERMINATOR


END_OF_LINE = ScanResult(ScanKind.END_OF_LINE)


def _is_separator(ch: str) -> bool:
    return ch.isspace() or unicodedata.category(ch) == "Cc"


def normalize_line(line: str) -> str:
    """Remove every whitespace and control character from ``line``."""
    return "".join(ch for ch in line if not _is_separator(ch))


def scan_token(text: str, pos: int = 0) -> ScanResult:
    """Scan one lexeme of ``text`` starting at ``pos``.

    Operators take a trailing ``=`` (``<=``, ``!=``, ``+=`` ...); integer
    literals never do. An invalid character consumes itself, so callers
    always move the cursor by ``result.consumed``.
    """
    if pos >= len(text):
        return END_OF_LINE

    c = text[pos]
    if c in OPERATORS:
        end = pos + 1
        if end < len(text) and text[end] == ASSIGN:
            end += 1
        lexeme = text[pos:end]
        return ScanResult(ScanKind.TOKEN, lexeme, len(lexeme))

    if c in DIGITS:
        end = pos + 1
        while end < len(text) and text[end] in DIGITS:
            end += 1
        lexeme = text[pos:end]
        return ScanResult(ScanKind.TOKEN, lexeme, len(lexeme))

    return ScanResult(ScanKind.INVALID_CHARACTER, c, 1)


class Lexer:
    def __init__(self, line: str):
        self.source = normalize_line(line)
        self.pos = 0

    def scan(self) -> List[ScanResult]:
        results: List[ScanResult] = []
        while True:
            result = scan_token(self.source, self.pos)
            results.append(result)
            if result.kind is ScanKind.END_OF_LINE:
                return results
            self.pos += result.consumed


__all__ = [
    "Lexer",
    "ScanKind",
    "ScanResult",
    "END_OF_LINE",
    "OPERATORS",
    "DIGITS",
    "TERMINATOR",
    "normalize_line",
    "scan_token",
]

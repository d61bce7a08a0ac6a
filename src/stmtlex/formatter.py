"""Render scan results as numbered statement records."""

from __future__ import annotations

from typing import List

from .lexer import ScanKind, ScanResult

SEPARATOR = "-" * 50
ERROR_MESSAGE = "Lexical error: not a lexeme"


class StatementFormatter:
    """Numbers statements from 1 and lexemes within a statement from 0.

    Counters carry over between lines; a statement ends only at ``;``.
    """

    def __init__(self) -> None:
        self.statement = 1
        self.count = 0
        self.lexemes = 0
        self.errors = 0

    @property
    def statements(self) -> int:
        """Statements started so far, counting an unterminated last one."""
        return self.statement - 1 + (1 if self.count else 0)

    def feed(self, result: ScanResult) -> List[str]:
        if result.kind is ScanKind.INVALID_CHARACTER:
            self.errors += 1
            return format_error(result.text)
        if result.kind is ScanKind.END_OF_LINE:
            return []
        return self._lexeme(result)

    def _lexeme(self, result: ScanResult) -> List[str]:
        records: List[str] = []
        if self.count == 0:
            if self.statement > 1:
                records.append(SEPARATOR)
            records.append(f"Statement #{self.statement}")
        records.append(f"Lexeme {self.count} is {result.text}")
        self.lexemes += 1
        self.count += 1
        if result.is_terminator:
            self.statement += 1
            self.count = 0
        return records


def format_error(ch: str) -> List[str]:
    """Error block for a character that starts no lexeme."""
    return [f"===> '{ch}'", ERROR_MESSAGE]


__all__ = ["StatementFormatter", "SEPARATOR", "ERROR_MESSAGE", "format_error"]

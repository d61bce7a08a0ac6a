from .lexer import Lexer, ScanKind, ScanResult, normalize_line, scan_token
from .formatter import StatementFormatter
from .tokenize_cli import SetupError, tokenize_file, tokenize_lines

__all__ = [
    "Lexer",
    "ScanKind",
    "ScanResult",
    "normalize_line",
    "scan_token",
    "StatementFormatter",
    "SetupError",
    "tokenize_file",
    "tokenize_lines",
]

"""stmtlex: write the numbered lexemes of a statement file to another file."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Iterable, Iterator, NoReturn, Optional, Sequence

from .formatter import StatementFormatter
from .lexer import Lexer

DONE_MESSAGE = "Token File Successfully Created!"


class SetupError(Exception):
    def __init__(self, path: Path, mode: str):
        super().__init__(f"could not open {path} for {mode}")
        self.path = path
        self.mode = mode


class _ArgumentParser(argparse.ArgumentParser):
    # Usage errors exit with status 1.
    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def tokenize_lines(
    lines: Iterable[str], formatter: Optional[StatementFormatter] = None
) -> Iterator[str]:
    """Yield output records for ``lines``, one physical line at a time."""
    if formatter is None:
        formatter = StatementFormatter()
    for line in lines:
        for result in Lexer(line).scan():
            yield from formatter.feed(result)


def tokenize_file(
    input_path: Path, output_path: Path, encoding: str = "utf-8"
) -> StatementFormatter:
    try:
        text = Path(input_path).read_text(encoding=encoding)
    except (OSError, LookupError, UnicodeDecodeError) as e:
        raise SetupError(input_path, "reading") from e

    try:
        dst = open(output_path, "w", encoding=encoding)
    except OSError as e:
        raise SetupError(output_path, "writing") from e

    formatter = StatementFormatter()
    with dst:
        for record in tokenize_lines(text.split("\n"), formatter):
            dst.write(record + "\n")
    return formatter


def main(argv: Optional[Sequence[str]] = None) -> int:
    ap = _ArgumentParser(
        prog="stmtlex",
        description="Split statements into numbered lexemes",
    )
    ap.add_argument("input", type=Path, help="Source file to scan")
    ap.add_argument("output", type=Path, help="File to write lexemes to")
    ap.add_argument(
        "--encoding",
        default="utf-8",
        help="Text encoding of both files (default: utf-8)",
    )
    ap.add_argument(
        "-v", "--verbose", action="store_true", help="Print progress steps"
    )
    args = ap.parse_args(argv)

    try:
        log_step(f"scanning {args.input}", args.verbose)
        formatter = tokenize_file(args.input, args.output, args.encoding)
    except SetupError as e:
        log_error(str(e))
        return 1

    log_step(
        f"wrote {formatter.lexemes} lexemes in {formatter.statements} "
        f"statements, {formatter.errors} errors, to {args.output}",
        args.verbose,
    )
    print(DONE_MESSAGE)
    return 0


def log_step(msg: str, verbose: bool = False) -> None:
    if verbose:
        print(f"[stmtlex] {msg}...")


def log_error(msg: str) -> None:
    print(f"ERROR: {msg}", file=sys.stderr)


if __name__ == "__main__":
    raise SystemExit(main())

"""Command that tokenizes a file of arithmetic assignments."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .lexer import ERROR_MESSAGE, HEADER, ScanResult, scan_lines


def normalize_line(line: str) -> str:
    """Drop the spaces of a statement, leaving any ``//`` comment untouched."""
    code, marker, comment = line.partition("//")
    return code.replace(" ", "") + marker + comment


def read_source(path: str | Path) -> list[str]:
    """Return the lines of ``path`` without line ends, skipping empty ones."""
    with open(path, encoding="utf-8") as handle:
        lines = (line.rstrip("\n") for line in handle)
        return [line for line in lines if line != ""]


def lex_file(path: str | Path) -> ScanResult:
    """Tokenize every statement of the file at ``path``."""
    return scan_lines(normalize_line(line) for line in read_source(path))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Tokenize a file of arithmetic assignments."
    )
    parser.add_argument(
        "path",
        nargs="?",
        help="file to read; taken from standard input when left out",
    )
    args = parser.parse_args(argv)

    path = args.path
    if path is None:
        tokens = sys.stdin.read().split()
        if not tokens:
            print("no file name given", file=sys.stderr)
            return 1
        path = tokens[0]

    try:
        result = lex_file(path)
    except OSError as error:
        print(f"cannot read {path}: {error}", file=sys.stderr)
        return 1

    for _ in range(result.errors):
        print(ERROR_MESSAGE)
    print(HEADER)
    for row in result.rows:
        print(row)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
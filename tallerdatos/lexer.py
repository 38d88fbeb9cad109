"""Finite-automaton lexer for one-line arithmetic assignments."""

from __future__ import annotations

import string
from collections.abc import Iterable
from dataclasses import dataclass, field

HEADER = "Token" + " " * 18 + "Tipo"
ERROR_MESSAGE = "error en su formación"

_DIGITS = frozenset(string.digits)
_LETTERS = frozenset(string.ascii_letters)
_WORD = _DIGITS | _LETTERS | {"_"}

_OPERATORS = {
    "-": "Resta",
    "+": "Suma",
    "*": "Multiplicación",
    "/": "División",
    "^": "Potencia",
}
_PARENS = {"(": "Parentesis que abre", ")": "Parentesis que cierra"}

# Widths of the gap between a lexeme and its kind, as each state lays them out.
_WIDE = 17
_NARROW = 16
_REAL = 15
_REAL_BEFORE_OPERATOR = 22
_ASSIGN = 22
_LINE_COMMENT = 12


@dataclass
class ScanResult:
    """Token rows produced for the input and the number of malformed statements."""

    rows: list[str] = field(default_factory=list)
    errors: int = 0

    @property
    def ok(self) -> bool:
        return self.errors == 0

    def __add__(self, other: ScanResult) -> ScanResult:
        return ScanResult(self.rows + other.rows, self.errors + other.errors)


def _at(text: str, index: int) -> str:
    """Character at ``index``, or an empty string past either end."""
    return text[index] if 0 <= index < len(text) else ""


def _all_digits(text: str) -> bool:
    return all(char in _DIGITS for char in text)


def _all_word(text: str) -> bool:
    return all(char in _WORD for char in text)


def _first_special(
    text: str, start: int, *, parens: bool, dot: bool
) -> tuple[int, str] | None:
    """Locate the first operator, comment, parenthesis or dot from ``start``."""
    for index, char in enumerate(text[start:], start):
        if char == "/":
            return index, "comment" if _at(text, index + 1) == "/" else "operator"
        if char in _OPERATORS:
            return index, "operator"
        if parens and char in _PARENS:
            return index, "paren"
        if dot and char == ".":
            return index, "dot"
    return None


class _Scanner:
    def __init__(self) -> None:
        self.rows: list[str] = []
        self.errors = 0

    def _push(self, lexeme: str, kind: str, gap: int) -> None:
        self.rows.append(f"{lexeme}{' ' * gap}{kind}")

    def _fail(self) -> None:
        self.errors += 1

    def statement(self, line: str) -> None:
        if _at(line, 0) in _LETTERS:
            self._assignment(line)
        elif line.startswith("//"):
            self._push(line, "Comentario", _LINE_COMMENT)
        else:
            self._fail()

    def _assignment(self, line: str) -> None:
        equals = line.find("=")
        target = line if equals < 0 else line[:equals]
        if not _all_word(target):
            self._fail()
            return
        self._push(target, "Variable", _WIDE)
        self._push("=", "Asignación", _ASSIGN)
        self._expression(line[equals + 1 :])

    def _expression(self, line: str) -> None:
        lead = _at(line, 0)
        if lead in _LETTERS:
            self._identifier(line)
        elif lead in _DIGITS:
            self._number(line)
        elif lead == "-":
            self._negative(line)
        else:
            self._fail()

    def _negative(self, line: str) -> None:
        second = _at(line, 1)
        if second in _LETTERS:
            self._identifier(line)
        elif second in _DIGITS:
            self._push("-", "Resta", _WIDE)
            self._number(line[1:])
        else:
            self._fail()

    def _identifier(self, line: str) -> None:
        found = _first_special(line, 0, parens=True, dot=False)
        if found is None:
            self._push("", "Variable", _WIDE)
            return
        index, kind = found
        lexeme = line[:index]
        if not _all_word(lexeme):
            self._fail()
            return
        self._push(lexeme, "Variable", _WIDE)
        if kind == "comment":
            self._push(line[index:], "Comentario", _WIDE)
            return
        char = line[index]
        if kind == "paren":
            self._push(char, _PARENS[char], _WIDE)
        else:
            self._push(char, _OPERATORS[char], _NARROW)
        self._after_operator(line[index + 1 :])

    def _number(self, line: str) -> None:
        negative = line.startswith("-")
        start = 1 if negative else 0
        found = _first_special(line, start, parens=not negative, dot=True)
        if found is None:
            if len(line) > start:
                self._push(line, "Entero", _WIDE)
                return
            self._push("", "Entero", _WIDE)
            lead = _at(line, 0)
            if lead in _OPERATORS:
                self._push(lead, _OPERATORS[lead], _NARROW)
                self._after_operator(line[1:])
            return

        index, kind = found
        lexeme = line[:index]
        if not _all_digits(lexeme):
            self._fail()
            return
        if kind == "dot":
            self._fraction(line, index)
            return
        self._push(lexeme, "Entero", _WIDE)
        if kind == "comment":
            self._push(line[index:], "Comentario", _WIDE)
            return
        char = line[index]
        rest = line[index + 1 :]
        if char in _PARENS:
            self._push(char, _PARENS[char], _NARROW)
            if char == "(" or rest:
                self._after_operator(rest)
        else:
            self._push(char, _OPERATORS[char], _NARROW)
            self._after_operator(rest)

    def _fraction(self, line: str, dot: int) -> None:
        tail = line[dot + 1 :]
        found: tuple[int, str] | None = None
        for index, char in enumerate(tail):
            if char in "Ee":
                found = (index, "exponent")
            elif char == "/":
                found = (index, "comment" if _at(tail, index + 1) == "/" else "operator")
            elif char in _OPERATORS:
                found = (index, "operator")
            if found is not None:
                break

        if found is not None:
            index, kind = found
            checked = tail[: index - 1] if index >= 1 else tail
            if not _all_digits(checked):
                self._fail()
                return
            position = line.find(tail[index])
            if kind == "exponent":
                self._exponent(line, position)
            elif kind == "comment":
                self._push(line[:position], "Real", _REAL)
                self._push(line[index:], "Comentario", _REAL)
            else:
                char = line[position]
                self._push(line[:position], "Real", _REAL_BEFORE_OPERATOR)
                self._push(char, _OPERATORS[char], _WIDE)
                self._after_operator(line[position + 1 :])
            return

        if not tail:
            self._push(line, "Real", _REAL)
        elif tail[0] in _DIGITS:
            if _all_digits(tail):
                self._push(line, "Real", _REAL)
        else:
            self._fail()

    def _exponent(self, line: str, marker: int) -> None:
        after = _at(line, marker + 1)
        if after == "-":
            self._exponent_sign(line, marker + 1)
        elif after in _DIGITS:
            self._exponent_digits(line, marker + 1)
        else:
            self._fail()

    def _exponent_sign(self, line: str, sign: int) -> None:
        if _at(line, sign + 1) in _DIGITS:
            self._exponent_digits(line, sign + 1)
        else:
            self._fail()

    def _exponent_digits(self, line: str, start: int) -> None:
        rest = line[start:]
        if _at(rest, 0) not in _DIGITS:
            self._fail()
            return
        following = _at(rest, 1)
        if following == "/" and _at(rest, 2) == "/":
            cut = line.find("//")
            self._push(line[:cut], "Real", _REAL)
            self._push(line[cut:], "Comentario", _REAL)
        elif len(rest) == 1:
            self._push(line, "Real", _REAL)
        elif following in _OPERATORS:
            cut = line.find(following)
            self._push(line[:cut], "Real", _REAL)
            self._push(following, _OPERATORS[following], _WIDE)
            self._after_operator(line[cut + 1 :])
        else:
            self._fail()

    def _after_operator(self, line: str) -> None:
        lead = _at(line, 0)
        if lead in _LETTERS:
            self._identifier(line)
        elif lead in _DIGITS:
            self._number(line)
        elif lead in _PARENS:
            self._push(lead, _PARENS[lead], _NARROW)
            self._expression(line[1:])
        elif lead in _OPERATORS:
            self._push(lead, _OPERATORS[lead], _WIDE)
            self._expression(line[1:])
        else:
            self._fail()


def scan_line(line: str) -> ScanResult:
    """Tokenize one statement whose spaces outside a comment are already removed."""
    scanner = _Scanner()
    scanner.statement(line)
    return ScanResult(scanner.rows, scanner.errors)


def scan_lines(lines: Iterable[str]) -> ScanResult:
    """Tokenize every statement in order and combine the results."""
    return sum((scan_line(line) for line in lines), ScanResult())
import pytest

from tallerdatos.lexer import ScanResult, scan_line, scan_lines


def _row(lexeme, gap, kind):
    return lexeme + " " * gap + kind


ASSIGN_ROW = _row("=", 22, "Asignación")


def test_line_comment():
    result = scan_line("//hola")
    assert result.rows == [_row("//hola", 12, "Comentario")]
    assert result.ok


def test_integer_assignment():
    result = scan_line("a=3")
    assert result.rows == [_row("a", 17, "Variable"), ASSIGN_ROW, _row("3", 17, "Entero")]
    assert result.errors == 0


def test_integer_operation():
    result = scan_line("a=3+4")
    assert result.rows == [
        _row("a", 17, "Variable"),
        ASSIGN_ROW,
        _row("3", 17, "Entero"),
        _row("+", 16, "Suma"),
        _row("4", 17, "Entero"),
    ]


def test_variable_operation():
    result = scan_line("b=a*2")
    assert result.rows == [
        _row("b", 17, "Variable"),
        ASSIGN_ROW,
        _row("a", 17, "Variable"),
        _row("*", 16, "Multiplicación"),
        _row("2", 17, "Entero"),
    ]


def test_real_number():
    result = scan_line("x=3.5")
    assert result.rows[-1] == _row("3.5", 15, "Real")
    assert result.ok


def test_real_before_operator():
    result = scan_line("x=3.5+2")
    assert result.rows[2:] == [
        _row("3.5", 22, "Real"),
        _row("+", 17, "Suma"),
        _row("2", 17, "Entero"),
    ]


@pytest.mark.parametrize("text", ["2.5E3", "2.5E-3", "2.5e3"])
def test_exponent_forms(text):
    result = scan_line("x=" + text)
    assert result.rows[-1] == _row(text, 15, "Real")
    assert result.ok


def test_negative_number():
    result = scan_line("a=-5")
    assert result.rows[2:] == [_row("-", 17, "Resta"), _row("5", 17, "Entero")]


def test_trailing_comment_after_integer():
    result = scan_line("a=3//c")
    assert result.rows[2:] == [_row("3", 17, "Entero"), _row("//c", 17, "Comentario")]


def test_trailing_comment_after_variable():
    result = scan_line("a=b//c")
    assert result.rows[2:] == [_row("b", 17, "Variable"), _row("//c", 17, "Comentario")]


def test_underscore_in_target():
    result = scan_line("a_1=7")
    assert result.rows[0] == _row("a_1", 17, "Variable")


@pytest.mark.parametrize("text", ["", "3=a", "a$=1", "=5"])
def test_malformed_statement_produces_no_rows(text):
    result = scan_line(text)
    assert result.rows == []
    assert result.errors == 1
    assert not result.ok


def test_error_after_assignment_keeps_earlier_rows():
    result = scan_line("a=?")
    assert result.rows == [_row("a", 17, "Variable"), ASSIGN_ROW]
    assert result.errors == 1


def test_multi_digit_exponent_is_rejected():
    result = scan_line("x=2.5E33")
    assert result.errors == 1
    assert len(result.rows) == 2


def test_scan_lines_matches_individual_scans():
    lines = ["//c", "a=3+4", "3", "x=2.5E-3"]
    combined = scan_lines(lines)
    rows = [row for line in lines for row in scan_line(line).rows]
    assert combined.rows == rows
    assert combined.errors == sum(scan_line(line).errors for line in lines)
    assert combined.errors == 1


def test_scan_lines_empty():
    assert scan_lines([]) == ScanResult()


def test_scan_result_addition():
    left = ScanResult(["x"], 1)
    right = ScanResult(["y"], 2)
    assert left + right == ScanResult(["x", "y"], 3)
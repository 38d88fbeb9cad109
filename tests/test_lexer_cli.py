import io

import pytest

from tallerdatos.lexer import ERROR_MESSAGE, HEADER, scan_line, scan_lines
from tallerdatos.lexer_cli import lex_file, main, normalize_line, read_source


def test_normalize_keeps_comment_spacing():
    assert normalize_line("a= b * 3 // hola a todos") == "a=b*3// hola a todos"


def test_normalize_without_comment_removes_all_spaces():
    result = normalize_line(" x = 4 + y ")
    assert " " not in result
    assert result == "x=4+y"


def test_normalize_is_idempotent():
    line = "total = a ^ 2 // fin del calculo"
    once = normalize_line(line)
    assert normalize_line(once) == once


def test_read_source_skips_empty_lines(tmp_path):
    source = tmp_path / "entrada.txt"
    source.write_text("a=1\n\nb=2\n\n", encoding="utf-8")
    assert read_source(source) == ["a=1", "b=2"]


def test_read_source_keeps_blank_but_not_empty_lines(tmp_path):
    source = tmp_path / "entrada.txt"
    source.write_text("a=1\n   \n", encoding="utf-8")
    assert read_source(source) == ["a=1", "   "]


def test_read_source_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_source(tmp_path / "missing.txt")


def test_lex_file_matches_scanning_normalized_lines(tmp_path):
    source = tmp_path / "entrada.txt"
    source.write_text("a = 32 + b\n// solo comentario\n\nc = 4 * 5\n", encoding="utf-8")
    result = lex_file(source)
    expected = scan_lines(["a=32+b", "// solo comentario", "c=4*5"])
    assert result.rows == expected.rows
    assert result.errors == expected.errors


def test_lex_file_counts_malformed_statements(tmp_path):
    source = tmp_path / "entrada.txt"
    source.write_text("3 = a\n   \n", encoding="utf-8")
    result = lex_file(source)
    assert result.errors == 2
    assert result.rows == []


def test_main_prints_header_then_rows(tmp_path, capsys):
    source = tmp_path / "entrada.txt"
    source.write_text("a = 7\n", encoding="utf-8")
    assert main([str(source)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [HEADER, *scan_line("a=7").rows]


def test_main_prints_errors_before_header(tmp_path, capsys):
    source = tmp_path / "entrada.txt"
    source.write_text("9 = a\n// nota\n", encoding="utf-8")
    assert main([str(source)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == ERROR_MESSAGE
    assert lines[1] == HEADER
    assert lines[2:] == scan_line("// nota").rows


def test_main_reads_file_name_from_stdin(tmp_path, capsys, monkeypatch):
    source = tmp_path / "entrada.txt"
    source.write_text("b = 1 + 2\n", encoding="utf-8")
    monkeypatch.setattr("sys.stdin", io.StringIO(f"{source}\n"))
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [HEADER, *scan_line("b=1+2").rows]


def test_main_missing_file_fails(tmp_path, capsys):
    assert main([str(tmp_path / "missing.txt")]) == 1
    assert "cannot read" in capsys.readouterr().err
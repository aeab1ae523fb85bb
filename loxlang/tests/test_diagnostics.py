"""
Tests for error rendering.
"""
import pytest

from loxlang.diagnostics import find_location_in_source, render_error, use_color
from loxlang.exceptions import OperandTypeError, UnknownCharacterError
from loxlang.scanner import Scanner

from loxlang.tests.utils import parse_source, run_source


def test_find_location_in_source():
    source = "var a = 1;\nprint a `;\n"
    assert find_location_in_source(source, 2, 19) == ("print a `;", 8)
    assert find_location_in_source(source, 1, 0) == ("var a = 1;", 0)
    assert find_location_in_source(source, 3, 22) == ("", 0)
    assert find_location_in_source(source, 0, 0) == ("", 0)


def test_find_location_counts_crlf_terminators():
    source = "1;\r\nprint `;"
    assert find_location_in_source(source, 2, 10) == ("print `;", 6)


def test_render_scanner_error():
    source = "print `;"
    scanner = Scanner(source)
    scanner.scan_tokens()
    report = render_error(scanner.errors[0], source)
    assert report.splitlines() == [
        'Scanner Error: Unknown Token: "`" ',
        "",
        "line:   1 | print `;",
        "          |       ^",
        "          |       Here",
    ]


def test_render_parser_error():
    source = "var a = 1;\nvar ;"
    _, parser = parse_source(source)
    report = render_error(parser.errors[0], source)
    lines = report.splitlines()
    assert lines[0] == "Parser Error: Unexpected Token: found 'SEMICOLON', expected 'IDENTIFIER' "
    assert lines[2] == "line:   2 | var ;"
    assert lines[3] == "          |     ^"


def test_render_with_color():
    error = UnknownCharacterError("#", 1, 0)
    report = render_error(error, "#", color=True)
    assert report.startswith("\033[31mScanner Error")
    assert "\033[33m^\033[0m" in report


def test_use_color(monkeypatch):
    class Tty:
        def isatty(self):
            return True

    monkeypatch.delenv("NO_COLOR", raising=False)
    assert use_color(Tty())
    assert not use_color(object())
    monkeypatch.setenv("NO_COLOR", "1")
    assert not use_color(Tty())


def test_lone_carriage_return_does_not_start_a_line():
    source = "var a = 1;\rprint a `;"
    scanner = Scanner(source)
    scanner.scan_tokens()
    error = scanner.errors[0]
    assert (error.line, error.offset) == (1, 19)
    assert find_location_in_source(source, error.line, error.offset) == (source, 19)


def test_unicode_line_separator_inside_string():
    source = 'print "a\u2028b" - 1;\nprint 2;'
    with pytest.raises(OperandTypeError) as excinfo:
        run_source(source)
    error = excinfo.value
    assert error.line == 1
    line_content, col = find_location_in_source(source, error.line, error.offset)
    assert line_content == 'print "a\u2028b" - 1;'
    assert col == 12
    assert line_content[col] == "-"

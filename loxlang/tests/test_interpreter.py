"""
Tests for evaluating Lox programs.
"""
import io
import math

import pytest

from loxlang.environment import Environment
from loxlang.exceptions import OperandTypeError, UndefinedVariableError
from loxlang.interpreter import Interpreter
from loxlang.nodes import Literal
from loxlang.tokens import TokenType

from loxlang.tests.utils import parse_expression, parse_source, run_source


def output_of(source: str, capsys) -> list[str]:
    run_source(source)
    return capsys.readouterr().out.splitlines()


def evaluate(source: str):
    return Interpreter().evaluate(parse_expression(source))


def test_bare_number_statement_is_a_no_op(capsys):
    interpreter = run_source("42; 3.25; 0;")
    assert capsys.readouterr().out == ""
    assert len(interpreter.environment) == 0


def test_arithmetic_and_concatenation(capsys):
    assert output_of('print 1 + 2; print "a" + "b"; print 7 - 10; print 2 * 3.5; print 1 / 4;', capsys) == [
        "3", "ab", "-3", "7", "0.25",
    ]


def test_precedence_at_runtime(capsys):
    assert output_of("print 1 + 2 * 3; print (1 + 2) * 3; print 10 - 4 - 3;", capsys) == [
        "7", "9", "3",
    ]


def test_mixed_plus_is_a_type_error():
    with pytest.raises(OperandTypeError) as excinfo:
        run_source('print "a" + 1;')
    assert excinfo.value.token.type == TokenType.PLUS
    assert "two numbers or two strings" in excinfo.value.message


@pytest.mark.parametrize("source", [
    '"a" - "b"',
    "1 * nil",
    "true / 2",
    '"1" > 0',
    "nil >= nil",
    "1 < false",
    '"a" <= "b"',
])
def test_numeric_operators_require_numbers(source):
    with pytest.raises(OperandTypeError) as excinfo:
        evaluate(source)
    assert excinfo.value.message == "Operands must be numbers."


def test_unary_minus_requires_number():
    with pytest.raises(OperandTypeError) as excinfo:
        evaluate('-"x"')
    assert excinfo.value.message == "Operand must be a number."
    assert excinfo.value.token.type == TokenType.MINUS
    assert evaluate("--2") == 2.0


def test_equality_never_fails(capsys):
    assert output_of(
        'print 1 == "1"; print nil == nil; print true == 1; print "a" != "a"; '
        'print 0 == false; print 2 == 2;',
        capsys,
    ) == ["false", "true", "false", "false", "false", "true"]


def test_truthiness(capsys):
    assert output_of('print !nil; print !0; print !false; print !""; print !!"x";', capsys) == [
        "true", "false", "true", "false", "true",
    ]


def test_comparisons():
    assert evaluate("1 < 2") is True
    assert evaluate("2 <= 2") is True
    assert evaluate("3 > 4") is False
    assert evaluate("4 >= 4.5") is False


def test_division_by_zero_follows_ieee():
    assert evaluate("1 / 0") == math.inf
    assert evaluate("-1 / 0") == -math.inf
    assert math.isnan(evaluate("0 / 0"))


def test_print_stringification(capsys):
    assert output_of('print nil; print true; print false; print "s"; print 0.1; print 1 / 0;', capsys) == [
        "nil", "true", "false", "s", "0.1", "inf",
    ]


def test_variables(capsys):
    interpreter = run_source("var x = 1; print x + 1; var y; print y; var x = \"again\"; print x;")
    assert capsys.readouterr().out.splitlines() == ["2", "nil", "again"]
    assert "x" in interpreter.environment


def test_undefined_variable():
    with pytest.raises(UndefinedVariableError) as excinfo:
        run_source("print y;")
    assert excinfo.value.name == "y"
    assert (excinfo.value.line, excinfo.value.offset) == (1, 6)


def test_runtime_error_stops_the_program(capsys):
    declarations, _ = parse_source('print "before"; print -nil; print "after";')
    with pytest.raises(OperandTypeError):
        Interpreter().interpret(declarations)
    assert capsys.readouterr().out.splitlines() == ["before"]


def test_left_operand_is_evaluated_first():
    # Both operands are undefined: the left one is reported.
    with pytest.raises(UndefinedVariableError) as excinfo:
        evaluate("left + right")
    assert excinfo.value.name == "left"


def test_output_stream_and_shared_environment():
    out = io.StringIO()
    env = Environment()
    env.define("greeting", "hi")
    declarations, _ = parse_source("print greeting;")
    Interpreter(output=out, environment=env).interpret(declarations)
    assert out.getvalue() == "hi\n"


def test_unknown_nodes_are_internal_errors():
    interpreter = Interpreter()
    with pytest.raises(TypeError):
        interpreter.evaluate(("number", 1))
    with pytest.raises(TypeError):
        interpreter.execute(Literal(1.0))

"""
Utility functions shared across Lox tests.
"""
from pathlib import Path
import sys

from loxlang.interpreter import Interpreter
from loxlang.parser import Parser
from loxlang.scanner import tokenize

# Ensure the project root is on the Python path
PROJECT_ROOT = Path(__file__).resolve().parents[2]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.append(str(PROJECT_ROOT))


def parse_source(source: str):
    """
    Parse source code and return the declarations and the parser.
    """
    parser = Parser(tokenize(source))
    declarations = parser.parse()
    return declarations, parser


def parse_expression(source: str):
    """
    Parse a single expression.
    """
    return Parser(tokenize(source)).expression()


def run_source(source: str) -> Interpreter:
    """
    Run source code and return the interpreter instance after execution.
    """
    declarations, parser = parse_source(source)
    assert not parser.errors
    interpreter = Interpreter()
    interpreter.interpret(declarations)
    return interpreter

"""Interpreter.

This is a tree-walk interpreter for evaluating the AST produced by the
parser. It supports number, string, boolean and nil values, arithmetic,
comparison and equality operators, global variables and print statements.

1. Execution Model
Declarations are executed in order via `execute()` and expressions are
evaluated recursively via `evaluate()`. Both dispatch over the node classes
in `loxlang.nodes` with `match` statements.

2. Environment
The interpreter owns a single `Environment`. `var` declarations define
names in it and variable expressions read from it. The same interpreter may
run several programs in a row (the REPL does), and bindings carry over.

3. Typing Rules
Arithmetic and relational operators require numbers; `+` also joins two
strings. Equality works across all values and never fails. `nil` and
`false` are falsey, every other value is truthy. Every numeric result is
narrowed to single precision.

4. Error Handling
A type error raises `OperandTypeError` and an unknown name raises
`UndefinedVariableError`, both carrying the token to blame. Neither is
recovered here: the first runtime error stops `interpret()`.


File: interpreter.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import logging
import math
import sys

from loxlang.environment import Environment
from loxlang.exceptions import OperandTypeError
from loxlang.nodes import (
    Binary,
    Expression,
    Grouping,
    Literal,
    Print,
    Unary,
    Var,
    Variable,
)
from loxlang.tokens import TokenType
from loxlang.values import is_number, is_truthy, stringify, to_f32, values_equal

logger = logging.getLogger(__name__)


class Interpreter:
    """Tree-walk interpreter for Lox."""

    def __init__(self, output=None, environment: Environment | None = None):
        """
        Initialize the interpreter.

        Parameters:
            output: Text stream written to by print statements. Defaults to
                the current ``sys.stdout``.
            environment (Environment): The global environment. A fresh one
                is created when omitted.
        """
        self.output = output
        self.environment = environment if environment is not None else Environment()

    def interpret(self, declarations: list) -> None:
        """
        Execute a program.

        Parameters:
            declarations (list): The declarations produced by the parser.

        Raises:
            LoxRuntimeError: On the first runtime error. Declarations after
                the failing one are not executed.
        """
        for declaration in declarations:
            self.execute(declaration)
        logger.debug("executed %d declarations", len(declarations))

    def execute(self, stmt) -> None:
        """
        Execute a single declaration or statement for its effects.
        """
        match stmt:
            case Var(name=name, initializer=initializer):
                self.environment.define(name.lexeme, self.evaluate(initializer))
            case Print(expression=expr):
                value = self.evaluate(expr)
                print(stringify(value), file=self.output or sys.stdout)
            case Expression(expression=expr):
                self.evaluate(expr)
            case _:
                raise TypeError(f"Unknown statement type: {stmt!r}")

    def evaluate(self, expr):
        """
        Recursively evaluate an expression node and return its value.

        Raises:
            OperandTypeError: If an operator receives operands of the wrong kind.
            UndefinedVariableError: If an undefined variable is referenced.
            TypeError: If the node is not an expression node.
        """
        match expr:
            case Literal(value=value):
                return value
            case Grouping(expression=inner):
                return self.evaluate(inner)
            case Variable(name=name):
                return self.environment.get(name)
            case Unary(operator=operator, right=right):
                return self._unary(operator, self.evaluate(right))
            case Binary(left=left, operator=operator, right=right):
                lhs = self.evaluate(left)
                rhs = self.evaluate(right)
                return self._binary(lhs, operator, rhs)
        raise TypeError(f"Invalid expression node: {expr!r}")

    @staticmethod
    def _unary(operator, operand):
        match operator.type:
            case TokenType.MINUS:
                if not is_number(operand):
                    raise OperandTypeError("Operand must be a number.", operator)
                return -operand
            case TokenType.BANG:
                return not is_truthy(operand)
        raise TypeError(f"Unknown unary operator '{operator.lexeme}'")

    @staticmethod
    def _binary(lhs, operator, rhs):
        op = operator.type

        if op == TokenType.EQUAL_EQUAL:
            return values_equal(lhs, rhs)
        if op == TokenType.BANG_EQUAL:
            return not values_equal(lhs, rhs)

        if op == TokenType.PLUS:
            if is_number(lhs) and is_number(rhs):
                return to_f32(lhs + rhs)
            if isinstance(lhs, str) and isinstance(rhs, str):
                return lhs + rhs
            raise OperandTypeError(
                "Operands must be two numbers or two strings.", operator
            )

        if not (is_number(lhs) and is_number(rhs)):
            raise OperandTypeError("Operands must be numbers.", operator)

        match op:
            case TokenType.MINUS:
                return to_f32(lhs - rhs)
            case TokenType.STAR:
                return to_f32(lhs * rhs)
            case TokenType.SLASH:
                return _divide(lhs, rhs)
            case TokenType.GREATER:
                return lhs > rhs
            case TokenType.GREATER_EQUAL:
                return lhs >= rhs
            case TokenType.LESS:
                return lhs < rhs
            case TokenType.LESS_EQUAL:
                return lhs <= rhs
        raise TypeError(f"Unknown binary operator '{operator.lexeme}'")


def _divide(lhs: float, rhs: float) -> float:
    """
    IEEE 754 division: a zero divisor yields a signed infinity or NaN.
    """
    if rhs == 0.0:
        if lhs == 0.0 or math.isnan(lhs):
            return math.nan
        return math.copysign(math.inf, lhs) * math.copysign(1.0, rhs)
    return to_f32(lhs / rhs)

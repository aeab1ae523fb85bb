"""AST printer.

Renders expressions and declarations in a parenthesized, Lisp-like form
that spells out the structure the parser built, e.g. ``1 + 2 * 3`` prints
as ``(+ 1 (* 2 3))``. Used for debug output and in tests to check
precedence and associativity.


File: ast_printer.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

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
from loxlang.values import stringify


def parenthesize(name: str, *nodes) -> str:
    """
    Wrap ``name`` and the rendering of each node in parentheses.
    """
    parts = [name] + [print_ast(node) for node in nodes]
    return "(" + " ".join(parts) + ")"


def print_ast(node) -> str:
    """
    Convert an AST node to its parenthesized string form.

    Args:
        node: An expression or declaration node.

    Returns:
        str: The canonical rendering of the node.

    Raises:
        TypeError: If ``node`` is not an AST node.
    """
    match node:
        case Literal(value=str() as value):
            return f'"{value}"'
        case Literal(value=value):
            return stringify(value)
        case Grouping(expression=inner):
            return parenthesize("group", inner)
        case Unary(operator=operator, right=right):
            return parenthesize(operator.lexeme, right)
        case Binary(left=left, operator=operator, right=right):
            return parenthesize(operator.lexeme, left, right)
        case Variable(name=name):
            return name.lexeme
        case Var(name=name, initializer=initializer):
            return parenthesize(f"var {name.lexeme}", initializer)
        case Print(expression=expr):
            return parenthesize("print", expr)
        case Expression(expression=expr):
            return parenthesize(";", expr)
    raise TypeError(f"Invalid AST node: {node!r}")


def print_program(declarations) -> str:
    """
    Render a whole program, one declaration per line.
    """
    return "\n".join(print_ast(decl) for decl in declarations)

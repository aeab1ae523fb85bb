"""Statement parsing utilities for Lox.

These functions operate on a `loxlang.parser.parser.Parser` instance and
handle variable declarations, print statements and expression statements.


File: statements.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING

from loxlang.nodes import Expression, Literal, Print, Var
from loxlang.tokens import TokenType

if TYPE_CHECKING:
    from loxlang.parser import Parser


def parse_declaration(parser: 'Parser'):
    """
    Parse a declaration.

    Syntax:
        "var" <identifier> ("=" <expression>)? ";" | <statement>

    Args:
        parser: The parser instance.

    Returns:
        Var | Expression | Print: the declaration node.
    """
    if parser.match(TokenType.VAR) is not None:
        return parser.var_declaration()
    return parser.statement()


def parse_var_declaration(parser: 'Parser') -> Var:
    """
    Parse a variable declaration after its 'var' keyword.

    Without an initializer the variable is bound to nil.

    Syntax:
        var <identifier> = <expression>;
        var <identifier>;

    Args:
        parser: The parser instance.

    Returns:
        Var: the declaration node.
    """
    name = parser.consume(TokenType.IDENTIFIER)
    initializer = Literal(None)
    if parser.match(TokenType.EQUAL) is not None:
        initializer = parser.expression()
    parser.consume(TokenType.SEMICOLON)
    return Var(name, initializer)


def parse_statement(parser: 'Parser'):
    """
    Parse a single statement.

    Syntax:
        "print" <expression> ";" | <expression> ";"
    """
    if parser.match(TokenType.PRINT) is not None:
        return parser.print_statement()
    return parser.expression_statement()


def parse_print_statement(parser: 'Parser') -> Print:
    """
    Parse a 'print' statement after its keyword.

    Syntax:
        print <expression>;
    """
    value = parser.expression()
    parser.consume(TokenType.SEMICOLON)
    return Print(value)


def parse_expression_statement(parser: 'Parser') -> Expression:
    """
    Parse an expression statement.

    Syntax:
        <expression>;
    """
    expr = parser.expression()
    parser.consume(TokenType.SEMICOLON)
    return Expression(expr)

"""Expression parsing utilities for Lox.

These functions operate on a `loxlang.parser.parser.Parser` instance and
implement the recursive descent logic for expressions. Each precedence
level calls into the next-higher one for its operands, and every binary
loop folds the expression built so far into the left operand, which makes
the operators left-associative.
"""

from typing import TYPE_CHECKING

from loxlang.exceptions import ParserError
from loxlang.nodes import Binary, Grouping, Literal, Unary, Variable
from loxlang.tokens import LITERAL_KEYWORDS, TokenType

if TYPE_CHECKING:
    from loxlang.parser import Parser


PRIMARY_EXPECTED = (
    TokenType.FALSE,
    TokenType.TRUE,
    TokenType.NIL,
    TokenType.NUMBER,
    TokenType.STRING,
    TokenType.IDENTIFIER,
    TokenType.LEFT_PAREN,
)


# ---- Highest precedence ----

def parse_primary(parser: 'Parser'):
    """Parse a literal, variable, or parenthesized expression."""
    tok = parser.match(TokenType.FALSE, TokenType.TRUE, TokenType.NIL)
    if tok is not None:
        return Literal(LITERAL_KEYWORDS[tok.type])

    tok = parser.match(TokenType.NUMBER, TokenType.STRING)
    if tok is not None:
        return Literal(tok.literal)

    tok = parser.match(TokenType.IDENTIFIER)
    if tok is not None:
        return Variable(tok)

    if parser.match(TokenType.LEFT_PAREN) is not None:
        expr = parser.expression()
        parser.consume(TokenType.RIGHT_PAREN)
        return Grouping(expr)

    raise ParserError(PRIMARY_EXPECTED, parser.peek())


def parse_unary(parser: 'Parser'):
    """Parse prefix '!' and '-' expressions."""
    operator = parser.match(TokenType.BANG, TokenType.MINUS)
    if operator is not None:
        return Unary(operator, parser.unary())
    return parser.primary()


def parse_factor(parser: 'Parser'):
    """Parse multiplication and division expressions."""
    expr = parser.unary()
    while (operator := parser.match(TokenType.SLASH, TokenType.STAR)) is not None:
        expr = Binary(expr, operator, parser.unary())
    return expr


def parse_term(parser: 'Parser'):
    """Parse addition and subtraction expressions."""
    expr = parser.factor()
    while (operator := parser.match(TokenType.MINUS, TokenType.PLUS)) is not None:
        expr = Binary(expr, operator, parser.factor())
    return expr


def parse_comparison(parser: 'Parser'):
    """Parse comparison expressions (<, >, <=, >=)."""
    expr = parser.term()
    while (operator := parser.match(
        TokenType.GREATER,
        TokenType.GREATER_EQUAL,
        TokenType.LESS,
        TokenType.LESS_EQUAL,
    )) is not None:
        expr = Binary(expr, operator, parser.term())
    return expr


def parse_equality(parser: 'Parser'):
    """Parse equality expressions (==, !=)."""
    expr = parser.comparison()
    while (operator := parser.match(TokenType.BANG_EQUAL, TokenType.EQUAL_EQUAL)) is not None:
        expr = Binary(expr, operator, parser.comparison())
    return expr


# ---- Entry point ----

def parse_expression(parser: 'Parser'):
    """Parse an expression starting from the lowest-precedence operator."""
    return parser.equality()

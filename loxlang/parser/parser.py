"""Main parser entry point for Lox.

This module defines the `Parser` class, which owns the token cursor and
coordinates the recursive descent parsing process. The actual parsing
routines are split across `loxlang.parser.expressions` and
`loxlang.parser.statements`.

A syntax error inside a declaration is recorded and the parser
synchronizes on the next statement boundary, so one malformed declaration
produces one error and the rest of the program is still parsed.


File: parser.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import logging

from loxlang.exceptions import ParserError
from loxlang.tokens import STATEMENT_KEYWORDS, Token, TokenType

from . import expressions as _expr
from . import statements as _stmt

logger = logging.getLogger(__name__)


class Parser:
    """Lox parser."""

    def __init__(self, tokens: list[Token]):
        """
        Initialize the parser with a list of tokens.

        Parameters:
            tokens (list): A list of Token instances terminated by an EOF token.
        """
        self.tokens = tokens
        self.current = 0
        self.errors: list[ParserError] = []

    # Cursor primitives
    def peek(self) -> Token:
        """
        Return the current token without consuming it.
        """
        return self.tokens[self.current]

    def previous(self) -> Token:
        """
        Return the most recently consumed token.
        """
        return self.tokens[self.current - 1]

    def is_at_end(self) -> bool:
        """
        Return ``True`` once the cursor sits on the EOF token.
        """
        return self.peek().type == TokenType.EOF

    def advance(self) -> Token:
        """
        Consume the current token and return it.
        """
        if not self.is_at_end():
            self.current += 1
        return self.previous()

    def check(self, token_type: TokenType) -> bool:
        """
        Return ``True`` if the current token has the given type.
        """
        if self.is_at_end():
            return False
        return self.peek().type == token_type

    def match(self, *token_types: TokenType) -> Token | None:
        """
        Consume the current token if its type is one of ``token_types``.

        The literal payload of the token plays no part in matching.

        Returns:
            Token | None: The consumed token, or ``None`` if nothing matched.
        """
        for token_type in token_types:
            if self.check(token_type):
                return self.advance()
        return None

    def consume(self, token_type: TokenType) -> Token:
        """
        Consume a token that must be present.

        Parameters:
            token_type (TokenType): The expected token type.

        Raises:
            ParserError: If the current token does not match the expected type.
        """
        if self.check(token_type):
            return self.advance()
        raise ParserError((token_type,), self.peek())

    def synchronize(self) -> None:
        """
        Discard tokens until a statement boundary is reached.

        A boundary is just past a semicolon, or right before a keyword that
        starts a statement or declaration.
        """
        self.advance()
        while not self.is_at_end():
            if self.previous().type == TokenType.SEMICOLON:
                return
            if self.peek().type in STATEMENT_KEYWORDS:
                return
            self.advance()

    # Expression wrappers
    def expression(self):
        """
        Parse a full expression.
        """
        return _expr.parse_expression(self)

    def equality(self):
        """
        Parse an equality expression using '==' or '!='.
        """
        return _expr.parse_equality(self)

    def comparison(self):
        """
        Parse a comparison expression using relational operators.
        """
        return _expr.parse_comparison(self)

    def term(self):
        """
        Parse an addition or subtraction expression.
        """
        return _expr.parse_term(self)

    def factor(self):
        """
        Parse a multiplication or division expression.
        """
        return _expr.parse_factor(self)

    def unary(self):
        """
        Parse a prefix '!' or '-' expression.
        """
        return _expr.parse_unary(self)

    def primary(self):
        """
        Parse a literal, variable, or parenthesized group.
        """
        return _expr.parse_primary(self)

    # Statement wrappers
    def declaration(self):
        """
        Parse a declaration or statement.
        """
        return _stmt.parse_declaration(self)

    def var_declaration(self):
        """
        Parse the remainder of a 'var' declaration.
        """
        return _stmt.parse_var_declaration(self)

    def statement(self):
        """
        Parse a single statement.
        """
        return _stmt.parse_statement(self)

    def print_statement(self):
        """
        Parse the remainder of a 'print' statement.
        """
        return _stmt.parse_print_statement(self)

    def expression_statement(self):
        """
        Parse an expression statement.
        """
        return _stmt.parse_expression_statement(self)

    def parse(self) -> list:
        """
        Parse the full input into a list of declarations.

        Declarations containing a syntax error are left out; their errors
        are collected in ``self.errors``.
        """
        declarations = []
        while not self.is_at_end():
            try:
                declarations.append(self.declaration())
            except ParserError as e:
                logger.debug("syntax error on line %d, synchronizing", e.line)
                self.errors.append(e)
                self.synchronize()
        logger.debug(
            "parsed %d declarations with %d errors", len(declarations), len(self.errors)
        )
        return declarations

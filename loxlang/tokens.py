"""Token model for Lox.

Every stage of the pipeline shares the definitions in this module. The
:class:`TokenType` enumeration is the closed set of lexeme kinds produced by
the scanner, and :class:`Token` wraps one of them together with the position
of its lexeme in the source text so later stages can point back at it when
reporting errors.


File: tokens.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from enum import Enum
from types import MappingProxyType


class TokenType(str, Enum):
    """
    Enumeration of lexeme kinds.
    """

    # Single-character tokens
    LEFT_PAREN = "("
    RIGHT_PAREN = ")"
    LEFT_BRACE = "{"
    RIGHT_BRACE = "}"
    COMMA = ","
    DOT = "."
    MINUS = "-"
    PLUS = "+"
    SEMICOLON = ";"
    SLASH = "/"
    STAR = "*"

    # One or two character tokens
    BANG = "!"
    BANG_EQUAL = "!="
    EQUAL = "="
    EQUAL_EQUAL = "=="
    GREATER = ">"
    GREATER_EQUAL = ">="
    LESS = "<"
    LESS_EQUAL = "<="

    # Literals
    IDENTIFIER = "identifier"
    STRING = "string"
    NUMBER = "number"

    # Keywords
    AND = "and"
    CLASS = "class"
    ELSE = "else"
    FALSE = "false"
    FUN = "fun"
    FOR = "for"
    IF = "if"
    NIL = "nil"
    OR = "or"
    PRINT = "print"
    RETURN = "return"
    SUPER = "super"
    THIS = "this"
    TRUE = "true"
    VAR = "var"
    WHILE = "while"

    EOF = "eof"

    def __str__(self) -> str:
        """
        Return the member name for nicer diagnostics.
        """
        return self.name


# Reserved words, looked up once an identifier-shaped lexeme has been scanned.
KEYWORDS = MappingProxyType({
    "and": TokenType.AND,
    "class": TokenType.CLASS,
    "else": TokenType.ELSE,
    "false": TokenType.FALSE,
    "fun": TokenType.FUN,
    "for": TokenType.FOR,
    "if": TokenType.IF,
    "nil": TokenType.NIL,
    "or": TokenType.OR,
    "print": TokenType.PRINT,
    "return": TokenType.RETURN,
    "super": TokenType.SUPER,
    "this": TokenType.THIS,
    "true": TokenType.TRUE,
    "var": TokenType.VAR,
    "while": TokenType.WHILE,
})

# Tokens that begin a new statement or declaration. The parser resumes here
# after a syntax error.
STATEMENT_KEYWORDS = frozenset({
    TokenType.CLASS,
    TokenType.FUN,
    TokenType.VAR,
    TokenType.FOR,
    TokenType.IF,
    TokenType.WHILE,
    TokenType.PRINT,
    TokenType.RETURN,
})

LITERAL_KEYWORDS = MappingProxyType({
    TokenType.TRUE: True,
    TokenType.FALSE: False,
    TokenType.NIL: None,
})


class Token:
    """
    Represents a lexical token with its type, lexeme and source position.
    """

    __slots__ = ("type", "lexeme", "literal", "line", "start")

    def __init__(self, type_, lexeme, literal, line, start):
        """
        Initialize a new token.

        Parameters:
            type_ (TokenType): The token type.
            lexeme (str): The source text of the token.
            literal (Any): The literal payload (number, string or identifier name).
            line (int): The 1-based line the lexeme starts on.
            start (int): The offset of the first character of the lexeme.
        """
        object.__setattr__(self, "type", type_)
        object.__setattr__(self, "lexeme", lexeme)
        object.__setattr__(self, "literal", literal)
        object.__setattr__(self, "line", line)
        object.__setattr__(self, "start", start)

    def __setattr__(self, name, value):
        raise AttributeError("Token is immutable")

    def _key(self) -> tuple:
        return (self.type, self.lexeme, self.literal, self.line, self.start)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Token):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        """
        Return a string representation of the token.
        """
        return (
            f"Token({self.type.name}, {self.lexeme!r}, {self.literal!r}, "
            f"line={self.line}, start={self.start})"
        )

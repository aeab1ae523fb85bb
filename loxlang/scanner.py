"""Scanner for Lox.

The scanner performs a single left-to-right pass over the source code using
a combined regular expression of named groups. Each match yields a
:class:`~loxlang.tokens.Token` holding its type, lexeme, literal payload,
line number and starting offset.

Whitespace and ``//`` comments are skipped while the line counter keeps
track of newlines, including those inside string literals. Characters that
cannot start a token and strings missing their closing quote are recorded
as errors and scanning carries on, so one pass reports every lexical error
in the source.


File: scanner.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import logging
import re

from loxlang.exceptions import (
    ScannerErrors,
    UnknownCharacterError,
    UnterminatedStringError,
)
from loxlang.tokens import KEYWORDS, Token, TokenType
from loxlang.values import to_f32

logger = logging.getLogger(__name__)


TOKEN_SPECIFICATION: list[tuple[str, str]] = [
    # Literals
    ('NUMBER',        r'[0-9]+(?:\.[0-9]+)?'),
    ('STRING',        r'"[^"]*"'),
    ('UNTERMINATED',  r'"[^"]*\Z'),

    # Identifiers and keywords
    ('IDENTIFIER',    r'[A-Za-z_][A-Za-z0-9_]*'),

    # Comments
    ('COMMENT',       r'//[^\n]*'),

    # Two character operators
    ('BANG_EQUAL',    r'!='),
    ('EQUAL_EQUAL',   r'=='),
    ('GREATER_EQUAL', r'>='),
    ('LESS_EQUAL',    r'<='),

    # Single character tokens
    ('LEFT_PAREN',    r'\('),
    ('RIGHT_PAREN',   r'\)'),
    ('LEFT_BRACE',    r'\{'),
    ('RIGHT_BRACE',   r'\}'),
    ('COMMA',         r','),
    ('DOT',           r'\.'),
    ('MINUS',         r'-'),
    ('PLUS',          r'\+'),
    ('SEMICOLON',     r';'),
    ('SLASH',         r'/'),
    ('STAR',          r'\*'),
    ('BANG',          r'!'),
    ('EQUAL',         r'='),
    ('GREATER',       r'>'),
    ('LESS',          r'<'),

    # Miscellaneous
    ('NEWLINE',       r'\n'),
    ('SKIP',          r'[ \t\r]+'),
    ('MISMATCH',      r'.'),
]

TOKEN_REGEX = re.compile(
    '|'.join(f'(?P<{name}>{pattern})' for name, pattern in TOKEN_SPECIFICATION),
    re.DOTALL,
)


class Scanner:
    """
    Converts source text into tokens.
    """

    def __init__(self, source: str):
        """
        Initialize the scanner.

        Parameters:
            source (str): The source code to scan.
        """
        self.source = source
        self.line = 1
        self.tokens: list[Token] = []
        self.errors: list = []

    def scan_tokens(self) -> list[Token]:
        """
        Scan the whole source.

        Returns:
            list[Token]: The tokens found, terminated by an EOF token. Any
            lexical errors are collected in ``self.errors``.
        """
        for match_obj in TOKEN_REGEX.finditer(self.source):
            kind = match_obj.lastgroup
            lexeme = match_obj.group()
            start = match_obj.start()

            if kind == 'NEWLINE':
                self.line += 1
                continue
            if kind in ('SKIP', 'COMMENT'):
                continue
            if kind == 'MISMATCH':
                self.errors.append(UnknownCharacterError(lexeme, self.line, start))
                continue
            if kind == 'UNTERMINATED':
                self.errors.append(UnterminatedStringError(self.line, start))
                self.line += lexeme.count('\n')
                continue

            if kind == 'NUMBER':
                self._add_token(TokenType.NUMBER, lexeme, to_f32(float(lexeme)), start)
            elif kind == 'STRING':
                self._add_token(TokenType.STRING, lexeme, lexeme[1:-1], start)
                # The token keeps the line its opening quote is on.
                self.line += lexeme.count('\n')
            elif kind == 'IDENTIFIER':
                keyword = KEYWORDS.get(lexeme)
                if keyword is not None:
                    self._add_token(keyword, lexeme, None, start)
                else:
                    self._add_token(TokenType.IDENTIFIER, lexeme, lexeme, start)
            else:
                self._add_token(TokenType[kind], lexeme, None, start)

        self.tokens.append(Token(TokenType.EOF, "", None, self.line, len(self.source)))
        logger.debug(
            "scanned %d tokens with %d errors", len(self.tokens), len(self.errors)
        )
        return self.tokens

    def _add_token(self, token_type: TokenType, lexeme: str, literal, start: int) -> None:
        self.tokens.append(Token(token_type, lexeme, literal, self.line, start))


def tokenize(source: str) -> list[Token]:
    """
    Convert a string of source code into a list of tokens.

    Parameters:
        source (str): The source code to tokenize.

    Returns:
        list[Token]: The tokens, terminated by an EOF token.

    Raises:
        ScannerErrors: If any lexical error was found. Carries all of them.
    """
    scanner = Scanner(source)
    tokens = scanner.scan_tokens()
    if scanner.errors:
        raise ScannerErrors(scanner.errors)
    return tokens

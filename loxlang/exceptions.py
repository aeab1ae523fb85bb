"""Errors.

Lexical, syntax and runtime errors are kept in separate branches of the
hierarchy. Each error records the 1-based line and the source offset needed
to point at the offending text.


File: exceptions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""


class LoxError(Exception):
    """
    Base class for every error reported by the pipeline.
    """
    heading = "Error"

    def __init__(self, message, line, offset):
        self.message = message
        self.line = line
        self.offset = offset
        super().__init__(f"[line {line}] {message}")


class ScanError(LoxError):
    """
    Error raised for malformed lexemes.
    """
    heading = "Scanner Error"


class UnknownCharacterError(ScanError):
    """
    Error for characters that do not start any token.
    """
    def __init__(self, char, line, offset):
        self.char = char
        super().__init__(f'Unknown Token: "{char}"', line, offset)


class UnterminatedStringError(ScanError):
    """
    Error for string literals missing their closing quote.
    """
    def __init__(self, line, offset):
        super().__init__("Unterminated string.", line, offset)


class ScannerErrors(Exception):
    """
    Every lexical error found in one pass over the source.
    """
    def __init__(self, errors):
        self.errors = list(errors)
        super().__init__("\n".join(str(error) for error in self.errors))


class ParserError(LoxError):
    """
    Error for a required token that did not appear.
    """
    heading = "Parser Error"

    def __init__(self, expected, found):
        self.expected = tuple(expected)
        self.found = found
        expected_names = ", ".join(token_type.name for token_type in self.expected)
        super().__init__(
            f"Unexpected Token: found '{found.type.name}', expected '{expected_names}'",
            found.line,
            found.start,
        )


class LoxRuntimeError(LoxError):
    """
    Error raised while evaluating a program.
    """
    heading = "Runtime Error"

    def __init__(self, message, token):
        self.token = token
        super().__init__(message, token.line, token.start)


class OperandTypeError(LoxRuntimeError):
    """
    Error for an operator applied to operands of the wrong kind.
    """


class UndefinedVariableError(LoxRuntimeError):
    """
    Error for undefined variables.
    """
    def __init__(self, token):
        self.name = token.lexeme
        super().__init__(f"Undefined variable '{self.name}'.", token)

"""Pipeline driver.

`Lox` ties the stages together: scan the source, parse the tokens, then
evaluate the declarations. Lexical errors stop the run before parsing and
syntax errors stop it before evaluation; in both cases every error found is
returned. A runtime error stops evaluation and is returned on its own.

Errors are returned as values. Rendering them is left to the caller (see
`loxlang.diagnostics`).


File: runner.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import logging
import os
import sys

from loxlang.ast_printer import print_program
from loxlang.diagnostics import render_errors, use_color
from loxlang.exceptions import LoxRuntimeError
from loxlang.interpreter import Interpreter
from loxlang.parser import Parser
from loxlang.scanner import Scanner

logger = logging.getLogger(__name__)

PROMPT = "> "


def debug_enabled() -> bool:
    """
    Return ``True`` when the ``LOXDEBUG`` environment variable is set.
    """
    return bool(os.environ.get("LOXDEBUG"))


def debug_print_tokens_ast(tokens, declarations, stream=None):
    """
    Print tokenized source and AST
    """
    stream = stream or sys.stderr
    print("\nTokens:\n", file=stream)
    for token in tokens:
        print(token, file=stream)
    print("\nAST:\n", file=stream)
    print(print_program(declarations), file=stream)
    print(" ", file=stream)


class Lox:
    """Runs Lox source code through the scanner, parser and interpreter."""

    def __init__(self, output=None, errors=None):
        """
        Initialize the driver.

        Parameters:
            output: Stream for print statements. Defaults to ``sys.stdout``.
            errors: Stream for error reports. Defaults to ``sys.stderr``.
        """
        self.output = output
        self.errors = errors
        self.interpreter = Interpreter(output=output)

    def run(self, source: str) -> list:
        """
        Scan, parse and evaluate ``source``.

        Returns:
            list: The errors that stopped the run, or an empty list.
        """
        scanner = Scanner(source)
        tokens = scanner.scan_tokens()
        if scanner.errors:
            return scanner.errors

        parser = Parser(tokens)
        declarations = parser.parse()
        if parser.errors:
            return parser.errors

        if debug_enabled():
            debug_print_tokens_ast(tokens, declarations, self.errors)

        try:
            self.interpreter.interpret(declarations)
        except LoxRuntimeError as e:
            logger.debug("runtime error on line %d: %s", e.line, e.message)
            return [e]
        return []

    def report(self, errors, source: str) -> None:
        """
        Write rendered errors to the error stream.
        """
        stream = self.errors or sys.stderr
        print(render_errors(errors, source, use_color(stream)), file=stream)

    def run_file(self, path: str) -> list:
        """
        Run a script from disk, reporting any errors.

        Raises:
            OSError: If the file cannot be read.
        """
        with open(path, "r", encoding="utf-8") as f:
            source = f.read()
        errors = self.run(source)
        if errors:
            self.report(errors, source)
        return errors

    def run_repl(self, read_line=input) -> None:
        """
        Read and run one line at a time until EOF, ``exit`` or ``quit``.

        Bindings persist from one line to the next, including after errors.
        """
        while True:
            try:
                line = read_line(PROMPT)
            except EOFError:
                print(file=self.output or sys.stdout)
                break
            except KeyboardInterrupt:
                print("\nInterrupted.", file=self.output or sys.stdout)
                break
            if line.strip() in {"exit", "quit"}:
                break
            errors = self.run(line)
            if errors:
                self.report(errors, line)


def exit_status(errors) -> int:
    """
    Map the errors of a run to a process exit status.

    Returns:
        int: 0 on success, 65 for lexical or syntax errors, 70 for a
        runtime error.
    """
    if not errors:
        return 0
    if isinstance(errors[0], LoxRuntimeError):
        return 70
    return 65

"""Diagnostics.

Turns the structured errors raised by the scanner, parser and interpreter
into human-readable reports. Each error carries a 1-based line and an
offset into the source; the offending line is sliced out of the source and
the column found by subtracting the length of every preceding line,
terminators included, from the offset::

    Parser Error: Unexpected Token: found 'SEMICOLON', expected 'IDENTIFIER'

    line:   1 | var ;
              |     ^
              |     Here

Headings are red and markers yellow unless colors are turned off.


File: diagnostics.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import os

RED = "\033[31m"
YELLOW = "\033[33m"
RESET = "\033[0m"

GUTTER = " " * 10 + "| "


def find_location_in_source(source: str, line: int, offset: int) -> tuple[str, int]:
    """
    Find the text of ``line`` and the 0-based column of ``offset`` within it.

    Args:
        source (str): The full source text.
        line (int): The 1-based line number.
        offset (int): The offset into ``source``.

    Returns:
        tuple[str, int]: The line without its terminator and the column.
        ``("", 0)`` when the line lies outside the source.
    """
    lines = source.split("\n")
    if line < 1 or line > len(lines):
        return "", 0
    preceding = sum(len(text) + 1 for text in lines[:line - 1])
    target = lines[line - 1].rstrip("\r")
    return target, max(offset - preceding, 0)


def use_color(stream) -> bool:
    """
    Return ``True`` if ANSI colors should be written to ``stream``.

    Colors are disabled by the ``NO_COLOR`` environment variable and for
    streams that are not terminals.
    """
    if os.environ.get("NO_COLOR"):
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def _paint(text: str, color: str, enabled: bool) -> str:
    return f"{color}{text}{RESET}" if enabled else text


def render_error(error, source: str, color: bool = False) -> str:
    """
    Render a scanner, parser or runtime error against its source text.

    Args:
        error (LoxError): The error to render.
        source (str): The source text the error was found in.
        color (bool): Whether to add ANSI colors.

    Returns:
        str: The multi-line report.
    """
    line_content, col = find_location_in_source(source, error.line, error.offset)
    heading = _paint(f"{error.heading}: {error.message}", RED, color)
    padding = " " * col
    return (
        f"{heading} \n\n"
        f"line: {error.line:3} | {line_content}\n"
        f"{GUTTER}{padding}{_paint('^', YELLOW, color)}\n"
        f"{GUTTER}{padding}{_paint('Here', YELLOW, color)}"
    )


def render_errors(errors, source: str, color: bool = False) -> str:
    """
    Render several errors separated by blank lines.
    """
    return "\n\n".join(render_error(error, source, color) for error in errors)

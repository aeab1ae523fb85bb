"""
Lox Language Server entry point.

This server provides basic language features for Lox source files using
`pygls`. It reuses the scanner and parser to publish lexical and syntax
errors as diagnostics, and indexes top-level `var` declarations for
document symbols and hover information.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from pygls.server import LanguageServer
from lsprotocol.types import (
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_OPEN,
    TEXT_DOCUMENT_DOCUMENT_SYMBOL,
    TEXT_DOCUMENT_HOVER,
    Diagnostic,
    DiagnosticSeverity,
    DidChangeTextDocumentParams,
    DidOpenTextDocumentParams,
    DocumentSymbol,
    DocumentSymbolParams,
    Hover,
    HoverParams,
    MarkupContent,
    MarkupKind,
    Position,
    Range,
    SymbolKind,
)

from loxlang.ast_printer import print_ast
from loxlang.diagnostics import find_location_in_source
from loxlang.exceptions import ParserError
from loxlang.nodes import Var
from loxlang.parser import Parser
from loxlang.scanner import Scanner

logger = logging.getLogger(__name__)


@dataclass
class LoxSymbol:
    """Represents a top-level variable declared in a Lox file."""

    name: str
    kind: SymbolKind
    uri: str
    line: int
    column: int
    detail: str


def utf16_length(text: str) -> int:
    """Return the length of ``text`` in UTF-16 code units, as LSP counts columns."""
    return len(text.encode("utf-16-le")) // 2


def lsp_position(text: str, line: int, offset: int) -> Position:
    """Convert a 1-based line and a source offset to an LSP position."""
    line_content, column = find_location_in_source(text, line, offset)
    return Position(line=line - 1, character=utf16_length(line_content[:column]))


def error_range(error, text: str) -> Range:
    """Return the LSP range covering the lexeme an error points at."""
    start = lsp_position(text, error.line, error.offset)
    lexeme = text[error.offset:error.offset + 1]
    if isinstance(error, ParserError) and error.found.lexeme:
        lexeme = error.found.lexeme
    end = Position(line=start.line, character=start.character + max(utf16_length(lexeme), 1))
    return Range(start=start, end=end)


def analyze(uri: str, text: str) -> tuple[List[Diagnostic], List[LoxSymbol]]:
    """Scan and parse ``text``, returning its diagnostics and symbols."""
    scanner = Scanner(text)
    tokens = scanner.scan_tokens()
    errors = list(scanner.errors)
    symbols: List[LoxSymbol] = []
    if not errors:
        parser = Parser(tokens)
        declarations = parser.parse()
        errors = parser.errors
        for decl in declarations:
            if isinstance(decl, Var):
                position = lsp_position(text, decl.name.line, decl.name.start)
                symbols.append(
                    LoxSymbol(
                        decl.name.lexeme,
                        SymbolKind.Variable,
                        uri,
                        position.line,
                        position.character,
                        f"var {decl.name.lexeme} = {print_ast(decl.initializer)}",
                    )
                )
    diagnostics = [
        Diagnostic(
            range=error_range(error, text),
            message=f"{error.heading}: {error.message}",
            severity=DiagnosticSeverity.Error,
            source="lox",
        )
        for error in errors
    ]
    return diagnostics, symbols


class LoxLanguageServer(LanguageServer):
    """Language server for Lox source files."""

    def __init__(self) -> None:
        super().__init__("lox-ls", "v0.1")
        self.symbols_by_uri: Dict[str, List[LoxSymbol]] = {}

    def update_document(self, uri: str, text: str) -> None:
        """Analyze ``text``, publish its diagnostics and index its symbols."""
        diagnostics, symbols = analyze(uri, text)
        logger.debug("%s: %d diagnostics", uri, len(diagnostics))
        self.symbols_by_uri[uri] = symbols
        self.publish_diagnostics(uri, diagnostics)

    def lookup(self, uri: str, name: str) -> Optional[LoxSymbol]:
        """Return the last declaration of ``name`` in ``uri``."""
        matches = [sym for sym in self.symbols_by_uri.get(uri, []) if sym.name == name]
        return matches[-1] if matches else None


lang_server = LoxLanguageServer()


@lang_server.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: LoxLanguageServer, params: DidOpenTextDocumentParams) -> None:
    """Analyze a document when it is opened."""
    ls.update_document(params.text_document.uri, params.text_document.text)


@lang_server.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: LoxLanguageServer, params: DidChangeTextDocumentParams) -> None:
    """Re-analyze a document when it changes.

    Change events may carry only the edited fragment; the workspace copy of
    the document already has the change applied.
    """
    doc = ls.workspace.get_text_document(params.text_document.uri)
    ls.update_document(params.text_document.uri, doc.source)


@lang_server.feature(TEXT_DOCUMENT_HOVER)
def hover(ls: LoxLanguageServer, params: HoverParams) -> Optional[Hover]:
    """Return the declaration of the variable under the cursor."""
    doc = ls.workspace.get_text_document(params.text_document.uri)
    word = doc.word_at_position(params.position)
    if not word:
        return None
    sym = ls.lookup(params.text_document.uri, word)
    if sym is None:
        return None
    contents = MarkupContent(kind=MarkupKind.PlainText, value=sym.detail)
    return Hover(contents=contents)


@lang_server.feature(TEXT_DOCUMENT_DOCUMENT_SYMBOL)
def document_symbols(ls: LoxLanguageServer, params: DocumentSymbolParams):
    """Return top-level symbols for the given document."""
    symbols = ls.symbols_by_uri.get(params.text_document.uri, [])
    result: List[DocumentSymbol] = []
    for sym in symbols:
        rng = Range(
            Position(line=sym.line, character=sym.column),
            Position(line=sym.line, character=sym.column + utf16_length(sym.name)),
        )
        result.append(
            DocumentSymbol(
                name=sym.name,
                kind=sym.kind,
                range=rng,
                selection_range=rng,
                detail=sym.detail,
            )
        )
    return result


def main() -> None:
    """Start the language server."""
    lang_server.start_io()


if __name__ == "__main__":
    main()

"""
Tests for the language server's analysis of Lox documents.
"""
from types import SimpleNamespace

import pytest

pytest.importorskip("pygls")

from lsprotocol.types import (  # noqa: E402
    DiagnosticSeverity,
    DidChangeTextDocumentParams,
    Position,
    Range,
    SymbolKind,
    TextDocumentContentChangeEvent_Type1,
    TextDocumentItem,
    VersionedTextDocumentIdentifier,
)
from pygls.workspace import Workspace  # noqa: E402

from vscode.server.main import analyze, did_change  # noqa: E402


def test_clean_document_has_symbols_and_no_diagnostics():
    diagnostics, symbols = analyze("file:///a.lox", "var a = 1 + 2;\n  var b;\nprint a;")
    assert diagnostics == []
    assert [s.name for s in symbols] == ["a", "b"]
    assert symbols[0].kind == SymbolKind.Variable
    assert symbols[0].detail == "var a = (+ 1 2)"
    assert (symbols[1].line, symbols[1].column) == (1, 6)


def test_lexical_errors_become_diagnostics():
    diagnostics, symbols = analyze("file:///b.lox", "var a = 1;\nprint `;")
    assert symbols == []
    assert len(diagnostics) == 1
    diagnostic = diagnostics[0]
    assert diagnostic.severity == DiagnosticSeverity.Error
    assert diagnostic.range.start.line == 1
    assert diagnostic.range.start.character == 6
    assert diagnostic.range.end.character == 7
    assert diagnostic.message.startswith("Scanner Error")


def test_syntax_errors_become_diagnostics():
    diagnostics, _ = analyze("file:///c.lox", "print (1;\nvar x = print;")
    assert len(diagnostics) == 2
    second = diagnostics[1]
    assert second.range.start.line == 1
    assert second.range.start.character == 8
    assert second.range.end.character == 13
    assert "found 'PRINT'" in second.message


def test_columns_count_utf16_code_units():
    # The emoji is one code point but two UTF-16 code units.
    diagnostics, _ = analyze("file:///d.lox", 'print "\U0001F600" `;')
    start = diagnostics[0].range.start
    assert start.character == 11
    assert diagnostics[0].range.end.character == 12

    _, symbols = analyze("file:///e.lox", 'var s = "\U0001F600"; var t;')
    assert symbols[1].column == 18


def test_incremental_change_reanalyzes_whole_document():
    uri = "file:///f.lox"
    workspace = Workspace("file:///")
    workspace.put_text_document(
        TextDocumentItem(uri=uri, language_id="lox", version=1, text="print 1;")
    )
    identifier = VersionedTextDocumentIdentifier(uri=uri, version=2)
    change = TextDocumentContentChangeEvent_Type1(
        range=Range(start=Position(line=0, character=8), end=Position(line=0, character=8)),
        text="x",
    )
    workspace.update_text_document(identifier, change)

    analyzed = []
    server = SimpleNamespace(
        workspace=workspace,
        update_document=lambda doc_uri, text: analyzed.append((doc_uri, text)),
    )
    did_change(server, DidChangeTextDocumentParams(text_document=identifier, content_changes=[change]))

    assert analyzed == [(uri, "print 1;x")]
    diagnostics, _ = analyze(uri, analyzed[0][1])
    assert len(diagnostics) == 1
    assert diagnostics[0].range.start.character == 9
    assert "found 'EOF', expected 'SEMICOLON'" in diagnostics[0].message

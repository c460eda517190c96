"""
Nice Language Server entry point.

This server provides basic language features for Nice source files using
`pygls`. It reuses the Nice lexer and parser to publish syntax diagnostics
and to build a simple symbol index of top-level ``var`` declarations,
supporting definition lookup, hover information, and document symbols.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

from pygls.server import LanguageServer
from lsprotocol.types import (
    TEXT_DOCUMENT_DEFINITION,
    TEXT_DOCUMENT_HOVER,
    TEXT_DOCUMENT_DOCUMENT_SYMBOL,
    TEXT_DOCUMENT_DID_OPEN,
    TEXT_DOCUMENT_DID_CHANGE,
    DefinitionParams,
    Diagnostic,
    DiagnosticSeverity,
    DidOpenTextDocumentParams,
    DidChangeTextDocumentParams,
    DocumentSymbol,
    DocumentSymbolParams,
    Hover,
    HoverParams,
    Location,
    MarkupContent,
    MarkupKind,
    Position,
    Range,
    SymbolKind,
)

from nicelang.ast_nodes import VarStmt
from nicelang.ast_printer import format_expr
from nicelang.lexer import tokenize
from nicelang.parser import Parser
from nicelang.reporter import CollectingReporter

logger = logging.getLogger(__name__)

SOURCE_SUFFIX = ".nice"


@dataclass
class NiceSymbol:
    """Represents a top-level variable declared in a Nice file."""

    name: str
    kind: SymbolKind
    uri: str
    line: int
    column: int
    detail: str


@dataclass
class AnalysisResult:
    """Symbols and diagnostics produced from one document."""

    symbols: List[NiceSymbol] = field(default_factory=list)
    diagnostics: List[Diagnostic] = field(default_factory=list)


def analyze(uri: str, text: str) -> AnalysisResult:
    """Lex and parse ``text``, collecting symbols and error diagnostics.

    Lines are converted from the 1-based numbering used by the interpreter
    to the 0-based numbering used by the protocol.
    """
    reporter = CollectingReporter()
    tokens = tokenize(text, reporter)
    statements = Parser(tokens, reporter).parse()

    result = AnalysisResult()
    for stmt in statements:
        if not isinstance(stmt, VarStmt):
            continue
        name = stmt.name.lexeme
        if stmt.initializer is None:
            detail = f"var {name}"
        else:
            detail = f"var {name} = {format_expr(stmt.initializer)}"
        result.symbols.append(
            NiceSymbol(
                name, SymbolKind.Variable, uri,
                stmt.name.line - 1, stmt.name.column, detail,
            )
        )

    for line, message in reporter.diagnostics:
        row = max(line - 1, 0)
        result.diagnostics.append(
            Diagnostic(
                range=Range(Position(row, 0), Position(row + 1, 0)),
                message=message,
                severity=DiagnosticSeverity.Error,
                source="nice",
            )
        )
    return result


class NiceLanguageServer(LanguageServer):
    """Language server for Nice source files."""

    def __init__(self) -> None:
        super().__init__("nice-ls", "v0.1")
        self.symbols_by_uri: Dict[str, List[NiceSymbol]] = {}
        self.global_symbols: Dict[str, List[NiceSymbol]] = {}
        self.indexed_workspace = False

    def _index_workspace(self) -> None:
        """Parse all `.nice` files under the current workspace."""
        root = self.workspace.root_path
        if not root:
            self.indexed_workspace = True
            return
        for path in Path(root).rglob(f"*{SOURCE_SUFFIX}"):
            uri = path.as_uri()
            if uri in self.symbols_by_uri:
                continue
            try:
                text = path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                logger.warning("Failed to index %s: %s", path, e)
                continue
            self.update_index(uri, text)
        self.indexed_workspace = True

    def update_index(self, uri: str, text: str) -> List[Diagnostic]:
        """Parse ``text``, update the symbol index for ``uri`` and return its diagnostics."""
        result = analyze(uri, text)
        self.symbols_by_uri[uri] = result.symbols
        self._rebuild_global_index()
        logger.debug(
            "Indexed %s: %d symbols, %d diagnostics",
            uri, len(result.symbols), len(result.diagnostics),
        )
        return result.diagnostics

    def _rebuild_global_index(self) -> None:
        self.global_symbols.clear()
        for syms in self.symbols_by_uri.values():
            for sym in syms:
                self.global_symbols.setdefault(sym.name, []).append(sym)

    def refresh(self, uri: str, text: str) -> None:
        """Re-index a document and publish its diagnostics."""
        diagnostics = self.update_index(uri, text)
        self.publish_diagnostics(uri, diagnostics)

    def lookup(self, word: Optional[str]) -> Optional[NiceSymbol]:
        """Return the first known declaration of ``word``."""
        if not word:
            return None
        if not self.indexed_workspace:
            self._index_workspace()
        matches = self.global_symbols.get(word)
        if not matches:
            return None
        return matches[0]


def _symbol_range(sym: NiceSymbol) -> Range:
    return Range(
        Position(sym.line, sym.column),
        Position(sym.line, sym.column + len(sym.name)),
    )


lang_server = NiceLanguageServer()


@lang_server.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: NiceLanguageServer, params: DidOpenTextDocumentParams) -> None:
    """Index a document when it is opened."""
    ls.refresh(params.text_document.uri, params.text_document.text)


@lang_server.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: NiceLanguageServer, params: DidChangeTextDocumentParams) -> None:
    """Re-index a document when it changes."""
    doc = ls.workspace.get_text_document(params.text_document.uri)
    ls.refresh(params.text_document.uri, doc.source)


@lang_server.feature(TEXT_DOCUMENT_DEFINITION)
def definition(ls: NiceLanguageServer, params: DefinitionParams) -> Optional[Location]:
    """Return the definition location for the variable under the cursor."""
    doc = ls.workspace.get_text_document(params.text_document.uri)
    sym = ls.lookup(doc.word_at_position(params.position))
    if sym is None:
        return None
    return Location(uri=sym.uri, range=_symbol_range(sym))


@lang_server.feature(TEXT_DOCUMENT_HOVER)
def hover(ls: NiceLanguageServer, params: HoverParams) -> Optional[Hover]:
    """Return hover information for the variable under the cursor."""
    doc = ls.workspace.get_text_document(params.text_document.uri)
    sym = ls.lookup(doc.word_at_position(params.position))
    if sym is None:
        return None
    contents = MarkupContent(kind=MarkupKind.PlainText, value=sym.detail)
    return Hover(contents=contents)


@lang_server.feature(TEXT_DOCUMENT_DOCUMENT_SYMBOL)
def document_symbols(ls: NiceLanguageServer, params: DocumentSymbolParams) -> List[DocumentSymbol]:
    """Return top-level variables for the given document."""
    symbols = ls.symbols_by_uri.get(params.text_document.uri, [])
    result: List[DocumentSymbol] = []
    for sym in symbols:
        rng = _symbol_range(sym)
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
    logging.basicConfig(level=logging.INFO)
    lang_server.start_io()


if __name__ == "__main__":
    main()

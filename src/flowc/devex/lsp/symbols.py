"""Document symbol provider for Flow.

One Function symbol per ``define``, spanning to the ``end`` that closes it.
"""

from __future__ import annotations
from typing import Optional

from lsprotocol import types as lsp

from flowc.compiler.classifier import classify_source
from flowc.compiler.statements import BLOCK_OPENERS, End, FunctionDef


def _line_range(source_lines: list[str], start_line: int, end_line: int) -> lsp.Range:
    """Range from the start of ``start_line`` to the end of ``end_line`` (1-based)."""
    end_idx = min(end_line, len(source_lines)) - 1
    return lsp.Range(
        start=lsp.Position(line=start_line - 1, character=0),
        end=lsp.Position(line=end_idx, character=len(source_lines[end_idx])),
    )


def _selection_range(source_lines: list[str], func: FunctionDef) -> lsp.Range:
    """Range covering just the function name on its ``define`` line."""
    text = source_lines[func.line - 1]
    col = text.find(func.name, text.find("define") + len("define"))
    col = max(col, 0)
    return lsp.Range(
        start=lsp.Position(line=func.line - 1, character=col),
        end=lsp.Position(line=func.line - 1, character=col + len(func.name)),
    )


def _signature(func: FunctionDef) -> str:
    params = ", ".join(f"auto {p}" for p in func.params)
    return f"auto {func.name}({params})"


def _symbol(source_lines: list[str], func: FunctionDef, end_line: int) -> lsp.DocumentSymbol:
    return lsp.DocumentSymbol(
        name=func.name,
        kind=lsp.SymbolKind.Function,
        range=_line_range(source_lines, func.line, end_line),
        selection_range=_selection_range(source_lines, func),
        detail=_signature(func),
    )


def get_document_symbols(source: str) -> list[lsp.DocumentSymbol]:
    """Extract function symbols from a Flow document."""
    source_lines = source.split("\n")
    symbols: list[lsp.DocumentSymbol] = []

    current: Optional[FunctionDef] = None
    depth = 0
    for stmt in classify_source(source):
        if isinstance(stmt, FunctionDef):
            # A new define abandons the one in progress
            if current is not None:
                symbols.append(_symbol(source_lines, current, stmt.line - 1))
            current = stmt
            depth = 1
        elif current is None:
            continue
        elif isinstance(stmt, BLOCK_OPENERS):
            depth += 1
        elif isinstance(stmt, End):
            depth = max(depth - 1, 0)
            if depth == 0:
                symbols.append(_symbol(source_lines, current, stmt.line))
                current = None

    if current is not None:
        symbols.append(_symbol(source_lines, current, len(source_lines)))

    return symbols

"""Hover provider for Flow.

Shows which statement form a line is and the C++ it translates to, as it
would be emitted at the top of ``main``.
"""

from typing import Optional

from lsprotocol import types as lsp

from flowc.compiler.classifier import classify
from flowc.compiler.codegen import CodeGen


def preview_cpp(line: str) -> list[str]:
    """C++ lines a single Flow line produces, with indentation removed."""
    gen = CodeGen()
    gen.emit_statement(classify(line))
    emitted = gen.scope.function_lines + gen.scope.main_lines
    return [text.strip() for text in emitted if text.strip()]


def get_hover_info(source: str, position: lsp.Position) -> Optional[lsp.Hover]:
    source_lines = source.split("\n")
    if position.line >= len(source_lines):
        return None
    raw = source_lines[position.line]
    line = raw.strip()
    if not line:
        return None

    stmt = classify(line, position.line + 1)
    cpp = preview_cpp(line)
    value = f"**{type(stmt).__name__}**"
    if cpp:
        value += "\n```cpp\n" + "\n".join(cpp) + "\n```"
    else:
        value += "\n\n_(emits nothing)_"

    indent = len(raw) - len(raw.lstrip())
    return lsp.Hover(
        contents=lsp.MarkupContent(kind=lsp.MarkupKind.Markdown, value=value),
        range=lsp.Range(
            start=lsp.Position(line=position.line, character=indent),
            end=lsp.Position(line=position.line, character=indent + len(line)),
        ),
    )

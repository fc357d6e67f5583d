"""C++ code generator for the Flow language.

Consumes the source one line at a time: each line is classified, rendered
into the active buffer at the current depth, and discarded. The buffers are
assembled into a single translation unit at the end.
"""

from __future__ import annotations

from .classifier import classify_source
from .expressions import translate_expr
from .includes import IncludeSet
from .scope import BlockKind, ScopeTracker
from .statements import (
    Break,
    Comment,
    Continue,
    Dropped,
    Else,
    End,
    ExprStmt,
    FunctionDef,
    Grow,
    If,
    Let,
    Loop,
    Return,
    Say,
    Statement,
    While,
)

HEADER_COMMENT = "// Generated by flowc — the Flow compiler"

# Multiplier used by 'grow'. Not the same literal as PHI_LITERAL.
GROW_FACTOR = "1.618033988749895"


class CodeGen:
    def __init__(self, source: str = ""):
        self.source = source
        self.includes = IncludeSet()
        self.scope = ScopeTracker()

    def generate(self) -> str:
        for stmt in classify_source(self.source):
            self.emit_statement(stmt)
        return self.assemble()

    def _expr(self, text: str) -> str:
        return translate_expr(text, self.includes)

    # ---- Statements ----

    def emit_statement(self, stmt: Statement):
        scope = self.scope

        if isinstance(stmt, Comment):
            scope.emit(f"// {stmt.text}")
        elif isinstance(stmt, End):
            scope.close()
            scope.emit("}")
            if scope.in_function and scope.depth == 0:
                scope.end_function()
        elif isinstance(stmt, FunctionDef):
            params = ", ".join(f"auto {p}" for p in stmt.params)
            scope.begin_function(f"auto {stmt.name}({params}) {{", stmt.line)
        elif isinstance(stmt, Return):
            scope.emit(f"return {self._expr(stmt.expr)};")
        elif isinstance(stmt, Say):
            self.includes.iostream = True
            scope.emit(f"std::cout << {self._expr(stmt.expr)} << std::endl;")
        elif isinstance(stmt, Let):
            scope.emit(f"auto {stmt.name} = {self._expr(stmt.expr)};")
        elif isinstance(stmt, Dropped):
            pass
        elif isinstance(stmt, If):
            scope.emit(f"if ({self._expr(stmt.condition)}) {{")
            scope.open(BlockKind.IF, stmt.line)
        elif isinstance(stmt, Else):
            scope.close()
            scope.emit("} else {")
            scope.open(BlockKind.ELSE, stmt.line)
        elif isinstance(stmt, Loop):
            count = self._expr(stmt.count)
            scope.emit(f"for (int _i = 0; _i < {count}; _i++) {{")
            scope.open(BlockKind.LOOP, stmt.line)
        elif isinstance(stmt, While):
            scope.emit(f"while ({self._expr(stmt.condition)}) {{")
            scope.open(BlockKind.WHILE, stmt.line)
        elif isinstance(stmt, Grow):
            scope.emit(f"{stmt.var} *= {GROW_FACTOR};")
        elif isinstance(stmt, Break):
            scope.emit("break;")
        elif isinstance(stmt, Continue):
            scope.emit("continue;")
        elif isinstance(stmt, ExprStmt):
            scope.emit(f"{self._expr(stmt.expr)};")
        else:
            raise TypeError(f"Unhandled statement: {stmt!r}")

    # ---- Assembly ----

    def assemble(self) -> str:
        out = [HEADER_COMMENT]
        out.extend(self.includes.lines())
        out.append("")
        out.extend(self.scope.function_lines)
        out.append("int main() {")
        out.extend(self.scope.main_lines)
        out.append("    return 0;")
        out.append("}")
        return "\n".join(out) + "\n"


def transpile(source: str) -> str:
    """Translate a Flow program into a complete C++ translation unit."""
    return CodeGen(source).generate()

"""Line classification: one trimmed Flow line -> one statement variant.

Checks run in a fixed order and the first match wins. Nothing here
raises; a line that fits no structured form is an expression statement.
"""

from __future__ import annotations
from typing import Iterator

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


def _between(line: str, prefix: str, suffix: str) -> str:
    """Text between a known prefix and suffix, trimmed."""
    return line[len(prefix):len(line) - len(suffix)].strip()


def parse_signature(text: str) -> tuple[str, tuple[str, ...]]:
    """Split ``name(a, b)`` into the name and its parameter names.

    Without a '(' the whole text is the name. A missing ')' takes the
    parameters to the end of the text.
    """
    text = text.strip()
    paren = text.find("(")
    if paren < 0:
        return text, ()
    name = text[:paren].strip()
    close = text.find(")")
    if close < 0:
        close = len(text)
    params = tuple(p.strip() for p in text[paren + 1:close].split(","))
    return name, tuple(p for p in params if p)


def classify(line: str, line_no: int = 0) -> Statement:
    """Classify one trimmed, non-empty line."""
    if line.startswith("--"):
        return Comment(text=line[2:].strip(), line=line_no)

    if line == "end":
        return End(line=line_no)

    if line.startswith("define "):
        name, params = parse_signature(line[len("define "):])
        return FunctionDef(name=name, params=params, line=line_no)

    if line.startswith("return "):
        return Return(expr=line[len("return "):], line=line_no)

    if line.startswith("say "):
        return Say(expr=line[len("say "):], line=line_no)

    if line.startswith("let "):
        rest = line[len("let "):]
        name, eq, value = rest.partition("=")
        if not eq:
            return Dropped(text=line, line=line_no)
        return Let(name=name.strip(), expr=value.strip(), line=line_no)

    if line.startswith("if ") and line.endswith("then"):
        return If(condition=_between(line, "if ", "then"), line=line_no)

    if line == "else":
        return Else(line=line_no)

    if line.startswith("loop ") and line.endswith("times"):
        return Loop(count=_between(line, "loop ", "times"), line=line_no)

    if line.startswith("while ") and line.endswith("do"):
        return While(condition=_between(line, "while ", "do"), line=line_no)

    if line.startswith("grow "):
        return Grow(var=line[len("grow "):].strip(), line=line_no)

    if line == "break":
        return Break(line=line_no)
    if line == "continue":
        return Continue(line=line_no)

    return ExprStmt(expr=line, line=line_no)


def classify_source(source: str) -> Iterator[Statement]:
    """Classify every non-blank line of a Flow program, in order."""
    for line_no, raw in enumerate(source.split("\n"), start=1):
        line = raw.strip()
        if line:
            yield classify(line, line_no)

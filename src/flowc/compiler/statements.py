"""Statement variants for the Flow language.

Every non-empty source line classifies to exactly one of these. Each
variant carries the sub-texts its emitter needs plus the 1-based source
line it came from.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Comment:
    text: str = ""
    line: int = 0

@dataclass(frozen=True)
class End:
    line: int = 0

@dataclass(frozen=True)
class FunctionDef:
    name: str = ""
    params: tuple[str, ...] = ()
    line: int = 0

@dataclass(frozen=True)
class Return:
    expr: str = ""
    line: int = 0

@dataclass(frozen=True)
class Say:
    expr: str = ""
    line: int = 0

@dataclass(frozen=True)
class Let:
    name: str = ""
    expr: str = ""
    line: int = 0

@dataclass(frozen=True)
class Dropped:
    """A line recognised as a binding that has no '=' (emits nothing)."""
    text: str = ""
    line: int = 0

@dataclass(frozen=True)
class If:
    condition: str = ""
    line: int = 0

@dataclass(frozen=True)
class Else:
    line: int = 0

@dataclass(frozen=True)
class Loop:
    count: str = ""
    line: int = 0

@dataclass(frozen=True)
class While:
    condition: str = ""
    line: int = 0

@dataclass(frozen=True)
class Grow:
    var: str = ""
    line: int = 0

@dataclass(frozen=True)
class Break:
    line: int = 0

@dataclass(frozen=True)
class Continue:
    line: int = 0

@dataclass(frozen=True)
class ExprStmt:
    expr: str = ""
    line: int = 0


Statement = Union[
    Comment, End, FunctionDef, Return, Say, Let, Dropped, If, Else,
    Loop, While, Grow, Break, Continue, ExprStmt,
]

# Statements that open a block closed by a later 'end'
BLOCK_OPENERS = (FunctionDef, If, Loop, While)

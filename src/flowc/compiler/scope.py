"""Scope stack and output buffers for code generation.

The indent of every emitted line is the depth of the block stack. Output
goes to one of two buffers depending on the mode: function definitions are
collected ahead of ``main``, everything else goes into the body of ``main``.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, auto


INDENT = "    "


class Mode(Enum):
    MAIN = auto()
    FUNCTION = auto()


class BlockKind(Enum):
    MAIN = auto()
    FUNCTION = auto()
    IF = auto()
    ELSE = auto()
    LOOP = auto()
    WHILE = auto()


@dataclass
class Block:
    kind: BlockKind
    line: int = 0


class ScopeTracker:
    def __init__(self):
        self.mode = Mode.MAIN
        # The body of main() starts one level in
        self.blocks: list[Block] = [Block(BlockKind.MAIN)]
        self.function_lines: list[str] = []
        self.main_lines: list[str] = []

    @property
    def depth(self) -> int:
        return len(self.blocks)

    @property
    def in_function(self) -> bool:
        return self.mode is Mode.FUNCTION

    def emit(self, text: str):
        buffer = self.function_lines if self.in_function else self.main_lines
        buffer.append(INDENT * self.depth + text)

    def open(self, kind: BlockKind, line: int = 0):
        self.blocks.append(Block(kind, line))

    def close(self) -> Block | None:
        """Pop the innermost block; closing with nothing open is a no-op."""
        if self.blocks:
            return self.blocks.pop()
        return None

    def begin_function(self, header: str, line: int = 0):
        """Start buffering a function definition.

        Any definition already in progress is abandoned as-is: its open
        blocks are discarded and its braces are never closed.
        """
        self.mode = Mode.FUNCTION
        self.blocks = []
        self.emit(header)
        self.open(BlockKind.FUNCTION, line)

    def end_function(self):
        self.mode = Mode.MAIN
        self.function_lines.append("")

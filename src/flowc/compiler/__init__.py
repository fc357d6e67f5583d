"""Flow-to-C++ compiler, written in Python."""

from .codegen import CodeGen, transpile

__all__ = ["CodeGen", "transpile"]

"""Header bookkeeping for generated C++."""

from __future__ import annotations
from dataclasses import dataclass


@dataclass
class IncludeSet:
    """Headers the generated program needs.

    Flags are only ever set during a run; ``lines()`` renders them in
    canonical order regardless of the order they were requested in.
    """

    iostream: bool = False
    string: bool = False
    cmath: bool = False

    # Canonical order: flag name -> header
    _HEADERS = (
        ("iostream", "<iostream>"),
        ("string", "<string>"),
        ("cmath", "<cmath>"),
    )

    def lines(self) -> list[str]:
        return [f"#include {header}"
                for flag, header in self._HEADERS if getattr(self, flag)]

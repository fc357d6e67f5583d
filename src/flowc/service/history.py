"""Bounded in-memory log of recent compilations."""

from __future__ import annotations

import threading
from collections import deque
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone


def _utcnow() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass
class CompilationRecord:
    id: int
    flow: str
    cpp: str
    success: bool
    output: str
    timestamp: str = field(default_factory=_utcnow)

    def to_dict(self) -> dict:
        return asdict(self)


class CompilationHistory:
    """Keeps the most recent ``limit`` records; older ones are evicted."""

    def __init__(self, limit: int = 500) -> None:
        self._records: deque[CompilationRecord] = deque(maxlen=limit)
        self._lock = threading.Lock()

    def add(self, record: CompilationRecord) -> None:
        with self._lock:
            self._records.append(record)

    def recent(self, count: int = 50) -> list[CompilationRecord]:
        with self._lock:
            records = list(self._records)
        return records[-count:] if count > 0 else []

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

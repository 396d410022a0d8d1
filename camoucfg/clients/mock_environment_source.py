"""Fuente mock para desarrollo y testing."""
from __future__ import annotations

import threading
from typing import Dict, List, Mapping, Optional


class MockEnvironmentSource:
    """Fuente en memoria que registra cada nombre consultado."""

    def __init__(self, values: Optional[Mapping[str, str]] = None):
        self._values: Dict[str, str] = dict(values or {})
        self._lock = threading.Lock()
        self.calls: List[str] = []

    def get(self, name: str) -> Optional[str]:
        with self._lock:
            self.calls.append(name)
        return self._values.get(name)

    @classmethod
    def chunked(cls, base_name: str, text: str, size: int) -> "MockEnvironmentSource":
        """Divide ``text`` en variables ``<base_name>_1..N`` de a lo sumo ``size`` caracteres."""
        if size <= 0:
            raise ValueError(f"size debe ser positivo, recibido: {size}")
        chunks = [text[i:i + size] for i in range(0, len(text), size)]
        return cls({f"{base_name}_{index}": chunk for index, chunk in enumerate(chunks, start=1)})

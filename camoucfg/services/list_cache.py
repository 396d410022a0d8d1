"""Cache de listas de strings en minúsculas."""
from __future__ import annotations

import threading
from typing import Callable, Dict, List, Tuple

from ..utils.locks import ReadWriteLock
from ..utils.type_converters import ascii_lower


class LowercasedListCache:
    """Memoiza listas de strings pasadas a minúsculas (ASCII), por clave.

    Las entradas nunca se invalidan ni se recalculan: el documento subyacente
    es inmutable. El cálculo ocurre fuera del lock y una sola vez por clave;
    los hilos que llegan mientras tanto esperan ese resultado. La inserción
    conserva siempre la primera entrada escrita.
    """

    def __init__(self, fetch: Callable[[str], List[str]]):
        """Inicializa el cache.

        Args:
            fetch: Función que obtiene la lista cruda de strings para una clave
        """
        self._fetch = fetch
        self._lock = ReadWriteLock()
        self._entries: Dict[str, Tuple[str, ...]] = {}
        self._pending: Dict[str, threading.Event] = {}

    def get(self, key: str) -> List[str]:
        """Devuelve una copia de la lista en minúsculas para ``key``."""
        with self._lock.read_locked():
            cached = self._entries.get(key)
        if cached is not None:
            return list(cached)

        with self._lock.write_locked():
            cached = self._entries.get(key)
            if cached is not None:
                return list(cached)
            pending = self._pending.get(key)
            if pending is None:
                pending = self._pending[key] = threading.Event()
                owner = True
            else:
                owner = False

        if not owner:
            pending.wait()
            with self._lock.read_locked():
                cached = self._entries.get(key)
            if cached is not None:
                return list(cached)

        try:
            computed = tuple(ascii_lower(item) for item in self._fetch(key))
            with self._lock.write_locked():
                stored = self._entries.setdefault(key, computed)
        finally:
            if owner:
                with self._lock.write_locked():
                    self._pending.pop(key, None)
                pending.set()
        return list(stored)

    def __contains__(self, key: object) -> bool:
        with self._lock.read_locked():
            return key in self._entries

    def __len__(self) -> int:
        with self._lock.read_locked():
            return len(self._entries)

"""Lectura tipada de valores escalares de la configuración."""
from __future__ import annotations

from typing import Any, List, Optional

from ..utils.type_converters import (
    as_bool,
    as_double,
    as_signed,
    as_string,
    as_unsigned,
)
from .document_loader import DocumentLoader


class ScalarAccessors:
    """Getters por clave plana; cualquier falla devuelve ``None``."""

    def __init__(self, loader: DocumentLoader):
        self._loader = loader

    @property
    def loader(self) -> DocumentLoader:
        return self._loader

    def _lookup(self, key: str) -> Any:
        return self._loader.materialize().get(key)

    def get_string(self, key: str) -> Optional[str]:
        return as_string(self._lookup(key))

    def get_string_list(self, key: str) -> List[str]:
        """Devuelve los strings del array bajo ``key``.

        Los elementos que no son strings se omiten; si la clave falta o no es
        un array, el resultado es una lista vacía.
        """
        value = self._lookup(key)
        if not isinstance(value, tuple):
            return []
        return [item for item in value if isinstance(item, str)]

    def get_bool(self, key: str) -> Optional[bool]:
        return as_bool(self._lookup(key))

    def check_bool(self, key: str) -> bool:
        """Flag simple: ``False`` ante cualquier ausencia o tipo incorrecto."""
        return bool(self.get_bool(key))

    def get_uint(self, key: str, bits: int) -> Optional[int]:
        """Entero sin signo de ``bits`` bits; rechaza negativos y desbordes."""
        return as_unsigned(self._lookup(key), bits)

    def get_uint64(self, key: str) -> Optional[int]:
        return self.get_uint(key, 64)

    def get_uint32(self, key: str) -> Optional[int]:
        return self.get_uint(key, 32)

    def get_int32(self, key: str) -> Optional[int]:
        return as_signed(self._lookup(key), 32)

    def get_double(self, key: str) -> Optional[float]:
        return as_double(self._lookup(key))

"""Fachada que reúne todos los accesores de configuración."""
from __future__ import annotations

from typing import List

from .composite_accessors import CompositeAccessors
from .document_loader import DocumentLoader
from .list_cache import LowercasedListCache


class ConfigResolver(CompositeAccessors):
    """Punto de entrada único para consultar la configuración.

    Combina los getters escalares, los compuestos y el cache de listas en
    minúsculas sobre un mismo :class:`DocumentLoader`.
    """

    def __init__(self, loader: DocumentLoader, *, logger=None):
        super().__init__(loader, logger=logger)
        self._lowercased_lists = LowercasedListCache(self.get_string_list)

    def get_string_list_lower(self, key: str) -> List[str]:
        """Lista de strings bajo ``key`` en minúsculas ASCII, memoizada por clave."""
        return self._lowercased_lists.get(key)

"""Proveedores de las instancias compartidas por todo el proceso."""
from __future__ import annotations

import threading
from functools import lru_cache
from typing import Optional

from .clients.environment_source import EnvironmentSource
from .core.config import get_settings
from .services.document_loader import DocumentLoader
from .services.resolver import ConfigResolver

_resolver: Optional[ConfigResolver] = None
_resolver_lock = threading.Lock()


@lru_cache
def get_environment_source() -> EnvironmentSource:
    """Proporciona la fuente de valores basada en el entorno del proceso."""
    return EnvironmentSource()


def get_resolver() -> ConfigResolver:
    """Proporciona el resolvedor compartido por todos los llamadores.

    Se crea una única vez por proceso, con doble verificación bajo lock.
    """
    global _resolver
    if _resolver is None:
        with _resolver_lock:
            if _resolver is None:
                loader = DocumentLoader(
                    get_environment_source(),
                    variable_name=get_settings().variable_name,
                )
                _resolver = ConfigResolver(loader)
    return _resolver


def get_document_loader() -> DocumentLoader:
    """Proporciona el cargador del documento usado por el resolvedor compartido."""
    return get_resolver().loader


def reset_dependencies() -> None:
    """Descarta las instancias compartidas; pensado para el teardown de tests."""
    global _resolver
    with _resolver_lock:
        _resolver = None
    get_environment_source.cache_clear()
    get_settings.cache_clear()

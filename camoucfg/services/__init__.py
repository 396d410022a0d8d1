"""Servicios de carga y consulta de la configuración."""
from .composite_accessors import CompositeAccessors
from .document import MISSING, ConfigDocument, parse_document
from .document_loader import DocumentLoader
from .list_cache import LowercasedListCache
from .resolver import ConfigResolver
from .scalar_accessors import ScalarAccessors

__all__ = [
    "MISSING",
    "CompositeAccessors",
    "ConfigDocument",
    "ConfigResolver",
    "DocumentLoader",
    "LowercasedListCache",
    "ScalarAccessors",
    "parse_document",
]

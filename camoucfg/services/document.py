"""Documento de configuración inmutable y su parser."""
from __future__ import annotations

import json
from types import MappingProxyType
from typing import Any, Iterable, Iterator, List, Mapping, Tuple

from ..exceptions import InvalidConfigDocumentError

EMPTY_DOCUMENT_TEXT = "{}"


class _Missing:
    """Centinela para claves ausentes; distinto de un ``null`` JSON."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


def _freeze(value: Any) -> Any:
    if isinstance(value, list):
        return tuple(_freeze(item) for item in value)
    return value


def _freeze_object(pairs: List[Tuple[str, Any]]) -> Mapping[str, Any]:
    obj: dict = {}
    for key, value in pairs:
        # La primera aparición de una clave duplicada es la que vale
        if key not in obj:
            obj[key] = _freeze(value)
    return MappingProxyType(obj)


def _reject_constant(name: str) -> Any:
    raise InvalidConfigDocumentError(f"constante JSON no estándar: {name}")


def parse_document(text: str) -> Mapping[str, Any]:
    """Parsea el texto de configuración a un árbol de solo lectura.

    Args:
        text: JSON cuya raíz debe ser un objeto

    Returns:
        Mapeo inmutable con objetos como ``MappingProxyType`` y arrays como tuplas

    Raises:
        InvalidConfigDocumentError: Si el texto no es UTF-8 válido, el JSON es
            inválido o la raíz no es un objeto
    """
    try:
        text.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise InvalidConfigDocumentError(
            f"el texto no es UTF-8 válido: {exc.reason}", source_length=len(text)
        ) from exc

    try:
        root = json.loads(
            text,
            object_pairs_hook=_freeze_object,
            parse_constant=_reject_constant,
        )
    except InvalidConfigDocumentError:
        raise
    except (ValueError, RecursionError) as exc:
        raise InvalidConfigDocumentError(str(exc), source_length=len(text)) from exc

    if not isinstance(root, Mapping):
        raise InvalidConfigDocumentError(
            f"la raíz debe ser un objeto, recibido: {type(root).__name__}",
            source_length=len(text),
        )
    return root


class ConfigDocument:
    """Árbol JSON parseado una única vez; nunca se modifica."""

    def __init__(self, root: Mapping[str, Any]):
        self._root = root

    @classmethod
    def empty(cls) -> "ConfigDocument":
        return cls(parse_document(EMPTY_DOCUMENT_TEXT))

    @property
    def root(self) -> Mapping[str, Any]:
        return self._root

    def get(self, key: str) -> Any:
        """Devuelve el valor bajo ``key`` en la raíz, o ``MISSING``."""
        return self._root.get(key, MISSING)

    def get_nested(self, domain: str, key: str) -> Any:
        """Busca ``key`` dentro del objeto ``domain`` de la raíz.

        Cualquier salto fallido (dominio ausente, dominio que no es objeto,
        clave ausente) devuelve ``MISSING``.
        """
        domain_value = self.get(domain)
        if not isinstance(domain_value, Mapping):
            return MISSING
        return domain_value.get(key, MISSING)

    def keys(self) -> Iterable[str]:
        return self._root.keys()

    def __contains__(self, key: object) -> bool:
        return key in self._root

    def __iter__(self) -> Iterator[str]:
        return iter(self._root)

    def __len__(self) -> int:
        return len(self._root)

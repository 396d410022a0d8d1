"""Fuente de valores externos basada en variables de entorno."""
from __future__ import annotations

import os
from typing import Mapping, Optional, Protocol


class ValueSource(Protocol):
    """Cualquier objeto capaz de resolver un nombre a un string o ``None``."""

    def get(self, name: str) -> Optional[str]:
        ...


class EnvironmentSource:
    """Lee valores desde el entorno del proceso."""

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        """Inicializa la fuente.

        Args:
            environ: Mapeo a consultar; por defecto ``os.environ``
        """
        self._environ = os.environ if environ is None else environ

    def get(self, name: str) -> Optional[str]:
        """Obtiene el valor de una variable de entorno.

        Args:
            name: Nombre de la variable

        Returns:
            Valor como string (UTF-8 ya decodificado) o None si no existe
        """
        value = self._environ.get(name)
        if value is None:
            return None
        return str(value)

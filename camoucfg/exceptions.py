"""Excepciones propias del resolvedor de configuración."""
from __future__ import annotations


class CamouConfigError(Exception):
    """Base para todos los errores del paquete."""


class InvalidConfigDocumentError(CamouConfigError):
    """El texto de configuración no es un objeto JSON válido.

    Nunca llega a los llamadores: el cargador la captura, registra un
    diagnóstico y continúa con un documento vacío.
    """

    def __init__(self, message: str, *, source_length: int = 0) -> None:
        super().__init__(message)
        self.source_length = source_length

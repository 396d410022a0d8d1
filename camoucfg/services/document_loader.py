"""Carga única y thread-safe del documento de configuración."""
from __future__ import annotations

import threading
from typing import List, Optional

from ..clients.environment_source import ValueSource
from ..core.config import get_settings
from ..core.logging import get_logger
from ..exceptions import InvalidConfigDocumentError
from .document import EMPTY_DOCUMENT_TEXT, ConfigDocument, parse_document


class DocumentLoader:
    """Materializa el documento de configuración exactamente una vez."""

    def __init__(
        self,
        source: ValueSource,
        variable_name: Optional[str] = None,
        *,
        logger=None,
    ):
        """Inicializa el cargador.

        Args:
            source: Fuente de valores externos (entorno o mock)
            variable_name: Nombre base de la variable; por defecto el de settings
            logger: Logger para diagnósticos; por defecto "camoucfg.document_loader"
        """
        self._source = source
        self._variable_name = variable_name or get_settings().variable_name
        self._logger = logger or get_logger("document_loader")
        self._lock = threading.Lock()
        self._document: Optional[ConfigDocument] = None

    @property
    def variable_name(self) -> str:
        return self._variable_name

    @property
    def is_materialized(self) -> bool:
        return self._document is not None

    def materialize(self) -> ConfigDocument:
        """Devuelve el documento, cargándolo en la primera llamada.

        Los llamadores concurrentes esperan a que termine la primera carga y
        reciben la misma instancia.
        """
        document = self._document
        if document is None:
            with self._lock:
                if self._document is None:
                    self._document = self._load()
                document = self._document
        return document

    def read_raw(self) -> str:
        """Obtiene el texto JSON crudo desde la fuente.

        Concatena ``<NOMBRE>_1``, ``<NOMBRE>_2``... hasta el primer índice
        ausente; si no hay fragmentos usa ``<NOMBRE>``, y si tampoco existe,
        un objeto vacío.
        """
        parts: List[str] = []
        index = 1
        while True:
            partial = self._source.get(f"{self._variable_name}_{index}")
            if partial is None:
                break
            parts.append(partial)
            index += 1

        text = "".join(parts)
        if not text:
            text = self._source.get(self._variable_name) or ""
        return text or EMPTY_DOCUMENT_TEXT

    def _load(self) -> ConfigDocument:
        text = self.read_raw()
        try:
            return ConfigDocument(parse_document(text))
        except InvalidConfigDocumentError as exc:
            self._logger.error(
                f"JSON inválido en {self._variable_name}, se usa configuración vacía",
                extra={"error": str(exc), "length": exc.source_length},
            )
            return ConfigDocument.empty()

"""Configuración global para tests."""
import json
from typing import Any, Dict, List, Tuple

import pytest

from camoucfg.clients.mock_environment_source import MockEnvironmentSource
from camoucfg.dependencies import reset_dependencies
from camoucfg.services.document_loader import DocumentLoader
from camoucfg.services.resolver import ConfigResolver

VARIABLE = "CAMOU_CONFIG"


class _RecordingLogger:
    def __init__(self):
        self.records: List[Tuple[str, str, Dict[str, Any]]] = []

    def _record(self, level, event, **kwargs):
        self.records.append((level, event, kwargs))

    def debug(self, event, **kwargs):
        self._record("debug", event, **kwargs)

    def info(self, event, **kwargs):
        self._record("info", event, **kwargs)

    def warning(self, event, **kwargs):
        self._record("warning", event, **kwargs)

    def error(self, event, **kwargs):
        self._record("error", event, **kwargs)


@pytest.fixture
def recording_logger():
    return _RecordingLogger()


@pytest.fixture
def make_resolver(recording_logger):
    """Fábrica de resolvedores sobre un documento en memoria."""

    def _make(document: Any) -> ConfigResolver:
        text = document if isinstance(document, str) else json.dumps(document)
        source = MockEnvironmentSource({VARIABLE: text})
        loader = DocumentLoader(source, variable_name=VARIABLE, logger=recording_logger)
        return ConfigResolver(loader, logger=recording_logger)

    return _make


@pytest.fixture(autouse=True)
def _isolated_dependencies(monkeypatch):
    for name in ("CAMOUCFG_VARIABLE", "CAMOUCFG_LOG_LEVEL", VARIABLE):
        monkeypatch.delenv(name, raising=False)
    for index in range(1, 4):
        monkeypatch.delenv(f"{VARIABLE}_{index}", raising=False)
    reset_dependencies()
    yield
    reset_dependencies()

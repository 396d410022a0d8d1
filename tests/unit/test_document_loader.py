"""Tests unitarios para la carga del documento de configuración."""
import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from camoucfg.clients.mock_environment_source import MockEnvironmentSource
from camoucfg.exceptions import InvalidConfigDocumentError
from camoucfg.services.document import MISSING, ConfigDocument, parse_document
from camoucfg.services.document_loader import DocumentLoader

VARIABLE = "CAMOU_CONFIG"


def _loader(values, logger):
    return DocumentLoader(MockEnvironmentSource(values), variable_name=VARIABLE, logger=logger)


def test_un_solo_fragmento_se_usa_tal_cual(recording_logger):
    loader = _loader({"CAMOU_CONFIG_1": '{"a":1}'}, recording_logger)

    document = loader.materialize()

    assert document.get("a") == 1
    assert loader.read_raw() == '{"a":1}'


def test_fragmentos_se_concatenan_en_orden(recording_logger):
    source = MockEnvironmentSource.chunked(VARIABLE, '{"alpha": "beta", "n": 42}', size=5)
    loader = DocumentLoader(source, variable_name=VARIABLE, logger=recording_logger)

    document = loader.materialize()

    assert document.get("alpha") == "beta"
    assert document.get("n") == 42


def test_fragmentos_tienen_prioridad_sobre_variable_unica(recording_logger):
    loader = _loader(
        {"CAMOU_CONFIG": '{"origen": "unica"}', "CAMOU_CONFIG_1": '{"origen": "fragmentos"}'},
        recording_logger,
    )

    assert loader.materialize().get("origen") == "fragmentos"


def test_sondeo_se_detiene_en_el_primer_indice_ausente(recording_logger):
    source = MockEnvironmentSource(
        {"CAMOU_CONFIG_1": '{"a":', "CAMOU_CONFIG_2": "1}", "CAMOU_CONFIG_4": "basura"}
    )
    loader = DocumentLoader(source, variable_name=VARIABLE, logger=recording_logger)

    assert loader.materialize().get("a") == 1
    assert source.calls == ["CAMOU_CONFIG_1", "CAMOU_CONFIG_2", "CAMOU_CONFIG_3"]


def test_sin_fragmentos_usa_variable_unica(recording_logger):
    loader = _loader({"CAMOU_CONFIG": '{"b": true}'}, recording_logger)

    assert loader.materialize().get("b") is True


def test_sin_entrada_el_documento_es_vacio(recording_logger):
    loader = _loader({}, recording_logger)

    document = loader.materialize()

    assert len(document) == 0
    assert loader.read_raw() == "{}"
    assert recording_logger.records == []


def test_variable_vacia_equivale_a_ausente(recording_logger):
    loader = _loader({"CAMOU_CONFIG": ""}, recording_logger)

    assert len(loader.materialize()) == 0
    assert recording_logger.records == []


@pytest.mark.parametrize("text", ["{no es json", "[1, 2, 3]", '"texto"', '{"x": NaN}'])
def test_json_invalido_degrada_a_vacio_y_registra_un_error(recording_logger, text):
    """Verifica que un documento inválido nunca se propaga al llamador."""
    loader = _loader({"CAMOU_CONFIG": text}, recording_logger)

    document = loader.materialize()
    loader.materialize()

    assert len(document) == 0
    assert [record[0] for record in recording_logger.records] == ["error"]


def test_materialize_es_idempotente_entre_hilos(recording_logger):
    """Verifica que n hilos concurrentes comparten un único parseo."""
    source = MockEnvironmentSource({"CAMOU_CONFIG": '{"a": 1}'})
    loader = DocumentLoader(source, variable_name=VARIABLE, logger=recording_logger)
    workers = 16
    barrier = threading.Barrier(workers)

    def _materialize():
        barrier.wait()
        return loader.materialize()

    with ThreadPoolExecutor(max_workers=workers) as executor:
        documents = list(executor.map(lambda _: _materialize(), range(workers)))

    assert all(document is documents[0] for document in documents)
    assert source.calls == ["CAMOU_CONFIG_1", "CAMOU_CONFIG"]
    assert loader.is_materialized


def test_documento_es_de_solo_lectura():
    root = parse_document('{"obj": {"k": 1}, "arr": [1, [2, 3]]}')

    with pytest.raises(TypeError):
        root["nuevo"] = 1
    with pytest.raises(TypeError):
        root["obj"]["k"] = 2
    assert root["arr"] == (1, (2, 3))


def test_claves_duplicadas_conserva_la_primera():
    root = parse_document('{"a": 1, "a": 2}')

    assert root["a"] == 1


def test_parse_document_rechaza_raiz_que_no_es_objeto():
    with pytest.raises(InvalidConfigDocumentError):
        parse_document("[]")


def test_get_nested_distingue_null_de_ausente():
    document = ConfigDocument(parse_document('{"d": {"nulo": null}, "plano": 1}'))

    assert document.get_nested("d", "nulo") is None
    assert document.get_nested("d", "otro") is MISSING
    assert document.get_nested("plano", "x") is MISSING
    assert document.get_nested("falta", "x") is MISSING


def test_texto_con_bytes_no_utf8_degrada_a_vacio(recording_logger):
    """Verifica que un byte inválido decodificado con surrogateescape no se acepta."""
    loader = _loader({"CAMOU_CONFIG": '{"a": "\udcff"}'}, recording_logger)

    document = loader.materialize()

    assert len(document) == 0
    assert [record[0] for record in recording_logger.records] == ["error"]


def test_parse_document_rechaza_surrogates_sueltos():
    with pytest.raises(InvalidConfigDocumentError):
        parse_document('{"a": "\udcff"}')

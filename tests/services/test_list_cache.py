"""Tests del cache de listas en minúsculas."""
import threading
import time
from concurrent.futures import ThreadPoolExecutor

from camoucfg.services.list_cache import LowercasedListCache


class _CountingFetch:
    def __init__(self, values, delay=0.0):
        self._values = values
        self._delay = delay
        self._lock = threading.Lock()
        self.calls = 0

    def __call__(self, key):
        with self._lock:
            self.calls += 1
        time.sleep(self._delay)
        return list(self._values.get(key, []))


def test_pasa_a_minusculas_solo_ascii():
    cache = LowercasedListCache(_CountingFetch({"fuentes": ["Arial", "MS Gothic", "ÉCOLE"]}))

    assert cache.get("fuentes") == ["arial", "ms gothic", "École"]


def test_calcula_una_sola_vez_por_clave():
    fetch = _CountingFetch({"fuentes": ["Arial"]})
    cache = LowercasedListCache(fetch)

    cache.get("fuentes")
    cache.get("fuentes")
    cache.get("otra")

    assert fetch.calls == 2
    assert "fuentes" in cache
    assert len(cache) == 2


def test_devuelve_copias():
    cache = LowercasedListCache(_CountingFetch({"fuentes": ["Arial"]}))

    first = cache.get("fuentes")
    first.append("mutada")

    assert cache.get("fuentes") == ["arial"]


def test_clave_ausente_cachea_lista_vacia():
    fetch = _CountingFetch({})
    cache = LowercasedListCache(fetch)

    assert cache.get("falta") == []
    assert cache.get("falta") == []
    assert fetch.calls == 1


def test_busquedas_concurrentes_calculan_una_vez():
    """Verifica que lecturas concurrentes de una clave nueva comparten un único cálculo."""
    fetch = _CountingFetch({"fuentes": ["Arial", "Verdana"]}, delay=0.05)
    cache = LowercasedListCache(fetch)
    workers = 8
    barrier = threading.Barrier(workers)

    def _get(_):
        barrier.wait()
        return cache.get("fuentes")

    with ThreadPoolExecutor(max_workers=workers) as executor:
        results = list(executor.map(_get, range(workers)))

    assert all(result == ["arial", "verdana"] for result in results)
    assert fetch.calls == 1


class _FailingFirstFetch:
    """El primer cálculo falla tras una espera; los siguientes devuelven valores distintos."""

    def __init__(self):
        self._lock = threading.Lock()
        self.started = threading.Event()
        self.calls = 0

    def __call__(self, key):
        with self._lock:
            self.calls += 1
            call = self.calls
        if call == 1:
            self.started.set()
            time.sleep(0.2)
            raise RuntimeError("fallo transitorio")
        return [f"Valor{call}"]


def test_tras_fallo_del_primer_calculo_gana_la_primera_insercion():
    """Verifica que los hilos en espera recalculan y todos ven la misma entrada."""
    fetch = _FailingFirstFetch()
    cache = LowercasedListCache(fetch)
    results = {}
    errors = []

    def _owner():
        try:
            cache.get("fuentes")
        except RuntimeError as exc:
            errors.append(exc)

    def _waiter(name):
        results[name] = cache.get("fuentes")

    owner = threading.Thread(target=_owner)
    owner.start()
    assert fetch.started.wait(timeout=5)
    waiters = [threading.Thread(target=_waiter, args=(name,)) for name in ("b", "c")]
    for waiter in waiters:
        waiter.start()
    for thread in [owner, *waiters]:
        thread.join(timeout=10)

    assert len(errors) == 1
    assert results["b"] == results["c"]
    assert results["b"] in (["valor2"], ["valor3"])
    assert cache.get("fuentes") == results["b"]
    assert len(cache) == 1

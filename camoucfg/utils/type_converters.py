"""Conversores de tipos para valores JSON de la configuración.

Todos devuelven ``None`` cuando el valor no tiene el tipo JSON esperado o no
entra en el rango del tipo destino; nunca truncan ni lanzan excepciones.
"""
from __future__ import annotations

import string
import struct
from enum import Enum
from functools import partial
from typing import Any, Callable, Dict, Optional, Tuple

INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1
INT64_MIN = -(2 ** 63)
UINT32_MAX = 2 ** 32 - 1
UINT64_MAX = 2 ** 64 - 1
MAX_EXACT_DOUBLE_INT = 2 ** 53

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


class ScalarType(str, Enum):
    """Tipos escalares soportados como destino de una conversión."""

    BOOL = "bool"
    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    UINT8 = "uint8"
    UINT16 = "uint16"
    UINT32 = "uint32"
    UINT64 = "uint64"
    FLOAT = "float"
    DOUBLE = "double"
    STRING = "string"


def signed_bounds(bits: int) -> Tuple[int, int]:
    return -(1 << (bits - 1)), (1 << (bits - 1)) - 1


def is_json_integer(value: Any) -> bool:
    """Indica si el valor es un entero JSON representable en 64 bits.

    ``bool`` es subclase de ``int`` en Python pero en JSON es otro tipo.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return INT64_MIN <= value <= UINT64_MAX


def as_bool(value: Any) -> Optional[bool]:
    """Acepta solo booleanos JSON; sin coerción desde números ni strings."""
    if isinstance(value, bool):
        return value
    return None


def as_string(value: Any) -> Optional[str]:
    if isinstance(value, str):
        return value
    return None


def as_signed(value: Any, bits: int = 64) -> Optional[int]:
    """Convierte un entero JSON a entero con signo de ``bits`` bits.

    Args:
        value: Valor JSON
        bits: Ancho del tipo destino

    Returns:
        El entero si entra en el rango, None en caso contrario
    """
    if not is_json_integer(value):
        return None
    low, high = signed_bounds(bits)
    if not low <= value <= high:
        return None
    return int(value)


def as_unsigned(value: Any, bits: int = 64) -> Optional[int]:
    """Convierte un entero JSON no negativo a entero sin signo de ``bits`` bits.

    Args:
        value: Valor JSON
        bits: Ancho del tipo destino

    Returns:
        El entero si es no negativo y entra en el rango, None en caso contrario
    """
    if not is_json_integer(value) or value < 0:
        return None
    if value > (1 << bits) - 1:
        return None
    return int(value)


def as_double(value: Any) -> Optional[float]:
    """Lee cualquier número JSON como double, ensanchando enteros."""
    if isinstance(value, float):
        return value
    if is_json_integer(value):
        return float(value)
    return None


def as_single(value: Any) -> Optional[float]:
    """Lee un número JSON y lo redondea a precisión simple IEEE-754."""
    number = as_double(value)
    if number is None:
        return None
    try:
        return struct.unpack("<f", struct.pack("<f", number))[0]
    except OverflowError:
        return None


def ascii_lower(text: str) -> str:
    """Pasa a minúsculas solo las letras ASCII; el resto queda intacto."""
    return text.translate(_ASCII_LOWER)


_CONVERTERS: Dict[ScalarType, Callable[[Any], Any]] = {
    ScalarType.BOOL: as_bool,
    ScalarType.INT8: partial(as_signed, bits=8),
    ScalarType.INT16: partial(as_signed, bits=16),
    ScalarType.INT32: partial(as_signed, bits=32),
    ScalarType.INT64: partial(as_signed, bits=64),
    ScalarType.UINT8: partial(as_unsigned, bits=8),
    ScalarType.UINT16: partial(as_unsigned, bits=16),
    ScalarType.UINT32: partial(as_unsigned, bits=32),
    ScalarType.UINT64: partial(as_unsigned, bits=64),
    ScalarType.FLOAT: as_single,
    ScalarType.DOUBLE: as_double,
    ScalarType.STRING: as_string,
}


def coerce_scalar(value: Any, target: Any) -> Optional[Any]:
    """Convierte ``value`` al tipo escalar ``target``.

    Args:
        value: Valor JSON ya extraído del documento
        target: Un :class:`ScalarType` o su nombre ("int32", "bool", ...)

    Returns:
        Valor convertido, o None si el tipo destino no está soportado o la
        conversión falla
    """
    try:
        scalar_type = ScalarType(target)
    except (ValueError, TypeError):
        return None
    return _CONVERTERS[scalar_type](value)

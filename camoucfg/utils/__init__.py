"""Utilidades comunes del paquete."""
from .locks import ReadWriteLock
from .type_converters import (
    ScalarType,
    as_bool,
    as_double,
    as_signed,
    as_single,
    as_string,
    as_unsigned,
    ascii_lower,
    coerce_scalar,
)

__all__ = [
    "ReadWriteLock",
    "ScalarType",
    "as_bool",
    "as_double",
    "as_signed",
    "as_single",
    "as_string",
    "as_unsigned",
    "ascii_lower",
    "coerce_scalar",
]

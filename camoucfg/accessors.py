"""Funciones de módulo sobre el resolvedor compartido del proceso."""
from __future__ import annotations

from typing import Any, List, Optional, Sequence, TypeVar

from .dependencies import get_resolver
from .dto.geometry import Int32Rect, Rect
from .dto.speech import Voice
from .dto.webgl import GLParam, ShaderPrecisionFormat
from .utils.type_converters import ScalarType

T = TypeVar("T")


def get_string(key: str) -> Optional[str]:
    return get_resolver().get_string(key)


def get_string_list(key: str) -> List[str]:
    return get_resolver().get_string_list(key)


def get_string_list_lower(key: str) -> List[str]:
    return get_resolver().get_string_list_lower(key)


def get_bool(key: str) -> Optional[bool]:
    return get_resolver().get_bool(key)


def check_bool(key: str) -> bool:
    return get_resolver().check_bool(key)


def get_uint64(key: str) -> Optional[int]:
    return get_resolver().get_uint64(key)


def get_uint32(key: str) -> Optional[int]:
    return get_resolver().get_uint32(key)


def get_int32(key: str) -> Optional[int]:
    return get_resolver().get_int32(key)


def get_double(key: str) -> Optional[float]:
    return get_resolver().get_double(key)


def get_rect(left: str, top: str, width: str, height: str) -> Optional[Rect]:
    return get_resolver().get_rect(left, top, width, height)


def get_int32_rect(left: str, top: str, width: str, height: str) -> Optional[Int32Rect]:
    return get_resolver().get_int32_rect(left, top, width, height)


def get_nested(domain: str, key: str, default: Any = None) -> Any:
    return get_resolver().get_nested(domain, key, default)


def get_attribute(name: str, scalar_type: ScalarType, webgl2: bool = False) -> Optional[Any]:
    return get_resolver().get_attribute(name, scalar_type, webgl2)


def gl_param(pname: int, webgl2: bool = False) -> Optional[GLParam]:
    return get_resolver().gl_param(pname, webgl2)


def param_gl(pname: int, default: T, scalar_type: ScalarType, webgl2: bool = False) -> T:
    return get_resolver().param_gl(pname, default, scalar_type, webgl2)


def param_gl_vector(pname: int, default: Sequence[T], scalar_type: ScalarType, webgl2: bool = False) -> List[T]:
    return get_resolver().param_gl_vector(pname, default, scalar_type, webgl2)


def shader_precision_format(
    shader_type: int, precision_type: int, webgl2: bool = False
) -> Optional[ShaderPrecisionFormat]:
    return get_resolver().shader_precision_format(shader_type, precision_type, webgl2)


def voices() -> Optional[List[Voice]]:
    return get_resolver().voices()

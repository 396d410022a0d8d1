"""Resolvedor de configuración en tiempo de ejecución.

Lee un documento JSON desde ``CAMOU_CONFIG`` (o ``CAMOU_CONFIG_1..N``), lo
parsea una sola vez por proceso y expone getters tipados que nunca lanzan
excepciones: ante cualquier falla devuelven ``None`` o el valor por defecto.
"""
from .accessors import (
    check_bool,
    get_attribute,
    get_bool,
    get_double,
    get_int32,
    get_int32_rect,
    get_nested,
    get_rect,
    get_string,
    get_string_list,
    get_string_list_lower,
    get_uint32,
    get_uint64,
    gl_param,
    param_gl,
    param_gl_vector,
    shader_precision_format,
    voices,
)
from .dependencies import get_resolver, reset_dependencies
from .dto.geometry import Int32Rect, Rect
from .dto.speech import Voice
from .dto.webgl import GLParam, GLParamKind, ShaderPrecisionFormat
from .services.resolver import ConfigResolver
from .utils.type_converters import ScalarType

__all__ = [
    "ConfigResolver",
    "GLParam",
    "GLParamKind",
    "Int32Rect",
    "Rect",
    "ScalarType",
    "ShaderPrecisionFormat",
    "Voice",
    "check_bool",
    "get_attribute",
    "get_bool",
    "get_double",
    "get_int32",
    "get_int32_rect",
    "get_nested",
    "get_rect",
    "get_resolver",
    "get_string",
    "get_string_list",
    "get_string_list_lower",
    "get_uint32",
    "get_uint64",
    "gl_param",
    "param_gl",
    "param_gl_vector",
    "reset_dependencies",
    "shader_precision_format",
    "voices",
]

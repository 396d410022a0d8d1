from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

from ..utils.type_converters import INT32_MAX, INT32_MIN

CONTEXT_ATTRIBUTES_DOMAIN = "webGl:contextAttributes"
CONTEXT_ATTRIBUTES_DOMAIN_V2 = "webGl2:contextAttributes"
PARAMETERS_DOMAIN = "webGl:parameters"
PARAMETERS_DOMAIN_V2 = "webGl2:parameters"
SHADER_PRECISION_DOMAIN = "webGl:shaderPrecisionFormats"
SHADER_PRECISION_DOMAIN_V2 = "webGl2:shaderPrecisionFormats"


def context_attributes_domain(webgl2: bool) -> str:
    return CONTEXT_ATTRIBUTES_DOMAIN_V2 if webgl2 else CONTEXT_ATTRIBUTES_DOMAIN


def parameters_domain(webgl2: bool) -> str:
    return PARAMETERS_DOMAIN_V2 if webgl2 else PARAMETERS_DOMAIN


def shader_precision_domain(webgl2: bool) -> str:
    return SHADER_PRECISION_DOMAIN_V2 if webgl2 else SHADER_PRECISION_DOMAIN


class GLParamKind(str, Enum):
    """Variantes posibles de un parámetro GL de tipo desconocido."""

    NULL = "null"
    STRING = "string"
    DOUBLE = "double"
    INT64 = "int64"
    BOOL = "bool"


@dataclass(frozen=True)
class GLParam:
    """Valor etiquetado de un parámetro GL."""

    kind: GLParamKind
    value: Union[str, float, int, bool, None] = None

    @property
    def is_null(self) -> bool:
        return self.kind is GLParamKind.NULL


class ShaderPrecisionFormat(BaseModel):
    """Descriptor de precisión de shader (rango mínimo, máximo y precisión)."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    range_min: int = Field(alias="rangeMin", ge=INT32_MIN, le=INT32_MAX)
    range_max: int = Field(alias="rangeMax", ge=INT32_MIN, le=INT32_MAX)
    precision: int = Field(ge=INT32_MIN, le=INT32_MAX)

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.range_min, self.range_max, self.precision)

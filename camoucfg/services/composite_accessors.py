"""Lectura de valores compuestos: rectángulos, parámetros WebGL y voces."""
from __future__ import annotations

from typing import Any, List, Mapping, Optional, Sequence, TypeVar

from ..core.logging import get_logger
from ..dto.geometry import Int32Rect, Rect
from ..dto.speech import Voice
from ..dto.webgl import (
    GLParam,
    GLParamKind,
    ShaderPrecisionFormat,
    context_attributes_domain,
    parameters_domain,
    shader_precision_domain,
)
from ..utils.type_converters import (
    INT32_MAX,
    MAX_EXACT_DOUBLE_INT,
    ScalarType,
    as_bool,
    as_double,
    as_signed,
    as_string,
    coerce_scalar,
)
from .document import MISSING
from .document_loader import DocumentLoader
from .scalar_accessors import ScalarAccessors

T = TypeVar("T")

VOICES_KEY = "voices"


class CompositeAccessors(ScalarAccessors):
    """Arma estructuras a partir de varias claves o de objetos anidados."""

    def __init__(self, loader: DocumentLoader, *, logger=None):
        super().__init__(loader)
        self._logger = logger or get_logger("composite_accessors")

    def _nested(self, domain: str, key: str) -> Any:
        return self._loader.materialize().get_nested(domain, key)

    def get_rect(self, left: str, top: str, width: str, height: str) -> Optional[Rect]:
        """Lee un rectángulo desde cuatro claves sin signo de 32 bits.

        ``left`` y ``top`` valen 0 si faltan. ``width`` y ``height`` son
        obligatorios: si solo uno está presente se registra un diagnóstico y
        no se devuelve nada; si faltan ambos, se omite en silencio.

        Args:
            left: Clave del borde izquierdo
            top: Clave del borde superior
            width: Clave del ancho
            height: Clave del alto

        Returns:
            Rect o None
        """
        left_value = self.get_uint32(left)
        top_value = self.get_uint32(top)
        width_value = self.get_uint32(width)
        height_value = self.get_uint32(height)

        if width_value is None or height_value is None:
            if (width_value is None) != (height_value is None):
                self._logger.warning(
                    "Se deben proporcionar ancho y alto del rectángulo; se usa el comportamiento por defecto",
                    extra={"width": width, "height": height},
                )
            return None

        return Rect(
            left=left_value or 0,
            top=top_value or 0,
            width=width_value,
            height=height_value,
        )

    def get_int32_rect(self, left: str, top: str, width: str, height: str) -> Optional[Int32Rect]:
        """Como :meth:`get_rect`, pero descarta el resultado si algún campo no entra en ``int32``."""
        rect = self.get_rect(left, top, width, height)
        if rect is None:
            return None
        if any(field > INT32_MAX for field in rect.as_tuple()):
            return None
        return Int32Rect(**rect.model_dump())

    def get_nested(self, domain: str, key: str, default: Any = None) -> Any:
        """Valor crudo de ``key`` dentro del objeto ``domain``, o ``default``."""
        value = self._nested(domain, key)
        return default if value is MISSING else value

    def get_attribute(self, name: str, scalar_type: ScalarType, webgl2: bool = False) -> Optional[Any]:
        """Atributo de contexto WebGL convertido a ``scalar_type``."""
        return coerce_scalar(self._nested(context_attributes_domain(webgl2), name), scalar_type)

    def gl_param(self, pname: int, webgl2: bool = False) -> Optional[GLParam]:
        """Parámetro GL de tipo desconocido como valor etiquetado.

        Se prueba en orden: null, string, double, entero y booleano. Un número
        se lee como double salvo que sea un entero de 64 bits que el double no
        representa con exactitud.
        """
        value = self._nested(parameters_domain(webgl2), str(pname))
        if value is MISSING:
            return None
        if value is None:
            return GLParam(GLParamKind.NULL)

        text = as_string(value)
        if text is not None:
            return GLParam(GLParamKind.STRING, text)

        integer = as_signed(value, 64)
        number = as_double(value)
        if number is not None and (integer is None or abs(integer) <= MAX_EXACT_DOUBLE_INT):
            return GLParam(GLParamKind.DOUBLE, number)
        if integer is not None:
            return GLParam(GLParamKind.INT64, integer)

        flag = as_bool(value)
        if flag is not None:
            return GLParam(GLParamKind.BOOL, flag)
        return None

    def param_gl(self, pname: int, default: T, scalar_type: ScalarType, webgl2: bool = False) -> T:
        """Parámetro GL convertido a ``scalar_type``; ``default`` ante cualquier falla."""
        value = coerce_scalar(self._nested(parameters_domain(webgl2), str(pname)), scalar_type)
        return default if value is None else value

    def param_gl_vector(
        self,
        pname: int,
        default: Sequence[T],
        scalar_type: ScalarType,
        webgl2: bool = False,
    ) -> List[T]:
        """Parámetro GL de tipo array con todos sus elementos convertidos.

        Si el valor no es un array o cualquier elemento falla la conversión,
        se devuelve una copia de ``default``; nunca listas parciales.
        """
        value = self._nested(parameters_domain(webgl2), str(pname))
        if not isinstance(value, tuple):
            return list(default)

        converted = []
        for item in value:
            element = coerce_scalar(item, scalar_type)
            if element is None:
                return list(default)
            converted.append(element)
        return converted

    def shader_precision_format(
        self,
        shader_type: int,
        precision_type: int,
        webgl2: bool = False,
    ) -> Optional[ShaderPrecisionFormat]:
        """Descriptor ``{rangeMin, rangeMax, precision}`` bajo la clave ``"<shader>,<precision>"``."""
        value = self._nested(shader_precision_domain(webgl2), f"{shader_type},{precision_type}")
        if not isinstance(value, Mapping):
            return None

        range_min = as_signed(value.get("rangeMin", MISSING), 32)
        range_max = as_signed(value.get("rangeMax", MISSING), 32)
        precision = as_signed(value.get("precision", MISSING), 32)
        if range_min is None or range_max is None or precision is None:
            return None
        return ShaderPrecisionFormat(range_min=range_min, range_max=range_max, precision=precision)

    def voices(self) -> Optional[List[Voice]]:
        """Lista de voces de síntesis.

        Devuelve None si ``voices`` falta o no es un array. Las entradas mal
        formadas se omiten sin invalidar al resto.
        """
        value = self._loader.materialize().get(VOICES_KEY)
        if not isinstance(value, tuple):
            return None

        voices: List[Voice] = []
        for entry in value:
            voice = self._parse_voice(entry)
            if voice is not None:
                voices.append(voice)
        return voices

    @staticmethod
    def _parse_voice(entry: Any) -> Optional[Voice]:
        if not isinstance(entry, Mapping):
            return None

        lang = as_string(entry.get("lang", MISSING))
        name = as_string(entry.get("name", MISSING))
        voice_uri = as_string(entry.get("voiceUri", MISSING))
        is_default = as_bool(entry.get("isDefault", MISSING))
        is_local_service = as_bool(entry.get("isLocalService", MISSING))
        if None in (lang, name, voice_uri, is_default, is_local_service):
            return None

        return Voice(
            lang=lang,
            name=name,
            voice_uri=voice_uri,
            is_default=is_default,
            is_local_service=is_local_service,
        )

"""Rectángulos leídos desde la configuración."""
from __future__ import annotations

from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field

from ..utils.type_converters import INT32_MAX, UINT32_MAX


class Rect(BaseModel):
    """Rectángulo con coordenadas sin signo de 32 bits."""

    model_config = ConfigDict(frozen=True)

    left: int = Field(default=0, ge=0, le=UINT32_MAX)
    top: int = Field(default=0, ge=0, le=UINT32_MAX)
    width: int = Field(ge=0, le=UINT32_MAX)
    height: int = Field(ge=0, le=UINT32_MAX)

    def as_tuple(self) -> Tuple[int, int, int, int]:
        return (self.left, self.top, self.width, self.height)


class Int32Rect(Rect):
    """Variante cuyos cuatro campos entran en ``int32``."""

    left: int = Field(default=0, ge=0, le=INT32_MAX)
    top: int = Field(default=0, ge=0, le=INT32_MAX)
    width: int = Field(ge=0, le=INT32_MAX)
    height: int = Field(ge=0, le=INT32_MAX)

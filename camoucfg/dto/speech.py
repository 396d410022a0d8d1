"""DTOs de síntesis de voz."""
from __future__ import annotations

from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field


class Voice(BaseModel):
    """Voz disponible para síntesis, tal como aparece en ``voices``."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    lang: str
    name: str
    voice_uri: str = Field(alias="voiceUri")
    is_default: bool = Field(alias="isDefault")
    is_local_service: bool = Field(alias="isLocalService")

    def as_tuple(self) -> Tuple[str, str, str, bool, bool]:
        return (self.lang, self.name, self.voice_uri, self.is_default, self.is_local_service)

"""KR: 설정 엔티티 기반 모델. EN: Base model for settings entities."""

from __future__ import annotations

from typing import Sequence

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class EditorBaseModel(BaseModel):
    """Pydantic v2 기반 공통 모델."""

    model_config = ConfigDict(extra="ignore", validate_assignment=True)


__all__: Sequence[str] = ("EditorBaseModel", "Field")

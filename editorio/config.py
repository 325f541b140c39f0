"""파일 입출력 설정 모델(KR). File I/O configuration models (EN)."""

from __future__ import annotations

import codecs
from pathlib import Path
from typing import Any, Dict, Tuple

import yaml
from pydantic import field_validator

from .base import EditorBaseModel, Field

DEFAULT_TRY_ENCODINGS: Tuple[str, ...] = ("utf-8", "ascii", "latin-1", "mac-roman")
DEFAULT_DEPTH = 4
DEFAULT_MAX_FILES = 1000


class SnapOpenSettings(EditorBaseModel):
    """스냅오픈 기본값을 보관 · Store snap-open defaults."""

    paths: Tuple[str, ...] = Field(default_factory=tuple)
    default_depth: int = Field(default=DEFAULT_DEPTH, ge=0)
    max_files: int = Field(default=DEFAULT_MAX_FILES, gt=0)


class FileIOSettings(EditorBaseModel):
    """파일 열기/저장 설정 · Store file open/save settings."""

    try_encodings: Tuple[str, ...] = Field(default=DEFAULT_TRY_ENCODINGS)
    recent_limit: int | None = Field(default=None, gt=0)

    @field_validator("try_encodings")
    @classmethod
    def _known_codecs(cls, value: Tuple[str, ...]) -> Tuple[str, ...]:
        """코덱 이름을 검증 · Reject unknown codec names."""

        if not value:
            raise ValueError("try_encodings must not be empty")
        for name in value:
            try:
                codecs.lookup(name)
            except LookupError as exc:
                raise ValueError(f"unknown encoding: {name}") from exc
        return value


class EditorIOConfig(EditorBaseModel):
    """전체 설정을 표현 · Represent complete settings."""

    snapopen: SnapOpenSettings = Field(default_factory=SnapOpenSettings)
    file_io: FileIOSettings = Field(default_factory=FileIOSettings)

    @classmethod
    def from_file(cls, config_file: Path) -> "EditorIOConfig":
        """설정 파일에서 로드 · Load settings from config file."""

        data = (
            yaml.safe_load(config_file.read_text(encoding="utf-8"))
            if config_file.exists()
            else {}
        )
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError("configuration file must contain a mapping")
        return cls.model_validate(data)

    def to_dict(self) -> Dict[str, Any]:
        """사전을 반환 · Return dictionary representation."""

        return dict(self.model_dump())


__all__ = [
    "DEFAULT_DEPTH",
    "DEFAULT_MAX_FILES",
    "DEFAULT_TRY_ENCODINGS",
    "EditorIOConfig",
    "FileIOSettings",
    "SnapOpenSettings",
]

"""인코딩 감지 데이터 모델./Encoding detection data models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Encoding(str, Enum):
    """BOM으로 식별 가능한 인코딩./Encodings identifiable by a byte-order mark."""

    UTF_8 = "utf-8"
    UTF_16BE = "utf-16-be"
    UTF_16LE = "utf-16-le"
    UTF_32BE = "utf-32-be"
    UTF_32LE = "utf-32-le"

    @property
    def codec(self) -> str:
        """파이썬 코덱 이름./Python codec name."""

        return self.value


@dataclass(frozen=True, slots=True)
class EncodingResult:
    """바이트 버퍼 한 개에 대한 감지 결과./Detection outcome for one byte buffer."""

    encoding: Encoding | None = None
    bom: bytes | None = None
    is_binary: bool = False

    def __post_init__(self) -> None:
        if self.is_binary and (self.encoding is not None or self.bom is not None):
            raise ValueError("binary results carry neither encoding nor bom")

    @property
    def is_determined(self) -> bool:
        """바이트만으로 인코딩이 정해졌는지./Whether the bytes alone fixed an encoding."""

        return self.encoding is not None


__all__ = ["Encoding", "EncodingResult"]

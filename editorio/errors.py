"""파일 입출력 예외 정의(KR). File I/O exception definitions (EN)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(eq=False)
class EditorIOError(Exception):
    """파일 작업 오류를 표현 · Represent a failed file operation."""

    message: str
    operation: str | None = None

    def __str__(self) -> str:
        """사람 친화적 메시지를 생성 · Build human friendly message."""

        if self.operation:
            return f"[{self.operation}] {self.message}"
        return self.message


@dataclass(eq=False)
class EncodingConversionFailed(EditorIOError):
    """어떤 후보 인코딩으로도 변환 불가 · No candidate encoding converted the data."""

    tried: tuple[str, ...] = ()


class BinaryEncodingError(EditorIOError):
    """바이너리 파일의 인코딩 변경 시도 · Attempt to re-encode a binary file."""


__all__ = ["BinaryEncodingError", "EditorIOError", "EncodingConversionFailed"]

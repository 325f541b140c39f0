"""스캐너 전용 예외를 정의합니다./Define scanner specific exceptions."""

from __future__ import annotations


class ScanErrorBase(RuntimeError):
    """스캔 관련 오류 기본 클래스./Base class for scan errors."""


class InvalidPatternError(ScanErrorBase, ValueError):
    """필터 패턴을 정규식으로 컴파일할 수 없음./Filter pattern is not a valid regex."""

    def __init__(self, pattern: str, reason: str) -> None:
        super().__init__(f"invalid filter pattern {pattern!r}: {reason}")
        self.pattern = pattern
        self.reason = reason


__all__ = ["InvalidPatternError", "ScanErrorBase"]

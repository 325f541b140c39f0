"""스캐너 데이터 모델 정의./Define scanner data models."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Sequence

from .exceptions import InvalidPatternError

NEGATION_MARKER = "!"


@dataclass(frozen=True, slots=True)
class Pattern:
    """단일 필터 패턴./A single filter pattern.

    ``negate``가 참이면 패턴과 일치하지 않는 항목을 제외합니다.
    When ``negate`` is set, entries that do NOT match are excluded.
    """

    text: str
    negate: bool = False
    _regex: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        try:
            compiled = re.compile(self.text)
        except re.error as exc:
            raise InvalidPatternError(self.text, str(exc)) from exc
        object.__setattr__(self, "_regex", compiled)

    @classmethod
    def parse(cls, raw: str) -> "Pattern":
        """앞의 ``!`` 표식을 해석합니다./Parse the leading ``!`` marker."""

        if raw.startswith(NEGATION_MARKER):
            return cls(text=raw[len(NEGATION_MARKER):], negate=True)
        return cls(text=raw)

    def matches(self, name: str) -> bool:
        """정규식 검색 일치 여부./Return True when the regex is found in name."""

        return self._regex.search(name) is not None

    def excludes(self, name: str) -> bool:
        """이 패턴 하나가 항목을 제외하는지./Whether this pattern alone excludes name."""

        return self.matches(name) != self.negate

    def __str__(self) -> str:
        return f"{NEGATION_MARKER}{self.text}" if self.negate else self.text


def _parse_all(raw: Iterable[str | Pattern]) -> tuple[Pattern, ...]:
    return tuple(item if isinstance(item, Pattern) else Pattern.parse(str(item)) for item in raw)


@dataclass(frozen=True, slots=True)
class FilterSpec:
    """파일/폴더 제외 필터./File and folder exclusion filters."""

    file_patterns: tuple[Pattern, ...] = ()
    folder_patterns: tuple[Pattern, ...] = ()

    @classmethod
    def from_value(cls, value: Any = None) -> "FilterSpec":
        """경계에서 필터를 생성합니다./Build a filter from a loose boundary value.

        허용 형태/Accepted shapes:

        * ``None`` -> 빈 필터/empty filter
        * ``"pattern"`` -> 파일 패턴 하나/a single file pattern
        * ``["p1", "p2"]`` -> 파일 패턴 목록/a list of file patterns
        * ``{"files": [...], "folders": [...]}`` -> 둘 다/both lists
        """

        if value is None:
            return cls()
        if isinstance(value, FilterSpec):
            return value
        if isinstance(value, (str, Pattern)):
            return cls(file_patterns=_parse_all([value]))
        if isinstance(value, Mapping):
            unknown = set(value) - {"files", "folders"}
            if unknown:
                raise ValueError(f"unknown filter keys: {sorted(unknown)}")
            return cls(
                file_patterns=_parse_all(_as_list(value.get("files"))),
                folder_patterns=_parse_all(_as_list(value.get("folders"))),
            )
        if isinstance(value, Iterable):
            return cls(file_patterns=_parse_all(value))
        raise TypeError(f"unsupported filter value: {type(value).__name__}")

    @property
    def is_empty(self) -> bool:
        return not self.file_patterns and not self.folder_patterns


def _as_list(value: Any) -> list[str | Pattern]:
    if value is None:
        return []
    if isinstance(value, (str, Pattern)):
        return [value]
    return list(value)


@dataclass(frozen=True, slots=True)
class ScanRequest:
    """한 번의 스캔 요청./Parameters of a single scan."""

    roots: tuple[str, ...]
    filter: FilterSpec = field(default_factory=FilterSpec)
    max_depth: int = 4
    max_results: int = 1000

    def __post_init__(self) -> None:
        roots = self.roots
        if isinstance(roots, (str, os.PathLike)):
            roots = (roots,)
        object.__setattr__(self, "roots", tuple(os.fspath(root) for root in roots))
        if self.max_depth < 0:
            raise ValueError("max_depth must be >= 0")
        if self.max_results <= 0:
            raise ValueError("max_results must be > 0")


@dataclass(frozen=True, slots=True)
class PathInfo:
    """경로 메타데이터./Path metadata returned by a filesystem."""

    is_directory: bool
    mtime: float


@dataclass(frozen=True, slots=True)
class ScanError:
    """스캔 중 건너뛴 경로 정보./A path skipped during scanning."""

    path: str
    message: str


@dataclass(frozen=True, slots=True)
class ScanResult:
    """스캔 결과 목록./Ordered scan result."""

    files: tuple[str, ...]
    truncated: bool = False
    errors: tuple[ScanError, ...] = ()

    def __len__(self) -> int:
        return len(self.files)

    def to_payload(self) -> dict[str, object]:
        """JSON 직렬화용 딕트를 생성./Return dict for JSON serialisation."""

        payload: dict[str, object] = {"files": list(self.files), "truncated": self.truncated}
        if self.errors:
            payload["errors"] = [{"path": e.path, "message": e.message} for e in self.errors]
        return payload


def exclude(name: str, patterns: Sequence[Pattern]) -> bool:
    """패턴 중 하나라도 제외를 지시하면 참./True when any single pattern excludes name.

    모든 패턴이 서로 독립적으로 평가되며(논리합), 아무것도 걸리지 않으면 포함입니다.
    Patterns are evaluated independently (logical OR); none triggering means include.
    """

    return any(pattern.excludes(name) for pattern in patterns)


__all__ = [
    "FilterSpec",
    "NEGATION_MARKER",
    "PathInfo",
    "Pattern",
    "ScanError",
    "ScanRequest",
    "ScanResult",
    "exclude",
]

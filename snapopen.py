"""스냅오픈 파일 목록 단계를 제공합니다./Provide the snap-open file listing stage."""

from __future__ import annotations

import logging
import os
from typing import Any, Sequence, Union

from editorio.config import SnapOpenSettings
from scanner import FileSystem, FilterSpec, ScanRequest, ScanResult, scan

PathArg = Union[str, "os.PathLike[str]"]

logger = logging.getLogger(__name__)


def _as_paths(paths: PathArg | Sequence[PathArg] | None) -> list[str]:
    if paths is None:
        return []
    if isinstance(paths, (str, os.PathLike)):
        return [os.fspath(paths)]
    return [os.fspath(path) for path in paths]


def snap_open(
    paths: PathArg | Sequence[PathArg] | None = None,
    filter: Any = None,
    *,
    exclusive: bool = False,
    depth: int | None = None,
    settings: SnapOpenSettings | None = None,
    fs: FileSystem | None = None,
) -> ScanResult:
    """경로 목록에서 열 수 있는 파일을 찾습니다./List files that can be opened.

    ``exclusive``가 거짓이면 설정의 기본 경로가 뒤에 추가됩니다.
    ``filter``는 ``FilterSpec.from_value``가 받는 모든 형태를 허용합니다.
    Unless ``exclusive``, the configured default paths are appended after the
    given ones. ``filter`` accepts every shape ``FilterSpec.from_value`` does.
    """

    settings = settings or SnapOpenSettings()
    roots = _as_paths(paths)
    if not exclusive:
        roots.extend(settings.paths)
    request = ScanRequest(
        roots=tuple(roots),
        filter=FilterSpec.from_value(filter),
        max_depth=settings.default_depth if depth is None else depth,
        max_results=settings.max_files,
    )
    result = scan(request, fs=fs)
    if result.truncated:
        logger.warning(
            "%d files or more were found. Showing the first %d",
            settings.max_files,
            settings.max_files,
        )
    return result


__all__ = ["snap_open"]

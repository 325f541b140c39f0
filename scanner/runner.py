"""제한된 스캔 실행기./Bounded scan runner."""

from __future__ import annotations

import logging
from contextlib import closing

from .filesystem import FileSystem
from .models import ScanError, ScanRequest, ScanResult
from .walker import DirectoryWalker

__all__ = ["scan"]

logger = logging.getLogger(__name__)


def scan(request: ScanRequest, *, fs: FileSystem | None = None) -> ScanResult:
    """요청을 실행해 파일 목록을 만듭니다./Run the request and collect file paths.

    ``max_results``개를 모은 뒤 일치하는 파일이 하나 더 나오면 전체 순회를
    즉시 멈추고 ``truncated``를 설정합니다. 목록을 읽을 수 없는 디렉터리는
    빈 디렉터리로 취급합니다.
    Once ``max_results`` files are held and one more match turns up, the whole
    multi-root walk stops and ``truncated`` is set. Unlistable directories
    count as empty.
    """

    errors: list[ScanError] = []

    def _report(path: str, error: OSError) -> None:
        logger.warning("skipping unreadable path %s: %s", path, error)
        errors.append(ScanError(path=path, message=str(error)))

    walker = DirectoryWalker(request, fs=fs, report_error=_report)
    files: list[str] = []
    truncated = False
    with closing(walker.iter_files()) as paths:
        for path in paths:
            if len(files) >= request.max_results:
                truncated = True
                break
            files.append(path)
    logger.debug(
        "scanned %d root(s): %d file(s), truncated=%s",
        len(request.roots),
        len(files),
        truncated,
    )
    return ScanResult(files=tuple(files), truncated=truncated, errors=tuple(errors))

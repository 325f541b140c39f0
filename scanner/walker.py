"""디렉터리 순회 도우미./Directory walking helpers."""

from __future__ import annotations

import logging
import os
import re
from typing import Callable, Iterator

from .filesystem import FileSystem, LocalFileSystem
from .models import ScanRequest, exclude

ErrorReporter = Callable[[str, OSError], None]

_DOT_PREFIX = re.compile(r"^\.[/\\]")

logger = logging.getLogger(__name__)


def display_path(path: str) -> str:
    """앞의 ``./`` 또는 ``.\\``를 제거합니다./Strip a leading ``./`` or ``.\\``."""

    return _DOT_PREFIX.sub("", path, count=1)


def _ignore_error(path: str, error: OSError) -> None:
    logger.debug("ignored scan error at %s: %s", path, error)


class DirectoryWalker:
    """요청에 맞게 파일을 깊이 우선으로 순회합니다./Walk files depth-first per request."""

    def __init__(
        self,
        request: ScanRequest,
        fs: FileSystem | None = None,
        report_error: ErrorReporter | None = None,
    ) -> None:
        self._request = request
        self._fs = fs if fs is not None else LocalFileSystem()
        self._report_error = report_error or _ignore_error
        self._file_patterns = request.filter.file_patterns
        self._folder_patterns = request.filter.folder_patterns

    def iter_files(self) -> Iterator[str]:
        """루트 순서대로 일치하는 파일을 생성합니다./Yield matching files in root order."""

        for root in self._request.roots:
            yield from self._walk(root, 1)

    def _walk(self, directory: str, depth: int) -> Iterator[str]:
        try:
            names = self._fs.list_directory(directory)
        except OSError as exc:
            self._report_error(directory, exc)
            return
        for name in names:
            if name in (os.curdir, os.pardir):
                continue
            path = display_path(os.path.join(directory, name))
            try:
                info = self._fs.stat_path(path)
            except OSError as exc:
                self._report_error(path, exc)
                continue
            if info.is_directory:
                if depth < self._request.max_depth and not exclude(path, self._folder_patterns):
                    yield from self._walk(path, depth + 1)
                continue
            if not exclude(path, self._file_patterns):
                yield path


__all__ = ["DirectoryWalker", "ErrorReporter", "display_path"]

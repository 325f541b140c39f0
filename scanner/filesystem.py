"""파일 시스템 협력자 인터페이스./Filesystem collaborator interface."""

from __future__ import annotations

import os
import stat
from typing import Protocol

from .models import PathInfo


class FileSystem(Protocol):
    """스캐너가 사용하는 최소 파일 시스템./Minimal filesystem used by the scanner.

    모든 메서드는 실패 시 ``OSError``를 발생시킵니다.
    Every method raises ``OSError`` on failure.
    """

    def list_directory(self, path: str) -> list[str]:
        ...

    def stat_path(self, path: str) -> PathInfo:
        ...

    def read_bytes(self, path: str) -> bytes:
        ...


class LocalFileSystem:
    """``os`` 기반 구현./Implementation backed by ``os``."""

    def list_directory(self, path: str) -> list[str]:
        """목록 순서를 그대로 반환./Return entries in listing order."""

        return [name for name in os.listdir(path) if name not in (os.curdir, os.pardir)]

    def stat_path(self, path: str) -> PathInfo:
        stat_result = os.stat(path)
        return PathInfo(
            is_directory=stat.S_ISDIR(stat_result.st_mode),
            mtime=stat_result.st_mtime,
        )

    def read_bytes(self, path: str) -> bytes:
        with open(path, "rb") as handle:
            return handle.read()


__all__ = ["FileSystem", "LocalFileSystem"]

"""테스트용 가상 파일 시스템 도우미./Virtual filesystem helpers for tests."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable

from scanner import PathInfo


def create_virtual_tree(base: Path, files: dict[str, str]) -> list[Path]:
    """상대 경로 맵으로 파일을 생성합니다./Create files from relative path mapping."""

    created: list[Path] = []
    for relative, content in files.items():
        path = base / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        created.append(path)
    return created


def bulk_create_files(
    base: Path, count: int, prefix: str = "file", extension: str = ".txt"
) -> Iterable[Path]:
    """대량 파일을 생성합니다./Generate many files for stress tests."""

    for index in range(count):
        path = base / f"{prefix}_{index:05d}{extension}"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(f"sample-{index}", encoding="utf-8")
        yield path


class VirtualFileSystem:
    """삽입 순서를 유지하는 메모리 파일 시스템./In-memory filesystem keeping insertion order.

    경로는 ``/`` 구분자로 정규화되며, ``unlistable``에 든 디렉터리는 목록 조회 시,
    ``unstatable``에 든 항목은 메타데이터 조회 시 ``PermissionError``를 발생시킵니다.
    Paths are normalised to ``/`` separators; directories in ``unlistable``
    raise ``PermissionError`` when listed and entries in ``unstatable`` when
    their metadata is read.
    """

    def __init__(self, files: Iterable[str] = (), directories: Iterable[str] = ()) -> None:
        self._children: dict[str, list[str]] = {}
        self._files: dict[str, bytes] = {}
        self.unlistable: set[str] = set()
        self.unstatable: set[str] = set()
        self.listed: list[str] = []
        for directory in directories:
            self.add_directory(directory)
        for path in files:
            self.add_file(path)

    @staticmethod
    def _key(path: str) -> str:
        key = path.replace(os.sep, "/").rstrip("/")
        return key or "/"

    def _link(self, key: str) -> None:
        parent, _, name = key.rpartition("/")
        if not name:
            return
        parent = parent or ("/" if key.startswith("/") else ".")
        self.add_directory(parent)
        children = self._children[parent]
        if name not in children:
            children.append(name)

    def add_directory(self, path: str) -> None:
        key = self._key(path)
        if key in self._children:
            return
        self._children[key] = []
        if key not in (".", "/"):
            self._link(key)

    def add_file(self, path: str, content: bytes = b"") -> None:
        key = self._key(path)
        self._files[key] = content
        self._link(key)

    def list_directory(self, path: str) -> list[str]:
        key = self._key(path)
        self.listed.append(key)
        if key in self.unlistable:
            raise PermissionError(13, "Permission denied", path)
        if key not in self._children:
            raise FileNotFoundError(2, "No such file or directory", path)
        return list(self._children[key])

    def stat_path(self, path: str) -> PathInfo:
        key = self._key(path)
        if key in self.unstatable:
            raise PermissionError(13, "Permission denied", path)
        if key in self._children:
            return PathInfo(is_directory=True, mtime=0.0)
        if key in self._files:
            return PathInfo(is_directory=False, mtime=0.0)
        raise FileNotFoundError(2, "No such file or directory", path)

    def read_bytes(self, path: str) -> bytes:
        key = self._key(path)
        if key not in self._files:
            raise FileNotFoundError(2, "No such file or directory", path)
        return self._files[key]

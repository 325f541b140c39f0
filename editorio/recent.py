"""최근 파일 목록(KR). Recently opened files list (EN)."""

from __future__ import annotations

import os
from typing import Iterable, Iterator


class RecentFiles:
    """최근 항목이 앞에 오는 중복 없는 목록 · Duplicate-free list, most recent first."""

    def __init__(self, paths: Iterable[str] = (), limit: int | None = None) -> None:
        if limit is not None and limit <= 0:
            raise ValueError("limit must be positive")
        self._limit = limit
        self._items: list[str] = []
        for path in reversed(list(paths)):
            self.add(path)

    def add(self, path: str | os.PathLike[str]) -> None:
        """항목을 맨 앞으로 이동/추가 · Move or insert a path at the front."""

        name = os.fspath(path)
        if name in self._items:
            self._items.remove(name)
        self._items.insert(0, name)
        if self._limit is not None:
            del self._items[self._limit:]

    def discard(self, path: str | os.PathLike[str]) -> None:
        name = os.fspath(path)
        if name in self._items:
            self._items.remove(name)

    def clear(self) -> None:
        self._items.clear()

    def as_list(self) -> list[str]:
        return list(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> str:
        return self._items[index]

    def __contains__(self, path: object) -> bool:
        if not isinstance(path, (str, os.PathLike)):
            return False
        return os.fspath(path) in self._items

    def __repr__(self) -> str:
        return f"RecentFiles({self._items!r}, limit={self._limit!r})"


__all__ = ["RecentFiles"]

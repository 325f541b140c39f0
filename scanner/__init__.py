"""스냅오픈 디렉터리 스캐너 API./Snap-open directory scanner API."""

from __future__ import annotations

from .exceptions import InvalidPatternError, ScanErrorBase
from .filesystem import FileSystem, LocalFileSystem
from .models import (
    FilterSpec,
    PathInfo,
    Pattern,
    ScanError,
    ScanRequest,
    ScanResult,
    exclude,
)
from .runner import scan
from .walker import DirectoryWalker, display_path

__all__ = [
    "DirectoryWalker",
    "FileSystem",
    "FilterSpec",
    "InvalidPatternError",
    "LocalFileSystem",
    "PathInfo",
    "Pattern",
    "ScanError",
    "ScanErrorBase",
    "ScanRequest",
    "ScanResult",
    "display_path",
    "exclude",
    "scan",
]

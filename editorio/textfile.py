"""텍스트 파일 열기/저장 단계(KR). Text file open and save operations (EN)."""

from __future__ import annotations

import codecs
import logging
import os
from dataclasses import dataclass, replace
from enum import Enum
from pathlib import Path
from typing import Sequence

from charset import bom_for

from .decoding import BINARY_CODEC, decode_bytes, encode_text
from .errors import BinaryEncodingError, EncodingConversionFailed
from .recent import RecentFiles

logger = logging.getLogger(__name__)

FILE_URI_PREFIX = "file://"


class EolMode(str, Enum):
    """줄바꿈 방식 · Line ending convention."""

    LF = "LF"
    CRLF = "CRLF"
    CR = "CR"


@dataclass(frozen=True, slots=True)
class TextDocument:
    """디스크에서 읽은 파일 상태 · State of a file loaded from disk.

    ``encoding``이 ``None``이면 바이너리 문서이며 ``text``는 원본 바이트를
    그대로 담고 있습니다.
    ``encoding`` of ``None`` marks a binary document whose ``text`` holds the
    original bytes unchanged.
    """

    path: Path
    text: str
    encoding: str | None
    bom: bytes | None
    eol_mode: EolMode
    mtime: float | None

    @property
    def is_binary(self) -> bool:
        return self.encoding is None


def detect_eol(text: str) -> EolMode:
    """첫 줄바꿈으로 방식을 판정 · Classify by the first line break found."""

    index = text.find("\r")
    if index < 0:
        return EolMode.LF
    if text.startswith("\r\n", index):
        return EolMode.CRLF
    return EolMode.CR


def _mtime(path: Path) -> float:
    return path.stat().st_mtime


def parse_filenames(payload: str) -> list[str]:
    """줄 단위 파일 목록을 정규화 · Normalise a newline-separated filename list."""

    names: list[str] = []
    for line in payload.split("\n"):
        name = line.strip("\r")
        if not name:
            continue
        if name.startswith(FILE_URI_PREFIX):
            name = name[len(FILE_URI_PREFIX):]
        if os.sep == "\\":
            name = name.replace("/", "\\")
        names.append(name)
    return names


def open_text_file(
    path: str | os.PathLike[str],
    *,
    try_encodings: Sequence[str] | None = None,
    recent: RecentFiles | None = None,
) -> TextDocument:
    """파일을 읽어 디코딩 · Read a file and decode it.

    읽기 오류(``OSError``)는 그대로 전파되고, 변환 실패 시
    ``EncodingConversionFailed``가 발생합니다.
    Read errors propagate as ``OSError``; failed conversion raises
    ``EncodingConversionFailed``.
    """

    file_path = Path(path)
    data = file_path.read_bytes()
    decoded = decode_bytes(data, try_encodings)
    document = TextDocument(
        path=file_path,
        text=decoded.text,
        encoding=decoded.encoding,
        bom=decoded.bom,
        eol_mode=detect_eol(decoded.text),
        mtime=_mtime(file_path),
    )
    logger.info(
        "opened %s (encoding=%s, bom=%s, eol=%s)",
        file_path,
        document.encoding or "binary",
        bool(document.bom),
        document.eol_mode.value,
        extra={"path": file_path, "operation": "open", "encoding": document.encoding},
    )
    if recent is not None:
        recent.add(str(file_path))
    return document


def reload_text_file(document: TextDocument) -> TextDocument:
    """기존 인코딩으로 다시 읽기 · Re-read the file with the document's encoding."""

    data = document.path.read_bytes()
    if document.bom and data.startswith(document.bom):
        data = data[len(document.bom):]
    codec = document.encoding or BINARY_CODEC
    try:
        text = data.decode(codec)
    except UnicodeDecodeError as exc:
        raise EncodingConversionFailed(
            f"not valid {codec}: {exc.reason}", operation="reload", tried=(codec,)
        ) from exc
    logger.info(
        "reloaded %s", document.path, extra={"path": document.path, "operation": "reload"}
    )
    return replace(
        document,
        text=text,
        eol_mode=detect_eol(text),
        mtime=_mtime(document.path),
    )


def save_text_file(document: TextDocument, text: str | None = None) -> TextDocument:
    """BOM과 인코딩을 적용해 저장 · Save with the document's encoding and BOM."""

    body = document.text if text is None else text
    payload = encode_text(body, document.encoding, document.bom)
    document.path.write_bytes(payload)
    logger.info(
        "saved %s (%d bytes)",
        document.path,
        len(payload),
        extra={"path": document.path, "operation": "save", "encoding": document.encoding},
    )
    return replace(
        document,
        text=body,
        eol_mode=detect_eol(body),
        mtime=_mtime(document.path),
    )


def save_text_file_as(
    document: TextDocument, path: str | os.PathLike[str], text: str | None = None
) -> TextDocument:
    """새 이름으로 저장 · Save under a new filename."""

    return save_text_file(replace(document, path=Path(path)), text)


def change_encoding(document: TextDocument, encoding: str) -> TextDocument:
    """저장 인코딩을 변경 · Switch the encoding used for the next save."""

    if document.encoding is None:
        raise BinaryEncodingError(
            "Cannot change binary file encoding", operation="set_encoding"
        )
    try:
        codecs.lookup(encoding)
    except LookupError as exc:
        raise EncodingConversionFailed(
            f"unknown encoding: {encoding}", operation="set_encoding", tried=(encoding,)
        ) from exc
    encode_text(document.text, encoding)
    return replace(document, encoding=encoding, bom=bom_for(encoding))


def is_modified_externally(document: TextDocument) -> bool:
    """디스크의 파일이 더 최신인지 · Whether the file on disk is newer."""

    if document.mtime is None:
        return False
    try:
        current = _mtime(document.path)
    except FileNotFoundError:
        return False
    return document.mtime < current


__all__ = [
    "EolMode",
    "TextDocument",
    "change_encoding",
    "detect_eol",
    "is_modified_externally",
    "open_text_file",
    "parse_filenames",
    "reload_text_file",
    "save_text_file",
    "save_text_file_as",
]

"""BOM 및 바이너리 판별./Byte-order mark and binary sniffing."""

from __future__ import annotations

import codecs
from typing import Mapping

from .models import Encoding, EncodingResult

SNIFF_LIMIT = 65536

BOMS: Mapping[Encoding, bytes] = {
    Encoding.UTF_8: b"\xef\xbb\xbf",
    Encoding.UTF_16BE: b"\xfe\xff",
    Encoding.UTF_16LE: b"\xff\xfe",
    Encoding.UTF_32BE: b"\x00\x00\xfe\xff",
    Encoding.UTF_32LE: b"\xff\xfe\x00\x00",
}

# UTF-16LE is only claimed when the UTF-32LE tail is absent.
_UTF32LE_TAIL = b"\x00\x00"


def _bom_result(encoding: Encoding) -> EncodingResult:
    return EncodingResult(encoding=encoding, bom=BOMS[encoding])


def detect(data: bytes) -> EncodingResult:
    """원시 바이트의 인코딩을 추정합니다./Guess the encoding of raw bytes.

    BOM 검사 순서는 UTF-8, UTF-16BE, UTF-16LE, UTF-32BE, UTF-32LE 입니다.
    BOM이 없으면 앞쪽 64KiB 안의 NUL 바이트로 바이너리를 판정하고, 그 외에는
    인코딩을 결정하지 않은 결과를 돌려줍니다.
    BOMs are checked in the order above; without one, a NUL byte within the
    first 64 KiB marks the data binary, otherwise the encoding is left
    undetermined for the caller's fallback list.
    """

    head = bytes(data[:4])
    if head.startswith(BOMS[Encoding.UTF_8]):
        return _bom_result(Encoding.UTF_8)
    if head.startswith(BOMS[Encoding.UTF_16BE]):
        return _bom_result(Encoding.UTF_16BE)
    if head.startswith(BOMS[Encoding.UTF_16LE]) and head[2:4] != _UTF32LE_TAIL:
        return _bom_result(Encoding.UTF_16LE)
    if head == BOMS[Encoding.UTF_32BE]:
        return _bom_result(Encoding.UTF_32BE)
    if head == BOMS[Encoding.UTF_32LE]:
        return _bom_result(Encoding.UTF_32LE)
    if b"\x00" in data[:SNIFF_LIMIT]:
        return EncodingResult(is_binary=True)
    return EncodingResult()


def bom_for(codec: str | None) -> bytes | None:
    """코덱에 대응하는 UTF-16/32 BOM./UTF-16/32 BOM matching a codec, if any.

    UTF-8은 BOM을 붙이지 않습니다./UTF-8 never gains a BOM here.
    """

    if codec is None:
        return None
    for encoding in (Encoding.UTF_16BE, Encoding.UTF_16LE, Encoding.UTF_32BE, Encoding.UTF_32LE):
        if _same_codec(codec, encoding.codec):
            return BOMS[encoding]
    return None


def _same_codec(left: str, right: str) -> bool:
    try:
        return codecs.lookup(left).name == codecs.lookup(right).name
    except LookupError:
        return False


__all__ = ["BOMS", "SNIFF_LIMIT", "bom_for", "detect"]

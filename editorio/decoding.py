"""바이트-텍스트 변환(KR). Byte to text conversion (EN)."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from charset import detect

from .config import DEFAULT_TRY_ENCODINGS
from .errors import EncodingConversionFailed

logger = logging.getLogger(__name__)

# Byte-transparent codec for binary payloads.
BINARY_CODEC = "latin-1"


@dataclass(frozen=True, slots=True)
class DecodedText:
    """디코딩 결과 · Result of decoding a byte buffer."""

    text: str
    encoding: str | None
    bom: bytes | None = None
    is_binary: bool = False


def decode_bytes(data: bytes, try_encodings: Sequence[str] | None = None) -> DecodedText:
    """감지 후 필요하면 후보 목록으로 디코딩 · Detect, then fall back to a try-list.

    BOM이 있으면 제거 후 해당 인코딩으로 변환하고, 없으면 후보 인코딩을
    순서대로 엄격하게 시도합니다. 바이너리는 바이트 그대로 보존합니다.
    With a BOM the mark is stripped and the detected encoding used; otherwise
    each candidate is tried strictly in order. Binary data is kept byte for byte.
    """

    result = detect(data)
    if result.is_binary:
        return DecodedText(text=data.decode(BINARY_CODEC), encoding=None, is_binary=True)
    if result.encoding is not None:
        body = data[len(result.bom or b""):]
        try:
            text = body.decode(result.encoding.codec)
        except UnicodeDecodeError as exc:
            raise EncodingConversionFailed(
                f"not valid {result.encoding.codec}: {exc.reason}",
                operation="decode",
                tried=(result.encoding.codec,),
            ) from exc
        return DecodedText(text=text, encoding=result.encoding.codec, bom=result.bom)
    candidates = tuple(try_encodings or DEFAULT_TRY_ENCODINGS)
    for codec in candidates:
        try:
            text = data.decode(codec)
        except UnicodeDecodeError:
            logger.debug("decode with %s failed, trying next", codec)
            continue
        return DecodedText(text=text, encoding=codec)
    raise EncodingConversionFailed(
        "Encoding conversion failed.", operation="decode", tried=candidates
    )


def encode_text(text: str, encoding: str | None, bom: bytes | None = None) -> bytes:
    """텍스트를 BOM과 함께 인코딩 · Encode text with its BOM prepended."""

    codec = BINARY_CODEC if encoding is None else encoding
    try:
        payload = text.encode(codec)
    except UnicodeEncodeError as exc:
        raise EncodingConversionFailed(
            f"text not representable in {codec}: {exc.reason}",
            operation="encode",
            tried=(codec,),
        ) from exc
    if encoding is None:
        return payload
    return (bom or b"") + payload


__all__ = ["BINARY_CODEC", "DecodedText", "decode_bytes", "encode_text"]

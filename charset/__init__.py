"""문자 인코딩 감지 API./Character encoding detection API."""

from __future__ import annotations

from .detector import BOMS, SNIFF_LIMIT, bom_for, detect
from .models import Encoding, EncodingResult

__all__ = [
    "BOMS",
    "SNIFF_LIMIT",
    "Encoding",
    "EncodingResult",
    "bom_for",
    "detect",
]

"""편집기 파일 입출력 패키지(KR). Editor file I/O package (EN)."""

from .config import EditorIOConfig, FileIOSettings, SnapOpenSettings
from .decoding import DecodedText, decode_bytes, encode_text
from .errors import BinaryEncodingError, EditorIOError, EncodingConversionFailed
from .logging import configure_logging
from .recent import RecentFiles
from .textfile import (
    EolMode,
    TextDocument,
    change_encoding,
    detect_eol,
    is_modified_externally,
    open_text_file,
    parse_filenames,
    reload_text_file,
    save_text_file,
    save_text_file_as,
)

__all__ = [
    "BinaryEncodingError",
    "DecodedText",
    "EditorIOConfig",
    "EditorIOError",
    "EncodingConversionFailed",
    "EolMode",
    "FileIOSettings",
    "RecentFiles",
    "SnapOpenSettings",
    "TextDocument",
    "change_encoding",
    "configure_logging",
    "decode_bytes",
    "detect_eol",
    "encode_text",
    "is_modified_externally",
    "open_text_file",
    "parse_filenames",
    "reload_text_file",
    "save_text_file",
    "save_text_file_as",
]

"""Internet media types: parsing, serialization, matching and extension lookup."""

from .media import (
    JSON,
    MULTIPART_FORM,
    URL_ENCODED_FORM,
    XML,
    MalformedMediaTypeError,
    MediaType,
    MediaTypeError,
    classify,
    file_extensions_for,
    media_type_for_file_extension,
    media_type_for_path,
    parse_media_type,
)
from .util.result import Result

__version__ = "0.4.0"

__all__ = [
    "JSON",
    "MULTIPART_FORM",
    "MalformedMediaTypeError",
    "MediaType",
    "MediaTypeError",
    "Result",
    "URL_ENCODED_FORM",
    "XML",
    "classify",
    "file_extensions_for",
    "media_type_for_file_extension",
    "media_type_for_path",
    "parse_media_type",
]

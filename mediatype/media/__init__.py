"""Media type value type and the file extension table."""

from .classify import classify
from .extensions import (
    EXTENSION_TO_MEDIA_TYPE,
    file_extensions_for,
    media_type_for_file_extension,
    media_type_for_path,
)
from .media_type import (
    JSON,
    MULTIPART_FORM,
    URL_ENCODED_FORM,
    WILDCARD,
    XML,
    MalformedMediaTypeError,
    MediaType,
    MediaTypeError,
    parse_media_type,
)

__all__ = [
    "EXTENSION_TO_MEDIA_TYPE",
    "JSON",
    "MULTIPART_FORM",
    "MalformedMediaTypeError",
    "MediaType",
    "MediaTypeError",
    "URL_ENCODED_FORM",
    "WILDCARD",
    "XML",
    "classify",
    "file_extensions_for",
    "media_type_for_file_extension",
    "media_type_for_path",
    "parse_media_type",
]

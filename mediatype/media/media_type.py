"""The ``MediaType`` value type: parsing, serialization and matching."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from ..util.result import Result
from ..util.text import split, trim

logger = logging.getLogger(__name__)

WILDCARD = "*"

_EMPTY: Mapping[str, str] = MappingProxyType({})


class MediaTypeError(ValueError):
    """Base error of the media type package."""

    code: str = "MEDIA_TYPE_ERROR"


class MalformedMediaTypeError(MediaTypeError):
    """Raised when a string has no ``type/subtype`` pair to parse."""

    code = "MALFORMED_MEDIA_TYPE"

    def __init__(self, text: str) -> None:
        super().__init__(f"Malformed media type string: {text!r}")
        self.text = text


@dataclass(frozen=True, slots=True, repr=False)
class MediaType:
    """An Internet media type such as ``application/json; charset=utf-8``.

    Equality and hashing only look at ``type`` and ``subtype``, so
    ``application/json`` equals ``application/json; charset=utf-8``.
    The constructor stores its arguments verbatim; use :meth:`parse` for
    text coming from the outside world.
    """

    type: str
    subtype: str
    parameters: Mapping[str, str] | None = field(default_factory=dict, compare=False)

    def __post_init__(self) -> None:
        params = self.parameters
        object.__setattr__(
            self, "parameters", MappingProxyType(dict(params)) if params else _EMPTY
        )

    # -- parsing -----------------------------------------------------------

    @classmethod
    def parse(cls, text: str) -> MediaType:
        """Parse ``type/subtype[; key=value ...]``.

        Type and subtype are lowercased, parameters keep their case.
        Parameter tokens are separated by spaces; tokens that are not a
        single ``key=value`` pair are dropped. Only the first
        ``;``-separated parameter block is read.

        Raises :class:`MalformedMediaTypeError` when there is no
        ``type/subtype`` pair.
        """
        segments = split(text, ";")
        if not segments:
            raise MalformedMediaTypeError(text)

        parameters: dict[str, str] = {}
        if len(segments) > 1:
            for token in split(trim(segments[1]), " "):
                pair = split(token, "=")
                if len(pair) == 2:
                    parameters[pair[0]] = pair[1]

        tokens = split(segments[0], "/")
        if len(tokens) < 2:
            raise MalformedMediaTypeError(text)

        return cls(tokens[0].lower(), tokens[1].lower(), parameters)

    # -- queries -----------------------------------------------------------

    @property
    def essence(self) -> str:
        """``type/subtype`` without parameters."""
        return f"{self.type}/{self.subtype}"

    def matches(self, other: MediaType) -> bool:
        """Wildcard-aware compatibility check.

        A ``*`` type on either side matches anything, whatever the
        subtypes are. With equal types, a ``*`` subtype on either side
        matches. The relation is symmetric but not transitive: ``*/*``
        matches both ``text/plain`` and ``image/png``, which do not match
        each other.
        """
        if self.type == WILDCARD or other.type == WILDCARD:
            return True

        if self.type == other.type:
            if self.subtype == WILDCARD or other.subtype == WILDCARD:
                return True
            return self.subtype == other.subtype

        return False

    def with_parameters(self, **parameters: str) -> MediaType:
        """Return a copy with *parameters* merged over the current ones."""
        return self.__class__(self.type, self.subtype, {**self.parameters, **parameters})

    # -- protocols ---------------------------------------------------------

    def __str__(self) -> str:
        text = self.essence
        if self.parameters:
            text += ";" + "".join(f" {k}={v}" for k, v in self.parameters.items())
        return text

    def __repr__(self) -> str:
        return f"MediaType({str(self)!r})"

    def __reduce__(self):
        # mappingproxy does not pickle; rebuild through the constructor
        return (self.__class__, (self.type, self.subtype, dict(self.parameters)))


def parse_media_type(text: str) -> Result:
    """Parse *text* without raising.

    Returns ``Result.ok(value=MediaType)`` or a failed ``Result`` carrying
    the :class:`MalformedMediaTypeError`.
    """
    try:
        media_type = MediaType.parse(text)
    except MalformedMediaTypeError as exc:
        logger.debug("Rejected media type %r", text)
        return Result.fail(str(exc), error=exc)
    return Result.ok(media_type.essence, value=media_type)


JSON = MediaType("application", "json", {"charset": "utf-8"})
XML = MediaType("application", "xml", {"charset": "utf-8"})
URL_ENCODED_FORM = MediaType("application", "x-www-form-urlencoded")
MULTIPART_FORM = MediaType("multipart", "form-data")

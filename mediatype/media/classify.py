"""Coarse media classification."""

from __future__ import annotations

from .media_type import MediaType, parse_media_type

_CATEGORIES = frozenset({"image", "audio", "video", "text"})


def classify(media_type: MediaType | str) -> str:
    """Return ``'image'``, ``'audio'``, ``'video'``, ``'text'``, or ``'file'``.

    Strings are parsed first, so header values with parameters work;
    anything unparseable is a ``'file'``.
    """
    if isinstance(media_type, str):
        result = parse_media_type(media_type.strip())
        if not result:
            return "file"
        media_type = result.value
    if media_type.type in _CATEGORIES:
        return media_type.type
    return "file"

"""Pure string helpers used by the media type parser."""

from __future__ import annotations

WHITESPACE = " \t\r\n"


def trim(text: str) -> str:
    """Strip leading and trailing space, tab, CR and LF characters."""
    return text.strip(WHITESPACE)


def split(text: str, separator: str) -> list[str]:
    """Split *text* on *separator*, dropping empty pieces.

    ``split("a;;b;", ";")`` gives ``["a", "b"]``.
    """
    return [piece for piece in text.split(separator) if piece]

"""Settings -- read from environment variables.

Only the command-line front end consults these; the library functions take
everything they need as arguments.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import ClassVar

from ..media.media_type import MediaType, parse_media_type
from ..util.singletons import register_singleton

logger = logging.getLogger(__name__)


class Settings:
    """Runtime configuration sourced from ``MEDIATYPE_*`` environment variables."""

    DEFAULT_FALLBACK: ClassVar[str] = "application/octet-stream"

    def __init__(self) -> None:
        self.reload()

    def reload(self) -> None:
        """Re-read the environment."""
        e = self._read

        self.log_level: str = self._parse_log_level(e("MEDIATYPE_LOG_LEVEL"))
        self.fallback: MediaType = self._parse_fallback(e("MEDIATYPE_FALLBACK"))

        history = e("MEDIATYPE_HISTORY_FILE")
        self.history_file: Path = (
            Path(history) if history else Path.home() / ".mediatype_history"
        )

    # -- helpers -----------------------------------------------------------

    @staticmethod
    def _read(key: str) -> str:
        return os.getenv(key, "").strip()

    @staticmethod
    def _parse_log_level(raw: str) -> str:
        level = raw.upper()
        if level and isinstance(logging.getLevelName(level), int):
            return level
        if level:
            logger.warning("Ignoring MEDIATYPE_LOG_LEVEL=%r; using WARNING", raw)
        return "WARNING"

    def _parse_fallback(self, raw: str) -> MediaType:
        if raw:
            result = parse_media_type(raw)
            if result:
                return result.value
            logger.warning(
                "Ignoring MEDIATYPE_FALLBACK=%r; using %s", raw, self.DEFAULT_FALLBACK
            )
        return MediaType.parse(self.DEFAULT_FALLBACK)


# Module-level singleton
cfg = Settings()


@register_singleton
def _reset_cfg() -> None:
    global cfg
    cfg = Settings()

from __future__ import annotations
import logging
from typing import Dict, Optional, Tuple

logger = logging.getLogger(__name__)

FALLBACK_EXTENSION = "sub"

# codec token -> (extension, ffmpeg muxer)
_FORMATS: Dict[str, Tuple[str, str]] = {
    "subrip": ("srt", "srt"),
    "ass": ("ass", "ass"),
    "hdmv_pgs_subtitle": ("sup", "sup"),   # PGS typischerweise .sup
    "pgssub": ("sup", "sup"),
    "webvtt": ("vtt", "webvtt"),
}


def format_to_extension(fmt: str) -> str:
    known = _FORMATS.get(fmt)
    if known is None:
        logger.debug("Unknown subtitle format: %s => .%s", fmt, FALLBACK_EXTENSION)
        return FALLBACK_EXTENSION
    return known[0]


def container_format_for(fmt: str) -> Optional[str]:
    """Muxer for ``-f``; None lets ffmpeg guess from the output extension."""
    known = _FORMATS.get(fmt)
    return known[1] if known else None

from __future__ import annotations
from pathlib import Path
from typing import Optional

# Zeichen, die unter Windows in Dateinamen verboten sind
FORBIDDEN_CHARS = frozenset('/\\:*?"<>|')
TEMP_BASENAME = "output"


def sanitize_title(title: str) -> str:
    """Replace each forbidden character with one underscore; length is kept."""
    return "".join("_" if c in FORBIDDEN_CHARS else c for c in title)


def output_filename(
    source: Path,
    index: int,
    lang: Optional[str],
    title: Optional[str],
    extension: str,
) -> str:
    """
    ``<stem>.<index>[.<lang>][.<title>].<ext>``, e.g.
    ``Blade Runner 2049.2.eng.srt`` or ``Jujutsu Kaisen.2.ass``.
    """
    parts = [source.stem, str(index)]
    if lang:
        parts.append(lang)
    if title:
        sanitized = sanitize_title(title)
        if sanitized:
            parts.append(sanitized)
    parts.append(extension)
    return ".".join(parts)


def output_path(
    source: Path,
    index: int,
    lang: Optional[str],
    title: Optional[str],
    extension: str,
) -> Path:
    return source.with_name(output_filename(source, index, lang, title, extension))


def temp_path(source: Path, extension: str) -> Path:
    # Gleicher Name für alle Spuren: Extraktionen laufen strikt nacheinander
    return source.with_name(f"{TEMP_BASENAME}.{extension}")

"""
Parser for the stream listing that ``ffmpeg -i`` prints on stderr.

The listing is meant for humans, so the accepted shapes are spelled out here::

    Stream #0:2(eng): Subtitle: subrip (default)
    Stream #0:3: Subtitle: hdmv_pgs_subtitle, 1920x1080
    Stream #0:4[0x1202](jpn): Subtitle: hdmv_pgs_subtitle ([144][0][0][0] / 0x0090)
      Metadata:
        title           : Signs & Songs

A subtitle header that does not fit this grammar raises ``ParseError`` rather
than being skipped.
"""
from __future__ import annotations
import enum
import re
from dataclasses import replace
from typing import Iterable, List, Optional

from mkvsub.errors import ParseError
from mkvsub.model.subtitle_track import SubtitleTrack

STREAM_MARKER = "Stream #"
SUBTITLE_MARKER = "Subtitle"

_HEADER_RE = re.compile(
    r"^Stream #(?P<ids>\d+(?::\d+)?)"
    r"(?:\[0x[0-9a-fA-F]+\])?"          # stream id bei MPEG-TS/Blu-ray
    r"(?:\((?P<lang>[^()]*)\))?"
    r":\s*(?P<rest>[A-Za-z].*)$"         # rest beginnt mit dem Stream-Typ
)
_FORMAT_RE = re.compile(r"Subtitle:\s*(?P<fmt>[^\s,()]*)")
_TITLE_RE = re.compile(r"^title\s*:")


class LineKind(enum.Enum):
    SUBTITLE_HEADER = "subtitle_header"
    OTHER_HEADER = "other_header"
    TITLE = "title"
    IGNORED = "ignored"


def classify_line(line: str) -> LineKind:
    stripped = line.lstrip()
    if stripped.startswith(STREAM_MARKER):
        if SUBTITLE_MARKER in stripped:
            return LineKind.SUBTITLE_HEADER
        return LineKind.OTHER_HEADER
    if _TITLE_RE.match(stripped):
        return LineKind.TITLE
    return LineKind.IGNORED


def parse_header(line: str) -> SubtitleTrack:
    """
    Build a track from a subtitle header line. ``stream_index`` holds the raw
    number ffmpeg printed until ``parse_tracks`` renumbers it.
    """
    m = _HEADER_RE.match(line.strip())
    if not m:
        raise ParseError(line)

    fmt_match = _FORMAT_RE.search(m.group("rest"))
    if not fmt_match:
        raise ParseError(line, "No 'Subtitle:' in stream details")
    fmt = fmt_match.group("fmt")
    if not fmt:
        raise ParseError(line, "Missing subtitle format")

    raw_index = int(m.group("ids").rsplit(":", 1)[-1])
    lang = m.group("lang") or None
    return SubtitleTrack(stream_index=raw_index, lang=lang, format=fmt)


def parse_title(line: str) -> Optional[str]:
    _, _, value = line.partition(":")
    value = value.strip()
    return value or None


def parse_tracks(lines: Iterable[str]) -> List[SubtitleTrack]:
    result: List[SubtitleTrack] = []
    current: Optional[SubtitleTrack] = None

    for line in lines:
        kind = classify_line(line)
        if kind is LineKind.SUBTITLE_HEADER:
            if current is not None:
                result.append(current)
            current = parse_header(line)
        elif kind is LineKind.OTHER_HEADER:
            # Audio/Video/Attachment: Metadaten gehören nicht mehr zum Untertitel
            if current is not None:
                result.append(current)
            current = None
        elif kind is LineKind.TITLE and current is not None:
            title = parse_title(line)
            if title:
                current = replace(current, title=title)

    if current is not None:
        result.append(current)

    return [replace(track, stream_index=i) for i, track in enumerate(result)]

# src/mkvsub/model/subtitle_track.py
from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class SubtitleTrack:
    # 0-based position among the subtitle streams only (nicht der ffmpeg-Index)
    stream_index: int
    lang: str | None
    format: str
    title: str | None = None

    def label(self) -> str:
        lang_part = f"({self.lang}) " if self.lang else ""
        title_part = f' "{self.title}"' if self.title else ""
        return f'Stream #0:{self.stream_index} {lang_part}"{self.format}"{title_part}'

    def __str__(self) -> str:
        return self.label()

# src/mkvsub/model/extraction_outcome.py
from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from mkvsub.model.subtitle_track import SubtitleTrack

OutcomeStatus = Literal["produced", "skipped", "failed"]


@dataclass
class ExtractionOutcome:
    status: OutcomeStatus
    track: SubtitleTrack
    path: Path | None = None
    reason: str | None = None

    @classmethod
    def produced(cls, track: SubtitleTrack, path: Path) -> "ExtractionOutcome":
        return cls(status="produced", track=track, path=path)

    @classmethod
    def skipped(cls, track: SubtitleTrack) -> "ExtractionOutcome":
        return cls(status="skipped", track=track)

    @classmethod
    def failed(cls, track: SubtitleTrack, reason: str) -> "ExtractionOutcome":
        return cls(status="failed", track=track, reason=reason)

from __future__ import annotations
import logging
from pathlib import Path
from typing import List

from mkvsub.model.subtitle_track import SubtitleTrack
from mkvsub.service.ffmpeg_service import IMediaTool
from mkvsub.service.track_parser import parse_tracks

logger = logging.getLogger(__name__)


class TrackEnumerator:
    """Probe a file and turn ffmpeg's stream listing into subtitle tracks."""

    def __init__(self, tool: IMediaTool):
        self.tool = tool

    def enumerate(self, path: Path) -> List[SubtitleTrack]:
        logger.info("Enumerating subtitle tracks in %s", path)
        text = self.tool.probe(path)
        tracks = parse_tracks(text.splitlines())
        logger.info("Found %d subtitle tracks", len(tracks))
        return tracks

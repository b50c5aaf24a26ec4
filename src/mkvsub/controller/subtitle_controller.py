# src/mkvsub/controller/subtitle_controller.py
from __future__ import annotations
import logging
from pathlib import Path
from typing import List, Optional, Tuple

from mkvsub.errors import Conflict, DiscoveryError, ExternalToolError, FilesystemError, NoTracksError
from mkvsub.i18n import t
from mkvsub.model.choice import Choice
from mkvsub.model.extraction_outcome import ExtractionOutcome
from mkvsub.model.subtitle_track import SubtitleTrack
from mkvsub.model.video_item import VideoItem, is_mkv
from mkvsub.service.extraction_service import ExtractionService
from mkvsub.service.ffmpeg_service import FfmpegService, IMediaTool
from mkvsub.service.picker import IPicker
from mkvsub.service.track_enumerator import TrackEnumerator

logger = logging.getLogger(__name__)


class SubtitleController:
    """Ablauf einer Sitzung: Datei wählen, Spuren wählen, nacheinander extrahieren."""

    def __init__(self, picker: IPicker, tool: IMediaTool | None = None):
        self.tool = tool or FfmpegService()
        self.picker = picker
        self.enumerator = TrackEnumerator(self.tool)
        self.extractor = ExtractionService(self.tool, picker)

    def scan_folder(self, folder: Path) -> List[VideoItem]:
        try:
            entries = sorted(folder.iterdir())
        except OSError as e:
            raise FilesystemError(f"Could not list folder: {e}", folder) from e
        items = [VideoItem(path=p) for p in entries if p.is_file() and is_mkv(p)]
        logger.info("Found %d mkv files", len(items))
        if not items:
            raise DiscoveryError(folder)
        return items

    def pick_file(self, folder: Path) -> Path:
        items = self.scan_folder(folder)
        chosen = self.picker.choose_one(
            [Choice(key=item.path.name, value=item.path) for item in items],
            header=t("pick.file.header"),
        ).value
        logger.info("You chose: %s", chosen)
        return chosen

    def pick_tracks(self, path: Path) -> List[SubtitleTrack]:
        tracks = self.enumerator.enumerate(path)
        if not tracks:
            raise NoTracksError(path)
        selected = self.picker.choose_many(
            [Choice(key=track.label(), value=track) for track in tracks],
            header=t("pick.tracks.header"),
        )
        chosen = [c.value for c in selected]
        logger.info("You chose: %s", ", ".join(str(track) for track in chosen))
        return chosen

    def extract_selected(self, path: Path, tracks: List[SubtitleTrack]) -> List[ExtractionOutcome]:
        """
        Strikt sequentiell, in Auswahlreihenfolge. Ein ffmpeg-Fehler betrifft nur
        die jeweilige Spur; ``Conflict`` bricht den restlichen Batch ab.
        """
        outcomes: List[ExtractionOutcome] = []
        for track in tracks:
            try:
                outcomes.append(self.extractor.extract(path, track))
            except ExternalToolError as e:
                logger.error("Track %s failed: %s", track, e)
                outcomes.append(ExtractionOutcome.failed(track, e.output or str(e)))
            except Conflict as e:
                for o in outcomes:
                    if o.status == "produced":
                        logger.info("Wrote %s before abort", o.path)
                e.outcomes = outcomes
                raise
        return outcomes

    def run(self, file: Optional[Path] = None, folder: Path = Path(".")) -> List[ExtractionOutcome]:
        path = file if file is not None else self.pick_file(folder)
        logger.info("Extracting subtitles from %s", path)
        if not path.is_file():
            raise FilesystemError("File does not exist", path)
        tracks = self.pick_tracks(path)
        return self.extract_selected(path, tracks)


def summarize(outcomes: List[ExtractionOutcome]) -> Tuple[str, str]:
    """(level, text) für die Abschlussmeldung."""
    lines = []
    for o in outcomes:
        if o.status == "produced":
            lines.append(t("summary.produced", path=o.path))
        elif o.status == "skipped":
            lines.append(t("summary.skipped", track=o.track))
        else:
            lines.append(t("summary.failed", track=o.track))
    level = "warn" if any(o.status == "failed" for o in outcomes) else "info"
    return level, "\n".join(lines)

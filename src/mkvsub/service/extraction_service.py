from __future__ import annotations
import logging
from pathlib import Path

from mkvsub.errors import Conflict, ExternalToolError, FilesystemError
from mkvsub.i18n import t
from mkvsub.model.extraction_outcome import ExtractionOutcome
from mkvsub.model.subtitle_track import SubtitleTrack
from mkvsub.service.ffmpeg_service import IMediaTool, build_selector
from mkvsub.service.filename_builder import output_path, temp_path
from mkvsub.service.format_resolver import container_format_for, format_to_extension
from mkvsub.service.picker import IPicker, confirm

logger = logging.getLogger(__name__)


class ExtractionService:
    """
    Extrahiert eine Untertitelspur per Stream-Copy.

    ffmpeg schreibt zuerst in ``output.<ext>`` neben der Quelle; erst nach
    erfolgreichem Lauf wird atomar auf den endgültigen Namen umbenannt. Schlägt
    ffmpeg fehl, bleibt die temporäre Datei zur Analyse liegen.
    """

    def __init__(self, tool: IMediaTool, picker: IPicker):
        self.tool = tool
        self.picker = picker

    def extract(self, source: Path, track: SubtitleTrack) -> ExtractionOutcome:
        logger.info("Extracting subtitle track: %s", track)

        ext = format_to_extension(track.format)
        final = output_path(source, track.stream_index, track.lang, track.title, ext)

        if self._exists(final):
            overwrite = confirm(
                self.picker,
                header=t("collision.final.header", path=final),
                prompt=t("collision.final.prompt"),
                yes_label=t("choice.overwrite"),
                no_label=t("choice.skip"),
            )
            if not overwrite:
                logger.info("Skipping %s, output exists", final)
                return ExtractionOutcome.skipped(track)
            # die alte Datei wird erst beim Umbenennen ersetzt

        tmp = temp_path(source, ext)
        if self._exists(tmp):
            overwrite = confirm(
                self.picker,
                header=t("collision.temp.header", path=tmp),
                prompt=t("collision.temp.prompt"),
                yes_label=t("choice.overwrite"),
                no_label=t("choice.abort"),
            )
            if not overwrite:
                raise Conflict(tmp)
            self._remove(tmp)

        result = self.tool.extract(
            source,
            build_selector(track.stream_index),
            tmp,
            container_format_for(track.format),
            cwd=source.parent,
        )
        if not result.ok:
            logger.error("ffmpeg exited with status %s, leaving %s in place", result.returncode, tmp)
            raise ExternalToolError(
                "Failed to extract subtitle track", exit_code=result.returncode, output=result.stderr
            )

        self._rename(tmp, final)
        logger.info("Wrote %s", final)
        return ExtractionOutcome.produced(track, final)

    # --------- Dateisystem ---------

    def _exists(self, path: Path) -> bool:
        try:
            path.lstat()
        except FileNotFoundError:
            return False
        except OSError as e:
            raise FilesystemError(f"Could not check {path}: {e}", path) from e
        return True

    def _remove(self, path: Path) -> None:
        try:
            path.unlink()
        except OSError as e:
            raise FilesystemError(f"Could not delete temp file: {e}", path) from e

    def _rename(self, src: Path, dst: Path) -> None:
        try:
            src.replace(dst)
        except OSError as e:
            raise FilesystemError(f"Could not rename {src} to {dst}: {e}", dst) from e

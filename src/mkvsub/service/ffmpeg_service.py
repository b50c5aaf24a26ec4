from __future__ import annotations
import logging
import os
import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Protocol

from mkvsub.errors import FilesystemError, ToolNotFoundError
from mkvsub.settings import bundled_bin, custom_bin_path, use_bundled_preferred

logger = logging.getLogger(__name__)


@dataclass
class ToolResult:
    returncode: int
    stderr: str

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class IMediaTool(Protocol):
    def probe(self, path: Path) -> str:
        ...

    def extract(
        self,
        path: Path,
        selector: str,
        output: Path,
        container_format: Optional[str],
        cwd: Path,
    ) -> ToolResult:
        ...


def build_selector(presentation_index: int) -> str:
    """Input 0, subtitle class, n-th subtitle stream (not the absolute index)."""
    return f"0:s:{presentation_index}"


class FfmpegService:
    """Kapselt Aufrufe von ffmpeg (Probe über stderr, Stream-Copy-Export)."""

    def __init__(self, ffmpeg_path: Optional[str] = None):
        self._ffmpeg_path = ffmpeg_path

    # --------- Binärsuche ---------

    def _chmod_exec(self, p: Path) -> None:
        try:
            os.chmod(p, 0o755)
        except OSError as e:
            logger.debug("chmod failed for %s: %s", p, e)

    def _vendor_ffbin(self, name: str) -> Optional[str]:
        vend = bundled_bin(name)
        if not vend.exists():
            return None
        self._chmod_exec(vend)
        return str(vend)

    def find_ffbin(self, name: str = "ffmpeg") -> str:
        if self._ffmpeg_path and name == "ffmpeg":
            return self._ffmpeg_path

        custom = custom_bin_path(name)
        if custom:
            return custom

        if use_bundled_preferred():
            found = self._vendor_ffbin(name) or shutil.which(name)
        else:
            found = shutil.which(name) or self._vendor_ffbin(name)
        if found:
            return found
        raise ToolNotFoundError(name)

    # --------- Ausführung ---------

    def _run(self, cmd: List[str], cwd: Optional[Path] = None) -> subprocess.CompletedProcess:
        logger.debug("Running command `%s`", " ".join(cmd))
        try:
            return subprocess.run(
                cmd,
                cwd=str(cwd) if cwd is not None else None,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                stdin=subprocess.DEVNULL,
            )
        except OSError as e:
            raise FilesystemError(f"Could not run {cmd[0]}: {e}", cwd) from e

    # --------- Probe ---------

    def probe(self, path: Path) -> str:
        """
        ``ffmpeg -i <file>`` ohne Ausgabedatei. ffmpeg beendet sich dabei mit
        Fehlercode, relevant ist nur die Beschreibung auf stderr.
        """
        ffmpeg = self.find_ffbin("ffmpeg")
        proc = self._run([ffmpeg, "-hide_banner", "-i", str(path)])
        stdout = proc.stdout.decode("utf-8", "replace")
        stderr = proc.stderr.decode("utf-8", "replace")
        logger.debug("probe exit status %s (ignored)", proc.returncode)
        logger.debug("stdout: %s", stdout)
        logger.debug("stderr: %s", stderr)
        return stderr

    # --------- Export ---------

    def extract(
        self,
        path: Path,
        selector: str,
        output: Path,
        container_format: Optional[str],
        cwd: Path,
    ) -> ToolResult:
        """
        Kopiert einen Untertitel-Stream ohne Re-Encode, z.B.
        ``ffmpeg -i movie.mkv -map 0:s:2 -c copy -f srt output.srt``.
        Pfade werden relativ zu ``cwd`` (Ordner der Quelldatei) übergeben.
        """
        ffmpeg = self.find_ffbin("ffmpeg")
        cmd = [ffmpeg, "-hide_banner", "-i", path.name, "-map", selector, "-c", "copy"]
        if container_format:
            cmd += ["-f", container_format]
        cmd.append(output.name)

        proc = self._run(cmd, cwd=cwd)
        stderr = proc.stderr.decode("utf-8", "replace")
        logger.debug("stderr: %s", stderr)
        return ToolResult(returncode=proc.returncode, stderr=stderr)

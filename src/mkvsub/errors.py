# src/mkvsub/errors.py
from __future__ import annotations
from pathlib import Path
from typing import Optional


class SubtoolError(Exception):
    """Basisklasse aller fachlichen Fehler des Extraktors."""


class DiscoveryError(SubtoolError):
    """No candidate input files in the scanned folder."""

    def __init__(self, folder: Path):
        self.folder = folder
        super().__init__(f"No MKV files found in {folder}")


class ParseError(SubtoolError):
    """A stream header in ffmpeg's diagnostic output did not match the grammar."""

    def __init__(self, line: str, reason: str = "Malformed stream header"):
        self.line = line
        self.reason = reason
        super().__init__(f"{reason}: {line!r}")


class NoTracksError(SubtoolError):
    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"No subtitle tracks found in {path}")


class OperatorCancelled(SubtoolError):
    def __init__(self, header: Optional[str] = None):
        self.header = header
        super().__init__(f"No selection made: {header}" if header else "No selection made")


class Conflict(SubtoolError):
    """
    A stale temp file exists and the operator refused to overwrite it.
    ``outcomes`` holds the tracks already finished when the batch stopped.
    """

    def __init__(self, temp_path: Path):
        self.temp_path = temp_path
        self.outcomes: list = []
        super().__init__(f"Temp file already exists: {temp_path}")


class ExternalToolError(SubtoolError):
    """ffmpeg exited non-zero. ``output`` holds its stderr verbatim."""

    def __init__(self, message: str, exit_code: Optional[int] = None, output: str = ""):
        self.exit_code = exit_code
        self.output = output
        super().__init__(f"{message}: {output}" if output else message)


class FilesystemError(SubtoolError):
    def __init__(self, message: str, path: Optional[Path] = None):
        self.path = path
        info = f" ({path})" if path else ""
        super().__init__(f"{message}{info}")


class ToolNotFoundError(SubtoolError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(
            f"{name} not found. Set its path in the settings, install it system-wide "
            f"or place it under resources/ffmpeg/<platform>/."
        )

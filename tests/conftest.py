from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Sequence

import pytest

from mkvsub import i18n
from mkvsub.errors import OperatorCancelled
from mkvsub.model.choice import Choice
from mkvsub.service.ffmpeg_service import ToolResult


SAMPLE_PROBE = """\
Input #0, matroska,webm, from 'movie.mkv':
  Metadata:
    title           : Movie Title
    ENCODER         : Lavf60.3.100
  Duration: 00:01:00.00, start: 0.000000, bitrate: 100 kb/s
  Chapters:
    Chapter #0:0: start 0.000000, end 30.000000
      Metadata:
        title           : Chapter 1
  Stream #0:0: Video: h264 (High), yuv420p(progressive), 1920x1080, 23.98 fps (default)
    Metadata:
      title           : Main video
  Stream #0:1(jpn): Audio: aac (LC), 48000 Hz, stereo, fltp (default)
  Stream #0:2(eng): Subtitle: subrip (default)
  Stream #0:3: Subtitle: hdmv_pgs_subtitle, 1920x1080
  Stream #0:4: Attachment: ttf
    Metadata:
      filename        : font.ttf
      mimetype        : application/x-truetype-font
At least one output file must be specified
"""


class FakeTool:
    """Stands in for ffmpeg: canned probe text, extraction writes ``payload``."""

    def __init__(self, probe_text: str = SAMPLE_PROBE, payload: bytes = b"1\n00:00:01,000 --> 00:00:02,000\nHi\n",
                 fail_selectors: Sequence[str] = ()) -> None:
        self.probe_text = probe_text
        self.payload = payload
        self.fail_selectors = set(fail_selectors)
        self.probed: List[Path] = []
        self.calls: List[dict] = []

    def probe(self, path: Path) -> str:
        self.probed.append(path)
        return self.probe_text

    def extract(self, path: Path, selector: str, output: Path, container_format: Optional[str], cwd: Path) -> ToolResult:
        self.calls.append({
            "path": path,
            "selector": selector,
            "output": output,
            "container_format": container_format,
            "cwd": cwd,
        })
        target = cwd / output.name
        if selector in self.fail_selectors:
            target.write_bytes(b"partial")
            return ToolResult(returncode=1, stderr=f"Stream map '{selector}' matches no streams.")
        target.write_bytes(self.payload)
        return ToolResult(returncode=0, stderr="")


class ScriptedPicker:
    """Answers prompts from a fixed script of values. ``None`` means cancel."""

    def __init__(self, one: Sequence = (), many: Optional[Sequence] = None) -> None:
        self.one = list(one)
        self.many = many
        self.headers: List[Optional[str]] = []

    def choose_one(self, choices: Sequence[Choice], header: Optional[str] = None,
                   prompt: Optional[str] = None) -> Choice:
        self.headers.append(header)
        if not self.one:
            raise AssertionError(f"unexpected prompt: {header}")
        wanted = self.one.pop(0)
        if wanted is None:
            raise OperatorCancelled(header)
        for choice in choices:
            if choice.value == wanted:
                return choice
        raise AssertionError(f"{wanted!r} not offered in {choices!r}")

    def choose_many(self, choices: Sequence[Choice], header: Optional[str] = None,
                    prompt: Optional[str] = None) -> List[Choice]:
        self.headers.append(header)
        if self.many is None:
            return list(choices)
        if not self.many:
            raise OperatorCancelled(header)
        return [choices[i] for i in self.many]


@pytest.fixture(autouse=True)
def english_strings():
    previous = i18n.current_language()
    i18n.set_language("en")
    yield
    i18n.set_language(previous)


@pytest.fixture
def movie(tmp_path: Path) -> Path:
    path = tmp_path / "movie.mkv"
    path.write_bytes(b"not really matroska")
    return path

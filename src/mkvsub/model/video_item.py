# src/mkvsub/model/video_item.py
from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path

@dataclass
class VideoItem:
    path: Path

SUPPORTED_EXT = {".mkv"}

def is_mkv(path: Path) -> bool:
    return path.suffix.lower() in SUPPORTED_EXT

# src/mkvsub/settings.py
from __future__ import annotations
from pathlib import Path
import platform
import sys
from typing import Optional

from PySide6.QtCore import QSettings

ORG = "mkvsub"
APP = "MkvSubtitleExtractor"

_TRUE = {"1", "true", "yes", "on", "y", "t"}
_FALSE = {"0", "false", "no", "off", "n", "f"}


def get_settings() -> QSettings:
    """
    QSettings-Objekt für die App. Unter Windows landet das in der Registry,
    unter Linux unter ~/.config/<ORG>/<APP>.conf.
    """
    return QSettings(ORG, APP)


# ---------------------- Bool-Helper ----------------------

def _parse_bool_like(v, default: bool = False) -> bool:
    """Robuste Interpretation von bools aus QSettings (bool, int, str)."""
    if isinstance(v, bool):
        return v
    if isinstance(v, int):
        return v != 0
    if isinstance(v, str):
        val = v.strip().lower()
        if val in _TRUE:
            return True
        if val in _FALSE:
            return False
    return default


def settings_get_bool(key: str, default: bool = False) -> bool:
    raw = get_settings().value(key, None)  # ohne type=bool, damit Strings sichtbar bleiben
    return _parse_bool_like(raw, default)


def debug_enabled() -> bool:
    return settings_get_bool("debug", False)


def preferred_language() -> Optional[str]:
    val = get_settings().value("language", "", type=str) or ""
    val = val.strip().lower()
    return val or None


# ---------------------- Bundled-FFmpeg ----------------------

def _project_root() -> Path:
    """
    Projektwurzel:
      - im PyInstaller-Build: sys._MEIPASS
      - im Dev: zwei Ordner über dieser Datei (…/src/mkvsub -> Projektroot)
    """
    return Path(getattr(sys, "_MEIPASS", Path(__file__).resolve().parents[2]))


def bundled_bin(name: str) -> Path:
    plat = "windows" if platform.system() == "Windows" else "linux"
    exe = name + (".exe" if plat == "windows" else "")
    return _project_root() / "resources" / "ffmpeg" / plat / exe


def use_bundled_preferred() -> bool:
    """
    True, wenn 'prefer_bundled' gesetzt ist, oder (ohne Einstellung) unter
    Windows ein gebündeltes ffmpeg vorliegt.
    """
    val = get_settings().value("prefer_bundled", None)
    if val is not None:
        return _parse_bool_like(val, False)
    return platform.system() == "Windows" and bundled_bin("ffmpeg").exists()


def custom_bin_path(name: str) -> Optional[str]:
    """Benutzerdefinierter Pfad (Einstellungen), nur wenn er existiert."""
    v = get_settings().value(f"path_{name}", "", type=str) or ""
    v = v.strip()
    return v if v and Path(v).exists() else None

from __future__ import annotations
from typing import Dict, Optional
import locale

from mkvsub.settings import preferred_language


# ---------- Strings ----------
_STRINGS: Dict[str, Dict[str, str]] = {
    "de": {
        "app.title": "MKV-Untertitel-Extraktor",

        # Auswahl
        "pick.file.header": "MKV-Datei wählen, aus der Untertitel extrahiert werden",
        "pick.tracks.header": "Untertitelspuren zum Extrahieren wählen",
        "pick.prompt": "Auswahl:",

        # Kollisionen
        "collision.final.header": "Ausgabedatei existiert bereits: {path}",
        "collision.final.prompt": "Überschreiben oder überspringen?",
        "collision.temp.header": "Temporäre Datei existiert bereits: {path}",
        "collision.temp.prompt": "Überschreiben oder abbrechen?",
        "choice.overwrite": "Überschreiben",
        "choice.skip": "Überspringen",
        "choice.abort": "Abbrechen",

        # Zusammenfassung
        "summary.title": "Extraktion abgeschlossen",
        "summary.produced": "Erstellt: {path}",
        "summary.skipped": "Übersprungen: {track}",
        "summary.failed": "Fehlgeschlagen: {track}",
        "error.title": "Fehler",
    },
    "en": {
        "app.title": "MKV Subtitle Extractor",

        # Picking
        "pick.file.header": "Choose an MKV file to extract subtitles from",
        "pick.tracks.header": "Select subtitle tracks to extract",
        "pick.prompt": "Selection:",

        # Collisions
        "collision.final.header": "Output file already exists: {path}",
        "collision.final.prompt": "Overwrite or skip?",
        "collision.temp.header": "Temp file already exists: {path}",
        "collision.temp.prompt": "Overwrite or abort?",
        "choice.overwrite": "Overwrite",
        "choice.skip": "Skip",
        "choice.abort": "Abort",

        # Summary
        "summary.title": "Extraction finished",
        "summary.produced": "Produced: {path}",
        "summary.skipped": "Skipped: {track}",
        "summary.failed": "Failed: {track}",
        "error.title": "Error",
    },
}


# ---------- Sprache wählen & Fallback ----------
def _lang_from_system() -> str:
    """Systemsprache als 'de' oder 'en'; alles andere → 'en'."""
    loc = locale.getlocale()[0] or ""
    return "de" if loc.lower().startswith("de") else "en"


def _lang_default() -> str:
    """Settings → sonst Systemlocale."""
    val = preferred_language()
    if val:
        return "de" if val == "de" else "en"
    return _lang_from_system()


_current_lang = _lang_default()


# ---------- API ----------
def t(key: str, **kwargs) -> str:
    """
    Hole Übersetzung für 'key' in aktueller Sprache, fällt auf Englisch zurück,
    dann auf den Schlüssel selbst. Optionales .format(**kwargs).
    """
    bundle = _STRINGS.get(_current_lang, {})
    txt: Optional[str] = bundle.get(key)
    if txt is None:
        txt = _STRINGS["en"].get(key, key)
    return txt.format(**kwargs) if kwargs else txt


def set_language(lang: str) -> None:
    global _current_lang
    _current_lang = "de" if lang == "de" else "en"


def current_language() -> str:
    return _current_lang

# src/mkvsub/main.py
from __future__ import annotations

import argparse
import logging
import sys
import traceback
from pathlib import Path
from typing import List, Optional, Sequence

from PySide6.QtWidgets import QApplication, QMessageBox

from mkvsub.controller.subtitle_controller import SubtitleController, summarize
from mkvsub.errors import Conflict, SubtoolError
from mkvsub.i18n import t
from mkvsub.logging_config import configure_logging
from mkvsub.settings import ORG, APP, debug_enabled
from mkvsub.view.notifiers import DialogNotifier, INotifier, LogNotifier
from mkvsub.view.qt_picker import QtPicker

logger = logging.getLogger(__name__)


# -------- Exceptions sichtbar --------
def excepthook(exc_type, exc_value, exc_tb):
    print("\n=== UNCAUGHT EXCEPTION ===", file=sys.stderr)
    print(f"{exc_type.__name__}: {exc_value}", file=sys.stderr)
    traceback.print_tb(exc_tb)
    if QApplication.instance() is not None:
        QMessageBox.critical(None, t("error.title"), f"{exc_type.__name__}: {exc_value}")


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="mkvsub", description="Extract subtitles from MKV files")
    parser.add_argument("--debug", action="store_true", help="enable debug logging")
    parser.add_argument("--file", type=Path, help="path to the MKV to extract from")
    parser.add_argument("--dir", type=Path, default=Path("."),
                        help="folder to search for MKV files when --file is not given")
    return parser.parse_args(argv)


def _notify_all(notifiers: List[INotifier], level: str, text: str) -> None:
    for n in notifiers:
        n.notify(level, text)


# -------- Main --------
def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)

    app = QApplication.instance() or QApplication(sys.argv[:1])
    app.setOrganizationName(ORG)
    app.setApplicationName(APP)
    sys.excepthook = excepthook

    configure_logging(debug=args.debug or debug_enabled())
    logger.info("Ahoy!")

    notifiers: List[INotifier] = [LogNotifier(), DialogNotifier()]
    controller = SubtitleController(picker=QtPicker())
    try:
        outcomes = controller.run(file=args.file, folder=args.dir)
    except Conflict as e:
        _, done = summarize(e.outcomes)
        _notify_all(notifiers, "error", f"{e}\n{done}" if done else str(e))
        return 1
    except SubtoolError as e:
        _notify_all(notifiers, "error", str(e))
        return 1

    level, text = summarize(outcomes)
    if text:
        _notify_all(notifiers, level, text)
    return 1 if level == "warn" else 0


if __name__ == "__main__":
    sys.exit(main())

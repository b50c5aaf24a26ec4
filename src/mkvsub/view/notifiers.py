from __future__ import annotations
import logging
from typing import Optional, Protocol

from PySide6.QtWidgets import QMessageBox, QWidget

from mkvsub.i18n import t

logger = logging.getLogger(__name__)


class INotifier(Protocol):
    def notify(self, level: str, text: str) -> None:
        ...


class LogNotifier:
    def notify(self, level: str, text: str) -> None:
        if level == "error":
            logger.error(text)
        elif level == "warn":
            logger.warning(text)
        else:
            logger.info(text)


class DialogNotifier:
    def __init__(self, parent: Optional[QWidget] = None):
        self.parent = parent

    def notify(self, level: str, text: str) -> None:
        if level == "error":
            QMessageBox.critical(self.parent, t("error.title"), text, QMessageBox.Ok)
        elif level == "warn":
            QMessageBox.warning(self.parent, t("summary.title"), text, QMessageBox.Ok)
        else:
            QMessageBox.information(self.parent, t("summary.title"), text, QMessageBox.Ok)

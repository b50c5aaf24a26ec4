from __future__ import annotations
from typing import List, Optional, Sequence

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QAbstractItemView, QDialog, QDialogButtonBox, QInputDialog, QLabel,
    QListWidget, QListWidgetItem, QVBoxLayout, QWidget,
)

from mkvsub.errors import OperatorCancelled
from mkvsub.i18n import t
from mkvsub.model.choice import Choice


class MultiPickDialog(QDialog):
    """Liste mit Mehrfachauswahl (Klick wählt/abwählt)."""

    def __init__(self, choices: Sequence[Choice], header: Optional[str], prompt: Optional[str],
                 parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.setWindowTitle(t("app.title"))
        self.setMinimumWidth(520)

        layout = QVBoxLayout(self)
        if header:
            layout.addWidget(QLabel(header))

        self.list_widget = QListWidget()
        self.list_widget.setSelectionMode(QAbstractItemView.MultiSelection)
        for row, choice in enumerate(choices):
            item = QListWidgetItem(choice.key)
            item.setData(Qt.UserRole, row)
            self.list_widget.addItem(item)
        layout.addWidget(self.list_widget)

        if prompt:
            layout.addWidget(QLabel(prompt))

        buttons = QDialogButtonBox(QDialogButtonBox.Ok | QDialogButtonBox.Cancel)
        buttons.accepted.connect(self.accept)
        buttons.rejected.connect(self.reject)
        layout.addWidget(buttons)

    def selected_rows(self) -> List[int]:
        return sorted(item.data(Qt.UserRole) for item in self.list_widget.selectedItems())


class QtPicker:
    """Operator-Entscheidungen über Qt-Dialoge. Abbruch → OperatorCancelled."""

    def __init__(self, parent: Optional[QWidget] = None):
        self.parent = parent

    def choose_one(self, choices: Sequence[Choice], header: Optional[str] = None,
                   prompt: Optional[str] = None) -> Choice:
        keys = [c.key for c in choices]
        label = "\n".join(part for part in (header, prompt or t("pick.prompt")) if part)
        text, ok = QInputDialog.getItem(self.parent, t("app.title"), label, keys, 0, False)
        if not ok or text not in keys:
            raise OperatorCancelled(header)
        return choices[keys.index(text)]

    def choose_many(self, choices: Sequence[Choice], header: Optional[str] = None,
                    prompt: Optional[str] = None) -> List[Choice]:
        dlg = MultiPickDialog(choices, header, prompt, self.parent)
        if dlg.exec() != QDialog.Accepted:
            raise OperatorCancelled(header)
        rows = dlg.selected_rows()
        if not rows:
            raise OperatorCancelled(header)
        return [choices[row] for row in rows]

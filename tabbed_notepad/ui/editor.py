from __future__ import annotations

from PySide6.QtCore import QMimeData
from PySide6.QtGui import QFont
from PySide6.QtWidgets import QPlainTextEdit

from tabbed_notepad.core.text import normalize_text


class NoteEditor(QPlainTextEdit):
    """Plain-text body editor; pasted text is normalized before it lands."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setLineWrapMode(QPlainTextEdit.LineWrapMode.WidgetWidth)
        self.setTabChangesFocus(False)

    def insertFromMimeData(self, source: QMimeData) -> None:  # type: ignore[override]
        if source is not None and source.hasText():
            self.insertPlainText(normalize_text(source.text()))
            return
        super().insertFromMimeData(source)

    def set_point_size(self, size: int) -> None:
        font = QFont(self.font())
        font.setPointSize(int(size))
        self.setFont(font)

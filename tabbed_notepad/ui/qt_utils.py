from __future__ import annotations

from contextlib import contextmanager

from PySide6.QtGui import QTextCursor
from PySide6.QtWidgets import QPlainTextEdit


@contextmanager
def blocked_signals(obj):
    """Temporarily silence a QObject's signals; always re-enabled afterwards."""
    if obj is None:
        yield
        return
    previous = obj.blockSignals(True)
    try:
        yield
    finally:
        obj.blockSignals(previous)


def replace_plain_text_keep_cursor(editor: QPlainTextEdit, text: str) -> None:
    """setPlainText without textChanged and without jumping the caret to the start."""
    position = editor.textCursor().position()
    with blocked_signals(editor):
        editor.setPlainText(text)
    cursor = editor.textCursor()
    cursor.setPosition(min(position, len(text)), QTextCursor.MoveMode.MoveAnchor)
    editor.setTextCursor(cursor)

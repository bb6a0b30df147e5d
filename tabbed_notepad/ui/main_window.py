from __future__ import annotations

import logging

from PySide6.QtCore import Slot
from PySide6.QtGui import QAction, QKeySequence
from PySide6.QtWidgets import (
    QLineEdit,
    QMainWindow,
    QTabBar,
    QToolBar,
    QVBoxLayout,
    QWidget,
)

from tabbed_notepad.core.text import normalize_text
from tabbed_notepad.session.autosave import AutosaveTimer
from tabbed_notepad.session.manager import SessionManager
from tabbed_notepad.settings import (
    AUTOSAVE_INTERVAL_MS,
    FONT_SIZE_MAX,
    FONT_SIZE_MIN,
    TITLE_MAX_LEN,
)
from tabbed_notepad.storage.preferences import Preferences
from tabbed_notepad.ui.dialogs import ask_export_path, confirm_delete_dialog, show_export_failed
from tabbed_notepad.ui.editor import NoteEditor
from tabbed_notepad.ui.qt_utils import blocked_signals, replace_plain_text_keep_cursor

log = logging.getLogger(__name__)


class NotepadWindow(QMainWindow):
    """
    Tab picker + title field + body editor.

    Every user action is forwarded to SessionManager; the widgets are
    then refreshed from the session, never the other way round.
    """

    def __init__(
        self,
        session: SessionManager,
        preferences: Preferences,
        *,
        autosave_interval_ms: int = AUTOSAVE_INTERVAL_MS,
    ):
        super().__init__()
        self.setWindowTitle("Notepad")
        self.setMinimumSize(600, 480)

        self._session = session
        self._prefs = preferences

        self.tabs = QTabBar()
        self.tabs.setExpanding(False)
        self.tabs.setDocumentMode(True)
        self.tabs.setUsesScrollButtons(True)

        self.title_edit = QLineEdit()
        self.title_edit.setPlaceholderText("Title")
        self.title_edit.setMaxLength(TITLE_MAX_LEN)

        self.editor = NoteEditor()

        root = QWidget()
        layout = QVBoxLayout(root)
        layout.setContentsMargins(12, 8, 12, 12)
        layout.addWidget(self.tabs)
        layout.addWidget(self.title_edit)
        layout.addWidget(self.editor, 1)
        self.setCentralWidget(root)

        self._build_toolbar()
        self._apply_font_size(self._prefs.font_size())

        geometry = self._prefs.geometry()
        if geometry is not None:
            self.restoreGeometry(geometry)
        else:
            self.resize(800, 600)

        self._autosave = AutosaveTimer(session, interval_ms=autosave_interval_ms, parent=self)

        # Signals
        self.tabs.currentChanged.connect(self._on_tab_changed)
        self.title_edit.textEdited.connect(self._on_title_edited)
        self.editor.textChanged.connect(self._on_text_changed)

    def _build_toolbar(self) -> None:
        tb = QToolBar("Notes")
        tb.setMovable(False)
        self.addToolBar(tb)

        self.act_new = QAction("New note", self)
        self.act_new.setShortcut(QKeySequence.StandardKey.New)
        self.act_new.triggered.connect(self.new_tab)

        self.act_delete = QAction("Delete note", self)
        self.act_delete.triggered.connect(self.delete_current)

        self.act_reset = QAction("Clear note", self)
        self.act_reset.setToolTip("Clear the title and text of this note")
        self.act_reset.triggered.connect(self.reset_current)

        self.act_export = QAction("Export…", self)
        self.act_export.triggered.connect(self.export_current)

        self.act_smaller = QAction("A−", self)
        self.act_smaller.setToolTip("Decrease font size")
        self.act_smaller.setShortcut(QKeySequence.StandardKey.ZoomOut)
        self.act_smaller.triggered.connect(self.decrease_font)

        self.act_larger = QAction("A+", self)
        self.act_larger.setToolTip("Increase font size")
        self.act_larger.setShortcut(QKeySequence.StandardKey.ZoomIn)
        self.act_larger.triggered.connect(self.increase_font)

        tb.addAction(self.act_new)
        tb.addAction(self.act_delete)
        tb.addAction(self.act_reset)
        tb.addSeparator()
        tb.addAction(self.act_export)
        tb.addSeparator()
        tb.addAction(self.act_smaller)
        tb.addAction(self.act_larger)

    # ───────────────────────── Qt events ─────────────────────────

    def showEvent(self, event):  # type: ignore[override]
        super().showEvent(event)
        # showEvent fires again after minimize/restore; the session guards the load
        if self._session.load_if_needed():
            self._refresh_tabs()
            self._autosave.start()

    def closeEvent(self, event):  # type: ignore[override]
        """Flush pending edits; the autosave timer may not have fired yet."""
        try:
            self._autosave.stop()
            self._session.flush_all()
            self._prefs.set_geometry(self.saveGeometry())
            self._prefs.sync()
        except Exception:
            log.exception("Failed to flush notes on close")
        super().closeEvent(event)

    # ───────────────────────── actions ─────────────────────────

    @Slot()
    def new_tab(self) -> None:
        self._session.add_tab()
        self._refresh_tabs()
        self.title_edit.setFocus()
        self.title_edit.selectAll()

    @Slot()
    def delete_current(self) -> None:
        note = self._session.selected_note
        if note is None or not self._session.request_delete():
            return
        if confirm_delete_dialog(self, title=self._session.display_title(note)):
            self._session.confirm_delete()
        else:
            self._session.cancel_delete()
        self._refresh_tabs()

    @Slot()
    def reset_current(self) -> None:
        self._session.reset_active()
        self._refresh_tabs()

    @Slot()
    def export_current(self) -> None:
        note = self._session.selected_note
        if note is None:
            return
        path = ask_export_path(self, title=note.title)
        if path is None:
            return
        if not self._session.export_active(path):
            show_export_failed(self, path=path)

    @Slot()
    def increase_font(self) -> None:
        self._apply_font_size(self._prefs.increase_font_size())

    @Slot()
    def decrease_font(self) -> None:
        self._apply_font_size(self._prefs.decrease_font_size())

    # ───────────────────────── widget sync ─────────────────────────

    def _refresh_tabs(self) -> None:
        """Rebuild the tab bar from the session and show the selected note."""
        selected = self._session.selected_id
        with blocked_signals(self.tabs):
            while self.tabs.count():
                self.tabs.removeTab(self.tabs.count() - 1)
            for i, note in enumerate(self._session.notes):
                self.tabs.addTab(self._session.display_title(note))
                self.tabs.setTabData(i, note.id)
                self.tabs.setTabToolTip(i, note.title)
            idx = self._session.index_of(selected) if selected else None
            if idx is not None:
                self.tabs.setCurrentIndex(idx)

        self.act_delete.setEnabled(self._session.can_delete)
        self._show_selected()

    def _show_selected(self) -> None:
        note = self._session.selected_note
        with blocked_signals(self.title_edit):
            self.title_edit.setText(note.title if note else "")
        with blocked_signals(self.editor):
            self.editor.setPlainText(note.text if note else "")

    def _apply_font_size(self, size: int) -> None:
        self.editor.set_point_size(size)
        self.act_smaller.setEnabled(size > FONT_SIZE_MIN)
        self.act_larger.setEnabled(size < FONT_SIZE_MAX)

    @Slot(int)
    def _on_tab_changed(self, index: int) -> None:
        note_id = self.tabs.tabData(index)
        if not note_id:
            return
        self._session.select_tab(note_id)
        self._show_selected()

    @Slot(str)
    def _on_title_edited(self, text: str) -> None:
        note = self._session.selected_note
        if note is None:
            return
        self._session.edit_title(note.id, text)
        if note.title != text:
            with blocked_signals(self.title_edit):
                pos = self.title_edit.cursorPosition()
                self.title_edit.setText(note.title)
                self.title_edit.setCursorPosition(min(pos, len(note.title)))
        idx = self.tabs.currentIndex()
        self.tabs.setTabText(idx, self._session.display_title(note))
        self.tabs.setTabToolTip(idx, note.title)

    @Slot()
    def _on_text_changed(self) -> None:
        note = self._session.selected_note
        if note is None:
            return
        raw = self.editor.toPlainText()
        normalized = normalize_text(raw)
        if normalized != raw:
            # keep what is on screen identical to what gets stored
            replace_plain_text_keep_cursor(self.editor, normalized)
        self._session.edit_text(note.id, normalized)

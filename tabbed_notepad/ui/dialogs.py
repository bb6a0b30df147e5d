from __future__ import annotations

from pathlib import Path

from PySide6.QtWidgets import QFileDialog, QMessageBox, QWidget

from tabbed_notepad.core.filenames import export_filename


def confirm_delete_dialog(parent: QWidget, *, title: str) -> bool:
    """Ask before a note is removed for good. True means delete."""
    msg = QMessageBox(parent)
    msg.setIcon(QMessageBox.Icon.Warning)
    msg.setWindowTitle("Delete note")
    msg.setText(f"Delete “{title}”?")
    msg.setInformativeText("The note and its saved file will be removed. This cannot be undone.")
    btn_delete = msg.addButton("Delete", QMessageBox.ButtonRole.DestructiveRole)
    btn_cancel = msg.addButton("Cancel", QMessageBox.ButtonRole.RejectRole)
    msg.setDefaultButton(btn_cancel)
    msg.exec()
    return msg.clickedButton() == btn_delete


def ask_export_path(parent: QWidget, *, title: str, start_dir: Path | None = None) -> Path | None:
    start_dir = start_dir or Path.home()
    path, _ = QFileDialog.getSaveFileName(
        parent,
        "Export note",
        str(start_dir / export_filename(title)),
        "Text files (*.txt);;All files (*)",
    )
    return Path(path) if path else None


def show_export_failed(parent: QWidget, *, path: Path) -> None:
    QMessageBox.warning(
        parent,
        "Export failed",
        f"Could not write the note to:\n{path}\n\nSee the log for details.",
    )

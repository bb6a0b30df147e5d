from __future__ import annotations

import logging
import threading
from pathlib import Path

from tabbed_notepad.core.filenames import note_filename
from tabbed_notepad.core.note import Note
from tabbed_notepad.settings import NOTE_FILE_SUFFIX
from tabbed_notepad.storage.filesystem import atomic_write_text

log = logging.getLogger(__name__)


class NoteStore:
    """
    One JSON file per note inside notes_dir.

    Responsibilities:
    - derive the file path from a note's immutable fields
    - save / delete without ever raising to the caller
    - load everything parseable, skip the rest

    The store never mutates notes it is handed.
    """

    def __init__(self, notes_dir: Path, *, suffix: str = NOTE_FILE_SUFFIX):
        self.notes_dir = Path(notes_dir)
        self.suffix = suffix
        self._write_lock = threading.Lock()

    # ───────────────────────── public API ─────────────────────────

    def ensure_dir(self) -> bool:
        try:
            self.notes_dir.mkdir(parents=True, exist_ok=True)
            return True
        except OSError:
            log.exception("Cannot create notes directory: %s", self.notes_dir)
            return False

    def path_for(self, note: Note) -> Path:
        return self.notes_dir / note_filename(note, suffix=self.suffix)

    def save(self, note: Note) -> bool:
        """
        Serialize and write one note. Errors are logged and swallowed;
        returns False so the caller can keep the in-memory copy authoritative.
        """
        try:
            payload = note.to_json()
            # surrogates and the like fail here, before any file is touched
            payload.encode("utf-8")
        except (TypeError, ValueError, AttributeError):
            log.exception("Cannot serialize note id=%s", getattr(note, "id", "?"))
            return False

        path = self._safe_path_for(note)
        if path is None:
            return False

        with self._write_lock:
            try:
                atomic_write_text(path, payload, encoding="utf-8")
            except (OSError, UnicodeError):
                log.exception("Save failed: %s", path)
                return False

        log.debug("Note saved: id=%s path=%s", note.id, path)
        return True

    def load_all(self) -> list[Note]:
        """All parseable notes, oldest first. Corrupt or foreign files are skipped."""
        if not self.notes_dir.exists():
            self.ensure_dir()
            return []

        try:
            paths = sorted(p for p in self.notes_dir.glob(f"*{self.suffix}") if p.is_file())
        except OSError:
            log.exception("Cannot list notes directory: %s", self.notes_dir)
            return []

        notes: list[Note] = []
        skipped = 0
        for path in paths:
            try:
                notes.append(Note.from_json(path.read_text(encoding="utf-8")))
            except (OSError, ValueError, RecursionError) as e:
                skipped += 1
                log.debug("Skipping unreadable note file %s: %s", path, e)

        notes.sort(key=lambda n: n.creation_date)
        notes = self._drop_duplicate_ids(notes)
        log.info("Notes loaded: count=%d skipped=%d dir=%s", len(notes), skipped, self.notes_dir)
        return notes

    def delete(self, note: Note) -> bool:
        """Remove the note's file. A file that is already gone is fine."""
        path = self._safe_path_for(note)
        if path is None:
            return False
        with self._write_lock:
            try:
                path.unlink(missing_ok=True)
            except OSError:
                log.exception("Delete failed: %s", path)
                return False

        log.debug("Note file removed: id=%s path=%s", note.id, path)
        return True

    # ───────────────────────── internal ─────────────────────────

    def _safe_path_for(self, note: Note) -> Path | None:
        try:
            return self.path_for(note)
        except (TypeError, ValueError, AttributeError, OverflowError, OSError):
            log.exception("Cannot derive file name for note id=%s", getattr(note, "id", "?"))
            return None

    @staticmethod
    def _drop_duplicate_ids(notes: list[Note]) -> list[Note]:
        """Keep the oldest note per id; a copied file must not yield two tabs."""
        seen: set[str] = set()
        unique: list[Note] = []
        for note in notes:
            if note.id in seen:
                log.warning("Duplicate note id ignored: id=%s", note.id)
                continue
            seen.add(note.id)
            unique.append(note)
        return unique

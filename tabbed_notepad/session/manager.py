from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path

from tabbed_notepad.core.note import Note
from tabbed_notepad.core.text import clamp_title, display_title, normalize_text
from tabbed_notepad.storage.filesystem import write_plain_text
from tabbed_notepad.storage.note_store import NoteStore
from tabbed_notepad.storage.preferences import Preferences

log = logging.getLogger(__name__)


class DeleteState(Enum):
    IDLE = "idle"
    PENDING = "pending"


def default_title(number: int) -> str:
    return f"Note {number}"


class SessionManager:
    """
    Owns the open notes (one per tab) and the selection.

    The presentation layer calls these methods and renders the result;
    nothing here knows about widgets. Edits stay in memory until
    flush_all() runs; only add_tab(), reset_active() and deletions touch
    the store right away.
    """

    def __init__(self, store: NoteStore, preferences: Preferences):
        self._store = store
        self._prefs = preferences

        self._notes: list[Note] = []
        self._selected_id: str | None = None
        self._loaded = False

        self._delete_state = DeleteState.IDLE
        self._pending_delete_id: str | None = None

    # ───────────────────────── read accessors ─────────────────────────

    @property
    def notes(self) -> tuple[Note, ...]:
        return tuple(self._notes)

    @property
    def selected_id(self) -> str | None:
        return self._selected_id

    @property
    def selected_note(self) -> Note | None:
        return self.note(self._selected_id) if self._selected_id else None

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    @property
    def can_delete(self) -> bool:
        return len(self._notes) > 1

    @property
    def delete_state(self) -> DeleteState:
        return self._delete_state

    @property
    def pending_delete_id(self) -> str | None:
        return self._pending_delete_id

    def note(self, note_id: str) -> Note | None:
        for n in self._notes:
            if n.id == note_id:
                return n
        return None

    def index_of(self, note_id: str) -> int | None:
        for i, n in enumerate(self._notes):
            if n.id == note_id:
                return i
        return None

    def display_title(self, note: Note | str) -> str:
        if isinstance(note, str):
            found = self.note(note)
            return display_title(found.title if found else "")
        return display_title(note.title)

    # ───────────────────────── lifecycle ─────────────────────────

    def load_if_needed(self) -> bool:
        """
        Build the session from the store exactly once.
        Returns True when the load ran, False on every later call.
        """
        if self._loaded:
            return False
        self._loaded = True

        stored = self._store.load_all()
        known = {n.id for n in stored}
        # tabs created before the first load are kept
        self._notes = stored + [n for n in self._notes if n.id not in known]

        if not self._notes:
            seed = Note(title=default_title(1), text="")
            self._notes.append(seed)
            self._store.save(seed)
            log.info("Notes directory empty, seeded default note id=%s", seed.id)

        restored = self._prefs.last_selected_id()
        if restored and self.index_of(restored) is not None:
            self._set_selected(restored)
        elif self._selected_id and self.index_of(self._selected_id) is not None:
            self._set_selected(self._selected_id)
        else:
            self._set_selected(self._notes[0].id)

        log.info("Session loaded: tabs=%d selected=%s", len(self._notes), self._selected_id)
        return True

    def add_tab(self) -> Note:
        note = Note(title=default_title(len(self._notes) + 1), text="")
        self._notes.append(note)
        self._set_selected(note.id)
        # persisted now so an empty new tab survives a crash
        self._store.save(note)
        log.info("Tab added: id=%s title=%s", note.id, note.title)
        return note

    def select_tab(self, note_id: str) -> bool:
        if self.index_of(note_id) is None:
            log.warning("select_tab: unknown note id=%s", note_id)
            return False
        if note_id != self._selected_id:
            self._set_selected(note_id)
        return True

    # ───────────────────────── deletion ─────────────────────────

    def request_delete(self) -> bool:
        """Start the confirm step for the selected tab. Refused for the last tab."""
        if not self.can_delete or self._selected_id is None:
            log.info("Delete refused: tabs=%d", len(self._notes))
            return False
        self._delete_state = DeleteState.PENDING
        self._pending_delete_id = self._selected_id
        return True

    def confirm_delete(self) -> Note | None:
        if self._delete_state is not DeleteState.PENDING or self._pending_delete_id is None:
            return None
        note_id = self._pending_delete_id
        self._clear_pending_delete()
        return self.delete_note(note_id)

    def cancel_delete(self) -> None:
        self._clear_pending_delete()

    def delete_note(self, note_id: str) -> Note | None:
        """
        Remove a note from the session and from disk. If that empties the
        session a fresh default note takes its place.
        """
        idx = self.index_of(note_id)
        if idx is None:
            log.warning("delete_note: unknown note id=%s", note_id)
            return None

        removed = self._notes.pop(idx)
        if not self._store.delete(removed):
            log.warning("Note removed from session but its file remains: id=%s", removed.id)
        if self._pending_delete_id == removed.id:
            self._clear_pending_delete()

        if not self._notes:
            replacement = Note(title=default_title(1), text="")
            self._notes.append(replacement)
            self._store.save(replacement)
            self._set_selected(replacement.id)
        elif self._selected_id == removed.id:
            self._set_selected(self._notes[min(idx, len(self._notes) - 1)].id)

        log.info("Tab deleted: id=%s remaining=%d", removed.id, len(self._notes))
        return removed

    # ───────────────────────── editing ─────────────────────────

    def edit_text(self, note_id: str, text: str) -> bool:
        note = self.note(note_id)
        if note is None:
            log.warning("edit_text: unknown note id=%s", note_id)
            return False
        note.text = normalize_text(text)
        return True

    def edit_title(self, note_id: str, title: str) -> bool:
        note = self.note(note_id)
        if note is None:
            log.warning("edit_title: unknown note id=%s", note_id)
            return False
        note.title = clamp_title(normalize_text(title))
        return True

    def reset_active(self) -> bool:
        """Wipe the selected note's title and text and save it right away."""
        note = self.selected_note
        if note is None:
            return False
        note.title = ""
        note.text = ""
        log.info("Note reset: id=%s", note.id)
        return self._store.save(note)

    # ───────────────────────── persistence ─────────────────────────

    def flush_all(self) -> int:
        """Save every open note. Returns how many saves succeeded."""
        saved = sum(1 for n in list(self._notes) if self._store.save(n))
        if saved != len(self._notes):
            log.warning("Flush incomplete: saved=%d of %d", saved, len(self._notes))
        return saved

    def export_active(self, destination: Path | str) -> bool:
        """Write the selected note's body (no metadata) to destination."""
        note = self.selected_note
        if note is None:
            log.warning("Export skipped: no selected note")
            return False
        try:
            write_plain_text(Path(destination), note.text, encoding="utf-8")
        except (OSError, UnicodeError):
            log.exception("Export failed: id=%s dest=%s", note.id, destination)
            return False
        log.info("Note exported: id=%s dest=%s", note.id, destination)
        return True

    # ───────────────────────── internal ─────────────────────────

    def _set_selected(self, note_id: str) -> None:
        self._selected_id = note_id
        self._prefs.set_last_selected_id(note_id)

    def _clear_pending_delete(self) -> None:
        self._delete_state = DeleteState.IDLE
        self._pending_delete_id = None

from __future__ import annotations

import re
import unicodedata

from tabbed_notepad.core.note import Note
from tabbed_notepad.core.text import UNTITLED
from tabbed_notepad.settings import NOTE_FILE_SUFFIX

TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"
ID_PREFIX_LEN = 4

EXPORT_SUFFIX = ".txt"

WINDOWS_RESERVED_NAMES = {
    "con", "prn", "aux", "nul",
    *(f"com{i}" for i in range(1, 10)),
    *(f"lpt{i}" for i in range(1, 10)),
}

INVALID_CHARS_RE = re.compile(r'[<>:"/\\|?*\u0000-\u001f]')
WHITESPACE_RE = re.compile(r"\s+")


def note_filename(note: Note, *, suffix: str = NOTE_FILE_SUFFIX) -> str:
    """
    Deterministic file name for a note: local creation time to the second,
    plus the head of the id for notes created within the same second.
    Depends only on fields that never change.
    """
    timestamp = note.creation_date.astimezone().strftime(TIMESTAMP_FORMAT)
    return f"{timestamp}_{note.id[:ID_PREFIX_LEN]}{suffix}"


def export_filename(title: str | None, *, suffix: str = EXPORT_SUFFIX) -> str:
    """
    Suggested file name for exporting a note, derived from its title.

    Cross-platform safe: NFKC-normalized, no control or reserved
    characters, no Windows device names, never empty.
    """
    name = unicodedata.normalize("NFKC", title or "")
    name = "".join(ch for ch in name if unicodedata.category(ch)[0] != "C")
    name = WHITESPACE_RE.sub(" ", name.strip())
    name = name.replace("/", "-").replace("\\", "-")
    name = INVALID_CHARS_RE.sub("_", name)
    # Windows: no trailing dot or space
    name = name.rstrip(" .")

    if not name:
        name = UNTITLED

    if name.split(".", 1)[0].strip().lower() in WINDOWS_RESERVED_NAMES:
        name = f"_{name}"

    return f"{name}{suffix}"

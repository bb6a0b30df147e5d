from datetime import datetime

from tabbed_notepad.core.filenames import export_filename, note_filename
from tabbed_notepad.core.note import Note


def _note(**kw):
    created = datetime(2024, 3, 9, 7, 5, 2).astimezone()
    return Note(title="t", text="", id=kw.get("id", "abcdef-123"), creation_date=created)


def test_note_filename_format():
    assert note_filename(_note()) == "20240309_070502_abcd.json"


def test_note_filename_is_deterministic():
    note = _note()
    assert note_filename(note) == note_filename(note)


def test_note_filename_ignores_mutable_fields():
    note = _note()
    before = note_filename(note)
    note.title = "renamed"
    note.text = "edited"
    assert note_filename(note) == before


def test_same_second_notes_get_different_names():
    assert note_filename(_note(id="aaaa-1")) != note_filename(_note(id="bbbb-1"))


def test_export_filename_basic():
    assert export_filename("Shopping list") == "Shopping list.txt"


def test_export_filename_slashes_and_forbidden():
    assert export_filename("a/b\\c") == "a-b-c.txt"
    assert export_filename('x:y?"z') == "x_y__z.txt"


def test_export_filename_empty():
    assert export_filename("   ") == "Untitled.txt"
    assert export_filename(None) == "Untitled.txt"


def test_export_filename_reserved_windows():
    assert export_filename("CON").startswith("_")

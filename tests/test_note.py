import json
from datetime import datetime, timedelta, timezone

import pytest

from tabbed_notepad.core.note import Note, NoteFormatError


def test_defaults_are_generated():
    a = Note(title="A", text="")
    b = Note(title="A", text="")
    assert a.id and b.id
    assert a.id != b.id
    assert a.creation_date.tzinfo is not None


def test_equality_compares_every_field():
    created = datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc)
    a = Note(title="T", text="body", id="abcd-1", creation_date=created)
    b = Note(title="T", text="body", id="abcd-1", creation_date=created)
    assert a == b

    b.text = "other"
    assert a != b


def test_json_keeps_every_field():
    note = Note(title="Groceries", text="milk\neggs", id="1234-xyz")
    data = json.loads(note.to_json())
    assert set(data) == {"id", "title", "text", "creationDate"}
    assert Note.from_json(note.to_json()) == note


def test_from_dict_rejects_missing_keys():
    with pytest.raises(NoteFormatError):
        Note.from_dict({"id": "x", "title": "t"})


def test_from_dict_rejects_wrong_types():
    with pytest.raises(NoteFormatError):
        Note.from_dict({"id": "x", "title": 3, "text": "", "creationDate": "2024-01-01T00:00:00"})
    with pytest.raises(NoteFormatError):
        Note.from_dict({"id": "", "title": "t", "text": "", "creationDate": "2024-01-01T00:00:00"})


def test_from_dict_rejects_bad_date():
    with pytest.raises(NoteFormatError):
        Note.from_dict({"id": "x", "title": "t", "text": "", "creationDate": "yesterday"})


def test_from_json_rejects_garbage():
    with pytest.raises(NoteFormatError):
        Note.from_json("{not json")
    with pytest.raises(NoteFormatError):
        Note.from_json("[1, 2, 3]")


def test_naive_dates_are_read_as_local_time():
    note = Note.from_dict({"id": "x", "title": "t", "text": "", "creationDate": "2024-01-01T08:30:00"})
    assert note.creation_date.tzinfo is not None
    assert note.creation_date.replace(tzinfo=None) == datetime(2024, 1, 1, 8, 30)


def test_aware_dates_keep_their_offset():
    created = datetime(2024, 1, 1, 8, 30, tzinfo=timezone(timedelta(hours=3)))
    note = Note.from_dict({"id": "x", "title": "t", "text": "", "creationDate": created.isoformat()})
    assert note.creation_date == created


def test_from_dict_rejects_dates_that_cannot_be_localized():
    for raw in ("0001-01-01T00:00:00+23:59", "9999-12-31T23:59:59-23:59"):
        with pytest.raises(NoteFormatError):
            Note.from_dict({"id": "x", "title": "t", "text": "", "creationDate": raw})


def test_from_json_rejects_deep_nesting():
    with pytest.raises(NoteFormatError):
        Note.from_json("[" * 200000)

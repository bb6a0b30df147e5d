from __future__ import annotations

import json
import uuid
from dataclasses import dataclass, field
from datetime import datetime


class NoteFormatError(ValueError):
    """Raised when stored data cannot be turned into a Note."""


def generate_note_id() -> str:
    return str(uuid.uuid4())


def _now() -> datetime:
    return datetime.now().astimezone()


@dataclass
class Note:
    """
    One tab's content.

    id and creation_date are fixed at construction; they also determine
    the note's file name, so they must never be reassigned.
    """
    title: str
    text: str
    id: str = field(default_factory=generate_note_id)
    creation_date: datetime = field(default_factory=_now)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "text": self.text,
            "creationDate": self.creation_date.isoformat(),
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=2)

    @classmethod
    def from_dict(cls, data: dict) -> Note:
        if not isinstance(data, dict):
            raise NoteFormatError(f"expected an object, got {type(data).__name__}")

        missing = [k for k in ("id", "title", "text", "creationDate") if k not in data]
        if missing:
            raise NoteFormatError(f"missing keys: {', '.join(missing)}")

        note_id, title, text, raw_date = (
            data["id"], data["title"], data["text"], data["creationDate"],
        )
        if not isinstance(note_id, str) or not note_id.strip():
            raise NoteFormatError("id must be a non-empty string")
        if not isinstance(title, str) or not isinstance(text, str):
            raise NoteFormatError("title and text must be strings")
        if not isinstance(raw_date, str):
            raise NoteFormatError("creationDate must be an ISO 8601 string")

        try:
            created = datetime.fromisoformat(raw_date)
        except ValueError as e:
            raise NoteFormatError(f"bad creationDate: {raw_date!r}") from e
        try:
            # naive timestamps are local time; the file name needs local time too
            local = created.astimezone()
        except (OverflowError, ValueError, OSError) as e:
            raise NoteFormatError(f"creationDate out of range: {raw_date!r}") from e
        if created.tzinfo is None:
            created = local

        return cls(title=title, text=text, id=note_id, creation_date=created)

    @classmethod
    def from_json(cls, raw: str) -> Note:
        try:
            data = json.loads(raw)
        except (ValueError, RecursionError) as e:
            raise NoteFormatError(f"invalid JSON: {e}") from e
        return cls.from_dict(data)

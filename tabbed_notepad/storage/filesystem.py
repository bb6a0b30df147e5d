# tabbed_notepad/storage/filesystem.py

from __future__ import annotations

import os
import uuid
from pathlib import Path


def atomic_write_text(
    path: Path,
    text: str,
    *,
    encoding: str = "utf-8",
) -> None:
    """
    Atomic-ish file write:
    - write to temp file in same directory
    - fsync
    - replace()

    Prevents partial writes on crash/power loss.
    The temp name never ends in the note suffix, so a leftover is not
    picked up as a note.
    """
    path = Path(path)
    parent = path.parent
    parent.mkdir(parents=True, exist_ok=True)

    tmp_name = f".{path.name}.tmp-{uuid.uuid4().hex}"
    tmp_path = parent / tmp_name

    f = None
    try:
        f = open(tmp_path, "w", encoding=encoding, newline="")
        f.write(text)
        f.flush()
        os.fsync(f.fileno())
        f.close()
        f = None

        tmp_path.replace(path)

    finally:
        if f is not None:
            f.close()
        tmp_path.unlink(missing_ok=True)


def write_plain_text(path: Path, text: str, *, encoding: str = "utf-8") -> None:
    """Plain export write. The target directory must already exist."""
    Path(path).write_text(text, encoding=encoding)

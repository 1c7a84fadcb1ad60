from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable

from hsk_vault.config import NOTE_SUFFIX

def ensure_dir(p: Path) -> None:
    p.mkdir(parents=True, exist_ok=True)

def iter_note_files(root: Path) -> Iterable[Path]:
    """Note files directly inside root; subdirectories such as .obsidian are left alone."""
    for p in sorted(root.iterdir()):
        if p.suffix == NOTE_SUFFIX and p.is_file():
            yield p

def read_json(p: Path) -> Any:
    return json.loads(p.read_bytes().decode("utf-8"))

def write_text_utf8(p: Path, s: str) -> None:
    p.write_text(s, encoding="utf-8", newline="\n")

from __future__ import annotations

from hsk_vault.config import NOTE_SUFFIX

def note_name(filename: str) -> str:
    """Obsidian link target for a note file: the filename without its extension."""
    if filename.endswith(NOTE_SUFFIX):
        return filename[: -len(NOTE_SUFFIX)]
    return filename

def wikilink(target: str) -> str:
    return f"[[{target}]]"

def word_filename(form: str, pinyin: str, pinyin_key: str) -> str:
    # 学习 (xué xí), xuexi.md
    return f"{form} ({pinyin}), {pinyin_key}{NOTE_SUFFIX}"

def placeholder_filename(character: str) -> str:
    return f"{character}{NOTE_SUFFIX}"

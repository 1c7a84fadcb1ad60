from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Optional, Sequence, Tuple

from hsk_vault.config import FORM_SIMPLIFIED, VALID_LEVELS
from hsk_vault.core.pinyin import clean_pinyin, split_into_characters
from hsk_vault.io.fs import read_json
from hsk_vault.logging import get_logger

log = get_logger()

class LoadError(RuntimeError):
    """No usable vocabulary could be loaded for the requested levels."""

@dataclass(frozen=True)
class Word:
    simplified: str
    traditional: str
    pinyin: str
    pinyin_key: str
    meaning: str
    all_meanings: Tuple[str, ...]
    characters: Tuple[str, ...]  # split from the active form
    level: int

    def form(self, form_type: str) -> str:
        return self.simplified if form_type == FORM_SIMPLIFIED else self.traditional

@dataclass(frozen=True)
class LoadResult:
    words: List[Word]
    skipped: int
    levels_loaded: Tuple[int, ...]

def level_path(data_dir: Path, level: int) -> Path:
    return Path(data_dir) / f"{level}.json"

def load_level(data_dir: Path, level: int) -> List[Any]:
    if level not in VALID_LEVELS:
        raise ValueError(f"HSK level must be between 1 and 7, got {level}")
    path = level_path(data_dir, level)
    data = read_json(path)
    if not isinstance(data, list):
        raise ValueError(f"{path}: expected a JSON array of words")
    return data

def load_selected_levels(data_dir: Path, levels: Sequence[int]) -> List[Tuple[Any, int]]:
    """Raw records paired with the level they came from. Unreadable levels are skipped."""
    records: List[Tuple[Any, int]] = []
    for level in levels:
        try:
            level_data = load_level(data_dir, level)
        except (OSError, ValueError) as e:
            log.warning(f"could not load HSK level {level}: {e}")
            continue
        records.extend((rec, level) for rec in level_data)
        log.info(f"loaded HSK level {level}: {len(level_data)} words")
    log.info(f"total: {len(records)} words")
    return records

def parse_word(record: Any, form_type: str, level: int) -> Optional[Word]:
    """
    One raw record -> Word, or None when the record is unusable:
    - no forms, or a first form without traditional/pinyin
    - empty meanings list
    - active form with no characters
    """
    if not isinstance(record, dict):
        return None
    forms = record.get("forms")
    if not isinstance(forms, list) or not forms:
        return None

    try:
        simplified = record["simplified"]
        first = forms[0]
        traditional = first["traditional"]
        pinyin = first["transcriptions"]["pinyin"]
        meanings = first["meanings"]
    except (KeyError, TypeError):
        return None

    # null or non-text fields make the record unusable
    if not all(isinstance(x, str) for x in (simplified, traditional, pinyin)):
        return None
    if not isinstance(meanings, list) or not meanings:
        return None
    if not all(isinstance(m, str) for m in meanings):
        return None
    all_meanings = tuple(meanings)

    active = simplified if form_type == FORM_SIMPLIFIED else traditional
    characters = tuple(split_into_characters(active))
    if not characters:
        return None

    return Word(
        simplified=simplified,
        traditional=traditional,
        pinyin=pinyin,
        pinyin_key=clean_pinyin(pinyin),
        meaning=all_meanings[0],
        all_meanings=all_meanings,
        characters=characters,
        level=level,
    )

def parse_records(records: Sequence[Tuple[Any, int]], form_type: str) -> Tuple[List[Word], int]:
    words: List[Word] = []
    skipped = 0
    for record, level in records:
        word = parse_word(record, form_type, level)
        if word is None:
            skipped += 1
            continue
        words.append(word)
    return words, skipped

def load_words(data_dir: Path, levels: Sequence[int], form_type: str) -> LoadResult:
    records = load_selected_levels(data_dir, levels)
    if not records:
        raise LoadError(f"no HSK data could be loaded from {data_dir} for levels {list(levels)}")

    words, skipped = parse_records(records, form_type)
    log.info(f"parsed {len(words)} words")
    if skipped:
        log.info(f"skipped {skipped} invalid entries")
    if not words:
        raise LoadError(f"none of the {len(records)} records in {data_dir} could be parsed")

    levels_loaded = tuple(sorted({lv for _, lv in records}))
    return LoadResult(words=words, skipped=skipped, levels_loaded=levels_loaded)

from __future__ import annotations

from typing import List, Tuple

from hsk_vault.config import DEFAULT_LEVELS, FORM_SIMPLIFIED, FORM_TRADITIONAL, VALID_LEVELS

def _parse_raw_levels(text: str) -> List[int]:
    if "-" in text:
        parts = text.split("-")
        if len(parts) != 2:
            return []
        start, end = int(parts[0].strip()), int(parts[1].strip())
        return list(range(start, end + 1))
    if "," in text:
        return [int(p.strip()) for p in text.split(",") if p.strip()]
    return [int(text)]

def parse_levels(text: str) -> Tuple[Tuple[int, ...], bool]:
    """
    Parse a level selection: "1-4", "1,3,5" or "6".

    Levels outside 1-7 are dropped. Returns (levels, used_default); empty or
    unusable input yields DEFAULT_LEVELS with used_default=True.
    """
    s = (text or "").strip()
    if not s:
        return DEFAULT_LEVELS, True
    try:
        raw = _parse_raw_levels(s)
    except ValueError:
        return DEFAULT_LEVELS, True

    levels = sorted({lv for lv in raw if lv in VALID_LEVELS})
    if not levels:
        return DEFAULT_LEVELS, True
    return tuple(levels), False

def parse_form(text: str) -> str:
    # "2" picks simplified; anything else keeps the traditional default
    return FORM_SIMPLIFIED if (text or "").strip() == "2" else FORM_TRADITIONAL

from __future__ import annotations

import re
from typing import List

# Spaces and the punctuation that shows up in HSK pinyin ("yī diǎnr", "bù-yòng").
_STRIP = re.compile(r"[\s.,;:!?\-()]")

_TONE_MAP = str.maketrans({
    "ā": "a", "á": "a", "ǎ": "a", "à": "a",
    "ē": "e", "é": "e", "ě": "e", "è": "e",
    "ī": "i", "í": "i", "ǐ": "i", "ì": "i",
    "ō": "o", "ó": "o", "ǒ": "o", "ò": "o",
    "ū": "u", "ú": "u", "ǔ": "u", "ù": "u",
    "ü": "v", "ǖ": "v", "ǘ": "v", "ǚ": "v", "ǜ": "v",
})

def clean_pinyin(pinyin: str) -> str:
    """
    Filename-safe key for a pinyin reading:
    - drop whitespace and punctuation
    - strip tone marks (ü -> v)
    - lowercase
    """
    s = _STRIP.sub("", pinyin or "")
    return s.translate(_TONE_MAP).lower()

def split_into_characters(word: str) -> List[str]:
    return [ch for ch in (word or "") if not ch.isspace()]

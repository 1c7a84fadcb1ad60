from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Sequence

from hsk_vault.config import FORM_SIMPLIFIED
from hsk_vault.core.links import wikilink
from hsk_vault.core.markdown import bullet_list, normalize_md, section
from hsk_vault.stages.index import SymbolIndex, SymbolInfo
from hsk_vault.stages.load import Word
from hsk_vault.stages.resolve import resolve_link

WordTargets = Mapping[str, str]  # active form -> note name of its word note

def level_tag(level: int) -> str:
    return f"#hsk{level}"

def _uniq(xs: Sequence[str]) -> List[str]:
    out: List[str] = []
    seen = set()
    for x in xs:
        if x not in seen:
            out.append(x)
            seen.add(x)
    return out

def _used_in_lines(compounds: Sequence[str], word_targets: Optional[WordTargets], *, exclude: str = "") -> List[str]:
    if not word_targets:
        return []
    links = [
        wikilink(word_targets[c])
        for c in _uniq(compounds)
        if c != exclude and c in word_targets
    ]
    return bullet_list(links)

def _component_lines(word: Word, index: SymbolIndex) -> List[str]:
    lines: List[str] = []
    for ch in word.characters:
        link = wikilink(resolve_link(ch, index))
        info = index.get(ch)
        if info is None:
            lines.append(f"- {link}")
        elif info.is_standalone_word:
            lines.append(f"- {link} (standalone word)")
        else:
            lines.append(f"- {link} (character component)")
    return lines

def render_word_note(word: Word, index: SymbolIndex, word_targets: Optional[WordTargets] = None) -> str:
    """
    Body of a word note, in order:
      level tag, primary meaning, all meanings (when >1), character components
      (multi-character words only). Single-character words additionally list
      the compounds they appear in when word_targets is given.
    """
    lines = [level_tag(word.level), word.meaning]

    if len(word.all_meanings) > 1:
        lines += section("### All meanings", bullet_list(word.all_meanings))

    if len(word.characters) > 1:
        lines += section("## Character Components", _component_lines(word, index))
    else:
        info = index.get(word.characters[0])
        if info is not None:
            own = "".join(word.characters)
            lines += section("## Used in", _used_in_lines(info.compounds_using_it, word_targets, exclude=own))

    return normalize_md("\n".join(lines))

def render_symbol_note(info: SymbolInfo, word_targets: Optional[WordTargets] = None) -> str:
    lines = [
        " ".join(level_tag(lv) for lv in info.levels),
        f"*Note: {info.character} does not appear as a standalone word in the selected HSK levels.*",
    ]
    lines += section("### Meanings in compounds", bullet_list(sorted(info.all_meanings)))
    lines += section("## Used in", _used_in_lines(info.compounds_using_it, word_targets))
    return normalize_md("\n".join(lines))

def word_properties(word: Word, form_type: str) -> Dict[str, Any]:
    other = word.traditional if form_type == FORM_SIMPLIFIED else word.simplified
    active = word.form(form_type)
    aliases = [word.pinyin]
    if other != active:
        aliases.append(other)
    return {
        "simplified": word.simplified,
        "traditional": word.traditional,
        "pinyin": word.pinyin,
        "hsk": word.level,
        "aliases": aliases,
    }

def symbol_properties(info: SymbolInfo) -> Dict[str, Any]:
    return {
        "character": info.character,
        "hsk": list(info.levels),
    }

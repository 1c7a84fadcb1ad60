from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Dict, FrozenSet, Iterable, Optional, Sequence, Tuple

from hsk_vault.core.links import placeholder_filename, word_filename
from hsk_vault.logging import get_logger
from hsk_vault.stages.load import Word

log = get_logger()

SymbolIndex = Dict[str, "SymbolInfo"]

@dataclass(frozen=True)
class SymbolInfo:
    character: str
    is_standalone_word: bool
    filename: str
    all_meanings: FrozenSet[str]
    levels: Tuple[int, ...]              # ascending, unique
    compounds_using_it: Tuple[str, ...]  # active forms in load order, repeats kept

def _merge_levels(levels: Tuple[int, ...], extra: Iterable[int]) -> Tuple[int, ...]:
    return tuple(sorted(set(levels).union(extra)))

def canonical_filename(word: Word, form_type: str) -> str:
    return word_filename(word.form(form_type), word.pinyin, word.pinyin_key)

def build_word_lookup(words: Sequence[Word], form_type: str) -> Dict[str, Word]:
    # duplicate active forms: the last one loaded wins
    return {w.form(form_type): w for w in words}

def _observe(
    existing: Optional[SymbolInfo],
    character: str,
    word: Word,
    standalone: Optional[Word],
    form_type: str,
) -> SymbolInfo:
    """
    Fold one (word, character) occurrence into the entry for that character.

    standalone is the Word whose active form is exactly this character, if any.
    Entries are replaced, never mutated.
    """
    compound = word.form(form_type)
    meanings = set(word.all_meanings)
    if standalone is not None:
        meanings.update(standalone.all_meanings)

    if existing is None:
        return SymbolInfo(
            character=character,
            is_standalone_word=standalone is not None,
            filename=(
                canonical_filename(standalone, form_type)
                if standalone is not None
                else placeholder_filename(character)
            ),
            all_meanings=frozenset(meanings),
            levels=(word.level,),
            compounds_using_it=(compound,),
        )

    updated = replace(
        existing,
        all_meanings=existing.all_meanings | meanings,
        levels=_merge_levels(existing.levels, [word.level]),
        compounds_using_it=existing.compounds_using_it + (compound,),
    )
    # a character that turns out to be a word is upgraded, and never downgraded
    if standalone is not None and not existing.is_standalone_word:
        updated = replace(
            updated,
            is_standalone_word=True,
            filename=canonical_filename(standalone, form_type),
        )
    return updated

def build_index(words: Sequence[Word], form_type: str) -> SymbolIndex:
    """
    One SymbolInfo per distinct character across all words.

    The whole word list is consumed before anything is returned, so every
    entry already reflects whether its character is a standalone word.
    """
    lookup = build_word_lookup(words, form_type)
    index: SymbolIndex = {}

    for word in words:
        for ch in word.characters:
            index[ch] = _observe(index.get(ch), ch, word, lookup.get(ch), form_type)

    standalone = sum(1 for info in index.values() if info.is_standalone_word)
    log.info(f"mapped {len(index)} characters ({standalone} standalone)")
    return index

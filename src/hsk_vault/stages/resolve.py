from __future__ import annotations

from typing import Mapping

from hsk_vault.core.links import note_name
from hsk_vault.stages.index import SymbolInfo

def resolve_link(character: str, index: Mapping[str, SymbolInfo]) -> str:
    """
    Note name a character should link to: the word note when the character is
    a standalone word, otherwise its own placeholder note. Characters missing
    from the index fall back to the bare character.
    """
    info = index.get(character)
    if info is not None and info.is_standalone_word:
        return note_name(info.filename)
    return character

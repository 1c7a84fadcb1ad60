from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from hsk_vault.config import BuildConfig
from hsk_vault.logging import get_logger
from hsk_vault.stages.index import build_index
from hsk_vault.stages.load import load_words
from hsk_vault.stages.write import write_vault

log = get_logger()

@dataclass(frozen=True)
class BuildStats:
    words: int
    skipped: int
    levels_loaded: Tuple[int, ...]
    characters: int
    standalone: int
    written: int
    failed: int
    removed: int

def build(cfg: BuildConfig) -> BuildStats:
    """
    Load -> index -> write. The index is complete before the first file is
    written; a later word can still turn an earlier placeholder into a word link.

    Raises LoadError when nothing usable could be loaded; the vault is then
    left untouched.
    """
    loaded = load_words(cfg.data_dir, cfg.levels, cfg.form)
    index = build_index(loaded.words, cfg.form)

    ws = write_vault(
        loaded.words,
        index,
        cfg.output_vault,
        cfg.form,
        frontmatter=cfg.frontmatter,
    )

    return BuildStats(
        words=len(loaded.words),
        skipped=loaded.skipped,
        levels_loaded=loaded.levels_loaded,
        characters=len(index),
        standalone=sum(1 for info in index.values() if info.is_standalone_word),
        written=ws.written,
        failed=ws.failed,
        removed=ws.removed,
    )

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Sequence, Set

from hsk_vault.core.links import note_name
from hsk_vault.core.yaml import dump_frontmatter
from hsk_vault.io.fs import ensure_dir, iter_note_files, write_text_utf8
from hsk_vault.logging import get_logger
from hsk_vault.stages.index import SymbolIndex, build_word_lookup, canonical_filename
from hsk_vault.stages.load import Word
from hsk_vault.stages.render import (
    render_symbol_note,
    render_word_note,
    symbol_properties,
    word_properties,
)

log = get_logger()

@dataclass(frozen=True)
class WriteStats:
    written: int
    failed: int
    removed: int

def word_targets(words: Sequence[Word], form_type: str) -> Dict[str, str]:
    return {
        form: note_name(canonical_filename(w, form_type))
        for form, w in build_word_lookup(words, form_type).items()
    }

def remove_orphans(output_dir: Path, valid_filenames: Set[str]) -> int:
    """
    Delete note files that no longer belong to the vault, e.g. a placeholder
    left from a run where its character was not yet a standalone word.
    """
    removed = 0
    for p in iter_note_files(output_dir):
        if p.name in valid_filenames:
            continue
        try:
            p.unlink()
        except OSError as e:
            log.warning(f"could not remove orphaned file {p.name}: {e}")
            continue
        removed += 1
    if removed:
        log.info(f"removed {removed} orphaned files")
    return removed

def write_vault(
    words: Sequence[Word],
    index: SymbolIndex,
    output_dir: Path,
    form_type: str,
    *,
    frontmatter: bool = True,
) -> WriteStats:
    ensure_dir(output_dir)
    targets = word_targets(words, form_type)

    written = 0
    failed = 0
    valid_filenames: Set[str] = set()

    def emit(filename: str, props, body: str) -> None:
        nonlocal written, failed
        path = output_dir / filename
        if path.parent != output_dir:
            # "/" in a form or reading would point outside the vault
            log.warning(f"refusing to write {filename!r}: not a plain file name")
            failed += 1
            return
        # kept valid even if the write fails, so an older copy is not swept away
        valid_filenames.add(filename)
        text = (dump_frontmatter(props) if frontmatter else "") + body
        try:
            write_text_utf8(path, text)
        except OSError as e:
            log.warning(f"could not create file {filename}: {e}")
            failed += 1
            return
        written += 1

    for word in words:
        emit(
            canonical_filename(word, form_type),
            word_properties(word, form_type),
            render_word_note(word, index, targets),
        )

    for info in index.values():
        if info.is_standalone_word:
            continue
        emit(info.filename, symbol_properties(info), render_symbol_note(info, targets))

    removed = remove_orphans(output_dir, valid_filenames)
    log.info(f"wrote {written} files to {output_dir}" + (f" ({failed} failed)" if failed else ""))
    return WriteStats(written=written, failed=failed, removed=removed)

from __future__ import annotations

import shutil
from dataclasses import dataclass
from pathlib import Path

from hsk_vault.io.fs import iter_note_files
from hsk_vault.logging import get_logger

log = get_logger()

OBSIDIAN_DIR = ".obsidian"

@dataclass(frozen=True)
class CleanPlan:
    notes: int
    obsidian_dir: bool

    @property
    def empty(self) -> bool:
        return self.notes == 0 and not self.obsidian_dir

def plan_clean(vault: Path) -> CleanPlan:
    if not vault.is_dir():
        raise FileNotFoundError(f"vault directory does not exist: {vault}")
    return CleanPlan(
        notes=sum(1 for _ in iter_note_files(vault)),
        obsidian_dir=(vault / OBSIDIAN_DIR).is_dir(),
    )

def clean_vault(vault: Path) -> int:
    """Delete the generated notes and the .obsidian settings folder. Returns notes removed."""
    removed = 0
    for p in iter_note_files(vault):
        try:
            p.unlink()
        except OSError as e:
            log.warning(f"could not remove {p.name}: {e}")
            continue
        removed += 1

    obsidian = vault / OBSIDIAN_DIR
    if obsidian.is_dir():
        try:
            shutil.rmtree(obsidian)
        except OSError as e:
            log.warning(f"could not remove {OBSIDIAN_DIR}: {e}")
        else:
            log.info(f"removed {OBSIDIAN_DIR} directory")

    log.info(f"removed {removed} notes from {vault}")
    return removed

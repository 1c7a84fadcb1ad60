from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

FORM_TRADITIONAL = "traditional"
FORM_SIMPLIFIED = "simplified"
FORMS = (FORM_TRADITIONAL, FORM_SIMPLIFIED)

VALID_LEVELS = range(1, 8)
DEFAULT_LEVELS: Tuple[int, ...] = (1, 2, 3, 4)

DEFAULT_DATA_DIR = Path("data") / "hsk_raw"
DEFAULT_OUTPUT_DIR = Path("ObsidianVault")

NOTE_SUFFIX = ".md"

@dataclass(frozen=True)
class BuildConfig:
    data_dir: Path
    output_vault: Path
    levels: Tuple[int, ...] = DEFAULT_LEVELS
    form: str = FORM_TRADITIONAL      # which written form is split into characters
    frontmatter: bool = True          # prepend YAML front matter to every note

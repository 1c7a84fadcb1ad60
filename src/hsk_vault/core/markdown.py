from __future__ import annotations

import re
from typing import Iterable, List

def normalize_md(md: str) -> str:
    md = md.replace("\r\n", "\n").replace("\r", "\n")
    lines = [ln.rstrip() for ln in md.split("\n")]
    md = "\n".join(lines).strip("\n")
    md = re.sub(r"\n{3,}", "\n\n", md)
    return md + "\n"

def bullet_list(items: Iterable[str]) -> List[str]:
    return [f"- {item}" for item in items]

def section(heading: str, lines: List[str]) -> List[str]:
    """A heading followed by its lines; nothing at all when there are no lines."""
    if not lines:
        return []
    return ["", heading] + lines

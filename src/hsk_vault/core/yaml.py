from __future__ import annotations

from typing import Any, Dict

import yaml

def _nullish(v: Any) -> bool:
    if v is None:
        return True
    if isinstance(v, str) and v.strip().lower() in {"null", "none", ""}:
        return True
    if isinstance(v, (list, tuple)) and not v:
        return True
    return False

def _clean_data(data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Drop null/empty placeholders; tuples become lists so safe_dump accepts them.
    """
    out: Dict[str, Any] = {}
    for k, v in (data or {}).items():
        if _nullish(v):
            continue
        if isinstance(v, tuple):
            v = list(v)
        out[k] = v
    return out

def dump_frontmatter(data: Dict[str, Any]) -> str:
    data = _clean_data(data)
    if not data:
        return ""
    y = yaml.safe_dump(
        data,
        sort_keys=True,
        allow_unicode=True,
        default_flow_style=False,
        width=88,
    ).strip()
    return f"---\n{y}\n---\n\n"

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Tuple

from hsk_vault.config import (
    DEFAULT_DATA_DIR,
    DEFAULT_LEVELS,
    DEFAULT_OUTPUT_DIR,
    FORMS,
    BuildConfig,
)
from hsk_vault.core.selection import parse_form, parse_levels
from hsk_vault.logging import get_logger
from hsk_vault.pipeline.build import build
from hsk_vault.stages.clean import OBSIDIAN_DIR, clean_vault, plan_clean
from hsk_vault.stages.load import LoadError

log = get_logger()

def _ask(prompt: str) -> str:
    try:
        return input(prompt)
    except EOFError:
        return ""

def prompt_levels() -> Tuple[int, ...]:
    print("HSK Character Map - Level Selection")
    print("Available HSK levels: 1-7")
    print("Examples: 1-4 | 1,3,5 | 6")
    return _levels_from(_ask("Enter HSK levels to import: "))

def prompt_form() -> str:
    print("\nCharacter Type Selection")
    print("1 - Traditional (default)")
    print("2 - Simplified")
    return parse_form(_ask("Select character type (1-2): "))

def _levels_from(text: str) -> Tuple[int, ...]:
    levels, used_default = parse_levels(text)
    if used_default:
        default = "-".join(str(x) for x in (DEFAULT_LEVELS[0], DEFAULT_LEVELS[-1]))
        log.warning(f"no valid HSK levels in {text!r}; using default: {default}")
    return levels

def _clean(vault: Path, *, assume_yes: bool) -> int:
    try:
        plan = plan_clean(vault)
    except FileNotFoundError as e:
        log.error(str(e))
        return 1

    if plan.empty:
        log.info(f"no notes or {OBSIDIAN_DIR} directory found in {vault}")
        return 0

    print("Items to delete:")
    if plan.notes:
        print(f"- {plan.notes} .md files")
    if plan.obsidian_dir:
        print(f"- {OBSIDIAN_DIR} directory")

    if not assume_yes and _ask("Do you want to delete these items? (y/N): ").strip().lower() not in {"y", "yes"}:
        log.info("operation cancelled")
        return 0

    clean_vault(vault)
    return 0

def main(argv=None) -> int:
    p = argparse.ArgumentParser(prog="hsk-vault")
    sub = p.add_subparsers(dest="cmd", required=True)

    b = sub.add_parser("build", help="Build an Obsidian vault from HSK vocabulary")
    b.add_argument("--data-dir", default=str(DEFAULT_DATA_DIR), help="Directory holding <level>.json files (default: data/hsk_raw)")
    b.add_argument("--output", default=str(DEFAULT_OUTPUT_DIR), help="Output vault directory (default: ObsidianVault)")
    b.add_argument("--levels", default=None, help="HSK levels: 1-4 | 1,3,5 | 6 (prompted when omitted)")
    b.add_argument("--form", choices=FORMS, default=None, help="Character set used for splitting and filenames (prompted when omitted)")
    b.add_argument("--no-frontmatter", action="store_true", help="Do not write YAML front matter")

    c = sub.add_parser("clean", help="Delete generated notes and the .obsidian folder from a vault")
    c.add_argument("--output", default=str(DEFAULT_OUTPUT_DIR), help="Vault directory (default: ObsidianVault)")
    c.add_argument("--yes", "-y", action="store_true", help="Do not ask for confirmation")

    args = p.parse_args(argv)

    if args.cmd == "clean":
        return _clean(Path(args.output).expanduser().resolve(), assume_yes=bool(args.yes))

    levels = _levels_from(args.levels) if args.levels is not None else prompt_levels()
    form = args.form if args.form is not None else prompt_form()
    log.info(f"selected HSK levels: {', '.join(str(lv) for lv in levels)}; characters: {form}")

    cfg = BuildConfig(
        data_dir=Path(args.data_dir).expanduser().resolve(),
        output_vault=Path(args.output).expanduser().resolve(),
        levels=levels,
        form=form,
        frontmatter=not args.no_frontmatter,
    )

    try:
        stats = build(cfg)
    except LoadError as e:
        log.error(str(e))
        log.error(f"expected files like {cfg.data_dir / '1.json'}, {cfg.data_dir / '2.json'}, ...")
        return 1

    log.info(
        "done: levels=%s words=%d skipped=%d characters=%d standalone=%d written=%d failed=%d removed=%d output=%s",
        ",".join(str(lv) for lv in stats.levels_loaded), stats.words, stats.skipped, stats.characters, stats.standalone,
        stats.written, stats.failed, stats.removed, cfg.output_vault,
    )
    return 0

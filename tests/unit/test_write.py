import tempfile
from pathlib import Path

import hsk_vault.stages.write as write_stage
from hsk_vault.config import FORM_SIMPLIFIED
from hsk_vault.core.pinyin import clean_pinyin, split_into_characters
from hsk_vault.stages.index import build_index
from hsk_vault.stages.load import Word
from hsk_vault.stages.write import write_vault

def make_word(form: str, pinyin: str, meanings, level: int = 1) -> Word:
    return Word(
        simplified=form,
        traditional=form,
        pinyin=pinyin,
        pinyin_key=clean_pinyin(pinyin),
        meaning=meanings[0],
        all_meanings=tuple(meanings),
        characters=tuple(split_into_characters(form)),
        level=level,
    )

WORDS = [
    make_word("学习", "xué xí", ["to study"]),
    make_word("学", "xué", ["to learn; school"]),
    make_word("练习", "liàn xí", ["to practice"]),
]

def test_failed_write_is_counted_and_keeps_older_copy(monkeypatch) -> None:
    real_write = write_stage.write_text_utf8

    def flaky_write(p: Path, s: str) -> None:
        if p.name == "学 (xué), xue.md":
            raise OSError("disk full")
        real_write(p, s)

    monkeypatch.setattr(write_stage, "write_text_utf8", flaky_write)

    with tempfile.TemporaryDirectory() as td:
        out = Path(td)
        (out / "学 (xué), xue.md").write_text("old\n", encoding="utf-8")

        stats = write_vault(WORDS, build_index(WORDS, FORM_SIMPLIFIED), out, FORM_SIMPLIFIED, frontmatter=False)

        assert stats.written == 4
        assert stats.failed == 1
        assert stats.removed == 0
        assert (out / "学 (xué), xue.md").read_text(encoding="utf-8") == "old\n"
        assert sorted(p.name for p in out.glob("*.md")) == sorted([
            "学习 (xué xí), xuexi.md",
            "学 (xué), xue.md",
            "练习 (liàn xí), lianxi.md",
            "习.md",
            "练.md",
        ])

def test_names_with_path_separators_are_not_written() -> None:
    words = [make_word("a/b", "x", ["slash"])]

    with tempfile.TemporaryDirectory() as td:
        out = Path(td)

        stats = write_vault(words, build_index(words, FORM_SIMPLIFIED), out, FORM_SIMPLIFIED, frontmatter=False)

        # the word note "a/b (x), x.md" and the placeholder "/.md" are refused
        assert stats.failed == 2
        assert stats.written == 2
        assert sorted(p.name for p in out.iterdir()) == ["a.md", "b.md"]

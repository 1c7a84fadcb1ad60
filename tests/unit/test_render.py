from hsk_vault.config import FORM_SIMPLIFIED, FORM_TRADITIONAL
from hsk_vault.core.pinyin import clean_pinyin, split_into_characters
from hsk_vault.stages.index import build_index
from hsk_vault.stages.load import Word
from hsk_vault.stages.render import (
    render_symbol_note,
    render_word_note,
    symbol_properties,
    word_properties,
)
from hsk_vault.stages.write import word_targets

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

XUEXI = make_word("学习", "xué xí", ["to study"])
XUE = make_word("学", "xué", ["to learn; school"])
LIANXI = make_word("练习", "liàn xí", ["to practice"])
WORDS = [XUEXI, XUE, LIANXI]

def test_compound_note_links_components() -> None:
    index = build_index(WORDS, FORM_SIMPLIFIED)
    assert render_word_note(XUEXI, index) == (
        "#hsk1\n"
        "to study\n"
        "\n"
        "## Character Components\n"
        "- [[学 (xué), xue]] (standalone word)\n"
        "- [[习]] (character component)\n"
    )

def test_component_links_upgrade_when_character_is_a_word() -> None:
    xi = make_word("习", "xí", ["habit"])
    index = build_index(WORDS + [xi], FORM_SIMPLIFIED)
    note = render_word_note(XUEXI, index)
    assert "- [[习 (xí), xi]] (standalone word)" in note
    assert "[[习]]" not in note

def test_all_meanings_block_only_for_multiple_meanings() -> None:
    word = make_word("学生", "xué sheng", ["student", "pupil"], level=3)
    index = build_index([word], FORM_SIMPLIFIED)
    note = render_word_note(word, index)

    assert note.startswith("#hsk3\nstudent\n\n### All meanings\n- student\n- pupil\n")
    assert "### All meanings" not in render_word_note(XUE, build_index([XUE], FORM_SIMPLIFIED))

def test_repeated_characters_are_listed_each_time() -> None:
    word = make_word("谢谢", "xiè xie", ["thanks"])
    note = render_word_note(word, build_index([word], FORM_SIMPLIFIED))
    assert note.count("- [[谢]] (character component)") == 2

def test_components_missing_from_index_get_plain_links() -> None:
    note = render_word_note(XUEXI, {})
    assert "- [[学]]\n- [[习]]\n" in note

def test_single_character_note_lists_compounds() -> None:
    index = build_index(WORDS, FORM_SIMPLIFIED)
    targets = word_targets(WORDS, FORM_SIMPLIFIED)
    assert render_word_note(XUE, index, targets) == (
        "#hsk1\n"
        "to learn; school\n"
        "\n"
        "## Used in\n"
        "- [[学习 (xué xí), xuexi]]\n"
    )

def test_single_character_note_without_compounds() -> None:
    index = build_index([XUE], FORM_SIMPLIFIED)
    targets = word_targets([XUE], FORM_SIMPLIFIED)
    assert render_word_note(XUE, index, targets) == "#hsk1\nto learn; school\n"

def test_placeholder_note_aggregates_meanings_and_compounds() -> None:
    index = build_index(WORDS, FORM_SIMPLIFIED)
    targets = word_targets(WORDS, FORM_SIMPLIFIED)
    assert render_symbol_note(index["习"], targets) == (
        "#hsk1\n"
        "*Note: 习 does not appear as a standalone word in the selected HSK levels.*\n"
        "\n"
        "### Meanings in compounds\n"
        "- to practice\n"
        "- to study\n"
        "\n"
        "## Used in\n"
        "- [[学习 (xué xí), xuexi]]\n"
        "- [[练习 (liàn xí), lianxi]]\n"
    )

def test_placeholder_note_tags_every_level() -> None:
    words = [make_word("学习", "xué xí", ["to study"], level=2), make_word("练习", "liàn xí", ["to practice"], level=5)]
    index = build_index(words, FORM_SIMPLIFIED)
    assert render_symbol_note(index["习"]).startswith("#hsk2 #hsk5\n")

def test_properties() -> None:
    word = Word(
        simplified="学习",
        traditional="學習",
        pinyin="xué xí",
        pinyin_key="xuexi",
        meaning="to study",
        all_meanings=("to study",),
        characters=("學", "習"),
        level=1,
    )
    props = word_properties(word, FORM_TRADITIONAL)
    assert props["aliases"] == ["xué xí", "学习"]
    assert props["hsk"] == 1

    index = build_index(WORDS, FORM_SIMPLIFIED)
    assert word_properties(XUE, FORM_SIMPLIFIED)["aliases"] == ["xué"]
    assert symbol_properties(index["习"]) == {"character": "习", "hsk": [1]}

# tests/test_lexicon_classifier.py
from __future__ import annotations

import json
from pathlib import Path

import pytest

"""
classifier tests
================

Does: Validate vocabulary loading from the data directory, matcher construction,
      priority-based overlap resolution, boundary modes, and the flattened
      completion dictionary.
"""

import css_assist
from css_assist.general.utils import ConfigFileNotFound, clear_config_cache, temp_data_dir
from css_assist.lexicon import (
    Boundary,
    Category,
    LexicalClassifier,
    Vocabulary,
    VocabularySet,
    build_matcher,
    default_vocabularies,
    load_vocabularies,
)
from css_assist.lexicon.vocabulary import VOCABULARY_FILES

DATA_DIR = Path(css_assist.__file__).resolve().parent / "data"


@pytest.fixture(autouse=True)
def _packaged_vocabularies(monkeypatch):
    """Does: Make sure the packaged data dir is used and caches start empty."""
    monkeypatch.delenv("CSS_ASSIST_DATA_DIR", raising=False)
    monkeypatch.delenv("DATA_DIR", raising=False)
    clear_config_cache()
    default_vocabularies.cache_clear()
    yield
    default_vocabularies.cache_clear()


@pytest.fixture
def clf() -> LexicalClassifier:
    return LexicalClassifier()


def _tags(clf: LexicalClassifier, text: str) -> list[tuple[str, Category]]:
    return [(s.text, s.category) for s in clf.classify(text)]


# ──────────────────────────────────────────────────────────────────────────────
# Classification
# ──────────────────────────────────────────────────────────────────────────────
def test_rule_block_property_and_color_unknown_selector(clf):
    text = "foo { color: red; }"
    spans = list(clf.classify(text))

    assert [(s.text, s.category) for s in spans] == [
        ("color", Category.PROPERTY_NAME),
        ("red", Category.COLOR_NAME),
    ]
    for a, b in zip(spans, spans[1:]):
        assert a.end <= b.start
    assert all(text[s.start:s.end] == s.text for s in spans)


def test_misspelled_keyword_stays_unclassified(clf):
    assert _tags(clf, "colr: red;") == [("red", Category.COLOR_NAME)]


def test_user_defined_names_are_not_styled(clf):
    assert _tags(clf, "#main-nav .sidebar {}") == []


def test_pseudo_selector_and_tag(clf):
    assert _tags(clf, "a:hover { color: blue }") == [
        ("a", Category.TAG_NAME),
        (":hover", Category.PSEUDO_SELECTOR),
        ("color", Category.PROPERTY_NAME),
        ("blue", Category.COLOR_NAME),
    ]


def test_longest_pseudo_selector_wins(clf):
    assert _tags(clf, "li:first-child") == [
        ("li", Category.TAG_NAME),
        (":first-child", Category.PSEUDO_SELECTOR),
    ]


def test_units_follow_digits_but_not_letters(clf):
    assert _tags(clf, "margin: 10px 2em;") == [
        ("margin", Category.PROPERTY_NAME),
        ("px", Category.UNIT_NAME),
        ("em", Category.UNIT_NAME),
    ]


def test_at_rule_and_media_keywords(clf):
    assert _tags(clf, "@media screen and (max-width: 600px)") == [
        ("@media", Category.AT_KEYWORD),
        ("screen", Category.AT_KEYWORD),
        ("and", Category.AT_KEYWORD),
        ("max-width", Category.PROPERTY_NAME),
        ("px", Category.UNIT_NAME),
    ]


def test_weaker_category_on_claimed_range_is_dropped(clf):
    # 'table' is also a display value; the tag pass claims it first
    assert _tags(clf, "display: table") == [
        ("display", Category.PROPERTY_NAME),
        ("table", Category.TAG_NAME),
    ]


@pytest.mark.parametrize(
    "text",
    [
        ".editor {}",
        ".brand {}",
        "#notice {}",
        ".small-print {}",
        "#in {}",
        "#ms {}",
        "#main-nav .sidebar {}",
    ],
)
def test_keyword_fragments_inside_identifiers_are_not_styled(clf, text):
    assert _tags(clf, text) == []


def test_misspelled_property_stays_unstyled_next_to_units(clf):
    assert _tags(clf, "bordr: 1px;") == [("px", Category.UNIT_NAME)]


def test_bare_media_words_still_match_as_whole_words(clf):
    assert _tags(clf, "@media print and (min-width: 2in)") == [
        ("@media", Category.AT_KEYWORD),
        ("print", Category.AT_KEYWORD),
        ("and", Category.AT_KEYWORD),
        ("min-width", Category.PROPERTY_NAME),
        ("in", Category.UNIT_NAME),
    ]


def test_units_need_a_digit_right_before_them(clf):
    assert _tags(clf, "1.5em 50% .5s") == [
        ("em", Category.UNIT_NAME),
        ("%", Category.UNIT_NAME),
        ("s", Category.UNIT_NAME),
    ]


def test_classify_is_restartable(clf):
    text = "p { display: none; }"
    assert list(clf.classify(text)) == list(clf.classify(text))


def test_category_of_prefers_stronger_vocabulary(clf):
    assert clf.category_of("color") is Category.PROPERTY_NAME
    assert clf.category_of("table") is Category.TAG_NAME  # also a display value
    assert clf.category_of("zzz") is None


# ──────────────────────────────────────────────────────────────────────────────
# Matchers & injected vocabularies
# ──────────────────────────────────────────────────────────────────────────────
def test_priority_order_is_declaration_order():
    assert [c.priority for c in Category] == list(range(7))
    assert list(Category)[0] is Category.PSEUDO_SELECTOR
    assert list(Category)[-1] is Category.AT_KEYWORD


def test_build_matcher_symbol_boundary():
    m = build_matcher(Vocabulary(Category.TAG_NAME, ("div", "span")))
    assert [x.group(0) for x in m.finditer("div.divider span-x span")] == ["div", "span"]
    assert build_matcher(Vocabulary(Category.TAG_NAME, ())) is None


def test_build_matcher_case_insensitive_flag():
    vocab = Vocabulary(Category.VALUE_KEYWORD, ("auto",), Boundary.SYMBOL, case_insensitive=True)
    assert build_matcher(vocab).search("AUTO") is not None
    assert "Auto" in vocab


def test_injected_vocabulary_needs_no_code_change():
    vset = VocabularySet.from_mapping({Category.PROPERTY_NAME: ["colour", "colour"]})
    clf = LexicalClassifier(vset)
    assert [(s.text, s.category) for s in clf.classify("colour: red")] == [
        ("colour", Category.PROPERTY_NAME),
    ]
    assert vset.get(Category.PROPERTY_NAME).words == ("colour",)
    assert vset.get(Category.UNIT_NAME).boundary is Boundary.NUMERIC_SUFFIX


# ──────────────────────────────────────────────────────────────────────────────
# Vocabulary files & completion dictionary
# ──────────────────────────────────────────────────────────────────────────────
def test_all_keywords_is_union_of_packaged_lists(clf):
    distinct: set[str] = set()
    for fname in VOCABULARY_FILES.values():
        distinct.update(json.loads((DATA_DIR / f"{fname}.json").read_text(encoding="utf-8")))

    kws = clf.all_keywords()
    assert kws == distinct
    assert len(kws) == len(distinct)
    assert {"color", "table", ":hover", "@media", "px", "papayawhip"} <= kws


def test_load_vocabularies_from_custom_dir(tmp_path):
    for cat, fname in VOCABULARY_FILES.items():
        (tmp_path / f"{fname}.json").write_text(json.dumps([f"k-{cat.name.lower()}"]), encoding="utf-8")

    vset = load_vocabularies(tmp_path)
    assert vset.get(Category.TAG_NAME).words == ("k-tag_name",)
    assert len(vset.all_keywords()) == 7


def test_load_vocabularies_missing_file(tmp_path):
    (tmp_path / "css_html_tags.json").write_text("[]", encoding="utf-8")
    with pytest.raises(ConfigFileNotFound):
        load_vocabularies(tmp_path)


def test_temp_data_dir_reaches_default_classifier(tmp_path):
    assert LexicalClassifier().category_of("color") is Category.PROPERTY_NAME  # warm cache
    for cat, fname in VOCABULARY_FILES.items():
        words = ["colour"] if cat is Category.PROPERTY_NAME else []
        (tmp_path / f"{fname}.json").write_text(json.dumps(words), encoding="utf-8")

    with temp_data_dir(tmp_path):
        clf = LexicalClassifier()
        assert clf.category_of("colour") is Category.PROPERTY_NAME
        assert clf.category_of("color") is None

    assert LexicalClassifier().category_of("color") is Category.PROPERTY_NAME


def test_clear_config_cache_drops_default_vocabularies():
    first = default_vocabularies()
    assert default_vocabularies() is first
    clear_config_cache()
    assert default_vocabularies() is not first

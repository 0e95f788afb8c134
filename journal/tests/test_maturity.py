# journal/tests/test_maturity.py
import pytest

from journal.maturity import (
    BUCKETS,
    classify,
    group_by_maturity,
    learning_languages,
    level_tag,
    maturity_label,
)
from journal.records import LanguageRecord


def lang(id_="x", **kw):
    return LanguageRecord(id=id_, name=kw.pop("name", id_), **kw)


@pytest.mark.parametrize("level", ["A1", "C2", "xyz", None, "Beginner"])
def test_native_wins_over_any_level(level):
    assert classify(lang(native=True, level=level)) == "native"


@pytest.mark.parametrize("level, bucket", [
    ("B2", "grown"),
    ("C1", "grown"),
    ("Proficient", "grown"),
    ("B1", "teen"),
    ("Intermediate", "teen"),
    ("A2", "kid"),
    ("A1", "baby"),
    ("A0", "baby"),
    ("Beginner", "baby"),
    (None, "unknown"),
    ("", "unknown"),
    ("xyz123", "unknown"),
])
def test_level_buckets(level, bucket):
    assert classify(lang(native=False, level=level)) == bucket


def test_labels():
    assert [maturity_label(b) for b in BUCKETS] == [
        "native", "grown-up", "teen", "kid", "baby", "newborn",
    ]


def test_group_lists_natives_only_once():
    langs = [
        lang("it", native=True, level="C2"),
        lang("fr", level="B2"),
        lang("pt", level="B1"),
        lang("no", level="A1"),
        lang("ro"),
    ]
    groups = group_by_maturity(langs)

    assert list(groups) == list(BUCKETS)
    assert [l.id for l in groups["native"]] == ["it"]
    assert [l.id for l in groups["grown"]] == ["fr"]
    assert [l.id for l in groups["teen"]] == ["pt"]
    assert groups["kid"] == []
    assert [l.id for l in groups["baby"]] == ["no"]
    assert [l.id for l in groups["unknown"]] == ["ro"]
    listed = [l.id for b in BUCKETS for l in groups[b]]
    assert listed.count("it") == 1


def test_group_of_nothing_is_all_empty():
    groups = group_by_maturity([])
    assert all(groups[b] == [] for b in BUCKETS)


def test_level_tag_and_learning_filter():
    native = lang("en", native=True, level="C2")
    fr = lang("fr", level="B2", is_learning=True)
    ro = lang("ro")
    assert level_tag(native) == "native"
    assert level_tag(fr) == "B2"
    assert level_tag(ro) == "newborn"
    assert learning_languages([native, fr, ro]) == [fr]

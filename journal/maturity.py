# journal/maturity.py
from __future__ import annotations

from typing import Dict, Iterable, List

from .levels import normalize_level
from .records import LanguageRecord

NATIVE = "native"
GROWN = "grown"
TEEN = "teen"
KID = "kid"
BABY = "baby"
UNKNOWN = "unknown"

# Display order, roots first.
BUCKETS = (NATIVE, GROWN, TEEN, KID, BABY, UNKNOWN)

_BY_LEVEL: Dict[str, str] = {
    "B2": GROWN,
    "C1": GROWN,
    "C2": GROWN,
    "B1": TEEN,
    "A2": KID,
    "A1": BABY,
    "A0": BABY,
    "Beginner": BABY,
}

_LABELS: Dict[str, str] = {
    NATIVE: "native",
    GROWN: "grown-up",
    TEEN: "teen",
    KID: "kid",
    BABY: "baby",
}


def classify(language: LanguageRecord) -> str:
    """Maturity bucket of a language; the native flag wins over any level."""
    if language.native:
        return NATIVE
    level = normalize_level(language.level)
    return _BY_LEVEL.get(level, UNKNOWN) if level else UNKNOWN


def maturity_label(bucket: str) -> str:
    return _LABELS.get(bucket, "newborn")


def level_tag(language: LanguageRecord) -> str:
    """Short tag shown next to a language: native, its stored level, or the maturity label."""
    if language.native:
        return "native"
    return language.level or maturity_label(classify(language))


def group_by_maturity(languages: Iterable[LanguageRecord]) -> Dict[str, List[LanguageRecord]]:
    """
    Classify every language once and group them by bucket (keys in BUCKETS order).
    Natives are listed only under `native`, never in a level-derived bucket.
    """
    groups: Dict[str, List[LanguageRecord]] = {b: [] for b in BUCKETS}
    for lang in languages:
        groups[classify(lang)].append(lang)
    for bucket in BUCKETS[1:]:
        groups[bucket] = [lang for lang in groups[bucket] if not lang.native]
    return groups


def learning_languages(languages: Iterable[LanguageRecord]) -> List[LanguageRecord]:
    return [lang for lang in languages if lang.is_learning]

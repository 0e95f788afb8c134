# journal/services.py
from __future__ import annotations

import datetime as dt
from dataclasses import asdict, dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence

from .records import EntryRecord, LanguageRecord

DEFAULT_MAX_DATES = 30


@dataclass(frozen=True)
class Stats:
    total_entries: int = 0
    total_minutes: int = 0
    avg_effort: float = 0.0
    unique_dates: int = 0
    unique_languages: int = 0
    avg_minutes_per_language: float = 0.0

    def as_dict(self) -> Dict:
        return asdict(self)


@dataclass
class DayGroup:
    date: str
    entries: List[EntryRecord] = field(default_factory=list)
    stats: Stats = field(default_factory=Stats)


def aggregate(entries: Iterable[EntryRecord]) -> Stats:
    """
    Summary numbers over any set of entries.

    Rules:
      1) Missing minutes / effort count as 0.
      2) avg_effort is 0 for an empty set (no division by zero).
      3) avg_minutes_per_language divides by max(1, distinct languages).
    """
    rows = list(entries)
    total_entries = len(rows)
    total_minutes = sum(e.minutes or 0 for e in rows)
    effort_sum = sum(e.effort or 0 for e in rows)
    unique_languages = len({e.language_id for e in rows})

    return Stats(
        total_entries=total_entries,
        total_minutes=total_minutes,
        avg_effort=(effort_sum / total_entries) if total_entries else 0.0,
        unique_dates=len({e.date for e in rows}),
        unique_languages=unique_languages,
        avg_minutes_per_language=total_minutes / max(1, unique_languages),
    )


def group_by_day(
    entries: Iterable[EntryRecord],
    today: str,
    *,
    exclude_today: bool = True,
    only_date: Optional[str] = None,
    max_dates: int = DEFAULT_MAX_DATES,
) -> List[DayGroup]:
    """
    Partition entries by calendar date, newest first.

    `today` is dropped when exclude_today is set; only_date keeps a single day
    (the "yesterday" review). Dates are zero-padded ISO strings, so a reverse
    lexicographic sort is a reverse chronological one. Only the first
    `max_dates` dates are kept, each with its own Stats.
    """
    by_date: Dict[str, List[EntryRecord]] = {}
    for e in entries:
        if exclude_today and e.date == today:
            continue
        if only_date is not None and e.date != only_date:
            continue
        by_date.setdefault(e.date, []).append(e)

    dates = sorted(by_date, reverse=True)[:max(0, max_dates)]
    return [DayGroup(date=d, entries=by_date[d], stats=aggregate(by_date[d])) for d in dates]


def latest_date(groups: Sequence[DayGroup]) -> Optional[str]:
    """The most recent day in a grouping (the one a fresh view opens by default)."""
    return groups[0].date if groups else None


def yesterday_of(today: str) -> str:
    return (dt.date.fromisoformat(today) - dt.timedelta(days=1)).isoformat()


def composer_options(
    languages: Iterable[LanguageRecord], entries_today: Iterable[EntryRecord]
) -> Dict[str, List[LanguageRecord]]:
    """Languages still without an entry today, split the way the composer lists them."""
    logged = {e.language_id for e in entries_today}
    available = sorted((l for l in languages if l.id not in logged), key=lambda l: l.name)
    return {
        "learning": [l for l in available if l.is_learning and not l.native],
        "natives": [l for l in available if l.native],
        "other": [l for l in available if not l.native and not l.is_learning],
    }


def manager_order(languages: Iterable[LanguageRecord]) -> List[LanguageRecord]:
    """Learning languages first, then the rest, natives last (stable within a rank)."""
    def rank(l: LanguageRecord) -> int:
        if l.is_learning:
            return 0
        return 2 if l.native else 1
    return sorted(languages, key=rank)

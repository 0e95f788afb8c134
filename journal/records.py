# journal/records.py
"""
Closed record shapes for the two stored entities.

Everything downstream of the store (maturity, aggregation, grouping, views)
works on these dataclasses; raw rows and request dicts are converted once here.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional


def entry_key(date: str, language_id: str) -> str:
    """Natural key of an entry: one record per language per day."""
    return f"{date}_{language_id}"


def _as_int(value: Any, default: int = 0) -> int:
    if value is None or value == "":
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


@dataclass(frozen=True)
class LanguageRecord:
    id: str
    name: str
    emoji: Optional[str] = None
    color: Optional[str] = None
    native: bool = False
    is_learning: bool = False
    level: Optional[str] = None

    @classmethod
    def from_model(cls, obj) -> "LanguageRecord":
        return cls(
            id=obj.id,
            name=obj.name,
            emoji=obj.emoji or None,
            color=obj.color or None,
            native=obj.native,
            is_learning=obj.is_learning,
            level=obj.level or None,
        )


@dataclass(frozen=True)
class EntryRecord:
    id: str
    date: str
    language_id: str
    content: str = ""
    minutes: int = 0
    effort: int = 0
    created_at: int = 0
    updated_at: int = 0

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "EntryRecord":
        date = str(data["date"])
        language_id = str(data["language_id"])
        return cls(
            id=data.get("id") or entry_key(date, language_id),
            date=date,
            language_id=language_id,
            content=data.get("content") or "",
            minutes=_as_int(data.get("minutes")),
            effort=_as_int(data.get("effort")),
            created_at=_as_int(data.get("created_at")),
            updated_at=_as_int(data.get("updated_at")),
        )

    @classmethod
    def from_model(cls, obj) -> "EntryRecord":
        return cls(
            id=obj.id,
            date=obj.date,
            language_id=obj.language_id,
            content=obj.content,
            minutes=obj.minutes,
            effort=obj.effort,
            created_at=obj.created_at,
            updated_at=obj.updated_at,
        )

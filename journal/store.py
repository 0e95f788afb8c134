# journal/store.py
"""
Snapshot store backed by the Django ORM.

Reads return closed records (records.py), never model instances. Writes are
keyed by caller-supplied ids and resolve concurrent saves last-write-wins.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from django.db import IntegrityError, transaction

from . import conf
from .models import Entry, Language
from .records import EntryRecord, LanguageRecord, entry_key

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Snapshot:
    languages: List[LanguageRecord] = field(default_factory=list)
    entries: List[EntryRecord] = field(default_factory=list)


def list_languages() -> List[LanguageRecord]:
    return [LanguageRecord.from_model(obj) for obj in Language.objects.all()]


def get_language(language_id: str) -> Optional[LanguageRecord]:
    obj = Language.objects.filter(pk=language_id).first()
    return LanguageRecord.from_model(obj) if obj else None


def list_entries(date: Optional[str] = None, limit: Optional[int] = None) -> List[EntryRecord]:
    """Entries ordered by date (newest first), optionally for one exact date and capped at `limit`."""
    qs = Entry.objects.all()
    if date is not None:
        qs = qs.filter(date=date)
    qs = qs.order_by("-date", "language_id")
    if limit is not None:
        qs = qs[:limit]
    return [EntryRecord.from_model(obj) for obj in qs]


def load_snapshot(limit: Optional[int] = None) -> Snapshot:
    return Snapshot(languages=list_languages(), entries=list_entries(limit=limit))


def upsert_entry(
    date: str,
    language_id: str,
    *,
    content: str = "",
    minutes: int = 0,
    effort: int = 1,
    now_ms: Optional[int] = None,
) -> Tuple[EntryRecord, bool]:
    """
    Create or overwrite the entry for (date, language_id).
    created_at is carried over from the stored record; updated_at is always `now_ms`.
    Returns (record, created).
    """
    now = conf.now_ms() if now_ms is None else now_ms
    key = entry_key(date, language_id)
    values = {"content": content or "", "minutes": minutes, "effort": effort}

    try:
        with transaction.atomic():
            obj, created = Entry.objects.get_or_create(
                pk=key,
                defaults=dict(values, date=date, language_id=language_id,
                              created_at=now, updated_at=now),
            )
            if not created:
                _overwrite(obj, values, now)
    except IntegrityError:
        # Lost an insert race on the same key: the later write wins.
        obj = Entry.objects.get(pk=key)
        _overwrite(obj, values, now)
        created = False

    logger.info("entry %s %s", key, "created" if created else "updated")
    return EntryRecord.from_model(obj), created


def _overwrite(obj: Entry, values: dict, now: int) -> None:
    for name, value in values.items():
        setattr(obj, name, value)
    obj.updated_at = now
    obj.save(update_fields=[*values, "updated_at"])


def delete_entry(entry_id: str) -> bool:
    deleted, _ = Entry.objects.filter(pk=entry_id).delete()
    if deleted:
        logger.info("entry %s deleted", entry_id)
    return bool(deleted)


def save_language(
    *,
    name: str,
    emoji: str = "",
    color: str = "",
    native: bool = False,
    is_learning: bool = False,
    level: str = "",
    language_id: Optional[str] = None,
) -> Tuple[LanguageRecord, bool]:
    """Create a language (store-assigned id) or overwrite the one with `language_id`."""
    values = {
        "name": name,
        "emoji": emoji or "",
        "color": color or "",
        "native": bool(native),
        "is_learning": bool(is_learning),
        # A native language carries no level.
        "level": "" if native else (level or ""),
    }
    if language_id is None:
        obj = Language.objects.create(**values)
        created = True
    else:
        obj, created = Language.objects.update_or_create(pk=language_id, defaults=values)

    logger.info("language %s %s", obj.pk, "created" if created else "updated")
    return LanguageRecord.from_model(obj), created


def delete_language(language_id: str) -> bool:
    deleted, _ = Language.objects.filter(pk=language_id).delete()
    if deleted:
        logger.info("language %s deleted", language_id)
    return bool(deleted)

# journal/conf.py
"""Journal settings with their defaults, read from django.conf.settings at call time."""
from __future__ import annotations

import datetime as dt

import pytz
from django.conf import settings
from django.utils import timezone


def admin_id() -> str:
    return getattr(settings, "JOURNAL_ADMIN_ID", "") or ""


def subject_header() -> str:
    return getattr(settings, "JOURNAL_SUBJECT_HEADER", "X-Journal-Subject")


def max_dates() -> int:
    return int(getattr(settings, "JOURNAL_MAX_DATES", 30))


def entry_fetch_limit() -> int:
    return int(getattr(settings, "JOURNAL_ENTRY_FETCH_LIMIT", 500))


def time_zone() -> dt.tzinfo:
    return pytz.timezone(getattr(settings, "JOURNAL_TIME_ZONE", "UTC"))


def today() -> str:
    """Today's calendar date ("YYYY-MM-DD") in the journal's time zone."""
    return timezone.now().astimezone(time_zone()).strftime("%Y-%m-%d")


def now_ms() -> int:
    return int(timezone.now().timestamp() * 1000)

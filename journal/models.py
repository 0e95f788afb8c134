import uuid

from django.db import models


def _new_language_id() -> str:
    return uuid.uuid4().hex


class Language(models.Model):
    id = models.CharField(primary_key=True, max_length=64, default=_new_language_id, editable=False)  # Store-assigned, immutable
    name = models.CharField(max_length=100)                         # e.g. "Português"
    emoji = models.CharField(max_length=16, blank=True, default="")  # e.g. "🇧🇷"
    color = models.CharField(max_length=32, blank=True, default="")  # Optional hex for badges
    native = models.BooleanField(default=False)
    is_learning = models.BooleanField(default=False)
    level = models.CharField(max_length=32, blank=True, default="")  # Free-form label, not guaranteed CEFR

    class Meta:
        ordering = ["name"]

    def __str__(self):
        return self.name


class Entry(models.Model):
    id = models.CharField(primary_key=True, max_length=128)         # f"{date}_{language_id}"
    date = models.CharField(max_length=10, db_index=True)           # "YYYY-MM-DD"
    language_id = models.CharField(max_length=64)                   # Not a FK: entries outlive removed languages
    content = models.TextField(blank=True, default="")
    minutes = models.PositiveIntegerField(default=0)
    effort = models.PositiveSmallIntegerField(default=1)            # 1..5
    created_at = models.BigIntegerField()                           # Epoch ms, kept across upserts
    updated_at = models.BigIntegerField()                           # Epoch ms, refreshed on every save

    class Meta:
        constraints = [
            models.UniqueConstraint(fields=["date", "language_id"],
                                    name="uq_entry_date_language"),
        ]
        indexes = [
            models.Index(fields=["-date"], name="idx_entry_date_desc"),
        ]

    def __str__(self):
        return self.id

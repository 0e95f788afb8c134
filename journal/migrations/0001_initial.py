from django.db import migrations, models

import journal.models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Language",
            fields=[
                ("id", models.CharField(default=journal.models._new_language_id, editable=False, max_length=64, primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=100)),
                ("emoji", models.CharField(blank=True, default="", max_length=16)),
                ("color", models.CharField(blank=True, default="", max_length=32)),
                ("native", models.BooleanField(default=False)),
                ("is_learning", models.BooleanField(default=False)),
                ("level", models.CharField(blank=True, default="", max_length=32)),
            ],
            options={
                "ordering": ["name"],
            },
        ),
        migrations.CreateModel(
            name="Entry",
            fields=[
                ("id", models.CharField(max_length=128, primary_key=True, serialize=False)),
                ("date", models.CharField(db_index=True, max_length=10)),
                ("language_id", models.CharField(max_length=64)),
                ("content", models.TextField(blank=True, default="")),
                ("minutes", models.PositiveIntegerField(default=0)),
                ("effort", models.PositiveSmallIntegerField(default=1)),
                ("created_at", models.BigIntegerField()),
                ("updated_at", models.BigIntegerField()),
            ],
            options={
                "indexes": [models.Index(fields=["-date"], name="idx_entry_date_desc")],
                "constraints": [models.UniqueConstraint(fields=("date", "language_id"), name="uq_entry_date_language")],
            },
        ),
    ]

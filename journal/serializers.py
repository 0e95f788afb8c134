# journal/serializers.py
import math

from rest_framework import serializers

from . import store
from .effort import EFFORT_MAX, EFFORT_MIN
from .maturity import classify, level_tag, maturity_label

MINUTES_PER_DAY = 24 * 60


class CoercedIntegerField(serializers.Field):
    """
    Integer field that coerces instead of rejecting.
    - Missing, empty, null or non-numeric input -> `fallback`.
    - Numbers are rounded half-up, then clamped into [min_value, max_value].
    """
    def __init__(self, *, fallback, min_value=None, max_value=None, **kwargs):
        self.fallback = fallback
        self.min_value = min_value
        self.max_value = max_value
        kwargs.setdefault("required", False)
        kwargs.setdefault("default", fallback)
        super().__init__(**kwargs)

    def validate_empty_values(self, data):
        if data is None or data == "":
            return True, self.fallback
        return super().validate_empty_values(data)

    def to_internal_value(self, data):
        try:
            v = float(data)
        except (TypeError, ValueError):
            return self.fallback
        if math.isnan(v) or math.isinf(v):
            return self.fallback
        v = int(math.floor(v + 0.5))
        if self.min_value is not None:
            v = max(self.min_value, v)
        if self.max_value is not None:
            v = min(self.max_value, v)
        return v

    def to_representation(self, value):
        return int(value)


class EntryWriteSerializer(serializers.Serializer):
    """
    Input for an entry upsert.
    Notes:
      - date defaults to today (journal time zone) when omitted; the view fills it in.
      - minutes / effort never fail validation; bad values are coerced
        (minutes into 0..1440, effort into 1..5).
      - language_id must name a stored language.
    """
    date = serializers.DateField(required=False, input_formats=["%Y-%m-%d"])
    language_id = serializers.CharField(max_length=64)
    content = serializers.CharField(required=False, allow_blank=True, default="")
    minutes = CoercedIntegerField(fallback=0, min_value=0, max_value=MINUTES_PER_DAY)
    effort = CoercedIntegerField(fallback=EFFORT_MIN, min_value=EFFORT_MIN, max_value=EFFORT_MAX)

    def validate_language_id(self, v: str):
        if store.get_language(v) is None:
            raise serializers.ValidationError("unknown language.")
        return v


class LanguageWriteSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=100, allow_blank=False, trim_whitespace=True)
    emoji = serializers.CharField(max_length=16, required=False, allow_blank=True, default="")
    color = serializers.CharField(max_length=32, required=False, allow_blank=True, default="")
    native = serializers.BooleanField(required=False, default=False)
    is_learning = serializers.BooleanField(required=False, default=False)
    level = serializers.CharField(max_length=32, required=False, allow_blank=True, default="")


class EntryRecordSerializer(serializers.Serializer):
    id = serializers.CharField(read_only=True)
    date = serializers.CharField(read_only=True)
    language_id = serializers.CharField(read_only=True)
    content = serializers.CharField(read_only=True)
    minutes = serializers.IntegerField(read_only=True)
    effort = serializers.IntegerField(read_only=True)
    created_at = serializers.IntegerField(read_only=True)
    updated_at = serializers.IntegerField(read_only=True)


class LanguageRecordSerializer(serializers.Serializer):
    """Language snapshot plus its derived maturity (classified here, once per response)."""
    id = serializers.CharField(read_only=True)
    name = serializers.CharField(read_only=True)
    emoji = serializers.CharField(read_only=True, allow_null=True)
    color = serializers.CharField(read_only=True, allow_null=True)
    native = serializers.BooleanField(read_only=True)
    is_learning = serializers.BooleanField(read_only=True)
    level = serializers.CharField(read_only=True, allow_null=True)
    bucket = serializers.SerializerMethodField()
    maturity = serializers.SerializerMethodField()
    tag = serializers.SerializerMethodField()

    def get_bucket(self, obj) -> str:
        return classify(obj)

    def get_maturity(self, obj) -> str:
        return maturity_label(classify(obj))

    def get_tag(self, obj) -> str:
        return level_tag(obj)

# journal/views.py
from __future__ import annotations

import datetime as dt

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from . import conf, store
from .blueprint import get_roadmap
from .effort import effort_label, effort_scale
from .maturity import BUCKETS, group_by_maturity, learning_languages, maturity_label
from .permissions import IsJournalAdminOrReadOnly
from .serializers import (
    EntryRecordSerializer,
    EntryWriteSerializer,
    LanguageRecordSerializer,
    LanguageWriteSerializer,
)
from .services import (
    aggregate,
    composer_options,
    group_by_day,
    latest_date,
    manager_order,
    yesterday_of,
)


def _parse_date(raw: str | None) -> str | None:
    """Validate an ISO calendar date ("YYYY-MM-DD"); allow None."""
    if not raw:
        return None
    try:
        return dt.date.fromisoformat(raw).isoformat()
    except ValueError:
        raise ValueError("date must be YYYY-MM-DD.")


def _flag(request, name: str, default: bool) -> bool:
    raw = request.query_params.get(name)
    if raw is None:
        return default
    return raw.lower() == 'true'


def _stats_payload(stats):
    return dict(stats.as_dict(), effort_label=effort_label(stats.avg_effort))


class JournalAPIView(APIView):
    permission_classes = [IsJournalAdminOrReadOnly]


class SummaryView(JournalAPIView):
    """
    GET /api/summary
    All-time numbers plus the languages grouped by maturity (natives listed once).
    """
    def get(self, request):
        snap = store.load_snapshot()
        groups = group_by_maturity(snap.languages)
        return Response({
            'stats': _stats_payload(aggregate(snap.entries)),
            'effort_scale': effort_scale(),
            'maturity': [
                {
                    'bucket': bucket,
                    'label': maturity_label(bucket),
                    'languages': LanguageRecordSerializer(groups[bucket], many=True).data,
                }
                for bucket in BUCKETS
            ],
            'learning': LanguageRecordSerializer(learning_languages(snap.languages), many=True).data,
        }, status=status.HTTP_200_OK)


class PastDaysView(JournalAPIView):
    """
    GET /api/days
      ?exclude_today=true|false
      &only_date=YYYY-MM-DD
      &max_dates=30
    Days with entries, newest first, each with its own stats; `latest` is the day to open by default.
    """
    def get(self, request):
        exclude_today = _flag(request, 'exclude_today', True)
        try:
            only_date = _parse_date(request.query_params.get('only_date'))
        except ValueError as e:
            return Response({'detail': str(e)}, status=400)
        try:
            max_dates = int(request.query_params.get('max_dates', conf.max_dates()))
        except (TypeError, ValueError):
            return Response({'detail': 'max_dates must be an integer.'}, status=400)
        if max_dates < 0:
            return Response({'detail': 'max_dates must be >= 0.'}, status=400)

        today = conf.today()
        if only_date is not None:
            entries = store.list_entries(date=only_date)
        else:
            entries = store.list_entries(limit=conf.entry_fetch_limit())

        groups = group_by_day(
            entries, today,
            exclude_today=exclude_today, only_date=only_date, max_dates=max_dates,
        )
        return Response({
            'today': today,
            'latest': latest_date(groups),
            'languages': LanguageRecordSerializer(store.list_languages(), many=True).data,
            'groups': [
                {
                    'date': g.date,
                    'stats': _stats_payload(g.stats),
                    'entries': EntryRecordSerializer(g.entries, many=True).data,
                }
                for g in groups
            ],
        }, status=status.HTTP_200_OK)


class DayReviewView(JournalAPIView):
    """GET /api/days/<date> (or /api/days/yesterday): one day's entries and totals."""
    def get(self, request, date: str):
        if date == 'yesterday':
            day = yesterday_of(conf.today())
        else:
            try:
                day = _parse_date(date)
            except ValueError as e:
                return Response({'detail': str(e)}, status=400)

        entries = store.list_entries(date=day)
        return Response({
            'date': day,
            'stats': _stats_payload(aggregate(entries)),
            'entries': EntryRecordSerializer(entries, many=True).data,
        }, status=status.HTTP_200_OK)


class LanguageListView(JournalAPIView):
    """GET /api/languages (manager order), POST /api/languages (create)."""
    def get(self, request):
        langs = manager_order(store.list_languages())
        return Response(LanguageRecordSerializer(langs, many=True).data)

    def post(self, request):
        s = LanguageWriteSerializer(data=request.data)
        if not s.is_valid():
            return Response(s.errors, status=400)
        rec, _ = store.save_language(**s.validated_data)
        return Response(LanguageRecordSerializer(rec).data, status=status.HTTP_201_CREATED)


class LanguageDetailView(JournalAPIView):
    """PUT / DELETE /api/languages/<id>."""
    def put(self, request, language_id: str):
        s = LanguageWriteSerializer(data=request.data)
        if not s.is_valid():
            return Response(s.errors, status=400)
        rec, created = store.save_language(language_id=language_id, **s.validated_data)
        code = status.HTTP_201_CREATED if created else status.HTTP_200_OK
        return Response(LanguageRecordSerializer(rec).data, status=code)

    def delete(self, request, language_id: str):
        if not store.delete_language(language_id):
            return Response({'detail': 'language not found.'}, status=404)
        return Response(status=status.HTTP_204_NO_CONTENT)


class EntryListView(JournalAPIView):
    """
    GET  /api/entries?date=YYYY-MM-DD (defaults to today)
    POST /api/entries  upsert keyed by (date, language_id); 201 on first save, 200 after.
    """
    def get(self, request):
        try:
            day = _parse_date(request.query_params.get('date')) or conf.today()
        except ValueError as e:
            return Response({'detail': str(e)}, status=400)
        return Response(EntryRecordSerializer(store.list_entries(date=day), many=True).data)

    def post(self, request):
        s = EntryWriteSerializer(data=request.data)
        if not s.is_valid():
            return Response(s.errors, status=400)
        data = s.validated_data
        day = data['date'].isoformat() if data.get('date') else conf.today()

        rec, created = store.upsert_entry(
            day, data['language_id'],
            content=data['content'], minutes=data['minutes'], effort=data['effort'],
        )
        code = status.HTTP_201_CREATED if created else status.HTTP_200_OK
        return Response(EntryRecordSerializer(rec).data, status=code)


class EntryDetailView(JournalAPIView):
    """DELETE /api/entries/<date>_<language_id>."""
    def delete(self, request, entry_id: str):
        if not store.delete_entry(entry_id):
            return Response({'detail': 'entry not found.'}, status=404)
        return Response(status=status.HTTP_204_NO_CONTENT)


class ComposerView(JournalAPIView):
    """GET /api/composer: languages still open for today, grouped learning / natives / other."""
    def get(self, request):
        today = conf.today()
        options = composer_options(store.list_languages(), store.list_entries(date=today))
        return Response({
            'date': today,
            **{k: LanguageRecordSerializer(v, many=True).data for k, v in options.items()},
        })


class RoadmapView(JournalAPIView):
    """GET /api/roadmap: the validated block plan."""
    def get(self, request):
        roadmap = get_roadmap()
        current = roadmap.current
        return Response({
            'current': current.id if current else None,
            'blocks': roadmap.as_list(),
        })

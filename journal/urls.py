from django.urls import path
from .views import (
    ComposerView,
    DayReviewView,
    EntryDetailView,
    EntryListView,
    LanguageDetailView,
    LanguageListView,
    PastDaysView,
    RoadmapView,
    SummaryView,
)

urlpatterns = [
    path("summary", SummaryView.as_view(), name="summary"),
    path("days", PastDaysView.as_view(), name="past-days"),
    path("days/<str:date>", DayReviewView.as_view(), name="day-review"),
    path("languages", LanguageListView.as_view(), name="language-list"),
    path("languages/<str:language_id>", LanguageDetailView.as_view(), name="language-detail"),
    path("entries", EntryListView.as_view(), name="entry-list"),
    path("entries/<str:entry_id>", EntryDetailView.as_view(), name="entry-detail"),
    path("composer", ComposerView.as_view(), name="composer"),
    path("roadmap", RoadmapView.as_view(), name="roadmap"),
]

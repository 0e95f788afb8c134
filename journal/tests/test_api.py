# journal/tests/test_api.py
import pytest
from rest_framework.test import APIClient

from journal import conf, store
from journal.services import yesterday_of

ADMIN = "admin-uid"
TODAY = "2025-01-10"


@pytest.fixture(autouse=True)
def _admin_setting(settings):
    settings.JOURNAL_ADMIN_ID = ADMIN


@pytest.fixture(autouse=True)
def _fixed_today(monkeypatch):
    monkeypatch.setattr(conf, "today", lambda: TODAY)


@pytest.fixture
def admin():
    c = APIClient()
    c.credentials(HTTP_X_JOURNAL_SUBJECT=ADMIN)
    return c


@pytest.fixture
def french():
    rec, _ = store.save_language(name="French", emoji="🇫🇷", level="B2", is_learning=True)
    return rec


@pytest.mark.django_db
def test_writes_need_the_admin_subject(french):
    payload = {"language_id": french.id, "minutes": 10, "effort": 3}

    anon = APIClient()
    assert anon.post("/api/entries", payload, format="json").status_code == 403

    stranger = APIClient()
    stranger.credentials(HTTP_X_JOURNAL_SUBJECT="someone-else")
    assert stranger.post("/api/entries", payload, format="json").status_code == 403
    assert stranger.post("/api/languages", {"name": "Dutch"}, format="json").status_code == 403

    # Reads stay public.
    assert anon.get("/api/summary").status_code == 200


@pytest.mark.django_db
def test_no_admin_configured_means_no_writes(settings, french):
    settings.JOURNAL_ADMIN_ID = ""
    c = APIClient()
    c.credentials(HTTP_X_JOURNAL_SUBJECT="")
    r = c.post("/api/entries", {"language_id": french.id}, format="json")
    assert r.status_code == 403


@pytest.mark.django_db
def test_entry_upsert_create_then_update(admin, french):
    url = "/api/entries"
    r1 = admin.post(url, {"date": "2025-01-10", "language_id": french.id,
                          "content": "podcast", "minutes": 30, "effort": 3}, format="json")
    assert r1.status_code == 201
    e1 = r1.json()
    assert e1["id"] == f"2025-01-10_{french.id}"

    r2 = admin.post(url, {"date": "2025-01-10", "language_id": french.id,
                          "content": "podcast + shadowing", "minutes": 45, "effort": 4}, format="json")
    assert r2.status_code == 200
    e2 = r2.json()
    assert e2["id"] == e1["id"]
    assert e2["minutes"] == 45
    assert e2["effort"] == 4
    assert e2["created_at"] == e1["created_at"]
    assert e2["updated_at"] >= e1["updated_at"]

    listed = admin.get(url, {"date": "2025-01-10"}).json()
    assert len(listed) == 1


@pytest.mark.django_db
def test_entry_date_defaults_to_today(admin, french):
    r = admin.post("/api/entries", {"language_id": french.id, "minutes": 5}, format="json")
    assert r.status_code == 201
    assert r.json()["date"] == TODAY


@pytest.mark.parametrize("minutes, effort, want_minutes, want_effort", [
    ("abc", "", 0, 1),
    (-5, 0, 0, 1),
    (None, 9, 0, 5),
    (1e30, 1e30, 1440, 5),
    ("99999999999999999999", "-99999999999999999999", 1440, 1),
    (1441, 3, 1440, 3),
    ("12.6", "2.5", 13, 3),
])
@pytest.mark.django_db
def test_bad_numbers_are_coerced_not_rejected(admin, french, minutes, effort, want_minutes, want_effort):
    r = admin.post("/api/entries", {"date": "2025-01-10", "language_id": french.id,
                                    "minutes": minutes, "effort": effort}, format="json")
    assert r.status_code == 201
    assert r.json()["minutes"] == want_minutes
    assert r.json()["effort"] == want_effort


@pytest.mark.django_db
def test_entry_rejects_bad_date_and_unknown_language(admin, french):
    r = admin.post("/api/entries", {"date": "10/01/2025", "language_id": french.id}, format="json")
    assert r.status_code == 400
    assert "date" in r.json()

    r = admin.post("/api/entries", {"date": "2025-01-10", "language_id": "nope"}, format="json")
    assert r.status_code == 400
    assert "language_id" in r.json()


@pytest.mark.django_db
def test_delete_entry(admin, french):
    admin.post("/api/entries", {"date": "2025-01-10", "language_id": french.id}, format="json")
    entry_id = f"2025-01-10_{french.id}"
    assert admin.delete(f"/api/entries/{entry_id}").status_code == 204
    assert admin.delete(f"/api/entries/{entry_id}").status_code == 404


@pytest.mark.django_db
def test_past_days_exclude_today_and_expose_latest(french):
    today = TODAY
    yesterday = yesterday_of(today)
    before = yesterday_of(yesterday)
    store.upsert_entry(today, french.id, minutes=10, effort=2)
    store.upsert_entry(yesterday, french.id, minutes=20, effort=4)
    store.upsert_entry(before, french.id, minutes=30, effort=3)

    data = APIClient().get("/api/days").json()
    assert [g["date"] for g in data["groups"]] == [yesterday, before]
    assert data["latest"] == yesterday
    assert data["groups"][0]["stats"]["total_minutes"] == 20
    assert data["groups"][0]["stats"]["effort_label"] == "Intense"

    data = APIClient().get("/api/days", {"exclude_today": "false", "max_dates": 1}).json()
    assert [g["date"] for g in data["groups"]] == [today]

    data = APIClient().get("/api/days", {"only_date": before}).json()
    assert [g["date"] for g in data["groups"]] == [before]


@pytest.mark.django_db
def test_past_days_empty_and_bad_params():
    c = APIClient()
    data = c.get("/api/days").json()
    assert data["groups"] == []
    assert data["latest"] is None
    assert c.get("/api/days", {"max_dates": "many"}).status_code == 400
    assert c.get("/api/days", {"only_date": "yesterday-ish"}).status_code == 400


@pytest.mark.django_db
def test_yesterday_review(french):
    pt, _ = store.save_language(name="Portuguese", level="B1")
    yesterday = yesterday_of(TODAY)
    store.upsert_entry(yesterday, french.id, minutes=30, effort=3)
    store.upsert_entry(yesterday, pt.id, minutes=60, effort=5)

    data = APIClient().get("/api/days/yesterday").json()
    assert data["date"] == yesterday
    assert len(data["entries"]) == 2
    assert data["stats"]["total_minutes"] == 90
    assert data["stats"]["avg_effort"] == 4.0
    assert data["stats"]["avg_minutes_per_language"] == 45

    assert APIClient().get("/api/days/2025-13-40").status_code == 400


@pytest.mark.django_db
def test_summary_groups_languages_and_totals():
    store.save_language(name="Italian", native=True)
    fr, _ = store.save_language(name="French", level="Upper-Intermediate", is_learning=True)
    store.save_language(name="Romanian", level="")
    store.upsert_entry("2025-01-09", fr.id, minutes=30, effort=3)
    store.upsert_entry("2025-01-10", fr.id, minutes=60, effort=5)

    data = APIClient().get("/api/summary").json()
    assert data["stats"]["total_entries"] == 2
    assert data["stats"]["total_minutes"] == 90
    assert data["stats"]["unique_dates"] == 2
    assert data["stats"]["effort_label"] == "Intense"

    buckets = {g["bucket"]: [l["name"] for l in g["languages"]] for g in data["maturity"]}
    assert buckets["native"] == ["Italian"]
    assert buckets["grown"] == ["French"]
    assert buckets["unknown"] == ["Romanian"]
    labels = [g["label"] for g in data["maturity"]]
    assert labels[-1] == "newborn"
    assert [l["name"] for l in data["learning"]] == ["French"]


@pytest.mark.django_db
def test_summary_on_empty_store():
    data = APIClient().get("/api/summary").json()
    assert data["stats"]["total_entries"] == 0
    assert data["stats"]["avg_effort"] == 0
    assert data["stats"]["effort_label"] is None
    assert [s["label"] for s in data["effort_scale"]] == ["Passive", "Light", "Focused", "Intense", "Deep"]
    assert all(g["languages"] == [] for g in data["maturity"])


@pytest.mark.django_db
def test_language_crud(admin):
    r = admin.post("/api/languages", {"name": "Bulgarian", "level": "A2", "is_learning": True}, format="json")
    assert r.status_code == 201
    bg = r.json()
    assert bg["bucket"] == "kid"
    assert bg["maturity"] == "kid"
    assert bg["tag"] == "A2"

    r = admin.put(f"/api/languages/{bg['id']}", {"name": "Bulgarian", "native": True, "level": "A2"}, format="json")
    assert r.status_code == 200
    assert r.json()["bucket"] == "native"
    assert r.json()["level"] is None

    assert admin.post("/api/languages", {"name": ""}, format="json").status_code == 400
    assert admin.delete(f"/api/languages/{bg['id']}").status_code == 204
    assert admin.delete(f"/api/languages/{bg['id']}").status_code == 404


@pytest.mark.django_db
def test_composer_lists_only_languages_open_today(french):
    it, _ = store.save_language(name="Italian", native=True)
    pt, _ = store.save_language(name="Portuguese", is_learning=True)
    store.upsert_entry(TODAY, pt.id, minutes=10)

    data = APIClient().get("/api/composer").json()
    assert [l["name"] for l in data["learning"]] == ["French"]
    assert [l["name"] for l in data["natives"]] == ["Italian"]
    assert data["other"] == []


@pytest.mark.django_db
def test_roadmap_endpoint():
    data = APIClient().get("/api/roadmap").json()
    assert data["current"] == "2025-2026"
    assert [b["title"] for b in data["blocks"]] == ["Block 1", "Block 2", "Block 3"]
    assert [m["name"] for m in data["blocks"][1]["maintenance_pool"]] == ["French", "Bulgarian", "Portuguese"]

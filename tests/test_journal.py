"""
Journal endpoint and statistics tests.
"""

from datetime import date, timedelta
from types import SimpleNamespace
from uuid import uuid4

import pytest

from app.services.journal_service import compute_journal_stats


def _entry(entry_date, category="general", mood=None):
    return SimpleNamespace(entry_date=entry_date, category=category, mood=mood)


def test_streak_counts_back_from_yesterday_when_today_is_empty():
    today = date(2024, 6, 10)
    entries = [_entry(today - timedelta(days=n)) for n in (1, 2, 3, 5)]

    stats = compute_journal_stats(entries, today)

    assert stats.current_streak == 3
    assert stats.total_entries == 4


def test_streak_includes_today_and_stops_at_gap():
    today = date(2024, 6, 10)
    entries = [_entry(today), _entry(today - timedelta(days=1)), _entry(today - timedelta(days=3))]

    assert compute_journal_stats(entries, today).current_streak == 2


def test_stats_breakdowns_and_recent_window():
    today = date(2024, 6, 10)
    entries = [
        _entry(today, category="sales", mood="happy"),
        _entry(today - timedelta(days=10), category="sales"),
        _entry(today - timedelta(days=45), category="ops", mood="tired"),
    ]

    stats = compute_journal_stats(entries, today)

    assert stats.recent_entries == 2
    assert stats.category_counts == {"sales": 2, "ops": 1}
    assert stats.mood_counts == {"happy": 1, "tired": 1}
    assert stats.average_entries_per_week == 0.1


def test_stats_for_empty_journal():
    stats = compute_journal_stats([], date(2024, 6, 10))

    assert stats.total_entries == 0
    assert stats.current_streak == 0
    assert stats.average_entries_per_week == 0.0


@pytest.mark.asyncio
async def test_journal_crud(test_client):
    response = await test_client.post(
        "/api/v1/journal",
        json={"title": "Closed Acme", "content": "Signed the retainer.", "mood": "happy", "tags": ["sales"]},
    )
    assert response.status_code == 201
    entry = response.json()
    assert entry["entry_date"] == date.today().isoformat()
    assert entry["category"] == "general"
    assert entry["tags"] == ["sales"]

    response = await test_client.put(f"/api/v1/journal/{entry['id']}", json={"category": "sales", "tags": []})
    assert response.status_code == 200
    assert response.json()["category"] == "sales"
    assert response.json()["tags"] == []

    response = await test_client.put(f"/api/v1/journal/{entry['id']}", json={"content": None})
    assert response.status_code == 422

    assert (await test_client.delete(f"/api/v1/journal/{entry['id']}")).status_code == 204
    assert (await test_client.get(f"/api/v1/journal/{entry['id']}")).status_code == 404
    assert (await test_client.put(f"/api/v1/journal/{uuid4()}", json={"title": "x"})).status_code == 404


@pytest.mark.asyncio
async def test_journal_requires_title_and_content(test_client):
    response = await test_client.post("/api/v1/journal", json={"title": "No body"})

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_journal_listing_by_date_range(test_client):
    for day in (1, 15, 28):
        await test_client.post(
            "/api/v1/journal",
            json={"title": f"Day {day}", "content": "notes", "entry_date": f"2024-02-{day:02d}"},
        )

    data = (
        await test_client.get("/api/v1/journal", params={"start_date": "2024-02-10", "end_date": "2024-02-28"})
    ).json()

    assert data["total"] == 2
    assert [item["title"] for item in data["items"]] == ["Day 28", "Day 15"]


@pytest.mark.asyncio
async def test_journal_search_and_stats(test_client):
    await test_client.post(
        "/api/v1/journal",
        json={"title": "Pipeline review", "content": "Two deals at 50%", "category": "sales"},
    )
    await test_client.post("/api/v1/journal", json={"title": "Infra", "content": "Rotated the PIPELINE keys"})
    await test_client.post("/api/v1/journal", json={"title": "Lunch", "content": "Nothing to report"})

    data = (await test_client.get("/api/v1/journal/search", params={"q": "pipeline"})).json()
    assert data["total"] == 2

    # LIKE wildcards in the query are matched literally
    data = (await test_client.get("/api/v1/journal/search", params={"q": "50%"})).json()
    assert data["total"] == 1

    assert (await test_client.get("/api/v1/journal/search")).status_code == 422

    stats = (await test_client.get("/api/v1/journal/stats")).json()
    assert stats["total_entries"] == 3
    assert stats["recent_entries"] == 3
    assert stats["category_counts"] == {"sales": 1, "general": 2}
    assert stats["current_streak"] == 1

"""
Task and calendar event endpoint tests.
"""

from uuid import uuid4

import pytest


@pytest.mark.asyncio
async def test_task_completion_follows_status(test_client):
    task = (await test_client.post("/api/v1/tasks", json={"title": "Send proposal"})).json()
    assert task["status"] == "pending"
    assert task["completed"] is False

    response = await test_client.put(f"/api/v1/tasks/{task['id']}", json={"status": "completed"})
    assert response.status_code == 200
    assert response.json()["completed"] is True

    response = await test_client.put(f"/api/v1/tasks/{task['id']}", json={"status": "in_progress"})
    assert response.json()["completed"] is False


@pytest.mark.asyncio
async def test_task_filters_and_404(test_client):
    await test_client.post("/api/v1/tasks", json={"title": "One", "priority": "high"})
    await test_client.post("/api/v1/tasks", json={"title": "Two", "status": "completed"})

    data = (await test_client.get("/api/v1/tasks", params={"status": "completed"})).json()
    assert data["total"] == 1
    assert data["items"][0]["title"] == "Two"

    assert (await test_client.get(f"/api/v1/tasks/{uuid4()}")).status_code == 404
    assert (await test_client.delete(f"/api/v1/tasks/{uuid4()}")).status_code == 404


@pytest.mark.asyncio
async def test_event_time_range_is_validated(test_client):
    response = await test_client.post(
        "/api/v1/events",
        json={
            "title": "Backwards",
            "start_time": "2024-06-10T10:00:00Z",
            "end_time": "2024-06-10T09:00:00Z",
        },
    )

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_events_listed_by_window(test_client):
    for day in (3, 10, 20):
        response = await test_client.post(
            "/api/v1/events",
            json={
                "title": f"Sync {day}",
                "type": "sync",
                "start_time": f"2024-06-{day:02d}T10:00:00Z",
                "end_time": f"2024-06-{day:02d}T11:00:00Z",
            },
        )
        assert response.status_code == 201

    data = (
        await test_client.get(
            "/api/v1/events",
            params={"start": "2024-06-05T00:00:00Z", "end": "2024-06-15T00:00:00Z"},
        )
    ).json()

    assert data["total"] == 1
    assert data["items"][0]["title"] == "Sync 10"


@pytest.mark.asyncio
async def test_event_update_and_delete(test_client):
    event = (
        await test_client.post(
            "/api/v1/events",
            json={"title": "Kickoff", "start_time": "2024-06-10T10:00:00Z", "end_time": "2024-06-10T11:00:00Z"},
        )
    ).json()

    response = await test_client.put(f"/api/v1/events/{event['id']}", json={"title": "Kickoff call"})
    assert response.status_code == 200
    assert response.json()["title"] == "Kickoff call"

    assert (await test_client.delete(f"/api/v1/events/{event['id']}")).status_code == 204
    assert (await test_client.get(f"/api/v1/events/{event['id']}")).status_code == 404


@pytest.mark.asyncio
async def test_calendar_stats(test_client):
    await test_client.post("/api/v1/tasks", json={"title": "One", "priority": "high"})
    await test_client.post("/api/v1/tasks", json={"title": "Two", "status": "completed"})
    await test_client.post("/api/v1/tasks", json={"title": "Three", "status": "completed", "priority": "high"})
    for start in ("2020-01-01T10:00:00Z", "2999-01-01T10:00:00Z"):
        await test_client.post(
            "/api/v1/events",
            json={"title": "Review", "start_time": start, "end_time": start.replace("10:", "11:")},
        )

    response = await test_client.get("/api/v1/events/stats")

    assert response.status_code == 200
    data = response.json()
    assert data["upcoming_events"] == 1
    assert data["total_tasks"] == 3
    assert data["completed_tasks"] == 2
    assert data["tasks_by_status"] == {"pending": 1, "completed": 2}
    assert data["tasks_by_priority"] == {"high": 2, "medium": 1}
    assert data["completion_rate"] == 66.7


@pytest.mark.asyncio
async def test_calendar_stats_without_tasks(test_client):
    data = (await test_client.get("/api/v1/events/stats")).json()

    assert data["total_tasks"] == 0
    assert data["completion_rate"] == 0.0

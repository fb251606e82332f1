"""Tests for the event endpoints."""

from datetime import timedelta

import pytest

from syntax_club.models.base import utcnow

API = "/api/v1/events"


def event_payload(title, **overrides):
    payload = {
        "title": title,
        "description": f"{title} at the club",
        "date": (utcnow() + timedelta(days=30)).isoformat(),
        "location": "Main hall",
        "organizer": "Syntax",
        "category": "workshop",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def workshop(client):
    response = client.post(f"{API}/", json=event_payload("Git Workshop", tags="git, tools ,"))
    assert response.status_code == 201
    return response.json()


# ============================================
# Event CRUD
# ============================================
class TestEvents:
    def test_create_normalizes_fields(self, workshop):
        assert workshop["venue"] == "Main hall"
        assert workshop["tags"] == ["git", "tools"]
        assert workshop["status"] == "upcoming"
        assert workshop["total_spots"] == 0

    def test_create_requires_title(self, client):
        assert client.post(f"{API}/", json=event_payload("  ")).status_code == 422

    def test_registration_window_checked(self, client):
        payload = event_payload(
            "Talk",
            registration_open_date="2025-02-10T00:00:00+05:30",
            registration_close_date="2025-02-09T00:00:00",
        )
        assert client.post(f"{API}/", json=payload).status_code == 422

    def test_get_and_missing(self, client, workshop):
        assert client.get(f"{API}/{workshop['id']}").json()["title"] == "Git Workshop"
        response = client.get(f"{API}/404")
        assert response.status_code == 404
        assert response.json()["detail"] == "Event 404 not found"

    def test_update(self, client, workshop):
        response = client.put(f"{API}/{workshop['id']}", json={"status": "cancelled", "title": None})
        assert response.status_code == 200
        assert response.json()["status"] == "cancelled"
        assert response.json()["title"] == "Git Workshop"

    def test_update_registration_window(self, client, workshop):
        url = f"{API}/{workshop['id']}"
        assert client.put(url, json={"registration_open_date": "2025-02-10T00:00:00Z"}).status_code == 200
        response = client.put(url, json={"registration_close_date": "2025-02-01T00:00:00"})
        assert response.status_code == 400
        assert response.json()["detail"] == "Registration cannot close before it opens."
        cleared = client.put(url, json={"registration_open_date": None}).json()
        assert cleared["registration_open_date"] is None

    def test_delete(self, client, workshop):
        assert client.delete(f"{API}/{workshop['id']}").json()["message"] == "Event deleted successfully"
        assert client.get(f"{API}/{workshop['id']}").status_code == 404
        assert client.delete(f"{API}/{workshop['id']}").status_code == 404


# ============================================
# Listing & statistics
# ============================================
class TestEventListing:
    @pytest.fixture(autouse=True)
    def events(self, client):
        past = (utcnow() - timedelta(days=30)).isoformat()
        client.post(f"{API}/", json=event_payload("Alpha Meetup"))
        client.post(f"{API}/", json=event_payload("Beta Hackathon", category="competition"))
        client.post(f"{API}/", json=event_payload("Old Talk", date=past, status="completed"))

    def test_period_filter(self, client):
        upcoming = client.get(f"{API}/", params={"period": "upcoming"}).json()
        assert upcoming["total"] == 2
        past = client.get(f"{API}/", params={"period": "past"}).json()
        assert [e["title"] for e in past["items"]] == ["Old Talk"]

    def test_search_and_sort(self, client):
        found = client.get(f"{API}/", params={"search": "HACK"}).json()
        assert [e["title"] for e in found["items"]] == ["Beta Hackathon"]
        ordered = client.get(f"{API}/", params={"sort_by": "title", "sort_order": "desc"}).json()
        assert [e["title"] for e in ordered["items"]] == ["Old Talk", "Beta Hackathon", "Alpha Meetup"]

    def test_invalid_sort_field(self, client):
        assert client.get(f"{API}/", params={"sort_by": "venue"}).status_code == 422

    def test_statistics(self, client):
        stats = client.get(f"{API}/statistics/overview").json()
        assert stats["total_events"] == 3
        assert stats["status_counts"] == {"upcoming": 2, "completed": 1}

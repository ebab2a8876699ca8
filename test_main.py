"""
Golf Club Service: API tests
============================
Every endpoint runs against an in-memory SQLite store injected through
FastAPI dependency overrides.

Run:  pytest test_main.py -v --cov=main --cov=golfclub --cov-report=term-missing
"""
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from golfclub.core.dependencies import (
    get_enrollment_service,
    get_member_service,
    get_tournament_repo,
    get_tournament_service,
)
from main import app


@pytest.fixture
def client(member_service, tournament_service, enrollment_service, tournament_repo):
    app.dependency_overrides[get_member_service] = lambda: member_service
    app.dependency_overrides[get_tournament_service] = lambda: tournament_service
    app.dependency_overrides[get_enrollment_service] = lambda: enrollment_service
    app.dependency_overrides[get_tournament_repo] = lambda: tournament_repo
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()


# ── Helpers ───────────────────────────────────────────────────────────────
def _member_payload(**overrides):
    base = {
        "member_name": "Alice",
        "address": "1 Fairway Drive",
        "email": "a@x.com",
        "phone_number": "555-0100",
        "membership_start_date": "2023-01-15",
        "membership_duration_months": 12,
        "membership_type": "Premium",
    }
    base.update(overrides)
    return base


def _tournament_payload(**overrides):
    base = {
        "start_date": "2024-06-01",
        "end_date": "2024-06-03",
        "location": "Pebble Beach",
        "entry_fee": "150.00",
        "cash_prize_amount": "10000.00",
    }
    base.update(overrides)
    return base


def _create_member(client, **overrides):
    r = client.post("/api/v1/members", json=_member_payload(**overrides))
    assert r.status_code == 201, r.text
    return r.json()


def _create_tournament(client, **overrides):
    r = client.post("/api/v1/tournaments", json=_tournament_payload(**overrides))
    assert r.status_code == 201, r.text
    return r.json()


# ══════════════════════════════════════════════════════════════════════════
# HEALTH & OPS ENDPOINTS
# ══════════════════════════════════════════════════════════════════════════
class TestHealth:
    def test_health(self, client):
        r = client.get("/health")
        assert r.status_code == 200
        assert r.json()["status"] == "ok"

    def test_ready(self, client):
        r = client.get("/health/ready")
        assert r.status_code == 200
        assert r.json()["database"] == "connected"

    def test_ready_db_down(self, client):
        broken = MagicMock()
        broken.verify_connection.side_effect = Exception("DB down")
        app.dependency_overrides[get_tournament_repo] = lambda: broken
        r = client.get("/health/ready")
        assert r.status_code == 503

    def test_metrics(self, client):
        client.post("/api/v1/members", json=_member_payload())
        r = client.get("/metrics")
        assert r.status_code == 200
        assert "members_created_total" in r.text
        assert "http_requests_total" in r.text


class TestMiddleware:
    def test_request_id_generated(self, client):
        r = client.get("/health")
        assert "x-request-id" in r.headers

    def test_request_id_forwarded(self, client):
        r = client.get("/health", headers={"X-Request-ID": "req-42"})
        assert r.headers["x-request-id"] == "req-42"


# ══════════════════════════════════════════════════════════════════════════
# MEMBERS
# ══════════════════════════════════════════════════════════════════════════
class TestMembers:
    def test_create(self, client):
        body = _create_member(client)
        assert body["id"]
        assert body["member_name"] == "Alice"
        assert body["membership_start_date"] == "2023-01-15"
        assert body["tournament_ids"] == []

    def test_get(self, client):
        created = _create_member(client)
        r = client.get(f"/api/v1/members/{created['id']}")
        assert r.status_code == 200
        assert r.json() == created

    def test_get_not_found(self, client):
        r = client.get("/api/v1/members/unknown")
        assert r.status_code == 404
        assert r.json()["error"] == "not_found"

    def test_duplicate_email(self, client):
        _create_member(client)
        r = client.post("/api/v1/members", json=_member_payload(member_name="Other"))
        assert r.status_code == 409
        assert r.json()["error"] == "conflict"
        assert len(client.get("/api/v1/members").json()) == 1

    def test_missing_email(self, client):
        payload = _member_payload()
        del payload["email"]
        r = client.post("/api/v1/members", json=payload)
        assert r.status_code == 422

    def test_blank_name(self, client):
        r = client.post("/api/v1/members", json=_member_payload(member_name="  "))
        assert r.status_code == 422
        assert r.json()["error"] == "validation_error"

    def test_list(self, client):
        _create_member(client, email="a@x.com")
        _create_member(client, email="b@x.com")
        r = client.get("/api/v1/members")
        assert r.status_code == 200
        assert len(r.json()) == 2


class TestMemberSearch:
    def test_by_name(self, client):
        _create_member(client, member_name="Samantha Lee", email="s@x.com")
        _create_member(client, member_name="Osama Khan", email="o@x.com")
        _create_member(client, member_name="Pat Jones", email="p@x.com")
        r = client.get("/api/v1/members/search/by-name", params={"name": "sam"})
        assert r.status_code == 200
        assert sorted(m["member_name"] for m in r.json()) == ["Osama Khan", "Samantha Lee"]

    def test_by_membership_type(self, client):
        _create_member(client, email="a@x.com", membership_type="Premium")
        _create_member(client, email="b@x.com", membership_type="Standard")
        r = client.get("/api/v1/members/search/by-membership-type",
                       params={"membershipType": "premium"})
        assert [m["email"] for m in r.json()] == ["a@x.com"]

    def test_by_phone(self, client):
        created = _create_member(client, phone_number="555-0199")
        r = client.get("/api/v1/members/search/by-phone", params={"phoneNumber": "555-0199"})
        assert r.status_code == 200
        assert r.json()["id"] == created["id"]

    def test_by_phone_not_found(self, client):
        r = client.get("/api/v1/members/search/by-phone", params={"phoneNumber": "000"})
        assert r.status_code == 404

    def test_by_tournament_start_date_bad_date(self, client):
        r = client.get("/api/v1/members/search/by-tournament-start-date",
                       params={"startDate": "June 1st"})
        assert r.status_code == 422


# ══════════════════════════════════════════════════════════════════════════
# TOURNAMENTS
# ══════════════════════════════════════════════════════════════════════════
class TestTournaments:
    def test_create_keeps_money_exact(self, client):
        body = _create_tournament(client)
        assert body["entry_fee"] == "150.00"
        assert body["cash_prize_amount"] == "10000.00"
        assert body["member_ids"] == []

    def test_create_response_matches_stored_row(self, client):
        created = _create_tournament(client, entry_fee="150.5", cash_prize_amount=100)
        assert created["entry_fee"] == "150.50"
        assert created["cash_prize_amount"] == "100.00"
        r = client.get(f"/api/v1/tournaments/{created['id']}")
        assert r.json() == created

    def test_get(self, client):
        created = _create_tournament(client)
        r = client.get(f"/api/v1/tournaments/{created['id']}")
        assert r.status_code == 200
        assert r.json()["location"] == "Pebble Beach"
        assert r.json()["entry_fee"] == "150.00"

    def test_get_not_found(self, client):
        r = client.get("/api/v1/tournaments/unknown")
        assert r.status_code == 404

    def test_missing_start_date(self, client):
        payload = _tournament_payload()
        del payload["start_date"]
        r = client.post("/api/v1/tournaments", json=payload)
        assert r.status_code == 422

    def test_list(self, client):
        _create_tournament(client)
        assert len(client.get("/api/v1/tournaments").json()) == 1

    def test_by_start_date(self, client):
        first = _create_tournament(client, start_date="2024-05-01")
        _create_tournament(client, start_date="2024-05-02")
        r = client.get("/api/v1/tournaments/search/by-start-date",
                       params={"startDate": "2024-05-01"})
        assert [t["id"] for t in r.json()] == [first["id"]]

    def test_by_location(self, client):
        _create_tournament(client, location="Pebble Beach")
        _create_tournament(client, location="St Andrews")
        r = client.get("/api/v1/tournaments/search/by-location", params={"location": "andrew"})
        assert [t["location"] for t in r.json()] == ["St Andrews"]


# ══════════════════════════════════════════════════════════════════════════
# ENROLLMENT
# ══════════════════════════════════════════════════════════════════════════
class TestEnrollment:
    def test_enroll_and_list_members(self, client):
        member = _create_member(client)
        tournament = _create_tournament(client)
        r = client.post(f"/api/v1/tournaments/{tournament['id']}/members/{member['id']}")
        assert r.status_code == 200
        assert r.json()["member_ids"] == [member["id"]]

        r = client.get(f"/api/v1/tournaments/{tournament['id']}/members")
        assert [m["member_name"] for m in r.json()] == ["Alice"]

        r = client.get("/api/v1/members/search/by-tournament-start-date",
                       params={"startDate": "2024-06-01"})
        assert [m["id"] for m in r.json()] == [member["id"]]

        r = client.get(f"/api/v1/members/{member['id']}")
        assert r.json()["tournament_ids"] == [tournament["id"]]

    def test_enroll_twice(self, client):
        member = _create_member(client)
        tournament = _create_tournament(client)
        url = f"/api/v1/tournaments/{tournament['id']}/members/{member['id']}"
        client.post(url)
        r = client.post(url)
        assert r.status_code == 200
        assert r.json()["member_ids"] == [member["id"]]

    def test_enroll_unknown_tournament(self, client):
        member = _create_member(client)
        r = client.post(f"/api/v1/tournaments/unknown/members/{member['id']}")
        assert r.status_code == 404
        assert "Tournament" in r.json()["detail"]

    def test_enroll_unknown_member(self, client):
        tournament = _create_tournament(client)
        r = client.post(f"/api/v1/tournaments/{tournament['id']}/members/unknown")
        assert r.status_code == 404
        assert "Member" in r.json()["detail"]

    def test_members_of_unknown_tournament(self, client):
        r = client.get("/api/v1/tournaments/unknown/members")
        assert r.status_code == 404


# ══════════════════════════════════════════════════════════════════════════
# INFRASTRUCTURE ERRORS
# ══════════════════════════════════════════════════════════════════════════
class TestInfrastructureErrors:
    def test_store_failure_is_500(self, client):
        broken = MagicMock()
        broken.list_members.side_effect = OperationalError("SELECT", {}, Exception("gone"))
        app.dependency_overrides[get_member_service] = lambda: broken
        r = client.get("/api/v1/members")
        assert r.status_code == 500
        assert r.json()["error"] == "internal_server_error"

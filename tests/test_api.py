"""HTTP-level tests for the debate API."""

from __future__ import annotations

from datetime import timedelta

from conftest import debate_payload

from debate_arena.core.time import utcnow
from debate_arena.errors import StoreFailure
from debate_arena.models import VoteRecord
from debate_arena.services.debates import record_vote
from debate_arena.store import DocumentStore


def _create(client, **overrides):
    response = client.post("/debates", json=debate_payload(**overrides))
    assert response.status_code == 201
    return response.json()["id"]


class TestSystem:
    def test_home(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.text == "Debate Arena API running"

    def test_health(self, client):
        assert client.get("/health").json() == {"ok": True}


class TestDebates:
    def test_create_and_fetch(self, client):
        debate_id = _create(client, title="Tabs or spaces")

        response = client.get(f"/debates/{debate_id}")
        assert response.status_code == 200
        body = response.json()
        assert body["_id"] == debate_id
        assert body["title"] == "Tabs or spaces"
        assert body["support"] == []
        assert body["oppose"] == []
        assert body["createdAt"].endswith("Z")

    def test_create_response_shape(self, client):
        response = client.post("/debates", json=debate_payload())
        assert response.json()["message"] == "Debate created"

    def test_create_requires_all_fields(self, client):
        payload = debate_payload()
        del payload["category"]
        response = client.post("/debates", json=payload)
        assert response.status_code == 400
        assert response.json() == {"error": "All fields are required"}

    def test_create_rejects_non_list_tags(self, client):
        response = client.post("/debates", json=debate_payload(tags="politics"))
        assert response.status_code == 400

    def test_create_without_body(self, client):
        response = client.post("/debates")
        assert response.status_code == 400
        assert "error" in response.json()

    def test_list(self, client):
        _create(client, title="One")
        _create(client, title="Two")
        titles = [debate["title"] for debate in client.get("/debates").json()]
        assert titles == ["One", "Two"]

    def test_fetch_missing(self, client):
        response = client.get("/debates/missing")
        assert response.status_code == 404
        assert response.json() == {"error": "Debate not found"}


class TestJoin:
    def test_join_and_switch(self, client):
        debate_id = _create(client)

        response = client.post(f"/debates/{debate_id}/join", json={"name": "alice", "side": "Support"})
        assert response.status_code == 200
        assert response.json() == {"message": "Successfully joined the debate as Support"}

        client.post(f"/debates/{debate_id}/join", json={"name": "alice", "side": "Oppose"})
        debate = client.get(f"/debates/{debate_id}").json()
        assert debate["support"] == []
        assert debate["oppose"] == ["alice"]

    def test_lowercase_side_rejected(self, client):
        debate_id = _create(client)
        response = client.post(f"/debates/{debate_id}/join", json={"name": "alice", "side": "support"})
        assert response.status_code == 400
        assert response.json() == {"error": "Name and valid side are required (Support or Oppose)"}

    def test_missing_name_rejected(self, client):
        debate_id = _create(client)
        response = client.post(f"/debates/{debate_id}/join", json={"side": "Support"})
        assert response.status_code == 400

    def test_unknown_debate(self, client):
        response = client.post("/debates/missing/join", json={"name": "alice", "side": "Support"})
        assert response.status_code == 404
        assert response.json() == {"error": "Debate not found"}

    def test_store_failure_maps_to_500(self, client, monkeypatch):
        def broken(self, debate_id):
            raise StoreFailure()

        monkeypatch.setattr(DocumentStore, "find_debate", broken)
        response = client.post("/debates/any/join", json={"name": "alice", "side": "Support"})
        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}


class TestJoinedDebates:
    def test_snapshot_after_join(self, client):
        debate_id = _create(client, title="Snapshot", tags=["a", "b"])
        client.post(f"/debates/{debate_id}/join", json={"name": "bob", "side": "Oppose"})

        response = client.get("/joinedDebates", params={"name": "bob", "debateId": debate_id})
        assert response.status_code == 200
        body = response.json()
        assert body["debateId"] == debate_id
        assert body["name"] == "bob"
        assert body["side"] == "Oppose"
        assert body["title"] == "Snapshot"
        assert body["tags"] == ["a", "b"]
        assert body["joinedAt"].endswith("Z")

    def test_missing_query_parameters(self, client):
        response = client.get("/joinedDebates", params={"name": "bob"})
        assert response.status_code == 400
        assert response.json() == {"error": "Missing name or debateId query parameters"}

    def test_lookup_trims_name(self, client):
        debate_id = _create(client)
        client.post(f"/debates/{debate_id}/join", json={"name": "alice ", "side": "Support"})

        response = client.get("/joinedDebates", params={"name": "alice ", "debateId": debate_id})
        assert response.status_code == 200
        assert response.json()["name"] == "alice"

    def test_not_joined(self, client):
        debate_id = _create(client)
        response = client.get("/joinedDebates", params={"name": "bob", "debateId": debate_id})
        assert response.status_code == 404


class TestLeaderboard:
    def test_ranked_entries(self, client, store):
        record_vote(store, "userA", "d1", 10)
        record_vote(store, "userB", "d1", 20)

        response = client.get("/leaderboard")
        assert response.status_code == 200
        assert response.json() == [
            {"_id": "userB", "userName": "userB", "totalVotes": 20, "debatesParticipated": 1},
            {"_id": "userA", "userName": "userA", "totalVotes": 10, "debatesParticipated": 1},
        ]

    def test_unknown_filter_is_not_an_error(self, client):
        response = client.get("/leaderboard", params={"filter": "yearly"})
        assert response.status_code == 200
        assert response.json() == []

    def test_weekly_window(self, client, store):
        record_vote(store, "alice", "d1", 3)
        store.insert(
            VoteRecord(user_name="bob", debate_id="d1", votes=50, created_at=utcnow() - timedelta(days=30))
        )

        response = client.get("/leaderboard", params={"filter": "weekly"})
        assert response.status_code == 200
        assert response.json() == [
            {"_id": "alice", "userName": "alice", "totalVotes": 3, "debatesParticipated": 1},
        ]

    def test_monthly_window(self, client, store):
        record_vote(store, "alice", "d1", 4)
        store.insert(
            VoteRecord(user_name="bob", debate_id="d2", votes=9, created_at=utcnow() - timedelta(days=60))
        )

        response = client.get("/leaderboard", params={"filter": "monthly"})
        assert response.status_code == 200
        assert [entry["userName"] for entry in response.json()] == ["alice"]

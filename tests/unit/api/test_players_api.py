"""API tests for player profiles, metrics and the response cache."""

import pytest


@pytest.fixture
def player(client):
    response = client.post("/api/v1/players", json={
        "name": "Ana", "academyId": "a1", "userId": "u-ana", "position": "Winger",
        "attributes": {"shooting": 6, "pace": 9},
    })
    assert response.status_code == 201
    return response.json()["data"]


class TestPlayerCrud:

    def test_create_computes_rating(self, player):
        assert player["overallRating"] == 25.0
        assert player["id"] == player["_id"]

    def test_list_is_academy_scoped(self, client, player):
        client.post("/api/v1/players", json={"name": "Ben", "academyId": "a2"})
        data = client.get("/api/v1/players", params={"academyId": "a1"}).json()["data"]
        assert [p["name"] for p in data] == ["Ana"]

    def test_get_by_alias(self, client, player):
        data = client.get("/api/v1/players/u-ana").json()["data"]
        assert data["id"] == player["id"]

    def test_update_recomputes_rating(self, client, player):
        response = client.patch(f"/api/v1/players/{player['id']}", json={"attributes": {"shooting": 10}})
        assert response.status_code == 200
        assert response.json()["data"]["overallRating"] == 16.7

    def test_soft_delete_hides_player(self, client, db, player):
        assert client.delete(f"/api/v1/players/{player['id']}").json()["success"] is True
        assert client.get(f"/api/v1/players/{player['id']}").status_code == 404
        assert db["ams-player-data"].count_documents({}) == 1

    def test_batch_summaries(self, client, player):
        other = client.post("/api/v1/players", json={"name": "Ben", "academyId": "a1"}).json()["data"]
        response = client.get("/api/v1/players/batch", params={"ids": f"{player['id']},{other['_id']},nope"})
        data = response.json()["data"]
        assert sorted(p["name"] for p in data) == ["Ana", "Ben"]
        assert {p["photoUrl"] for p in data} == {"/default-avatar.png"}


class TestPlayerCache:

    def test_cached_until_ttl(self, client, db, clock, player):
        client.get(f"/api/v1/players/{player['id']}")
        db["ams-player-data"].update_one({"id": player["id"]}, {"$set": {"name": "Changed"}})

        assert client.get(f"/api/v1/players/{player['id']}").json()["data"]["name"] == "Ana"
        clock.advance(300)
        assert client.get(f"/api/v1/players/{player['id']}").json()["data"]["name"] == "Changed"

    def test_write_invalidates_every_alias(self, client, player):
        client.get("/api/v1/players/u-ana")
        client.patch(f"/api/v1/players/{player['id']}", json={"position": "Striker"})
        assert client.get("/api/v1/players/u-ana").json()["data"]["position"] == "Striker"


class TestPlayerMetrics:

    def test_session_metrics_replace_attributes(self, client, player):
        response = client.patch(f"/api/v1/players/{player['id']}/metrics", json={
            "sessionId": "s1", "metrics": {"attributes": {"pace": 7}, "sessionRating": 8},
        })
        assert response.status_code == 200

        data = client.get(f"/api/v1/players/{player['id']}/performance").json()["data"]
        assert data["attributes"] == {"pace": 7}
        assert data["performanceHistory"][0]["type"] == "training"
        assert data["performanceHistory"][0]["sessionRating"] == 8

    def test_match_stats_accumulate(self, client, player):
        for _ in range(2):
            client.patch(f"/api/v1/players/{player['id']}/stats",
                         json={"matchId": "m1", "stats": {"goals": 2, "assists": 1}})
        data = client.get(f"/api/v1/players/{player['id']}").json()["data"]
        assert data["attributes"]["goals"] == 4
        assert data["attributes"]["assists"] == 2
        assert data["attributes"]["pace"] == 9
        assert len(data["performanceHistory"]) == 2

    def test_match_points(self, client, player):
        client.patch(f"/api/v1/players/{player['id']}/match-points", json={"matchId": "m1", "points": 7.5})
        data = client.get(f"/api/v1/players/{player['id']}").json()["data"]
        assert data["attributes"]["matchPoints"] == 7.5
        assert data["attributes"]["shooting"] == 6

    def test_performance_limit(self, client, player):
        for n in range(7):
            client.patch(f"/api/v1/players/{player['id']}/stats", json={"matchId": f"m{n}", "stats": {"goals": 1}})
        data = client.get(f"/api/v1/players/{player['id']}/performance", params={"limit": 3}).json()["data"]
        assert len(data["performanceHistory"]) == 3

    def test_rating_out_of_range(self, client, player):
        response = client.patch(f"/api/v1/players/{player['id']}/metrics", json={
            "sessionId": "s1", "metrics": {"sessionRating": 11},
        })
        assert response.status_code == 400
        assert response.json()["success"] is False

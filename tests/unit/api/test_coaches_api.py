"""API tests for coaches: ratings and session statistics."""

import pytest


@pytest.fixture
def coach(db):
    db["ams-coaches"].insert_one({"id": "coach-1", "userId": "u-zed", "name": "Zed", "academyId": "a1"})
    return "coach-1"


class TestRatings:

    def test_average_is_rounded(self, client, coach):
        for rating in (4, 5, 5):
            response = client.post("/api/v1/coaches/rating", json={"coachId": coach, "studentId": "s1",
                                                                     "rating": rating})
        assert response.json()["data"] == {"averageRating": 4.7, "totalRatings": 3}

        data = client.get("/api/v1/coaches/ratings", params={"coachId": coach}).json()["data"]
        assert data["totalRatings"] == 3
        assert len(data["ratings"]) == 3

    def test_rating_out_of_range(self, client, coach):
        response = client.post("/api/v1/coaches/rating", json={"coachId": coach, "studentId": "s1", "rating": 6})
        assert response.status_code == 400

    def test_unknown_coach(self, client):
        response = client.post("/api/v1/coaches/rating", json={"coachId": "ghost", "studentId": "s1", "rating": 3})
        assert response.status_code == 404


class TestCoachProfile:

    def test_list_and_get(self, client, coach):
        assert [c["name"] for c in client.get("/api/v1/coaches", params={"academyId": "a1"}).json()["data"]] == ["Zed"]
        data = client.get("/api/v1/coaches/u-zed").json()["data"]
        assert data["id"] == coach
        assert data["averageRating"] == 0

    def test_session_stats_use_user_id(self, client, coach):
        for status in ("Finished", "Finished", "Upcoming"):
            client.post("/api/v1/sessions", json={"academyId": "a1", "coachId": "u-zed", "status": status})
        data = client.get(f"/api/v1/coaches/{coach}/stats").json()["data"]
        assert data == {"totalSessions": 3, "finishedSessions": 2, "upcomingSessions": 1, "ongoingSessions": 0}

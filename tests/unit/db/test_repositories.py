"""Tests for the document repositories against an in-memory store."""

import datetime

import pytest
from bson import ObjectId

from app.db.init_db import INDEXES, init_db
from app.db.repositories import (
    AttendanceRepository,
    BatchRepository,
    CoachRepository,
    PlayerRepository,
    SessionRepository,
    UserInfoRepository,
)


# ======================================================================
# DocumentRepository basics
# ======================================================================


class TestInsertAndFind:

    def test_insert_assigns_ids_and_timestamps(self, db):
        player = PlayerRepository(db).insert({"name": "Ana", "academyId": "a1"})
        assert isinstance(player["_id"], ObjectId)
        assert player["id"] == str(player["_id"])
        assert player["createdAt"] == player["updatedAt"]

    def test_insert_keeps_given_id(self, db):
        player = PlayerRepository(db).insert({"id": "legacy-1", "name": "Ana"})
        assert player["id"] == "legacy-1"

    def test_find_by_alias(self, db):
        repo = PlayerRepository(db)
        player = repo.insert({"name": "Ana", "userId": "u1", "academyId": "a1"})
        assert repo.find_by_id("u1")["_id"] == player["_id"]
        assert repo.find_by_id(str(player["_id"]))["name"] == "Ana"

    def test_academy_scope_and_soft_delete(self, db):
        repo = PlayerRepository(db)
        kept = repo.insert({"name": "Ana", "academyId": "a1"})
        gone = repo.insert({"name": "Ben", "academyId": "a1"})
        repo.insert({"name": "Cid", "academyId": "a2"})
        repo.soft_delete(gone["id"])

        names = [p["name"] for p in repo.get_by_academy("a1")]
        assert names == [kept["name"]]


class TestUpdate:

    def test_update_returns_post_image(self, db):
        repo = BatchRepository(db)
        batch = repo.insert({"name": "U12", "academyId": "a1"})
        updated = repo.update_fields(batch["id"], {"name": "U13"})
        assert updated["name"] == "U13"
        assert "updatedAt" in updated

    def test_update_missing_returns_none(self, db):
        assert BatchRepository(db).update_fields(str(ObjectId()), {"name": "x"}) is None

    def test_update_writes_the_document_a_read_returns(self, db):
        db["ams-sessions"].insert_one({"id": 42, "name": "Numeric id"})
        db["ams-sessions"].insert_one({"id": "42", "name": "String id"})
        repo = SessionRepository(db)
        assert repo.find_by_id("42")["name"] == "String id"

        updated = repo.update_fields("42", {"name": "Renamed"})
        assert updated["id"] == "42"
        assert updated["name"] == "Renamed"
        assert db["ams-sessions"].find_one({"id": 42})["name"] == "Numeric id"

    def test_soft_deleted_document_is_not_updated(self, db):
        repo = BatchRepository(db)
        batch = repo.insert({"name": "U12", "academyId": "a1"})
        assert repo.soft_delete(batch["id"])
        assert repo.update_fields(batch["id"], {"name": "U13"}) is None
        assert not repo.soft_delete(batch["id"])
        assert repo.find_by_id(batch["id"])["name"] == "U12"

    def test_append_history_keeps_order(self, db):
        repo = PlayerRepository(db)
        player = repo.insert({"name": "Ana", "performanceHistory": []})
        for n in range(3):
            assert repo.append_performance(player["id"], {"n": n})
        stored = repo.find_by_id(player["id"])
        assert [e["n"] for e in stored["performanceHistory"]] == [0, 1, 2]


class TestUpsert:

    def test_creates_once_then_updates(self, db):
        repo = UserInfoRepository(db)
        first = repo.upsert_profile("u1", "a1", {"bio": "hello"})
        second = repo.upsert_profile("u1", "a1", {"phone": "123"})

        assert db["ams-users-info"].count_documents({}) == 1
        assert second["_id"] == first["_id"]
        assert second["createdAt"] == first["createdAt"]
        assert second["bio"] == "hello"
        assert second["phone"] == "123"
        assert second["certificates"] == []

    def test_second_upsert_refreshes_updated_at(self, db, monkeypatch):
        repo = UserInfoRepository(db)
        first = repo.upsert_profile("u1", "a1", {"bio": "hello"})
        monkeypatch.setattr("app.db.repositories.base.utcnow", lambda: datetime.datetime(2030, 1, 1))
        second = repo.upsert_profile("u1", "a1", {"bio": "again"})

        assert second["createdAt"] == first["createdAt"]
        assert second["updatedAt"] == datetime.datetime(2030, 1, 1)

    def test_defaults_do_not_override_patch(self, db):
        doc = UserInfoRepository(db).upsert_profile("u1", "a1", {"certificates": ["UEFA B"]})
        assert doc["certificates"] == ["UEFA B"]


class TestHardDelete:

    def test_counts_distinct_documents(self, db):
        repo = BatchRepository(db)
        a = repo.insert({"name": "A", "academyId": "a1"})
        b = repo.insert({"name": "B", "academyId": "a1"})
        deleted = repo.hard_delete([a["id"], a["id"], str(b["_id"]), "missing"])
        assert deleted == 2
        assert repo.count({}) == 0

    def test_extra_filter_scopes_delete(self, db):
        repo = SessionRepository(db)
        s = repo.insert({"name": "S", "academyId": "a1"})
        assert repo.hard_delete([s["id"]], {"academyId": "other"}) == 0
        assert repo.hard_delete([s["id"]], {"academyId": "a1"}) == 1


# ======================================================================
# Entity specific queries
# ======================================================================


class TestSessionRepository:

    def test_occurrences_join_players(self, db):
        players = PlayerRepository(db)
        ana = players.insert({"name": "Ana", "academyId": "a1"})
        repo = SessionRepository(db)
        repo.insert({"parentSessionId": "p1", "academyId": "a1", "isOccurrence": True,
                     "date": "2024-01-08", "assignedPlayers": [ana["id"]]})
        repo.insert({"parentSessionId": "p1", "academyId": "a1", "isOccurrence": True,
                     "date": "2024-01-01", "assignedPlayers": []})

        occurrences = repo.get_occurrences("p1", "a1")
        assert [o["date"] for o in occurrences] == ["2024-01-01", "2024-01-08"]
        assert occurrences[1]["assignedPlayersData"][0]["name"] == "Ana"

    def test_numeric_parent_reference(self, db):
        repo = SessionRepository(db)
        repo.insert({"parentSessionId": 5, "academyId": "a1", "isOccurrence": True})
        assert repo.count_occurrences("5", "a1") == 1

    def test_count_by_status_for_coach(self, db):
        repo = SessionRepository(db)
        repo.insert({"coachId": "c1", "status": "Finished"})
        repo.insert({"coachIds": ["c1"], "status": "Upcoming"})
        repo.insert({"coachId": "c1", "status": "Upcoming", "isDeleted": True})
        repo.insert({"coachId": "c2", "status": "Upcoming"})
        assert repo.count_by_status_for_coach("c1") == {"Finished": 1, "Upcoming": 1}


    def test_delete_by_academy(self, db):
        repo = SessionRepository(db)
        repo.insert({"name": "A", "academyId": "a1"})
        repo.insert({"name": "B", "academyId": "a1", "isDeleted": True})
        repo.insert({"name": "C", "academyId": "a2"})
        assert repo.delete_by_academy("a1") == 2
        assert repo.count({}) == 1


class TestAttendanceRepository:

    def test_filters_by_date_and_type(self, db):
        repo = AttendanceRepository(db)
        for user_id, day, kind in [("u1", "2024-03-01", "player"), ("u1", "2024-03-02", "player"),
                                   ("c1", "2024-03-01", "coach")]:
            repo.upsert_record({"academyId": "a1", "userId": user_id, "date": day, "type": kind},
                               {"status": "present", "markedBy": "c1"})
        assert [r["date"] for r in repo.get_by_academy("a1")] == ["2024-03-02", "2024-03-01", "2024-03-01"]
        assert [r["userId"] for r in repo.get_by_academy("a1", "2024-03-01", "coach")] == ["c1"]


class TestCoachRepository:

    def test_add_rating_updates_counters(self, db):
        repo = CoachRepository(db)
        coach = repo.insert({"name": "Zed"})
        repo.add_rating(coach["id"], {"studentId": "s1", "rating": 4})
        updated = repo.add_rating(coach["id"], {"studentId": "s2", "rating": 5})
        assert updated["totalRatings"] == 2
        assert updated["ratingSum"] == 9
        assert len(updated["ratings"]) == 2


class TestInitDb:

    @pytest.mark.parametrize("collection", sorted(INDEXES))
    def test_indexes_created(self, db, collection):
        init_db(db)
        names = set(db[collection].index_information())
        assert {index.document["name"] for index in INDEXES[collection]} <= names

"""
Pytest fixtures and configuration for all tests.
"""

import os
from datetime import datetime, timezone
from typing import AsyncGenerator

import pytest
from mongomock_motor import AsyncMongoMockClient
from motor.motor_asyncio import AsyncIOMotorDatabase

# Settings() needs a URI before app.main is imported
os.environ.setdefault("MONGODB_URI", "mongodb://localhost:27017")

TEST_DB_NAME = "predictor_league_test"


@pytest.fixture(scope="function")
async def test_db() -> AsyncGenerator[AsyncIOMotorDatabase, None]:
    """
    Provide a clean in-memory database for each test.
    """
    client = AsyncMongoMockClient()
    db = client[TEST_DB_NAME]

    yield db

    # Cleanup: drop all collections after test
    collection_names = await db.list_collection_names()
    for collection_name in collection_names:
        await db[collection_name].drop()


def _kickoff(day: int, hour: int = 15) -> datetime:
    return datetime(2025, 8, day, hour, tzinfo=timezone.utc)


@pytest.fixture
def sample_users():
    """Three players (one without predictions) and an admin."""
    return [
        {"_id": "alice", "name": "Alice", "team_name": "Alice United", "avatar_url": "/avatars/alice.png", "role": "player"},
        {"_id": "bob", "name": "Bob", "team_name": "Bob Rovers", "avatar_url": None, "role": "player"},
        {"_id": "carol", "name": "Carol", "team_name": None, "avatar_url": None, "role": "player"},
        {"_id": "admin", "name": "Admin", "team_name": None, "avatar_url": None, "role": "admin"},
    ]


@pytest.fixture
def sample_rounds():
    return [
        {"id": 1, "name": "Round 1", "status": "completed"},
        {"id": 2, "name": "Round 2", "status": "completed"},
        {"id": 3, "name": "Round 3", "status": "closed"},
        {"id": 4, "name": "Round 4", "status": "open"},
    ]


@pytest.fixture
def sample_fixtures():
    return [
        {"id": 101, "round_id": 1, "home_team": "Arsenal", "away_team": "Chelsea", "match_time": _kickoff(2), "home_score": 2, "away_score": 1},
        {"id": 102, "round_id": 1, "home_team": "Everton", "away_team": "Fulham", "match_time": _kickoff(2, 17), "home_score": 0, "away_score": 0},
        {"id": 201, "round_id": 2, "home_team": "Leeds", "away_team": "Liverpool", "match_time": _kickoff(9), "home_score": 1, "away_score": 3},
        {"id": 202, "round_id": 2, "home_team": "Burnley", "away_team": "Brighton", "match_time": _kickoff(9, 17), "home_score": 2, "away_score": 2},
        {"id": 301, "round_id": 3, "home_team": "Spurs", "away_team": "Wolves", "match_time": _kickoff(16), "home_score": 1, "away_score": 0},
        {"id": 302, "round_id": 3, "home_team": "Brentford", "away_team": "Villa", "match_time": _kickoff(16, 17), "home_score": None, "away_score": None},
    ]


def _prediction(user_id, fixture_id, round_id, home, away, points=None, is_joker=False):
    return {
        "id": f"{user_id}:{fixture_id}",
        "user_id": user_id,
        "fixture_id": fixture_id,
        "round_id": round_id,
        "predicted_home_goals": home,
        "predicted_away_goals": away,
        "is_joker": is_joker,
        "points_awarded": points,
    }


@pytest.fixture
def sample_predictions():
    """
    Completed rounds already carry points_awarded.

    Overall: alice 11 (4/4 outcomes, 2 exact), bob 6 (3/4, 1 exact),
    admin 3 but not a player.
    """
    return [
        _prediction("alice", 101, 1, 2, 1, points=6, is_joker=True),
        _prediction("alice", 102, 1, 1, 1, points=1),
        _prediction("alice", 201, 2, 0, 2, points=1),
        _prediction("alice", 202, 2, 2, 2, points=3),
        _prediction("bob", 101, 1, 1, 0, points=1),
        _prediction("bob", 102, 1, 0, 1, points=0),
        _prediction("bob", 201, 2, 1, 3, points=3),
        _prediction("bob", 202, 2, 3, 3, points=2, is_joker=True),
        _prediction("admin", 101, 1, 2, 1, points=3),
        _prediction("alice", 301, 3, 1, 0, is_joker=True),
        _prediction("bob", 301, 3, 0, 2),
        _prediction("bob", 302, 3, 1, 1),
    ]


@pytest.fixture
async def seeded_db(test_db, sample_users, sample_rounds, sample_fixtures, sample_predictions):
    """Test database loaded with the sample league."""
    await test_db["users"].insert_many(sample_users)
    await test_db["rounds"].insert_many(sample_rounds)
    await test_db["fixtures"].insert_many(sample_fixtures)
    await test_db["predictions"].insert_many(sample_predictions)
    await test_db["league_memberships"].insert_many([
        {"league_id": 7, "user_id": "alice", "status": "accepted"},
        {"league_id": 7, "user_id": "carol", "status": "accepted"},
        {"league_id": 7, "user_id": "bob", "status": "invited"},
    ])
    return test_db

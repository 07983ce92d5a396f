"""
Unit tests for StatsService
"""

import pytest

from app.services.stats_service import (
    StatsService,
    RoundNotFoundError,
    RoundNotCompletedError,
)


class TestRoundPoints:

    @pytest.mark.asyncio
    async def test_round_points_breakdown(self, seeded_db):
        service = StatsService(seeded_db)

        breakdown = await service.get_round_points("alice", 1)

        assert breakdown.round_id == 1
        assert breakdown.total_points == 7
        assert [p.fixture_id for p in breakdown.predictions] == [101, 102]

        first = breakdown.predictions[0]
        assert first.home_team == "Arsenal"
        assert first.away_team == "Chelsea"
        assert first.home_score == 2
        assert first.away_score == 1
        assert first.is_joker is True
        assert first.points_awarded == 6

    @pytest.mark.asyncio
    async def test_round_points_without_predictions(self, seeded_db):
        service = StatsService(seeded_db)

        breakdown = await service.get_round_points("carol", 1)

        assert breakdown.total_points == 0
        assert breakdown.predictions == []

    @pytest.mark.asyncio
    async def test_round_points_round_not_found(self, seeded_db):
        service = StatsService(seeded_db)

        with pytest.raises(RoundNotFoundError):
            await service.get_round_points("alice", 99)

    @pytest.mark.asyncio
    async def test_round_points_round_not_completed(self, seeded_db):
        service = StatsService(seeded_db)

        with pytest.raises(RoundNotCompletedError):
            await service.get_round_points("alice", 3)


class TestPredictionStats:

    @pytest.mark.asyncio
    async def test_prediction_stats(self, seeded_db):
        service = StatsService(seeded_db)

        stats = await service.get_prediction_stats("bob")

        # bob: round 1 = 1 point, round 2 = 5 points, 3 of 4 outcomes
        assert stats.overall_accuracy == 0.75
        assert stats.average_points_per_round == 3.0
        assert stats.best_round.round_id == 2
        assert stats.best_round.round_name == "Round 2"
        assert stats.best_round.points == 5
        assert [(r.round_id, r.points) for r in stats.points_per_round_history] == [(1, 1), (2, 5)]

    @pytest.mark.asyncio
    async def test_best_round_keeps_first_on_tie(self, seeded_db):
        await seeded_db["predictions"].update_one(
            {"id": "alice:202"},
            {"$set": {"points_awarded": 6}}
        )
        service = StatsService(seeded_db)

        stats = await service.get_prediction_stats("alice")

        # round 1 = 7, round 2 = 1 + 6 = 7
        assert stats.best_round.round_id == 1
        assert stats.average_points_per_round == 7.0
        assert stats.overall_accuracy == 1.0

    @pytest.mark.asyncio
    async def test_prediction_stats_without_predictions(self, seeded_db):
        service = StatsService(seeded_db)

        stats = await service.get_prediction_stats("carol")

        assert stats.overall_accuracy == 0.0
        assert stats.average_points_per_round == 0.0
        assert stats.best_round is None
        assert stats.points_per_round_history == []

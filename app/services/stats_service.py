"""
StatsService - Per-player prediction statistics and round breakdowns.
"""

import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorDatabase
from pydantic import BaseModel

from app.models.prediction import PredictionPoints
from app.models.round import ROUND_COMPLETED
from app.repositories.fixture_repository import FixtureRepository
from app.repositories.prediction_repository import PredictionRepository
from app.repositories.round_repository import RoundRepository
from app.services.points_service import classify_outcome

logger = logging.getLogger(__name__)


class StatsServiceError(Exception):
    """Base exception for stats service errors."""
    pass


class RoundNotFoundError(StatsServiceError):
    """Raised when the round does not exist."""
    pass


class RoundNotCompletedError(StatsServiceError):
    """Raised when points are requested for a round not yet completed."""
    pass


class RoundPoints(BaseModel):
    round_id: int
    round_name: Optional[str] = None
    points: int


class RoundPointsBreakdown(BaseModel):
    round_id: int
    total_points: int
    predictions: list[PredictionPoints]


class PredictionStats(BaseModel):
    overall_accuracy: float = 0.0  # fracción 0-1
    average_points_per_round: float = 0.0
    best_round: Optional[RoundPoints] = None
    points_per_round_history: list[RoundPoints] = []


class StatsService:
    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db
        self.round_repo = RoundRepository(db)
        self.fixture_repo = FixtureRepository(db)
        self.prediction_repo = PredictionRepository(db)

    async def get_round_points(self, user_id: str, round_id: int) -> RoundPointsBreakdown:
        """Points the user earned in a completed round, fixture by fixture."""
        round_ = await self.round_repo.get_by_id(round_id)
        if not round_:
            raise RoundNotFoundError(f"Round {round_id} not found")

        if round_.status != ROUND_COMPLETED:
            raise RoundNotCompletedError(
                f"Points are only available for completed rounds. "
                f"This round status is: {round_.status}"
            )

        fixtures = await self.fixture_repo.get_for_round(round_id)
        predictions = await self.prediction_repo.get_user_predictions_for_round(user_id, round_id)
        by_fixture = {p.fixture_id: p for p in predictions}

        # get_for_round ya viene ordenado por hora del partido
        breakdown = []
        for fixture in fixtures:
            prediction = by_fixture.get(fixture.id)
            if prediction is None:
                continue
            breakdown.append(PredictionPoints(
                fixture_id=fixture.id,
                predicted_home_goals=prediction.predicted_home_goals,
                predicted_away_goals=prediction.predicted_away_goals,
                points_awarded=prediction.points_awarded,
                is_joker=prediction.is_joker,
                home_team=fixture.home_team,
                away_team=fixture.away_team,
                home_score=fixture.home_score,
                away_score=fixture.away_score,
                match_time=fixture.match_time,
            ))

        return RoundPointsBreakdown(
            round_id=round_id,
            total_points=sum(p.points_awarded or 0 for p in breakdown),
            predictions=breakdown,
        )

    async def get_prediction_stats(self, user_id: str) -> PredictionStats:
        """
        Accuracy, average points per round, best round and points history
        over every completed round with results.
        """
        records = await self.prediction_repo.get_scoring_records(user_ids=[user_id])
        logger.info("Found %s scored predictions for user %s", len(records), user_id)

        if not records:
            return PredictionStats()

        rounds: dict[int, RoundPoints] = {}
        determinable = 0
        correct = 0

        for record in records:
            round_points = rounds.setdefault(
                record.round_id,
                RoundPoints(round_id=record.round_id, round_name=record.round_name, points=0)
            )
            round_points.points += record.points_awarded or 0

            actual = classify_outcome(record.home_score, record.away_score)
            if actual is None:
                continue
            determinable += 1
            if classify_outcome(record.predicted_home_goals, record.predicted_away_goals) == actual:
                correct += 1

        history = sorted(rounds.values(), key=lambda r: r.round_id)

        best_round = None
        for round_points in history:
            if best_round is None or round_points.points > best_round.points:
                best_round = round_points

        total_points = sum(r.points for r in history)

        return PredictionStats(
            overall_accuracy=round(correct / determinable, 2) if determinable else 0.0,
            average_points_per_round=round(total_points / len(history), 1),
            best_round=best_round,
            points_per_round_history=history,
        )

"""
StandingsService - Calculates ranked standings from scored predictions.

Standings are computed on the fly from points_awarded, overall (all
completed rounds) or for a single round, optionally restricted to a set
of users (private leagues).
"""

import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Optional

from motor.motor_asyncio import AsyncIOMotorDatabase

from app.models.prediction import ScoringRecord
from app.models.round import ROUND_COMPLETED
from app.models.standings import StandingsEntry
from app.models.user import PlayerProfile
from app.repositories.league_repository import LeagueRepository
from app.repositories.prediction_repository import PredictionRepository
from app.repositories.round_repository import RoundRepository
from app.repositories.user_repository import UserRepository
from app.services.points_service import classify_outcome

logger = logging.getLogger(__name__)


class StandingsServiceError(Exception):
    """Base exception for standings service errors."""
    pass


class StandingsCalculationError(StandingsServiceError):
    """Raised when the data needed for standings cannot be read."""

    def __init__(self, message: str = "Failed to calculate standings."):
        super().__init__(message)


class RoundNotFoundError(StandingsServiceError):
    """Raised when the round does not exist."""
    pass


class RoundNotCompletedError(StandingsServiceError):
    """Raised when standings are requested for a round not yet completed."""
    pass


class LeagueNotFoundError(StandingsServiceError):
    """Raised when a league has no members."""
    pass


class NotLeagueMemberError(StandingsServiceError):
    """Raised when the requesting user does not belong to the league."""
    pass


def _accuracy(correct_outcomes: int, total_predictions: int) -> Optional[float]:
    """Percentage of correct outcomes, one decimal, half-up."""
    if total_predictions <= 0:
        return None
    value = Decimal(correct_outcomes * 100) / Decimal(total_predictions)
    return float(value.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def _sort_key(player: dict):
    # Ordinal comparison of the case-folded name keeps ties platform independent
    return (-player["points"], player["name"].casefold(), player["name"], player["user_id"])


def assign_dense_ranks(sorted_players: list[dict]) -> list[int]:
    """
    Competition ranks for players already sorted by points descending.

    Tied players share a rank; the next distinct total gets its 1-based
    position, so [10, 10, 8] ranks as [1, 1, 3].
    """
    ranks = []
    current_rank = 0
    last_points = None

    for index, player in enumerate(sorted_players):
        if last_points is None or player["points"] != last_points:
            current_rank = index + 1
            last_points = player["points"]
        ranks.append(current_rank)

    return ranks


def aggregate_standings(
    roster: Iterable[PlayerProfile],
    records: Iterable[ScoringRecord]
) -> list[StandingsEntry]:
    """
    Build ranked standings from the player roster and their scored predictions.

    Every roster player appears, even with no predictions. Records of users
    outside the roster are ignored.
    """
    stats: dict[str, dict] = {}
    for player in roster:
        stats[player.user_id] = {
            **player.model_dump(),
            "points": 0,
            "total_predictions": 0,
            "correct_outcomes": 0,
            "exact_scores": 0,
        }

    for record in records:
        player_stats = stats.get(record.user_id)
        if player_stats is None:
            continue

        player_stats["total_predictions"] += 1
        player_stats["points"] += record.points_awarded or 0

        actual = classify_outcome(record.home_score, record.away_score)
        predicted = classify_outcome(record.predicted_home_goals, record.predicted_away_goals)
        if actual is not None and predicted == actual:
            player_stats["correct_outcomes"] += 1

        predicted_score = f"{record.predicted_home_goals}-{record.predicted_away_goals}"
        actual_score = f"{record.home_score}-{record.away_score}"
        if predicted_score == actual_score:
            player_stats["exact_scores"] += 1

    players = sorted(stats.values(), key=_sort_key)
    ranks = assign_dense_ranks(players)

    return [
        StandingsEntry(
            user_id=player["user_id"],
            name=player["name"],
            team_name=player["team_name"],
            avatar_url=player["avatar_url"],
            rank=rank,
            points=player["points"],
            movement=0,
            total_predictions=player["total_predictions"],
            correct_outcomes=player["correct_outcomes"],
            exact_scores=player["exact_scores"],
            accuracy=_accuracy(player["correct_outcomes"], player["total_predictions"]),
        )
        for player, rank in zip(players, ranks)
    ]


class StandingsService:
    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db
        self.user_repo = UserRepository(db)
        self.round_repo = RoundRepository(db)
        self.prediction_repo = PredictionRepository(db)
        self.league_repo = LeagueRepository(db)

    async def calculate_standings(
        self,
        round_id: Optional[int] = None,
        filter_user_ids: Optional[list[str]] = None
    ) -> list[StandingsEntry]:
        """
        Ranked standings for all completed rounds, or for round_id only.

        An empty filter_user_ids returns [] without reading anything.
        Read failures raise StandingsCalculationError, never partial results.
        """
        scope = f"for round {round_id}" if round_id is not None else "overall"
        if filter_user_ids is not None:
            logger.info("Calculating standings %s, filtering for %s users", scope, len(filter_user_ids))
        else:
            logger.info("Calculating standings %s", scope)

        if filter_user_ids is not None and len(filter_user_ids) == 0:
            return []

        try:
            roster = await self.user_repo.get_players(filter_user_ids)
            if not roster:
                return []

            records = await self.prediction_repo.get_scoring_records(
                round_id=round_id,
                user_ids=filter_user_ids
            )
        except Exception as e:
            logger.exception("Error calculating standings (round_id=%s)", round_id)
            raise StandingsCalculationError() from e

        standings = aggregate_standings(roster, records)
        logger.info("Calculated standings: returning %s players", len(standings))
        return standings

    async def get_round_standings(self, round_id: int) -> list[StandingsEntry]:
        """Standings of a single round; only completed rounds have them."""
        try:
            round_ = await self.round_repo.get_by_id(round_id)
        except Exception as e:
            logger.exception("Error reading round %s for standings", round_id)
            raise StandingsCalculationError() from e

        if not round_:
            raise RoundNotFoundError(f"Round {round_id} not found")

        if round_.status != ROUND_COMPLETED:
            raise RoundNotCompletedError(
                f"Standings are only available for rounds with status '{ROUND_COMPLETED}'. "
                f"Status of round {round_id} is '{round_.status}'."
            )

        return await self.calculate_standings(round_id)

    async def get_league_standings(
        self,
        league_id: int,
        user_id: str
    ) -> list[StandingsEntry]:
        """Overall standings restricted to the members of a league."""
        try:
            member_ids = await self.league_repo.get_member_ids(league_id)
        except Exception as e:
            logger.exception("Error reading members of league %s", league_id)
            raise StandingsCalculationError() from e

        if not member_ids:
            raise LeagueNotFoundError(f"League {league_id} not found")

        if user_id not in member_ids:
            raise NotLeagueMemberError("You are not a member of this league.")

        return await self.calculate_standings(None, member_ids)

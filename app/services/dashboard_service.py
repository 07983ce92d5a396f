"""
DashboardService - Highlights shown on the player dashboard.

Reuses StandingsService for the overall and last-round views.
"""

import asyncio
import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorDatabase
from pydantic import BaseModel

from app.models.standings import StandingsEntry
from app.repositories.round_repository import RoundRepository
from app.services.standings_service import StandingsService, StandingsCalculationError

logger = logging.getLogger(__name__)


class Leader(BaseModel):
    user_id: str
    name: str
    avatar_url: Optional[str] = None
    points: int


class OverallLeader(BaseModel):
    leading_score: int
    leaders: list[Leader]


class LastRoundHighlights(BaseModel):
    round_id: int
    round_name: str
    top_scorers: list[Leader]


class UserRoundStats(BaseModel):
    round_id: int
    score: int
    rank: int


class DashboardHighlights(BaseModel):
    last_round_highlights: Optional[LastRoundHighlights] = None
    user_last_round_stats: Optional[UserRoundStats] = None
    overall_leader: Optional[OverallLeader] = None


def _leaders(standings: list[StandingsEntry]) -> list[Leader]:
    """Everyone sharing the top points of already sorted standings."""
    top_score = standings[0].points
    return [
        Leader(user_id=e.user_id, name=e.name, avatar_url=e.avatar_url, points=e.points)
        for e in standings
        if e.points == top_score
    ]


class DashboardService:
    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db
        self.round_repo = RoundRepository(db)
        self.standings_service = StandingsService(db)

    async def _last_round_standings(self, round_id: Optional[int]) -> list[StandingsEntry]:
        if round_id is None:
            return []
        return await self.standings_service.calculate_standings(round_id)

    async def get_highlights(self, user_id: Optional[str] = None) -> DashboardHighlights:
        """
        Overall leader, last completed round top scorers and the user's
        last round score and rank.

        Both standings are independent reads, so they run concurrently.
        """
        try:
            last_round = await self.round_repo.get_last_completed()
        except Exception as e:
            logger.exception("Error reading last completed round")
            raise StandingsCalculationError() from e

        overall, last_round_standings = await asyncio.gather(
            self.standings_service.calculate_standings(),
            self._last_round_standings(last_round.id if last_round else None),
        )

        highlights = DashboardHighlights()

        if overall:
            highlights.overall_leader = OverallLeader(
                leading_score=overall[0].points,
                leaders=_leaders(overall),
            )

        if last_round and last_round_standings:
            highlights.last_round_highlights = LastRoundHighlights(
                round_id=last_round.id,
                round_name=last_round.name,
                top_scorers=_leaders(last_round_standings),
            )

            entry = next((e for e in last_round_standings if e.user_id == user_id), None)
            if entry:
                highlights.user_last_round_stats = UserRoundStats(
                    round_id=last_round.id,
                    score=entry.points,
                    rank=entry.rank,
                )

        return highlights

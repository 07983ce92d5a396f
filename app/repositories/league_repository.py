"""
🎯 LeagueRepository - Miembros de ligas privadas
"""

from motor.motor_asyncio import AsyncIOMotorDatabase

from app.models.league import MEMBERSHIP_ACCEPTED


class LeagueRepository:
    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db
        self.memberships = db["league_memberships"]

    async def get_member_ids(self, league_id: int) -> list[str]:
        """IDs de los usuarios que aceptaron unirse a la liga"""
        return await self.memberships.distinct(
            "user_id",
            {"league_id": league_id, "status": MEMBERSHIP_ACCEPTED}
        )

"""
🎯 FixtureRepository - Acceso a la colección fixtures
"""

from motor.motor_asyncio import AsyncIOMotorDatabase

from app.models.fixture import Fixture


class FixtureRepository:
    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db
        self.collection = db["fixtures"]

    async def get_for_round(self, round_id: int) -> list[Fixture]:
        """Todos los partidos de una jornada, por hora de inicio"""
        cursor = self.collection.find({"round_id": round_id}).sort("match_time", 1)
        docs = await cursor.to_list(length=None)
        return [Fixture(**doc) for doc in docs]

    async def get_with_results(self, round_ids: list[int]) -> list[Fixture]:
        """Partidos de esas jornadas que ya tienen los dos marcadores"""
        if not round_ids:
            return []

        cursor = self.collection.find({
            "round_id": {"$in": round_ids},
            "home_score": {"$ne": None},
            "away_score": {"$ne": None},
        })
        docs = await cursor.to_list(length=None)
        return [Fixture(**doc) for doc in docs]

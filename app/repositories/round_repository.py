"""
🎯 RoundRepository - Acceso a la colección rounds
"""

from typing import Optional

from motor.motor_asyncio import AsyncIOMotorDatabase

from app.models.round import Round, ROUND_COMPLETED


class RoundRepository:
    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db
        self.collection = db["rounds"]

    async def get_by_id(self, round_id: int) -> Optional[Round]:
        """Obtiene una jornada por ID"""
        doc = await self.collection.find_one({"id": round_id})
        return Round(**doc) if doc else None

    async def get_completed(self, round_id: Optional[int] = None) -> list[Round]:
        """Jornadas completadas (opcionalmente solo la indicada), ordenadas por ID"""
        query: dict = {"status": ROUND_COMPLETED}
        if round_id is not None:
            query["id"] = round_id

        docs = await self.collection.find(query).sort("id", 1).to_list(length=None)
        return [Round(**doc) for doc in docs]

    async def get_last_completed(self) -> Optional[Round]:
        """Última jornada completada (la de ID más alto)"""
        docs = await self.collection.find(
            {"status": ROUND_COMPLETED}
        ).sort("id", -1).limit(1).to_list(length=1)

        return Round(**docs[0]) if docs else None

    async def update_status(
        self,
        round_id: int,
        status: str,
        expected_status: Optional[str] = None
    ) -> bool:
        """
        Cambia el estado de una jornada

        Con expected_status solo cambia si la jornada sigue en ese estado
        (un único update_one, atómico en MongoDB).
        """
        query: dict = {"id": round_id}
        if expected_status is not None:
            query["status"] = expected_status

        result = await self.collection.update_one(
            query,
            {"$set": {"status": status}}
        )
        return result.matched_count > 0

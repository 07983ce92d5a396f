"""
UserRepository - MongoDB access for users collection.
"""

from typing import Optional

from motor.motor_asyncio import AsyncIOMotorDatabase

from app.models.user import PlayerProfile, PLAYER_ROLE


class UserRepository:
    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db
        self.collection = db["users"]

    async def get_players(
        self,
        user_ids: Optional[list[str]] = None
    ) -> list[PlayerProfile]:
        """
        Get every user with the player role, optionally restricted to user_ids.

        Players without predictions are included on purpose: they still show
        up in standings with zero points.
        """
        query: dict = {"role": PLAYER_ROLE}
        if user_ids is not None:
            query["_id"] = {"$in": list(user_ids)}

        docs = await self.collection.find(query).to_list(length=None)

        return [
            PlayerProfile(
                user_id=doc["_id"],
                name=doc.get("name", "Unknown"),
                team_name=doc.get("team_name"),
                avatar_url=doc.get("avatar_url"),
            )
            for doc in docs
        ]

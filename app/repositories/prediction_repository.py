"""
🎯 PredictionRepository - Predicciones de los jugadores

Repository para manejar las predicciones de marcador.
IDs compuestos: user_id:fixture_id
"""

import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorDatabase
from pydantic import ValidationError

from app.models.prediction import Prediction, ScoringRecord
from app.repositories.fixture_repository import FixtureRepository
from app.repositories.round_repository import RoundRepository

logger = logging.getLogger(__name__)

# Campos que, si vienen corruptos, se leen como None (la predicción vale 0)
RECOVERABLE_FIELDS = ("predicted_home_goals", "predicted_away_goals", "is_joker", "points_awarded")


def parse_prediction(doc: dict) -> Optional[Prediction]:
    """
    Valida un documento de predicción.

    Goles, comodín o puntos ilegibles se descartan (None / False) para que
    la predicción cuente con 0 puntos en vez de romper la jornada entera.
    Retorna None si ni siquiera se puede identificar la predicción.
    """
    try:
        return Prediction(**doc)
    except ValidationError as e:
        bad_fields = {str(err["loc"][0]) for err in e.errors() if err["loc"]}

    logger.warning(
        "Invalid prediction %s, unreadable fields %s: %s",
        doc.get("id"), sorted(bad_fields), {f: doc.get(f) for f in sorted(bad_fields)}
    )

    recoverable = bad_fields & set(RECOVERABLE_FIELDS)
    if recoverable != bad_fields:
        logger.error("Prediction %s cannot be read and will be ignored", doc.get("id"))
        return None

    cleaned = {k: v for k, v in doc.items() if k not in recoverable}
    return Prediction(**cleaned)


class PredictionRepository:
    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db
        self.collection = db["predictions"]
        self.round_repo = RoundRepository(db)
        self.fixture_repo = FixtureRepository(db)

    # ============================================
    # 📌 READ
    # ============================================

    async def get_for_round(self, round_id: int) -> list[Prediction]:
        """Todas las predicciones de una jornada"""
        cursor = self.collection.find({"round_id": round_id})
        docs = await cursor.to_list(length=None)
        return [p for p in map(parse_prediction, docs) if p is not None]

    async def get_user_predictions_for_round(
        self,
        user_id: str,
        round_id: int
    ) -> list[Prediction]:
        """Predicciones de un usuario en una jornada"""
        cursor = self.collection.find({
            "user_id": user_id,
            "round_id": round_id
        })
        docs = await cursor.to_list(length=None)
        return [p for p in map(parse_prediction, docs) if p is not None]

    async def get_scoring_records(
        self,
        round_id: Optional[int] = None,
        user_ids: Optional[list[str]] = None
    ) -> list[ScoringRecord]:
        """
        🔥 Predicciones que cuentan para la clasificación

        Solo jornadas completadas (o la jornada indicada si lo está) y partidos
        con los dos marcadores. Cada registro lleva el resultado real del
        partido y el nombre de la jornada.
        """
        rounds = await self.round_repo.get_completed(round_id)
        if not rounds:
            return []

        round_names = {r.id: r.name for r in rounds}
        fixtures = await self.fixture_repo.get_with_results(list(round_names))
        if not fixtures:
            return []

        fixtures_by_id = {f.id: f for f in fixtures}

        query: dict = {"fixture_id": {"$in": list(fixtures_by_id)}}
        if user_ids is not None:
            query["user_id"] = {"$in": list(user_ids)}

        docs = await self.collection.find(query).to_list(length=None)

        records = []
        for doc in docs:
            prediction = parse_prediction(doc)
            if prediction is None:
                continue
            fixture = fixtures_by_id[prediction.fixture_id]
            records.append(ScoringRecord(
                user_id=prediction.user_id,
                round_id=fixture.round_id,
                fixture_id=fixture.id,
                round_name=round_names.get(fixture.round_id),
                predicted_home_goals=prediction.predicted_home_goals,
                predicted_away_goals=prediction.predicted_away_goals,
                points_awarded=prediction.points_awarded,
                home_score=fixture.home_score,
                away_score=fixture.away_score,
            ))

        return records

    # ============================================
    # 📌 UPDATE
    # ============================================

    async def set_points_awarded(self, points_by_id: dict[str, int]) -> int:
        """
        🔥 Guarda points_awarded de muchas predicciones

        Retorna cuántas predicciones se encontraron
        """
        if not points_by_id:
            return 0

        matched = 0
        for prediction_id, points in points_by_id.items():
            result = await self.collection.update_one(
                {"id": prediction_id},
                {"$set": {"points_awarded": points}}
            )
            matched += result.matched_count

        return matched

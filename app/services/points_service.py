"""
Servicio de Puntos - Calcula y asigna puntos por predicciones de marcador
"""

import logging
import math
from typing import Any, Mapping, Optional

from motor.motor_asyncio import AsyncIOMotorDatabase
from pydantic import BaseModel

from app.models.round import ROUND_CLOSED, ROUND_COMPLETED
from app.repositories.fixture_repository import FixtureRepository
from app.repositories.prediction_repository import PredictionRepository
from app.repositories.round_repository import RoundRepository

logger = logging.getLogger(__name__)

EXACT_SCORE_POINTS = 3
CORRECT_OUTCOME_POINTS = 1
JOKER_MULTIPLIER = 2

HOME_WIN = "H"
AWAY_WIN = "A"
DRAW = "D"


class PointsServiceError(Exception):
    """Base exception for points service errors."""
    pass


class RoundNotFoundError(PointsServiceError):
    """Raised when the round does not exist."""
    pass


class RoundNotScorableError(PointsServiceError):
    """Raised when a round is not closed or has fixtures without results."""
    pass


class RoundScoringSummary(BaseModel):
    round_id: int
    predictions_scored: int
    points_distributed: int
    users_affected: int


def classify_outcome(home: Any, away: Any) -> Optional[str]:
    """
    Home win, away win or draw. None if either side is missing.

    Predictions and results are classified with this same rule so the
    comparison is symmetric.
    """
    if home is None or away is None:
        return None
    if home > away:
        return HOME_WIN
    if away > home:
        return AWAY_WIN
    return DRAW


def _to_number(value: Any) -> Optional[float]:
    """Numeric value of a score, or None when it cannot be read as one."""
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str) and value.strip():
        try:
            number = float(value)
        except ValueError:
            return None
    else:
        return None

    return None if math.isnan(number) else number


def calculate_points(
    prediction: Mapping[str, Any],
    result: Mapping[str, Any]
) -> int:
    """
    Calcular puntos para una predicción según el resultado real.

    Sistema de puntos:
    - 3 puntos: marcador exacto
    - 1 punto: acertar el signo (local, visitante o empate)
    - Comodín (joker): duplica los puntos solo si ya se ganó alguno

    Args:
        prediction: Dict con predicted_home_goals, predicted_away_goals, is_joker
        result: Dict con home_score, away_score

    Returns:
        Puntos ganados (0, 1, 2, 3 o 6). Nunca lanza excepciones: datos
        incompletos o inválidos valen 0.
    """
    raw_scores = (
        prediction.get("predicted_home_goals"),
        prediction.get("predicted_away_goals"),
        result.get("home_score"),
        result.get("away_score"),
    )

    # Predicción sin hacer o partido sin resultado
    if any(score is None for score in raw_scores):
        return 0

    numbers = [_to_number(score) for score in raw_scores]
    if any(number is None or number < 0 for number in numbers):
        logger.warning(
            "Invalid score values during point calculation: prediction=%s result=%s",
            dict(prediction), dict(result)
        )
        return 0

    pred_home, pred_away, actual_home, actual_away = numbers

    if pred_home == actual_home and pred_away == actual_away:
        base_points = EXACT_SCORE_POINTS
    elif classify_outcome(pred_home, pred_away) == classify_outcome(actual_home, actual_away):
        base_points = CORRECT_OUTCOME_POINTS
    else:
        base_points = 0

    if prediction.get("is_joker") is True and base_points > 0:
        return base_points * JOKER_MULTIPLIER

    return base_points


class PointsService:
    """
    Servicio para puntuar jornadas cerradas.

    Calcula points_awarded de cada predicción de la jornada y la marca
    como completada para que entre en la clasificación.
    """

    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db
        self.round_repo = RoundRepository(db)
        self.fixture_repo = FixtureRepository(db)
        self.prediction_repo = PredictionRepository(db)

    async def score_round(self, round_id: int) -> RoundScoringSummary:
        """
        Calcular y asignar puntos a todas las predicciones de una jornada.

        1. La jornada debe existir y estar cerrada
        2. Todos sus partidos deben tener resultado
        3. Calcula y guarda points_awarded de cada predicción
        4. Marca la jornada como completada
        """
        round_ = await self.round_repo.get_by_id(round_id)
        if not round_:
            raise RoundNotFoundError(f"Round {round_id} not found")

        if round_.status != ROUND_CLOSED:
            raise RoundNotScorableError(
                f"Scoring can only be initiated for rounds with status '{ROUND_CLOSED}'. "
                f"Current status: '{round_.status}'."
            )

        fixtures = await self.fixture_repo.get_for_round(round_id)
        missing = [str(f.id) for f in fixtures if not f.has_result]
        if missing:
            raise RoundNotScorableError(
                f"Cannot score round. Results missing for fixtures: {', '.join(missing)}."
            )

        results = {
            f.id: {"home_score": f.home_score, "away_score": f.away_score}
            for f in fixtures
        }

        predictions = await self.prediction_repo.get_for_round(round_id)

        points_by_id: dict[str, int] = {}
        users_affected = set()

        for prediction in predictions:
            result = results.get(prediction.fixture_id)
            if result is None:
                logger.error(
                    "Fixture %s not found in round %s, prediction %s will not be scored",
                    prediction.fixture_id, round_id, prediction.id
                )
                continue

            points_by_id[prediction.id] = calculate_points(prediction.model_dump(), result)
            users_affected.add(prediction.user_id)

        await self.prediction_repo.set_points_awarded(points_by_id)
        # Solo se completa si nadie cambió la jornada mientras se puntuaba;
        # los puntos ya escritos se recalculan al volver a puntuar
        completed = await self.round_repo.update_status(
            round_id, ROUND_COMPLETED, expected_status=ROUND_CLOSED
        )
        if not completed:
            raise RoundNotScorableError(
                f"Round {round_id} changed status while being scored. Score it again once it is '{ROUND_CLOSED}'."
            )

        summary = RoundScoringSummary(
            round_id=round_id,
            predictions_scored=len(points_by_id),
            points_distributed=sum(points_by_id.values()),
            users_affected=len(users_affected),
        )
        logger.info(
            "Scored round %s: %s predictions, %s points",
            round_id, summary.predictions_scored, summary.points_distributed
        )
        return summary

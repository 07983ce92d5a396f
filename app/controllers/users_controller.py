"""
Controlador de usuarios - Estadísticas de predicción
"""

from fastapi import APIRouter

from app.core.dependencies import Database
from app.services.stats_service import StatsService, PredictionStats


router = APIRouter(prefix="/users", tags=["users"])


@router.get("/{user_id}/stats/predictions", response_model=PredictionStats)
async def get_prediction_stats(user_id: str, db: Database):
    """
    Obtener las estadísticas de predicción de un usuario:
    acierto, media por jornada, mejor jornada e histórico.
    """
    stats_service = StatsService(db)
    return await stats_service.get_prediction_stats(user_id)

"""
Controlador de predicciones - Puntos obtenidos por jornada
"""

from fastapi import APIRouter, HTTPException, Query, status

from app.core.dependencies import Database
from app.services.stats_service import (
    StatsService,
    RoundPointsBreakdown,
    RoundNotFoundError,
    RoundNotCompletedError,
)


router = APIRouter(prefix="/predictions", tags=["predictions"])


@router.get("/points/{round_id}", response_model=RoundPointsBreakdown)
async def get_round_points(
    round_id: int,
    db: Database,
    user_id: str = Query(..., description="User whose points to return")
):
    """
    Obtener los puntos de un usuario en una jornada completada,
    partido a partido.
    """
    stats_service = StatsService(db)

    try:
        return await stats_service.get_round_points(user_id, round_id)
    except RoundNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )
    except RoundNotCompletedError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )

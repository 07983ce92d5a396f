"""
Controlador de jornadas - Puntuación de una jornada cerrada
"""

from fastapi import APIRouter, HTTPException, status

from app.core.dependencies import Database
from app.services.points_service import (
    PointsService,
    RoundScoringSummary,
    RoundNotFoundError,
    RoundNotScorableError,
)


router = APIRouter(prefix="/rounds", tags=["rounds"])


@router.post("/{round_id}/score", response_model=RoundScoringSummary)
async def score_round(round_id: int, db: Database):
    """
    Puntuar una jornada.

    La jornada debe estar cerrada y con todos los resultados cargados.
    Al terminar queda como completada.
    """
    points_service = PointsService(db)

    try:
        return await points_service.score_round(round_id)
    except RoundNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )
    except RoundNotScorableError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )

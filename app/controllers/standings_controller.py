"""
Controlador de clasificación - Endpoints de standings

La clasificación se calcula en cada request a partir de los puntos ya
asignados al puntuar cada jornada.
"""

from typing import Optional

from fastapi import APIRouter, HTTPException, Query, status

from app.core.dependencies import Database
from app.models.standings import StandingsEntry
from app.services.standings_service import (
    StandingsService,
    StandingsCalculationError,
    RoundNotFoundError,
    RoundNotCompletedError,
)


router = APIRouter(prefix="/standings", tags=["standings"])


@router.get("", response_model=list[StandingsEntry])
async def get_standings(
    db: Database,
    round_id: Optional[int] = Query(None, description="Only this completed round")
):
    """
    Obtener la clasificación general (todas las jornadas completadas)
    o la de una jornada concreta.
    """
    standings_service = StandingsService(db)

    try:
        return await standings_service.calculate_standings(round_id)
    except StandingsCalculationError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e)
        )


@router.get("/rounds/{round_id}", response_model=list[StandingsEntry])
async def get_round_standings(round_id: int, db: Database):
    """
    Obtener la clasificación de una jornada.

    Solo disponible cuando la jornada está completada.
    """
    standings_service = StandingsService(db)

    try:
        return await standings_service.get_round_standings(round_id)
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
    except StandingsCalculationError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e)
        )

"""
Controlador de ligas - Clasificación de una liga privada
"""

from fastapi import APIRouter, HTTPException, Query, status

from app.core.dependencies import Database
from app.models.standings import StandingsEntry
from app.services.standings_service import (
    StandingsService,
    StandingsCalculationError,
    LeagueNotFoundError,
    NotLeagueMemberError,
)


router = APIRouter(prefix="/leagues", tags=["leagues"])


@router.get("/{league_id}/standings", response_model=list[StandingsEntry])
async def get_league_standings(
    league_id: int,
    db: Database,
    user_id: str = Query(..., description="User requesting the standings")
):
    """
    Obtener la clasificación general limitada a los miembros de la liga.

    Solo los miembros de la liga pueden verla.
    """
    standings_service = StandingsService(db)

    try:
        return await standings_service.get_league_standings(league_id, user_id)
    except LeagueNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )
    except NotLeagueMemberError as e:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=str(e)
        )
    except StandingsCalculationError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e)
        )

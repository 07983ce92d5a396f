"""
Controlador del dashboard - Resumen de líderes y última jornada
"""

from typing import Optional

from fastapi import APIRouter, HTTPException, Query, status

from app.core.dependencies import Database
from app.services.dashboard_service import DashboardService, DashboardHighlights
from app.services.standings_service import StandingsCalculationError


router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("/highlights", response_model=DashboardHighlights)
async def get_dashboard_highlights(
    db: Database,
    user_id: Optional[str] = Query(None, description="User to report last round stats for")
):
    """
    Obtener los destacados del dashboard: líder general, mejores de la
    última jornada y posición del usuario en ella.
    """
    dashboard_service = DashboardService(db)

    try:
        return await dashboard_service.get_highlights(user_id)
    except StandingsCalculationError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch dashboard highlights."
        )

"""
Controlador de salud - Endpoint de comprobación del servicio
"""

from typing import Optional

from fastapi import APIRouter
from pydantic import BaseModel

from app.core.config import get_settings
from app.database import Database


router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Respuesta del chequeo de estado."""
    status: str
    environment: str
    database: str
    database_name: Optional[str] = None


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """
    Endpoint de verificación de estado.

    Indica el entorno y si hay una base de datos conectada.
    """
    settings = get_settings()
    connected = Database.db is not None

    return HealthResponse(
        status="ok",
        environment=settings.app_env,
        database="connected" if connected else "disconnected",
        database_name=settings.mongodb_db_name if connected else None,
    )

"""
Entry point de la API
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import Response
from starlette.middleware.base import BaseHTTPMiddleware

from app.core.config import get_settings
from app.core.logging import configure_logging
from app.database import Database

from app.controllers.health_controller import router as health_router
from app.controllers.standings_controller import router as standings_router
from app.controllers.leagues_controller import router as leagues_router
from app.controllers.dashboard_controller import router as dashboard_router
from app.controllers.rounds_controller import router as rounds_router
from app.controllers.predictions_controller import router as predictions_router
from app.controllers.users_controller import router as users_router

settings = get_settings()
configure_logging(settings.log_level)

# Parse CORS origins
CORS_ORIGINS = [origin.strip() for origin in settings.cors_origins.split(",")]


def is_allowed_origin(origin: str) -> bool:
    """Check if origin is in the allowed list."""
    if not origin:
        return False
    return origin in CORS_ORIGINS


class CORSMiddleware(BaseHTTPMiddleware):
    """
    Custom CORS middleware that handles OPTIONS preflight BEFORE routing.

    FastAPI's query parameter validation would otherwise reject
    preflight requests with 422.
    """

    async def dispatch(self, request: Request, call_next):
        origin = request.headers.get("origin", "")

        # Handle preflight OPTIONS request IMMEDIATELY
        if request.method == "OPTIONS":
            if is_allowed_origin(origin):
                return Response(
                    status_code=200,
                    headers={
                        "Access-Control-Allow-Origin": origin,
                        "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS, PATCH",
                        "Access-Control-Allow-Headers": "Authorization, Content-Type, Accept, Origin, X-Requested-With",
                        "Access-Control-Allow-Credentials": "true",
                        "Access-Control-Max-Age": "86400",  # Cache preflight for 24 hours
                    }
                )
            else:
                return Response(status_code=403, content="Origin not allowed")

        response = await call_next(request)

        if is_allowed_origin(origin):
            response.headers["Access-Control-Allow-Origin"] = origin
            response.headers["Access-Control-Allow-Credentials"] = "true"

        return response


@asynccontextmanager
async def lifespan(app: FastAPI):
    await Database.connect()
    yield
    await Database.disconnect()

# Creo la app
app = FastAPI(
    title="Predictor League API",
    description="Backend de la liga de predicciones: puntuación y clasificaciones",
    version="1.0.0",
    lifespan=lifespan
)

app.add_middleware(CORSMiddleware)

# Agrego todos los routers de los controllers al app
app.include_router(health_router)
app.include_router(standings_router)
app.include_router(leagues_router)
app.include_router(dashboard_router)
app.include_router(rounds_router)
app.include_router(predictions_router)
app.include_router(users_router)


@app.get("/")
async def root():
    # Endpoint raíz, sirve para verificar que la API está levantada
    return {
        "name": "Predictor League API",
        "version": "1.0.0",
        "docs": "/docs"
    }

from datetime import datetime
from typing import Optional
from pydantic import BaseModel


class Prediction(BaseModel):
    """Predicción de un usuario para un partido"""

    id: str  # user_id:fixture_id

    user_id: str
    fixture_id: int
    round_id: int

    predicted_home_goals: Optional[int] = None
    predicted_away_goals: Optional[int] = None
    is_joker: bool = False

    points_awarded: Optional[int] = None  # se asigna al puntuar la jornada

    class Config:
        populate_by_name = True


class ScoringRecord(BaseModel):
    """Predicción con el resultado real de su partido, lista para agregar"""

    user_id: str
    round_id: int
    fixture_id: int
    round_name: Optional[str] = None

    predicted_home_goals: Optional[int] = None
    predicted_away_goals: Optional[int] = None
    points_awarded: Optional[int] = None

    home_score: Optional[int] = None
    away_score: Optional[int] = None


class PredictionPoints(BaseModel):
    """Desglose de puntos de una predicción (vista del jugador)"""

    fixture_id: int
    predicted_home_goals: Optional[int] = None
    predicted_away_goals: Optional[int] = None
    points_awarded: Optional[int] = None
    is_joker: bool = False

    home_team: str
    away_team: str
    home_score: Optional[int] = None
    away_score: Optional[int] = None
    match_time: Optional[datetime] = None

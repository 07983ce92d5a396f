from typing import Optional
from pydantic import BaseModel


class StandingsEntry(BaseModel):
    """Fila de la clasificación (resultado agregado por jugador)"""

    user_id: str
    name: str
    team_name: Optional[str] = None
    avatar_url: Optional[str] = None

    rank: int
    points: int
    movement: int = 0  # sin histórico de posiciones, siempre 0

    total_predictions: int
    correct_outcomes: int
    exact_scores: int
    accuracy: Optional[float] = None  # porcentaje con 1 decimal

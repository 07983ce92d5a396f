from datetime import datetime
from typing import Optional
from pydantic import BaseModel


class Fixture(BaseModel):
    """Partido individual de una jornada"""

    id: int
    round_id: int

    home_team: str
    away_team: str
    match_time: Optional[datetime] = None

    # Resultado real (None hasta que se juega)
    home_score: Optional[int] = None
    away_score: Optional[int] = None

    @property
    def has_result(self) -> bool:
        return self.home_score is not None and self.away_score is not None

    class Config:
        populate_by_name = True

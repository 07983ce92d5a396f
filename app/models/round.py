from datetime import datetime
from typing import Optional
from pydantic import BaseModel


ROUND_SETUP = "setup"
ROUND_OPEN = "open"
ROUND_CLOSED = "closed"
ROUND_COMPLETED = "completed"


class Round(BaseModel):
    """Jornada: conjunto de partidos con fecha límite para predecir"""

    id: int
    name: str

    status: str  # setup | open | closed | completed
    deadline: Optional[datetime] = None

    class Config:
        populate_by_name = True

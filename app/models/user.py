from typing import Optional
from pydantic import BaseModel


PLAYER_ROLE = "player"  # player | admin | visitor


class PlayerProfile(BaseModel):
    """Datos públicos de un jugador que aparecen en la clasificación"""

    user_id: str
    name: str
    team_name: Optional[str] = None
    avatar_url: Optional[str] = None

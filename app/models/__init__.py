from .user import PlayerProfile
from .round import Round
from .fixture import Fixture
from .prediction import Prediction, ScoringRecord, PredictionPoints
from .standings import StandingsEntry

__all__ = [
    "PlayerProfile",
    "Round",
    "Fixture",
    "Prediction",
    "ScoringRecord",
    "PredictionPoints",
    "StandingsEntry",
]

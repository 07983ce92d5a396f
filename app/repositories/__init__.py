from .user_repository import UserRepository
from .round_repository import RoundRepository
from .fixture_repository import FixtureRepository
from .prediction_repository import PredictionRepository
from .league_repository import LeagueRepository

__all__ = [
    "UserRepository",
    "RoundRepository",
    "FixtureRepository",
    "PredictionRepository",
    "LeagueRepository",
]

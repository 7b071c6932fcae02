# app/schemas/__init__.py

from .game import (
    Game,
    GameBase,
    GameCreate,
    GameUpdate,
    GameSearch,
    GameDeleted
)
from .enums import PopulateStateEnum
from .job_status import PopulateStatus

__all__ = [
    "Game", "GameBase", "GameCreate", "GameUpdate", "GameSearch", "GameDeleted",
    "PopulateStateEnum",
    "PopulateStatus"
]

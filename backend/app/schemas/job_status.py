from datetime import datetime
from typing import Optional

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

from .enums import PopulateStateEnum


class PopulateStatus(BaseModel):
    state: PopulateStateEnum
    started_at: Optional[datetime] = None
    finished_at: Optional[datetime] = None
    count: Optional[int] = None
    error: Optional[str] = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True

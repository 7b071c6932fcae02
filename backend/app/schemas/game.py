from datetime import datetime
from typing import Optional

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class GameBase(BaseModel):
    publisher_id: Optional[str] = None
    name: Optional[str] = None
    platform: Optional[str] = None
    store_id: Optional[str] = None
    bundle_id: Optional[str] = None
    app_version: Optional[str] = None
    is_published: Optional[bool] = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        coerce_numbers_to_str = True


class GameCreate(GameBase):
    is_published: Optional[bool] = True


class GameUpdate(GameBase):
    pass


class Game(GameBase):
    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True
        coerce_numbers_to_str = True


class GameSearch(BaseModel):
    name: Optional[str] = None
    platform: Optional[str] = None


class GameDeleted(BaseModel):
    id: int

from sqlalchemy import Boolean, Column, Integer, String, TIMESTAMP
from sqlalchemy.sql import func
from app.models.base import Base

class Game(Base):
    __tablename__ = "games"

    id = Column(Integer, primary_key=True, index=True)
    publisher_id = Column(String(255), nullable=False)
    name = Column(String(255), nullable=False, index=True)
    platform = Column(String(50), nullable=False, index=True)
    store_id = Column(String(255))
    bundle_id = Column(String(255))
    app_version = Column(String(100))
    is_published = Column(Boolean, default=True)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
    updated_at = Column(TIMESTAMP(timezone=True), onupdate=func.now())

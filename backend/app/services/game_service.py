from typing import Any, Dict, List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app import models, schemas


class GameService:
    def get(self, db: Session, game_id: int) -> Optional[models.Game]:
        return db.query(models.Game).filter(models.Game.id == game_id).first()

    def get_all(self, db: Session) -> List[models.Game]:
        return db.query(models.Game).order_by(models.Game.id).all()

    def search(
            self, db: Session,
            name: Optional[str] = None,
            platform: Optional[str] = None
    ) -> List[models.Game]:
        query = db.query(models.Game)
        if name:
            query = query.filter(models.Game.name.contains(name, autoescape=True))
        if platform:
            query = query.filter(models.Game.platform == platform)
        return query.order_by(models.Game.id).all()

    def create(self, db: Session, game: schemas.GameCreate) -> models.Game:
        db_game = models.Game(**game.model_dump())
        try:
            db.add(db_game)
            db.commit()
        except SQLAlchemyError:
            db.rollback()
            raise
        db.refresh(db_game)
        return db_game

    def update(self, db: Session, db_game: models.Game, values: Dict[str, Any]) -> models.Game:
        for field, value in values.items():
            setattr(db_game, field, value)
        try:
            db.commit()
        except SQLAlchemyError:
            db.rollback()
            raise
        db.refresh(db_game)
        return db_game

    def delete(self, db: Session, db_game: models.Game):
        try:
            db.delete(db_game)
            db.commit()
        except SQLAlchemyError:
            db.rollback()
            raise

    def bulk_create(self, db: Session, games: List[schemas.GameCreate], commit: bool = True) -> int:
        db.add_all([models.Game(**game.model_dump()) for game in games])
        if commit:
            db.commit()
        return len(games)

    def truncate(self, db: Session, commit: bool = True) -> int:
        deleted = db.query(models.Game).delete(synchronize_session=False)
        if commit:
            db.commit()
        return deleted

    def replace_all(self, db: Session, games: List[schemas.GameCreate]) -> int:
        """
        Drop every stored game and insert ``games`` in a single commit.
        """
        try:
            self.truncate(db, commit=False)
            count = self.bulk_create(db, games, commit=False)
            db.commit()
        except SQLAlchemyError:
            db.rollback()
            raise
        return count

game_service = GameService()

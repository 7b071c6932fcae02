from typing import List, Optional

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from app import schemas
from app.api import deps
from app.core.exceptions import GameNotFoundError, PopulateInProgressError, StoreError
from app.core.jobs import PopulateJob, fetch_feed_games, persist_games
from app.core.logger import setup_logger
from app.feeds import FeedClient
from app.services.game_service import game_service

router = APIRouter()

logger = setup_logger("api.games")


def get_game_or_404(db: Session, game_id: int):
    game = game_service.get(db, game_id=game_id)
    if not game:
        raise GameNotFoundError(game_id)
    return game


@router.get("", response_model=List[schemas.Game])
def read_games(db: Session = Depends(deps.get_db)):
    """
    Retrieve all games.
    """
    try:
        return game_service.get_all(db)
    except SQLAlchemyError as e:
        logger.error(f"Error querying games: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail="Error querying games")


@router.post("/search", response_model=List[schemas.Game])
def search_games(
    search_in: Optional[schemas.GameSearch] = None,
    db: Session = Depends(deps.get_db)
):
    """
    Search games by name substring and/or exact platform.
    """
    search_in = search_in or schemas.GameSearch()
    try:
        return game_service.search(db, name=search_in.name, platform=search_in.platform)
    except SQLAlchemyError as e:
        logger.error(f"Error retrieving games: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail="Error retrieving games")


@router.post("/populate", response_model=List[schemas.GameCreate])
def populate_games(
    background_tasks: BackgroundTasks,
    session_factory: sessionmaker = Depends(deps.get_db_session_factory),
    feed_client: FeedClient = Depends(deps.get_feed_client),
    populate_job: PopulateJob = Depends(deps.get_populate_job)
):
    """
    Replace the stored games with the Android and iOS top-100 feeds.

    The mapped games are returned right away; the store is replaced once
    the response has been sent. Poll ``/populate/status`` for the outcome.
    """
    if not populate_job.try_start():
        raise PopulateInProgressError()

    try:
        games = fetch_feed_games(feed_client)
    except Exception as e:
        populate_job.fail(e)
        raise

    background_tasks.add_task(persist_games, session_factory, games, populate_job)
    return games


@router.get("/populate/status", response_model=schemas.PopulateStatus)
def read_populate_status(populate_job: PopulateJob = Depends(deps.get_populate_job)):
    return populate_job.status()


@router.post("", response_model=schemas.Game)
def create_game(game_in: schemas.GameCreate, db: Session = Depends(deps.get_db)):
    """
    Create a new game.
    """
    try:
        return game_service.create(db, game=game_in)
    except SQLAlchemyError as e:
        logger.error(f"Error creating a game: {str(e)}", exc_info=True)
        raise StoreError("Error creating a game")


@router.get("/{game_id}", response_model=schemas.Game)
def read_game(game_id: int, db: Session = Depends(deps.get_db)):
    return get_game_or_404(db, game_id)


@router.delete("/{game_id}", response_model=schemas.GameDeleted)
def delete_game(game_id: int, db: Session = Depends(deps.get_db)):
    game = get_game_or_404(db, game_id)
    try:
        game_service.delete(db, game)
    except SQLAlchemyError as e:
        logger.error(f"Error deleting game {game_id}: {str(e)}", exc_info=True)
        raise StoreError(f"Error deleting game {game_id}")
    return schemas.GameDeleted(id=game_id)


@router.put("/{game_id}", response_model=schemas.Game)
def update_game(game_id: int, game_in: schemas.GameUpdate, db: Session = Depends(deps.get_db)):
    """
    Replace every field of a game; omitted fields are cleared.
    """
    game = get_game_or_404(db, game_id)
    try:
        return game_service.update(db, game, game_in.model_dump())
    except SQLAlchemyError as e:
        logger.error(f"Error updating game {game_id}: {str(e)}", exc_info=True)
        raise StoreError(f"Error updating game {game_id}")


@router.patch("/{game_id}", response_model=schemas.Game)
def patch_game(game_id: int, game_in: schemas.GameUpdate, db: Session = Depends(deps.get_db)):
    """
    Update only the supplied fields of a game.
    """
    game = get_game_or_404(db, game_id)
    try:
        return game_service.update(db, game, game_in.model_dump(exclude_unset=True))
    except SQLAlchemyError as e:
        logger.error(f"Error updating game {game_id}: {str(e)}", exc_info=True)
        raise StoreError(f"Error updating game {game_id}")

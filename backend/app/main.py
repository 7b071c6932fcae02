from pathlib import Path

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import SQLAlchemyError

from app.api import api_router
from app.core.config import Settings, get_settings
from app.core.exceptions import GameCatalogError
from app.core.jobs import PopulateJob
from app.core.logger import configure_logging, setup_logger
from app.core.scheduler import create_scheduler
from app.database.database import get_engine, get_session_factory, init_db
from app.feeds import FeedClient

logger = setup_logger("main")


def register_exception_handlers(app: FastAPI):
    @app.exception_handler(GameCatalogError)
    async def handle_catalog_error(request: Request, exc: GameCatalogError):
        logger.warning(f"{request.method} {request.url.path} failed: {exc.message}")
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})

    @app.exception_handler(SQLAlchemyError)
    async def handle_database_error(request: Request, exc: SQLAlchemyError):
        logger.error(f"{request.method} {request.url.path} database error: {str(exc)}")
        return JSONResponse(status_code=500, content={"detail": "Database error"})


def create_app(settings: Settings = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings)

    engine = get_engine(settings.DATABASE_URL)
    init_db(engine)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        description="API for managing the catalog of top mobile games",
        version="1.0.0",
    )

    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = get_session_factory(engine)
    app.state.feed_client = FeedClient(
        android_url=settings.ANDROID_FEED_URL,
        ios_url=settings.IOS_FEED_URL,
        timeout=settings.FEED_TIMEOUT_SECONDS,
        retry_attempts=settings.FEED_RETRY_ATTEMPTS,
        retry_wait=settings.FEED_RETRY_WAIT_SECONDS,
    )
    app.state.populate_job = PopulateJob()
    app.state.scheduler = None
    if settings.POPULATE_SCHEDULE_ENABLED:
        app.state.scheduler = create_scheduler(
            settings,
            app.state.session_factory,
            app.state.feed_client,
            app.state.populate_job,
        )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(api_router, prefix=settings.API_PREFIX)

    # Mounted last so the API routes take precedence
    static_dir = Path(settings.STATIC_DIR)
    if static_dir.is_dir():
        app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")
    else:
        logger.warning(f"Static directory {static_dir} not found, static files are not served")

    @app.on_event("startup")
    async def on_startup():
        logger.info("Starting application...")
        scheduler = app.state.scheduler
        if scheduler is None:
            return
        if not scheduler.running:
            scheduler.start()
            logger.info("Scheduler started")
        else:
            logger.warning("Scheduler is already running")

    @app.on_event("shutdown")
    async def on_shutdown():
        logger.info("Shutting down application...")
        scheduler = app.state.scheduler
        if scheduler is not None and scheduler.running:
            scheduler.shutdown()
            logger.info("Scheduler stopped")
        engine.dispose()

    return app


def run():
    settings = get_settings()
    logger.info(f"Server is up on port {settings.PORT}")
    uvicorn.run("app.main:create_app", factory=True, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()

import logging
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from moviedb.database import Database
from moviedb.routers.movie_router import router as movie_router
from moviedb.schemas.movie_schema import MessageOut
from moviedb.utils.config import Settings, settings as default_settings
from moviedb.utils.middleware.logger import LoggingMiddleware, setup_logging

logger = logging.getLogger(__name__)

BANNER = "BD4.1 CW - SQL Queries & async/await"


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings
    setup_logging(settings.log_level)

    app = FastAPI(title="moviedb")
    app.state.settings = settings
    app.state.db = Database(settings.database_url)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_methods=["GET"],
        allow_headers=["*"],
    )
    app.add_middleware(LoggingMiddleware)

    @app.on_event("startup")
    async def open_database():
        db: Database = app.state.db
        await db.connect()
        count = await db.count_movies()
        logger.info("Connected to the SQLite database (%s, %d movies).", settings.database_path, count)
        logger.info("Server is running on port %s", settings.port)

    @app.on_event("shutdown")
    async def close_database():
        await app.state.db.disconnect()
        logger.info("Database connection closed.")

    @app.get("/", response_model=MessageOut)
    async def root():
        return {"message": BANNER}

    app.include_router(movie_router)
    return app


app = create_app()


def run() -> None:
    uvicorn.run(
        app,
        host=default_settings.host,
        port=default_settings.port,
        log_level=default_settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from datacleaner.config import settings
from datacleaner.database import AsyncSessionLocal, Base, engine
from datacleaner.exception_handlers import register_exception_handlers
from datacleaner.plugins.loader import initialize_cleaners, install_cleaners
from datacleaner.plugins.registry import cleaner_registry
from datacleaner.routes import cleaners, settings as settings_routes

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create tables, register built-in cleaners and install them."""
    logger.info("Starting up the application...")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    initialize_cleaners(cleaner_registry)
    async with AsyncSessionLocal() as db:
        await install_cleaners(cleaner_registry, db)

    yield

    logger.info("Shutting down the application...")


def create_app() -> FastAPI:
    """Create the FastAPI application."""
    app = FastAPI(
        title=settings.app_name,
        description="Cleaner sub-plugin management",
        debug=settings.debug,
        version=settings.app_version,
        lifespan=lifespan,
    )

    register_exception_handlers(app)

    app.include_router(cleaners.router, prefix="/api/v1/cleaners", tags=["Cleaners"])
    app.include_router(settings_routes.router, prefix="/admin", tags=["Settings"])

    if settings.debug:
        logger.info(f"Running in {settings.environment} mode")
        logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO)

    return app


app = create_app()


@app.get("/", tags=["Root"])
async def root():
    return {"message": "Welcome to the Data Cleaner API"}


if __name__ == "__main__":
    uvicorn.run("main:app", host="127.0.0.1", port=8000, reload=settings.debug)

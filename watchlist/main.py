"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager
from datetime import UTC, datetime
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from watchlist.api import auth, entries, profile, upload
from watchlist.config import get_settings
from watchlist.database import Database
from watchlist.exceptions import register_exception_handlers

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the database pool and upload directory on startup, release the pool on shutdown."""
    Path(settings.upload_dir).mkdir(parents=True, exist_ok=True)
    database = Database.from_settings(settings)
    app.state.database = database
    logger.info(f"Starting Watchlist API ({settings.environment})")
    yield
    database.dispose()
    logger.info("Shut down Watchlist API")


app = FastAPI(
    title="Watchlist API",
    description="Personal movie and TV show watchlist",
    version="0.1.0",
    lifespan=lifespan,
)

register_exception_handlers(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routers
app.include_router(auth.router)
app.include_router(profile.router)
app.include_router(entries.router)
app.include_router(upload.router)

# Uploaded images are served back read-only; the directory is created in lifespan
app.mount(
    upload.UPLOAD_URL_PREFIX,
    StaticFiles(directory=settings.upload_dir, check_dir=False),
    name="uploads",
)


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {
        "status": "OK",
        "timestamp": datetime.now(UTC).isoformat(),
        "environment": settings.environment,
    }

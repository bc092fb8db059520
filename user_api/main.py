"""User API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map every failure → {"error", "status"} JSON
    - CORS configured from settings (not hardcoded)
    - User service (and database, if configured) initialized on startup via lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Graceful shutdown (SIGTERM) delegated to uvicorn; lifespan exit disposes the engine
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from user_api.api.dependencies import init_user_service
from user_api.api.error_handlers import register_error_handlers
from user_api.api.routes import health, users
from user_api.config import get_settings
from user_api.infrastructure.database import close_db
from user_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_user_service(settings)
    logger.info("User API started")
    yield
    await close_db()
    logger.info("User API shutdown complete")


app = FastAPI(title="User API", version="1.0.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(users.router)

register_error_handlers(app)


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)

"""
API Log Relay - FastAPI Application Entry Point

Relays HTTP requests composed in the API-testing UI to their target
servers, records every attempt as a log entry, and serves the log
history for browsing and replay.
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import settings
from .database import init_db
from .exceptions import register_exception_handlers
from .migrations.add_relay_columns import migrate as migrate_relay_columns
from .routers import logs, relay


logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup and shutdown events."""
    init_db()
    # Bring databases created by older versions up to date
    migrate_relay_columns()
    logger.info("API Log Relay started")
    yield


app = FastAPI(
    title="API Log Relay",
    description="Relay HTTP requests to target servers and keep a browsable log of every attempt",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register global exception handlers
register_exception_handlers(app)


@app.get("/")
async def root():
    """Root endpoint returning API information."""
    return {
        "name": "API Log Relay",
        "version": "1.0.0",
        "docs": "/docs"
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


# Register routers
app.include_router(logs.router)
app.include_router(relay.router)


if __name__ == "__main__":
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)

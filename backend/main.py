"""
HealthInfoBot Backend API
=========================

FastAPI service exposing the disease catalog, the keyword chatbot and
health endpoints.

Routes
------
• /api/diseases      CRUD over the disease catalog (backend.routes.diseases)
• /api/chatbot       keyword lookup over the catalog (backend.routes.chatbot)
• /, /health         liveness and health probes

Startup
-------
The lifespan handler opens the database, creates the schema if needed and
seeds the starter diseases when the catalog is empty. A database that
cannot be opened aborts startup.
"""

from __future__ import annotations

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.routes.chatbot import router as chatbot_router
from backend.routes.diseases import router as diseases_router
from core import config
from core.health import system_health
from core.logger import logger
from core.metadata import get_metadata, __version__
from database.db_setup import get_engine, init_db
from database.queries import bind_engine
from database.seed import seed_if_empty


# --------------------------------------------------------------------------- #
# Lifespan
# --------------------------------------------------------------------------- #

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Open the catalog before serving requests.

    StorageUnavailable propagates: the service does not start without
    its database.
    """
    logger.info("=" * 60)
    logger.info("HealthInfoBot backend starting")

    engine = get_engine(config.DATABASE_URL)
    init_db(engine)
    bind_engine(engine)
    if config.SEED_ON_STARTUP:
        seed_if_empty()

    logger.info("=" * 60)

    yield  # ---- application runs here ----

    engine.dispose()
    logger.info("HealthInfoBot backend shutting down")


# --------------------------------------------------------------------------- #
# FastAPI App
# --------------------------------------------------------------------------- #

app = FastAPI(
    title="HealthInfoBot Backend API",
    version=__version__,
    description=(
        "Disease information catalog.\n"
        "- CRUD over diseases.\n"
        "- Keyword chatbot over symptoms, causes and prevention."
    ),
    lifespan=lifespan,
)

# Browser frontends call the API directly
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(diseases_router)
app.include_router(chatbot_router)


# --------------------------------------------------------------------------- #
# Core Routes
# --------------------------------------------------------------------------- #

@app.get("/")
async def root():
    """
    Basic liveness probe.
    """
    return {
        "status": "ok",
        "message": "HealthInfoBot backend is live.",
        **get_metadata(),
    }


@app.get("/health")
async def health():
    """
    System health endpoint.

    Delegates to core.health.system_health, which checks database
    connectivity and reports process metrics.
    """
    return system_health()


def run() -> None:
    """Console entry point: serve the API with uvicorn."""
    uvicorn.run(app, host=config.HOST, port=config.PORT, log_level=config.LOG_LEVEL.lower())


if __name__ == "__main__":
    run()

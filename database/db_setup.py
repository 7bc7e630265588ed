# database/db_setup.py
from __future__ import annotations

import os
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base

from core.logger import get_logger
from .errors import StorageUnavailable

logger = get_logger(__name__)

# ---------------------------------------------------------------------
# Database path setup
# ---------------------------------------------------------------------
# Default database lives inside the database/ package directory
DB_FILENAME = "diseases.db"
DB_PATH = os.path.join(os.path.dirname(__file__), DB_FILENAME)
DB_URL = f"sqlite:///{DB_PATH}"

# ---------------------------------------------------------------------
# Base class for ORM models
# ---------------------------------------------------------------------
Base = declarative_base()

# ---------------------------------------------------------------------
# Engine factory
# ---------------------------------------------------------------------
def get_engine(db_url: Optional[str] = None) -> Engine:
    """
    Return a SQLAlchemy Engine for the disease catalog.

    Falls back to the local SQLite file when no URL is given.

    Example:
        engine = get_engine("sqlite:///./database.db")
    """
    return create_engine(db_url or DB_URL, echo=False, future=True)


def init_db(engine: Engine) -> None:
    """
    Create the catalog schema if it does not exist yet.

    Safe to call on every startup. Raises StorageUnavailable when the
    database cannot be opened or the table cannot be created.
    """
    # models must be imported so the table is registered on Base.metadata
    from . import models  # noqa: F401

    try:
        Base.metadata.create_all(engine)
    except SQLAlchemyError as e:
        logger.error(f"Could not initialize database at {engine.url}: {e}")
        raise StorageUnavailable(str(e)) from e

    logger.info(f"Diseases table ready ({engine.url})")

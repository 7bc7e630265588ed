# database/queries.py
from __future__ import annotations

from typing import Any, Dict, List, Mapping

from sqlalchemy import Text, and_, delete, func, literal, or_, select, update
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from core.logger import get_logger
from .errors import NotFound, StorageError, ValidationError
from .models import DISEASE_FIELDS, Disease

logger = get_logger(__name__)

# ---------------------------------------------------------------------
# Session factory
# ---------------------------------------------------------------------
# Unbound until bind_engine() is called at startup (or by a test fixture)
SessionLocal = sessionmaker(autoflush=False, expire_on_commit=False)


def bind_engine(engine: Engine) -> None:
    """Point every catalog session at the given engine."""
    SessionLocal.configure(bind=engine)


def _values(fields: Mapping[str, Any]) -> Dict[str, Any]:
    """Pick the five writable columns; absent keys become NULL."""
    return {name: fields.get(name) for name in DISEASE_FIELDS}


def wrap_storage_error(op: str, e: SQLAlchemyError) -> StorageError:
    """Translate a SQLAlchemy failure, keeping the driver message."""
    if isinstance(e, IntegrityError):
        logger.warning(f"{op} rejected by store: {e.orig}")
        return ValidationError(str(e.orig))
    logger.error(f"{op} failed: {e}")
    return StorageError(str(getattr(e, "orig", None) or e))


# ---------------------------------------------------------------------
# CRUD operations for Disease
# ---------------------------------------------------------------------
def list_diseases() -> List[Disease]:
    """Return all stored diseases in insertion order."""
    try:
        with SessionLocal() as session:
            return list(session.scalars(select(Disease).order_by(Disease.id)).all())
    except SQLAlchemyError as e:
        raise wrap_storage_error("list", e) from e


def count_diseases() -> int:
    """Return the number of stored diseases."""
    try:
        with SessionLocal() as session:
            return session.scalar(select(func.count()).select_from(Disease)) or 0
    except SQLAlchemyError as e:
        raise wrap_storage_error("count", e) from e


def get_disease(disease_id: int) -> Disease:
    """Return a single disease by ID, or raise NotFound."""
    try:
        with SessionLocal() as session:
            disease = session.get(Disease, disease_id)
    except SQLAlchemyError as e:
        raise wrap_storage_error("get", e) from e
    if disease is None:
        raise NotFound(disease_id)
    return disease


def create_disease(fields: Mapping[str, Any]) -> int:
    """
    Insert a new disease and return its assigned id.

    Required-field checks are left to the NOT NULL constraints; a
    rejection surfaces as ValidationError.
    """
    try:
        with SessionLocal() as session:
            disease = Disease(**_values(fields))
            session.add(disease)
            session.commit()
            logger.info(f"Created disease {disease.id} ({disease.name})")
            return disease.id
    except SQLAlchemyError as e:
        raise wrap_storage_error("create", e) from e


def update_disease(disease_id: int, fields: Mapping[str, Any]) -> None:
    """
    Replace all five fields of a disease.

    There is no merge with the previous values: a field left out of
    ``fields`` is written as NULL and rejected by the store.
    """
    stmt = update(Disease).where(Disease.id == disease_id).values(**_values(fields))
    try:
        with SessionLocal() as session:
            result = session.execute(stmt)
            session.commit()
    except SQLAlchemyError as e:
        raise wrap_storage_error("update", e) from e
    if result.rowcount == 0:
        raise NotFound(disease_id)
    logger.info(f"Updated disease {disease_id}")


def delete_disease(disease_id: int) -> None:
    """Delete a disease by ID. Raises NotFound when nothing was deleted."""
    stmt = delete(Disease).where(Disease.id == disease_id)
    try:
        with SessionLocal() as session:
            result = session.execute(stmt)
            session.commit()
    except SQLAlchemyError as e:
        raise wrap_storage_error("delete", e) from e
    if result.rowcount == 0:
        raise NotFound(disease_id)
    logger.info(f"Deleted disease {disease_id}")


def search_diseases(term: str) -> List[Disease]:
    """
    Case-insensitive keyword search, insertion order.

    A disease matches when its name, symptoms or causes contain ``term``,
    or when its name is itself contained in ``term``.
    """
    term = (term or "").lower()
    name = func.lower(Disease.name, type_=Text)
    stmt = (
        select(Disease)
        .where(
            or_(
                name.contains(term, autoescape=True),
                func.lower(Disease.symptoms, type_=Text).contains(term, autoescape=True),
                func.lower(Disease.causes, type_=Text).contains(term, autoescape=True),
                and_(func.length(Disease.name) > 0, func.instr(literal(term), name) > 0),
            )
        )
        .order_by(Disease.id)
    )
    try:
        with SessionLocal() as session:
            return list(session.scalars(stmt).all())
    except SQLAlchemyError as e:
        raise wrap_storage_error("search", e) from e

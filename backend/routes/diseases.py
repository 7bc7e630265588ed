"""
Disease catalog endpoints
-------------------------
CRUD over the disease table. Storage failures come back as
`{"error": <message>}`: 404 for an unknown id, 500 for anything else
(missing fields included).
"""

from typing import Optional

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from database.errors import DiseaseStoreError, NotFound
from database.queries import (
    create_disease,
    delete_disease,
    get_disease,
    list_diseases,
    update_disease,
)

router = APIRouter(prefix="/api/diseases", tags=["diseases"])

NOT_FOUND_MESSAGE = "Disease not found"


class DiseaseIn(BaseModel):
    """
    Request body for create/update.

    Fields are optional here so that a missing field reaches the store
    and is rejected there.
    """
    name: Optional[str] = None
    symptoms: Optional[str] = None
    causes: Optional[str] = None
    prevention: Optional[str] = None
    when_to_see_doctor: Optional[str] = None


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _failure(e: DiseaseStoreError) -> JSONResponse:
    if isinstance(e, NotFound):
        return _error(404, NOT_FOUND_MESSAGE)
    return _error(500, str(e))


@router.get("")
async def list_all():
    """Return every disease in insertion order."""
    try:
        return {"diseases": [d.to_dict() for d in list_diseases()]}
    except DiseaseStoreError as e:
        return _failure(e)


@router.get("/{disease_id}")
async def get_one(disease_id: int):
    try:
        return {"disease": get_disease(disease_id).to_dict()}
    except DiseaseStoreError as e:
        return _failure(e)


@router.post("")
async def create(body: DiseaseIn):
    """Add a disease; answers with the new id."""
    try:
        new_id = create_disease(body.model_dump())
    except DiseaseStoreError as e:
        return _failure(e)
    return {"message": "Disease added successfully", "id": new_id}


@router.put("/{disease_id}")
async def replace(disease_id: int, body: DiseaseIn):
    """Replace all fields of a disease."""
    try:
        update_disease(disease_id, body.model_dump())
    except DiseaseStoreError as e:
        return _failure(e)
    return {"message": "Disease updated successfully"}


@router.delete("/{disease_id}")
async def remove(disease_id: int):
    try:
        delete_disease(disease_id)
    except DiseaseStoreError as e:
        return _failure(e)
    return {"message": "Disease deleted successfully"}

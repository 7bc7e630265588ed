"""
Chatbot endpoint
----------------
Keyword lookup over the disease catalog, see chatbot.responder.
"""

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from chatbot.responder import answer
from database.errors import DiseaseStoreError

router = APIRouter(prefix="/api", tags=["chatbot"])


class ChatMessage(BaseModel):
    message: str


@router.post("/chatbot")
async def chat(msg: ChatMessage):
    """
    Answer a free-text question.

    Returns `{"reply"}` when nothing matched, `{"reply", "disease"}` otherwise.
    """
    try:
        return answer(msg.message).as_dict()
    except DiseaseStoreError as e:
        return JSONResponse(status_code=500, content={"error": str(e)})

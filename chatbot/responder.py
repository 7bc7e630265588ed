"""
chatbot/responder.py
--------------------

Keyword "chatbot" over the disease catalog.

The incoming message is lower-cased and used as a plain substring query
against the catalog (see database.queries.search_diseases). The first hit
in catalog order is rendered as a short markdown-ish text block; which
sections appear depends on the category keywords found in the message.

No tokenization, stemming or ranking: first match wins.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from core.logger import get_logger
from database.models import Disease
from database.queries import search_diseases

logger = get_logger(__name__)

FALLBACK_REPLY = (
    "I'm sorry, I couldn't find information about that. Please try asking about "
    "common diseases like diabetes, dengue, malaria, common cold, or hypertension. "
    "You can also ask about symptoms, causes, or prevention."
)

# (label, column) in display order
SECTIONS: List[Tuple[str, str]] = [
    ("Symptoms", "symptoms"),
    ("Causes", "causes"),
    ("Prevention", "prevention"),
    ("When to see a doctor", "when_to_see_doctor"),
]

# Checked top to bottom; the first rule with a keyword in the query wins.
CATEGORY_RULES: List[Tuple[Tuple[str, ...], str]] = [
    (("symptom",), "symptoms"),
    (("cause",), "causes"),
    (("prevent", "avoid"), "prevention"),
    (("doctor", "hospital"), "when_to_see_doctor"),
]


@dataclass(frozen=True)
class ChatbotReply:
    reply: str
    disease: Optional[Dict[str, Any]] = None

    def as_dict(self) -> Dict[str, Any]:
        """Response body; `disease` is omitted on the fallback reply."""
        body: Dict[str, Any] = {"reply": self.reply}
        if self.disease is not None:
            body["disease"] = self.disease
        return body


def select_section(query: str) -> Optional[str]:
    """Column requested by the query's category keyword, None for all sections."""
    for keywords, column in CATEGORY_RULES:
        if any(k in query for k in keywords):
            return column
    return None


def format_reply(disease: Disease, query: str) -> str:
    """
    Render a disease as a heading plus one or all sections.

    Example
    -------
    **Dengue**

    **Symptoms:**
    High fever, severe headache, ...
    """
    column = select_section(query)
    sections = [s for s in SECTIONS if column is None or s[1] == column]
    blocks = [f"**{label}:**\n{getattr(disease, col)}" for label, col in sections]
    reply = f"**{disease.name}**\n\n" + "\n\n".join(blocks)
    # single-section answers keep a trailing blank line
    return reply if column is None else reply + "\n\n"


def answer(message: str) -> ChatbotReply:
    """
    Answer a free-text message from the catalog.

    Raises StorageError if the catalog cannot be searched.
    """
    query = (message or "").lower()
    matches = search_diseases(query)

    if not matches:
        logger.info(f"No catalog match for {query!r}")
        return ChatbotReply(reply=FALLBACK_REPLY)

    disease = matches[0]
    logger.info(f"Matched {query!r} -> {disease.name} ({len(matches)} candidates)")
    return ChatbotReply(reply=format_reply(disease, query), disease=disease.to_dict())

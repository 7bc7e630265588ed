# database/seed.py
"""
Starter catalog inserted the first time the service runs.

The texts are fixture data; nothing derives from them.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError

from core.logger import get_logger
from .models import DISEASE_FIELDS, Disease
from .queries import SessionLocal, wrap_storage_error

logger = get_logger(__name__)

SEED_DISEASES: List[Dict[str, Any]] = [
    {
        "name": "Diabetes",
        "symptoms": "Increased thirst, frequent urination, extreme hunger, unexplained weight loss, fatigue, blurred vision, slow-healing sores",
        "causes": "Insulin resistance, pancreas not producing enough insulin, genetic factors, obesity, sedentary lifestyle",
        "prevention": "Maintain healthy weight, exercise regularly (30 mins daily), eat balanced diet with less sugar, monitor blood sugar levels, avoid smoking",
        "when_to_see_doctor": "If you experience excessive thirst and urination, unexplained weight loss, or persistent fatigue. Regular checkups if you have family history.",
    },
    {
        "name": "Dengue",
        "symptoms": "High fever, severe headache, pain behind eyes, joint and muscle pain, nausea, vomiting, skin rash, mild bleeding (nose/gums)",
        "causes": "Aedes mosquito bite carrying dengue virus, standing water breeding grounds, tropical climate areas",
        "prevention": "Use mosquito repellent, wear long sleeves, eliminate standing water, use mosquito nets, keep surroundings clean",
        "when_to_see_doctor": "Immediately if you have high fever with severe headache, persistent vomiting, bleeding, difficulty breathing, or severe abdominal pain.",
    },
    {
        "name": "Malaria",
        "symptoms": "High fever with chills, sweating, headache, nausea, vomiting, muscle pain, fatigue, anemia",
        "causes": "Anopheles mosquito bite carrying plasmodium parasite, exposure to infected blood",
        "prevention": "Sleep under mosquito nets, use insect repellent, take antimalarial medication in high-risk areas, eliminate mosquito breeding sites",
        "when_to_see_doctor": "Seek immediate care for high fever after visiting malaria-prone areas, severe headache, confusion, seizures, or difficulty breathing.",
    },
    {
        "name": "Common Cold",
        "symptoms": "Runny nose, sore throat, cough, sneezing, mild headache, slight fever, body aches",
        "causes": "Viral infection (rhinovirus), spread through droplets, weakened immunity, seasonal changes",
        "prevention": "Wash hands frequently, avoid close contact with sick people, boost immunity with vitamin C, stay hydrated, get enough sleep",
        "when_to_see_doctor": "If symptoms last more than 10 days, fever above 101.3°F, difficulty breathing, severe throat pain, or symptoms worsen after improving.",
    },
    {
        "name": "Hypertension",
        "symptoms": "Usually no symptoms (silent killer), sometimes headaches, shortness of breath, nosebleeds in severe cases",
        "causes": "High salt intake, obesity, lack of exercise, stress, smoking, alcohol, genetic factors",
        "prevention": "Reduce salt intake, exercise regularly, maintain healthy weight, manage stress, limit alcohol, quit smoking, monitor blood pressure",
        "when_to_see_doctor": "Regular checkups recommended. Seek immediate care for severe headache, chest pain, vision problems, or difficulty breathing.",
    },
]


def seed_if_empty(records: Iterable[Mapping[str, Any]] = SEED_DISEASES) -> int:
    """
    Insert ``records`` only when the catalog holds no rows.

    Returns
    -------
    int
        Number of rows inserted (0 when the catalog was already populated).
    """
    try:
        with SessionLocal() as session:
            count = session.scalar(select(func.count()).select_from(Disease)) or 0
            if count:
                logger.info(f"Catalog already holds {count} diseases; skipping seed")
                return 0

            rows = [Disease(**{f: r.get(f) for f in DISEASE_FIELDS}) for r in records]
            session.add_all(rows)
            session.commit()
    except SQLAlchemyError as e:
        raise wrap_storage_error("seed", e) from e

    logger.info(f"Sample disease data inserted ({len(rows)} rows)")
    return len(rows)

# database/models.py
from typing import Any, Dict

from sqlalchemy import Column, Integer, Text

# Important: must match Base from db_setup.py
from .db_setup import Base

# Writable text columns, in response order
DISEASE_FIELDS = ("name", "symptoms", "causes", "prevention", "when_to_see_doctor")


class Disease(Base):
    """SQLAlchemy ORM model for one catalog entry."""
    __tablename__ = "diseases"
    # AUTOINCREMENT keeps SQLite from reusing ids of deleted rows
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    symptoms = Column(Text, nullable=False)
    causes = Column(Text, nullable=False)
    prevention = Column(Text, nullable=False)
    when_to_see_doctor = Column(Text, nullable=False)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-safe representation, column names as keys."""
        data: Dict[str, Any] = {"id": self.id}
        for field in DISEASE_FIELDS:
            data[field] = getattr(self, field)
        return data

    def __repr__(self):
        return f"<Disease(id={self.id}, name={self.name})>"

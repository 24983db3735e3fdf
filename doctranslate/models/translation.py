# doctranslate/models/translation.py
from sqlalchemy import Column, String, Text, DateTime, JSON
from ..database import Base


class Translation(Base):
    __tablename__ = "translations"

    id = Column(String(36), primary_key=True, index=True)
    # Plain column, referential integrity is not enforced
    document_id = Column(String(36), index=True, nullable=False)
    content = Column(Text, nullable=True)
    status = Column(String(50), nullable=False, default="pending")
    language = Column(String(50), nullable=False)
    meta = Column("metadata", JSON, nullable=False, default=dict)
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)

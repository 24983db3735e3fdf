# doctranslate/models/document.py
from sqlalchemy import Column, String, Text, DateTime, JSON
from ..database import Base


class Document(Base):
    __tablename__ = "documents"

    id = Column(String(36), primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    file_path = Column(String(1024), nullable=False, default="")
    file_type = Column(String(255), nullable=False, default="")
    source_language = Column(String(50), nullable=False)
    target_language = Column(String(50), nullable=False)
    status = Column(String(50), nullable=False, default="pending")
    content = Column(Text, nullable=True)
    # "metadata" is reserved on declarative classes
    meta = Column("metadata", JSON, nullable=False, default=dict)
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)

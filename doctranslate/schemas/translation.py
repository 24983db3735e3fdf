# doctranslate/schemas/translation.py
from typing import Any, Dict, Optional

from pydantic import Field

from .base import BaseSchema, TimestampMixin


class TranslationBase(BaseSchema):
    document_id: str
    content: Optional[str] = None
    status: str = "pending"
    metadata: Dict[str, Any] = Field(default_factory=dict)
    language: str


class TranslationCreate(TranslationBase):
    pass


class TranslationCreateForDocument(BaseSchema):
    """Translation payload when the document id comes from the URL"""
    content: Optional[str] = None
    status: str = "pending"
    metadata: Dict[str, Any] = Field(default_factory=dict)
    language: str


class TranslationUpdate(BaseSchema):
    document_id: Optional[str] = None
    content: Optional[str] = None
    status: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None
    language: Optional[str] = None


class Translation(TranslationBase, TimestampMixin):
    id: str

# doctranslate/schemas/document.py
from typing import Any, Dict, List, Optional

from pydantic import Field

from .base import BaseSchema, TimestampMixin
from .translation import Translation


class DocumentBase(BaseSchema):
    title: str
    file_path: str = ""
    file_type: str = ""
    source_language: str
    target_language: str
    status: str = "pending"
    metadata: Dict[str, Any] = Field(default_factory=dict)


class DocumentCreate(DocumentBase):
    # Accepted for compatibility with upload clients; the store always resets it
    content: Optional[str] = None
    translations: List[Translation] = []


class Document(DocumentBase, TimestampMixin):
    id: str
    content: Optional[str] = None
    translations: List[Translation] = []

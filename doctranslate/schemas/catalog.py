# doctranslate/schemas/catalog.py
from typing import List

from pydantic import BaseModel


class LanguageInfo(BaseModel):
    code: str
    name: str


class DocumentTypeInfo(BaseModel):
    id: str
    name: str
    mime_types: List[str]

# doctranslate/api/catalog.py
from typing import List

from fastapi import APIRouter

from ..languages import DOCUMENT_TYPES, LANGUAGES
from ..schemas.catalog import DocumentTypeInfo, LanguageInfo

router = APIRouter(prefix="/api", tags=["catalog"])


@router.get("/languages", response_model=List[LanguageInfo])
async def list_languages():
    """Languages offered for source and target selection"""
    return [LanguageInfo(code=lang.value, name=lang.display_name) for lang in LANGUAGES]


@router.get("/document-types", response_model=List[DocumentTypeInfo])
async def list_document_types():
    return [
        DocumentTypeInfo(id=doc_type.id, name=doc_type.name, mime_types=list(doc_type.mime_types))
        for doc_type in DOCUMENT_TYPES
    ]

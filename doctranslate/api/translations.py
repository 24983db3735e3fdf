# doctranslate/api/translations.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from ..schemas.translation import Translation, TranslationCreate, TranslationCreateForDocument, TranslationUpdate
from ..storage import DocumentStore, get_store
from ..utils.logging import api_logger

router = APIRouter(prefix="/api", tags=["translations"])


@router.get("/documents/{document_id}/translations", response_model=List[Translation])
async def list_document_translations(document_id: str, store: DocumentStore = Depends(get_store)):
    api_logger.info("Listing translations", extra={"document_id": document_id})

    translations = store.get_translations(document_id)

    api_logger.info("Successfully listed translations", extra={
        "document_id": document_id,
        "translation_count": len(translations)
    })
    return translations


@router.post("/documents/{document_id}/translations", response_model=Translation)
async def create_translation(
        document_id: str,
        translation: TranslationCreateForDocument,
        store: DocumentStore = Depends(get_store)
):
    api_logger.info("Creating translation", extra={
        "document_id": document_id,
        "language": translation.language
    })

    try:
        created = store.create_translation(
            TranslationCreate(document_id=document_id, **translation.model_dump())
        )
        api_logger.info("Successfully created translation", extra={
            "document_id": document_id,
            "translation_id": created.id
        })
        return created

    except Exception as e:
        api_logger.error("Error creating translation", extra={
            "document_id": document_id,
            "error": str(e)
        })
        raise


@router.patch("/translations/{translation_id}", response_model=Translation)
async def update_translation(
        translation_id: str,
        translation: TranslationUpdate,
        store: DocumentStore = Depends(get_store)
):
    api_logger.info("Updating translation", extra={
        "translation_id": translation_id,
        "update_fields": list(translation.model_dump(exclude_unset=True).keys())
    })

    updated = store.update_translation(translation_id, translation)
    if updated is None:
        api_logger.warning("Translation not found for update", extra={"translation_id": translation_id})
        raise HTTPException(status_code=404, detail="Translation not found")

    api_logger.info("Successfully updated translation", extra={
        "translation_id": translation_id,
        "status": updated.status
    })
    return updated

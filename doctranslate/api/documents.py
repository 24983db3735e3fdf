# doctranslate/api/documents.py
import time
from typing import List, Literal, Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, Response, UploadFile

from ..config import settings
from ..schemas.document import Document, DocumentCreate
from ..schemas.translate import TranslateResponse, ErrorResponse
from ..schemas.translation import TranslationCreate
from ..services.export import NothingToExport, export_service
from ..services.translation import TranslationProvider, get_translation_provider
from ..storage import DocumentStore, get_store
from ..utils.files import delete_file, get_relative_path, save_upload_file
from ..utils.logging import api_logger
from .translate import MISSING_FIELDS, TRANSLATION_FAILED, error_response

router = APIRouter(prefix="/api/documents", tags=["documents"])


def _get_or_404(store: DocumentStore, document_id: str) -> Document:
    document = store.get_document(document_id)
    if not document:
        api_logger.warning("Document not found", extra={"document_id": document_id})
        raise HTTPException(status_code=404, detail="Document not found")
    return document


@router.get("", response_model=List[Document])
async def list_documents(
        doc_type: Optional[str] = None,
        language: Optional[str] = None,
        store: DocumentStore = Depends(get_store)
):
    api_logger.info("Listing documents", extra={
        "doc_type": doc_type,
        "language": language
    })

    start_time = time.time()
    documents = store.filter_documents(doc_type=doc_type, language=language)

    execution_time = time.time() - start_time
    api_logger.info("Successfully listed documents", extra={
        "document_count": len(documents),
        "execution_time_ms": round(execution_time * 1000, 2)
    })
    return documents


@router.post("", response_model=Document)
async def create_document(document: DocumentCreate, store: DocumentStore = Depends(get_store)):
    api_logger.info("Creating new document", extra={
        "title": document.title,
        "file_type": document.file_type
    })

    try:
        created = store.create_document(document)
        api_logger.info("Successfully created document", extra={"document_id": created.id})
        return created

    except Exception as e:
        api_logger.error("Error creating document", extra={
            "title": document.title,
            "error": str(e)
        })
        raise


@router.post("/upload", response_model=Document)
async def upload_document(
        file: UploadFile = File(...),
        source_language: Optional[str] = Form(None),
        target_language: Optional[str] = Form(None),
        last_modified: Optional[int] = Form(None),
        store: DocumentStore = Depends(get_store)
):
    api_logger.info("Uploading document", extra={
        "file_name": file.filename,
        "content_type": file.content_type,
        "source_language": source_language,
        "target_language": target_language
    })

    if not source_language or not target_language:
        api_logger.warning("Upload rejected, languages not selected", extra={"file_name": file.filename})
        raise HTTPException(status_code=400, detail="Please select source and target languages")

    saved_path = await save_upload_file(file, settings.UPLOADS_PATH)
    try:
        document = store.create_document(DocumentCreate(
            title=file.filename or saved_path.name,
            file_path=get_relative_path(saved_path, settings.STORAGE_PATH),
            file_type=file.content_type or "",
            source_language=source_language,
            target_language=target_language,
            status="pending",
            metadata={
                "size": saved_path.stat().st_size,
                "lastModified": last_modified
            }
        ))
    except Exception as e:
        api_logger.error("Upload error", extra={
            "file_name": file.filename,
            "error": str(e)
        })
        await delete_file(saved_path)
        raise

    api_logger.info("Document uploaded successfully", extra={
        "document_id": document.id,
        "file_path": document.file_path
    })
    return document


@router.get("/{document_id}", response_model=Document)
async def get_document(document_id: str, store: DocumentStore = Depends(get_store)):
    api_logger.info("Retrieving document details", extra={"document_id": document_id})

    document = _get_or_404(store, document_id)
    translations = store.get_translations(document_id)

    api_logger.info("Successfully retrieved document", extra={
        "document_id": document_id,
        "translation_count": len(translations)
    })
    return document.model_copy(update={"translations": translations})


@router.post(
    "/{document_id}/translate",
    response_model=TranslateResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}
)
async def translate_document(
        document_id: str,
        store: DocumentStore = Depends(get_store),
        provider: TranslationProvider = Depends(get_translation_provider)
):
    """Translate the stored content and record the result as a translation"""
    document = _get_or_404(store, document_id)

    if not document.content or not document.source_language or not document.target_language:
        api_logger.warning("Document has nothing to translate", extra={"document_id": document_id})
        return error_response(400, MISSING_FIELDS)

    api_logger.info("Translating document", extra={
        "document_id": document_id,
        "source_language": document.source_language,
        "target_language": document.target_language
    })

    try:
        translated = await provider.translate(
            document.content,
            document.source_language,
            document.target_language
        )
    except Exception as e:
        api_logger.error("Document translation error", extra={
            "document_id": document_id,
            "error": str(e)
        }, exc_info=True)
        return error_response(500, TRANSLATION_FAILED)

    translation = store.create_translation(TranslationCreate(
        document_id=document_id,
        content=translated,
        status="completed",
        language=document.target_language,
        metadata={"source_language": document.source_language}
    ))

    api_logger.info("Document translation stored", extra={
        "document_id": document_id,
        "translation_id": translation.id
    })
    return TranslateResponse(success=True, translation=translated)


@router.get("/{document_id}/export")
async def export_document(
        document_id: str,
        format: Literal["pdf", "docx"] = "pdf",
        store: DocumentStore = Depends(get_store)
):
    api_logger.info("Starting document export", extra={
        "document_id": document_id,
        "format": format
    })

    document = _get_or_404(store, document_id)
    translations = store.get_translations(document_id)

    try:
        content, media_type = export_service.render(document, translations, format)
    except NothingToExport as e:
        api_logger.warning("Nothing to export", extra={"document_id": document_id})
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        api_logger.error("Export failed", extra={
            "document_id": document_id,
            "format": format,
            "error": str(e)
        })
        raise HTTPException(status_code=500, detail=f"Export failed: {str(e)}")

    return Response(
        content=content,
        media_type=media_type,
        headers={
            "Content-Disposition": f'attachment; filename="{document_id}.{format}"'
        }
    )

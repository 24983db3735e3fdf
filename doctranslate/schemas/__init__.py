# doctranslate/schemas/__init__.py
from .document import Document, DocumentCreate
from .translation import Translation, TranslationCreate, TranslationCreateForDocument, TranslationUpdate
from .translate import TranslateRequest, TranslateResponse, ErrorResponse
from .catalog import LanguageInfo, DocumentTypeInfo

__all__ = [
    "Document", "DocumentCreate",
    "Translation", "TranslationCreate", "TranslationCreateForDocument", "TranslationUpdate",
    "TranslateRequest", "TranslateResponse", "ErrorResponse",
    "LanguageInfo", "DocumentTypeInfo"
]

# doctranslate/languages.py
"""Supported languages and the document-type catalogue used for filtering."""
import enum
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple


class Language(str, enum.Enum):
    DARI = "dari"
    PASHTO = "pashto"
    UZBEK = "uzbek"
    TAJIK = "tajik"
    ENGLISH = "english"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


LANGUAGES: List[Language] = list(Language)


def language_name(code: str) -> str:
    """Display name for a language code, falling back to the raw code"""
    try:
        return Language(code).display_name
    except ValueError:
        return code


@dataclass(frozen=True)
class DocumentType:
    id: str
    name: str
    mime_types: Tuple[str, ...]

    def matches(self, file_type: str) -> bool:
        """Loose match on the primary MIME category only.

        "text/html" matches the text group because the group lists
        "text/plain"; "application/zip" matches because of "application/pdf".
        """
        file_type = file_type or ""
        return any(file_type.startswith(mime.split("/")[0]) for mime in self.mime_types)


DOCUMENT_TYPES: List[DocumentType] = [
    DocumentType("text", "Text Documents", ("text/plain", "application/pdf", "application/msword")),
    DocumentType("image", "Images", ("image/jpeg", "image/png", "image/gif")),
    DocumentType("audio", "Audio", ("audio/mpeg", "audio/wav")),
    DocumentType("video", "Video", ("video/mp4", "video/mpeg")),
]


def get_document_type(type_id: Optional[str]) -> Optional[DocumentType]:
    for doc_type in DOCUMENT_TYPES:
        if doc_type.id == type_id:
            return doc_type
    return None


def filter_documents(documents: Iterable, doc_type: Optional[str] = None, language: Optional[str] = None) -> list:
    """Apply the sidebar filters to a sequence of documents.

    An unknown document type id leaves the list unfiltered by type. The
    language filter keeps documents whose source or target language matches.
    """
    filtered = list(documents)

    if doc_type:
        selected = get_document_type(doc_type)
        if selected:
            filtered = [doc for doc in filtered if selected.matches(doc.file_type)]

    if language:
        filtered = [
            doc for doc in filtered
            if doc.source_language == language or doc.target_language == language
        ]

    return filtered

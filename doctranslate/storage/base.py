# doctranslate/storage/base.py
from abc import ABC, abstractmethod
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional, Union

from ..languages import filter_documents
from ..schemas.document import Document, DocumentCreate
from ..schemas.translation import Translation, TranslationCreate, TranslationUpdate

TranslationChanges = Union[TranslationUpdate, Dict[str, Any]]

# Never overwritten by a partial update
PROTECTED_FIELDS = {"id", "created_at", "updated_at"}
# The only field a partial update may set to null
NULLABLE_FIELDS = {"content"}


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """SQLite hands back naive datetimes; treat them as UTC"""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def next_timestamp(previous: datetime) -> datetime:
    """Current time, bumped so it is strictly after `previous`"""
    now = utcnow()
    previous = as_utc(previous)
    if now <= previous:
        now = previous + timedelta(microseconds=1)
    return now


def translation_changes(updates: TranslationChanges) -> Dict[str, Any]:
    """Normalize a partial update into the set of fields to merge.

    Explicit nulls are dropped for every field except `content`.
    """
    if not isinstance(updates, TranslationUpdate):
        updates = TranslationUpdate.model_validate(
            {k: v for k, v in dict(updates).items() if k not in PROTECTED_FIELDS}
        )
    return {
        field: value
        for field, value in updates.model_dump(exclude_unset=True).items()
        if value is not None or field in NULLABLE_FIELDS
    }


class DocumentStore(ABC):
    """Repository for documents and their translations.

    Lookups that miss return None instead of raising.
    """

    @abstractmethod
    def get_documents(self) -> List[Document]:
        ...

    @abstractmethod
    def get_document(self, document_id: str) -> Optional[Document]:
        ...

    @abstractmethod
    def create_document(self, document: DocumentCreate) -> Document:
        ...

    @abstractmethod
    def get_translations(self, document_id: str) -> List[Translation]:
        ...

    @abstractmethod
    def create_translation(self, translation: TranslationCreate) -> Translation:
        ...

    @abstractmethod
    def update_translation(self, translation_id: str, updates: TranslationChanges) -> Optional[Translation]:
        ...

    def filter_documents(self, doc_type: Optional[str] = None, language: Optional[str] = None) -> List[Document]:
        return filter_documents(self.get_documents(), doc_type=doc_type, language=language)

# doctranslate/storage/memory.py
import json
import threading
from pathlib import Path
from typing import Iterable, List, Optional
from uuid import uuid4

from ..schemas.document import Document, DocumentCreate
from ..schemas.translation import Translation, TranslationCreate
from ..utils.logging import db_logger
from .base import DocumentStore, TranslationChanges, next_timestamp, translation_changes, utcnow


class InMemoryDocumentStore(DocumentStore):
    """Process-lifetime store backed by two lists.

    State is lost on restart; a new instance starts again from its seed.
    Records handed to callers are deep copies, so edits never bypass the locks.
    """

    def __init__(
            self,
            documents: Optional[Iterable[Document]] = None,
            translations: Optional[Iterable[Translation]] = None
    ):
        self._documents: List[Document] = list(documents or [])
        self._translations: List[Translation] = list(translations or [])
        self._documents_lock = threading.Lock()
        self._translations_lock = threading.Lock()

    @classmethod
    def from_sample_file(cls, path: Path) -> "InMemoryDocumentStore":
        """Seed a new store from a JSON file with `documents` and `translations` keys"""
        with Path(path).open(encoding="utf-8") as f:
            data = json.load(f)

        documents = [Document.model_validate(item) for item in data.get("documents", [])]
        translations = [Translation.model_validate(item) for item in data.get("translations", [])]

        db_logger.info("Seeded in-memory document store", extra={
            "sample_data_path": str(path),
            "document_count": len(documents),
            "translation_count": len(translations)
        })
        return cls(documents, translations)

    # Documents

    def get_documents(self) -> List[Document]:
        with self._documents_lock:
            return [document.model_copy(deep=True) for document in self._documents]

    def get_document(self, document_id: str) -> Optional[Document]:
        with self._documents_lock:
            for document in self._documents:
                if document.id == document_id:
                    return document.model_copy(deep=True)
        return None

    def create_document(self, document: DocumentCreate) -> Document:
        now = utcnow()
        fields = document.model_dump()
        fields["content"] = None
        new_document = Document(
            **fields,
            id=str(uuid4()),
            created_at=now,
            updated_at=now
        )

        with self._documents_lock:
            self._documents.append(new_document)
        return new_document.model_copy(deep=True)

    # Translations

    def get_translations(self, document_id: str) -> List[Translation]:
        with self._translations_lock:
            return [t.model_copy(deep=True) for t in self._translations if t.document_id == document_id]

    def create_translation(self, translation: TranslationCreate) -> Translation:
        now = utcnow()
        new_translation = Translation(
            **translation.model_dump(),
            id=str(uuid4()),
            created_at=now,
            updated_at=now
        )

        with self._translations_lock:
            self._translations.append(new_translation)
        return new_translation.model_copy(deep=True)

    def update_translation(self, translation_id: str, updates: TranslationChanges) -> Optional[Translation]:
        changes = translation_changes(updates)

        with self._translations_lock:
            for index, existing in enumerate(self._translations):
                if existing.id == translation_id:
                    break
            else:
                return None

            changes["updated_at"] = next_timestamp(existing.updated_at)
            updated = Translation.model_validate({**existing.model_dump(), **changes})
            self._translations[index] = updated
            return updated.model_copy(deep=True)

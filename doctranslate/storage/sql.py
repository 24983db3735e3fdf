# doctranslate/storage/sql.py
import json
from pathlib import Path
from typing import List, Optional
from uuid import uuid4

from sqlalchemy.orm import Session

from ..models.document import Document as DocumentModel
from ..models.translation import Translation as TranslationModel
from ..schemas.document import Document, DocumentCreate
from ..schemas.translation import Translation, TranslationCreate
from ..utils.logging import db_logger
from .base import DocumentStore, TranslationChanges, as_utc, next_timestamp, translation_changes, utcnow


def _to_translation(row: TranslationModel) -> Translation:
    return Translation(
        id=row.id,
        document_id=row.document_id,
        content=row.content,
        status=row.status,
        metadata=row.meta or {},
        language=row.language,
        created_at=as_utc(row.created_at),
        updated_at=as_utc(row.updated_at)
    )


def _to_document(row: DocumentModel) -> Document:
    return Document(
        id=row.id,
        title=row.title,
        file_path=row.file_path,
        file_type=row.file_type,
        source_language=row.source_language,
        target_language=row.target_language,
        status=row.status,
        content=row.content,
        metadata=row.meta or {},
        created_at=as_utc(row.created_at),
        updated_at=as_utc(row.updated_at)
    )


class SqlDocumentStore(DocumentStore):
    """DocumentStore over an SQLAlchemy session"""

    def __init__(self, db: Session):
        self.db = db

    def get_documents(self) -> List[Document]:
        rows = self.db.query(DocumentModel).order_by(DocumentModel.created_at).all()
        return [_to_document(row) for row in rows]

    def get_document(self, document_id: str) -> Optional[Document]:
        row = self.db.query(DocumentModel).filter(DocumentModel.id == document_id).first()
        return _to_document(row) if row else None

    def create_document(self, document: DocumentCreate) -> Document:
        now = utcnow()
        fields = document.model_dump(exclude={"content", "translations", "metadata"})
        row = DocumentModel(
            **fields,
            id=str(uuid4()),
            content=None,
            meta=document.metadata,
            created_at=now,
            updated_at=now
        )

        try:
            self.db.add(row)
            self.db.commit()
            self.db.refresh(row)
        except Exception as e:
            db_logger.error("Error creating document", extra={"title": document.title, "error": str(e)})
            self.db.rollback()
            raise

        return _to_document(row)

    def get_translations(self, document_id: str) -> List[Translation]:
        rows = self.db.query(TranslationModel) \
            .filter(TranslationModel.document_id == document_id) \
            .order_by(TranslationModel.created_at) \
            .all()
        return [_to_translation(row) for row in rows]

    def create_translation(self, translation: TranslationCreate) -> Translation:
        now = utcnow()
        row = TranslationModel(
            **translation.model_dump(exclude={"metadata"}),
            id=str(uuid4()),
            meta=translation.metadata,
            created_at=now,
            updated_at=now
        )

        try:
            self.db.add(row)
            self.db.commit()
            self.db.refresh(row)
        except Exception as e:
            db_logger.error("Error creating translation", extra={
                "document_id": translation.document_id,
                "error": str(e)
            })
            self.db.rollback()
            raise

        return _to_translation(row)

    def update_translation(self, translation_id: str, updates: TranslationChanges) -> Optional[Translation]:
        changes = translation_changes(updates)

        row = self.db.query(TranslationModel).filter(TranslationModel.id == translation_id).first()
        if not row:
            return None

        try:
            for field, value in changes.items():
                setattr(row, "meta" if field == "metadata" else field, value)
            row.updated_at = next_timestamp(row.updated_at)

            self.db.commit()
            self.db.refresh(row)
        except Exception as e:
            db_logger.error("Error updating translation", extra={
                "translation_id": translation_id,
                "error": str(e)
            })
            self.db.rollback()
            raise

        return _to_translation(row)


def seed_from_sample(db: Session, path: Path) -> int:
    """Load the sample documents into an empty database; returns rows added"""
    if db.query(DocumentModel).first() is not None:
        return 0

    with Path(path).open(encoding="utf-8") as f:
        data = json.load(f)

    added = 0
    for item in data.get("documents", []):
        document = Document.model_validate(item)
        db.add(DocumentModel(
            **document.model_dump(exclude={"metadata", "translations"}),
            meta=document.metadata
        ))
        added += 1

    for item in data.get("translations", []):
        translation = Translation.model_validate(item)
        db.add(TranslationModel(
            **translation.model_dump(exclude={"metadata"}),
            meta=translation.metadata
        ))
        added += 1

    db.commit()
    db_logger.info("Seeded database from sample data", extra={
        "sample_data_path": str(path),
        "rows_added": added
    })
    return added

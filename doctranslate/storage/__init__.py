# doctranslate/storage/__init__.py
from ..config import settings
from ..database import SessionLocal
from .base import DocumentStore
from .memory import InMemoryDocumentStore
from .sql import SqlDocumentStore, seed_from_sample

_memory_store: InMemoryDocumentStore | None = None


def get_memory_store() -> InMemoryDocumentStore:
    """The process-wide in-memory store, seeded on first use"""
    global _memory_store
    if _memory_store is None:
        _memory_store = InMemoryDocumentStore.from_sample_file(settings.SAMPLE_DATA_PATH)
    return _memory_store


def get_store():
    """FastAPI dependency yielding the configured DocumentStore"""
    if settings.STORE_BACKEND == "sql":
        db = SessionLocal()
        try:
            yield SqlDocumentStore(db)
        finally:
            db.close()
    else:
        yield get_memory_store()


__all__ = [
    "DocumentStore",
    "InMemoryDocumentStore",
    "SqlDocumentStore",
    "seed_from_sample",
    "get_memory_store",
    "get_store",
]

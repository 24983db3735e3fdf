# tests/storage/test_memory_store.py
import threading

import pytest

from doctranslate.schemas.document import DocumentCreate
from doctranslate.schemas.translation import TranslationCreate, TranslationUpdate
from doctranslate.storage import InMemoryDocumentStore


def make_document(**overrides) -> DocumentCreate:
    fields = {
        "title": "Report.txt",
        "file_path": "uploads/report.txt",
        "file_type": "text/plain",
        "source_language": "tajik",
        "target_language": "english",
        "status": "pending",
        "metadata": {"size": 42},
    }
    fields.update(overrides)
    return DocumentCreate(**fields)


def test_seeded_from_sample(memory_store):
    documents = memory_store.get_documents()
    assert len(documents) == 5
    assert documents[0].title == "Community health notice.txt"


def test_create_then_get_returns_same_record(memory_store):
    created = memory_store.create_document(make_document(content="dropped"))

    assert created.content is None
    assert created.created_at == created.updated_at
    assert memory_store.get_document(created.id) == created
    assert memory_store.get_documents()[-1] == created


def test_create_assigns_unique_ids():
    store = InMemoryDocumentStore()
    ids = {store.create_document(make_document()).id for _ in range(20)}
    assert len(ids) == 20


def test_languages_are_not_validated():
    store = InMemoryDocumentStore()
    created = store.create_document(make_document(source_language="klingon"))
    assert created.source_language == "klingon"


def test_get_missing_document_returns_none(memory_store):
    assert memory_store.get_document("does-not-exist") is None


def test_translations_filtered_by_document(memory_store):
    first = memory_store.create_document(make_document())
    second = memory_store.create_document(make_document())

    translation = memory_store.create_translation(TranslationCreate(
        document_id=first.id,
        content="Hello",
        status="completed",
        language="english"
    ))

    assert translation in memory_store.get_translations(first.id)
    assert translation not in memory_store.get_translations(second.id)
    assert memory_store.get_translations("nobody") == []


def test_update_translation_refreshes_updated_at(memory_store, sample_translation):
    updated = memory_store.update_translation(sample_translation.id, TranslationUpdate(status="completed"))

    assert updated.status == "completed"
    assert updated.updated_at > sample_translation.updated_at
    assert updated.created_at == sample_translation.created_at
    assert updated.language == sample_translation.language
    assert memory_store.get_translations(sample_translation.document_id) == [updated]


def test_update_translation_accepts_dict(memory_store, sample_translation):
    updated = memory_store.update_translation(
        sample_translation.id,
        {"content": "Salaam", "id": "hijacked", "updated_at": "2000-01-01T00:00:00Z"}
    )

    assert updated.id == sample_translation.id
    assert updated.content == "Salaam"
    assert updated.updated_at > sample_translation.updated_at


def test_update_translation_is_repeatable(memory_store, sample_translation):
    first = memory_store.update_translation(sample_translation.id, {"status": "processing"})
    second = memory_store.update_translation(sample_translation.id, {"status": "completed"})

    assert second.updated_at > first.updated_at


def test_update_missing_translation_leaves_collection(memory_store):
    before = list(memory_store._translations)

    assert memory_store.update_translation("missing", {"status": "completed"}) is None
    assert memory_store._translations == before


@pytest.mark.parametrize("doc_type, language, expected", [
    (None, None, 5),
    ("text", None, 2),
    ("image", None, 1),
    ("audio", None, 1),
    ("video", None, 1),
    ("unknown", None, 5),
    (None, "english", 4),
    (None, "dari", 2),
    ("video", "dari", 0),
])
def test_filter_documents(memory_store, doc_type, language, expected):
    assert len(memory_store.filter_documents(doc_type=doc_type, language=language)) == expected


def test_concurrent_creates_are_all_kept():
    store = InMemoryDocumentStore()

    def worker():
        for _ in range(50):
            store.create_document(make_document())

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(store.get_documents()) == 400


def test_update_translation_ignores_null_for_required_fields(memory_store, sample_translation):
    updated = memory_store.update_translation(
        sample_translation.id,
        {"status": None, "language": None, "metadata": None, "document_id": None}
    )

    assert updated.status == sample_translation.status
    assert updated.language == sample_translation.language
    assert updated.metadata == sample_translation.metadata
    assert updated.document_id == sample_translation.document_id


def test_update_translation_null_clears_content(memory_store, sample_translation):
    memory_store.update_translation(sample_translation.id, {"content": "Salaam"})

    updated = memory_store.update_translation(sample_translation.id, TranslationUpdate(content=None))

    assert updated.content is None


def test_returned_records_are_copies(memory_store, sample_document, sample_translation):
    document = memory_store.get_document(sample_document.id)
    document.title = "changed"
    document.metadata["size"] = 999

    translations = memory_store.get_translations(sample_document.id)
    translations[0].status = "failed"

    assert memory_store.get_document(sample_document.id).title == "Greeting.txt"
    assert memory_store.get_document(sample_document.id).metadata == {"size": 5}
    assert memory_store.get_translations(sample_document.id)[0].status == "pending"

# tests/conftest.py
import logging
import os
import shutil
import tempfile
from pathlib import Path

# Settings and the log handlers are built at import time, so point them at a
# scratch directory before anything from doctranslate is imported.
TEST_STORAGE_ROOT = tempfile.mkdtemp(prefix="doctranslate-tests-")
os.environ["STORAGE_PATH"] = TEST_STORAGE_ROOT
os.environ["LOGS_PATH"] = str(Path(TEST_STORAGE_ROOT, "logs"))

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine, event  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from doctranslate.main import app  # noqa: E402
from doctranslate.config import settings  # noqa: E402
from doctranslate.database import Base  # noqa: E402
from doctranslate.schemas.document import DocumentCreate  # noqa: E402
from doctranslate.schemas.translation import TranslationCreate  # noqa: E402
from doctranslate.services.translation import ProviderError, TranslationProvider, get_translation_provider  # noqa: E402
from doctranslate.storage import InMemoryDocumentStore, SqlDocumentStore, get_store  # noqa: E402
from doctranslate import models  # noqa: F401,E402  registers tables on Base

SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"


def pytest_unconfigure(config):
    logging.shutdown()
    shutil.rmtree(TEST_STORAGE_ROOT, ignore_errors=True)


class FakeProvider(TranslationProvider):
    """Records every call and returns a canned translation"""

    def __init__(self, result: str = "Salaam, dunya", error: Exception | None = None):
        self.result = result
        self.error = error
        self.calls = []

    async def translate(self, text: str, source_language: str, target_language: str) -> str:
        self.calls.append((text, source_language, target_language))
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture(scope="session")
def engine():
    """Create test database engine"""
    engine = create_engine(
        SQLALCHEMY_TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool  # Needed for SQLite in-memory database
    )

    # pysqlite does not emit BEGIN itself, so the per-test rollback in
    # db_session would not undo committed work without these hooks.
    @event.listens_for(engine, "connect")
    def _disable_pysqlite_transactions(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine, "begin")
    def _emit_begin(conn):
        conn.exec_driver_sql("BEGIN")

    return engine


@pytest.fixture(scope="session")
def tables(engine):
    """Create all tables in the test database"""
    Base.metadata.create_all(engine)
    yield
    Base.metadata.drop_all(engine)


@pytest.fixture
def db_session(engine, tables):
    """Creates a new database session for a test"""
    connection = engine.connect()
    transaction = connection.begin()
    session = sessionmaker(bind=connection, join_transaction_mode="create_savepoint")()

    yield session

    session.close()
    transaction.rollback()
    connection.close()


@pytest.fixture(scope="session")
def temp_storage_dir():
    """Create temporary storage directory for test files"""
    temp_dir = tempfile.mkdtemp()
    for subdir in ["uploads", "logs"]:
        Path(temp_dir, subdir).mkdir(parents=True, exist_ok=True)
    yield Path(temp_dir)
    shutil.rmtree(temp_dir)


@pytest.fixture(autouse=True)
def override_settings(temp_storage_dir):
    """Override settings for testing"""
    original_storage = settings.STORAGE_PATH
    original_uploads = settings.UPLOADS_PATH

    settings.STORAGE_PATH = temp_storage_dir
    settings.UPLOADS_PATH = temp_storage_dir / "uploads"

    yield

    settings.STORAGE_PATH = original_storage
    settings.UPLOADS_PATH = original_uploads


@pytest.fixture
def memory_store():
    """A fresh store seeded from the packaged sample data"""
    return InMemoryDocumentStore.from_sample_file(settings.SAMPLE_DATA_PATH)


@pytest.fixture
def sql_store(db_session):
    return SqlDocumentStore(db_session)


@pytest.fixture
def fake_provider():
    return FakeProvider()


@pytest.fixture
def failing_provider():
    return FakeProvider(error=ProviderError("upstream unavailable"))


@pytest.fixture
def client(memory_store, fake_provider):
    """Test client wired to a fresh in-memory store and a fake provider"""
    app.dependency_overrides[get_store] = lambda: memory_store
    app.dependency_overrides[get_translation_provider] = lambda: fake_provider
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def failing_client(memory_store, failing_provider):
    app.dependency_overrides[get_store] = lambda: memory_store
    app.dependency_overrides[get_translation_provider] = lambda: failing_provider
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def sample_document(memory_store):
    """Create a text document in the store"""
    return memory_store.create_document(DocumentCreate(
        title="Greeting.txt",
        file_path="uploads/greeting.txt",
        file_type="text/plain",
        source_language="english",
        target_language="dari",
        status="pending",
        metadata={"size": 5}
    ))


@pytest.fixture
def sample_translation(memory_store, sample_document):
    return memory_store.create_translation(TranslationCreate(
        document_id=sample_document.id,
        content=None,
        status="pending",
        language="dari"
    ))

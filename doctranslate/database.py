# doctranslate/database.py
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from .config import settings
from .utils.logging import db_logger

SQLALCHEMY_DATABASE_URL = str(settings.DATABASE_URL)

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False} if SQLALCHEMY_DATABASE_URL.startswith("sqlite") else {},
    echo=False
)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def init_db():
    """Create the document and translation tables if they are missing"""
    from . import models  # noqa: F401  registers the tables on Base

    db_logger.info("Creating database tables", extra={"database_url": SQLALCHEMY_DATABASE_URL})
    Base.metadata.create_all(bind=engine)

# doctranslate/main.py
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from .api import translate, documents, translations, catalog
from .config import settings
from .database import SessionLocal, init_db
from .storage import seed_from_sample
from .utils.logging import api_logger


@asynccontextmanager
async def lifespan(app: FastAPI):
    api_logger.info("Starting DocTranslate API", extra={
        "store_backend": settings.STORE_BACKEND,
        "model": settings.OPENAI_MODEL
    })
    if settings.STORE_BACKEND == "sql":
        init_db()
        db = SessionLocal()
        try:
            seed_from_sample(db, settings.SAMPLE_DATA_PATH)
        finally:
            db.close()
    yield


app = FastAPI(title="DocTranslate API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # In production, specify your actual frontend URL
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.mount("/storage", StaticFiles(directory=str(settings.STORAGE_PATH)), name="storage")

app.include_router(translate.router)
app.include_router(documents.router)
app.include_router(translations.router)
app.include_router(catalog.router)


@app.get("/")
async def root():
    return {"message": "DocTranslate API is running"}

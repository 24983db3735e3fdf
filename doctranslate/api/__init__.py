# doctranslate/api/__init__.py
from .translate import router as translate_router
from .documents import router as documents_router
from .translations import router as translations_router
from .catalog import router as catalog_router

__all__ = ["translate_router", "documents_router", "translations_router", "catalog_router"]

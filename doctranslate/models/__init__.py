# doctranslate/models/__init__.py
from ..database import Base
from .document import Document
from .translation import Translation

__all__ = [
    "Base",
    "Document",
    "Translation",
]

# doctranslate/services/__init__.py
from .translation import translation_service, get_translation_provider
from .export import export_service

__all__ = ["translation_service", "get_translation_provider", "export_service"]

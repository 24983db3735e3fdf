# doctranslate/services/translation.py
import time
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from openai import AsyncOpenAI

from ..config import settings
from ..utils.logging import service_logger

SYSTEM_PROMPT = (
    "You are a professional translator. Translate the following text from "
    "{source_language} to {target_language}. Maintain the original meaning, "
    "context, and formatting. If the text contains any cultural references, "
    "provide appropriate equivalents in the target language."
)


class ProviderError(Exception):
    """Raised when the translation backend fails or returns something unusable"""


class TranslationProvider(ABC):
    """Narrow seam between the API and whichever model does the translating"""

    @abstractmethod
    async def translate(self, text: str, source_language: str, target_language: str) -> str:
        ...


def build_messages(text: str, source_language: str, target_language: str) -> List[Dict[str, str]]:
    return [
        {
            "role": "system",
            "content": SYSTEM_PROMPT.format(
                source_language=source_language,
                target_language=target_language
            )
        },
        {
            "role": "user",
            "content": text
        }
    ]


class OpenAITranslationProvider(TranslationProvider):
    """Single chat-completion call per translation, no retries or caching"""

    def __init__(self, api_key: Optional[str] = None, model: Optional[str] = None, client=None):
        self.api_key = api_key
        self.model = model or settings.OPENAI_MODEL
        self._client = client

    @property
    def client(self):
        if self._client is None:
            self._client = AsyncOpenAI(api_key=self.api_key or settings.OPENAI_API_KEY)
        return self._client

    async def translate(self, text: str, source_language: str, target_language: str) -> str:
        start_time = time.perf_counter()
        service_logger.info("Requesting translation", extra={
            "model": self.model,
            "source_language": source_language,
            "target_language": target_language,
            "text_length": len(text)
        })

        try:
            completion = await self.client.chat.completions.create(
                model=self.model,
                messages=build_messages(text, source_language, target_language),
            )
        except Exception as e:
            raise ProviderError(f"Completion request failed: {e}") from e

        try:
            translation = completion.choices[0].message.content
        except (AttributeError, IndexError, TypeError) as e:
            raise ProviderError("Malformed completion response") from e

        if translation is None:
            raise ProviderError("Completion response has no content")

        service_logger.info("Translation received", extra={
            "model": self.model,
            "translation_length": len(translation),
            "execution_time_ms": round((time.perf_counter() - start_time) * 1000, 2)
        })
        return translation


translation_service = OpenAITranslationProvider()


def get_translation_provider() -> TranslationProvider:
    """FastAPI dependency for the active provider"""
    return translation_service

# doctranslate/schemas/translate.py
from typing import Optional

from pydantic import BaseModel, ConfigDict


class TranslateRequest(BaseModel):
    # Fields are optional here so that absence maps to a 400, not a 422
    model_config = ConfigDict(extra="ignore")

    text: Optional[str] = None
    sourceLanguage: Optional[str] = None
    targetLanguage: Optional[str] = None
    documentId: Optional[str] = None

    def is_complete(self) -> bool:
        return bool(self.text and self.sourceLanguage and self.targetLanguage)


class TranslateResponse(BaseModel):
    success: bool = True
    translation: str


class ErrorResponse(BaseModel):
    error: str

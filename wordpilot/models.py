from enum import Enum
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict


class Mode(str, Enum):
    CORRECT_ENGLISH = "English"
    TRANSLATE_ROMAN_URDU = "Roman Urdu"
    ENHANCE_PROMPT = "Prompt Enhance"


class CorrectionRequest(BaseModel):
    text: str
    mode: Mode = Mode.CORRECT_ENGLISH


class CorrectionResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    corrected_text: str
    is_translated: bool = False
    untranslatable_words: Tuple[str, ...] = ()

    @classmethod
    def empty(cls) -> "CorrectionResult":
        return cls(corrected_text="", is_translated=False, untranslatable_words=())

    @classmethod
    def echo(cls, text: str) -> "CorrectionResult":
        return cls(corrected_text=text, is_translated=False, untranslatable_words=())


class CorrectionResponse(BaseModel):
    corrected_text: str
    is_translated: bool
    untranslatable_words: List[str]
    mode: Mode
    notice: Optional[str] = None

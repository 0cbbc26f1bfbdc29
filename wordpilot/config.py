import os
import logging
from dataclasses import dataclass, field
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

DEFAULT_MODEL = "gemini-2.0-flash"
DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_TIMEOUT = 60.0
DEFAULT_DEBOUNCE_MS = 500


@dataclass(frozen=True)
class Settings:
    api_key: Optional[str] = field(default=None, repr=False)
    model: str = DEFAULT_MODEL
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    debounce_seconds: float = DEFAULT_DEBOUNCE_MS / 1000

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            api_key=os.getenv("GEMINI_API_KEY") or None,
            model=os.getenv("GEMINI_MODEL") or DEFAULT_MODEL,
            base_url=(os.getenv("GEMINI_BASE_URL") or DEFAULT_BASE_URL).rstrip("/"),
            timeout=_get_float("GEMINI_TIMEOUT", DEFAULT_TIMEOUT),
            debounce_seconds=_get_float("DEBOUNCE_MS", DEFAULT_DEBOUNCE_MS) / 1000,
        )

    @property
    def generate_url(self) -> str:
        return f"{self.base_url}/models/{self.model}:generateContent"


def _get_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ValueError(f"Environment variable {name} must be a number, got: {raw}") from exc


def configure_logging(level: Optional[str] = None) -> None:
    level_name = (level or os.getenv("LOG_LEVEL") or "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

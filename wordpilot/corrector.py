import logging
from typing import Callable, Optional

import httpx

from .config import Settings
from .debounce import Debouncer
from .gemini import GeminiError, call_gemini
from .interpreter import interpret
from .models import CorrectionResult, Mode
from .prompt import build_prompt

logger = logging.getLogger(__name__)

FAILURE_MESSAGE = "Failed to process text. Please try again."

Notifier = Callable[[str], None]


def log_notifier(message: str) -> None:
    logger.warning(message)


class TextCorrector:
    def __init__(
        self,
        settings: Optional[Settings] = None,
        notify: Optional[Notifier] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.settings = settings or Settings.from_env()
        self._notify = notify or log_notifier
        self._transport = transport
        self._debouncer = Debouncer(self.correct, self.settings.debounce_seconds)

    async def correct(
        self,
        text: str,
        mode: Mode = Mode.CORRECT_ENGLISH,
        notify: Optional[Notifier] = None,
    ) -> CorrectionResult:
        if not text.strip():
            return CorrectionResult.empty()

        prompt = build_prompt(text, mode)
        try:
            raw = await call_gemini(prompt, self.settings, transport=self._transport)
        except GeminiError as exc:
            logger.error("Text correction error (%s): %s", mode.value, exc)
            (notify or self._notify)(FAILURE_MESSAGE)
            return CorrectionResult.echo(text)

        return interpret(text, raw)

    async def correct_text(
        self,
        text: str,
        mode: Mode = Mode.CORRECT_ENGLISH,
        use_debounce: bool = False,
        notify: Optional[Notifier] = None,
    ) -> CorrectionResult:
        if use_debounce:
            return await self._debouncer.schedule(text, mode, notify=notify)
        return await self.correct(text, mode, notify=notify)

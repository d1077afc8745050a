from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from loguru import logger

from utils.text import code_point_length
from utils.usage import UsageTracker

from .errors import ApiError, TranslationError
from .messages import DEFAULT_LOCALE, get_message
from .orchestrator import TranslationOrchestrator

AUTO_DETECT = "auto"


def _envelope(success: bool, data: Any) -> Dict[str, Any]:
    return {"success": success, "data": data}


class TranslationRequestHandler:
    """Form-payload entry point used by the site's front-end.

    Payload fields: ``text``, ``to`` (default ``en``) and ``from`` (default
    ``auto``, which lets the API detect the source language).
    """

    def __init__(
        self,
        orchestrator: TranslationOrchestrator,
        usage_tracker: Optional[UsageTracker] = None,
        *,
        default_target: str = "en",
        locale: str = DEFAULT_LOCALE,
    ) -> None:
        self.orchestrator = orchestrator
        self.usage_tracker = usage_tracker
        self.default_target = default_target
        self.locale = locale

    def handle(self, payload: Mapping[str, Any], *, privileged: bool = False) -> Dict[str, Any]:
        text = str(payload.get("text") or "").strip()
        target = str(payload.get("to") or self.default_target).strip()
        source = str(payload.get("from") or AUTO_DETECT).strip()
        if source.lower() == AUTO_DETECT:
            source = ""

        if not text:
            return _envelope(False, {"message": get_message("empty_text", self.locale)})

        try:
            result = self.orchestrator.translate(text, target, source)
        except TranslationError as exc:
            if privileged and isinstance(exc, ApiError):
                logger.error("API Error {}: {}", exc.status, exc.raw_message)
            return _envelope(False, {"message": exc.message, "code": exc.code})

        if self.usage_tracker is not None:
            self.usage_tracker.track_usage(code_point_length(text), source or AUTO_DETECT, target)
        return _envelope(True, result.to_dict())

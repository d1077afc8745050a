"""
Google Cloud Translation API (v2) client.

Performs a single upstream call and turns the HTTP outcome into either a
``TranslationResult`` or a ``TranslationError``. Caching and long-text
splitting live in the orchestrator.
"""
from __future__ import annotations

from typing import Dict

from config import DEFAULT_API_ENDPOINT

from .base import BaseTransport, TranslationRequest, TranslationResult
from .errors import InvalidResponseError, TransportError, normalize_api_error
from .messages import DEFAULT_LOCALE, get_message
from .response import MalformedResponse, decode_error, decode_success


class GoogleCloudTranslator:
    def __init__(
        self,
        *,
        api_key: str,
        transport: BaseTransport,
        api_url: str = DEFAULT_API_ENDPOINT,
        timeout: float = 30.0,
        locale: str = DEFAULT_LOCALE,
    ) -> None:
        self.api_key = api_key
        self.transport = transport
        self.api_url = api_url
        self.timeout = timeout
        self.locale = locale

    def build_params(self, request: TranslationRequest) -> Dict[str, str]:
        params = {
            "q": request.text,
            "target": request.target_lang,
            "format": "text",
            "key": self.api_key,
        }
        if request.source_lang:
            params["source"] = request.source_lang
        return params

    def translate(self, request: TranslationRequest) -> TranslationResult:
        try:
            resp = self.transport.post(self.api_url, self.build_params(request), self.timeout)
        except TransportError as exc:
            raise TransportError(exc.raw_message, self.locale) from exc

        if resp.status_code != 200:
            payload = decode_error(
                resp.body,
                status=resp.status_code,
                default_message=get_message("generic_api_error", self.locale) or "",
            )
            raise normalize_api_error(payload.code, payload.message, locale=self.locale)

        try:
            payload = decode_success(resp.body)
        except MalformedResponse as exc:
            raise InvalidResponseError(self.locale) from exc

        first = payload.translations[0]
        return TranslationResult(
            translated_text=first.translated_text,
            detected_language=first.detected_source_language or request.source_lang,
            original_text=request.text,
            char_count=len(request.text),
        )

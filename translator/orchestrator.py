from __future__ import annotations

from typing import List

from loguru import logger

from config import TranslatorSettings
from utils.batching import pack_fragments
from utils.cache import CacheStore, make_cache_key
from utils.text import code_point_length, split_sentences

from .base import BaseTransport, TranslationRequest, TranslationResult
from .errors import NoApiKeyError
from .google import GoogleCloudTranslator


class TranslationOrchestrator:
    """Cache-aware front door to the Cloud Translation API.

    Texts over ``max_chars_per_request`` code points are split on sentence
    boundaries and translated chunk by chunk. Every chunk is cached under its
    own key; the joined result of a split text is not cached.
    """

    def __init__(
        self,
        settings: TranslatorSettings,
        cache: CacheStore,
        transport: BaseTransport,
    ) -> None:
        self.settings = settings
        self.cache = cache
        self.translator = GoogleCloudTranslator(
            api_key=settings.api_key,
            transport=transport,
            api_url=settings.api_endpoint,
            timeout=settings.request_timeout,
            locale=settings.message_locale,
        )

    def translate(self, text: str, target_lang: str, source_lang: str = "") -> TranslationResult:
        return self._translate(TranslationRequest(text, target_lang, source_lang), allow_split=True)

    def _translate(self, request: TranslationRequest, *, allow_split: bool) -> TranslationResult:
        if not self.settings.api_key:
            raise NoApiKeyError(self.settings.message_locale)

        key = make_cache_key(request.text, request.target_lang, request.source_lang)
        if self.settings.caching_enabled:
            cached = self._cached_result(key)
            if cached is not None:
                logger.debug("Cache hit for {} ({} chars)", key, len(request.text))
                return cached

        if allow_split and code_point_length(request.text) > self.settings.max_chars_per_request:
            return self._translate_long_text(request)

        result = self.translator.translate(request)

        if self.settings.caching_enabled:
            self.cache.set(key, result.to_dict(), self.settings.cache_ttl)
        return result

    def _cached_result(self, key: str) -> TranslationResult | None:
        cached = self.cache.get(key)
        if cached is None:
            return None
        try:
            return TranslationResult.from_dict(cached)
        except (KeyError, TypeError, ValueError):
            # Entries written by older versions or edited by hand are refetched.
            logger.warning("Ignoring undecodable cache entry {}", key)
            return None

    def _translate_long_text(self, request: TranslationRequest) -> TranslationResult:
        chunks = pack_fragments(
            split_sentences(request.text),
            max_chars=self.settings.max_chars_per_request,
        )
        logger.debug("Splitting {} chars into {} chunks", len(request.text), len(chunks))

        translated: List[str] = []
        for chunk in chunks:
            # Oversized single sentences are sent as they are.
            result = self._translate(
                TranslationRequest(chunk, request.target_lang, request.source_lang),
                allow_split=False,
            )
            translated.append(result.translated_text)

        return TranslationResult(
            translated_text=" ".join(translated),
            detected_language=request.source_lang,
            original_text=request.text,
            char_count=code_point_length(request.text),
        )

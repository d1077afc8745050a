"""Tests for TranslationOrchestrator on short texts: credentials, cache and upstream call."""

from __future__ import annotations

from dataclasses import replace

import pytest

from config import TranslatorSettings
from translator.base import TranslationResult
from translator.errors import ApiError, InvalidResponseError, NoApiKeyError, TransportError
from translator.orchestrator import TranslationOrchestrator
from utils.cache import make_cache_key

from tests.fakes import FakeTransport, SpyCache, error_body, success_body


def test_translate_success(orchestrator: TranslationOrchestrator, transport: FakeTransport) -> None:
    """Test the documented Hello world example."""
    transport.push(200, success_body("こんにちは世界", "en"))

    result = orchestrator.translate("Hello world", "ja", "")

    assert result == TranslationResult(
        translated_text="こんにちは世界",
        detected_language="en",
        original_text="Hello world",
        char_count=11,
    )


def test_request_fields(orchestrator: TranslationOrchestrator, transport: FakeTransport) -> None:
    """Test form fields, endpoint and timeout of the upstream call."""
    orchestrator.translate("Hello", "ja", "")
    orchestrator.translate("Bonjour", "ja", "fr")

    url, fields, timeout = transport.calls[0]
    assert url == "https://translation.example/v2"
    assert timeout == 30.0
    assert fields == {"q": "Hello", "target": "ja", "format": "text", "key": "test-key"}
    assert transport.calls[1][1]["source"] == "fr"


def test_detected_language_falls_back_to_source(orchestrator: TranslationOrchestrator, transport: FakeTransport) -> None:
    """Test detected_language uses the caller's source when the payload omits it."""
    transport.push(200, success_body("Hallo"))

    result = orchestrator.translate("Hello", "de", "en")

    assert result.detected_language == "en"


def test_char_count_is_code_points(orchestrator: TranslationOrchestrator) -> None:
    """Test char_count counts code points, not UTF-8 bytes."""
    result = orchestrator.translate("日本語のテキスト", "en")
    assert result.char_count == 8


def test_missing_api_key_touches_nothing(settings: TranslatorSettings, cache: SpyCache, transport: FakeTransport) -> None:
    """Test a missing key fails before any cache or network access."""
    orchestrator = TranslationOrchestrator(replace(settings, api_key=""), cache=cache, transport=transport)

    with pytest.raises(NoApiKeyError) as excinfo:
        orchestrator.translate("Hello", "ja")

    assert excinfo.value.code == "no_api_key"
    assert cache.gets == []
    assert cache.sets == []
    assert transport.calls == []


def test_second_call_is_served_from_cache(
    orchestrator: TranslationOrchestrator, transport: FakeTransport, cache: SpyCache
) -> None:
    """Test identical requests hit the cache and skip the upstream."""
    first = orchestrator.translate("Hello world", "ja", "en")
    second = orchestrator.translate("Hello world", "ja", "en")

    assert first == second
    assert len(transport.calls) == 1
    key, value, ttl = cache.sets[0]
    assert key == make_cache_key("Hello world", "ja", "en")
    assert value == first.to_dict()
    assert ttl == 604800


def test_cache_key_includes_languages(orchestrator: TranslationOrchestrator, transport: FakeTransport) -> None:
    """Test different target or source languages do not share cache entries."""
    orchestrator.translate("Hello", "ja", "")
    orchestrator.translate("Hello", "ko", "")
    orchestrator.translate("Hello", "ja", "en")

    assert len(transport.calls) == 3


def test_caching_disabled(settings: TranslatorSettings, cache: SpyCache, transport: FakeTransport) -> None:
    """Test no cache reads or writes when caching is off."""
    orchestrator = TranslationOrchestrator(replace(settings, caching_enabled=False), cache=cache, transport=transport)

    orchestrator.translate("Hello", "ja")
    orchestrator.translate("Hello", "ja")

    assert len(transport.calls) == 2
    assert cache.gets == []
    assert cache.sets == []


def test_transport_failure_propagates(
    orchestrator: TranslationOrchestrator, transport: FakeTransport, cache: SpyCache
) -> None:
    """Test transport failures are raised once, without retry or caching."""
    transport.push_failure("timed out")

    with pytest.raises(TransportError) as excinfo:
        orchestrator.translate("Hello", "ja")

    assert excinfo.value.raw_message == "timed out"
    assert excinfo.value.message == "Could not reach the translation service. Check the connection and try again."
    assert len(transport.calls) == 1
    assert cache.sets == []


def test_rate_limit_error(orchestrator: TranslationOrchestrator, transport: FakeTransport, cache: SpyCache) -> None:
    """Test a 429 maps to the fixed rate limit message and keeps the raw message."""
    transport.push(429, error_body(429, "Quota exceeded"))

    with pytest.raises(ApiError) as excinfo:
        orchestrator.translate("Hello", "ja")

    error = excinfo.value
    assert error.status == 429
    assert error.user_message == "The request limit was exceeded. Wait a while and try again."
    assert error.raw_message == "Quota exceeded"
    assert error.code == "api_error_429"
    assert cache.sets == []


def test_error_code_comes_from_payload(orchestrator: TranslationOrchestrator, transport: FakeTransport) -> None:
    """Test the provider code wins over the HTTP status."""
    transport.push(400, error_body(401, "API key not valid"))

    with pytest.raises(ApiError) as excinfo:
        orchestrator.translate("Hello", "ja")

    assert excinfo.value.status == 401


def test_error_without_body(orchestrator: TranslationOrchestrator, transport: FakeTransport) -> None:
    """Test an undecodable error body falls back to the HTTP status and a generic message."""
    transport.push(502, "<html>Bad Gateway</html>")

    with pytest.raises(ApiError) as excinfo:
        orchestrator.translate("Hello", "ja")

    assert excinfo.value.status == 502
    assert excinfo.value.raw_message == "An API error occurred."
    assert excinfo.value.user_message == "An API error occurred."


@pytest.mark.parametrize(
    "body",
    [
        "not json",
        '{"data": {}}',
        '{"data": {"translations": []}}',
        '{"data": {"translations": [{"detectedSourceLanguage": "en"}]}}',
    ],
)
def test_invalid_success_payload(
    orchestrator: TranslationOrchestrator, transport: FakeTransport, cache: SpyCache, body: str
) -> None:
    """Test malformed 200 responses fail closed."""
    transport.push(200, body)

    with pytest.raises(InvalidResponseError):
        orchestrator.translate("Hello", "ja")

    assert cache.sets == []


def test_japanese_messages(settings: TranslatorSettings, cache: SpyCache, transport: FakeTransport) -> None:
    """Test the ja catalog is used when configured."""
    orchestrator = TranslationOrchestrator(replace(settings, message_locale="ja"), cache=cache, transport=transport)
    transport.push(503, error_body(503, "Service Unavailable"))

    with pytest.raises(ApiError) as excinfo:
        orchestrator.translate("Hello", "ja")

    assert excinfo.value.message == "Google APIが一時的に利用できません。"


@pytest.mark.parametrize(
    "stale",
    [
        {"translatedText": "old layout"},
        {"translated_text": "x", "detected_language": "en", "original_text": "Hello", "char_count": "many"},
        "just a string",
    ],
)
def test_undecodable_cache_entry_is_a_miss(
    orchestrator: TranslationOrchestrator, transport: FakeTransport, cache: SpyCache, stale: object
) -> None:
    """Test a cached value of the wrong shape is refetched and overwritten."""
    key = make_cache_key("Hello", "ja", "")
    cache.set(key, stale, 60)

    result = orchestrator.translate("Hello", "ja")

    assert result.translated_text == "HELLO"
    assert len(transport.calls) == 1
    assert cache.get(key) == result.to_dict()


def test_transport_failure_uses_locale(settings: TranslatorSettings, cache: SpyCache, transport: FakeTransport) -> None:
    """Test network failures are reported in the configured locale with the raw detail kept."""
    orchestrator = TranslationOrchestrator(replace(settings, message_locale="ja"), cache=cache, transport=transport)
    transport.push_failure("Name or service not known")

    with pytest.raises(TransportError) as excinfo:
        orchestrator.translate("Hello", "ja")

    assert excinfo.value.message == "翻訳サービスに接続できませんでした。接続を確認して再試行してください。"
    assert excinfo.value.raw_message == "Name or service not known"

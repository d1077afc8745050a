from __future__ import annotations

import pytest

from config import TranslatorSettings
from translator.orchestrator import TranslationOrchestrator

from tests.fakes import FakeTransport, SpyCache


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def cache() -> SpyCache:
    return SpyCache()


@pytest.fixture
def settings() -> TranslatorSettings:
    return TranslatorSettings(
        api_key="test-key",
        api_endpoint="https://translation.example/v2",
        caching_enabled=True,
        message_locale="en",
    )


@pytest.fixture
def orchestrator(settings: TranslatorSettings, cache: SpyCache, transport: FakeTransport) -> TranslationOrchestrator:
    return TranslationOrchestrator(settings, cache=cache, transport=transport)

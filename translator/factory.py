"""
Builders wiring settings, cache, transport and usage tracking together.
"""
from __future__ import annotations

from typing import Optional

from config import SETTINGS, AppSettings
from utils.cache import CacheStore, FileCache, MemoryCache
from utils.usage import UsageTracker

from .base import BaseTransport
from .handler import TranslationRequestHandler
from .orchestrator import TranslationOrchestrator
from .transport import RequestsTransport


def build_cache(settings: AppSettings, *, persistent: bool = True) -> CacheStore:
    if persistent:
        return FileCache(settings.cache_path)
    return MemoryCache()


def build_orchestrator(
    settings: Optional[AppSettings] = None,
    *,
    cache: Optional[CacheStore] = None,
    transport: Optional[BaseTransport] = None,
    proxy: Optional[str] = None,
) -> TranslationOrchestrator:
    """Build an orchestrator, defaulting to the file cache and ``requests``."""
    settings = settings or SETTINGS
    return TranslationOrchestrator(
        settings.translator,
        cache=cache if cache is not None else build_cache(settings),
        transport=transport if transport is not None else RequestsTransport(proxy=proxy),
    )


def build_usage_tracker(settings: Optional[AppSettings] = None) -> UsageTracker:
    settings = settings or SETTINGS
    return UsageTracker(
        settings.usage.storage_path,
        monthly_char_limit=settings.usage.monthly_char_limit,
        alert_80=settings.usage.alert_80,
        alert_95=settings.usage.alert_95,
    )


def build_request_handler(
    settings: Optional[AppSettings] = None,
    *,
    orchestrator: Optional[TranslationOrchestrator] = None,
    usage_tracker: Optional[UsageTracker] = None,
) -> TranslationRequestHandler:
    settings = settings or SETTINGS
    return TranslationRequestHandler(
        orchestrator or build_orchestrator(settings),
        usage_tracker or build_usage_tracker(settings),
        locale=settings.translator.message_locale,
    )

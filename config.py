from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List
import os


BASE_DIR = Path(__file__).resolve().parent
DEFAULT_CACHE_PATH = BASE_DIR / "storage" / "translation_cache.json"
DEFAULT_USAGE_PATH = BASE_DIR / "storage" / "usage.json"
DEFAULT_API_ENDPOINT = "https://translation.googleapis.com/language/translate/v2"
WEEK_IN_SECONDS = 7 * 24 * 60 * 60


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_list(name: str, default: str) -> List[str]:
    raw = os.getenv(name, default)
    return [item.strip() for item in raw.split(",") if item.strip()]


@dataclass(slots=True, frozen=True)
class TranslatorSettings:
    api_key: str = field(default_factory=lambda: os.getenv("GOOGLE_TRANSLATE_API_KEY", ""))
    api_endpoint: str = field(default_factory=lambda: os.getenv("TRANSLATOR_API_ENDPOINT", DEFAULT_API_ENDPOINT))
    caching_enabled: bool = field(default_factory=lambda: _env_flag("TRANSLATOR_CACHE_ENABLED", True))
    message_locale: str = field(default_factory=lambda: os.getenv("TRANSLATOR_MESSAGE_LOCALE", "en"))
    max_chars_per_request: int = 5000
    request_timeout: float = 30.0
    cache_ttl: int = WEEK_IN_SECONDS


@dataclass(slots=True)
class UsageSettings:
    storage_path: Path = field(default_factory=lambda: Path(os.getenv("TRANSLATOR_USAGE_PATH", DEFAULT_USAGE_PATH)))
    monthly_char_limit: int = 500_000
    alert_80: bool = True
    alert_95: bool = True


@dataclass(slots=True)
class AppSettings:
    translator: TranslatorSettings = field(default_factory=TranslatorSettings)
    usage: UsageSettings = field(default_factory=UsageSettings)
    cache_path: Path = field(default_factory=lambda: Path(os.getenv("TRANSLATOR_CACHE_PATH", DEFAULT_CACHE_PATH)))
    default_target_lang: str = field(default_factory=lambda: os.getenv("TRANSLATOR_DEFAULT_LANG", "ja"))
    enabled_langs: List[str] = field(
        default_factory=lambda: _env_list("TRANSLATOR_ENABLED_LANGS", "en,ja,zh-CN,ko,es,fr,de")
    )


SETTINGS = AppSettings()

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Tuple


@dataclass(slots=True, frozen=True)
class LanguageDescriptor:
    code: str
    name: str
    native_name: str
    flag: str


DEFAULT_LANGUAGES: Tuple[LanguageDescriptor, ...] = (
    LanguageDescriptor("af", "Afrikaans", "Afrikaans", "🇿🇦"),
    LanguageDescriptor("ar", "Arabic", "العربية", "🇸🇦"),
    LanguageDescriptor("bn", "Bengali", "বাংলা", "🇧🇩"),
    LanguageDescriptor("de", "German", "Deutsch", "🇩🇪"),
    LanguageDescriptor("en", "English", "English", "🇺🇸"),
    LanguageDescriptor("es", "Spanish", "Español", "🇪🇸"),
    LanguageDescriptor("fr", "French", "Français", "🇫🇷"),
    LanguageDescriptor("hi", "Hindi", "हिन्दी", "🇮🇳"),
    LanguageDescriptor("id", "Indonesian", "Bahasa Indonesia", "🇮🇩"),
    LanguageDescriptor("it", "Italian", "Italiano", "🇮🇹"),
    LanguageDescriptor("ja", "Japanese", "日本語", "🇯🇵"),
    LanguageDescriptor("ko", "Korean", "한국어", "🇰🇷"),
    LanguageDescriptor("nl", "Dutch", "Nederlands", "🇳🇱"),
    LanguageDescriptor("pl", "Polish", "Polski", "🇵🇱"),
    LanguageDescriptor("pt", "Portuguese", "Português", "🇵🇹"),
    LanguageDescriptor("ru", "Russian", "Русский", "🇷🇺"),
    LanguageDescriptor("th", "Thai", "ไทย", "🇹🇭"),
    LanguageDescriptor("tr", "Turkish", "Türkçe", "🇹🇷"),
    LanguageDescriptor("vi", "Vietnamese", "Tiếng Việt", "🇻🇳"),
    LanguageDescriptor("zh-CN", "Chinese (Simplified)", "简体中文", "🇨🇳"),
    LanguageDescriptor("zh-TW", "Chinese (Traditional)", "繁體中文", "🇹🇼"),
)

_BY_CODE: Dict[str, LanguageDescriptor] = {lang.code: lang for lang in DEFAULT_LANGUAGES}


def get_default_languages() -> List[LanguageDescriptor]:
    """Languages offered by the widget, with display and native names and flags."""
    return list(DEFAULT_LANGUAGES)


def filter_languages(codes: Iterable[str]) -> List[LanguageDescriptor]:
    return [_BY_CODE[code] for code in codes if code in _BY_CODE]

"""User-facing message catalogs.

Keys are either a symbolic name or an API error status code. ``en`` is the
fallback locale for anything a catalog does not define.
"""
from __future__ import annotations

from typing import Dict, Union

MessageKey = Union[str, int]

DEFAULT_LOCALE = "en"

CATALOGS: Dict[str, Dict[MessageKey, str]] = {
    "en": {
        "no_api_key": "The Google Translation API key is not configured. Set it in the settings.",
        "invalid_response": "The API returned an invalid response.",
        "transport_failure": "Could not reach the translation service. Check the connection and try again.",
        "generic_api_error": "An API error occurred.",
        "empty_text": "The text to translate is empty.",
        400: "The request is invalid. Check the parameters.",
        401: "The API key is invalid. Set a valid API key in the settings.",
        403: "Access to the API was denied. Check the permissions of the API key.",
        429: "The request limit was exceeded. Wait a while and try again.",
        500: "A Google API server error occurred.",
        503: "The Google API is temporarily unavailable.",
    },
    "ja": {
        "no_api_key": "Google Translation APIキーが設定されていません。管理画面から設定してください。",
        "invalid_response": "APIから無効な応答が返されました",
        "transport_failure": "翻訳サービスに接続できませんでした。接続を確認して再試行してください。",
        "generic_api_error": "APIエラーが発生しました",
        "empty_text": "翻訳するテキストが空です",
        400: "リクエストが無効です。パラメータを確認してください。",
        401: "APIキーが無効です。管理画面で正しいAPIキーを設定してください。",
        403: "APIへのアクセスが拒否されました。APIキーの権限を確認してください。",
        429: "リクエスト制限を超えました。しばらく待ってから再試行してください。",
        500: "Google APIサーバーエラーが発生しました。",
        503: "Google APIが一時的に利用できません。",
    },
}

API_ERROR_CODES = frozenset(key for key in CATALOGS[DEFAULT_LOCALE] if isinstance(key, int))


def get_message(key: MessageKey, locale: str = DEFAULT_LOCALE) -> str | None:
    catalog = CATALOGS.get(locale, {})
    if key in catalog:
        return catalog[key]
    return CATALOGS[DEFAULT_LOCALE].get(key)

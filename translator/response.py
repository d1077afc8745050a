"""Strict decoding of Cloud Translation v2 response bodies."""
from __future__ import annotations

import json
from dataclasses import dataclass
from typing import List, Optional


@dataclass(slots=True, frozen=True)
class Translation:
    translated_text: str
    detected_source_language: Optional[str] = None


@dataclass(slots=True, frozen=True)
class TranslationPayload:
    translations: List[Translation]


@dataclass(slots=True, frozen=True)
class ErrorPayload:
    code: int
    message: str


class MalformedResponse(ValueError):
    pass


def _load_json(body: str) -> object:
    try:
        return json.loads(body)
    except (TypeError, ValueError) as exc:
        raise MalformedResponse(f"Response body is not JSON: {exc}") from exc


def decode_success(body: str) -> TranslationPayload:
    data = _load_json(body)
    if not isinstance(data, dict) or not isinstance(data.get("data"), dict):
        raise MalformedResponse("Missing 'data' object")
    items = data["data"].get("translations")
    if not isinstance(items, list) or not items:
        raise MalformedResponse("Missing 'data.translations' list")

    translations: List[Translation] = []
    for item in items:
        if not isinstance(item, dict) or not isinstance(item.get("translatedText"), str):
            raise MalformedResponse("Translation entry without 'translatedText'")
        detected = item.get("detectedSourceLanguage")
        if detected is not None and not isinstance(detected, str):
            raise MalformedResponse("'detectedSourceLanguage' is not a string")
        translations.append(Translation(item["translatedText"], detected or None))
    return TranslationPayload(translations)


def decode_error(body: str, *, status: int, default_message: str) -> ErrorPayload:
    """Decode an error body, falling back to ``status``/``default_message``.

    Error bodies come from proxies and load balancers as often as from the API
    itself, so an undecodable body still yields an ``ErrorPayload``.
    """
    try:
        data = _load_json(body)
    except MalformedResponse:
        return ErrorPayload(status, default_message)

    error = data.get("error") if isinstance(data, dict) else None
    if not isinstance(error, dict):
        return ErrorPayload(status, default_message)

    code = error.get("code")
    if isinstance(code, bool) or not isinstance(code, int):
        code = status
    message = error.get("message")
    if not isinstance(message, str) or not message:
        message = default_message
    return ErrorPayload(code, message)

from __future__ import annotations

from .messages import API_ERROR_CODES, DEFAULT_LOCALE, get_message


class TranslationError(Exception):
    """Base class for every failure reported by the translation pipeline."""

    code: str = "translation_error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NoApiKeyError(TranslationError):
    code = "no_api_key"

    def __init__(self, locale: str = DEFAULT_LOCALE) -> None:
        super().__init__(get_message("no_api_key", locale) or "")


class InvalidResponseError(TranslationError):
    code = "invalid_response"

    def __init__(self, locale: str = DEFAULT_LOCALE) -> None:
        super().__init__(get_message("invalid_response", locale) or "")


class TransportError(TranslationError):
    code = "transport_failure"

    def __init__(self, detail: str, locale: str = DEFAULT_LOCALE) -> None:
        super().__init__(get_message("transport_failure", locale) or detail)
        self.raw_message = detail


class ApiError(TranslationError):
    def __init__(self, status: int, user_message: str, raw_message: str) -> None:
        super().__init__(user_message)
        self.status = status
        self.user_message = user_message
        self.raw_message = raw_message
        self.code = f"api_error_{status}"

    def __repr__(self) -> str:
        return f"ApiError(status={self.status!r}, raw_message={self.raw_message!r})"


def normalize_api_error(status: int, raw_message: str, *, locale: str = DEFAULT_LOCALE) -> ApiError:
    """Map a provider error onto a stable user-facing message.

    Known status codes get a fixed message regardless of what the provider
    said; anything else passes the raw provider message through.
    """
    if status in API_ERROR_CODES:
        user_message = get_message(status, locale) or raw_message
    else:
        user_message = raw_message
    return ApiError(status, user_message, raw_message)

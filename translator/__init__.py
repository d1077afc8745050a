"""
Google Cloud Translation pipeline

- Orchestrator: API key check, cache, long-text chunking, upstream call
- Typed errors with localized user-facing messages
- Request handler for form payloads, with usage tracking
"""
from .base import BaseTransport, TranslationRequest, TranslationResult, TransportResponse
from .errors import (
    ApiError,
    InvalidResponseError,
    NoApiKeyError,
    TranslationError,
    TransportError,
    normalize_api_error,
)
from .factory import build_orchestrator, build_request_handler, build_usage_tracker
from .google import GoogleCloudTranslator
from .handler import TranslationRequestHandler
from .languages import LanguageDescriptor, filter_languages, get_default_languages
from .orchestrator import TranslationOrchestrator
from .transport import RequestsTransport

__all__ = [
    "ApiError",
    "BaseTransport",
    "GoogleCloudTranslator",
    "InvalidResponseError",
    "LanguageDescriptor",
    "NoApiKeyError",
    "RequestsTransport",
    "TranslationError",
    "TranslationOrchestrator",
    "TranslationRequest",
    "TranslationRequestHandler",
    "TranslationResult",
    "TransportError",
    "TransportResponse",
    "build_orchestrator",
    "build_request_handler",
    "build_usage_tracker",
    "filter_languages",
    "get_default_languages",
    "normalize_api_error",
]

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import asdict, dataclass
from typing import Any, Dict, Mapping


@dataclass(slots=True, frozen=True)
class TranslationRequest:
    text: str
    target_lang: str
    source_lang: str = ""


@dataclass(slots=True, frozen=True)
class TranslationResult:
    translated_text: str
    detected_language: str
    original_text: str
    char_count: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TranslationResult":
        return cls(
            translated_text=data["translated_text"],
            detected_language=data["detected_language"],
            original_text=data["original_text"],
            char_count=int(data["char_count"]),
        )


@dataclass(slots=True, frozen=True)
class TransportResponse:
    status_code: int
    body: str


class BaseTransport(ABC):
    @abstractmethod
    def post(self, url: str, fields: Mapping[str, str], timeout: float) -> TransportResponse:
        """POST url-encoded ``fields`` and return the raw response.

        Network-level failures must be raised as ``TransportError``.
        """

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Dict, List
import json
import threading

from loguru import logger

ALERT_THRESHOLDS = (0.8, 0.95)


@dataclass(slots=True)
class UsageRecord:
    day: str
    source_lang: str
    target_lang: str
    char_count: int = 0
    api_calls: int = 0


class UsageTracker:
    """Per-day character and call counts, persisted as JSON.

    Records are aggregated per (day, source, target). The monthly total is
    compared against the provider's free tier to raise alerts.
    """

    def __init__(
        self,
        path: Path,
        *,
        monthly_char_limit: int = 500_000,
        alert_80: bool = True,
        alert_95: bool = True,
    ) -> None:
        self.path = path
        self.monthly_char_limit = monthly_char_limit
        self.thresholds = [
            threshold
            for threshold, enabled in zip(ALERT_THRESHOLDS, (alert_80, alert_95))
            if enabled
        ]
        self._lock = threading.Lock()
        self._records: Dict[str, UsageRecord] = {}
        self._load()

    @staticmethod
    def _record_key(day: str, source: str, target: str) -> str:
        return f"{day}::{source}::{target}"

    def _load(self) -> None:
        if not self.path.exists():
            return
        try:
            with self.path.open("r", encoding="utf-8") as handle:
                raw = json.load(handle)
        except json.JSONDecodeError:
            logger.warning("Usage file {} is corrupt, starting empty", self.path)
            return
        for item in raw if isinstance(raw, list) else []:
            try:
                record = UsageRecord(
                    day=str(item["day"]),
                    source_lang=str(item["source_lang"]),
                    target_lang=str(item["target_lang"]),
                    char_count=int(item.get("char_count", 0)),
                    api_calls=int(item.get("api_calls", 0)),
                )
            except (AttributeError, KeyError, TypeError, ValueError):
                logger.warning("Skipping unreadable usage record in {}: {!r}", self.path, item)
                continue
            self._records[self._record_key(record.day, record.source_lang, record.target_lang)] = record

    def _flush(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = [
            {
                "day": r.day,
                "source_lang": r.source_lang,
                "target_lang": r.target_lang,
                "char_count": r.char_count,
                "api_calls": r.api_calls,
            }
            for r in self._records.values()
        ]
        with self.path.open("w", encoding="utf-8") as handle:
            json.dump(payload, handle, ensure_ascii=False, indent=2)

    def track_usage(
        self,
        char_count: int,
        source_lang: str,
        target_lang: str,
        *,
        day: date | None = None,
    ) -> List[float]:
        """Record one translation and return the alert thresholds it crossed."""
        day = day or date.today()
        with self._lock:
            before = self._monthly_total_locked(day.year, day.month)
            key = self._record_key(day.isoformat(), source_lang, target_lang)
            record = self._records.get(key)
            if record is None:
                record = UsageRecord(day.isoformat(), source_lang, target_lang)
                self._records[key] = record
            record.char_count += char_count
            record.api_calls += 1
            after = before + char_count
            self._flush()

        crossed = [
            threshold
            for threshold in self.thresholds
            if before < threshold * self.monthly_char_limit <= after
        ]
        for threshold in crossed:
            logger.warning(
                "Monthly translation usage passed {:.0%}: {} of {} characters",
                threshold,
                after,
                self.monthly_char_limit,
            )
        return crossed

    def _monthly_total_locked(self, year: int, month: int) -> int:
        prefix = f"{year:04d}-{month:02d}-"
        return sum(r.char_count for r in self._records.values() if r.day.startswith(prefix))

    def monthly_total(self, year: int, month: int) -> int:
        with self._lock:
            return self._monthly_total_locked(year, month)

    def monthly_calls(self, year: int, month: int) -> int:
        prefix = f"{year:04d}-{month:02d}-"
        with self._lock:
            return sum(r.api_calls for r in self._records.values() if r.day.startswith(prefix))

    def usage_ratio(self, year: int, month: int) -> float:
        if self.monthly_char_limit <= 0:
            return 0.0
        return self.monthly_total(year, month) / self.monthly_char_limit

    def crossed_alerts(self, year: int, month: int) -> List[float]:
        ratio = self.usage_ratio(year, month)
        return [threshold for threshold in self.thresholds if ratio >= threshold]

    def records(self) -> List[UsageRecord]:
        with self._lock:
            return sorted(self._records.values(), key=lambda r: (r.day, r.source_lang, r.target_lang))

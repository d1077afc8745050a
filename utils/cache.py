from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Callable, Dict, Tuple
import hashlib
import json
import threading
import time

from loguru import logger

Clock = Callable[[], float]

CACHE_KEY_PREFIX = "gct_"


def make_cache_key(text: str, target: str, source: str) -> str:
    digest = hashlib.md5("\x1f".join((text, target, source)).encode("utf-8")).hexdigest()
    return f"{CACHE_KEY_PREFIX}{digest}"


class CacheStore(ABC):
    @abstractmethod
    def get(self, key: str) -> Any | None:
        """Return the live value stored under ``key`` or ``None``."""

    @abstractmethod
    def set(self, key: str, value: Any, ttl: int) -> None:
        """Store ``value`` under ``key`` for ``ttl`` seconds."""


class MemoryCache(CacheStore):
    def __init__(self, *, clock: Clock = time.time) -> None:
        self._clock = clock
        self._lock = threading.Lock()
        self._store: Dict[str, Tuple[float, Any]] = {}

    def _purge_locked(self) -> None:
        now = self._clock()
        self._store = {key: entry for key, entry in self._store.items() if entry[0] > now}

    def get(self, key: str) -> Any | None:
        with self._lock:
            entry = self._store.get(key)
            if entry is None:
                return None
            expires_at, value = entry
            if expires_at <= self._clock():
                del self._store[key]
                return None
            return value

    def set(self, key: str, value: Any, ttl: int) -> None:
        with self._lock:
            self._purge_locked()
            self._store[key] = (self._clock() + ttl, value)

    def clear(self) -> None:
        with self._lock:
            self._store.clear()

    def __contains__(self, key: str) -> bool:
        return self.get(key) is not None

    def __len__(self) -> int:
        with self._lock:
            self._purge_locked()
            return len(self._store)


def _is_live(entry: Any, now: float) -> bool:
    if not isinstance(entry, dict):
        return False
    try:
        return float(entry.get("expires_at", 0)) > now
    except (TypeError, ValueError):
        return False


class FileCache(CacheStore):
    """JSON file store with absolute expiry timestamps.

    Expired entries are dropped on load and before every write, so the file
    only ever holds live translations.
    """

    def __init__(self, path: Path, *, clock: Clock = time.time) -> None:
        self.path = path
        self._clock = clock
        self._lock = threading.Lock()
        self._data: Dict[str, Dict[str, Any]] = {}
        self._dirty = False
        self._load()

    def _load(self) -> None:
        if not self.path.exists():
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text("{}", encoding="utf-8")
        try:
            with self.path.open("r", encoding="utf-8") as handle:
                data = json.load(handle)
        except json.JSONDecodeError:
            logger.warning("Cache file {} is corrupt, starting empty", self.path)
            data = {}
        self._data = data if isinstance(data, dict) else {}
        self._purge_locked()

    def _purge_locked(self) -> int:
        now = self._clock()
        live = {key: entry for key, entry in self._data.items() if _is_live(entry, now)}
        removed = len(self._data) - len(live)
        if removed:
            self._data = live
            self._dirty = True
        return removed

    def get(self, key: str) -> Any | None:
        with self._lock:
            entry = self._data.get(key)
            if entry is None:
                return None
            if not _is_live(entry, self._clock()):
                del self._data[key]
                self._dirty = True
                return None
            return entry.get("value")

    def set(self, key: str, value: Any, ttl: int) -> None:
        with self._lock:
            self._data[key] = {"expires_at": self._clock() + ttl, "value": value}
            self._dirty = True
        self.flush()

    def clear(self) -> int:
        with self._lock:
            removed = len(self._data)
            self._data = {}
            self._dirty = True
        self.flush()
        return removed

    def flush(self) -> None:
        with self._lock:
            self._purge_locked()
            if not self._dirty:
                return
            with self.path.open("w", encoding="utf-8") as handle:
                json.dump(self._data, handle, ensure_ascii=False, indent=2)
            self._dirty = False

    def __len__(self) -> int:
        with self._lock:
            self._purge_locked()
            return len(self._data)
